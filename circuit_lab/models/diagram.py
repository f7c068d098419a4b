"""
DiagramModel - Central data store for diagram state.

This module contains no Qt dependencies. It holds all placed elements and
wires. Element order is significant: it is both the draw order and the
hit-test z-order (later elements sit on top).
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from .element import ElementData
from .wire import WireData

ELEMENT_ID_PREFIX = "el-"
WIRE_ID_PREFIX = "w-"

# Item kinds returned by find_item()
ITEM_ELEMENT = "element"
ITEM_WIRE = "wire"


@dataclass
class DiagramModel:
    """
    Central data store holding all diagram state.

    Element and wire ids share one namespace and are told apart by prefix.
    """

    elements: list[ElementData] = field(default_factory=list)
    wires: list[WireData] = field(default_factory=list)
    id_counter: int = 0

    # --- Id generation ---

    def _next_id(self, prefix: str) -> str:
        self.id_counter += 1
        return f"{prefix}{self.id_counter}"

    def next_element_id(self) -> str:
        return self._next_id(ELEMENT_ID_PREFIX)

    def next_wire_id(self) -> str:
        return self._next_id(WIRE_ID_PREFIX)

    # --- Element operations ---

    def add_element(self, element: ElementData) -> None:
        """Append an element on top of the existing ones."""
        if self.find_item(element.element_id) is not None:
            raise ValueError(f"Duplicate item id: {element.element_id!r}")
        self.elements.append(element)

    def get_element(self, element_id: str) -> Optional[ElementData]:
        for element in self.elements:
            if element.element_id == element_id:
                return element
        return None

    def sources(self) -> Iterator[ElementData]:
        """Yield every voltage source in placement order."""
        return (element for element in self.elements if element.is_source)

    # --- Wire operations ---

    def add_wire(self, wire: WireData) -> None:
        if self.find_item(wire.wire_id) is not None:
            raise ValueError(f"Duplicate item id: {wire.wire_id!r}")
        self.wires.append(wire)

    def get_wire(self, wire_id: str) -> Optional[WireData]:
        for wire in self.wires:
            if wire.wire_id == wire_id:
                return wire
        return None

    # --- Lookup / removal by id ---

    def find_item(self, item_id: str) -> Optional[tuple[str, Union[ElementData, WireData]]]:
        """
        Look up an element or wire by id.

        Returns:
            ("element", ElementData) or ("wire", WireData), or None if absent.
        """
        element = self.get_element(item_id)
        if element is not None:
            return ITEM_ELEMENT, element
        wire = self.get_wire(item_id)
        if wire is not None:
            return ITEM_WIRE, wire
        return None

    def remove_item(self, item_id: str) -> Optional[str]:
        """
        Remove the element or wire with *item_id*.

        Wires touching a removed element are left in place; they simply
        lose their electrical partner.

        Returns:
            The item kind that was removed, or None if nothing matched.
        """
        found = self.find_item(item_id)
        if found is None:
            return None
        item_kind, item = found
        if item_kind == ITEM_ELEMENT:
            self.elements.remove(item)
        else:
            self.wires.remove(item)
        return item_kind

    # --- Diagram operations ---

    @property
    def is_empty(self) -> bool:
        return not self.elements and not self.wires

    def clear(self) -> None:
        """Clear all diagram data. The id counter keeps counting."""
        self.elements.clear()
        self.wires.clear()
