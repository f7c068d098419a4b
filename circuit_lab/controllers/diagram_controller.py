"""
DiagramController - Orchestrates element and wire CRUD operations.

This module contains no Qt dependencies. It manages the DiagramModel
and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from models.diagram import ITEM_ELEMENT, DiagramModel
from models.element import ELEMENT_KINDS, ElementData
from models.geometry import Point, l_route
from models.wire import WireData

logger = logging.getLogger(__name__)

# Events that change what the graph builder would see
MUTATION_EVENTS = frozenset({
    'element_added',
    'element_removed',
    'element_moved',
    'element_rotated',
    'switch_toggled',
    'wire_added',
    'wire_removed',
    'diagram_cleared',
})


class DiagramController:
    """
    Controller for diagram element and wire operations.

    Manages the DiagramModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        element_added (ElementData) - A new element was placed
        element_removed (str) - An element was removed (by ID)
        element_moved (ElementData) - An element was moved
        element_rotated (ElementData) - An element was rotated
        switch_toggled (ElementData) - A switch was opened or closed
        wire_added (WireData) - A new wire segment was added
        wire_removed (str) - A wire was removed (by ID)
        diagram_cleared (None) - The entire diagram was cleared
    """

    def __init__(self, model: Optional[DiagramModel] = None):
        self.model = model if model is not None else DiagramModel()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in list(self._observers):
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Element operations ---

    def add_element(self, kind: str, position: Point) -> ElementData:
        """
        Create and place a new element with rotation 0 and default properties.

        Returns:
            The newly created ElementData.

        Raises:
            ValueError: If *kind* is not a known element kind.
        """
        if kind not in ELEMENT_KINDS:
            raise ValueError(f"Unknown element kind: {kind!r}")
        element = ElementData(
            element_id=self.model.next_element_id(),
            kind=kind,
            position=position,
        )
        self.model.add_element(element)
        logger.debug("Added %r", element)
        self._notify('element_added', element)
        return element

    def move_element(self, element_id: str, position: Point) -> None:
        """Move an element to a new position."""
        element = self.model.get_element(element_id)
        if element is None:
            return
        element.position = position
        self._notify('element_moved', element)

    def rotate_element(self, element_id: str) -> None:
        """Rotate an element 90 degrees, wrapping 270 back to 0."""
        element = self.model.get_element(element_id)
        if element is None:
            return
        element.rotate()
        self._notify('element_rotated', element)

    def toggle_switch(self, element_id: str) -> None:
        """Open a closed switch or close an open one. Other kinds are ignored."""
        element = self.model.get_element(element_id)
        if element is None or not element.is_switch:
            return
        is_open = element.toggle()
        logger.debug("Switch %s is now %s", element_id, "open" if is_open else "closed")
        self._notify('switch_toggled', element)

    # --- Wire operations ---

    def add_wire(self, start: Point, end: Point) -> WireData:
        """Add a single straight wire segment."""
        wire = WireData(wire_id=self.model.next_wire_id(), start=start, end=end)
        self.model.add_wire(wire)
        self._notify('wire_added', wire)
        return wire

    def add_wire_route(self, start: Point, end: Point) -> list[WireData]:
        """
        Connect *start* to *end* with an orthogonal L-route.

        Emits up to two segments (horizontal first, then vertical) and
        none at all when the two points coincide.

        Returns:
            The wires that were added.
        """
        wires = [self.add_wire(a, b) for a, b in l_route(start, end)]
        if wires:
            logger.debug("Routed %s -> %s as %d segment(s)", start, end, len(wires))
        return wires

    # --- Removal ---

    def remove_item(self, item_id: str) -> bool:
        """
        Remove an element or wire by id.

        Removing an element leaves attached wires in place. Unknown ids are
        a no-op.

        Returns:
            True if something was removed.
        """
        item_kind = self.model.remove_item(item_id)
        if item_kind is None:
            return False
        logger.debug("Removed %s %s", item_kind, item_id)
        self._notify('element_removed' if item_kind == ITEM_ELEMENT else 'wire_removed', item_id)
        return True

    # --- Diagram operations ---

    def clear_diagram(self) -> None:
        """Clear the entire diagram."""
        self.model.clear()
        self._notify('diagram_cleared', None)
