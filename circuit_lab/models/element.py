"""
ElementData - Pure Python data model for placed circuit elements.

This module contains no Qt dependencies. All positions are represented as
tuples (x, y) rather than QPointF.

Element kinds use display names as canonical identifiers:
'Battery', 'LED', 'Resistor', 'Switch'
"""

from dataclasses import dataclass
from typing import Optional, Union

from .geometry import Point, next_rotation, terminals, validate_rotation

# Element kinds offered by the palette, in palette order
ELEMENT_KINDS = [
    "Battery",
    "LED",
    "Resistor",
    "Switch",
]

# Palette labels per kind
DISPLAY_NAMES = {
    "Battery": "9V Battery",
    "LED": "LED (red)",
    "Resistor": "Resistor",
    "Switch": "Switch",
}

# Short text drawn next to the symbol (empty for none)
ELEMENT_LABELS = {
    "Battery": "9V",
    "LED": "",
    "Resistor": "",
    "Switch": "",
}

# Distance from element centre to each terminal, per kind.
# One grid unit keeps rotated terminals on grid points.
DEFAULT_TERMINAL_OFFSET = 40
TERMINAL_OFFSETS = {kind: DEFAULT_TERMINAL_OFFSET for kind in ELEMENT_KINDS}

# Kinds that drive current around a loop
SOURCE_KINDS = frozenset({"Battery"})


@dataclass
class BatteryProperties:
    """A battery carries no mutable state."""


@dataclass
class LEDProperties:
    """An LED carries no mutable state; it lights when energized."""


@dataclass
class ResistorProperties:
    """A resistor carries no mutable state."""


@dataclass
class SwitchProperties:
    """A switch is open (disconnected) until the user closes it."""

    is_open: bool = True


ElementProperties = Union[BatteryProperties, LEDProperties, ResistorProperties, SwitchProperties]

_PROPERTY_TYPES = {
    "Battery": BatteryProperties,
    "LED": LEDProperties,
    "Resistor": ResistorProperties,
    "Switch": SwitchProperties,
}


def default_properties(kind: str) -> ElementProperties:
    """Return a fresh default property set for *kind*."""
    try:
        return _PROPERTY_TYPES[kind]()
    except KeyError:
        raise ValueError(f"Unknown element kind: {kind!r}") from None


@dataclass
class ElementData:
    """
    Pure Python data class representing a placed element.

    Every element has exactly two terminals. Terminal coordinates are
    derived from position and rotation, never stored.
    """

    element_id: str
    kind: str
    position: Point  # (x, y) in canvas coordinates
    rotation: int = 0  # degrees: 0, 90, 180, 270
    properties: Optional[ElementProperties] = None

    def __post_init__(self):
        if self.kind not in _PROPERTY_TYPES:
            raise ValueError(f"Unknown element kind: {self.kind!r}")
        validate_rotation(self.rotation)
        if self.properties is None:
            self.properties = default_properties(self.kind)
        elif not isinstance(self.properties, _PROPERTY_TYPES[self.kind]):
            raise ValueError(
                f"{type(self.properties).__name__} is not valid for a {self.kind} element"
            )

    @property
    def is_source(self) -> bool:
        return self.kind in SOURCE_KINDS

    @property
    def is_switch(self) -> bool:
        return isinstance(self.properties, SwitchProperties)

    @property
    def is_open(self) -> bool:
        """True only for a switch that is currently open."""
        return self.is_switch and self.properties.is_open

    def set_rotation(self, rotation: int) -> None:
        self.rotation = validate_rotation(rotation)

    def rotate(self) -> int:
        """Rotate by +90 degrees (wrapping at 360) and return the new rotation."""
        self.rotation = next_rotation(self.rotation)
        return self.rotation

    def toggle(self) -> bool:
        """Flip a switch's open state and return the new value.

        Raises:
            ValueError: If this element is not a switch.
        """
        if not self.is_switch:
            raise ValueError(f"{self.element_id} ({self.kind}) is not a switch")
        self.properties.is_open = not self.properties.is_open
        return self.properties.is_open

    def get_terminal_offset(self, offsets: dict[str, float] | None = None) -> float:
        return (offsets or TERMINAL_OFFSETS).get(self.kind, DEFAULT_TERMINAL_OFFSET)

    def get_terminal_positions(self, offsets: dict[str, float] | None = None) -> tuple[Point, Point]:
        """
        Return (terminal_a, terminal_b) in canvas coordinates.

        For a battery terminal A is the negative pole and terminal B the
        positive pole, whatever the rotation.
        """
        return terminals(self.position, self.rotation, self.get_terminal_offset(offsets))

    def negative_terminal(self, offsets: dict[str, float] | None = None) -> Point:
        return self.get_terminal_positions(offsets)[0]

    def positive_terminal(self, offsets: dict[str, float] | None = None) -> Point:
        return self.get_terminal_positions(offsets)[1]

    def __repr__(self) -> str:
        return (
            f"ElementData(id={self.element_id!r}, kind={self.kind!r}, "
            f"pos={self.position}, rot={self.rotation}, props={self.properties!r})"
        )
