"""
Pure Python data models for Circuit Lab.

This package contains Qt-free data classes that represent diagram elements.
All models use only Python standard library types (no PyQt6 dependencies).
"""

from .diagram import ITEM_ELEMENT, ITEM_WIRE, DiagramModel
from .element import (
    DISPLAY_NAMES,
    ELEMENT_KINDS,
    ELEMENT_LABELS,
    TERMINAL_OFFSETS,
    BatteryProperties,
    ElementData,
    LEDProperties,
    ResistorProperties,
    SwitchProperties,
    default_properties,
)
from .settings import EditorSettings
from .wire import WireData

__all__ = [
    "DiagramModel",
    "ElementData",
    "WireData",
    "EditorSettings",
    "ELEMENT_KINDS",
    "DISPLAY_NAMES",
    "ELEMENT_LABELS",
    "TERMINAL_OFFSETS",
    "BatteryProperties",
    "LEDProperties",
    "ResistorProperties",
    "SwitchProperties",
    "default_properties",
    "ITEM_ELEMENT",
    "ITEM_WIRE",
]
