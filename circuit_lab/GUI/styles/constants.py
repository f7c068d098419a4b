"""
constants.py - Centralized constants for the canvas and main window.

Grid, hit-test and placement values live in models.settings.EditorSettings
so the Qt-free controllers can share them; this file only holds what the
Qt layer needs on top of that.
"""

from models.element import DISPLAY_NAMES, ELEMENT_KINDS

# Canvas settings
CANVAS_SIZE = (1600, 1000)     # Logical drawing surface in canvas units
TERMINAL_DOT_RADIUS = 5        # Terminal marker radius
WIRE_JOINT_RADIUS = 3          # Dot drawn at each wire end
SELECTION_BOX_HALF = 70        # Half side of the dashed selection square

# Window layout
DEFAULT_WINDOW_SIZE = (1280, 820)
PALETTE_WIDTH = 200

# GUI-specific theme color keys per element kind
_COLOR_KEYS = {
    'Battery': 'element_battery',
    'LED': 'element_led',
    'Resistor': 'element_resistor',
    'Switch': 'element_switch',
}

# Element definitions - names sourced from models, plus GUI color keys
ELEMENTS = {
    kind: {
        'label': DISPLAY_NAMES[kind],
        'color_key': _COLOR_KEYS.get(kind, 'text_primary'),
    }
    for kind in ELEMENT_KINDS
}
