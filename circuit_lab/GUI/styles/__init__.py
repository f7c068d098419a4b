"""
Styles module - Centralized styling system for the Circuit Lab canvas.

Usage:
    from GUI.styles import DarkTheme, CANVAS_SIZE

    theme = DarkTheme()
    pen = theme.pen('wire_energized')
    brush = theme.brush('led_on')
    color = theme.get_element_color('Battery')
"""

from .constants import (CANVAS_SIZE, DEFAULT_WINDOW_SIZE, ELEMENTS,
                        PALETTE_WIDTH, SELECTION_BOX_HALF,
                        TERMINAL_DOT_RADIUS, WIRE_JOINT_RADIUS)
from .dark_theme import DarkTheme
from .theme import BaseTheme

__all__ = [
    "CANVAS_SIZE",
    "DEFAULT_WINDOW_SIZE",
    "ELEMENTS",
    "PALETTE_WIDTH",
    "SELECTION_BOX_HALF",
    "TERMINAL_DOT_RADIUS",
    "WIRE_JOINT_RADIUS",
    "BaseTheme",
    "DarkTheme",
]
