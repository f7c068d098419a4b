"""
theme.py - Theme base class.

A theme is a set of lookup tables: hex colors by key, and pen, brush and
font specs that refer to those colors by key. Qt objects are built on
demand from the specs.
"""

from dataclasses import dataclass
from typing import Dict

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen

from .constants import ELEMENTS

MISSING_COLOR = "#FF00FF"


@dataclass(frozen=True)
class PenSpec:
    color: str
    width: float = 1.0
    alpha: int = 255
    dashed: bool = False
    cosmetic: bool = False


@dataclass(frozen=True)
class BrushSpec:
    color: str
    alpha: int = 255


@dataclass(frozen=True)
class FontSpec:
    size: int
    bold: bool = False


class BaseTheme:
    """Builds QPen/QBrush/QFont objects from the subclass's tables."""

    name = "Base Theme"
    colors: Dict[str, str] = {}
    pens: Dict[str, PenSpec] = {}
    brushes: Dict[str, BrushSpec] = {}
    fonts: Dict[str, FontSpec] = {}

    def color(self, key: str, alpha: int = 255) -> QColor:
        """QColor for *key*; unknown keys render magenta so they show up."""
        qc = QColor(self.colors.get(key, MISSING_COLOR))
        qc.setAlpha(alpha)
        return qc

    def pen(self, key: str) -> QPen:
        spec = self.pens.get(key, PenSpec("text_primary"))
        pen = QPen(self.color(spec.color, spec.alpha), spec.width)
        pen.setCosmetic(spec.cosmetic)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        if spec.dashed:
            pen.setStyle(Qt.PenStyle.DashLine)
        return pen

    def brush(self, key: str) -> QBrush:
        spec = self.brushes.get(key, BrushSpec("background_primary"))
        return QBrush(self.color(spec.color, spec.alpha))

    def font(self, key: str) -> QFont:
        spec = self.fonts.get(key)
        font = QFont()
        if spec is not None:
            font.setPointSize(spec.size)
            font.setBold(spec.bold)
        return font

    def stylesheet(self, key: str) -> str:
        """Widget stylesheet for *key*, or an empty string."""
        return ""

    def get_element_color(self, kind: str) -> QColor:
        """Accent color used for an element kind in the palette."""
        return self.color(ELEMENTS.get(kind, {}).get("color_key", "text_primary"))
