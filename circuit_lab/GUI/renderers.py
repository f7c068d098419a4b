"""Strategy-pattern renderers for element symbols.

Each element kind has one renderer registered by kind name. The canvas
translates and rotates the painter to the element's local frame (centre
at the origin, terminals on the x axis at +/- ``offset``) and then
delegates to ``get_renderer(kind).draw``.
"""

from abc import ABC, abstractmethod

from PyQt6.QtCore import QLineF, QPointF, QRectF, Qt
from PyQt6.QtGui import QPen

# ---------------------------------------------------------------------------
# Abstract base & registry
# ---------------------------------------------------------------------------


class ElementRenderer(ABC):
    """Base class for all element renderers."""

    @abstractmethod
    def draw(self, painter, element, theme, offset: float) -> None:
        """Draw the symbol for *element* (an ``ElementVisual``) in local coordinates."""

    @staticmethod
    def draw_leads(painter, offset: float, inner: float) -> None:
        """Draw the two straight leads from each terminal to the symbol body."""
        painter.drawLine(QLineF(-offset, 0, -inner, 0))
        painter.drawLine(QLineF(inner, 0, offset, 0))


_registry: dict[str, ElementRenderer] = {}


def register(kind: str, renderer: ElementRenderer):
    """Register *renderer* for element *kind*."""
    _registry[kind] = renderer


def get_renderer(kind: str) -> ElementRenderer:
    """Look up the renderer for *kind*.

    Raises ``KeyError`` if no renderer is registered.
    """
    renderer = _registry.get(kind)
    if renderer is not None:
        return renderer
    raise KeyError(f"No renderer for {kind!r}")


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


class BatteryRenderer(ElementRenderer):
    """Long plate on the negative (A) side, short plate on the positive (B) side."""

    PLATE_X = 20
    LONG_HALF = 30
    SHORT_HALF = 16

    def draw(self, painter, element, theme, offset):
        painter.setPen(theme.pen("symbol"))
        self.draw_leads(painter, offset, self.PLATE_X)
        painter.setPen(theme.pen("symbol_plate"))
        painter.drawLine(QLineF(-self.PLATE_X, -self.LONG_HALF, -self.PLATE_X, self.LONG_HALF))
        painter.drawLine(QLineF(self.PLATE_X, -self.SHORT_HALF, self.PLATE_X, self.SHORT_HALF))

        if element.label:
            # Keep the label upright whatever the element's rotation
            painter.save()
            painter.rotate(-element.rotation)
            painter.setPen(QPen(theme.color("label_text")))
            painter.setFont(theme.font("element_label"))
            painter.drawText(QPointF(-12, -40), element.label)
            painter.restore()


class LEDRenderer(ElementRenderer):
    RADIUS = 20

    def draw(self, painter, element, theme, offset):
        painter.setPen(theme.pen("symbol"))
        self.draw_leads(painter, offset, self.RADIUS)
        if element.glowing:
            painter.save()
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(theme.brush("led_glow"))
            painter.drawEllipse(QPointF(0, 0), self.RADIUS * 1.8, self.RADIUS * 1.8)
            painter.restore()
        painter.setBrush(theme.brush("led_on" if element.glowing else "led_off"))
        painter.drawEllipse(QPointF(0, 0), self.RADIUS, self.RADIUS)


class ResistorRenderer(ElementRenderer):
    HALF_W = 30
    HALF_H = 12
    BAND_W = 8
    BANDS = ((-20, "resistor_band_1"), (-6, "resistor_band_2"), (8, "resistor_band_3"))

    def draw(self, painter, element, theme, offset):
        painter.setPen(theme.pen("symbol"))
        self.draw_leads(painter, offset, self.HALF_W)
        painter.setBrush(theme.brush("resistor_body"))
        painter.drawRect(QRectF(-self.HALF_W, -self.HALF_H, self.HALF_W * 2, self.HALF_H * 2))
        painter.setPen(Qt.PenStyle.NoPen)
        for x, brush_key in self.BANDS:
            painter.setBrush(theme.brush(brush_key))
            painter.drawRect(QRectF(x, -self.HALF_H, self.BAND_W, self.HALF_H * 2))


class SwitchRenderer(ElementRenderer):
    GAP = 30
    CONTACT_RADIUS = 4

    def draw(self, painter, element, theme, offset):
        painter.setPen(theme.pen("symbol"))
        self.draw_leads(painter, offset, self.GAP)
        painter.setBrush(theme.brush("symbol_fill"))
        painter.drawEllipse(QPointF(-self.GAP, 0), self.CONTACT_RADIUS, self.CONTACT_RADIUS)
        painter.drawEllipse(QPointF(self.GAP, 0), self.CONTACT_RADIUS, self.CONTACT_RADIUS)

        painter.setPen(theme.pen("switch_blade"))
        if element.is_open:
            painter.drawLine(QLineF(-self.GAP, 0, 24, -30))
        else:
            painter.drawLine(QLineF(-self.GAP, 0, self.GAP, 0))


register("Battery", BatteryRenderer())
register("LED", LEDRenderer())
register("Resistor", ResistorRenderer())
register("Switch", SwitchRenderer())
