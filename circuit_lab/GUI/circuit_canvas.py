"""Immediate-mode circuit canvas.

Paints the latest ``SceneSnapshot`` with QPainter and forwards Qt input
events to the ``EditorController`` as canvas-local points.
"""

import logging

from controllers.editor_controller import MODE_WIRE, EditorController
from controllers.render_controller import RenderController, SceneSnapshot
from PyQt6.QtCore import QLineF, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from .renderers import get_renderer
from .styles import (CANVAS_SIZE, SELECTION_BOX_HALF, TERMINAL_DOT_RADIUS,
                     WIRE_JOINT_RADIUS, DarkTheme)

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    Qt.Key.Key_Delete: "Delete",
    Qt.Key.Key_Backspace: "Backspace",
    Qt.Key.Key_Escape: "Escape",
}

_CURSORS = {
    "pointer": Qt.CursorShape.PointingHandCursor,
    "grabbing": Qt.CursorShape.ClosedHandCursor,
    "crosshair": Qt.CursorShape.CrossCursor,
    "default": Qt.CursorShape.ArrowCursor,
}


class CircuitCanvas(QWidget):
    """Main circuit drawing canvas"""

    # Emitted after every repaint request with the snapshot being drawn
    sceneChanged = pyqtSignal(object)

    def __init__(self, editor: EditorController, render_ctrl: RenderController, theme=None, parent=None):
        super().__init__(parent)
        self.editor = editor
        self.render_ctrl = render_ctrl
        self.theme = theme or DarkTheme()
        self.snapshot: SceneSnapshot = render_ctrl.snapshot

        self.setFixedSize(*CANVAS_SIZE)
        self.setMouseTracking(True)  # Needed for the wire preview and hover cursor
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        render_ctrl.add_observer(self._on_render_event)

    def _on_render_event(self, event, data):
        if event == 'scene_changed':
            self.snapshot = data
            self.update()
            self.sceneChanged.emit(data)

    @staticmethod
    def _point(event):
        pos = event.position()
        return (pos.x(), pos.y())

    # --- Input ---

    def mousePressEvent(self, event):
        if event is None:
            return
        self.setFocus()
        if event.button() == Qt.MouseButton.LeftButton:
            self.editor.pointer_pressed(self._point(event))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if event is None:
            return
        point = self._point(event)
        self.editor.pointer_moved(point)
        self.setCursor(_CURSORS[self.editor.hover_cursor(point)])

    def mouseReleaseEvent(self, event):
        if event is None:
            return
        if event.button() == Qt.MouseButton.LeftButton:
            point = self._point(event)
            self.editor.pointer_released(point)
            self.editor.clicked(point)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def mouseDoubleClickEvent(self, event):
        """Qt replaces the second press with this event; treat it as press + rotate."""
        if event is None:
            return
        if event.button() == Qt.MouseButton.LeftButton:
            point = self._point(event)
            self.editor.pointer_pressed(point)
            self.editor.double_clicked(point)
            event.accept()
            return
        super().mouseDoubleClickEvent(event)

    def leaveEvent(self, event):
        self.editor.pointer_left()
        super().leaveEvent(event)

    def keyPressEvent(self, event):
        """Handle keyboard shortcuts"""
        if event is None:
            return
        name = _KEY_NAMES.get(event.key())
        if name is not None and self.editor.key_pressed(name):
            event.accept()
            return
        super().keyPressEvent(event)

    # --- Painting ---

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self.paint_scene(painter, self.snapshot)
        finally:
            painter.end()

    def paint_scene(self, painter: QPainter, snapshot: SceneSnapshot) -> None:
        """Draw grid, wires, wire preview, elements and banners, in that order."""
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        width, height = CANVAS_SIZE
        painter.fillRect(QRectF(0, 0, width, height), self.theme.brush("canvas"))

        self.draw_grid(painter, snapshot.grid_size, width, height)
        for wire in snapshot.wires:
            self.draw_wire(painter, wire)
        if snapshot.preview is not None:
            self.draw_preview(painter, snapshot.preview)
        for element in snapshot.elements:
            self.draw_element(painter, element, snapshot.terminal_offset)
        self.draw_banners(painter, snapshot, width)

    def draw_grid(self, painter, grid_size, width, height):
        """Draw background grid"""
        painter.setPen(self.theme.pen("grid_line"))
        x = 0.0
        while x < width:
            painter.drawLine(QLineF(x, 0, x, height))
            x += grid_size
        y = 0.0
        while y < height:
            painter.drawLine(QLineF(0, y, width, y))
            y += grid_size

    def draw_wire(self, painter, wire):
        line = QLineF(QPointF(*wire.start), QPointF(*wire.end))
        if wire.selected:
            painter.setPen(self.theme.pen("wire_selected_halo"))
            painter.drawLine(line)
        if wire.energized:
            painter.setPen(self.theme.pen("wire_energized_glow"))
            painter.drawLine(line)

        pen = self.theme.pen(wire.style_key)
        painter.setPen(pen)
        painter.drawLine(line)

        # Wire endpoints (joints)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(pen.color()))
        for point in (wire.start, wire.end):
            painter.drawEllipse(QPointF(*point), WIRE_JOINT_RADIUS, WIRE_JOINT_RADIUS)

    def draw_preview(self, painter, preview):
        anchor, corner, end = (QPointF(*p) for p in (preview.anchor, preview.corner, preview.end))
        painter.setPen(self.theme.pen("wire_preview"))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawLine(QLineF(anchor, corner))
        painter.drawLine(QLineF(corner, end))

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.theme.brush("wire_preview"))
        painter.drawEllipse(anchor, 5, 5)
        painter.drawEllipse(corner, 3, 3)
        painter.setPen(self.theme.pen("wire_preview_target"))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(end, 5, 5)

    def draw_element(self, painter, element, offset):
        painter.save()
        painter.translate(*element.position)
        painter.rotate(element.rotation)

        if element.show_selection_box:
            painter.setPen(self.theme.pen("selection_box"))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(QRectF(-SELECTION_BOX_HALF, -SELECTION_BOX_HALF,
                                    SELECTION_BOX_HALF * 2, SELECTION_BOX_HALF * 2))

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.theme.brush("terminal"))
        for x in (-offset, offset):
            painter.drawEllipse(QPointF(x, 0), TERMINAL_DOT_RADIUS, TERMINAL_DOT_RADIUS)

        painter.setBrush(self.theme.brush("symbol_fill"))
        try:
            get_renderer(element.kind).draw(painter, element, self.theme, offset)
        except KeyError:
            logger.warning("No renderer for element kind %r", element.kind)
        painter.restore()

    def draw_banners(self, painter, snapshot, width):
        painter.setFont(self.theme.font("status_banner"))
        if snapshot.simulating:
            painter.setPen(QPen(self.theme.color("status_running")))
            painter.drawText(QRectF(width - 330, 12, 316, 24),
                             int(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter),
                             "Simulation running - editing locked")
        elif snapshot.mode == MODE_WIRE:
            painter.setPen(QPen(self.theme.color("wire_preview")))
            painter.drawText(QRectF(14, 12, 420, 24),
                             int(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter),
                             "Wiring: click a start point, then an end point")
