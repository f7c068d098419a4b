"""
RenderController - Keeps a drawable snapshot of the scene up to date.

This module contains no Qt dependencies. It listens to every controller
event, rebuilds a SceneSnapshot (diagram + energized set + interaction
state, already resolved into visual flags) and tells views to repaint.
Views only paint the snapshot; they never inspect solver internals.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from models.element import ELEMENT_LABELS
from models.geometry import Point

from .editor_controller import MODE_MOVE, EditorController

logger = logging.getLogger(__name__)

# Wire style keys, resolved against the theme by the canvas
WIRE_ENERGIZED = "wire_energized"
WIRE_SELECTED = "wire_selected"
WIRE_IDLE = "wire_idle"


@dataclass(frozen=True)
class WireVisual:
    item_id: str
    start: Point
    end: Point
    energized: bool = False
    selected: bool = False

    @property
    def style_key(self) -> str:
        """Energized wins over selected; a selected wire also gets a halo."""
        if self.energized:
            return WIRE_ENERGIZED
        if self.selected:
            return WIRE_SELECTED
        return WIRE_IDLE


@dataclass(frozen=True)
class ElementVisual:
    item_id: str
    kind: str
    position: Point
    rotation: int
    terminals: tuple[Point, Point]
    energized: bool = False
    selected: bool = False
    dragged: bool = False
    is_open: bool = False
    label: str = ""

    @property
    def show_selection_box(self) -> bool:
        return self.selected or self.dragged

    @property
    def glowing(self) -> bool:
        """LEDs light up when current flows through them."""
        return self.kind == "LED" and self.energized


@dataclass(frozen=True)
class PreviewVisual:
    """Pending L-route from the wire anchor to the snapped pointer."""

    anchor: Point
    corner: Point
    end: Point


@dataclass(frozen=True)
class SceneSnapshot:
    grid_size: float
    terminal_offset: float
    wires: tuple[WireVisual, ...] = field(default_factory=tuple)
    elements: tuple[ElementVisual, ...] = field(default_factory=tuple)
    preview: Optional[PreviewVisual] = None
    simulating: bool = False
    mode: str = MODE_MOVE
    selected_id: Optional[str] = None

    def energized_ids(self) -> set[str]:
        ids = {w.item_id for w in self.wires if w.energized}
        ids.update(e.item_id for e in self.elements if e.energized)
        return ids


def build_snapshot(editor: EditorController) -> SceneSnapshot:
    """Resolve the current editor state into a SceneSnapshot.

    Wires come first and elements follow in placement order, which is
    the order they must be painted in.
    """
    energized = editor.energized
    selected = editor.selected_id
    offsets = editor.settings.terminal_offsets()

    wires = tuple(
        WireVisual(
            item_id=w.wire_id,
            start=w.start,
            end=w.end,
            energized=w.wire_id in energized,
            selected=w.wire_id == selected,
        )
        for w in editor.model.wires
    )
    elements = tuple(
        ElementVisual(
            item_id=e.element_id,
            kind=e.kind,
            position=e.position,
            rotation=e.rotation,
            terminals=e.get_terminal_positions(offsets),
            energized=e.element_id in energized,
            selected=e.element_id == selected,
            dragged=e.element_id == editor.drag_target,
            is_open=e.is_open,
            label=ELEMENT_LABELS.get(e.kind, ""),
        )
        for e in editor.model.elements
    )
    points = editor.preview_points()
    preview = PreviewVisual(*points) if points is not None else None

    return SceneSnapshot(
        grid_size=editor.settings.grid_size,
        terminal_offset=editor.settings.terminal_offset,
        wires=wires,
        elements=elements,
        preview=preview,
        simulating=editor.is_simulating,
        mode=editor.mode,
        selected_id=selected,
    )


class RenderController:
    """
    Rebuilds the scene snapshot after every controller event.

    Observer events:
        scene_changed (SceneSnapshot) - A new snapshot is ready to paint
    """

    def __init__(self, editor: EditorController):
        self.editor = editor
        self._observers: list[Callable[[str, Any], None]] = []
        self.snapshot = build_snapshot(editor)
        self.redraw_count = 0
        editor.diagram_ctrl.add_observer(self._on_event)

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def _on_event(self, event: str, data: Any) -> None:
        self.refresh()

    def refresh(self) -> SceneSnapshot:
        """Rebuild the snapshot and notify views."""
        self.snapshot = build_snapshot(self.editor)
        self.redraw_count += 1
        for observer in list(self._observers):
            try:
                observer('scene_changed', self.snapshot)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying view: %s", e)
        return self.snapshot

    def close(self) -> None:
        """Stop listening to controller events."""
        self.editor.diagram_ctrl.remove_observer(self._on_event)
        self._observers.clear()
