"""
EditorController - Interaction state machine for the diagram canvas.

This module contains no Qt dependencies. Views translate their input
events into canvas-local (x, y) points and key names and call the
handlers below; every mutation goes through the DiagramController.

States:
    editing   - sub-mode "move" (select, drag, rotate, toggle) or
                "wire" (two-click orthogonal wire tool)
    simulating - structural edits are locked; switches can still be
                 clicked
"""

import logging
from typing import Any, Optional

from models.element import ELEMENT_KINDS, ElementData
from models.geometry import Point, Segment, l_route, snap_to_grid
from models.settings import EditorSettings
from simulation.hit_testing import element_at, item_at

from .diagram_controller import DiagramController
from .simulation_controller import SimulationController

logger = logging.getLogger(__name__)

MODE_MOVE = "move"
MODE_WIRE = "wire"
EDITOR_MODES = (MODE_MOVE, MODE_WIRE)

DELETE_KEYS = frozenset({"Delete", "Backspace"})
CANCEL_KEYS = frozenset({"Escape"})


class EditorController:
    """
    Controller for pointer and keyboard interaction.

    Holds only transient interaction state (selection, drag target,
    pending wire anchor, last pointer position). The diagram itself is
    owned by the DiagramController.

    Observer events (sent through the diagram controller's observers):
        selection_changed (Optional[str]) - Selected item id changed
        mode_changed (str) - "move" or "wire"
        drag_changed (Optional[str]) - Drag target set or released
        wire_anchor_changed (Optional[Point]) - Pending wire start changed
        preview_moved (Point) - Snapped pointer moved while a wire is pending
    """

    def __init__(self, diagram_ctrl: Optional[DiagramController] = None,
                 simulation_ctrl: Optional[SimulationController] = None,
                 settings: Optional[EditorSettings] = None):
        self.settings = settings or EditorSettings()
        self.diagram_ctrl = diagram_ctrl or DiagramController()
        self.simulation_ctrl = simulation_ctrl or SimulationController(
            self.diagram_ctrl.model, self.diagram_ctrl, self.settings.terminal_offsets()
        )
        self.mode = MODE_MOVE
        self.selected_id: Optional[str] = None
        self.drag_target: Optional[str] = None
        self.wire_anchor: Optional[Point] = None
        self.pointer: Optional[Point] = None
        self._drag_moved = False
        self._last_gesture_dragged = False

    @property
    def model(self):
        return self.diagram_ctrl.model

    @property
    def is_simulating(self) -> bool:
        return self.simulation_ctrl.is_running

    @property
    def energized(self) -> frozenset[str]:
        return self.simulation_ctrl.energized

    def _notify(self, event: str, data: Any) -> None:
        self.diagram_ctrl._notify(event, data)

    def _snap(self, point: Point) -> Point:
        return snap_to_grid(point, self.settings.grid_size)

    def _element_at(self, point: Point) -> Optional[ElementData]:
        return element_at(self.model, point, self.settings.hit_radius)

    # --- Transient state setters ---

    def select(self, item_id: Optional[str]) -> None:
        if item_id != self.selected_id:
            self.selected_id = item_id
            self._notify('selection_changed', item_id)

    def clear_selection(self) -> None:
        self.select(None)

    def _set_drag_target(self, element_id: Optional[str]) -> None:
        if element_id != self.drag_target:
            self.drag_target = element_id
            self._notify('drag_changed', element_id)

    def _set_wire_anchor(self, point: Optional[Point]) -> None:
        if point != self.wire_anchor:
            self.wire_anchor = point
            self._notify('wire_anchor_changed', point)

    # --- Modes ---

    def set_mode(self, mode: str) -> bool:
        """
        Switch between the move and wire sub-modes.

        Ignored while simulating. Entering wire mode clears the selection;
        leaving it drops any pending anchor.

        Returns:
            True if the mode is now *mode*.
        """
        if mode not in EDITOR_MODES:
            raise ValueError(f"Unknown editor mode: {mode!r}")
        if self.is_simulating:
            return False
        if mode == MODE_WIRE:
            self.clear_selection()
        else:
            self._set_wire_anchor(None)
        if mode != self.mode:
            self.mode = mode
            self._notify('mode_changed', mode)
        return True

    def start_simulation(self) -> frozenset[str]:
        """Lock editing and compute the energized set."""
        self.clear_selection()
        self._set_drag_target(None)
        self._set_wire_anchor(None)
        if self.mode != MODE_MOVE:
            self.mode = MODE_MOVE
            self._notify('mode_changed', MODE_MOVE)
        return self.simulation_ctrl.start()

    def stop_simulation(self) -> None:
        self.simulation_ctrl.stop()

    def toggle_simulation(self) -> bool:
        """Start or stop the simulation. Returns the new run state."""
        if self.is_simulating:
            self.stop_simulation()
        else:
            self.start_simulation()
        return self.is_simulating

    # --- Structural edits ---

    def add_element(self, kind: str) -> Optional[ElementData]:
        """
        Place a new element of *kind* at the next staggered spawn point.

        Returns:
            The new element, or None while simulating.

        Raises:
            ValueError: If *kind* is not in the catalog.
        """
        if kind not in ELEMENT_KINDS:
            raise ValueError(f"Unknown element kind: {kind!r}")
        if self.is_simulating:
            return None
        position = self.settings.spawn_position(len(self.model.elements))
        element = self.diagram_ctrl.add_element(kind, position)
        self.set_mode(MODE_MOVE)
        return element

    def delete_selected(self) -> bool:
        """Delete the selected element or wire. Returns True if removed."""
        if self.is_simulating or self.selected_id is None:
            return False
        item_id = self.selected_id
        self.clear_selection()
        if self.drag_target == item_id:
            self._set_drag_target(None)
        return self.diagram_ctrl.remove_item(item_id)

    def rotate_selected(self) -> bool:
        """Rotate the selected element by +90 degrees."""
        if self.is_simulating or self.selected_id is None:
            return False
        if self.model.get_element(self.selected_id) is None:
            return False
        self.diagram_ctrl.rotate_element(self.selected_id)
        return True

    def clear_canvas(self) -> bool:
        """Remove every element and wire. Disabled while simulating."""
        if self.is_simulating:
            return False
        self.clear_selection()
        self._set_drag_target(None)
        self._set_wire_anchor(None)
        self.diagram_ctrl.clear_diagram()
        return True

    # --- Pointer handlers ---

    def pointer_pressed(self, point: Point) -> None:
        """Handle a primary button press at *point*."""
        self.pointer = point
        self._last_gesture_dragged = False
        if self.is_simulating:
            return

        if self.mode == MODE_MOVE:
            item_id = item_at(self.model, point, self.settings)
            self.select(item_id)
            if self.model.get_element(item_id) is not None:
                self._drag_moved = False
                self._set_drag_target(item_id)
            return

        snapped = self._snap(point)
        if self.wire_anchor is None:
            self._set_wire_anchor(snapped)
            return
        anchor = self.wire_anchor
        self._set_wire_anchor(None)
        if snapped != anchor:
            self.diagram_ctrl.add_wire_route(anchor, snapped)

    def pointer_moved(self, point: Point) -> None:
        """Track the pointer; drag the current target to the snapped point."""
        previous = self.pointer
        self.pointer = point

        if self.wire_anchor is not None and self.mode == MODE_WIRE:
            if previous is None or self._snap(previous) != self._snap(point):
                self._notify('preview_moved', self._snap(point))

        if self.drag_target is None or self.mode != MODE_MOVE or self.is_simulating:
            return
        element = self.model.get_element(self.drag_target)
        if element is None:
            self._set_drag_target(None)
            return
        snapped = self._snap(point)
        if snapped != element.position:
            self._drag_moved = True
            self.diagram_ctrl.move_element(element.element_id, snapped)

    def pointer_released(self, point: Optional[Point] = None) -> None:
        """End any drag. Always resets the drag target."""
        if point is not None:
            self.pointer = point
        self._last_gesture_dragged = self.drag_target is not None and self._drag_moved
        self._drag_moved = False
        self._set_drag_target(None)

    def pointer_left(self) -> None:
        """The pointer left the canvas: drop the drag so it cannot stick."""
        self.pointer_released()
        self.pointer = None

    def clicked(self, point: Point) -> bool:
        """
        Handle a click (press and release without a drag).

        Toggles a switch under the pointer, also while simulating. Ignored
        after a drag and in wire mode.

        Returns:
            True if a switch was toggled.
        """
        if self.drag_target is not None or self._last_gesture_dragged or self.mode == MODE_WIRE:
            return False
        element = self._element_at(point)
        if element is None or not element.is_switch:
            return False
        self.diagram_ctrl.toggle_switch(element.element_id)
        return True

    def double_clicked(self, point: Point) -> bool:
        """Rotate the element under *point* by +90 degrees. Returns True if rotated."""
        if self.is_simulating:
            return False
        element = self._element_at(point)
        if element is None:
            return False
        self.diagram_ctrl.rotate_element(element.element_id)
        return True

    def key_pressed(self, key: str) -> bool:
        """Handle a named key ("Delete", "Backspace", "Escape"). Returns True if consumed."""
        if key in DELETE_KEYS:
            return self.delete_selected()
        if key in CANCEL_KEYS and self.wire_anchor is not None:
            self._set_wire_anchor(None)
            return True
        return False

    # --- Queries for views ---

    def preview_points(self) -> Optional[tuple[Point, Point, Point]]:
        """Return (anchor, corner, end) of the pending wire, or None."""
        if self.mode != MODE_WIRE or self.wire_anchor is None or self.pointer is None:
            return None
        end = self._snap(self.pointer)
        return self.wire_anchor, (end[0], self.wire_anchor[1]), end

    def preview_route(self) -> list[Segment]:
        """Segments the pending wire would create if clicked now."""
        points = self.preview_points()
        if points is None:
            return []
        anchor, _, end = points
        return l_route(anchor, end)

    def hover_cursor(self, point: Point) -> str:
        """Cursor name for the pointer at *point*."""
        if self.is_simulating:
            element = self._element_at(point)
            return "pointer" if element is not None and element.is_switch else "default"
        if self.mode == MODE_WIRE:
            return "crosshair"
        if item_at(self.model, point, self.settings) is None:
            return "default"
        return "grabbing" if self.drag_target is not None else "pointer"
