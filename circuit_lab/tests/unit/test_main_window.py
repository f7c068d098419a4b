"""Tests for MainWindow: palette, tool buttons and simulation state display."""

import pytest

pytest.importorskip("PyQt6")

from controllers.editor_controller import MODE_MOVE, MODE_WIRE
from GUI.keybindings import KeybindingsRegistry
from GUI.main_window import STATUS_EDITING, STATUS_SIMULATING, MainWindow
from models.settings import EditorSettings


@pytest.fixture
def window(qtbot, tmp_path):
    win = MainWindow(settings=EditorSettings(), keybindings=KeybindingsRegistry(tmp_path / "kb.json"))
    qtbot.addWidget(win)
    return win


class TestPalette:
    def test_palette_lists_every_kind(self, window):
        assert window.palette.kinds() == ["Battery", "LED", "Resistor", "Switch"]

    def test_palette_click_adds_element(self, window):
        window.palette.itemClicked.emit(window.palette.item(1))
        assert [e.kind for e in window.model.elements] == ["LED"]
        assert window.model.elements[0].position == (200, 200)


class TestToolButtons:
    def test_initial_state(self, window):
        assert window.btn_move.isChecked()
        assert not window.btn_wire.isChecked()
        assert window.status_label.text() == STATUS_EDITING
        assert not window.btn_delete.isEnabled()

    def test_wire_mode(self, window):
        window.set_mode(MODE_WIRE)
        assert window.editor.mode == MODE_WIRE
        assert window.btn_wire.isChecked()
        assert window.wire_action.isChecked()
        window.set_mode(MODE_MOVE)
        assert window.btn_move.isChecked()

    def test_delete_enabled_with_selection(self, window):
        window.add_element("LED")
        window.editor.select(window.model.elements[0].element_id)
        assert window.btn_delete.isEnabled()
        window.btn_delete.click()
        assert window.model.elements == []

    def test_clear_canvas(self, window):
        window.add_element("LED")
        window.add_element("Battery")
        window.btn_clear.click()
        assert window.model.is_empty


class TestSimulationDisplay:
    def test_run_locks_editing_controls(self, window):
        window.btn_simulate.click()
        assert window.editor.is_simulating
        assert window.btn_simulate.text() == "Stop Simulation"
        assert window.status_label.text() == STATUS_SIMULATING
        assert not window.palette.isEnabled()
        assert not window.btn_wire.isEnabled()

    def test_stop_restores_controls(self, window):
        window.btn_simulate.click()
        window.btn_simulate.click()
        assert not window.editor.is_simulating
        assert window.btn_simulate.text() == "Run Simulation"
        assert window.palette.isEnabled()

    def test_shortcuts_from_keybindings(self, window):
        assert window.sim_action.shortcut().toString() == "F5"
        assert window.wire_action.shortcut().toString() == "W"
