"""
Unit tests for models/settings.py - EditorSettings.
"""

import json
import logging

import pytest
from models.settings import EditorSettings


class TestEditorSettings:
    def test_defaults(self):
        settings = EditorSettings()
        assert settings.grid_size == 40
        assert settings.hit_radius == 50
        assert settings.wire_tolerance == 15
        assert settings.terminal_offset == 40

    def test_spawn_positions_cycle(self):
        settings = EditorSettings()
        assert settings.spawn_position(0) == (200, 200)
        assert settings.spawn_position(1) == (240, 240)
        assert settings.spawn_position(4) == (360, 360)
        assert settings.spawn_position(5) == (200, 200)

    def test_terminal_offset_follows_grid(self):
        assert EditorSettings().terminal_offset == 40
        assert EditorSettings(grid_size=30).terminal_offset == 30

    def test_terminal_offset_may_span_several_cells(self):
        assert EditorSettings(grid_size=20, terminal_offset=40).terminal_offset == 40

    def test_off_grid_terminal_offset_rejected(self):
        with pytest.raises(ValueError, match="multiple of grid_size"):
            EditorSettings(grid_size=30, terminal_offset=40)

    def test_spawn_positions_snap_to_grid(self):
        settings = EditorSettings(grid_size=30)
        assert settings.spawn_position(0) == (210, 210)
        assert settings.spawn_position(1) == (240, 240)

    def test_terminal_offsets_cover_every_kind(self):
        offsets = EditorSettings(terminal_offset=80).terminal_offsets()
        assert set(offsets) == {"Battery", "LED", "Resistor", "Switch"}
        assert set(offsets.values()) == {80}

    @pytest.mark.parametrize("field", ["grid_size", "hit_radius", "wire_tolerance", "terminal_offset"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValueError):
            EditorSettings(**{field: 0})

    def test_load_missing_file_gives_defaults(self, tmp_path):
        assert EditorSettings.load(tmp_path / "none.json") == EditorSettings()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "settings.json"
        EditorSettings(grid_size=20, hit_radius=30).save(path)

        with open(path) as f:
            assert json.load(f) == {"grid_size": 20, "hit_radius": 30}
        loaded = EditorSettings.load(path)
        assert loaded.grid_size == 20
        assert loaded.terminal_offset == 20
        assert loaded.wire_tolerance == 15

    def test_load_corrupt_file_logs_and_uses_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{ not json")
        with caplog.at_level(logging.WARNING):
            settings = EditorSettings.load(path)
        assert settings == EditorSettings()
        assert "Failed to load editor settings" in caplog.text

    def test_load_ignores_unknown_keys(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"grid_size": 20, "zoom": 3}))
        with caplog.at_level(logging.WARNING):
            settings = EditorSettings.load(path)
        assert settings.grid_size == 20
        assert "zoom" in caplog.text

    @pytest.mark.parametrize("overrides", [
        {"hit_radius": -5},
        {"spawn_base": "200"},
        {"spawn_slots": 2.5},
        {"spawn_slots": True},
        {"grid_size": 30, "terminal_offset": 40},
    ])
    def test_load_invalid_value_uses_defaults(self, tmp_path, caplog, overrides):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(overrides))
        with caplog.at_level(logging.WARNING):
            settings = EditorSettings.load(path)
        assert settings == EditorSettings()
        assert "Invalid editor settings" in caplog.text
        assert settings.spawn_position(0) == (200, 200)
