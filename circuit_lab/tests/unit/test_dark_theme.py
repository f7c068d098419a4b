"""Tests for the dark theme color, pen and brush tables."""

import pytest

pytest.importorskip("PyQt6")

from GUI.styles import ELEMENTS, DarkTheme
from GUI.styles.theme import MISSING_COLOR
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor


class TestDarkThemeColors:
    """Verify DarkTheme defines all required color keys."""

    @pytest.fixture(autouse=True)
    def setup(self):
        self.theme = DarkTheme()

    def test_name(self):
        assert self.theme.name == "Dark Theme"

    def test_background_is_dark(self):
        assert self.theme.color("background_primary").lightness() < 100

    def test_text_is_light(self):
        assert self.theme.color("text_primary").lightness() > 150

    def test_led_states_differ(self):
        assert self.theme.color("led_on") != self.theme.color("led_off")

    def test_all_element_kinds_have_colors(self):
        for kind in ELEMENTS:
            color = self.theme.get_element_color(kind)
            assert isinstance(color, QColor)
            assert color != QColor(MISSING_COLOR), f"Missing color for {kind}"

    def test_unknown_key_falls_back_to_magenta(self):
        assert self.theme.color("no_such_key") == QColor(MISSING_COLOR)

    def test_color_alpha(self):
        assert self.theme.color("led_on", 80).alpha() == 80


class TestDarkThemeTables:
    @pytest.fixture(autouse=True)
    def setup(self):
        self.theme = DarkTheme()

    def test_every_spec_refers_to_a_defined_color(self):
        specs = list(self.theme.pens.values()) + list(self.theme.brushes.values())
        for spec in specs:
            assert spec.color in self.theme.colors, f"Undefined color: {spec.color}"

    def test_energized_wire_is_thicker_than_idle(self):
        assert self.theme.pen("wire_energized").widthF() > self.theme.pen("wire_idle").widthF()

    def test_preview_pen_is_dashed(self):
        assert self.theme.pen("wire_preview").style() == Qt.PenStyle.DashLine
        assert self.theme.pen("wire_idle").style() == Qt.PenStyle.SolidLine

    def test_glow_pen_is_translucent(self):
        assert self.theme.pen("wire_energized_glow").color().alpha() < 255

    def test_brush_alpha(self):
        assert self.theme.brush("led_glow").color().alpha() == 80
        assert self.theme.brush("led_on").color().alpha() == 255

    def test_banner_font_is_bold(self):
        assert self.theme.font("status_banner").bold()

    def test_stylesheets_defined(self):
        assert "QMainWindow" in self.theme.stylesheet("main_window")
        assert self.theme.stylesheet("missing") == ""
