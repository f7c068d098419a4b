"""
dark_theme.py - Dark theme implementation.

The canvas is drawn on a dark slate background so energized wires and lit
LEDs stand out.
"""

from .theme import BaseTheme, BrushSpec, FontSpec, PenSpec


class DarkTheme(BaseTheme):
    """Dark theme with high-contrast colors on a dark background."""

    name = "Dark Theme"

    colors = {
        # Element accents (palette text)
        "element_battery": "#FACC15",
        "element_led": "#FB7185",
        "element_resistor": "#B45309",
        "element_switch": "#CBD5E1",
        # Element bodies
        "symbol_stroke": "#F8FAFC",
        "symbol_fill": "#0F172A",
        "resistor_body": "#1E293B",
        "resistor_band_1": "#B45309",
        "resistor_band_2": "#000000",
        "resistor_band_3": "#DC2626",
        "led_off": "#334155",
        "led_on": "#EF4444",
        "label_text": "#64748B",
        "terminal": "#94A3B8",
        # Canvas
        "grid_line": "#1E293B",
        "wire_idle": "#475569",
        "wire_selected": "#06B6D4",
        "wire_energized": "#FBBF24",
        "wire_preview": "#FBBF24",
        "selection_highlight": "#06B6D4",
        # Window
        "background_primary": "#0F172A",
        "background_secondary": "#1E293B",
        "border": "#334155",
        "text_primary": "#F8FAFC",
        "text_muted": "#94A3B8",
        "status_running": "#34D399",
    }

    pens = {
        "grid_line": PenSpec("grid_line", cosmetic=True),
        "symbol": PenSpec("symbol_stroke", 3.0),
        "symbol_plate": PenSpec("symbol_stroke", 5.0),
        "switch_blade": PenSpec("symbol_stroke", 6.0),
        "selection_box": PenSpec("selection_highlight", 2.0, dashed=True),
        "wire_idle": PenSpec("wire_idle", 4.0),
        "wire_selected": PenSpec("wire_selected", 4.0),
        "wire_selected_halo": PenSpec("wire_selected", 10.0, alpha=110),
        "wire_energized": PenSpec("wire_energized", 6.0),
        "wire_energized_glow": PenSpec("wire_energized", 14.0, alpha=70),
        "wire_preview": PenSpec("wire_preview", 2.0, alpha=153, dashed=True),
        "wire_preview_target": PenSpec("wire_preview", 2.0),
    }

    brushes = {
        "canvas": BrushSpec("background_primary"),
        "terminal": BrushSpec("terminal"),
        "symbol_fill": BrushSpec("symbol_fill"),
        "resistor_body": BrushSpec("resistor_body"),
        "resistor_band_1": BrushSpec("resistor_band_1"),
        "resistor_band_2": BrushSpec("resistor_band_2"),
        "resistor_band_3": BrushSpec("resistor_band_3"),
        "led_off": BrushSpec("led_off"),
        "led_on": BrushSpec("led_on"),
        "led_glow": BrushSpec("led_on", alpha=80),
        "wire_preview": BrushSpec("wire_preview"),
    }

    fonts = {
        "element_label": FontSpec(14, bold=True),
        "status_banner": FontSpec(10, bold=True),
    }

    def stylesheet(self, key: str) -> str:
        c = self.colors
        if key == "main_window":
            return (
                f"QMainWindow, QWidget {{ background-color: {c['background_primary']}; color: {c['text_primary']}; }}"
                f" QPushButton {{ background-color: {c['background_secondary']}; color: {c['text_primary']};"
                f" border: 1px solid {c['border']}; padding: 4px 10px; border-radius: 4px; }}"
                f" QPushButton:checked {{ background-color: {c['wire_idle']}; }}"
                f" QListWidget {{ background-color: {c['background_secondary']}; border: 1px solid {c['border']}; }}"
                f" QStatusBar {{ color: {c['text_muted']}; }}"
            )
        if key == "instructions_panel":
            return f"color: {c['text_muted']}; font-size: 9pt; padding: 6px;"
        return ""
