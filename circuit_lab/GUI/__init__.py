from .circuit_canvas import CircuitCanvas
from .component_palette import ComponentPalette
from .keybindings import KeybindingsRegistry
from .main_window import MainWindow
from .renderers import get_renderer

__all__ = [
    'CircuitCanvas',
    'ComponentPalette',
    'KeybindingsRegistry',
    'MainWindow',
    'get_renderer',
]
