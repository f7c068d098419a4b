from models.element import DISPLAY_NAMES, ELEMENT_KINDS
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QListWidget, QListWidgetItem

from .styles import PALETTE_WIDTH, DarkTheme


class ComponentPalette(QListWidget):
    """Element palette; clicking an entry asks for a new element of that kind"""

    elementRequested = pyqtSignal(str)

    def __init__(self, theme=None):
        super().__init__()
        self.theme = theme or DarkTheme()
        self.setMaximumWidth(PALETTE_WIDTH)

        for kind in ELEMENT_KINDS:
            item = QListWidgetItem(DISPLAY_NAMES.get(kind, kind))
            item.setData(Qt.ItemDataRole.UserRole, kind)
            item.setForeground(self.theme.get_element_color(kind))
            self.addItem(item)

        self.itemClicked.connect(self._on_item_clicked)

    def _on_item_clicked(self, item):
        kind = item.data(Qt.ItemDataRole.UserRole)
        if kind:
            self.elementRequested.emit(kind)

    def kinds(self):
        return [self.item(i).data(Qt.ItemDataRole.UserRole) for i in range(self.count())]
