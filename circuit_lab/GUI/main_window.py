"""Main application window with MVC architecture"""

import logging

from controllers.diagram_controller import DiagramController
from controllers.editor_controller import MODE_MOVE, MODE_WIRE, EditorController
from controllers.render_controller import RenderController
from models.diagram import DiagramModel
from models.settings import EditorSettings
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from .circuit_canvas import CircuitCanvas
from .component_palette import ComponentPalette
from .keybindings import KeybindingsRegistry
from .styles import DEFAULT_WINDOW_SIZE, DarkTheme

logger = logging.getLogger(__name__)

STATUS_EDITING = "Editing"
STATUS_SIMULATING = "Simulating"


class MainWindow(QMainWindow):
    """Main application window

    Builds the controllers around a fresh DiagramModel and lays out the
    palette, canvas and action buttons. Business logic is delegated to
    the controllers; this class only keeps widgets in sync with them.
    """

    def __init__(self, settings=None, keybindings=None):
        super().__init__()
        self.setWindowTitle("Circuit Lab")
        self.setGeometry(100, 100, *DEFAULT_WINDOW_SIZE)
        self.theme = DarkTheme()

        # Keybindings registry (load before UI so shortcuts are applied)
        self.keybindings = keybindings or KeybindingsRegistry()
        self.settings = settings or EditorSettings()

        # Create model (single source of truth) and controllers
        self.model = DiagramModel()
        self.diagram_ctrl = DiagramController(self.model)
        self.editor = EditorController(self.diagram_ctrl, settings=self.settings)
        self.render_ctrl = RenderController(self.editor)

        self.init_ui()
        self.create_menu_bar()
        self._connect_signals()
        self._sync_controls()

    def _connect_signals(self):
        """Connect signals between UI components"""
        self.palette.elementRequested.connect(self.add_element)
        self.diagram_ctrl.add_observer(self._on_controller_event)

    def init_ui(self):
        """Initialize user interface"""
        self.setStyleSheet(self.theme.stylesheet("main_window"))
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)

        # Left panel - Element palette
        left_panel = QVBoxLayout()
        left_panel.addWidget(QLabel("Elements"))
        self.palette = ComponentPalette(self.theme)
        left_panel.addWidget(self.palette)
        instructions = QLabel(
            "Click an element to add it\n"
            "Drag elements to move them\n"
            "Double-click to rotate\n"
            "Click a switch to open or close it\n"
            "Wire mode: click start, then end\n"
            "Delete / Backspace removes selection\n"
            "Esc cancels a pending wire"
        )
        instructions.setWordWrap(True)
        instructions.setStyleSheet(self.theme.stylesheet("instructions_panel"))
        left_panel.addWidget(instructions)
        left_panel.addStretch()
        main_layout.addLayout(left_panel, 1)

        # Center - Canvas
        self.canvas = CircuitCanvas(self.editor, self.render_ctrl, self.theme)
        scroll = QScrollArea()
        scroll.setWidget(self.canvas)
        main_layout.addWidget(scroll, 4)

        # Right panel - Controls
        right_panel = QVBoxLayout()
        right_panel.addWidget(QLabel("Tools"))

        self.btn_move = QPushButton("Move")
        self.btn_move.setCheckable(True)
        self.btn_move.clicked.connect(lambda: self.set_mode(MODE_MOVE))
        right_panel.addWidget(self.btn_move)

        self.btn_wire = QPushButton("Wire")
        self.btn_wire.setCheckable(True)
        self.btn_wire.clicked.connect(lambda: self.set_mode(MODE_WIRE))
        right_panel.addWidget(self.btn_wire)

        right_panel.addWidget(QLabel(""))  # Spacer

        self.btn_delete = QPushButton("Delete Selected")
        self.btn_delete.clicked.connect(self.editor.delete_selected)
        right_panel.addWidget(self.btn_delete)

        self.btn_clear = QPushButton("Clear Canvas")
        self.btn_clear.clicked.connect(self.clear_canvas)
        right_panel.addWidget(self.btn_clear)

        right_panel.addStretch()

        self.btn_simulate = QPushButton("Run Simulation")
        self.btn_simulate.clicked.connect(self.toggle_simulation)
        right_panel.addWidget(self.btn_simulate)

        main_layout.addLayout(right_panel, 1)

        # Focus policies for keyboard navigation
        self.palette.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        for button in (self.btn_move, self.btn_wire, self.btn_delete, self.btn_clear, self.btn_simulate):
            button.setFocusPolicy(Qt.FocusPolicy.TabFocus)
        self.setTabOrder(self.palette, self.canvas)

        self.status_label = QLabel()
        self.statusBar().addPermanentWidget(self.status_label)

    def _make_action(self, action_name, slot, checkable=False):
        """QAction labelled and bound from the keybindings registry"""
        action = QAction(self.keybindings.label(action_name), self)
        action.setShortcut(self.keybindings.get(action_name))
        action.setCheckable(checkable)
        action.triggered.connect(slot)
        return action

    def create_menu_bar(self):
        """Create menu bar with Edit, Mode and Simulation menus"""
        menubar = self.menuBar()
        if menubar is None:
            return

        edit_menu = menubar.addMenu("&Edit")
        if edit_menu is None:
            return
        edit_menu.addAction(self._make_action("edit.delete", self.editor.delete_selected))
        edit_menu.addAction(self._make_action("edit.rotate", self.editor.rotate_selected))
        edit_menu.addSeparator()
        self.clear_action = self._make_action("edit.clear", self.clear_canvas)
        edit_menu.addAction(self.clear_action)

        mode_menu = menubar.addMenu("&Mode")
        if mode_menu is None:
            return

        mode_group = QActionGroup(self)
        mode_group.setExclusive(True)
        self.move_action = self._make_action("mode.move", lambda: self.set_mode(MODE_MOVE), checkable=True)
        self.wire_action = self._make_action("mode.wire", lambda: self.set_mode(MODE_WIRE), checkable=True)
        for action in (self.move_action, self.wire_action):
            mode_group.addAction(action)
            mode_menu.addAction(action)

        sim_menu = menubar.addMenu("&Simulation")
        if sim_menu is None:
            return
        self.sim_action = self._make_action("sim.toggle", self.toggle_simulation)
        sim_menu.addAction(self.sim_action)

        for shortcut, actions in self.keybindings.get_conflicts():
            logger.warning("Shortcut %s is bound to several actions: %s", shortcut, ", ".join(actions))

    # --- Actions ---

    def add_element(self, kind):
        element = self.editor.add_element(kind)
        if element is not None:
            self.canvas.setFocus()

    def set_mode(self, mode):
        self.editor.set_mode(mode)
        self._sync_controls()

    def toggle_simulation(self):
        self.editor.toggle_simulation()

    def clear_canvas(self):
        self.editor.clear_canvas()

    # --- Sync ---

    def _on_controller_event(self, event, data):
        if event in ('mode_changed', 'simulation_started', 'simulation_stopped',
                     'selection_changed', 'diagram_cleared'):
            self._sync_controls()

    def _sync_controls(self):
        """Mirror editor state onto buttons, actions and the status bar"""
        simulating = self.editor.is_simulating
        wiring = self.editor.mode == MODE_WIRE

        self.btn_move.setChecked(not wiring)
        self.btn_wire.setChecked(wiring)
        self.move_action.setChecked(not wiring)
        self.wire_action.setChecked(wiring)
        for widget in (self.btn_move, self.btn_wire, self.btn_clear, self.palette,
                       self.move_action, self.wire_action, self.clear_action):
            widget.setEnabled(not simulating)
        self.btn_delete.setEnabled(not simulating and self.editor.selected_id is not None)

        self.btn_simulate.setText("Stop Simulation" if simulating else "Run Simulation")
        self.sim_action.setText("&Stop Simulation" if simulating else "&Run Simulation")
        self.status_label.setText(STATUS_SIMULATING if simulating else STATUS_EDITING)
        self.statusBar().showMessage(
            "Simulation running - editing locked" if simulating
            else ("Wire mode" if wiring else "Move mode")
        )

    def closeEvent(self, event):
        self.diagram_ctrl.remove_observer(self._on_controller_event)
        self.render_ctrl.close()
        super().closeEvent(event)
