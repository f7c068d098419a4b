"""
Shared test fixtures for the Circuit Lab test suite.

All fixtures build pure-Python model objects (no Qt dependencies).
"""

import os
import sys
from pathlib import Path

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure circuit_lab/ is on sys.path so bare imports (models, simulation, GUI, controllers)
# work when running individual test files (e.g., python -m pytest circuit_lab/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

import pytest
from controllers.diagram_controller import DiagramController
from controllers.editor_controller import EditorController
from models.diagram import DiagramModel
from models.element import ElementData, SwitchProperties
from models.wire import WireData


def make_element(kind, element_id, position=(0.0, 0.0), rotation=0, is_open=None):
    """Helper to create an ElementData with minimal boilerplate."""
    properties = SwitchProperties(is_open=is_open) if is_open is not None else None
    return ElementData(
        element_id=element_id,
        kind=kind,
        position=position,
        rotation=rotation,
        properties=properties,
    )


def make_wire(wire_id, start, end):
    """Helper to create a WireData."""
    return WireData(wire_id=wire_id, start=start, end=end)


class EventLog:
    """Simple observer that records (event, data) tuples."""

    def __init__(self):
        self.events = []

    def __call__(self, event, data):
        self.events.append((event, data))

    def names(self):
        return [e for e, _ in self.events]

    def count(self, event_name):
        return sum(1 for e, _ in self.events if e == event_name)

    def clear(self):
        self.events.clear()


@pytest.fixture
def simple_loop():
    """
    Battery (200,200) -- Resistor (360,200) -- LED (520,200), closed by wires.

    B.neg (160,200)      B.pos (240,200) --w1-- R.A (320,200)
    R.B (400,200) --w2-- L.A (480,200)
    L.B (560,200) --w3-- (560,280) --w4-- (160,280) --w5-- B.neg (160,200)
    """
    model = DiagramModel()
    for element in (
        make_element("Battery", "B1", (200, 200)),
        make_element("Resistor", "R1", (360, 200)),
        make_element("LED", "L1", (520, 200)),
    ):
        model.add_element(element)
    for wire in (
        make_wire("w1", (240, 200), (320, 200)),
        make_wire("w2", (400, 200), (480, 200)),
        make_wire("w3", (560, 200), (560, 280)),
        make_wire("w4", (560, 280), (160, 280)),
        make_wire("w5", (160, 280), (160, 200)),
    ):
        model.add_wire(wire)
    return model


@pytest.fixture
def editor():
    """EditorController wired to a fresh model with default settings."""
    return EditorController(DiagramController(DiagramModel()))


@pytest.fixture
def event_log(editor):
    log = EventLog()
    editor.diagram_ctrl.add_observer(log)
    return log
