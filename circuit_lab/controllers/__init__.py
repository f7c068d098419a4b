"""
Controllers for Circuit Lab.

This package contains Qt-free controller classes that orchestrate
operations between models and views using an observer pattern.
"""

from .diagram_controller import DiagramController
from .editor_controller import MODE_MOVE, MODE_WIRE, EditorController
from .render_controller import RenderController, SceneSnapshot, build_snapshot
from .simulation_controller import SimulationController

__all__ = [
    "DiagramController",
    "EditorController",
    "SimulationController",
    "RenderController",
    "SceneSnapshot",
    "build_snapshot",
    "MODE_MOVE",
    "MODE_WIRE",
]
