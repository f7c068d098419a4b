"""
SimulationController - Owns the run state and the energized set.

This module contains no Qt dependencies. While running it re-solves the
diagram after every mutation reported by the DiagramController; when
stopped the energized set is always empty.
"""

import logging
from typing import Any, Optional

from models.diagram import DiagramModel
from simulation.energization import energized_ids

from .diagram_controller import MUTATION_EVENTS

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Controller for the live energization pass.

    Pipeline: diagram -> build graph -> solve -> energized id set

    Observer events (sent through the diagram controller's observers):
        simulation_started (frozenset[str]) - Run state entered
        simulation_stopped (None) - Run state left, energized set cleared
        energization_changed (frozenset[str]) - Energized set changed
    """

    def __init__(self, model: Optional[DiagramModel] = None, diagram_ctrl=None,
                 terminal_offsets: Optional[dict[str, float]] = None):
        self.model = model if model is not None else DiagramModel()
        self.diagram_ctrl = diagram_ctrl
        self.terminal_offsets = terminal_offsets
        self.is_running = False
        self.energized: frozenset[str] = frozenset()
        if self.diagram_ctrl is not None:
            self.diagram_ctrl.add_observer(self._on_diagram_event)

    def _notify(self, event: str, data: Any) -> None:
        if self.diagram_ctrl:
            self.diagram_ctrl._notify(event, data)

    def _on_diagram_event(self, event: str, data: Any) -> None:
        if self.is_running and event in MUTATION_EVENTS:
            self.recompute()

    # --- Run state ---

    def start(self) -> frozenset[str]:
        """Enter the run state and solve the current diagram."""
        if self.is_running:
            return self.energized
        self.is_running = True
        logger.info("Simulation started")
        self.energized = energized_ids(self.model, self.terminal_offsets)
        self._notify('simulation_started', self.energized)
        return self.energized

    def stop(self) -> None:
        """Leave the run state and clear the energized set unconditionally."""
        was_running = self.is_running
        self.is_running = False
        self.energized = frozenset()
        if was_running:
            logger.info("Simulation stopped")
            self._notify('simulation_stopped', None)

    def toggle(self) -> bool:
        """Start if stopped, stop if running. Returns the new run state."""
        if self.is_running:
            self.stop()
        else:
            self.start()
        return self.is_running

    # --- Solving ---

    def recompute(self) -> frozenset[str]:
        """Re-solve the diagram; notify only when the energized set changes."""
        if not self.is_running:
            return self.energized
        energized = energized_ids(self.model, self.terminal_offsets)
        if energized != self.energized:
            self.energized = energized
            logger.debug("Energized set now has %d items", len(energized))
            self._notify('energization_changed', energized)
        return self.energized

    def is_energized(self, item_id: str) -> bool:
        return item_id in self.energized
