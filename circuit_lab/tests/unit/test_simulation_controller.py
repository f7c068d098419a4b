"""
Unit tests for SimulationController - run state and live re-solving.
"""

import pytest
from controllers.diagram_controller import DiagramController
from controllers.simulation_controller import SimulationController
from tests.conftest import EventLog


@pytest.fixture
def setup(simple_loop):
    diagram_ctrl = DiagramController(simple_loop)
    sim_ctrl = SimulationController(simple_loop, diagram_ctrl)
    log = EventLog()
    diagram_ctrl.add_observer(log)
    return diagram_ctrl, sim_ctrl, log


class TestRunState:
    def test_initially_stopped(self, setup):
        _, sim, _ = setup
        assert not sim.is_running
        assert sim.energized == frozenset()

    def test_start_solves(self, setup):
        _, sim, log = setup
        energized = sim.start()
        assert sim.is_running
        assert "L1" in energized
        assert log.names() == ['simulation_started']

    def test_start_twice_is_idempotent(self, setup):
        _, sim, log = setup
        sim.start()
        sim.start()
        assert log.count('simulation_started') == 1

    def test_stop_clears(self, setup):
        _, sim, log = setup
        sim.start()
        sim.stop()
        assert not sim.is_running
        assert sim.energized == frozenset()
        assert log.names()[-1] == 'simulation_stopped'

    def test_stop_when_stopped_is_silent(self, setup):
        _, sim, log = setup
        sim.stop()
        assert log.events == []

    def test_toggle(self, setup):
        _, sim, _ = setup
        assert sim.toggle() is True
        assert sim.toggle() is False

    def test_is_energized(self, setup):
        _, sim, _ = setup
        sim.start()
        assert sim.is_energized("w1")
        assert not sim.is_energized("missing")


class TestLiveRecompute:
    def test_mutation_while_running_recomputes(self, setup):
        diagram_ctrl, sim, log = setup
        sim.start()
        diagram_ctrl.remove_item("w2")
        assert sim.energized == frozenset()
        assert log.count('energization_changed') == 1

    def test_unchanged_result_does_not_notify(self, setup):
        diagram_ctrl, sim, log = setup
        sim.start()
        diagram_ctrl.add_element("LED", (1000, 800))
        assert log.count('energization_changed') == 0

    def test_mutation_while_stopped_does_not_solve(self, setup):
        diagram_ctrl, sim, log = setup
        diagram_ctrl.remove_item("w2")
        assert sim.energized == frozenset()
        assert log.count('energization_changed') == 0

    def test_recompute_when_stopped_returns_empty(self, setup):
        _, sim, _ = setup
        assert sim.recompute() == frozenset()

    def test_switch_toggle_while_running(self, setup):
        diagram_ctrl, sim, _ = setup
        sim.start()
        # Replace w2 with an open switch at the same place
        diagram_ctrl.remove_item("w2")
        switch = diagram_ctrl.add_element("Switch", (440, 200))
        assert sim.energized == frozenset()
        diagram_ctrl.toggle_switch(switch.element_id)
        assert switch.element_id in sim.energized
        assert "L1" in sim.energized
