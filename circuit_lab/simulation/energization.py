"""
Energization solver.

Decides which wires and elements lie on a closed loop through a source.
This is a reachability approximation, not a circuit solve: there are no
voltages or currents, and every edge with both ends on a loop node counts
as energized, including dead-end branches a stricter analysis would drop.
"""

import logging
from collections import deque
from typing import Iterable, Optional

from models.diagram import DiagramModel
from models.geometry import Point

from .circuit_graph import CircuitGraph, build_graph, source_terminals

logger = logging.getLogger(__name__)


def reachable_nodes(
    graph: CircuitGraph,
    start: Point,
    excluded_id: str,
    allowed: Optional[set[Point]] = None,
) -> set[Point]:
    """
    Breadth-first search from *start*.

    Edges labelled *excluded_id* are never followed. When *allowed* is
    given, the search only steps onto nodes inside it.
    """
    visited = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for edge, neighbour in graph.neighbors(node):
            if edge.item_id == excluded_id or neighbour in visited:
                continue
            if allowed is not None and neighbour not in allowed:
                continue
            visited.add(neighbour)
            queue.append(neighbour)
    return visited


def energized_by_source(graph: CircuitGraph, source_id: str, negative: Point, positive: Point) -> set[str]:
    """
    Return the ids energized by one source.

    An open circuit (negative pole unreachable from the positive pole
    without crossing the source itself) contributes nothing, not even
    the source.
    """
    from_positive = reachable_nodes(graph, positive, source_id)
    if negative not in from_positive:
        return set()

    loop_nodes = reachable_nodes(graph, negative, source_id, allowed=from_positive)

    energized = {source_id}
    for node in loop_nodes:
        for edge, neighbour in graph.neighbors(node):
            if edge.item_id != source_id and neighbour in loop_nodes:
                energized.add(edge.item_id)
    return energized


def solve(graph: CircuitGraph, sources: Iterable[tuple[str, Point, Point]]) -> frozenset[str]:
    """Union the energized ids of every (source_id, negative, positive) source."""
    energized: set[str] = set()
    for source_id, negative, positive in sources:
        found = energized_by_source(graph, source_id, negative, positive)
        logger.debug("Source %s energizes %d items", source_id, len(found))
        energized |= found
    return frozenset(energized)


def energized_ids(diagram: DiagramModel, terminal_offsets: Optional[dict[str, float]] = None) -> frozenset[str]:
    """Build the graph for *diagram* and solve it in one step."""
    graph = build_graph(diagram, terminal_offsets)
    return solve(graph, source_terminals(diagram, terminal_offsets))
