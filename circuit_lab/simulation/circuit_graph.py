"""
Circuit graph builder.

Converts a diagram into an undirected multigraph whose nodes are exact
(x, y) coordinates. Two terminals or wire ends at numerically identical
coordinates are the same node; there is no tolerance. This module is the
only place that knows connectivity is coordinate equality, so an explicit
netlist model can replace it without touching the solver or the editor.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterator, Optional

from models.diagram import DiagramModel
from models.geometry import Point

logger = logging.getLogger(__name__)

EDGE_WIRE = "wire"
EDGE_COMPONENT = "component"


@dataclass(frozen=True)
class GraphEdge:
    """One wire or closed element between two coordinate nodes."""

    item_id: str
    edge_type: str  # EDGE_WIRE or EDGE_COMPONENT
    node_a: Point
    node_b: Point


class CircuitGraph:
    """
    Undirected multigraph keyed by coordinate.

    Parallel edges between the same pair of nodes are all kept, each with
    its own item id, so every one of them can be energized independently.
    """

    def __init__(self):
        self._adjacency: dict[Point, list[tuple[GraphEdge, Point]]] = defaultdict(list)
        self._edges: list[GraphEdge] = []

    def add_edge(self, item_id: str, edge_type: str, node_a: Point, node_b: Point) -> GraphEdge:
        edge = GraphEdge(item_id, edge_type, node_a, node_b)
        self._edges.append(edge)
        self._adjacency[node_a].append((edge, node_b))
        self._adjacency[node_b].append((edge, node_a))
        return edge

    def neighbors(self, node: Point) -> list[tuple[GraphEdge, Point]]:
        """Return (edge, far_node) pairs incident to *node* (empty if unknown)."""
        return self._adjacency.get(node, [])

    @property
    def nodes(self) -> set[Point]:
        return set(self._adjacency)

    @property
    def edges(self) -> list[GraphEdge]:
        return list(self._edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, node: Point) -> bool:
        return node in self._adjacency

    def __repr__(self) -> str:
        return f"CircuitGraph(nodes={len(self._adjacency)}, edges={len(self._edges)})"


def build_graph(diagram: DiagramModel, terminal_offsets: Optional[dict[str, float]] = None) -> CircuitGraph:
    """
    Build the connectivity graph for *diagram*.

    Each wire adds one "wire" edge between its endpoints. Each element adds
    one "component" edge between its two terminals, except an open switch,
    which adds nothing at all.
    """
    graph = CircuitGraph()

    for wire in diagram.wires:
        graph.add_edge(wire.wire_id, EDGE_WIRE, wire.start, wire.end)

    for element in diagram.elements:
        if element.is_open:
            continue
        terminal_a, terminal_b = element.get_terminal_positions(terminal_offsets)
        graph.add_edge(element.element_id, EDGE_COMPONENT, terminal_a, terminal_b)

    logger.debug("Built %r from %d elements, %d wires", graph, len(diagram.elements), len(diagram.wires))
    return graph


def source_terminals(
    diagram: DiagramModel, terminal_offsets: Optional[dict[str, float]] = None
) -> Iterator[tuple[str, Point, Point]]:
    """Yield (source_id, negative_node, positive_node) for every source."""
    for source in diagram.sources():
        negative, positive = source.get_terminal_positions(terminal_offsets)
        yield source.element_id, negative, positive
