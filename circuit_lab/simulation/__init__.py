from .circuit_graph import (EDGE_COMPONENT, EDGE_WIRE, CircuitGraph, GraphEdge,
                            build_graph, source_terminals)
from .energization import (energized_by_source, energized_ids,
                           reachable_nodes, solve)
from .hit_testing import element_at, item_at, wire_at

__all__ = [
    'CircuitGraph',
    'GraphEdge',
    'EDGE_WIRE',
    'EDGE_COMPONENT',
    'build_graph',
    'source_terminals',
    'reachable_nodes',
    'energized_by_source',
    'energized_ids',
    'solve',
    'element_at',
    'wire_at',
    'item_at',
]
