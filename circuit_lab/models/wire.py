"""
WireData - Pure Python data model for circuit wires.

This module contains no Qt dependencies. Endpoints are stored as
tuples (x, y) rather than QPointF.
"""

from dataclasses import dataclass

from .geometry import Point


@dataclass
class WireData:
    """
    Pure Python data class representing a straight wire segment.

    A wire is a plain graph edge between two grid-aligned points. It is
    connected to whatever else shares one of its endpoint coordinates.
    """

    wire_id: str
    start: Point
    end: Point

    def __repr__(self) -> str:
        return f"WireData({self.wire_id}: {self.start} -> {self.end})"
