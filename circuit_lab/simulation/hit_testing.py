"""Point queries against the diagram: which element or wire is under the pointer.

All functions are read-only. A miss returns None; absence is a normal
outcome, not an error.
"""

from typing import Optional

from models.diagram import DiagramModel
from models.element import ElementData
from models.geometry import Point, distance, distance_to_segment
from models.settings import EditorSettings
from models.wire import WireData


def element_at(diagram: DiagramModel, point: Point, hit_radius: float) -> Optional[ElementData]:
    """Return the topmost element whose centre is strictly within *hit_radius*.

    Elements are scanned from the last placed to the first, so when several
    overlap the one drawn on top wins.
    """
    for element in reversed(diagram.elements):
        if distance(element.position, point) < hit_radius:
            return element
    return None


def wire_at(diagram: DiagramModel, point: Point, tolerance: float) -> Optional[WireData]:
    """Return the first wire whose segment passes strictly within *tolerance*."""
    for wire in diagram.wires:
        if distance_to_segment(point, wire.start, wire.end) < tolerance:
            return wire
    return None


def item_at(diagram: DiagramModel, point: Point, settings: EditorSettings) -> Optional[str]:
    """Return the id of the element under *point*, else of the wire, else None."""
    element = element_at(diagram, point, settings.hit_radius)
    if element is not None:
        return element.element_id
    wire = wire_at(diagram, point, settings.wire_tolerance)
    if wire is not None:
        return wire.wire_id
    return None
