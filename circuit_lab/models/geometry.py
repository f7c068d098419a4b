"""
Geometry helpers - Pure Python grid and terminal arithmetic.

This module contains no Qt dependencies. Points are (x, y) tuples in
canvas coordinates (y grows downward).
"""

import math

Point = tuple[float, float]
Segment = tuple[Point, Point]

# Unit direction of the element's terminal axis for each supported rotation.
# Only the four cardinal angles exist, so terminal math stays exact.
ROTATION_VECTORS = {
    0: (1, 0),
    90: (0, 1),
    180: (-1, 0),
    270: (0, -1),
}

VALID_ROTATIONS = tuple(ROTATION_VECTORS)


def validate_rotation(rotation: int) -> int:
    """Return *rotation* unchanged, or raise ValueError if it is not cardinal."""
    if rotation not in ROTATION_VECTORS:
        raise ValueError(f"Invalid rotation {rotation!r}: expected one of {VALID_ROTATIONS}")
    return rotation


def next_rotation(rotation: int) -> int:
    """Rotate by +90 degrees, wrapping 270 back to 0."""
    validate_rotation(rotation)
    return (rotation + 90) % 360


def terminals(position: Point, rotation: int, offset: float) -> tuple[Point, Point]:
    """
    Compute the two terminal coordinates of a two-terminal element.

    Terminal A sits at ``position - offset * dir`` and terminal B at
    ``position + offset * dir``, where ``dir`` is the unit vector for
    the rotation.

    Returns:
        (terminal_a, terminal_b)
    """
    dx, dy = ROTATION_VECTORS[validate_rotation(rotation)]
    x, y = position
    return (x - offset * dx, y - offset * dy), (x + offset * dx, y + offset * dy)


def snap_to_grid(point: Point, grid_size: float) -> Point:
    """Snap a point to the nearest grid intersection."""
    return (round(point[0] / grid_size) * grid_size, round(point[1] / grid_size) * grid_size)


def distance(p: Point, q: Point) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def distance_to_segment(p: Point, a: Point, b: Point) -> float:
    """
    Shortest distance from point *p* to the segment *a*-*b*.

    The projection of *p* onto the segment is clamped to its endpoints,
    and a zero-length segment degrades to a point distance.
    """
    length_sq = (b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2
    if length_sq == 0:
        return distance(p, a)
    t = ((p[0] - a[0]) * (b[0] - a[0]) + (p[1] - a[1]) * (b[1] - a[1])) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(p, (a[0] + t * (b[0] - a[0]), a[1] + t * (b[1] - a[1])))


def l_route(start: Point, end: Point) -> list[Segment]:
    """
    Split a connection into an orthogonal L-shaped route.

    The route runs horizontally from *start* to the corner
    ``(end.x, start.y)`` and then vertically to *end*. Legs of zero
    length are omitted, so an axis-aligned connection yields one
    segment and ``start == end`` yields none.
    """
    corner = (end[0], start[1])
    segments = []
    if start[0] != end[0]:
        segments.append((start, corner))
    if start[1] != end[1]:
        segments.append((corner, end))
    return segments
