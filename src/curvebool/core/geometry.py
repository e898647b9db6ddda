"""Geometric operations for intersection search.

This module provides core mathematical utilities for:
- Line segment intersection (parametric form)
- Bounding boxes of polyline segments
- Planar cross products and crossing angles

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math

from curvebool.domain import Point

Vector = tuple[float, float, float]


def segment_intersection(
    p1: Point, p2: Point, p3: Point, p4: Point
) -> tuple[float, float] | None:
    """Find where two line segments cross.

    Uses parametric line equations ``p1 + t (p2 - p1)`` and
    ``p3 + u (p4 - p3)``. Returns None if the segments are parallel or if the
    crossing lies outside either segment. Endpoints are inclusive.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Tuple (t, u) of segment parameters in [0, 1], or None

    Examples:
        >>> segment_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        (0.5, 0.5)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Parallel or coincident
    if abs(denom) < 1e-14:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return t, u

    return None


def segment_bounds(p1: Point, p2: Point) -> tuple[float, float, float, float]:
    """Bounding box of a segment as (min_x, min_y, max_x, max_y)."""
    return (min(p1.x, p2.x), min(p1.y, p2.y), max(p1.x, p2.x), max(p1.y, p2.y))


def bounds_overlap(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> bool:
    """Check whether two bounding boxes overlap (touching counts)."""
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


def cross_2d(a: Vector, b: Vector) -> float:
    """Z component of the cross product of two planar vectors."""
    return a[0] * b[1] - a[1] * b[0]


def crossing_sine(a: Vector, b: Vector) -> float:
    """Absolute sine of the angle between two planar vectors.

    Returns 0.0 when either vector has zero length.
    """
    norm = math.hypot(a[0], a[1]) * math.hypot(b[0], b[1])
    if norm == 0.0:
        return 0.0
    return abs(cross_2d(a, b)) / norm
