"""Core geometric types for curve representation.

This module defines the fundamental geometric types used throughout curvebool:
- Point: A point in the XY plane (with an optional, ignored z coordinate)
- NurbsCurve: An immutable rational B-spline curve
"""

import math
from dataclasses import dataclass, field
from typing import Any

from curvebool.domain._nurbs import KNOT_TOLERANCE, Homogeneous, de_boor, split
from curvebool.exceptions import InvalidCurveError, TrimError

_SQRT_HALF = math.sqrt(0.5)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in model space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Z coordinate, carried through but ignored by planar predicates
    """

    x: float
    y: float
    z: float = 0.0

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance in the XY plane."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x, y and z fields
        """
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional z fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], z=data.get("z", 0.0))


@dataclass(frozen=True)
class NurbsCurve:
    """An immutable non-uniform rational B-spline curve.

    The curve is defined over the domain ``[knots[degree], knots[-degree - 1]]``.
    Closed curves (start point equal to end point) are treated as circular:
    their domain wraps around at the seam.

    Attributes:
        control_points: Control polygon
        weights: One positive weight per control point
        knots: Non-decreasing knot vector of length ``len(control_points) + degree + 1``
        degree: Polynomial degree (>= 1)
    """

    control_points: tuple[Point, ...]
    weights: tuple[float, ...]
    knots: tuple[float, ...]
    degree: int
    _homogeneous: list[Homogeneous] = field(
        default_factory=list, repr=False, compare=False, init=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "control_points", tuple(self.control_points))
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))
        object.__setattr__(self, "knots", tuple(float(k) for k in self.knots))

        if self.degree < 1:
            raise InvalidCurveError(f"degree must be >= 1, got {self.degree}")
        if len(self.control_points) < self.degree + 1:
            raise InvalidCurveError(
                f"degree {self.degree} needs at least {self.degree + 1} control points, "
                f"got {len(self.control_points)}"
            )
        if len(self.weights) != len(self.control_points):
            raise InvalidCurveError(
                f"expected {len(self.control_points)} weights, got {len(self.weights)}"
            )
        expected_knots = len(self.control_points) + self.degree + 1
        if len(self.knots) != expected_knots:
            raise InvalidCurveError(
                f"expected {expected_knots} knots, got {len(self.knots)}"
            )
        if any(b < a for a, b in zip(self.knots, self.knots[1:])):
            raise InvalidCurveError("knot vector must be non-decreasing")
        if any(w <= 0.0 for w in self.weights):
            raise InvalidCurveError("weights must be positive")

        start, end = self.knots_domain()
        if end <= start:
            raise InvalidCurveError("curve domain is empty")

        homogeneous = [
            (p.x * w, p.y * w, p.z * w, w)
            for p, w in zip(self.control_points, self.weights)
        ]
        object.__setattr__(self, "_homogeneous", homogeneous)

    @classmethod
    def circle(cls, center: Point, radius: float) -> "NurbsCurve":
        """Create a full circle as a closed rational quadratic curve.

        The circle starts at angle 0 (rightmost point), runs counter-clockwise
        and is parameterized over ``[0, 1]`` with one knot span per quadrant.

        Args:
            center: Circle center
            radius: Circle radius (> 0)

        Returns:
            Closed NurbsCurve
        """
        if radius <= 0.0:
            raise InvalidCurveError(f"radius must be positive, got {radius}")

        offsets = [
            (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0),
            (-1, -1), (0, -1), (1, -1), (1, 0),
        ]
        points = tuple(
            Point(center.x + dx * radius, center.y + dy * radius, center.z)
            for dx, dy in offsets
        )
        weights = tuple(1.0 if i % 2 == 0 else _SQRT_HALF for i in range(len(points)))
        knots = (0.0, 0.0, 0.0, 0.25, 0.25, 0.5, 0.5, 0.75, 0.75, 1.0, 1.0, 1.0)
        return cls(control_points=points, weights=weights, knots=knots, degree=2)

    @classmethod
    def polygon(cls, points: list[Point]) -> "NurbsCurve":
        """Create a closed degree-1 curve through the given vertices.

        Each edge occupies an equal share of the ``[0, 1]`` domain.

        Args:
            points: Polygon vertices in order, without repeating the first one

        Returns:
            Closed NurbsCurve
        """
        if len(points) < 3:
            raise InvalidCurveError(f"polygon needs at least 3 vertices, got {len(points)}")

        n = len(points)
        control = (*points, points[0])
        knots = (0.0, *(i / n for i in range(n)), 1.0, 1.0)
        return cls(
            control_points=control,
            weights=tuple(1.0 for _ in control),
            knots=knots,
            degree=1,
        )

    def knots_domain(self) -> tuple[float, float]:
        """Return the (start, end) parameter domain."""
        return self.knots[self.degree], self.knots[-self.degree - 1]

    def is_closed(self, tolerance: float = 1e-9) -> bool:
        """Check whether the curve's start and end points coincide."""
        start, end = self.knots_domain()
        return self.point_at(start).distance_to(self.point_at(end)) <= tolerance

    def wrap_parameter(self, t: float) -> float:
        """Map t onto the domain.

        Closed curves wrap onto the circular domain ``[start, end)``; open
        curves are clamped to ``[start, end]``.
        """
        start, end = self.knots_domain()
        if self.is_closed():
            return start + (t - start) % (end - start)
        return min(max(t, start), end)

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t.

        Args:
            t: Parameter value; clamped to the domain

        Returns:
            Point on the curve
        """
        start, end = self.knots_domain()
        t = min(max(t, start), end)
        x, y, z, w = de_boor(self._homogeneous, list(self.knots), self.degree, t)
        return Point(x / w, y / w, z / w)

    def tangent_at(self, t: float) -> tuple[float, float, float]:
        """First derivative at t by finite differences.

        Uses a central difference inside the domain and a one-sided
        difference at the domain ends.

        Args:
            t: Parameter value

        Returns:
            Derivative vector (dx, dy, dz)
        """
        start, end = self.knots_domain()
        h = (end - start) * 1e-7
        t0 = max(start, t - h)
        t1 = min(end, t + h)
        p0 = self.point_at(t0)
        p1 = self.point_at(t1)
        dt = t1 - t0
        return ((p1.x - p0.x) / dt, (p1.y - p0.y) / dt, (p1.z - p0.z) / dt)

    def flatten(self, division: int = 16) -> list[tuple[float, Point]]:
        """Sample the curve uniformly within each non-empty knot span.

        Args:
            division: Number of segments per knot span

        Returns:
            List of (parameter, point) pairs, including both domain ends
        """
        if division < 1:
            raise ValueError("division must be >= 1")

        start, end = self.knots_domain()
        breaks = sorted({k for k in self.knots if start <= k <= end})

        samples: list[tuple[float, Point]] = [(start, self.point_at(start))]
        for lo, hi in zip(breaks, breaks[1:]):
            for i in range(1, division + 1):
                t = hi if i == division else lo + (hi - lo) * (i / division)
                samples.append((t, self.point_at(t)))
        return samples

    def length(self, division: int = 64) -> float:
        """Approximate arc length by the flattened polyline length."""
        samples = self.flatten(division)
        return sum(
            p0.distance_to(p1)
            for (_, p0), (_, p1) in zip(samples, samples[1:])
        )

    def contains(self, point: Point, division: int = 16) -> bool:
        """Check if a point is inside the region bounded by this curve.

        Casts a ray from the point to the right and counts crossings with the
        flattened boundary. Odd count means inside, even means outside.

        Args:
            point: Point to test
            division: Flattening density (segments per knot span)

        Returns:
            True if point is inside the curve, False otherwise
        """
        polygon = [p for _, p in self.flatten(division)]
        n = len(polygon)
        if n < 3:
            return False

        inside = False
        x, y = point.x, point.y
        j = n - 1
        for i in range(n):
            xi, yi = polygon[i].x, polygon[i].y
            xj, yj = polygon[j].x, polygon[j].y

            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside

            j = i

        return inside

    def try_trim(self, t: float) -> tuple["NurbsCurve", "NurbsCurve"]:
        """Split the curve at t into (head, tail).

        Args:
            t: Split parameter, strictly inside the domain by more than the
                knot tolerance

        Returns:
            Tuple of (head, tail) curves covering [start, t] and [t, end]

        Raises:
            TrimError: If t is not strictly inside the domain, or so close to an
                end that the split would leave an empty piece
        """
        start, end = self.knots_domain()
        if not start + KNOT_TOLERANCE < t < end - KNOT_TOLERANCE:
            raise TrimError(t, (start, end))

        (head_ctrl, head_knots), (tail_ctrl, tail_knots) = split(
            self._homogeneous, list(self.knots), self.degree, t
        )
        return (
            self._from_homogeneous(head_ctrl, head_knots),
            self._from_homogeneous(tail_ctrl, tail_knots),
        )

    def _from_homogeneous(
        self, control: list[Homogeneous], knots: list[float]
    ) -> "NurbsCurve":
        points = tuple(Point(x / w, y / w, z / w) for x, y, z, w in control)
        weights = tuple(w for *_, w in control)
        return NurbsCurve(
            control_points=points, weights=weights, knots=tuple(knots), degree=self.degree
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the curve
        """
        return {
            "degree": self.degree,
            "knots": list(self.knots),
            "weights": list(self.weights),
            "control_points": [p.to_dict() for p in self.control_points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NurbsCurve":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a curve

        Returns:
            NurbsCurve instance
        """
        return cls(
            control_points=tuple(Point.from_dict(p) for p in data["control_points"]),
            weights=tuple(data["weights"]),
            knots=tuple(data["knots"]),
            degree=data["degree"],
        )
