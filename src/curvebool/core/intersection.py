"""Curve-curve intersection oracle.

Locates transversal crossings between two planar curves:

1. Both curves are flattened and polyline segment crossings give initial
   parameter guesses.
2. Each guess is refined with Newton iteration on ``A(s) - B(t) = 0``.
3. Tangential contacts are discarded and near-duplicate crossings merged.

The oracle guarantees that every returned record is a real crossing, not a
touch, and that no two records describe the same point.
"""

import math

import structlog

from curvebool.config import SolverConfig
from curvebool.core.geometry import (
    bounds_overlap,
    crossing_sine,
    segment_bounds,
    segment_intersection,
)
from curvebool.domain import IntersectionRecord, NurbsCurve
from curvebool.exceptions import SolverError

logger = structlog.get_logger("curvebool")


class IntersectionOracle:
    """Finds transversal crossings between two closed curves.

    Example:
        oracle = IntersectionOracle(SolverConfig(tolerance=1e-10))
        records = oracle.find_intersections(circle_a, circle_b)
    """

    def __init__(self, config: SolverConfig | None = None) -> None:
        """Initialize the oracle with solver configuration."""
        self.config = config if config is not None else SolverConfig()

    def find_intersections(self, a: NurbsCurve, b: NurbsCurve) -> list[IntersectionRecord]:
        """Find all transversal crossings between curves a and b.

        Args:
            a: First (subject) curve
            b: Second (clip) curve

        Returns:
            Unordered list of unique transversal crossings

        Raises:
            SolverError: If a crossing candidate fails to converge
        """
        candidates = self._find_candidates(a, b)

        records: list[IntersectionRecord] = []
        tangential = 0
        for s, t in candidates:
            refined = self._refine(a, b, s, t)
            if refined is None:
                tangential += 1
                continue

            s, t = refined
            if not self.is_transversal(a, b, s, t):
                tangential += 1
                continue

            point = a.point_at(s)
            if any(
                point.distance_to(r.point) < self.config.minimum_distance for r in records
            ):
                continue

            records.append(IntersectionRecord(param_a=s, param_b=t, point=point))

        logger.debug(
            "Intersections found",
            candidates=len(candidates),
            tangential=tangential,
            crossings=len(records),
        )
        return records

    def is_transversal(self, a: NurbsCurve, b: NurbsCurve, s: float, t: float) -> bool:
        """Check that the curves actually cross at (s, t) rather than touch."""
        sine = crossing_sine(a.tangent_at(s), b.tangent_at(t))
        return sine >= self.config.tangent_tolerance

    def _find_candidates(self, a: NurbsCurve, b: NurbsCurve) -> list[tuple[float, float]]:
        """Collect initial (s, t) guesses from flattened polyline crossings."""
        division = self.config.knot_domain_division
        samples_a = a.flatten(division)
        samples_b = b.flatten(division)

        segments_b = [
            (t0, q0, t1, q1, segment_bounds(q0, q1))
            for (t0, q0), (t1, q1) in zip(samples_b, samples_b[1:])
        ]

        candidates: list[tuple[float, float]] = []
        for (s0, p0), (s1, p1) in zip(samples_a, samples_a[1:]):
            box = segment_bounds(p0, p1)
            for t0, q0, t1, q1, box_b in segments_b:
                if not bounds_overlap(box, box_b):
                    continue
                hit = segment_intersection(p0, p1, q0, q1)
                if hit is None:
                    continue
                u, v = hit
                candidates.append((s0 + u * (s1 - s0), t0 + v * (t1 - t0)))

        return candidates

    def _refine(
        self, a: NurbsCurve, b: NurbsCurve, s: float, t: float
    ) -> tuple[float, float] | None:
        """Refine a crossing guess with Newton iteration.

        Solves ``[A'(s), -B'(t)] [ds, dt]^T = -(A(s) - B(t))`` in the XY plane.

        Returns:
            Converged (s, t) wrapped onto each curve's domain, or None when the
            guess sits on a tangential contact that has no nearby crossing

        Raises:
            SolverError: If the residual stays above tolerance after the
                iteration budget
        """
        config = self.config
        residual = math.inf

        for _ in range(config.max_iterations):
            pa = a.point_at(s)
            pb = b.point_at(t)
            fx = pa.x - pb.x
            fy = pa.y - pb.y
            residual = math.hypot(fx, fy)
            if residual <= config.tolerance:
                return a.wrap_parameter(s), b.wrap_parameter(t)

            da = a.tangent_at(s)
            db = b.tangent_at(t)
            if crossing_sine(da, db) < config.tangent_tolerance:
                return None

            det = db[0] * da[1] - da[0] * db[1]
            ds = (fx * db[1] - db[0] * fy) / det
            dt = (fx * da[1] - da[0] * fy) / det

            s = a.wrap_parameter(s + ds)
            t = b.wrap_parameter(t + dt)

            if abs(ds) + abs(dt) < config.step_size_tolerance:
                break

        pa = a.point_at(s)
        pb = b.point_at(t)
        residual = pa.distance_to(pb)
        if residual <= config.tolerance:
            return a.wrap_parameter(s), b.wrap_parameter(t)

        raise SolverError(config.max_iterations, residual)
