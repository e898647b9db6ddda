"""Intersection record produced by the intersection oracle."""

from dataclasses import dataclass
from typing import Any

from curvebool.domain.curve import Point


@dataclass(frozen=True, slots=True)
class IntersectionRecord:
    """One transversal crossing between two curves.

    Attributes:
        param_a: Parameter of the crossing on the first (subject) curve
        param_b: Parameter of the crossing on the second (clip) curve
        point: Location of the crossing
    """

    param_a: float
    param_b: float
    point: Point

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "param_a": self.param_a,
            "param_b": self.param_b,
            "point": self.point.to_dict(),
        }
