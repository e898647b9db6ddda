"""Region types produced by boolean operations.

A Region is a closed boundary expressed as a concatenation of trimmed curve
spans (a CompoundCurve), optionally with interior holes.
"""

from dataclasses import dataclass, field
from typing import Any

from curvebool.domain.curve import NurbsCurve, Point


@dataclass
class CompoundCurve:
    """An ordered sequence of curve spans forming one boundary.

    Each span keeps the parametric direction of the curve it was cut from.

    Attributes:
        spans: Trimmed curve segments in traversal order
    """

    spans: list[NurbsCurve] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.spans)

    def __iter__(self):
        return iter(self.spans)

    def length(self, division: int = 64) -> float:
        """Total arc length of all spans."""
        return sum(span.length(division) for span in self.spans)

    def start_points(self) -> list[Point]:
        """Start point of every span."""
        return [span.point_at(span.knots_domain()[0]) for span in self.spans]

    def end_points(self) -> list[Point]:
        """End point of every span."""
        return [span.point_at(span.knots_domain()[1]) for span in self.spans]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"spans": [span.to_dict() for span in self.spans]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompoundCurve":
        """Deserialize from dictionary."""
        return cls(spans=[NurbsCurve.from_dict(s) for s in data["spans"]])


@dataclass
class Region:
    """A closed planar region.

    Attributes:
        exterior: Outer boundary
        interiors: Hole boundaries (always empty for boolean results)
    """

    exterior: CompoundCurve
    interiors: list[CompoundCurve] = field(default_factory=list)

    def boundary_length(self, division: int = 64) -> float:
        """Sum of exterior and interior boundary lengths."""
        return self.exterior.length(division) + sum(
            hole.length(division) for hole in self.interiors
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "exterior": self.exterior.to_dict(),
            "interiors": [hole.to_dict() for hole in self.interiors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Region":
        """Deserialize from dictionary."""
        return cls(
            exterior=CompoundCurve.from_dict(data["exterior"]),
            interiors=[CompoundCurve.from_dict(h) for h in data.get("interiors", [])],
        )
