"""Domain models for curvebool.

This module contains the value types exchanged by the boolean engine. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of the algorithms that consume them

Key classes:
- Point: A point in the XY plane
- NurbsCurve: A rational B-spline with evaluation, containment and trimming
- IntersectionRecord: One transversal crossing between two curves
- CompoundCurve: A boundary made of trimmed spans
- Region: A closed boundary with optional holes
"""

from curvebool.domain.curve import NurbsCurve, Point
from curvebool.domain.intersection import IntersectionRecord
from curvebool.domain.region import CompoundCurve, Region

__all__: list[str] = [
    "CompoundCurve",
    "IntersectionRecord",
    "NurbsCurve",
    "Point",
    "Region",
]
