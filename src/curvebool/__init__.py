"""Curvebool - Boolean operations on closed NURBS curves.

Curvebool computes the boundaries of the union, intersection and difference of
two closed planar NURBS curves. Crossings are located numerically, linked into a
Greiner-Hormann style node graph and traversed to produce closed regions made of
trimmed curve spans.

Example:
    >>> from curvebool import NurbsCurve, Point, intersection
    >>> a = NurbsCurve.circle(Point(0.0, 0.0), 1.0)
    >>> b = NurbsCurve.circle(Point(0.0, 1.0), 1.0)
    >>> regions = intersection(a, b)
    >>> len(regions)
    1
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from curvebool.core.boolean import (
    BooleanOperation,
    BooleanResult,
    CurveBoolean,
    boolean,
    difference,
    intersection,
    union,
)
from curvebool.domain import CompoundCurve, NurbsCurve, Point, Region

__all__ = [
    "BooleanOperation",
    "BooleanResult",
    "CompoundCurve",
    "CurveBoolean",
    "NurbsCurve",
    "Point",
    "Region",
    "__author__",
    "__version__",
    "boolean",
    "difference",
    "intersection",
    "union",
]
