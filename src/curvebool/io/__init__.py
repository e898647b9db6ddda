"""Curve document I/O layer for curvebool.

This module handles reading curve documents and writing boolean results as
JSON. It provides a clean abstraction layer between the file formats and the
domain models.

Key responsibilities:
- Load and validate JSON curve documents (circle, polygon, nurbs entries)
- Build NurbsCurve domain models from validated entries
- Write regions, crossings and node graphs with a predictable naming convention

Key classes:
- CurveReader: Load curve documents
- RegionWriter: Save boolean results
"""

from curvebool.io.reader import CurveDocument, CurveReader
from curvebool.io.writer import RegionWriter, sample_boundary

__all__ = [
    "CurveDocument",
    "CurveReader",
    "RegionWriter",
    "sample_boundary",
]
