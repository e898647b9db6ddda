"""Core processing algorithms for curvebool.

This module contains the core algorithms for:

- Geometry operations (segment intersection, bounding boxes, crossing angles)
- Intersection search (polyline candidates refined by Newton iteration)
- Node graph construction (sorting, cross-linking, Enter/Exit seeding)
- Graph traversal and span assembly into regions
- Batch processing of independent boolean operations

All services are designed to be:
- Free of shared state (safe for use in worker processes)
- Deterministic for a given input and configuration

Key functions:
- segment_intersection: Find where two line segments cross
- build_graph: Build the cross-linked node graph for an operation
- trim_span: Cut a parameter span out of a closed curve
- boolean / union / intersection / difference: One-call shortcuts
- process_pair: Picklable worker function for batch runs

Key classes:
- IntersectionOracle: Finds transversal crossings between two curves
- GraphTraverser: Walks the node graph into closed span sequences
- SpanAssembler: Turns span sequences into regions
- CurveBoolean: Runs the full pipeline
- BatchProcessor: Runs many boolean operations in parallel
"""

from curvebool.core.assembler import SpanAssembler, trim_span
from curvebool.core.batch import BatchProcessor, BatchResult, BooleanTask, process_pair
from curvebool.core.boolean import (
    BooleanResult,
    CurveBoolean,
    boolean,
    difference,
    intersection,
    union,
)
from curvebool.core.geometry import (
    bounds_overlap,
    crossing_sine,
    segment_bounds,
    segment_intersection,
)
from curvebool.core.graph import (
    INVERSION_TABLE,
    BooleanOperation,
    Node,
    NodeGraph,
    NodeRef,
    Status,
    build_graph,
)
from curvebool.core.intersection import IntersectionOracle
from curvebool.core.traversal import (
    GraphTraverser,
    Span,
    TraversalDiagnostic,
    TraversalResult,
)

__all__ = [
    "INVERSION_TABLE",
    # Batch classes
    "BatchProcessor",
    "BatchResult",
    # Graph classes
    "BooleanOperation",
    "BooleanResult",
    "BooleanTask",
    # Engine classes
    "CurveBoolean",
    # Traversal classes
    "GraphTraverser",
    "IntersectionOracle",
    "Node",
    "NodeGraph",
    "NodeRef",
    "Span",
    "SpanAssembler",
    "Status",
    "TraversalDiagnostic",
    "TraversalResult",
    # Functions
    "boolean",
    "bounds_overlap",
    "build_graph",
    "crossing_sine",
    "difference",
    "intersection",
    "process_pair",
    "segment_bounds",
    "segment_intersection",
    "trim_span",
    "union",
]
