"""Boolean operations on closed curves.

This module coordinates the full pipeline for one boolean call:

    curves -> IntersectionOracle -> build_graph -> GraphTraverser -> SpanAssembler

Key components:
- CurveBoolean: Engine holding settings and logger
- BooleanResult: Regions plus the final node graph and diagnostics
- boolean / union / intersection / difference: Module-level shortcuts
"""

import time
from dataclasses import dataclass, field

import structlog

from curvebool.config import CurveboolSettings, SolverConfig
from curvebool.core.assembler import SpanAssembler
from curvebool.core.graph import BooleanOperation, NodeGraph, build_graph
from curvebool.core.intersection import IntersectionOracle
from curvebool.core.traversal import GraphTraverser, TraversalDiagnostic
from curvebool.domain import IntersectionRecord, NurbsCurve, Region
from curvebool.exceptions import CurveboolError

__all__ = [
    "BooleanOperation",
    "BooleanResult",
    "CurveBoolean",
    "boolean",
    "difference",
    "intersection",
    "union",
]


@dataclass
class BooleanResult:
    """Outcome of one boolean call.

    Attributes:
        operation: Operation that was applied
        regions: Closed boundaries, in traversal order
        graph: Final node graph (visitation state included) for diagnostics
        intersections: Crossings reported by the oracle
        diagnostics: Traversal pairs dropped as inconsistent
    """

    operation: BooleanOperation
    regions: list[Region]
    graph: NodeGraph
    intersections: list[IntersectionRecord] = field(default_factory=list)
    diagnostics: list[TraversalDiagnostic] = field(default_factory=list)

    @property
    def has_diagnostics(self) -> bool:
        """True if any traversal pair was dropped (near-degenerate input)."""
        return bool(self.diagnostics)


class CurveBoolean:
    """Computes union, intersection and difference of two closed curves.

    Example:
        engine = CurveBoolean()
        regions = engine.union(circle_a, circle_b)
        result = engine.boolean(BooleanOperation.DIFFERENCE, circle_a, circle_b)
        result.graph  # node graph for visualization
    """

    def __init__(
        self,
        settings: CurveboolSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize boolean engine.

        Args:
            settings: Curvebool settings (defaults if None)
            logger: Logger (module logger if None)
        """
        self.settings = settings if settings is not None else CurveboolSettings()
        self.logger = logger if logger is not None else structlog.get_logger("curvebool")
        self.oracle = IntersectionOracle(self.settings.solver)
        self.traverser = GraphTraverser(
            strict=self.settings.traversal.strict,
            logger=self.logger,
        )

    def union(self, subject: NurbsCurve, clip: NurbsCurve) -> list[Region]:
        """Regions covered by either curve."""
        return self.boolean(BooleanOperation.UNION, subject, clip).regions

    def intersection(self, subject: NurbsCurve, clip: NurbsCurve) -> list[Region]:
        """Regions covered by both curves."""
        return self.boolean(BooleanOperation.INTERSECTION, subject, clip).regions

    def difference(self, subject: NurbsCurve, clip: NurbsCurve) -> list[Region]:
        """Regions covered by subject but not by clip."""
        return self.boolean(BooleanOperation.DIFFERENCE, subject, clip).regions

    def boolean(
        self,
        operation: BooleanOperation,
        subject: NurbsCurve,
        clip: NurbsCurve,
    ) -> BooleanResult:
        """Apply a boolean operation to two closed curves.

        Args:
            operation: Operation to apply
            subject: First curve
            clip: Second curve

        Returns:
            BooleanResult with regions, node graph and diagnostics

        Raises:
            SolverError: If crossing refinement does not converge
            NoIntersectionError: If fewer than two crossings exist
            OddIntersectionCountError: If the crossing count is odd
            TrimError: If a span parameter falls outside a curve domain
            InconsistentGraphError: In strict mode, on a bad traversal pair
        """
        start_time = time.time()
        log = self.logger.bind(operation=operation.value)

        try:
            records = self.oracle.find_intersections(subject, clip)
            graph = build_graph(records, subject, clip, operation, self.settings.solver)
            log.debug("Graph built", nodes=len(graph))

            traversal = self.traverser.traverse(graph)

            assembler = SpanAssembler(subject, clip)
            regions = [assembler.assemble(spans) for spans in traversal.boundaries]
        except CurveboolError as e:
            log.error("Boolean operation failed", error=str(e), error_type=type(e).__name__)
            raise

        duration_ms = (time.time() - start_time) * 1000
        log.info(
            "Boolean operation complete",
            intersections=len(records),
            regions=len(regions),
            diagnostics=len(traversal.diagnostics),
            duration_ms=round(duration_ms, 2),
        )

        return BooleanResult(
            operation=operation,
            regions=regions,
            graph=graph,
            intersections=records,
            diagnostics=traversal.diagnostics,
        )


def boolean(
    operation: BooleanOperation,
    subject: NurbsCurve,
    clip: NurbsCurve,
    config: SolverConfig | None = None,
) -> list[Region]:
    """Apply a boolean operation with default settings and optional solver config."""
    settings = CurveboolSettings(solver=config) if config is not None else CurveboolSettings()
    return CurveBoolean(settings).boolean(operation, subject, clip).regions


def union(
    subject: NurbsCurve, clip: NurbsCurve, config: SolverConfig | None = None
) -> list[Region]:
    """Union of two closed curves."""
    return boolean(BooleanOperation.UNION, subject, clip, config)


def intersection(
    subject: NurbsCurve, clip: NurbsCurve, config: SolverConfig | None = None
) -> list[Region]:
    """Intersection of two closed curves."""
    return boolean(BooleanOperation.INTERSECTION, subject, clip, config)


def difference(
    subject: NurbsCurve, clip: NurbsCurve, config: SolverConfig | None = None
) -> list[Region]:
    """Difference subject minus clip."""
    return boolean(BooleanOperation.DIFFERENCE, subject, clip, config)
