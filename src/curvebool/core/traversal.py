"""Traversal of the cross-linked node graph.

Walks the graph produced by :func:`curvebool.core.graph.build_graph` and turns
it into closed sequences of parameter spans. From an unvisited start node the
walk follows ``next`` on ENTER nodes and ``prev`` on EXIT nodes, then jumps to
the cross-linked partner on the other curve, until it comes back to a visited
node. Each walk yields one closed boundary.
"""

from dataclasses import dataclass, field

import structlog

from curvebool.core.graph import NodeGraph, NodeRef, Status
from curvebool.exceptions import InconsistentGraphError


@dataclass(frozen=True)
class Span:
    """A parameter interval to cut from one of the two curves.

    Attributes:
        subject: True to cut from the subject curve, False for the clip curve
        start: Parameter of the ENTER node
        end: Parameter of the EXIT node
    """

    subject: bool
    start: float
    end: float


@dataclass(frozen=True)
class TraversalDiagnostic:
    """A traversal pair that was dropped instead of assembled.

    Attributes:
        kind: "status" for same-status pairs, "cross_curve" for pairs whose
            nodes live on different curves
        first: Label of the first node of the pair
        second: Label of the second node of the pair
        message: Human-readable description
    """

    kind: str
    first: str
    second: str
    message: str


@dataclass
class TraversalResult:
    """Spans grouped per closed boundary, plus dropped-pair diagnostics."""

    boundaries: list[list[Span]] = field(default_factory=list)
    paths: list[list[NodeRef]] = field(default_factory=list)
    diagnostics: list[TraversalDiagnostic] = field(default_factory=list)


class GraphTraverser:
    """Produces closed span sequences from a node graph.

    Example:
        traverser = GraphTraverser()
        result = traverser.traverse(graph)
        for spans in result.boundaries:
            ...
    """

    def __init__(
        self,
        strict: bool = False,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize traverser.

        Args:
            strict: Raise InconsistentGraphError instead of dropping bad pairs
            logger: Logger for diagnostics (module logger if None)
        """
        self.strict = strict
        self._logger = logger if logger is not None else structlog.get_logger("curvebool")

    def traverse(self, graph: NodeGraph) -> TraversalResult:
        """Walk the graph until every node is visited.

        Args:
            graph: Node graph; its visitation state is reset first

        Returns:
            TraversalResult with one span list per closed boundary
        """
        graph.reset()
        result = TraversalResult()

        while True:
            start = self._next_unvisited(graph)
            if start is None:
                break

            path = self._walk(graph, start)
            spans = self._pair_spans(graph, path, result.diagnostics)
            result.paths.append(path)
            if spans:
                result.boundaries.append(spans)

        return result

    def _next_unvisited(self, graph: NodeGraph) -> NodeRef | None:
        """Scan the subject list, then the clip list, for an unvisited node."""
        for subject in (True, False):
            nodes = graph.nodes(subject)
            if not nodes:
                continue
            origin = NodeRef(subject, 0)
            current = origin
            while True:
                if not graph.is_visited(current):
                    return current
                current = NodeRef(subject, graph.node(current).next)
                if current == origin:
                    break
        return None

    def _walk(self, graph: NodeGraph, start: NodeRef) -> list[NodeRef]:
        """Follow status-directed links and cross-links back to a visited node."""
        path: list[NodeRef] = []
        current = start

        while not graph.is_visited(current):
            graph.mark_visited(current)
            path.append(current)

            node = graph.node(current)
            step = node.next if node.status is Status.ENTER else node.prev
            following = NodeRef(current.subject, step)
            graph.mark_visited(following)
            path.append(following)

            partner = graph.node(following).cross
            if partner is None:
                self._logger.warning("Node has no cross partner", node=following.label())
                break
            current = NodeRef(not following.subject, partner)

        return path

    def _pair_spans(
        self,
        graph: NodeGraph,
        path: list[NodeRef],
        diagnostics: list[TraversalDiagnostic],
    ) -> list[Span]:
        """Consume a path in consecutive pairs and orient each as ENTER -> EXIT."""
        spans: list[Span] = []

        for first, second in zip(path[::2], path[1::2]):
            n0 = graph.node(first)
            n1 = graph.node(second)

            if first.subject != second.subject:
                self._drop(
                    diagnostics,
                    "cross_curve",
                    first,
                    second,
                    "pair spans both curves",
                )
                continue

            if n0.status is Status.ENTER and n1.status is Status.EXIT:
                spans.append(Span(first.subject, n0.parameter, n1.parameter))
            elif n0.status is Status.EXIT and n1.status is Status.ENTER:
                spans.append(Span(first.subject, n1.parameter, n0.parameter))
            else:
                self._drop(
                    diagnostics,
                    "status",
                    first,
                    second,
                    f"both nodes are {n0.status.value}",
                )

        return spans

    def _drop(
        self,
        diagnostics: list[TraversalDiagnostic],
        kind: str,
        first: NodeRef,
        second: NodeRef,
        message: str,
    ) -> None:
        if self.strict:
            raise InconsistentGraphError(first.label(), second.label())

        self._logger.warning(
            "Dropped inconsistent traversal pair",
            kind=kind,
            first=first.label(),
            second=second.label(),
            reason=message,
        )
        diagnostics.append(
            TraversalDiagnostic(
                kind=kind, first=first.label(), second=second.label(), message=message
            )
        )
