"""Tests for node graph traversal."""

from unittest.mock import MagicMock, patch

import pytest

from curvebool.core.graph import BooleanOperation, Node, NodeGraph, NodeRef, Status, build_graph
from curvebool.core.traversal import GraphTraverser, Span
from curvebool.domain import IntersectionRecord, Point
from curvebool.exceptions import InconsistentGraphError


def make_curve() -> MagicMock:
    """Create a stub curve whose start point lies outside the other curve."""
    curve = MagicMock()
    curve.knots_domain.return_value = (0.0, 1.0)
    curve.point_at.return_value = Point(0.0, 0.0)
    curve.contains.return_value = False
    return curve


@pytest.fixture
def two_records() -> list[IntersectionRecord]:
    """Two crossings: 0.1/0.8 and 0.4/0.6 on subject/clip."""
    return [
        IntersectionRecord(param_a=0.1, param_b=0.8, point=Point(0.0, 0.0)),
        IntersectionRecord(param_a=0.4, param_b=0.6, point=Point(1.0, 0.0)),
    ]


@pytest.fixture
def broken_graph() -> NodeGraph:
    """Graph whose subject list holds two Enter nodes in a row."""
    subject_nodes = [
        Node(parameter=0.1, status=Status.ENTER, subject=True, next=1, prev=1, cross=1, record=0),
        Node(parameter=0.4, status=Status.ENTER, subject=True, next=0, prev=0, cross=0, record=1),
    ]
    clip_nodes = [
        Node(parameter=0.6, status=Status.ENTER, subject=False, next=1, prev=1, cross=1, record=1),
        Node(parameter=0.8, status=Status.EXIT, subject=False, next=0, prev=0, cross=0, record=0),
    ]
    return NodeGraph(subject_nodes=subject_nodes, clip_nodes=clip_nodes)


@pytest.fixture
def linked_graph() -> NodeGraph:
    """Consistent two-crossing graph with alternating statuses."""
    subject_nodes = [
        Node(parameter=0.1, status=Status.ENTER, subject=True, next=1, prev=1, cross=1, record=0),
        Node(parameter=0.4, status=Status.EXIT, subject=True, next=0, prev=0, cross=0, record=1),
    ]
    clip_nodes = [
        Node(parameter=0.6, status=Status.ENTER, subject=False, next=1, prev=1, cross=1, record=1),
        Node(parameter=0.8, status=Status.EXIT, subject=False, next=0, prev=0, cross=0, record=0),
    ]
    return NodeGraph(subject_nodes=subject_nodes, clip_nodes=clip_nodes)


def walk_along(path: list[NodeRef]):
    """Create a walk replacement that visits every node and returns a fixed path."""

    def walk(graph: NodeGraph, start: NodeRef) -> list[NodeRef]:
        for ref in graph.refs(True) + graph.refs(False):
            graph.mark_visited(ref)
        return path

    return walk


# Second pair jumps from the clip back to the subject without a step
SKEWED_PATH = [NodeRef(True, 0), NodeRef(True, 1), NodeRef(False, 0), NodeRef(True, 1)]


class TestGraphTraverser:
    """Tests for GraphTraverser class."""

    def test_intersection_spans(self, two_records: list[IntersectionRecord]) -> None:
        """Test Enter nodes walk forward and produce Enter-to-Exit spans."""
        graph = build_graph(two_records, make_curve(), make_curve(), BooleanOperation.INTERSECTION)
        result = GraphTraverser().traverse(graph)

        assert result.boundaries == [[Span(True, 0.1, 0.4), Span(False, 0.6, 0.8)]]
        assert result.diagnostics == []

    def test_union_spans_wrap(self, two_records: list[IntersectionRecord]) -> None:
        """Test Exit nodes walk backward and produce wrapping spans."""
        graph = build_graph(two_records, make_curve(), make_curve(), BooleanOperation.UNION)
        result = GraphTraverser().traverse(graph)

        assert result.boundaries == [[Span(True, 0.4, 0.1), Span(False, 0.8, 0.6)]]

    def test_path_order(self, two_records: list[IntersectionRecord]) -> None:
        """Test the node path records every visit in walk order."""
        graph = build_graph(two_records, make_curve(), make_curve(), BooleanOperation.INTERSECTION)
        result = GraphTraverser().traverse(graph)

        labels = [ref.label() for ref in result.paths[0]]
        assert labels == ["A0", "A1", "B0", "B1"]

    def test_every_node_visited_once(self, two_records: list[IntersectionRecord]) -> None:
        """Test full coverage without revisits."""
        for operation in BooleanOperation:
            graph = build_graph(two_records, make_curve(), make_curve(), operation)
            GraphTraverser().traverse(graph)

            assert graph.all_visited()
            for subject in (True, False):
                for ref in graph.refs(subject):
                    assert graph.visit_count(ref) == 1

    def test_traverse_resets_visits(self, two_records: list[IntersectionRecord]) -> None:
        """Test that a second traversal of the same graph gives the same result."""
        graph = build_graph(two_records, make_curve(), make_curve(), BooleanOperation.DIFFERENCE)
        traverser = GraphTraverser()

        first = traverser.traverse(graph)
        second = traverser.traverse(graph)

        assert first.boundaries == second.boundaries

    def test_clip_scan_after_subject(self) -> None:
        """Test that unvisited clip nodes start a new walk."""
        subject_nodes = [
            Node(parameter=0.1, status=Status.ENTER, subject=True, next=1, prev=1, cross=None, record=0),
            Node(parameter=0.4, status=Status.EXIT, subject=True, next=0, prev=0, cross=None, record=1),
        ]
        clip_nodes = [
            Node(parameter=0.2, status=Status.ENTER, subject=False, next=1, prev=1, cross=None, record=0),
            Node(parameter=0.7, status=Status.EXIT, subject=False, next=0, prev=0, cross=None, record=1),
        ]
        graph = NodeGraph(subject_nodes=subject_nodes, clip_nodes=clip_nodes)

        result = GraphTraverser().traverse(graph)

        assert result.boundaries == [[Span(True, 0.1, 0.4)], [Span(False, 0.2, 0.7)]]
        assert graph.all_visited()

    def test_same_status_pair_dropped(self, broken_graph: NodeGraph) -> None:
        """Test that a same-status pair is dropped with a diagnostic."""
        logger = MagicMock()
        result = GraphTraverser(logger=logger).traverse(broken_graph)

        assert result.boundaries == [[Span(False, 0.6, 0.8)]]
        assert len(result.diagnostics) == 1

        diagnostic = result.diagnostics[0]
        assert diagnostic.kind == "status"
        assert (diagnostic.first, diagnostic.second) == ("A0", "A1")
        logger.warning.assert_called_once()

    def test_strict_mode_raises(self, broken_graph: NodeGraph) -> None:
        """Test that strict mode refuses inconsistent pairs."""
        with pytest.raises(InconsistentGraphError) as exc_info:
            GraphTraverser(strict=True).traverse(broken_graph)

        assert exc_info.value.first == "A0"
        assert exc_info.value.second == "A1"

    def test_missing_partner_ends_walk(self) -> None:
        """Test that a node without a partner terminates the walk."""
        logger = MagicMock()
        subject_nodes = [
            Node(parameter=0.1, status=Status.ENTER, subject=True, next=1, prev=1, cross=None, record=0),
            Node(parameter=0.4, status=Status.EXIT, subject=True, next=0, prev=0, cross=None, record=1),
        ]
        graph = NodeGraph(subject_nodes=subject_nodes, clip_nodes=[])

        result = GraphTraverser(logger=logger).traverse(graph)

        assert result.boundaries == [[Span(True, 0.1, 0.4)]]
        logger.warning.assert_called_once()
        assert NodeRef(True, 1) in result.paths[0]

    def test_cross_curve_pair_dropped(self, linked_graph: NodeGraph) -> None:
        """Test that a pair with nodes on both curves is dropped with a diagnostic."""
        logger = MagicMock()
        traverser = GraphTraverser(logger=logger)

        with patch.object(traverser, "_walk", side_effect=walk_along(SKEWED_PATH)):
            result = traverser.traverse(linked_graph)

        assert result.boundaries == [[Span(True, 0.1, 0.4)]]
        assert len(result.diagnostics) == 1

        diagnostic = result.diagnostics[0]
        assert diagnostic.kind == "cross_curve"
        assert (diagnostic.first, diagnostic.second) == ("B0", "A1")
        logger.warning.assert_called_once()

    def test_cross_curve_pair_strict(self, linked_graph: NodeGraph) -> None:
        """Test that strict mode refuses a pair spanning both curves."""
        traverser = GraphTraverser(strict=True)

        with patch.object(traverser, "_walk", side_effect=walk_along(SKEWED_PATH)):
            with pytest.raises(InconsistentGraphError) as exc_info:
                traverser.traverse(linked_graph)

        assert exc_info.value.first == "B0"
        assert exc_info.value.second == "A1"
