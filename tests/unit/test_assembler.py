"""Tests for span trimming and region assembly."""

import math

import pytest

from curvebool.core.assembler import SpanAssembler, trim_span
from curvebool.core.traversal import Span
from curvebool.domain import NurbsCurve, Point
from curvebool.exceptions import TrimError


@pytest.fixture
def circle() -> NurbsCurve:
    """Unit circle at the origin."""
    return NurbsCurve.circle(Point(0.0, 0.0), 1.0)


def start_of(curve: NurbsCurve) -> Point:
    return curve.point_at(curve.knots_domain()[0])


def end_of(curve: NurbsCurve) -> Point:
    return curve.point_at(curve.knots_domain()[1])


class TestTrimSpan:
    """Tests for trim_span function."""

    def test_interior_span(self, circle: NurbsCurve) -> None:
        """Test an increasing span gives one piece between the parameters."""
        pieces = trim_span(circle, (0.1, 0.4))

        assert len(pieces) == 1
        assert pieces[0].knots_domain() == pytest.approx((0.1, 0.4))
        assert start_of(pieces[0]).distance_to(circle.point_at(0.1)) < 1e-12
        assert end_of(pieces[0]).distance_to(circle.point_at(0.4)) < 1e-12

    def test_wrapping_span(self, circle: NurbsCurve) -> None:
        """Test a decreasing span gives two pieces joined at the seam."""
        pieces = trim_span(circle, (0.8, 0.2))
        seam = circle.point_at(0.0)

        assert len(pieces) == 2
        wrapped, head = pieces
        assert wrapped.knots_domain() == pytest.approx((0.8, 1.0))
        assert head.knots_domain() == pytest.approx((0.0, 0.2))
        assert start_of(wrapped).distance_to(circle.point_at(0.8)) < 1e-12
        assert end_of(wrapped).distance_to(seam) < 1e-12
        assert start_of(head).distance_to(seam) < 1e-12
        assert end_of(head).distance_to(circle.point_at(0.2)) < 1e-12

    def test_pieces_cover_complement(self, circle: NurbsCurve) -> None:
        """Test interior and wrapping spans split the curve length."""
        inner = trim_span(circle, (0.3, 0.6))
        outer = trim_span(circle, (0.6, 0.3))
        total = sum(piece.length() for piece in inner + outer)

        assert total == pytest.approx(2 * math.pi, rel=1e-4)

    @pytest.mark.parametrize("seam", [0.0, 1e-13, 1.0 - 1e-13])
    def test_interior_span_from_seam(self, circle: NurbsCurve, seam: float) -> None:
        """Test a span starting on the seam is the head up to its end."""
        pieces = trim_span(circle, (seam, 0.25))

        assert len(pieces) == 1
        assert pieces[0].knots_domain() == pytest.approx((0.0, 0.25))
        assert start_of(pieces[0]).distance_to(circle.point_at(0.0)) < 1e-12

    @pytest.mark.parametrize("seam", [0.0, 1e-13, 1.0 - 1e-13])
    def test_wrapping_span_to_seam(self, circle: NurbsCurve, seam: float) -> None:
        """Test a span ending on the seam is the tail from its start."""
        pieces = trim_span(circle, (0.6, seam))

        assert len(pieces) == 1
        assert pieces[0].knots_domain() == pytest.approx((0.6, 1.0))
        assert end_of(pieces[0]).distance_to(circle.point_at(0.0)) < 1e-12

    def test_parameter_outside_domain(self, circle: NurbsCurve) -> None:
        """Test that a span reaching past the domain cannot be trimmed."""
        with pytest.raises(TrimError):
            trim_span(circle, (-0.1, 0.5))


class TestSpanAssembler:
    """Tests for SpanAssembler class."""

    def test_assemble_region(self, circle: NurbsCurve) -> None:
        """Test that spans from both curves concatenate in order."""
        other = NurbsCurve.circle(Point(1.0, 0.0), 1.0)
        assembler = SpanAssembler(circle, other)

        region = assembler.assemble([Span(True, 0.1, 0.4), Span(False, 0.8, 0.2)])

        assert len(region.exterior) == 3
        assert region.interiors == []
        assert start_of(region.exterior.spans[0]).distance_to(circle.point_at(0.1)) < 1e-12
        assert start_of(region.exterior.spans[1]).distance_to(other.point_at(0.8)) < 1e-12

    def test_assemble_empty(self, circle: NurbsCurve) -> None:
        """Test that no spans give an empty boundary."""
        region = SpanAssembler(circle, circle).assemble([])
        assert len(region.exterior) == 0
