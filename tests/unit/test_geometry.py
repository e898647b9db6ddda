"""Tests for planar geometry helpers."""

import pytest

from curvebool.core.geometry import (
    bounds_overlap,
    cross_2d,
    crossing_sine,
    segment_bounds,
    segment_intersection,
)
from curvebool.domain import Point


class TestSegmentIntersection:
    """Tests for segment_intersection function."""

    def test_crossing_diagonals(self) -> None:
        """Test two diagonals crossing at their midpoints."""
        hit = segment_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        assert hit == pytest.approx((0.5, 0.5))

    def test_asymmetric_crossing(self) -> None:
        """Test segment parameters for an off-center crossing."""
        hit = segment_intersection(Point(0, 0), Point(4, 0), Point(1, -1), Point(1, 3))
        assert hit is not None
        t, u = hit
        assert t == pytest.approx(0.25)
        assert u == pytest.approx(0.25)

    def test_parallel_segments(self) -> None:
        """Test that parallel segments never cross."""
        assert segment_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)) is None

    def test_crossing_outside_segment(self) -> None:
        """Test that line crossings beyond a segment end are rejected."""
        assert segment_intersection(Point(0, 0), Point(1, 0), Point(2, -1), Point(2, 1)) is None

    def test_shared_endpoint(self) -> None:
        """Test that endpoints are inclusive."""
        hit = segment_intersection(Point(0, 0), Point(1, 0), Point(1, 0), Point(1, 1))
        assert hit == pytest.approx((1.0, 0.0))


class TestBounds:
    """Tests for bounding box helpers."""

    def test_segment_bounds(self) -> None:
        """Test bounds ordering is independent of direction."""
        assert segment_bounds(Point(3, -1), Point(1, 2)) == (1, -1, 3, 2)

    def test_overlap(self) -> None:
        """Test overlapping boxes."""
        assert bounds_overlap((0, 0, 2, 2), (1, 1, 3, 3))

    def test_touching_counts(self) -> None:
        """Test that boxes sharing an edge overlap."""
        assert bounds_overlap((0, 0, 1, 1), (1, 0, 2, 1))

    def test_degenerate_box(self) -> None:
        """Test a zero-height box against a box spanning it."""
        assert bounds_overlap((0, 5, 8, 5), (6, 0, 6, 6))

    def test_disjoint(self) -> None:
        """Test separated boxes."""
        assert not bounds_overlap((0, 0, 1, 1), (2, 2, 3, 3))


class TestCrossingAngle:
    """Tests for cross_2d and crossing_sine."""

    def test_cross_2d_sign(self) -> None:
        """Test orientation sign of the planar cross product."""
        assert cross_2d((1, 0, 0), (0, 1, 0)) == 1
        assert cross_2d((0, 1, 0), (1, 0, 0)) == -1

    def test_perpendicular(self) -> None:
        """Test perpendicular vectors have unit sine."""
        assert crossing_sine((2, 0, 0), (0, 5, 0)) == pytest.approx(1.0)

    def test_parallel(self) -> None:
        """Test parallel and anti-parallel vectors have zero sine."""
        assert crossing_sine((1, 1, 0), (2, 2, 0)) == pytest.approx(0.0)
        assert crossing_sine((1, 1, 0), (-1, -1, 0)) == pytest.approx(0.0)

    def test_zero_vector(self) -> None:
        """Test that a zero-length vector gives zero sine."""
        assert crossing_sine((0, 0, 0), (1, 0, 0)) == 0.0
