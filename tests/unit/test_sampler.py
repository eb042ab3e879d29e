"""Unit tests for path flattening."""

import math

import pytest

from vectorgeom.core import create_rectangle_path, path_to_contours, path_to_points
from vectorgeom.core.vector import distance
from vectorgeom.domain import ArcTo, CubicTo, LineTo, MoveTo, Point, QuadTo, VectorPath
from vectorgeom.exceptions import InvalidParameterError, SamplingBudgetError


def _path(*segments) -> VectorPath:
    return VectorPath.from_segments(segments)


class TestLines:
    """Straight segments contribute their end points only."""

    def test_rectangle_corners(self) -> None:
        points = path_to_points(create_rectangle_path(0, 0, 10, 10))
        assert points == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    def test_empty_path(self) -> None:
        assert path_to_points(VectorPath.empty()) == []
        assert path_to_contours(VectorPath.empty()) == []


class TestCurves:
    """Curves are sampled uniformly in t by chord length."""

    def test_cubic_sample_count(self) -> None:
        path = _path(MoveTo(Point(0, 0)), CubicTo(Point(3, 5), Point(7, 5), Point(10, 0)))
        points = path_to_points(path, resolution=1.0)
        assert len(points) == 11
        assert points[0] == Point(0, 0)
        assert points[-1] == Point(10, 0)

    def test_quadratic_sample_count(self) -> None:
        path = _path(MoveTo(Point(0, 0)), QuadTo(Point(5, 10), Point(10, 0)))
        points = path_to_points(path, resolution=2.0)
        assert len(points) == 6
        assert points[-1] == Point(10, 0)

    def test_partial_step_rounds_up(self) -> None:
        path = _path(MoveTo(Point(0, 0)), CubicTo(Point(1, 1), Point(2, 1), Point(2.5, 0)))
        assert len(path_to_points(path, resolution=1.0)) == 1 + 3

    def test_zero_chord_curve_gets_one_sample(self) -> None:
        """A loop returning to its start still contributes its end point."""
        path = _path(MoveTo(Point(0, 0)), CubicTo(Point(5, 5), Point(-5, 5), Point(0, 0)))
        assert path_to_points(path, resolution=0.1) == [Point(0, 0), Point(0, 0)]

    def test_finer_resolution_gives_more_points(self) -> None:
        path = _path(MoveTo(Point(0, 0)), CubicTo(Point(3, 5), Point(7, 5), Point(10, 0)))
        coarse = path_to_points(path, resolution=1.0)
        fine = path_to_points(path, resolution=0.1)
        assert len(fine) > len(coarse)


class TestArcs:
    """Arcs are sampled along their ellipse."""

    def test_semicircle_points_on_circle(self) -> None:
        path = _path(MoveTo(Point(0, 0)), ArcTo(Point(20, 0), 10, 10, 0, False, True))
        points = path_to_points(path, resolution=1.0)
        assert len(points) == 1 + math.ceil(math.pi * 10)
        assert points[-1] == Point(20, 0)
        for p in points:
            assert distance(p, Point(10, 0)) == pytest.approx(10.0)

    def test_degenerate_arc_is_a_line(self) -> None:
        path = _path(MoveTo(Point(0, 0)), ArcTo(Point(5, 0), 0, 0))
        assert path_to_points(path) == [Point(0, 0), Point(5, 0)]


class TestContours:
    """Each MoveTo starts a new contour."""

    def test_two_subpaths(self) -> None:
        path = _path(
            MoveTo(Point(0, 0)),
            LineTo(Point(1, 0)),
            MoveTo(Point(5, 5)),
            LineTo(Point(6, 5)),
        )
        contours = path_to_contours(path)
        assert contours == [[Point(0, 0), Point(1, 0)], [Point(5, 5), Point(6, 5)]]
        assert path_to_points(path) == contours[0] + contours[1]


class TestValidation:
    """Invalid resolutions and budgets."""

    @pytest.mark.parametrize("resolution", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_resolution(self, resolution: float) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            path_to_points(create_rectangle_path(0, 0, 1, 1), resolution=resolution)
        assert exc_info.value.name == "resolution"

    def test_budget_exceeded(self) -> None:
        with pytest.raises(SamplingBudgetError) as exc_info:
            path_to_points(create_rectangle_path(0, 0, 10, 10), max_points=3)
        assert exc_info.value.limit == 3
        assert exc_info.value.required == 4

    def test_budget_not_exceeded(self) -> None:
        assert len(path_to_points(create_rectangle_path(0, 0, 10, 10), max_points=4)) == 4
