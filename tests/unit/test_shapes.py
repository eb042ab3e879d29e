"""Unit tests for shape generators.

Tests cover:
- Rectangle segment structure and radius clamping
- Ellipse accuracy, arcs and donuts
- Regular polygons with and without rounded corners
- Stars
- Parameter validation
"""

import math

import pytest

from vectorgeom.core import (
    RECTANGLE_CORNER_FACTOR,
    create_ellipse_path,
    create_polygon_path,
    create_rectangle_path,
    create_star_path,
    cubic_bezier_point,
)
from vectorgeom.core.vector import distance
from vectorgeom.domain import ArcTo, CubicTo, LineTo, MoveTo, Point, QuadTo, WindingRule
from vectorgeom.exceptions import InvalidParameterError


class TestRectangle:
    """Tests for create_rectangle_path."""

    def test_sharp_rectangle_is_exact(self) -> None:
        """Zero radius gives exactly the four corners."""
        path = create_rectangle_path(0, 0, 100, 50)
        assert path.commands() == "MLLLZ"
        assert path.anchor_points() == [
            Point(0, 0),
            Point(100, 0),
            Point(100, 50),
            Point(0, 50),
        ]
        assert path.closed
        assert path.winding_rule == WindingRule.NONZERO

    def test_rounded_rectangle_structure(self) -> None:
        path = create_rectangle_path(0, 0, 100, 50, 10)
        assert path.commands() == "MLCLCLCLCZ"
        assert path.segments[0] == MoveTo(Point(10, 0))
        assert path.segments[1] == LineTo(Point(90, 0))

    def test_corner_handles_use_factor(self) -> None:
        """Corner handles sit RECTANGLE_CORNER_FACTOR * r from the corner."""
        r = 10
        path = create_rectangle_path(0, 0, 100, 50, r)
        top_right = path.segments[2]
        assert isinstance(top_right, CubicTo)
        assert top_right.control1 == Point(100 - r * RECTANGLE_CORNER_FACTOR, 0)
        assert top_right.control2 == Point(100, r * RECTANGLE_CORNER_FACTOR)
        assert top_right.end == Point(100, 10)

    def test_radius_clamped_to_half_short_side(self) -> None:
        path = create_rectangle_path(0, 0, 100, 50, 40)
        assert path.segments[0] == MoveTo(Point(25, 0))
        assert path.segments[1] == LineTo(Point(75, 0))

    def test_negative_radius_clamped_to_zero(self) -> None:
        path = create_rectangle_path(0, 0, 100, 50, -5)
        assert path.commands() == "MLLLZ"

    def test_per_corner_radii(self) -> None:
        """Only corners with a positive radius get a curve."""
        path = create_rectangle_path(0, 0, 100, 50, [0, 5, 0, 5])
        assert path.commands() == "MLCLLCZ"
        assert path.segments[0] == MoveTo(Point(0, 0))

    def test_radius_sequence_must_have_four_values(self) -> None:
        with pytest.raises(InvalidParameterError):
            create_rectangle_path(0, 0, 10, 10, [1, 2, 3])

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            create_rectangle_path(0, 0, -10, 10)
        assert exc_info.value.name == "width"


class TestEllipse:
    """Tests for create_ellipse_path."""

    def test_full_ellipse_structure(self) -> None:
        path = create_ellipse_path(50, 50, 40, 20)
        assert path.commands() == "MCCCCZ"
        assert path.segments[0] == MoveTo(Point(90, 50))
        assert path.segments[-2].end_point == Point(90, 50)

    @pytest.mark.parametrize("rx,ry", [(50.0, 50.0), (80.0, 30.0)])
    def test_full_ellipse_accuracy(self, rx: float, ry: float) -> None:
        """64 samples of the four cubics deviate less than 0.3% from the ellipse."""
        cx, cy = 10.0, -20.0
        path = create_ellipse_path(cx, cy, rx, ry)
        current = path.segments[0].end_point
        assert current is not None
        for segment in path.segments[1:5]:
            assert isinstance(segment, CubicTo)
            for i in range(16):
                p = cubic_bezier_point(
                    current, segment.control1, segment.control2, segment.end, i / 16
                )
                radius = math.hypot((p.x - cx) / rx, (p.y - cy) / ry)
                assert abs(radius - 1) < 0.003
            current = segment.end

    def test_half_arc(self) -> None:
        path = create_ellipse_path(0, 0, 10, 10, 0, math.pi)
        assert path.commands() == "MAZ"
        arc = path.segments[1]
        assert isinstance(arc, ArcTo)
        assert arc.sweep is True
        assert arc.large_arc is False
        assert distance(arc.end, Point(-10, 0)) < 1e-9

    def test_large_arc_flag(self) -> None:
        path = create_ellipse_path(0, 0, 10, 10, 0, 1.5 * math.pi)
        arc = path.segments[1]
        assert isinstance(arc, ArcTo)
        assert arc.large_arc is True

    def test_negative_sweep(self) -> None:
        path = create_ellipse_path(0, 0, 10, 10, math.pi, 0)
        arc = path.segments[1]
        assert isinstance(arc, ArcTo)
        assert arc.sweep is False

    def test_donut_segment(self) -> None:
        """A donut segment traces the outer arc, then the inner arc back."""
        path = create_ellipse_path(0, 0, 10, 10, 0, math.pi / 2, inner_radius=0.5)
        assert path.commands() == "MALAZ"
        line = path.segments[2]
        assert isinstance(line, LineTo)
        assert distance(line.point, Point(0, 5)) < 1e-9
        inner = path.segments[3]
        assert isinstance(inner, ArcTo)
        assert inner.rx == 5
        assert inner.sweep is False
        assert distance(inner.end, Point(5, 0)) < 1e-9

    def test_full_donut_splits_arcs(self) -> None:
        """Full-turn arcs are split in two so their endpoints differ."""
        path = create_ellipse_path(0, 0, 10, 10, 0, math.tau, inner_radius=0.5)
        assert path.commands() == "MAALAAZ"

    def test_invalid_inner_radius(self) -> None:
        with pytest.raises(InvalidParameterError):
            create_ellipse_path(0, 0, 10, 10, inner_radius=1.0)

    def test_negative_radius(self) -> None:
        with pytest.raises(InvalidParameterError):
            create_ellipse_path(0, 0, -1, 10)


class TestPolygon:
    """Tests for create_polygon_path."""

    def test_hexagon(self) -> None:
        path = create_polygon_path(0, 0, 10, 6)
        assert path.commands() == "MLLLLLZ"
        first = path.segments[0].end_point
        assert first is not None
        assert first.x == pytest.approx(0.0, abs=1e-9)
        assert first.y == pytest.approx(-10.0)
        for p in path.anchor_points():
            assert distance(p, Point(0, 0)) == pytest.approx(10.0)

    def test_rounded_corners(self) -> None:
        path = create_polygon_path(0, 0, 10, 3, corner_radius=1)
        assert path.commands() == "MQLQLQZ"
        corner = path.segments[1]
        assert isinstance(corner, QuadTo)
        assert distance(corner.control, Point(0, -10)) < 1e-9

    def test_corner_radius_clamped_to_half_edge(self) -> None:
        radius = 10.0
        path = create_polygon_path(0, 0, radius, 4, corner_radius=100)
        entry = path.segments[0].end_point
        corner = path.segments[1]
        assert entry is not None
        assert isinstance(corner, QuadTo)
        half_edge = radius * math.sin(math.pi / 4)
        assert distance(entry, corner.control) == pytest.approx(half_edge)

    def test_too_few_sides(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            create_polygon_path(0, 0, 10, 2)
        assert exc_info.value.name == "sides"


class TestStar:
    """Tests for create_star_path."""

    def test_five_point_star(self) -> None:
        path = create_star_path(0, 0, 10, 4, 5)
        assert path.commands() == "M" + "L" * 9 + "Z"
        for i, p in enumerate(path.anchor_points()):
            expected = 10 if i % 2 == 0 else 4
            assert distance(p, Point(0, 0)) == pytest.approx(expected)

    def test_corner_radius_has_no_effect(self) -> None:
        plain = create_star_path(0, 0, 10, 4, 5)
        rounded = create_star_path(0, 0, 10, 4, 5, corner_radius=2)
        assert rounded.segments == plain.segments

    def test_too_few_points(self) -> None:
        with pytest.raises(InvalidParameterError):
            create_star_path(0, 0, 10, 4, 1)
