"""Unit tests for approximate boolean operations.

Tests cover:
- Disjoint fast paths for every operation
- Sample classification for overlapping operands
- Degenerate inputs
- BooleanEngine configuration
"""

import logging
import math

import pytest

from vectorgeom.config import GeometryConfig
from vectorgeom.core import (
    BooleanEngine,
    BooleanOperation,
    boolean_operation,
    create_ellipse_path,
    create_rectangle_path,
    points_to_path,
)
from vectorgeom.domain import MoveTo, Point, VectorPath, WindingRule
from vectorgeom.exceptions import SamplingBudgetError


@pytest.fixture
def rounded_left() -> VectorPath:
    """Rounded rectangle at the origin."""
    return create_rectangle_path(0, 0, 100, 50, 10)


@pytest.fixture
def rounded_right() -> VectorPath:
    """Rounded rectangle well to the right of rounded_left."""
    return create_rectangle_path(200, 0, 100, 50, 10)


@pytest.fixture
def square_a() -> VectorPath:
    return create_rectangle_path(0, 0, 10, 10)


@pytest.fixture
def square_b() -> VectorPath:
    """Square overlapping the top-right corner of square_a."""
    return create_rectangle_path(5, 2, 10, 10)


class TestBooleanOperationParse:
    """Tests for BooleanOperation.parse."""

    def test_case_insensitive(self) -> None:
        assert BooleanOperation.parse("union") is BooleanOperation.UNION
        assert BooleanOperation.parse("Subtract") is BooleanOperation.SUBTRACT
        assert BooleanOperation.parse(BooleanOperation.EXCLUDE) is BooleanOperation.EXCLUDE

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown boolean operation"):
            BooleanOperation.parse("xor")


class TestPointsToPath:
    """Tests for points_to_path."""

    def test_closed_polyline(self) -> None:
        path = points_to_path([Point(0, 0), Point(1, 0), Point(1, 1)])
        assert path.commands() == "MLLZ"
        assert path.closed

    def test_empty(self) -> None:
        assert points_to_path([]).is_empty


class TestDisjoint:
    """Operands whose bounding boxes do not overlap."""

    def test_union_keeps_both_shapes(
        self, rounded_left: VectorPath, rounded_right: VectorPath
    ) -> None:
        result = boolean_operation(rounded_left, rounded_right, BooleanOperation.UNION)
        assert result.winding_rule == WindingRule.NONZERO
        assert result.closed
        assert result.commands() == "MLCLCLCLC" + "MLCLCLCLCZ"
        points = set(result.anchor_points())
        assert set(rounded_left.anchor_points()) <= points
        assert set(rounded_right.anchor_points()) <= points
        assert sum(isinstance(s, MoveTo) for s in result.segments) == 2

    def test_subtract_returns_first_operand(
        self, rounded_left: VectorPath, rounded_right: VectorPath
    ) -> None:
        result = boolean_operation(rounded_left, rounded_right, BooleanOperation.SUBTRACT)
        assert result is rounded_left

    def test_intersect_is_empty(
        self, rounded_left: VectorPath, rounded_right: VectorPath
    ) -> None:
        result = boolean_operation(rounded_left, rounded_right, BooleanOperation.INTERSECT)
        assert len(result.segments) == 0

    def test_exclude_uses_even_odd(
        self, rounded_left: VectorPath, rounded_right: VectorPath
    ) -> None:
        result = boolean_operation(rounded_left, rounded_right, "exclude")
        assert result.winding_rule == WindingRule.EVENODD
        assert len(result.segments) == len(rounded_left.segments) - 1 + len(
            rounded_right.segments
        )


class TestOverlapping:
    """Operands classified by sampling."""

    def test_subtract(self, square_a: VectorPath, square_b: VectorPath) -> None:
        result = boolean_operation(square_a, square_b, BooleanOperation.SUBTRACT)
        assert result.commands() == "MLLZ"
        assert result.anchor_points() == [Point(0, 0), Point(10, 0), Point(0, 10)]

    def test_intersect(self, square_a: VectorPath, square_b: VectorPath) -> None:
        result = boolean_operation(square_a, square_b, BooleanOperation.INTERSECT)
        assert result.anchor_points() == [Point(10, 10)]

    def test_exclude(self, square_a: VectorPath, square_b: VectorPath) -> None:
        result = boolean_operation(square_a, square_b, BooleanOperation.EXCLUDE)
        assert result.anchor_points() == [
            Point(0, 0),
            Point(10, 0),
            Point(0, 10),
            Point(15, 2),
            Point(15, 12),
            Point(5, 12),
        ]

    def test_union_is_convex_envelope(self, square_a: VectorPath, square_b: VectorPath) -> None:
        result = boolean_operation(square_a, square_b, BooleanOperation.UNION)
        assert result.closed
        assert set(result.anchor_points()) == {
            Point(0, 0),
            Point(10, 0),
            Point(15, 2),
            Point(15, 12),
            Point(5, 12),
            Point(0, 10),
        }
        assert result.anchor_points()[0] == Point(0, 0)

    def test_contained_intersect(self) -> None:
        """A shape fully inside another intersects to its own samples."""
        outer = create_rectangle_path(0, 0, 100, 100)
        inner = create_rectangle_path(40, 40, 10, 10)
        result = boolean_operation(inner, outer, BooleanOperation.INTERSECT)
        assert result.anchor_points() == inner.anchor_points()

    def test_contained_subtract_is_empty(self) -> None:
        outer = create_rectangle_path(0, 0, 100, 100)
        inner = create_rectangle_path(40, 40, 10, 10)
        assert boolean_operation(inner, outer, BooleanOperation.SUBTRACT).is_empty

    def test_result_has_fresh_id(self, square_a: VectorPath, square_b: VectorPath) -> None:
        result = boolean_operation(square_a, square_b, BooleanOperation.UNION)
        assert result.id not in (square_a.id, square_b.id)


class TestArcOperands:
    """Arc outlines overlap by their bulge, not just their endpoints."""

    @pytest.fixture
    def half_disc(self) -> VectorPath:
        """Lower half of a radius-100 disc; its endpoints lie on the x axis."""
        return create_ellipse_path(0, 0, 100, 100, math.pi, math.tau)

    @pytest.fixture
    def inner_square(self) -> VectorPath:
        """Square inside the bulge, clear of the half disc's endpoints."""
        return create_rectangle_path(-10, -60, 20, 20)

    def test_intersect_keeps_contained_square(
        self, half_disc: VectorPath, inner_square: VectorPath
    ) -> None:
        result = boolean_operation(inner_square, half_disc, BooleanOperation.INTERSECT)
        assert result.anchor_points() == inner_square.anchor_points()

    def test_subtract_removes_contained_square(
        self, half_disc: VectorPath, inner_square: VectorPath
    ) -> None:
        result = boolean_operation(inner_square, half_disc, BooleanOperation.SUBTRACT)
        assert result.is_empty


class TestDegenerate:
    """Inputs with fewer than two segments."""

    @pytest.mark.parametrize("op", list(BooleanOperation))
    def test_single_move_gives_empty(self, op: BooleanOperation, square_a: VectorPath) -> None:
        lone = VectorPath.from_segments([MoveTo(Point(5, 5))])
        assert boolean_operation(square_a, lone, op).is_empty
        assert boolean_operation(lone, square_a, op).is_empty

    def test_empty_operand(self, square_a: VectorPath) -> None:
        assert boolean_operation(VectorPath.empty(), square_a, "union").is_empty


class TestBooleanEngine:
    """Tests for BooleanEngine."""

    def test_default_config(self) -> None:
        engine = BooleanEngine()
        assert engine.config.sample_resolution == 0.1

    def test_convenience_methods(self, square_a: VectorPath, square_b: VectorPath) -> None:
        engine = BooleanEngine()
        assert engine.subtract(square_a, square_b).anchor_points() == [
            Point(0, 0),
            Point(10, 0),
            Point(0, 10),
        ]
        assert engine.intersect(square_a, square_b).anchor_points() == [Point(10, 10)]
        assert engine.union(square_a, square_b).closed
        assert len(engine.exclude(square_a, square_b).anchor_points()) == 6

    def test_combine_logs_operation_and_config(
        self, square_a: VectorPath, square_b: VectorPath, caplog: pytest.LogCaptureFixture
    ) -> None:
        engine = BooleanEngine(GeometryConfig(sample_resolution=0.5, max_sample_points=1000))
        with caplog.at_level(logging.DEBUG, logger="vectorgeom.core.boolean"):
            engine.combine(square_a, square_b, "intersect")

        message = caplog.records[0].getMessage()
        assert f"Combining {square_a.id} and {square_b.id} with INTERSECT" in message
        assert "resolution=0.5" in message
        assert "max_points=1000" in message

    def test_sample_budget(self) -> None:
        engine = BooleanEngine(GeometryConfig(sample_resolution=0.1, max_sample_points=16))
        a = create_ellipse_path(0, 0, 50, 50)
        b = create_ellipse_path(20, 0, 50, 50)
        with pytest.raises(SamplingBudgetError):
            engine.union(a, b)
