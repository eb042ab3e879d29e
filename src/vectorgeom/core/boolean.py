"""Approximate path boolean operations.

The engine works on sampled points rather than on exact curve intersections:

1. Paths whose bounding boxes do not overlap take a per-operation shortcut.
2. Otherwise both paths are flattened and every sample of one path is
   classified against the flattened contours of the other (even-odd ray
   casting).
3. The qualifying samples are joined into a closed polyline.

Known approximations:
- UNION returns the convex hull of the qualifying samples, i.e. the convex
  envelope of the two shapes. Concave regions are filled in.
- SUBTRACT, INTERSECT and EXCLUDE keep raw samples in sample order, so the
  output outline can cross itself when the inputs overlap in complex ways.
- Output is always a polyline; Bezier and arc segments are not preserved.
- Classification is O(n * m) in the sample counts; bound ``resolution`` or
  ``max_points`` in interactive use.
"""

import logging
from enum import Enum

from vectorgeom.config import GeometryConfig
from vectorgeom.core.geometry import convex_hull, path_bounds, point_in_contours
from vectorgeom.core.sampler import DEFAULT_RESOLUTION, path_to_contours
from vectorgeom.domain import (
    ClosePath,
    LineTo,
    MoveTo,
    PathSegment,
    Point,
    VectorPath,
    WindingRule,
)

logger = logging.getLogger(__name__)


class BooleanOperation(str, Enum):
    """Path boolean operation."""

    UNION = "UNION"
    SUBTRACT = "SUBTRACT"
    INTERSECT = "INTERSECT"
    EXCLUDE = "EXCLUDE"

    @classmethod
    def parse(cls, value: "BooleanOperation | str") -> "BooleanOperation":
        """Accept an enum member or its name in any letter case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            valid = ", ".join(op.value for op in cls)
            raise ValueError(f"Unknown boolean operation {value!r}; expected one of {valid}") from None


def points_to_path(points: list[Point]) -> VectorPath:
    """Join points into a closed polyline path (``M L... Z``).

    Returns an empty path for an empty point list.
    """
    if not points:
        return VectorPath.empty()
    segments: list[PathSegment] = [MoveTo(points[0])]
    segments.extend(LineTo(p) for p in points[1:])
    segments.append(ClosePath())
    return VectorPath(segments=tuple(segments), closed=True, winding_rule=WindingRule.NONZERO)


def _concatenate(path_a: VectorPath, path_b: VectorPath, winding_rule: WindingRule) -> VectorPath:
    segments = [s for s in path_a.segments if not isinstance(s, ClosePath)]
    segments.extend(path_b.segments)
    return VectorPath(segments=tuple(segments), closed=True, winding_rule=winding_rule)


def _disjoint_result(
    path_a: VectorPath, path_b: VectorPath, operation: BooleanOperation
) -> VectorPath:
    if operation is BooleanOperation.UNION:
        return _concatenate(path_a, path_b, WindingRule.NONZERO)
    if operation is BooleanOperation.SUBTRACT:
        return path_a
    if operation is BooleanOperation.INTERSECT:
        return VectorPath.empty()
    return _concatenate(path_a, path_b, WindingRule.EVENODD)


def _outside(points: list[Point], contours: list[list[Point]]) -> list[Point]:
    return [p for p in points if not point_in_contours(p, contours)]


def boolean_operation(
    path_a: VectorPath,
    path_b: VectorPath,
    operation: BooleanOperation | str,
    resolution: float = DEFAULT_RESOLUTION,
    max_points: int | None = None,
) -> VectorPath:
    """Combine two paths with a boolean operation.

    When the bounding boxes do not overlap the result is exact and cheap:
    UNION concatenates A (without its ClosePath segments) and B as separate
    subpaths with NONZERO fill, SUBTRACT returns A itself, INTERSECT returns
    an empty path, and EXCLUDE concatenates like UNION with EVENODD fill.

    Overlapping paths are flattened and their samples classified against
    each other:
    - UNION: convex hull of (A outside B) + (B outside A)
    - SUBTRACT: A outside B, in sample order
    - INTERSECT: A inside B, in sample order
    - EXCLUDE: (A outside B) + (B outside A), in sample order

    Args:
        path_a: First operand
        path_b: Second operand
        operation: Operation to apply (enum member or name)
        resolution: Flattening resolution for overlapping paths
        max_points: Optional sample budget per path

    Returns:
        New path; empty when either input has fewer than two segments or no
        samples qualify

    Raises:
        ValueError: If the operation name is unknown
        InvalidParameterError: If resolution is not positive
        SamplingBudgetError: If flattening exceeds ``max_points``
    """
    op = BooleanOperation.parse(operation)

    if len(path_a.segments) < 2 or len(path_b.segments) < 2:
        logger.debug("Boolean %s on degenerate input, returning empty path", op.value)
        return VectorPath.empty()

    bounds_a = path_bounds(path_a)
    bounds_b = path_bounds(path_b)
    if not bounds_a.intersects(bounds_b):
        logger.debug("Boolean %s: bounds disjoint, using fast path", op.value)
        return _disjoint_result(path_a, path_b, op)

    contours_a = path_to_contours(path_a, resolution, max_points)
    contours_b = path_to_contours(path_b, resolution, max_points)
    points_a = [p for c in contours_a for p in c]
    points_b = [p for c in contours_b for p in c]

    if op is BooleanOperation.SUBTRACT:
        result = _outside(points_a, contours_b)
    elif op is BooleanOperation.INTERSECT:
        result = [p for p in points_a if point_in_contours(p, contours_b)]
    else:
        result = _outside(points_a, contours_b) + _outside(points_b, contours_a)
        if op is BooleanOperation.UNION:
            result = convex_hull(result)

    logger.debug(
        "Boolean %s classified %d x %d samples into %d result points",
        op.value, len(points_a), len(points_b), len(result),
    )
    return points_to_path(result)


class BooleanEngine:
    """Boolean operations bound to a geometry configuration.

    Example:
        engine = BooleanEngine(GeometryConfig(sample_resolution=0.5))
        result = engine.combine(path_a, path_b, BooleanOperation.SUBTRACT)
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def combine(
        self,
        path_a: VectorPath,
        path_b: VectorPath,
        operation: BooleanOperation | str,
    ) -> VectorPath:
        """Apply ``operation`` with the configured resolution and sample budget."""
        op = BooleanOperation.parse(operation)
        logger.debug(
            "Combining %s and %s with %s (resolution=%s, max_points=%s)",
            path_a.id, path_b.id, op.value,
            self.config.sample_resolution, self.config.max_sample_points,
        )
        return boolean_operation(
            path_a,
            path_b,
            op,
            resolution=self.config.sample_resolution,
            max_points=self.config.max_sample_points,
        )

    def union(self, path_a: VectorPath, path_b: VectorPath) -> VectorPath:
        return self.combine(path_a, path_b, BooleanOperation.UNION)

    def subtract(self, path_a: VectorPath, path_b: VectorPath) -> VectorPath:
        return self.combine(path_a, path_b, BooleanOperation.SUBTRACT)

    def intersect(self, path_a: VectorPath, path_b: VectorPath) -> VectorPath:
        return self.combine(path_a, path_b, BooleanOperation.INTERSECT)

    def exclude(self, path_a: VectorPath, path_b: VectorPath) -> VectorPath:
        return self.combine(path_a, path_b, BooleanOperation.EXCLUDE)
