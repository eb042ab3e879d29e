"""Path flattening.

Converts a VectorPath into points at a target chord resolution. Curves are
sampled uniformly in parameter space; the number of samples comes from the
straight distance between the segment's start point and its end point, not
the true arc length, so strongly curved segments are sampled more coarsely.
"""

import logging
import math

from vectorgeom.core.bezier import (
    arc_center_parameters,
    arc_point,
    cubic_bezier_point,
    quadratic_bezier_point,
)
from vectorgeom.core.vector import distance
from vectorgeom.domain import ArcTo, CubicTo, LineTo, MoveTo, Point, QuadTo, VectorPath
from vectorgeom.exceptions import InvalidParameterError, SamplingBudgetError

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 0.1


def _step_count(span: float, resolution: float) -> int:
    return max(1, math.ceil(span / resolution))


def path_to_contours(
    path: VectorPath,
    resolution: float = DEFAULT_RESOLUTION,
    max_points: int | None = None,
) -> list[list[Point]]:
    """Flatten a path into one point list per subpath.

    A new list starts at every MoveTo. ClosePath adds no point; rings are
    implicitly closed by their consumers.

    Args:
        path: Path to flatten
        resolution: Target distance between samples, in path units
        max_points: Optional upper bound on the total number of points

    Returns:
        List of contours, each a list of points

    Raises:
        InvalidParameterError: If resolution is not a positive number
        SamplingBudgetError: If more than ``max_points`` points are needed
    """
    if not (resolution > 0 and math.isfinite(resolution)):
        raise InvalidParameterError("resolution", resolution, "must be a positive number")

    contours: list[list[Point]] = []
    current_contour: list[Point] = []
    current = Point(0.0, 0.0)
    total = 0

    def reserve(count: int) -> None:
        nonlocal total
        total += count
        if max_points is not None and total > max_points:
            raise SamplingBudgetError(max_points, total)

    for segment in path.segments:
        if isinstance(segment, MoveTo):
            if current_contour:
                contours.append(current_contour)
            reserve(1)
            current_contour = [segment.point]
            current = segment.point
        elif isinstance(segment, LineTo):
            reserve(1)
            current_contour.append(segment.point)
            current = segment.point
        elif isinstance(segment, CubicTo):
            steps = _step_count(distance(current, segment.end), resolution)
            reserve(steps)
            for i in range(1, steps + 1):
                current_contour.append(
                    cubic_bezier_point(
                        current, segment.control1, segment.control2, segment.end, i / steps
                    )
                )
            current = segment.end
        elif isinstance(segment, QuadTo):
            steps = _step_count(distance(current, segment.end), resolution)
            reserve(steps)
            for i in range(1, steps + 1):
                current_contour.append(
                    quadratic_bezier_point(current, segment.control, segment.end, i / steps)
                )
            current = segment.end
        elif isinstance(segment, ArcTo):
            params = arc_center_parameters(current, segment)
            if params is None:
                reserve(1)
                current_contour.append(segment.end)
            else:
                steps = _step_count(params.approximate_length, resolution)
                reserve(steps)
                for i in range(1, steps):
                    current_contour.append(
                        arc_point(params, params.theta1 + params.delta_theta * i / steps)
                    )
                current_contour.append(segment.end)
            current = segment.end
        # ClosePath contributes no sample

    if current_contour:
        contours.append(current_contour)

    logger.debug(
        "Flattened path %s into %d points over %d contours (resolution=%s)",
        path.id, total, len(contours), resolution,
    )
    return contours


def path_to_points(
    path: VectorPath,
    resolution: float = DEFAULT_RESOLUTION,
    max_points: int | None = None,
) -> list[Point]:
    """Flatten a path into a single point sequence.

    MoveTo and LineTo endpoints are pushed directly. Cubic and quadratic
    segments contribute ``ceil(chord / resolution)`` points at uniformly spaced
    parameters (the start point excluded, the end point included), where
    chord is the distance from the segment's start to its end point. Arc
    segments are sampled along their ellipse.

    Args:
        path: Path to flatten
        resolution: Target distance between samples, in path units; smaller
            values increase fidelity and cost
        max_points: Optional upper bound on the number of points

    Returns:
        Flattened points in path order

    Raises:
        InvalidParameterError: If resolution is not a positive number
        SamplingBudgetError: If more than ``max_points`` points are needed
    """
    return [p for contour in path_to_contours(path, resolution, max_points) for p in contour]
