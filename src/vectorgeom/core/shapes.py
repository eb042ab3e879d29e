"""Procedural shape generators.

Each generator returns a closed VectorPath:
- create_rectangle_path: Rectangle with uniform or per-corner radii
- create_ellipse_path: Full ellipse, elliptical arc, or donut ring
- create_polygon_path: Regular polygon with optional rounded corners
- create_star_path: Star alternating outer and inner radius

Parameter violations raise InvalidParameterError; corner radii are clamped to
their geometric maximum instead of being rejected.
"""

import logging
import math
from collections.abc import Sequence

from vectorgeom.core.vector import add, normalize, scale, subtract
from vectorgeom.domain import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathSegment,
    Point,
    QuadTo,
    VectorPath,
    WindingRule,
)
from vectorgeom.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

# Handle length of a rounded rectangle corner as a fraction of its radius.
# Deliberately flatter than KAPPA.
RECTANGLE_CORNER_FACTOR = 0.448

# Control-point distance fraction for approximating a quarter circle.
KAPPA = 0.5522847498


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidParameterError(name, value, "must be a finite number")


def _require_non_negative(**values: float) -> None:
    _require_finite(**values)
    for name, value in values.items():
        if value < 0:
            raise InvalidParameterError(name, value, "must not be negative")


def _closed_path(segments: list[PathSegment]) -> VectorPath:
    return VectorPath(segments=tuple(segments), closed=True, winding_rule=WindingRule.NONZERO)


def create_rectangle_path(
    x: float,
    y: float,
    width: float,
    height: float,
    corner_radius: float | Sequence[float] = 0,
) -> VectorPath:
    """Create a rectangle, optionally with rounded corners.

    Each rounded corner is a single cubic whose handles sit
    ``RECTANGLE_CORNER_FACTOR * r`` from the corner along the two edges.

    Args:
        x: Left edge
        y: Top edge
        width: Rectangle width
        height: Rectangle height
        corner_radius: One radius for all corners, or (top-left, top-right,
            bottom-right, bottom-left). Each is clamped to [0, min(w, h) / 2].

    Returns:
        Closed path starting at the end of the top-left corner

    Raises:
        InvalidParameterError: If width or height is negative, or the radius
            sequence does not have four entries
    """
    _require_finite(x=x, y=y)
    _require_non_negative(width=width, height=height)

    if isinstance(corner_radius, (int, float)):
        radii = [float(corner_radius)] * 4
    else:
        radii = [float(r) for r in corner_radius]
        if len(radii) != 4:
            raise InvalidParameterError(
                "corner_radius", corner_radius, "expected one value or four values"
            )
    _require_finite(**{f"corner_radius[{i}]": r for i, r in enumerate(radii)})

    max_radius = min(width, height) / 2
    clamped = [min(max(r, 0.0), max_radius) for r in radii]
    if clamped != radii:
        logger.debug("Clamped rectangle radii %s to %s", radii, clamped)
    tl, tr, br, bl = clamped
    k = RECTANGLE_CORNER_FACTOR
    right = x + width
    bottom = y + height

    segments: list[PathSegment] = [
        MoveTo(Point(x + tl, y)),
        LineTo(Point(right - tr, y)),
    ]
    if tr > 0:
        segments.append(
            CubicTo(Point(right - tr * k, y), Point(right, y + tr * k), Point(right, y + tr))
        )

    segments.append(LineTo(Point(right, bottom - br)))
    if br > 0:
        segments.append(
            CubicTo(
                Point(right, bottom - br * k),
                Point(right - br * k, bottom),
                Point(right - br, bottom),
            )
        )

    segments.append(LineTo(Point(x + bl, bottom)))
    if bl > 0:
        segments.append(
            CubicTo(Point(x + bl * k, bottom), Point(x, bottom - bl * k), Point(x, bottom - bl))
        )

    if tl > 0:
        segments.append(LineTo(Point(x, y + tl)))
        segments.append(CubicTo(Point(x, y + tl * k), Point(x + tl * k, y), Point(x + tl, y)))

    segments.append(ClosePath())
    return _closed_path(segments)


def create_ellipse_path(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start_angle: float = 0.0,
    end_angle: float = math.tau,
    inner_radius: float = 0.0,
) -> VectorPath:
    """Create an ellipse, an elliptical arc (pie slice outline) or a donut.

    A full ellipse (default angles, no inner radius) is four cubics using
    KAPPA. Anything else is drawn with SVG arc segments: the outer arc from
    ``start_angle`` to ``end_angle`` and, when ``inner_radius > 0``, a line to
    the inner ring followed by the inner arc traced back to ``start_angle``
    with the opposite sweep. The result is a single ring outline.

    Args:
        cx: Center x
        cy: Center y
        rx: X radius
        ry: Y radius
        start_angle: Start angle in radians
        end_angle: End angle in radians
        inner_radius: Inner radius as a ratio of the outer radii, in [0, 1)

    Returns:
        Closed path

    Raises:
        InvalidParameterError: On negative radii or an inner ratio outside [0, 1)
    """
    _require_finite(cx=cx, cy=cy, start_angle=start_angle, end_angle=end_angle)
    _require_non_negative(rx=rx, ry=ry, inner_radius=inner_radius)
    if inner_radius >= 1:
        raise InvalidParameterError(
            "inner_radius", inner_radius, "is a ratio of the outer radius and must be below 1"
        )

    if start_angle == 0 and end_angle == math.tau and inner_radius == 0:
        k = KAPPA
        segments: list[PathSegment] = [
            MoveTo(Point(cx + rx, cy)),
            CubicTo(Point(cx + rx, cy + ry * k), Point(cx + rx * k, cy + ry), Point(cx, cy + ry)),
            CubicTo(Point(cx - rx * k, cy + ry), Point(cx - rx, cy + ry * k), Point(cx - rx, cy)),
            CubicTo(Point(cx - rx, cy - ry * k), Point(cx - rx * k, cy - ry), Point(cx, cy - ry)),
            CubicTo(Point(cx + rx * k, cy - ry), Point(cx + rx, cy - ry * k), Point(cx + rx, cy)),
            ClosePath(),
        ]
        return _closed_path(segments)

    angle_diff = end_angle - start_angle
    large_arc = abs(angle_diff) > math.pi
    sweep = angle_diff > 0

    def on_ellipse(radius_x: float, radius_y: float, angle: float) -> Point:
        return Point(cx + radius_x * math.cos(angle), cy + radius_y * math.sin(angle))

    def arc(radius_x: float, radius_y: float, from_angle: float, to_angle: float,
            arc_sweep: bool) -> list[PathSegment]:
        # A full turn has coincident endpoints, which SVG renders as nothing.
        if abs(to_angle - from_angle) >= math.tau:
            mid = (from_angle + to_angle) / 2
            return [
                ArcTo(on_ellipse(radius_x, radius_y, mid), radius_x, radius_y, 0.0,
                      False, arc_sweep),
                ArcTo(on_ellipse(radius_x, radius_y, to_angle), radius_x, radius_y, 0.0,
                      False, arc_sweep),
            ]
        return [
            ArcTo(on_ellipse(radius_x, radius_y, to_angle), radius_x, radius_y, 0.0,
                  large_arc, arc_sweep)
        ]

    segments = [MoveTo(on_ellipse(rx, ry, start_angle))]
    segments.extend(arc(rx, ry, start_angle, end_angle, sweep))

    if inner_radius > 0:
        inner_rx = rx * inner_radius
        inner_ry = ry * inner_radius
        segments.append(LineTo(on_ellipse(inner_rx, inner_ry, end_angle)))
        segments.extend(arc(inner_rx, inner_ry, end_angle, start_angle, not sweep))

    segments.append(ClosePath())
    return _closed_path(segments)


def _regular_vertices(
    cx: float, cy: float, radius_at: Sequence[float], angle_step: float
) -> list[Point]:
    start_angle = -math.pi / 2  # first vertex at the top
    return [
        Point(
            cx + r * math.cos(start_angle + i * angle_step),
            cy + r * math.sin(start_angle + i * angle_step),
        )
        for i, r in enumerate(radius_at)
    ]


def create_polygon_path(
    cx: float,
    cy: float,
    radius: float,
    sides: int,
    corner_radius: float = 0.0,
) -> VectorPath:
    """Create a regular polygon inscribed in a circle.

    With ``corner_radius > 0`` every corner becomes a quadratic curve whose
    control point is the original vertex and whose endpoints are inset along
    the two adjacent edges. The radius is clamped to
    ``radius * sin(step / 2)`` (half an edge) so that corners never overlap.

    Args:
        cx: Center x
        cy: Center y
        radius: Circumradius
        sides: Number of sides (>= 3)
        corner_radius: Corner inset distance

    Returns:
        Closed path

    Raises:
        InvalidParameterError: If sides < 3 or radius is negative
    """
    if sides < 3:
        raise InvalidParameterError("sides", sides, "a polygon needs at least 3 sides")
    _require_finite(cx=cx, cy=cy, corner_radius=corner_radius)
    _require_non_negative(radius=radius)

    angle_step = math.tau / sides
    vertices = _regular_vertices(cx, cy, [radius] * sides, angle_step)
    segments: list[PathSegment] = []

    if corner_radius > 0:
        max_radius = radius * math.sin(angle_step / 2)
        r = min(corner_radius, max_radius)
        for i, curr in enumerate(vertices):
            prev = vertices[i - 1]
            nxt = vertices[(i + 1) % sides]
            to_prev = normalize(subtract(prev, curr))
            to_next = normalize(subtract(nxt, curr))
            entry = add(curr, scale(to_prev, r))
            exit_ = add(curr, scale(to_next, r))
            segments.append(MoveTo(entry) if i == 0 else LineTo(entry))
            segments.append(QuadTo(curr, exit_))
    else:
        segments.append(MoveTo(vertices[0]))
        segments.extend(LineTo(p) for p in vertices[1:])

    segments.append(ClosePath())
    return _closed_path(segments)


def create_star_path(
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float,
    points: int,
    corner_radius: float = 0.0,
) -> VectorPath:
    """Create a star with ``points`` tips.

    Vertices alternate between the outer and inner radius, starting with an
    outer tip at the top, joined by straight lines.

    Note: ``corner_radius`` is accepted for API symmetry with
    create_polygon_path but currently has no effect on the geometry.

    Args:
        cx: Center x
        cy: Center y
        outer_radius: Tip radius
        inner_radius: Valley radius
        points: Number of tips (>= 2)
        corner_radius: Ignored

    Returns:
        Closed path with 2 * points vertices

    Raises:
        InvalidParameterError: If points < 2 or a radius is negative
    """
    if points < 2:
        raise InvalidParameterError("points", points, "a star needs at least 2 points")
    _require_finite(cx=cx, cy=cy, corner_radius=corner_radius)
    _require_non_negative(outer_radius=outer_radius, inner_radius=inner_radius)

    radii = [outer_radius if i % 2 == 0 else inner_radius for i in range(points * 2)]
    vertices = _regular_vertices(cx, cy, radii, math.pi / points)

    segments: list[PathSegment] = [MoveTo(vertices[0])]
    segments.extend(LineTo(p) for p in vertices[1:])
    segments.append(ClosePath())
    return _closed_path(segments)
