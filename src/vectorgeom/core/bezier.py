"""Parametric curve math.

Provides Bernstein-basis evaluation of quadratic and cubic Bezier curves,
the cubic derivative, de Casteljau subdivision, degree elevation, and the
elliptical arc helpers needed to sample or convert SVG ``A`` segments.
"""

import math
from dataclasses import dataclass

from vectorgeom.core.vector import lerp
from vectorgeom.domain import ArcTo, Point


@dataclass(frozen=True, slots=True)
class SplitCubic:
    """The two halves of a cubic split at some parameter.

    Attributes:
        left: Control points of the curve from t=0 to the split
        right: Control points of the curve from the split to t=1
    """

    left: tuple[Point, Point, Point, Point]
    right: tuple[Point, Point, Point, Point]


def cubic_bezier_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bezier curve at parameter t.

    Returns p0 exactly at t=0 and p3 exactly at t=1.
    """
    u = 1 - t
    tt = t * t
    uu = u * u
    uuu = uu * u
    ttt = tt * t
    return Point(
        uuu * p0.x + 3 * uu * t * p1.x + 3 * u * tt * p2.x + ttt * p3.x,
        uuu * p0.y + 3 * uu * t * p1.y + 3 * u * tt * p2.y + ttt * p3.y,
    )


def cubic_bezier_derivative(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """First derivative (tangent vector) of a cubic Bezier curve at t."""
    u = 1 - t
    return Point(
        3 * u * u * (p1.x - p0.x) + 6 * u * t * (p2.x - p1.x) + 3 * t * t * (p3.x - p2.x),
        3 * u * u * (p1.y - p0.y) + 6 * u * t * (p2.y - p1.y) + 3 * t * t * (p3.y - p2.y),
    )


def quadratic_bezier_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t."""
    u = 1 - t
    return Point(
        u * u * p0.x + 2 * u * t * p1.x + t * t * p2.x,
        u * u * p0.y + 2 * u * t * p1.y + t * t * p2.y,
    )


def split_cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> SplitCubic:
    """Split a cubic Bezier at t using de Casteljau's algorithm.

    The left half ends and the right half starts at the curve point for t;
    together they trace exactly the original curve.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        t: Split parameter in [0, 1]

    Returns:
        SplitCubic with ``left`` = [p0, p01, p012, p0123] and
        ``right`` = [p0123, p123, p23, p3]
    """
    p01 = lerp(p0, p1, t)
    p12 = lerp(p1, p2, t)
    p23 = lerp(p2, p3, t)
    p012 = lerp(p01, p12, t)
    p123 = lerp(p12, p23, t)
    p0123 = lerp(p012, p123, t)
    return SplitCubic(left=(p0, p01, p012, p0123), right=(p0123, p123, p23, p3))


def quadratic_to_cubic(p0: Point, p1: Point, p2: Point) -> tuple[Point, Point, Point]:
    """Degree-elevate a quadratic to the equivalent cubic.

    Returns:
        (control1, control2, end) of the cubic starting at p0
    """
    c1 = Point(p0.x + 2.0 / 3.0 * (p1.x - p0.x), p0.y + 2.0 / 3.0 * (p1.y - p0.y))
    c2 = Point(p2.x + 2.0 / 3.0 * (p1.x - p2.x), p2.y + 2.0 / 3.0 * (p1.y - p2.y))
    return c1, c2, p2


@dataclass(frozen=True, slots=True)
class ArcCenter:
    """Center parameterization of an SVG elliptical arc.

    Attributes:
        center: Ellipse center
        rx: Corrected X radius
        ry: Corrected Y radius
        phi: X-axis rotation in radians
        theta1: Start angle in radians
        delta_theta: Signed sweep angle in radians
    """

    center: Point
    rx: float
    ry: float
    phi: float
    theta1: float
    delta_theta: float

    @property
    def approximate_length(self) -> float:
        return abs(self.delta_theta) * max(self.rx, self.ry)


def arc_center_parameters(start: Point, arc: ArcTo) -> ArcCenter | None:
    """Convert an endpoint-parameterized arc to center parameterization.

    Follows the SVG implementation notes: radii that are too small to reach
    the end point are scaled up uniformly.

    Args:
        start: Current point before the arc
        arc: The arc segment

    Returns:
        ArcCenter, or None when the arc degenerates to a straight line
        (zero radius or coincident endpoints)
    """
    end = arc.end
    rx = abs(arc.rx)
    ry = abs(arc.ry)
    if rx == 0 or ry == 0 or (start.x == end.x and start.y == end.y):
        return None

    phi = math.radians(arc.rotation)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    dx2 = (start.x - end.x) / 2.0
    dy2 = (start.y - end.y) / 2.0
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        root = math.sqrt(lam)
        rx *= root
        ry *= root

    rx2 = rx * rx
    ry2 = ry * ry
    num = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
    den = rx2 * y1p * y1p + ry2 * x1p * x1p
    coef = math.sqrt(max(0.0, num / den)) if den else 0.0
    if arc.large_arc == arc.sweep:
        coef = -coef

    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (start.x + end.x) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (start.y + end.y) / 2.0

    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry

    theta1 = math.atan2(uy, ux)
    delta = math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)
    if not arc.sweep and delta > 0:
        delta -= 2 * math.pi
    elif arc.sweep and delta < 0:
        delta += 2 * math.pi

    return ArcCenter(Point(cx, cy), rx, ry, phi, theta1, delta)


def arc_point(arc: ArcCenter, theta: float) -> Point:
    """Evaluate a center-parameterized arc at angle theta."""
    cos_phi = math.cos(arc.phi)
    sin_phi = math.sin(arc.phi)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return Point(
        arc.center.x + arc.rx * cos_phi * cos_t - arc.ry * sin_phi * sin_t,
        arc.center.y + arc.rx * sin_phi * cos_t + arc.ry * cos_phi * sin_t,
    )


def _arc_tangent(arc: ArcCenter, theta: float) -> Point:
    cos_phi = math.cos(arc.phi)
    sin_phi = math.sin(arc.phi)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return Point(
        -arc.rx * cos_phi * sin_t - arc.ry * sin_phi * cos_t,
        -arc.rx * sin_phi * sin_t + arc.ry * cos_phi * cos_t,
    )


def arc_to_cubics(start: Point, arc: ArcTo) -> list[tuple[Point, Point, Point]]:
    """Approximate an SVG arc with cubic Beziers of at most a quarter turn each.

    Args:
        start: Current point before the arc
        arc: The arc segment

    Returns:
        List of (control1, control2, end) tuples; the last end is exactly
        ``arc.end``. A degenerate arc becomes a single straight cubic.
    """
    params = arc_center_parameters(start, arc)
    if params is None:
        return [(start, arc.end, arc.end)]

    pieces = max(1, math.ceil(abs(params.delta_theta) / (math.pi / 2) - 1e-9))
    step = params.delta_theta / pieces
    k = 4.0 / 3.0 * math.tan(step / 4.0)

    cubics: list[tuple[Point, Point, Point]] = []
    theta = params.theta1
    current = start
    for i in range(pieces):
        next_theta = theta + step
        end = arc.end if i == pieces - 1 else arc_point(params, next_theta)
        d0 = _arc_tangent(params, theta)
        d1 = _arc_tangent(params, next_theta)
        c1 = Point(current.x + k * d0.x, current.y + k * d0.y)
        c2 = Point(end.x - k * d1.x, end.y - k * d1.y)
        cubics.append((c1, c2, end))
        current = end
        theta = next_theta
    return cubics
