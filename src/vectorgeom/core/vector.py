"""Point and vector arithmetic.

All functions are pure and total: degenerate input (such as normalizing a
zero-length vector) returns a documented value instead of raising.
"""

import math

from vectorgeom.domain import ORIGIN, Point


def add(p1: Point, p2: Point) -> Point:
    return Point(p1.x + p2.x, p1.y + p2.y)


def subtract(p1: Point, p2: Point) -> Point:
    return Point(p1.x - p2.x, p1.y - p2.y)


def scale(p: Point, factor: float) -> Point:
    return Point(p.x * factor, p.y * factor)


def length(p: Point) -> float:
    return math.hypot(p.x, p.y)


def normalize(p: Point) -> Point:
    """Scale a vector to unit length.

    Returns ``Point(0, 0)`` for a zero-length vector.
    """
    n = math.hypot(p.x, p.y)
    if n == 0:
        return Point(0.0, 0.0)
    return Point(p.x / n, p.y / n)


def rotate(p: Point, angle: float, center: Point = ORIGIN) -> Point:
    """Rotate a point around ``center`` by ``angle`` radians.

    Args:
        p: Point to rotate
        angle: Rotation angle in radians (positive turns +x towards +y)
        center: Center of rotation

    Returns:
        Rotated point
    """
    cos = math.cos(angle)
    sin = math.sin(angle)
    dx = p.x - center.x
    dy = p.y - center.y
    return Point(center.x + dx * cos - dy * sin, center.y + dx * sin + dy * cos)


def lerp(p1: Point, p2: Point, t: float) -> Point:
    """Linear interpolation; ``t=0`` gives p1 and ``t=1`` gives p2."""
    return Point(p1.x + (p2.x - p1.x) * t, p1.y + (p2.y - p1.y) * t)


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def reflect(p: Point, center: Point) -> Point:
    """Reflect ``p`` through ``center`` (``2 * center - p``)."""
    return Point(2 * center.x - p.x, 2 * center.y - p.y)


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of ``(a - o) x (b - o)``; positive when o, a, b turn left."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)
