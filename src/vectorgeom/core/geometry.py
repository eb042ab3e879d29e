"""Polygon operations used by the boolean engine.

This module provides:
- Axis-aligned bounding boxes of paths
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Convex hull construction (gift wrapping)

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from vectorgeom.core.bezier import arc_to_cubics
from vectorgeom.core.vector import cross, distance
from vectorgeom.domain import ArcTo, MoveTo, Point, VectorPath


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    An empty box has ``min > max`` on both axes and intersects nothing.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    def intersects(self, other: "Bounds") -> bool:
        """Check overlap; touching edges count as overlapping."""
        if self.is_empty or other.is_empty:
            return False
        return not (
            self.max_x < other.min_x
            or other.max_x < self.min_x
            or self.max_y < other.min_y
            or other.max_y < self.min_y
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


EMPTY_BOUNDS = Bounds(math.inf, math.inf, -math.inf, -math.inf)


def points_bounds(points: Sequence[Point]) -> Bounds:
    """Bounding box of a point list."""
    if not points:
        return EMPTY_BOUNDS
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Bounds(min(xs), min(ys), max(xs), max(ys))


def path_bounds(path: VectorPath) -> Bounds:
    """Bounding box enclosing every segment of a path.

    Control points are included, so the box encloses the control polygon and
    therefore the curves themselves. Arc segments contribute the control
    points of their cubic approximation, which cover the arc's bulge beyond
    its endpoints.
    """
    points: list[Point] = []
    current = subpath_start = Point(0.0, 0.0)
    for segment in path.segments:
        if isinstance(segment, ArcTo):
            points.extend(p for cubic in arc_to_cubics(current, segment) for p in cubic)
        else:
            points.extend(segment.points)

        if isinstance(segment, MoveTo):
            subpath_start = segment.point
        # ClosePath has no end point and returns to the subpath start
        current = segment.end_point or subpath_start
    return points_bounds(points)


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Positive area means counter-clockwise winding in a y-up frame.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def _ray_crossings(x: float, y: float, ring: Sequence[Point]) -> int:
    crossings = 0
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i].x, ring[i].y
        xj, yj = ring[j].x, ring[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            crossings += 1

        j = i
    return crossings


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.
    The polygon is implicitly closed.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    if len(polygon) < 3:
        return False
    return _ray_crossings(point.x, point.y, polygon) % 2 == 1


def point_in_contours(point: Point, contours: Sequence[Sequence[Point]]) -> bool:
    """Even-odd containment against several closed rings at once.

    Crossings are summed over the edges of every ring, so a point inside a
    ring nested in another ring counts as outside.
    """
    total = 0
    for ring in contours:
        if len(ring) >= 2:
            total += _ray_crossings(point.x, point.y, ring)
    return total % 2 == 1


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Compute the convex hull with the gift-wrapping (Jarvis march) algorithm.

    Duplicate points are ignored. The walk starts at the leftmost point (lowest
    y on ties) and, among collinear candidates, jumps to the farthest one, so
    the hull contains no collinear intermediate vertices.

    Args:
        points: Input point set

    Returns:
        Hull vertices in counter-clockwise order (y-up frame). Inputs with
        fewer than three distinct points are returned deduplicated.
    """
    unique = list(dict.fromkeys(points))
    n = len(unique)
    if n < 3:
        return unique

    start = min(range(n), key=lambda i: (unique[i].x, unique[i].y))
    hull: list[Point] = []
    current = start

    while True:
        hull.append(unique[current])
        candidate = (current + 1) % n
        for i in range(n):
            if i == current:
                continue
            turn = cross(unique[current], unique[candidate], unique[i])
            if turn < 0 or (
                turn == 0
                and distance(unique[current], unique[i])
                > distance(unique[current], unique[candidate])
            ):
                candidate = i
        current = candidate
        if current == start or len(hull) >= n:
            break

    return hull
