"""Path segment types.

Each SVG path command has its own frozen dataclass so that the number of
points a segment carries is fixed by its fields:

- MoveTo (M): one point
- LineTo (L): one point
- CubicTo (C): two control points and an end point
- QuadTo (Q): one control point and an end point
- ArcTo (A): an end point plus radii, rotation and flags
- ClosePath (Z): no points
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from vectorgeom.domain.point import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``point``."""

    command: ClassVar[str] = "M"

    point: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.point,)

    @property
    def end_point(self) -> Point:
        return self.point

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "points": [self.point.to_dict()]}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the current point to ``point``."""

    command: ClassVar[str] = "L"

    point: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.point,)

    @property
    def end_point(self) -> Point:
        return self.point

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "points": [self.point.to_dict()]}


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier from the current point to ``end``."""

    command: ClassVar[str] = "C"

    control1: Point
    control2: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.control1, self.control2, self.end)

    @property
    def end_point(self) -> Point:
        return self.end

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "points": [p.to_dict() for p in self.points]}


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier from the current point to ``end``."""

    command: ClassVar[str] = "Q"

    control: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.control, self.end)

    @property
    def end_point(self) -> Point:
        return self.end

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "points": [p.to_dict() for p in self.points]}


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Elliptical arc from the current point to ``end``.

    Attributes:
        end: Arc end point
        rx: X radius
        ry: Y radius
        rotation: X-axis rotation in degrees (SVG convention)
        large_arc: Choose the arc spanning more than 180 degrees
        sweep: Draw in the positive-angle direction
    """

    command: ClassVar[str] = "A"

    end: Point
    rx: float
    ry: float
    rotation: float = 0.0
    large_arc: bool = False
    sweep: bool = False

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.end,)

    @property
    def end_point(self) -> Point:
        return self.end

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "points": [self.end.to_dict()],
            "arc": {
                "rx": self.rx,
                "ry": self.ry,
                "rotation": self.rotation,
                "large_arc": self.large_arc,
                "sweep": self.sweep,
            },
        }


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath back to its starting point."""

    command: ClassVar[str] = "Z"

    @property
    def points(self) -> tuple[Point, ...]:
        return ()

    @property
    def end_point(self) -> None:
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "points": []}


PathSegment = MoveTo | LineTo | CubicTo | QuadTo | ArcTo | ClosePath


def segment_from_dict(data: dict[str, Any]) -> PathSegment:
    """Deserialize a segment produced by ``to_dict``.

    Args:
        data: Dictionary with ``command``, ``points`` and, for arcs, ``arc``

    Returns:
        The matching segment instance

    Raises:
        ValueError: If the command is unknown or the point count is wrong
    """
    command = data["command"]
    points = [Point.from_dict(p) for p in data.get("points", [])]
    expected = {"M": 1, "L": 1, "C": 3, "Q": 2, "A": 1, "Z": 0}
    if command not in expected:
        raise ValueError(f"Unknown segment command: {command!r}")
    if len(points) != expected[command]:
        raise ValueError(
            f"Segment {command} expects {expected[command]} points, got {len(points)}"
        )

    if command == "M":
        return MoveTo(points[0])
    if command == "L":
        return LineTo(points[0])
    if command == "C":
        return CubicTo(points[0], points[1], points[2])
    if command == "Q":
        return QuadTo(points[0], points[1])
    if command == "A":
        arc = data["arc"]
        return ArcTo(
            end=points[0],
            rx=float(arc["rx"]),
            ry=float(arc["ry"]),
            rotation=float(arc.get("rotation", 0.0)),
            large_arc=bool(arc.get("large_arc", False)),
            sweep=bool(arc.get("sweep", False)),
        )
    return ClosePath()
