"""Authoring vertices and vector network types.

Vertices carry Bezier handles while a path is being drawn or edited with the
pen tool. Edges and regions layer a network over those vertices; see
``vectorgeom.core.network`` for conversion to and from segment paths.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from vectorgeom.domain.path import WindingRule, new_id
from vectorgeom.domain.point import Point


class HandleMirroring(str, Enum):
    """How a vertex's two handles follow each other when one is edited.

    - NONE: handles are independent
    - ANGLE: handles stay collinear through the vertex, lengths may differ
    - ANGLE_AND_LENGTH: handle_out is always the reflection of handle_in
    """

    NONE = "NONE"
    ANGLE = "ANGLE"
    ANGLE_AND_LENGTH = "ANGLE_AND_LENGTH"


class StrokeCap(str, Enum):
    """Stroke cap decoration at an open path end."""

    NONE = "NONE"
    ROUND = "ROUND"
    SQUARE = "SQUARE"
    ARROW_LINES = "ARROW_LINES"
    ARROW_EQUILATERAL = "ARROW_EQUILATERAL"


@dataclass
class VectorVertex:
    """An editable anchor with optional Bezier handles.

    Handles are absolute positions, not offsets from the vertex.

    Attributes:
        id: Stable identifier
        x: X coordinate
        y: Y coordinate
        handle_in: Control point of the incoming curve (None for a corner)
        handle_out: Control point of the outgoing curve (None for a corner)
        corner_radius: Rounding applied by renderers at this vertex
        handle_mirroring: Handle mirroring policy
        stroke_cap: Optional cap at open path ends
    """

    x: float
    y: float
    id: str = field(default_factory=new_id)
    handle_in: Point | None = None
    handle_out: Point | None = None
    corner_radius: float = 0.0
    handle_mirroring: HandleMirroring = HandleMirroring.NONE
    stroke_cap: StrokeCap | None = None

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def has_handles(self) -> bool:
        return self.handle_in is not None or self.handle_out is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "handle_in": self.handle_in.to_dict() if self.handle_in else None,
            "handle_out": self.handle_out.to_dict() if self.handle_out else None,
            "corner_radius": self.corner_radius,
            "handle_mirroring": self.handle_mirroring.value,
            "stroke_cap": self.stroke_cap.value if self.stroke_cap else None,
        }


@dataclass(frozen=True, slots=True)
class NotFound:
    """Result of an authoring edit that named an unknown vertex or edge."""

    vertex_id: str


@dataclass(frozen=True)
class VectorEdge:
    """A connection between two vertices.

    The edge is a cubic curve when the start vertex has a handle_out or the
    end vertex has a handle_in, otherwise a straight line.
    """

    start_vertex_id: str
    end_vertex_id: str
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class VectorRegion:
    """A filled area bounded by one or more closed loops of edges."""

    edge_ids: tuple[str, ...]
    winding_rule: WindingRule = WindingRule.NONZERO
    fill_index: int = 0
    id: str = field(default_factory=new_id)


@dataclass
class VectorNetwork:
    """Vertices, edges and regions describing a vector shape."""

    vertices: list[VectorVertex] = field(default_factory=list)
    edges: list[VectorEdge] = field(default_factory=list)
    regions: list[VectorRegion] = field(default_factory=list)

    def vertex(self, vertex_id: str) -> VectorVertex | None:
        """Look up a vertex by id."""
        for v in self.vertices:
            if v.id == vertex_id:
                return v
        return None
