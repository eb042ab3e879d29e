"""Interactive pen-tool authoring session.

An AuthoringSession builds a path one vertex at a time and lets the caller
edit vertices and handles while the path is in progress. The session is
owned by its caller (one per editing tool instance) and is not thread-safe:
all calls on one session must be serialized.

The in-progress path is derived from the vertex list. The segment between
two consecutive vertices is a cubic when the first has a handle_out or the
second has a handle_in, and a straight line otherwise.

Edits that name an unknown vertex return NotFound rather than raising, since
pointer events can race with deletions in the UI.
"""

import logging
from enum import Enum
from itertools import pairwise
from typing import Literal

from vectorgeom.core.bezier import split_cubic_bezier
from vectorgeom.core.vector import add, distance, lerp, normalize, reflect, scale, subtract
from vectorgeom.domain import (
    ClosePath,
    CubicTo,
    HandleMirroring,
    LineTo,
    MoveTo,
    NotFound,
    PathSegment,
    Point,
    VectorEdge,
    VectorNetwork,
    VectorPath,
    VectorVertex,
    WindingRule,
    new_id,
)
from vectorgeom.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

HandleSide = Literal["in", "out"]


class SessionState(str, Enum):
    """Pen tool state."""

    IDLE = "idle"
    DRAWING = "drawing"


class PenToolMode(str, Enum):
    """Whether pointer input adds vertices or edits existing ones."""

    DRAW = "draw"
    EDIT = "edit"


class AuthoringSession:
    """Single-writer state of a path being drawn with the pen tool.

    Example:
        session = AuthoringSession()
        session.start_path(Point(0, 0))
        session.add_vertex(Point(100, 0))
        session.add_vertex(Point(100, 100), handle_out=Point(120, 120))
        path = session.close_path()
    """

    def __init__(self) -> None:
        self._state = SessionState.IDLE
        self._vertices: list[VectorVertex] = []
        self._path_id: str | None = None
        self._selected_vertex_ids: set[str] = set()
        self._selected_edge_ids: set[str] = set()
        self.pen_tool_mode = PenToolMode.DRAW

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_drawing(self) -> bool:
        return self._state is SessionState.DRAWING

    @property
    def vertices(self) -> tuple[VectorVertex, ...]:
        """Vertices of the in-progress path, in drawing order."""
        return tuple(self._vertices)

    @property
    def selected_vertex_ids(self) -> frozenset[str]:
        return frozenset(self._selected_vertex_ids)

    @property
    def selected_edge_ids(self) -> frozenset[str]:
        """Selected edges, each named by its start vertex id."""
        return frozenset(self._selected_edge_ids)

    @property
    def current_path(self) -> VectorPath | None:
        """The open in-progress path, or None when idle."""
        if not self.is_drawing or self._path_id is None:
            return None
        return VectorPath(
            id=self._path_id,
            segments=tuple(self._segments()),
            closed=False,
            winding_rule=WindingRule.NONZERO,
        )

    def _segments(self) -> list[PathSegment]:
        if not self._vertices:
            return []
        segments: list[PathSegment] = [MoveTo(self._vertices[0].position)]
        for prev, cur in pairwise(self._vertices):
            if prev.handle_out is not None or cur.handle_in is not None:
                segments.append(
                    CubicTo(
                        prev.handle_out or prev.position,
                        cur.handle_in or cur.position,
                        cur.position,
                    )
                )
            else:
                segments.append(LineTo(cur.position))
        return segments

    def _index(self, vertex_id: str) -> int | None:
        for i, v in enumerate(self._vertices):
            if v.id == vertex_id:
                return i
        return None

    def _find(self, vertex_id: str) -> VectorVertex | None:
        idx = self._index(vertex_id)
        return None if idx is None else self._vertices[idx]

    def _reset(self) -> None:
        self._state = SessionState.IDLE
        self._vertices = []
        self._path_id = None
        self._selected_vertex_ids.clear()
        self._selected_edge_ids.clear()

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def start_path(self, point: Point) -> VectorVertex:
        """Begin a new path at ``point`` (idle -> drawing).

        Any path already in progress is discarded.
        """
        if self.is_drawing:
            logger.debug("Discarding in-progress path %s on start_path", self._path_id)
        self._reset()
        vertex = VectorVertex(
            x=point.x,
            y=point.y,
            handle_mirroring=HandleMirroring.ANGLE_AND_LENGTH,
        )
        self._vertices = [vertex]
        self._path_id = new_id()
        self._state = SessionState.DRAWING
        return vertex

    def add_vertex(self, point: Point, handle_out: Point | None = None) -> VectorVertex | None:
        """Append a vertex to the in-progress path.

        When ``handle_out`` is given, the new vertex gets the mirrored
        ``handle_in = point - (handle_out - point)`` and ANGLE_AND_LENGTH
        mirroring. The connecting segment is a cubic if the previous vertex
        has a handle_out or the new vertex has handles, else a line.

        Returns:
            The new vertex, or None when no path is in progress
        """
        if not self.is_drawing:
            logger.debug("add_vertex ignored: no path in progress")
            return None

        vertex = VectorVertex(x=point.x, y=point.y)
        if handle_out is not None:
            vertex.handle_out = handle_out
            vertex.handle_in = reflect(handle_out, point)
            vertex.handle_mirroring = HandleMirroring.ANGLE_AND_LENGTH
        self._vertices.append(vertex)
        return vertex

    def close_path(self) -> VectorPath:
        """Close and return the finished path, then go idle.

        With fewer than two vertices nothing happens: the current in-progress
        path (or an empty path when idle) is returned and the state is kept.
        """
        if not self.is_drawing:
            return VectorPath.empty()
        if len(self._vertices) < 2:
            return self.current_path or VectorPath.empty()

        segments = self._segments()
        segments.append(ClosePath())
        path = VectorPath(
            id=self._path_id or new_id(),
            segments=tuple(segments),
            closed=True,
            winding_rule=WindingRule.NONZERO,
        )
        self._reset()
        return path

    def cancel_path(self) -> None:
        """Discard all in-progress state and go idle."""
        self._reset()

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def move_vertex(self, vertex_id: str, position: Point) -> VectorVertex | NotFound:
        """Move a vertex; its handles move along with it."""
        vertex = self._find(vertex_id)
        if vertex is None:
            return NotFound(vertex_id)

        delta = subtract(position, vertex.position)
        if vertex.handle_in is not None:
            vertex.handle_in = add(vertex.handle_in, delta)
        if vertex.handle_out is not None:
            vertex.handle_out = add(vertex.handle_out, delta)
        vertex.x = position.x
        vertex.y = position.y
        return vertex

    def move_handle(
        self, vertex_id: str, side: HandleSide, position: Point
    ) -> VectorVertex | NotFound:
        """Move one handle of a vertex, applying its mirroring policy.

        - ANGLE_AND_LENGTH: the opposite handle becomes the exact reflection
          of the moved handle through the vertex.
        - ANGLE: the opposite handle keeps its length and points directly
          away from the moved handle.
        - NONE: the opposite handle is untouched.

        Raises:
            ValueError: If side is not "in" or "out"
        """
        if side not in ("in", "out"):
            raise ValueError(f"Handle side must be 'in' or 'out', got {side!r}")
        vertex = self._find(vertex_id)
        if vertex is None:
            return NotFound(vertex_id)

        opposite_attr = "handle_out" if side == "in" else "handle_in"
        setattr(vertex, "handle_in" if side == "in" else "handle_out", position)
        opposite = getattr(vertex, opposite_attr)
        anchor = vertex.position

        if vertex.handle_mirroring is HandleMirroring.ANGLE_AND_LENGTH:
            setattr(vertex, opposite_attr, reflect(position, anchor))
        elif vertex.handle_mirroring is HandleMirroring.ANGLE and opposite is not None:
            direction = normalize(subtract(anchor, position))
            # A handle dropped onto its vertex has no direction to follow
            if direction != Point(0.0, 0.0):
                length = distance(anchor, opposite)
                setattr(vertex, opposite_attr, add(anchor, scale(direction, length)))
        return vertex

    def set_handle_mirroring(
        self, vertex_id: str, mode: HandleMirroring
    ) -> VectorVertex | NotFound:
        """Change a vertex's mirroring mode and re-align its out handle.

        ANGLE_AND_LENGTH reflects handle_in to handle_out. ANGLE points
        handle_out away from handle_in, keeping its length.
        """
        vertex = self._find(vertex_id)
        if vertex is None:
            return NotFound(vertex_id)

        vertex.handle_mirroring = mode
        if vertex.handle_in is not None:
            if mode is HandleMirroring.ANGLE_AND_LENGTH:
                vertex.handle_out = reflect(vertex.handle_in, vertex.position)
            elif mode is HandleMirroring.ANGLE and vertex.handle_out is not None:
                self.move_handle(vertex_id, "in", vertex.handle_in)
        return vertex

    def set_corner_radius(self, vertex_id: str, radius: float) -> VectorVertex | NotFound:
        """Set the rounding radius renderers apply at a vertex.

        Raises:
            InvalidParameterError: If radius is negative
        """
        if radius < 0:
            raise InvalidParameterError("radius", radius, "must not be negative")
        vertex = self._find(vertex_id)
        if vertex is None:
            return NotFound(vertex_id)
        vertex.corner_radius = radius
        return vertex

    def convert_to_corner(self, vertex_id: str) -> VectorVertex | NotFound:
        """Remove both handles and disable mirroring."""
        vertex = self._find(vertex_id)
        if vertex is None:
            return NotFound(vertex_id)
        vertex.handle_in = None
        vertex.handle_out = None
        vertex.handle_mirroring = HandleMirroring.NONE
        return vertex

    def convert_to_smooth(self, vertex_id: str) -> VectorVertex | NotFound:
        """Give a vertex symmetric handles derived from its neighbours.

        Handles are placed at ``vertex -/+ (next - previous) / 4`` with
        ANGLE_AND_LENGTH mirroring. The first and last vertices have only one
        neighbour and are left unchanged. Previously authored handles are not
        restored.
        """
        idx = self._index(vertex_id)
        if idx is None:
            return NotFound(vertex_id)
        vertex = self._vertices[idx]
        if idx == 0 or idx == len(self._vertices) - 1:
            return vertex

        prev = self._vertices[idx - 1]
        nxt = self._vertices[idx + 1]
        offset = scale(subtract(nxt.position, prev.position), 0.25)
        vertex.handle_in = subtract(vertex.position, offset)
        vertex.handle_out = add(vertex.position, offset)
        vertex.handle_mirroring = HandleMirroring.ANGLE_AND_LENGTH
        return vertex

    def delete_vertex(self, vertex_id: str) -> VectorVertex | NotFound:
        """Remove a vertex; its neighbours become directly connected."""
        idx = self._index(vertex_id)
        if idx is None:
            return NotFound(vertex_id)
        vertex = self._vertices.pop(idx)
        self._selected_vertex_ids.discard(vertex_id)
        self._selected_edge_ids.discard(vertex_id)
        return vertex

    def split_edge(self, start_vertex_id: str, t: float) -> VectorVertex | NotFound:
        """Insert a vertex on the edge leaving ``start_vertex_id`` at parameter t.

        Curved edges are split with de Casteljau subdivision so the shape is
        unchanged; neighbour handles are shortened accordingly and relax from
        ANGLE_AND_LENGTH to ANGLE mirroring.

        Args:
            start_vertex_id: Vertex at the start of the edge
            t: Split parameter, strictly between 0 and 1

        Returns:
            The inserted vertex, or NotFound if the vertex does not exist or
            has no outgoing edge

        Raises:
            InvalidParameterError: If t is not strictly between 0 and 1
        """
        if not 0 < t < 1:
            raise InvalidParameterError("t", t, "must be strictly between 0 and 1")
        idx = self._index(start_vertex_id)
        if idx is None or idx == len(self._vertices) - 1:
            return NotFound(start_vertex_id)

        a = self._vertices[idx]
        b = self._vertices[idx + 1]

        if a.handle_out is None and b.handle_in is None:
            point = lerp(a.position, b.position, t)
            vertex = VectorVertex(x=point.x, y=point.y)
        else:
            split = split_cubic_bezier(
                a.position,
                a.handle_out or a.position,
                b.handle_in or b.position,
                b.position,
                t,
            )
            left, right = split.left, split.right
            if a.handle_out is not None:
                a.handle_out = left[1]
                if a.handle_mirroring is HandleMirroring.ANGLE_AND_LENGTH:
                    a.handle_mirroring = HandleMirroring.ANGLE
            if b.handle_in is not None:
                b.handle_in = right[2]
                if b.handle_mirroring is HandleMirroring.ANGLE_AND_LENGTH:
                    b.handle_mirroring = HandleMirroring.ANGLE
            vertex = VectorVertex(
                x=left[3].x,
                y=left[3].y,
                handle_in=left[2],
                handle_out=right[1],
                handle_mirroring=HandleMirroring.ANGLE,
            )

        self._vertices.insert(idx + 1, vertex)
        return vertex

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_vertex(
        self, vertex_id: str, add_to_selection: bool = False
    ) -> VectorVertex | NotFound:
        vertex = self._find(vertex_id)
        if vertex is None:
            return NotFound(vertex_id)
        if not add_to_selection:
            self._selected_vertex_ids.clear()
        self._selected_vertex_ids.add(vertex_id)
        return vertex

    def select_edge(
        self, start_vertex_id: str, add_to_selection: bool = False
    ) -> VectorVertex | NotFound:
        """Select the edge leaving ``start_vertex_id``."""
        idx = self._index(start_vertex_id)
        if idx is None or idx == len(self._vertices) - 1:
            return NotFound(start_vertex_id)
        if not add_to_selection:
            self._selected_edge_ids.clear()
        self._selected_edge_ids.add(start_vertex_id)
        return self._vertices[idx]

    def clear_selection(self) -> None:
        self._selected_vertex_ids.clear()
        self._selected_edge_ids.clear()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_network(self) -> VectorNetwork:
        """Snapshot the in-progress vertices as an open vector network."""
        network = VectorNetwork(
            vertices=[
                VectorVertex(
                    x=v.x,
                    y=v.y,
                    id=v.id,
                    handle_in=v.handle_in,
                    handle_out=v.handle_out,
                    corner_radius=v.corner_radius,
                    handle_mirroring=v.handle_mirroring,
                    stroke_cap=v.stroke_cap,
                )
                for v in self._vertices
            ]
        )
        network.edges.extend(
            VectorEdge(start_vertex_id=a.id, end_vertex_id=b.id)
            for a, b in pairwise(self._vertices)
        )
        return network
