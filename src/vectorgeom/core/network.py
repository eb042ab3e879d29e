"""Conversion between segment paths and vector networks.

A network stores anchors as vertices (with absolute Bezier handles) and the
connections between them as edges. An edge is a cubic when its start vertex
has a handle_out or its end vertex has a handle_in, and a straight line
otherwise. Closed subpaths are listed in a region carrying the path's fill
rule.

Round-trip behavior:
- M, L, C and Z segments convert back exactly, except that an explicit line
  back to the subpath start right before Z folds into the closing edge.
- Q segments come back as the equivalent (degree-elevated) cubic.
- A segments come back as cubic approximations of at most a quarter turn.
"""

from vectorgeom.core.bezier import arc_to_cubics, quadratic_to_cubic
from vectorgeom.domain import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathSegment,
    Point,
    QuadTo,
    VectorEdge,
    VectorNetwork,
    VectorPath,
    VectorRegion,
    VectorVertex,
    WindingRule,
)
from vectorgeom.exceptions import InvalidPathError

_Piece = tuple[Point, Point, Point] | Point


def _segment_pieces(current: Point, segment: PathSegment) -> list[_Piece]:
    """Break a drawing segment into straight ends and (c1, c2, end) cubics."""
    if isinstance(segment, LineTo):
        return [segment.point]
    if isinstance(segment, CubicTo):
        return [(segment.control1, segment.control2, segment.end)]
    if isinstance(segment, QuadTo):
        return [quadratic_to_cubic(current, segment.control, segment.end)]
    if isinstance(segment, ArcTo):
        return list(arc_to_cubics(current, segment))
    return []


def path_to_network(path: VectorPath) -> VectorNetwork:
    """Convert a segment path into a vector network.

    Args:
        path: Source path

    Returns:
        Network with one vertex per anchor and one edge per drawn piece. All
        edges of closed subpaths are collected into a single region.
    """
    network = VectorNetwork()
    closed_edge_ids: list[str] = []
    start: VectorVertex | None = None
    prev: VectorVertex | None = None
    subpath_edges: list[VectorEdge] = []

    def add_vertex(point: Point) -> VectorVertex:
        vertex = VectorVertex(x=point.x, y=point.y)
        network.vertices.append(vertex)
        return vertex

    def connect(a: VectorVertex, b: VectorVertex) -> None:
        edge = VectorEdge(start_vertex_id=a.id, end_vertex_id=b.id)
        network.edges.append(edge)
        subpath_edges.append(edge)

    for segment in path.segments:
        if isinstance(segment, MoveTo):
            start = prev = add_vertex(segment.point)
            subpath_edges = []
            continue

        if start is None or prev is None:
            raise InvalidPathError("Path must start with a MoveTo segment")

        if isinstance(segment, ClosePath):
            if prev is not start:
                if prev.position == start.position and subpath_edges:
                    # Fold the explicit return to the start into the closing edge
                    last = subpath_edges[-1]
                    closing = VectorEdge(
                        start_vertex_id=last.start_vertex_id,
                        end_vertex_id=start.id,
                        id=last.id,
                    )
                    network.edges[network.edges.index(last)] = closing
                    subpath_edges[-1] = closing
                    start.handle_in = prev.handle_in
                    network.vertices.remove(prev)
                else:
                    connect(prev, start)
            closed_edge_ids.extend(e.id for e in subpath_edges)
            subpath_edges = []
            prev = start
            continue

        for piece in _segment_pieces(prev.position, segment):
            if isinstance(piece, Point):
                end = add_vertex(piece)
            else:
                c1, c2, end_point = piece
                end = add_vertex(end_point)
                prev.handle_out = c1
                end.handle_in = c2
            connect(prev, end)
            prev = end

    if closed_edge_ids:
        network.regions.append(
            VectorRegion(edge_ids=tuple(closed_edge_ids), winding_rule=path.winding_rule)
        )
    return network


def network_to_path(network: VectorNetwork) -> VectorPath:
    """Convert a vector network back into a segment path.

    Edges are walked in order; an edge that does not continue from the
    previous edge's end vertex starts a new subpath. An edge returning to its
    subpath's first vertex closes the subpath.

    Args:
        network: Source network

    Returns:
        Path using the first region's fill rule (NONZERO without regions)

    Raises:
        InvalidPathError: If an edge references an unknown vertex
    """
    vertices = {v.id: v for v in network.vertices}
    winding_rule = network.regions[0].winding_rule if network.regions else WindingRule.NONZERO

    segments: list[PathSegment] = []
    chain_start: str | None = None
    chain_end: str | None = None

    for edge in network.edges:
        try:
            a = vertices[edge.start_vertex_id]
            b = vertices[edge.end_vertex_id]
        except KeyError as e:
            raise InvalidPathError(f"Edge {edge.id} references unknown vertex {e.args[0]}") from e

        if chain_end is None or edge.start_vertex_id != chain_end:
            segments.append(MoveTo(a.position))
            chain_start = a.id

        curved = a.handle_out is not None or b.handle_in is not None
        closes = edge.end_vertex_id == chain_start

        if curved:
            segments.append(
                CubicTo(a.handle_out or a.position, b.handle_in or b.position, b.position)
            )
        elif not closes:
            segments.append(LineTo(b.position))

        if closes:
            segments.append(ClosePath())
            chain_end = None
        else:
            chain_end = b.id

    return VectorPath.from_segments(segments, winding_rule=winding_rule)
