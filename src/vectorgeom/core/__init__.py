"""Core geometry algorithms for vectorgeom.

This module contains the algorithms of the engine:

- Point/vector arithmetic and Bezier math
- Shape generation (rectangles, ellipses, polygons, stars)
- Path flattening at a chord resolution
- Approximate boolean operations on paths
- Conversion between paths and vector networks
- The pen-tool authoring session

Everything except AuthoringSession is pure and stateless.

Key functions:
- cubic_bezier_point / quadratic_bezier_point: Evaluate curves
- split_cubic_bezier: De Casteljau subdivision
- create_rectangle_path / create_ellipse_path / create_polygon_path /
  create_star_path: Shape generators
- path_to_points: Flatten a path
- boolean_operation: Combine two paths
- path_to_network / network_to_path: Network conversion

Key classes:
- BooleanEngine: Boolean operations bound to a GeometryConfig
- AuthoringSession: Pen-tool state machine
"""

from vectorgeom.core.authoring import AuthoringSession, PenToolMode, SessionState
from vectorgeom.core.bezier import (
    ArcCenter,
    SplitCubic,
    arc_center_parameters,
    arc_point,
    arc_to_cubics,
    cubic_bezier_derivative,
    cubic_bezier_point,
    quadratic_bezier_point,
    quadratic_to_cubic,
    split_cubic_bezier,
)
from vectorgeom.core.boolean import (
    BooleanEngine,
    BooleanOperation,
    boolean_operation,
    points_to_path,
)
from vectorgeom.core.geometry import (
    Bounds,
    convex_hull,
    path_bounds,
    point_in_contours,
    point_in_polygon,
    signed_area,
)
from vectorgeom.core.network import network_to_path, path_to_network
from vectorgeom.core.sampler import DEFAULT_RESOLUTION, path_to_contours, path_to_points
from vectorgeom.core.shapes import (
    KAPPA,
    RECTANGLE_CORNER_FACTOR,
    create_ellipse_path,
    create_polygon_path,
    create_rectangle_path,
    create_star_path,
)

__all__ = [
    # Authoring
    "AuthoringSession",
    "PenToolMode",
    "SessionState",
    # Bezier
    "ArcCenter",
    "SplitCubic",
    "arc_center_parameters",
    "arc_point",
    "arc_to_cubics",
    "cubic_bezier_derivative",
    "cubic_bezier_point",
    "quadratic_bezier_point",
    "quadratic_to_cubic",
    "split_cubic_bezier",
    # Boolean
    "BooleanEngine",
    "BooleanOperation",
    "boolean_operation",
    "points_to_path",
    # Geometry
    "Bounds",
    "convex_hull",
    "path_bounds",
    "point_in_contours",
    "point_in_polygon",
    "signed_area",
    # Network
    "network_to_path",
    "path_to_network",
    # Sampler
    "DEFAULT_RESOLUTION",
    "path_to_contours",
    "path_to_points",
    # Shapes
    "KAPPA",
    "RECTANGLE_CORNER_FACTOR",
    "create_ellipse_path",
    "create_polygon_path",
    "create_rectangle_path",
    "create_star_path",
]
