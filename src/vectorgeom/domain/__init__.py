"""Domain models for vectorgeom.

This module contains the data model of the geometry engine: points, path
segments, paths, authoring vertices and the vector network types. Models are:

- Immutable where possible (frozen dataclasses)
- Serializable to plain dictionaries
- Free of any rendering or UI dependency

Key classes:
- Point: A 2D point value
- MoveTo/LineTo/CubicTo/QuadTo/ArcTo/ClosePath: Path segments
- VectorPath: An immutable segment-based path
- VectorVertex: An editable anchor with Bezier handles
- VectorEdge/VectorRegion/VectorNetwork: Network representation
"""

from vectorgeom.domain.path import VectorPath, WindingRule, new_id
from vectorgeom.domain.point import ORIGIN, Point
from vectorgeom.domain.segment import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathSegment,
    QuadTo,
    segment_from_dict,
)
from vectorgeom.domain.vertex import (
    HandleMirroring,
    NotFound,
    StrokeCap,
    VectorEdge,
    VectorNetwork,
    VectorRegion,
    VectorVertex,
)

__all__: list[str] = [
    # Enums
    "HandleMirroring",
    "StrokeCap",
    "WindingRule",
    # Core types
    "ORIGIN",
    "Point",
    "ArcTo",
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "PathSegment",
    "QuadTo",
    "VectorPath",
    "NotFound",
    "VectorEdge",
    "VectorNetwork",
    "VectorRegion",
    "VectorVertex",
    # Helpers
    "new_id",
    "segment_from_dict",
]
