"""Vector path representation.

A VectorPath is an ordered sequence of segments plus a fill rule. Paths are
frozen: operations that change geometry return a new path with a fresh id.
"""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from vectorgeom.domain.point import Point
from vectorgeom.domain.segment import ClosePath, MoveTo, PathSegment, segment_from_dict
from vectorgeom.exceptions import InvalidPathError


class WindingRule(str, Enum):
    """Fill rule used to decide the interior of a path."""

    NONZERO = "NONZERO"
    EVENODD = "EVENODD"


def new_id() -> str:
    """Generate a fresh identifier for paths, vertices, edges and regions."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class VectorPath:
    """An immutable segment-based vector path.

    Attributes:
        id: Unique identifier (regenerated for every derived path)
        segments: Ordered segments; a non-empty path starts with MoveTo
        closed: Whether the path contains a closing segment
        winding_rule: Fill rule honored by renderers
    """

    id: str = field(default_factory=new_id)
    segments: tuple[PathSegment, ...] = ()
    closed: bool = False
    winding_rule: WindingRule = WindingRule.NONZERO

    def __post_init__(self) -> None:
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))
        if self.segments and not isinstance(self.segments[0], MoveTo):
            raise InvalidPathError(
                f"Path must start with a MoveTo segment, got {self.segments[0].command}"
            )

    @classmethod
    def empty(cls) -> "VectorPath":
        """Create a path with no segments."""
        return cls(segments=(), closed=False, winding_rule=WindingRule.NONZERO)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[PathSegment],
        winding_rule: WindingRule = WindingRule.NONZERO,
    ) -> "VectorPath":
        """Create a path whose ``closed`` flag follows its ClosePath segments."""
        segments = tuple(segments)
        closed = any(isinstance(s, ClosePath) for s in segments)
        return cls(segments=segments, closed=closed, winding_rule=winding_rule)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def commands(self) -> str:
        """Return the command letters of all segments, e.g. ``"MLLZ"``."""
        return "".join(s.command for s in self.segments)

    def anchor_points(self) -> list[Point]:
        """Return every point carried by the segments, controls included."""
        return [p for s in self.segments for p in s.points]

    def with_segments(
        self,
        segments: Iterable[PathSegment],
        closed: bool | None = None,
        winding_rule: WindingRule | None = None,
    ) -> "VectorPath":
        """Derive a new path (fresh id) with replaced segments."""
        return VectorPath(
            segments=tuple(segments),
            closed=self.closed if closed is None else closed,
            winding_rule=self.winding_rule if winding_rule is None else winding_rule,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the path
        """
        return {
            "id": self.id,
            "segments": [s.to_dict() for s in self.segments],
            "closed": self.closed,
            "winding_rule": self.winding_rule.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VectorPath":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a path

        Returns:
            VectorPath instance
        """
        return cls(
            id=data.get("id") or new_id(),
            segments=tuple(segment_from_dict(s) for s in data["segments"]),
            closed=bool(data.get("closed", False)),
            winding_rule=WindingRule(data.get("winding_rule", WindingRule.NONZERO.value)),
        )
