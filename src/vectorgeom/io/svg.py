"""SVG path-data encoding.

Only absolute ``M L C Q A Z`` commands are supported. Relative (lowercase)
and other commands are rejected with ParseError instead of being guessed at,
so malformed input can never produce NaN or shifted geometry.
"""

import math
import re
from dataclasses import dataclass

from vectorgeom.domain import (
    ArcTo,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathSegment,
    Point,
    QuadTo,
    VectorPath,
    WindingRule,
)
from vectorgeom.exceptions import ParseError

_TOKEN_RE = re.compile(
    r"""
    (?P<command>[A-Za-z])
    |(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
    |(?P<separator>[\s,]+)
    |(?P<invalid>.)
    """,
    re.VERBOSE | re.DOTALL,
)

# Number of arguments consumed by one repetition of each command
_ARITY: dict[str, int] = {"M": 2, "L": 2, "C": 6, "Q": 4, "A": 7, "Z": 0}


@dataclass(frozen=True, slots=True)
class _Token:
    text: str
    position: int


def format_number(value: float, precision: int | None = None) -> str:
    """Format a coordinate with the shortest text that parses back exactly.

    Integral values are written without a decimal point. With ``precision``
    the value is first rounded to that many decimal places.
    """
    if precision is not None:
        value = round(value, precision)
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def path_to_svg(path: VectorPath, precision: int | None = None) -> str:
    """Encode a path as SVG path data.

    Args:
        path: Path to encode
        precision: Optional number of decimal places

    Returns:
        Space-separated tokens such as ``"M 0 0 L 10 0 Z"``

    Examples:
        >>> from vectorgeom.core import create_rectangle_path
        >>> path_to_svg(create_rectangle_path(0, 0, 10, 5))
        'M 0 0 L 10 0 L 10 5 L 0 5 Z'
    """
    def fmt(value: float) -> str:
        return format_number(value, precision)

    parts: list[str] = []
    for segment in path.segments:
        if isinstance(segment, ArcTo):
            parts.append(
                " ".join(
                    [
                        "A",
                        fmt(segment.rx),
                        fmt(segment.ry),
                        fmt(segment.rotation),
                        "1" if segment.large_arc else "0",
                        "1" if segment.sweep else "0",
                        fmt(segment.end.x),
                        fmt(segment.end.y),
                    ]
                )
            )
        elif isinstance(segment, ClosePath):
            parts.append("Z")
        else:
            coords = [fmt(c) for p in segment.points for c in (p.x, p.y)]
            parts.append(" ".join([segment.command, *coords]))
    return " ".join(parts)


def _tokenize(d: str) -> list[tuple[str, _Token]]:
    tokens: list[tuple[str, _Token]] = []
    for match in _TOKEN_RE.finditer(d):
        kind = match.lastgroup
        if kind == "separator":
            continue
        token = _Token(match.group(), match.start())
        if kind == "invalid":
            raise ParseError(token.text, token.position, "unexpected character")
        tokens.append((kind or "invalid", token))
    return tokens


def _parse_flag(token: _Token, value: float) -> bool:
    if value not in (0.0, 1.0):
        raise ParseError(token.text, token.position, "arc flags must be 0 or 1")
    return value == 1.0


def _build_segments(
    command: _Token, args: list[tuple[_Token, float]]
) -> list[PathSegment]:
    name = command.text
    arity = _ARITY[name]

    if arity == 0:
        if args:
            token = args[0][0]
            raise ParseError(token.text, token.position, "Z takes no arguments")
        return [ClosePath()]

    if not args or len(args) % arity:
        token = args[-1][0] if args else command
        raise ParseError(
            token.text,
            token.position,
            f"{name} expects a multiple of {arity} numbers, got {len(args)}",
        )

    values = [v for _, v in args]
    segments: list[PathSegment] = []
    for offset in range(0, len(values), arity):
        chunk = values[offset : offset + arity]
        if name == "M":
            point = Point(chunk[0], chunk[1])
            # Extra coordinate pairs after M are implicit line segments
            segments.append(MoveTo(point) if offset == 0 else LineTo(point))
        elif name == "L":
            segments.append(LineTo(Point(chunk[0], chunk[1])))
        elif name == "C":
            segments.append(
                CubicTo(
                    Point(chunk[0], chunk[1]),
                    Point(chunk[2], chunk[3]),
                    Point(chunk[4], chunk[5]),
                )
            )
        elif name == "Q":
            segments.append(QuadTo(Point(chunk[0], chunk[1]), Point(chunk[2], chunk[3])))
        else:
            segments.append(
                ArcTo(
                    end=Point(chunk[5], chunk[6]),
                    rx=chunk[0],
                    ry=chunk[1],
                    rotation=chunk[2],
                    large_arc=_parse_flag(args[offset + 3][0], chunk[3]),
                    sweep=_parse_flag(args[offset + 4][0], chunk[4]),
                )
            )
    return segments


def svg_to_path(d: str) -> VectorPath:
    """Decode SVG path data into a VectorPath.

    Args:
        d: Path data using absolute M, L, C, Q, A and Z commands separated by
            whitespace and/or commas

    Returns:
        Path with NONZERO fill, closed if any Z command is present. Empty or
        blank input gives an empty path.

    Raises:
        ParseError: On relative or unsupported commands, non-numeric tokens,
            numbers too large to represent, wrong argument counts, invalid
            arc flags, or data not starting with M
    """
    groups: list[tuple[_Token, list[tuple[_Token, float]]]] = []

    for kind, token in _tokenize(d):
        if kind == "command":
            letter = token.text
            if letter.islower() and letter.upper() in _ARITY:
                raise ParseError(
                    letter, token.position, "relative commands are not supported"
                )
            if letter not in _ARITY:
                raise ParseError(letter, token.position, "unsupported path command")
            if not groups and letter != "M":
                raise ParseError(letter, token.position, "path data must begin with M")
            groups.append((token, []))
        else:
            if not groups:
                raise ParseError(token.text, token.position, "number before the first command")
            value = float(token.text)
            if not math.isfinite(value):
                raise ParseError(token.text, token.position, "number out of range")
            groups[-1][1].append((token, value))

    segments: list[PathSegment] = []
    for command, args in groups:
        segments.extend(_build_segments(command, args))

    return VectorPath.from_segments(segments, winding_rule=WindingRule.NONZERO)
