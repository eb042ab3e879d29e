"""Path data I/O for vectorgeom.

This module converts between VectorPath values and SVG path-data strings.

Key functions:
- path_to_svg: Encode a path as ``d`` attribute text
- svg_to_path: Decode absolute ``M L C Q A Z`` path data
"""

from vectorgeom.io.svg import format_number, path_to_svg, svg_to_path

__all__ = [
    "format_number",
    "path_to_svg",
    "svg_to_path",
]
