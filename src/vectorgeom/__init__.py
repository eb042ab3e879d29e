"""Vectorgeom - Vector path geometry engine for a Figma-style editor.

Vectorgeom provides the pure geometry core of a vector design tool: a
segment-based path model with SVG path-data encoding, procedural shapes
(rectangles, ellipses, arcs, donuts, polygons, stars), curve flattening,
approximate path boolean operations and a pen-tool authoring session.

Example:
    >>> from vectorgeom.core import create_rectangle_path, boolean_operation
    >>> a = create_rectangle_path(0, 0, 100, 50, 10)
    >>> b = create_rectangle_path(200, 0, 100, 50, 10)
    >>> union = boolean_operation(a, b, "UNION")
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
