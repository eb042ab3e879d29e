"""Command-line interface for vectorgeom.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Shape generators printing SVG path data or JSON
- Boolean combination of two paths
- Path flattening to point lists
- Detailed error reporting
"""

from vectorgeom.cli.app import cli, main

__all__ = ["cli", "main"]
