"""Rich console output helpers for the CLI.

Path data and JSON are printed without markup or wrapping so the output can
be piped into other tools; errors and summaries use Rich styling.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

from vectorgeom.core import Bounds

console = Console()

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"[bold]Vectorgeom[/bold] v{version}")


def print_path_data(d: str) -> None:
    """Print SVG path data verbatim."""
    console.print(d, markup=False, highlight=False, soft_wrap=True)


def print_json(data: Any) -> None:
    """Print a JSON document verbatim."""
    console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)


def print_summary(
    operation: str,
    segments: int,
    bounds: Bounds,
    duration_ms: float,
) -> None:
    """Print a one-line result summary.

    Args:
        operation: Operation name
        segments: Number of segments in the result
        bounds: Result bounding box
        duration_ms: Operation time in milliseconds
    """
    if bounds.is_empty:
        size = "empty"
    else:
        size = f"{bounds.width:g} x {bounds.height:g}"
    console.print(
        f"[green]{SYM_OK}[/green] {operation} {SYM_DOT} {segments} segments "
        f"{SYM_DOT} {size} {SYM_DOT} {duration_ms:.1f}ms",
        highlight=False,
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", highlight=False)
    if details:
        console.print(f"  {details}", markup=False, highlight=False)
