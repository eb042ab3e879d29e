"""CLI application entry point for vectorgeom.

This module provides the main CLI interface using Typer. Shape commands
print SVG path data (or JSON with --json) so they can be piped into other
commands, e.g.

    vectorgeom combine "$(vectorgeom rect 0 0 10 10)" "$(vectorgeom ellipse 10 10 5 5)"
"""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from vectorgeom import __version__
from vectorgeom.cli.output import (
    console,
    print_error,
    print_header,
    print_json,
    print_path_data,
    print_summary,
)
from vectorgeom.config import GeometryConfig, LoggingConfig, VectorGeomSettings
from vectorgeom.core import (
    BooleanEngine,
    BooleanOperation,
    create_ellipse_path,
    create_polygon_path,
    create_rectangle_path,
    create_star_path,
    path_bounds,
    path_to_contours,
)
from vectorgeom.core.geometry import points_bounds
from vectorgeom.domain import VectorPath
from vectorgeom.exceptions import ParseError, VectorGeomError
from vectorgeom.io import format_number, path_to_svg, svg_to_path
from vectorgeom.utils import OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="vectorgeom",
    help="Generate, combine and flatten 2D vector paths.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Per-invocation state shared by the commands."""

    settings: VectorGeomSettings
    operations: OperationLogger
    verbose: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Vectorgeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    precision: Annotated[
        int | None,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places in printed path data (default: exact)",
            min=0,
            max=12,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print a summary line after each result",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress log output except errors",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate, combine and flatten 2D vector paths."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = VectorGeomSettings(
        geometry=GeometryConfig(svg_precision=precision),
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, operations=OperationLogger(logger), verbose=verbose)

    if verbose:
        print_header(__version__)


def _fail(state: CliState, operation: str, error: VectorGeomError) -> NoReturn:
    """Log and print an operation error, then exit with status 1."""
    state.operations.log_operation_error(operation, error)
    if isinstance(error, ParseError):
        print_error(
            f"Could not parse path data: {error.reason}",
            details=f"at offset {error.position}: {error.offending_token!r}",
        )
    else:
        print_error(str(error))
    raise typer.Exit(code=1)


def _run(
    state: CliState,
    operation: str,
    build: Callable[[], VectorPath],
    input_segments: int = 0,
) -> VectorPath:
    """Run a path-producing operation with timing, logging and error reporting."""
    state.operations.log_operation_start(operation)
    start = time.perf_counter()
    try:
        path = build()
    except VectorGeomError as e:
        _fail(state, operation, e)
    duration_ms = (time.perf_counter() - start) * 1000
    state.operations.log_operation_complete(
        operation,
        input_segments=input_segments,
        output_segments=len(path.segments),
        duration_ms=duration_ms,
    )
    return path


def _emit(state: CliState, operation: str, path: VectorPath, as_json: bool) -> None:
    if as_json:
        print_json(path.to_dict())
    else:
        print_path_data(path_to_svg(path, precision=state.settings.geometry.svg_precision))

    if state.verbose:
        print_summary(
            operation,
            segments=len(path.segments),
            bounds=path_bounds(path),
            duration_ms=state.operations.stats.total_duration_ms,
        )


JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the path as JSON instead of SVG path data",
    ),
]


@app.command()
def rect(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Left edge")],
    y: Annotated[float, typer.Argument(help="Top edge")],
    width: Annotated[float, typer.Argument(help="Width")],
    height: Annotated[float, typer.Argument(help="Height")],
    radius: Annotated[
        list[float] | None,
        typer.Option(
            "--radius",
            "-r",
            help="Corner radius; repeat four times for top-left, top-right, "
            "bottom-right, bottom-left",
        ),
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """Print a (rounded) rectangle path."""
    state: CliState = ctx.obj
    if not radius:
        corner_radius: float | list[float] = 0.0
    elif len(radius) == 1:
        corner_radius = radius[0]
    else:
        corner_radius = radius

    path = _run(state, "rect", lambda: create_rectangle_path(x, y, width, height, corner_radius))
    _emit(state, "rect", path, as_json)


@app.command()
def ellipse(
    ctx: typer.Context,
    cx: Annotated[float, typer.Argument(help="Center x")],
    cy: Annotated[float, typer.Argument(help="Center y")],
    rx: Annotated[float, typer.Argument(help="Horizontal radius")],
    ry: Annotated[float, typer.Argument(help="Vertical radius")],
    start: Annotated[
        float,
        typer.Option("--start", help="Start angle in degrees"),
    ] = 0.0,
    end: Annotated[
        float,
        typer.Option("--end", help="End angle in degrees"),
    ] = 360.0,
    inner: Annotated[
        float,
        typer.Option(
            "--inner",
            help="Inner radius as a fraction of the outer radii (0 <= inner < 1)",
        ),
    ] = 0.0,
    as_json: JsonOption = False,
) -> None:
    """Print an ellipse, arc or donut path.

    Angles are measured in degrees from the positive x axis.
    """
    state: CliState = ctx.obj
    start_angle = math.radians(start)
    end_angle = math.tau if (start, end) == (0.0, 360.0) else math.radians(end)

    path = _run(
        state,
        "ellipse",
        lambda: create_ellipse_path(cx, cy, rx, ry, start_angle, end_angle, inner),
    )
    _emit(state, "ellipse", path, as_json)


@app.command()
def polygon(
    ctx: typer.Context,
    cx: Annotated[float, typer.Argument(help="Center x")],
    cy: Annotated[float, typer.Argument(help="Center y")],
    radius: Annotated[float, typer.Argument(help="Circumradius")],
    sides: Annotated[int, typer.Argument(help="Number of sides (>= 3)")],
    corner_radius: Annotated[
        float,
        typer.Option("--corner-radius", "-r", help="Rounded corner inset"),
    ] = 0.0,
    as_json: JsonOption = False,
) -> None:
    """Print a regular polygon path."""
    state: CliState = ctx.obj
    path = _run(
        state,
        "polygon",
        lambda: create_polygon_path(cx, cy, radius, sides, corner_radius),
    )
    _emit(state, "polygon", path, as_json)


@app.command()
def star(
    ctx: typer.Context,
    cx: Annotated[float, typer.Argument(help="Center x")],
    cy: Annotated[float, typer.Argument(help="Center y")],
    outer_radius: Annotated[float, typer.Argument(help="Tip radius")],
    inner_radius: Annotated[float, typer.Argument(help="Valley radius")],
    points: Annotated[int, typer.Argument(help="Number of tips (>= 2)")],
    as_json: JsonOption = False,
) -> None:
    """Print a star path."""
    state: CliState = ctx.obj
    path = _run(
        state,
        "star",
        lambda: create_star_path(cx, cy, outer_radius, inner_radius, points),
    )
    _emit(state, "star", path, as_json)


@app.command()
def combine(
    ctx: typer.Context,
    path_a: Annotated[str, typer.Argument(help="SVG path data of the first operand")],
    path_b: Annotated[str, typer.Argument(help="SVG path data of the second operand")],
    op: Annotated[
        str,
        typer.Option(
            "--op",
            "-o",
            help="Boolean operation (union|subtract|intersect|exclude)",
        ),
    ] = "union",
    resolution: Annotated[
        float | None,
        typer.Option(
            "--resolution",
            help="Sampling resolution for overlapping operands",
        ),
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """Combine two paths with a boolean operation.

    Overlapping operands are approximated from sampled points; disjoint
    operands are combined exactly.
    """
    state: CliState = ctx.obj
    try:
        operation = BooleanOperation.parse(op)
    except ValueError:
        print_error(
            f"Invalid operation: {op}",
            details="Valid values: union, subtract, intersect, exclude",
        )
        raise typer.Exit(code=1)

    config = state.settings.geometry
    if resolution is not None:
        if not resolution > 0:
            print_error(f"Invalid resolution: {resolution}", details="Must be greater than 0")
            raise typer.Exit(code=1)
        config = config.model_copy(update={"sample_resolution": resolution})
    engine = BooleanEngine(config)

    try:
        a = svg_to_path(path_a)
        b = svg_to_path(path_b)
    except VectorGeomError as e:
        _fail(state, operation.value, e)

    path = _run(
        state,
        operation.value,
        lambda: engine.combine(a, b, operation),
        input_segments=len(a.segments) + len(b.segments),
    )
    _emit(state, operation.value, path, as_json)


@app.command()
def sample(
    ctx: typer.Context,
    path_data: Annotated[str, typer.Argument(help="SVG path data to flatten")],
    resolution: Annotated[
        float | None,
        typer.Option(
            "--resolution",
            help="Target distance between samples (default: 0.1)",
        ),
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """Flatten a path and print its points, one "x y" pair per line.

    Subpaths are separated by a blank line.
    """
    state: CliState = ctx.obj
    config = state.settings.geometry
    step = resolution if resolution is not None else config.sample_resolution
    precision = config.svg_precision

    state.operations.log_operation_start("sample", resolution=step)
    start = time.perf_counter()
    try:
        path = svg_to_path(path_data)
        contours = path_to_contours(path, step, config.max_sample_points)
    except VectorGeomError as e:
        _fail(state, "sample", e)

    point_count = sum(len(contour) for contour in contours)
    state.operations.log_sampling(path.id, step, point_count)
    state.operations.log_operation_complete(
        "sample",
        input_segments=len(path.segments),
        output_segments=0,
        duration_ms=(time.perf_counter() - start) * 1000,
    )

    if as_json:
        print_json([[point.to_tuple() for point in contour] for contour in contours])
    else:
        blocks = [
            "\n".join(
                f"{format_number(p.x, precision)} {format_number(p.y, precision)}"
                for p in contour
            )
            for contour in contours
        ]
        print_path_data("\n\n".join(blocks))

    if state.verbose:
        flat = [p for contour in contours for p in contour]
        console.print(
            f"{point_count} points in {len(contours)} contours", highlight=False
        )
        print_summary(
            "sample",
            segments=len(path.segments),
            bounds=points_bounds(flat),
            duration_ms=state.operations.stats.total_duration_ms,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
