"""CLI application entry point for pathgeom.

This module provides a small developer CLI using Typer for inspecting
shape files, running nearest-point queries and solving polynomials.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathgeom import __version__
from pathgeom.cli.output import (
    console,
    print_error,
    print_header,
    print_nearest,
    print_roots,
    print_shape_info,
    print_step,
    print_success,
)
from pathgeom.config import LoggingConfig, PathGeomSettings
from pathgeom.core import Poly, RootKind, Shape
from pathgeom.domain import Point
from pathgeom.exceptions import PathGeomError, ShapeLoadError, ShapeSaveError
from pathgeom.io import ShapeReader, ShapeWriter
from pathgeom.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathgeom",
    help="Inspect Bezier shapes and run exact nearest-point queries.",
    add_completion=False,
    no_args_is_help=True,
)

_settings = PathGeomSettings()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pathgeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Inspect Bezier shapes and run exact nearest-point queries."""
    global _settings

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    _settings = PathGeomSettings(logging=LoggingConfig(log_file=log_file, log_level=log_level))
    configure_logging(
        log_file=_settings.logging.log_file,
        console_level=_settings.logging.log_level,
        file_level=_settings.logging.file_log_level,
    )


def _load_shape(shape_file: Path) -> Shape:
    if not shape_file.is_file():
        print_error(
            f"Input file not found: {shape_file}",
            details=f"The file '{shape_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        return ShapeReader(shape_file).load()
    except ShapeLoadError as e:
        print_error(f"Could not load shape: {e.reason}")
        raise typer.Exit(code=1) from e


ShapeFileArg = Annotated[
    Path,
    typer.Argument(
        help="Path to a JSON shape file",
        show_default=False,
    ),
]


@app.command()
def info(shape_file: ShapeFileArg) -> None:
    """Show the points and curves of a shape file."""
    shape = _load_shape(shape_file)
    print_header(__version__)
    print_shape_info(str(shape_file), shape)


@app.command()
def nearest(
    shape_file: ShapeFileArg,
    x: Annotated[float, typer.Argument(help="Target X coordinate")],
    y: Annotated[float, typer.Argument(help="Target Y coordinate")],
    endpoints: Annotated[
        bool,
        typer.Option(
            "--endpoints",
            "-e",
            help="Let the shape's points compete with curve interiors",
        ),
    ] = False,
) -> None:
    """Find the closest point on a shape to (X, Y).

    Example:
        pathgeom nearest shape.json 5 3 --endpoints
    """
    shape = _load_shape(shape_file)
    target = Point(x, y)

    print_step(f"Nearest point to ({x:g}, {y:g})")
    try:
        result = shape.nearest_point_on_curves(target, endpoints, _settings.solver)
    except PathGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_nearest(result, target)


@app.command()
def insert(
    shape_file: ShapeFileArg,
    curve: Annotated[int, typer.Argument(help="Index of the curve to split")],
    t: Annotated[float, typer.Argument(help="Curve parameter in [0, 1]")],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: overwrite the input)",
        ),
    ] = None,
) -> None:
    """Insert a point on a curve without changing the outline."""
    shape = _load_shape(shape_file)
    output_path = output or shape_file

    try:
        shape.insert_on_curve(curve, t)
        ShapeWriter(shape, output_path).save()
    except ShapeSaveError as e:
        print_error(f"Could not save shape: {e.reason}")
        raise typer.Exit(code=1) from e
    except (PathGeomError, ValueError, IndexError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Inserted point {curve + 1} ({len(shape)} points)", str(output_path))


@app.command()
def roots(
    coefficients: Annotated[
        list[float],
        typer.Argument(
            help="Coefficients, highest degree first (put -- before negative values)",
            show_default=False,
        ),
    ],
    start: Annotated[
        float | None,
        typer.Option("--start", help="Exclusive lower bound (default: Cauchy bound)"),
    ] = None,
    end: Annotated[
        float | None,
        typer.Option("--end", help="Inclusive upper bound (default: Cauchy bound)"),
    ] = None,
) -> None:
    """Find the distinct real roots of a polynomial.

    Example:
        pathgeom roots -- 1 -6 11 -6
    """
    try:
        poly = Poly(coefficients)
        if start is None and end is None:
            found = poly.real_roots(_settings.solver)
        else:
            bound = poly.cauchy_bound()
            lo = -bound if start is None else start
            hi = bound if end is None else end
            if lo > hi:
                print_error(f"Empty interval ({lo:g}, {hi:g}]")
                raise typer.Exit(code=1)
            found = poly.real_roots_in(lo, hi, _settings.solver)
    except PathGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_step(f"Roots of {poly!r}")
    if found.kind is RootKind.ANY:
        console.print("  Zero polynomial: every x is a root")
        return
    print_roots(list(found))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
