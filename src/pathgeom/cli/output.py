"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathgeom.core import Curve, Shape, curve_kind
from pathgeom.domain import Nearest, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_point(point: Point) -> str:
    return f"({point.x:.6g}, {point.y:.6g})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]pathgeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_shape_info(shape_path: str, shape: Shape) -> None:
    """Print a shape summary and its curve table.

    Args:
        shape_path: Path the shape was loaded from
        shape: Loaded shape
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(shape_path)
    line.append(" (closed)" if shape.closed() else " (open)")
    console.print(line)
    console.print(f"  {len(shape)} points {SYM_DOT} {shape.curve_count()} curves")

    if shape.curve_count() == 0:
        return

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("start")
    table.add_column("end")
    for i, curve in enumerate(shape.curves()):
        table.add_row(str(i), curve_kind(curve), *_curve_ends(curve))
    console.print(table)


def _curve_ends(curve: Curve) -> tuple[str, str]:
    return format_point(curve.start), format_point(curve.end)


def print_nearest(nearest: Nearest | None, target: Point) -> None:
    """Print the result of a nearest-point query.

    Args:
        nearest: Query result, None when nothing was found
        target: Query target
    """
    if nearest is None:
        console.print(f"  No curve point near {format_point(target)}")
        return

    console.print(f"  point     {format_point(nearest.point)}")
    console.print(f"  distance  {nearest.distance:.6g}")
    console.print(f"  index     {nearest.index} {SYM_DOT} t = {nearest.t:.6g}")


def print_roots(roots: list[float]) -> None:
    """Print polynomial roots, one per line."""
    if not roots:
        console.print("  No real roots")
        return

    console.print(f"  [green]{len(roots)}[/green] real roots")
    for root in roots:
        console.print(f"  {root:.12g}")


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary of what was done
        output_path: File written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
