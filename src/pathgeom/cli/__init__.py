"""Command-line interface for pathgeom.

This module provides a developer CLI using Typer with rich output.

Commands:
- info: summarize a shape file
- nearest: closest point on a shape to a target
- insert: split a curve of a shape file
- roots: real roots of a polynomial
"""

from pathgeom.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
