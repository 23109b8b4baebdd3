"""Shape I/O layer for pathgeom.

This module handles moving shapes in and out of the library.

Key responsibilities:
- Load and save JSON shape files
- Draw shapes with fontTools pens
- Convert fontTools RecordingPen output to shapes

Key classes:
- ShapeReader: Load shape files
- ShapeWriter: Save shape files
"""

from pathgeom.io.files import ShapeReader, ShapeWriter
from pathgeom.io.pen import draw_shape, shape_from_recording

__all__ = [
    "ShapeReader",
    "ShapeWriter",
    "draw_shape",
    "shape_from_recording",
]
