"""Bridge between shapes and fontTools pens.

draw_shape() replays a shape into any fontTools pen, so shapes can be
drawn into glyphs or recorded. shape_from_recording() goes the other way,
turning RecordingPen output into shapes, one per contour.
"""

from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment

from pathgeom.core.bezier import Bezier, quad_to_cubic
from pathgeom.core.shape import Shape
from pathgeom.domain import CornerPoint, Point


def draw_shape(shape: Shape, pen: Any) -> None:
    """Draw a shape with a fontTools pen.

    Emits moveTo for the first point, then lineTo or curveTo per curve.
    A closed shape ends with closePath; when its closing curve is a line
    the lineTo is left implicit. An open shape ends with endPath.

    Args:
        shape: Shape to draw
        pen: Any object implementing the fontTools pen protocol
    """
    if shape.is_empty():
        return

    points = shape.points()
    pen.moveTo(points[0].point.to_tuple())

    curves = list(shape.curves())
    for i, curve in enumerate(curves):
        closing = shape.closed() and i == len(curves) - 1
        if isinstance(curve, Bezier):
            pen.curveTo(curve.ctrl1.to_tuple(), curve.ctrl2.to_tuple(), curve.end.to_tuple())
        elif not closing:
            pen.lineTo(curve.end.to_tuple())

    if shape.closed():
        pen.closePath()
    else:
        pen.endPath()


def _append_cubic(points: list[CornerPoint], ctrl1: Point, ctrl2: Point, end: Point) -> None:
    points[-1].update_out_ctrl(ctrl1)
    points.append(CornerPoint(end, in_ctrl=ctrl2))


def _finish(points: list[CornerPoint], closed: bool) -> Shape:
    # Contours usually repeat the start point before closing.
    if closed and len(points) > 1 and points[-1].point == points[0].point:
        last = points.pop()
        if last.in_ctrl is not None:
            points[0].update_in_ctrl(last.in_ctrl)
    return Shape(points, closed=closed)


def shape_from_recording(recording: list[tuple[str, tuple[Any, ...]]]) -> list[Shape]:
    """Convert RecordingPen commands to shapes.

    Every point becomes a CornerPoint. Quadratic segments are degree
    elevated, so the shapes trace exactly the recorded outline.

    Args:
        recording: The value list of a fontTools RecordingPen

    Returns:
        One shape per contour, in recording order

    Raises:
        ValueError: If a quadratic contour has no on-curve points
    """
    shapes: list[Shape] = []
    current: list[CornerPoint] = []

    for command, args in recording:
        if command == "moveTo":
            if current:
                shapes.append(_finish(current, closed=False))
            current = [CornerPoint(Point.from_xy(*args[0]))]

        elif command == "lineTo":
            current.append(CornerPoint(Point.from_xy(*args[0])))

        elif command == "curveTo":
            for c1, c2, end in decomposeSuperBezierSegment(list(args)):
                _append_cubic(
                    current, Point.from_xy(*c1), Point.from_xy(*c2), Point.from_xy(*end)
                )

        elif command == "qCurveTo":
            if args[-1] is None:
                raise ValueError("Quadratic contours without on-curve points are not supported")
            for ctrl, end in decomposeQuadraticSegment(list(args)):
                start = current[-1].point
                _, c1, c2, on = quad_to_cubic(start, Point.from_xy(*ctrl), Point.from_xy(*end))
                _append_cubic(current, c1, c2, on)

        elif command in ("closePath", "endPath"):
            if current:
                shapes.append(_finish(current, closed=command == "closePath"))
                current = []

    if current:
        shapes.append(_finish(current, closed=False))

    return shapes
