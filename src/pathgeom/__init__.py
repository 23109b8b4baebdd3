"""pathgeom - Exact nearest-point queries and editing for Bezier paths.

pathgeom models a path as a chain of corner and smooth points with optional
control points. Consecutive points derive line segments or cubic Bezier
curves, and the library finds the closest point on a curve or shape to an
arbitrary target by solving the derivative-of-distance polynomial exactly
(Sturm sequence root isolation followed by Newton refinement).

Example:
    >>> from pathgeom import CornerPoint, Point, Shape
    >>> shape = Shape([CornerPoint(Point(0, 0)), CornerPoint(Point(10, 0))], closed=False)
    >>> shape.nearest_point_on_curves(Point(5, 3), allow_endpoint=False).distance
    3.0
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from pathgeom.core import Bezier, Poly, Segment, Shape, SturmSeq, curve_between
from pathgeom.domain import CornerPoint, CurvePoint, Nearest, Point, SmoothPoint

__all__ = [
    "Bezier",
    "CornerPoint",
    "CurvePoint",
    "Nearest",
    "Point",
    "Poly",
    "Segment",
    "Shape",
    "SmoothPoint",
    "SturmSeq",
    "__author__",
    "__version__",
    "curve_between",
]
