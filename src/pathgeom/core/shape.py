"""Editable shape: an ordered chain of curve points.

Curves are never stored. They are derived on demand from each pair of
consecutive points, plus a closing curve from the last point back to the
first when the shape is closed.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from pathgeom.config import SolverConfig
from pathgeom.core.bezier import Bezier
from pathgeom.core.curve import Curve, curve_between
from pathgeom.domain import (
    CornerPoint,
    CurvePoint,
    Nearest,
    Point,
    SmoothPoint,
    curve_point_from_dict,
)
from pathgeom.exceptions import CurveIndexError

logger = logging.getLogger(__name__)


class Shape:
    """Ordered list of curve points plus a closed flag.

    The shape has a single owner which mutates it in place. Queries such
    as curves() and nearest_point_on_curves() do not modify it.

    Example:
        >>> shape = Shape.from_points([CornerPoint(Point(0, 0)), CornerPoint(Point(10, 0))])
        >>> len(list(shape.curves()))
        2
    """

    def __init__(self, points: Iterable[CurvePoint] | None = None, closed: bool = False) -> None:
        self._points: list[CurvePoint] = list(points) if points is not None else []
        self._closed = closed

    @classmethod
    def from_points(cls, points: Iterable[CurvePoint]) -> "Shape":
        """Build a closed shape from points."""
        return cls(points, closed=True)

    # ------------------------------------------------------------------
    # Container
    # ------------------------------------------------------------------

    def closed(self) -> bool:
        return self._closed

    def set_close(self, value: bool) -> None:
        self._closed = value

    def toggle_close(self) -> None:
        self._closed = not self._closed

    def __len__(self) -> int:
        return len(self._points)

    def is_empty(self) -> bool:
        return not self._points

    def points(self) -> tuple[CurvePoint, ...]:
        return tuple(self._points)

    def points_mut(self) -> list[CurvePoint]:
        """The live point list; changes to it change the shape."""
        return self._points

    def push(self, point: CurvePoint) -> None:
        self._points.append(point)

    def insert(self, index: int, point: CurvePoint) -> None:
        self._points.insert(index, point)

    def remove(self, index: int) -> CurvePoint:
        """Remove and return the point at index.

        Raises:
            IndexError: If index is out of range
        """
        return self._points.pop(index)

    def replace(self, index: int, point: CurvePoint) -> None:
        """Replace the point at index.

        Raises:
            IndexError: If index is out of range
        """
        self._points[index] = point

    # ------------------------------------------------------------------
    # Curves
    # ------------------------------------------------------------------

    def curve_count(self) -> int:
        """Number of curves: len - 1 when open, len when closed, 0 below two points."""
        n = len(self._points)
        if n < 2:
            return 0
        return n if self._closed else n - 1

    def curves(self) -> Iterator[Curve]:
        """Yield the curves in order, each derived from its two points.

        Every call starts a fresh pass over the current points.
        """
        points = self._points
        for start, end in zip(points, points[1:], strict=False):
            yield curve_between(start, end)
        if self._closed and len(points) >= 2:
            yield curve_between(points[-1], points[0])

    def curve(self, index: int) -> Curve:
        """Return the curve leaving point index.

        Raises:
            CurveIndexError: If index is not a valid curve index
        """
        count = self.curve_count()
        if not 0 <= index < count:
            raise CurveIndexError(index, count)
        points = self._points
        return curve_between(points[index], points[(index + 1) % len(points)])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _endpoint_candidates(self, target: Point) -> Iterator[Nearest]:
        for i, p in enumerate(self._points):
            yield Nearest.from_point(p.point, target, index=i)

    def nearest_endpoint(self, target: Point) -> Nearest | None:
        """Closest curve point position to target, or None for an empty shape."""
        return min(self._endpoint_candidates(target), default=None)

    def nearest_point_on_curves(
        self,
        target: Point,
        allow_endpoint: bool = False,
        config: SolverConfig | None = None,
    ) -> Nearest | None:
        """Closest point to target over the whole shape.

        Each curve is queried for interior points only and its result is
        tagged with the curve index. With allow_endpoint the points' own
        positions compete as well, tagged with the point index.

        Args:
            target: Point to measure from
            allow_endpoint: Whether vertex positions are candidates
            config: Solver settings (defaults when None)

        Returns:
            The minimum candidate by Nearest ordering, or None
        """
        candidates: list[Nearest] = []
        for i, curve in enumerate(self.curves()):
            found = curve.nearest_to(target, False, config)
            if found is not None:
                candidates.append(found.with_index(i))

        if allow_endpoint:
            candidates.extend(self._endpoint_candidates(target))

        return min(candidates, default=None)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def insert_on_curve(self, index: int, t: float) -> CurvePoint:
        """Insert a point on curve index at parameter t, keeping the outline.

        A Bezier is split at t: the bounding points take the inner control
        points of the two halves and a new SmoothPoint at the split carries
        the split's own control points. A Segment just gets a CornerPoint.

        Args:
            index: Curve index
            t: Parameter in [0, 1]

        Returns:
            The inserted point, now at position index + 1

        Raises:
            CurveIndexError: If index is not a valid curve index
            ParameterError: If t is outside [0, 1]
        """
        curve = self.curve(index)
        split = curve.at(t)

        if isinstance(curve, Bezier):
            count = len(self._points)
            left, right = curve.split_at(t)

            self._points[index].update_out_ctrl(left.ctrl1)
            self._points[(index + 1) % count].update_in_ctrl(right.ctrl2)

            point: CurvePoint = SmoothPoint.horizontal(split, 1.0, 1.0)
            point.move_in_ctrl_to(left.ctrl2)
            point.move_out_ctrl_to(right.ctrl1)
        else:
            point = CornerPoint(split)

        self.insert(index + 1, point)
        logger.debug("Inserted point on curve %d at t=%r: %s", index, t, split)
        return point

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "closed": self._closed,
            "points": [p.to_dict() for p in self._points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize a shape.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a point kind is unknown
        """
        points = [curve_point_from_dict(p) for p in data["points"]]
        return cls(points, closed=bool(data.get("closed", False)))

    def __repr__(self) -> str:
        return f"Shape(points={len(self._points)}, closed={self._closed})"
