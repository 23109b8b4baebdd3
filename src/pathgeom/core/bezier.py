"""Cubic Bezier curve primitive.

A cubic is stored by its four control points. For evaluation and
nearest-point queries it is converted to power basis:

    B(t) = a*t^3 + b*t^2 + c*t + d

    a = -start + 3*(ctrl1 - ctrl2) + end
    b = 3*(start - 2*ctrl1 + ctrl2)
    c = 3*(ctrl1 - start)
    d = start

Quadratic curves are represented by their exact degree elevation.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathgeom.config import SolverConfig
from pathgeom.core._parametric import check_parameter
from pathgeom.core.poly import Poly, RootKind
from pathgeom.domain import Nearest, Point

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_DEFAULT_SOLVER = SolverConfig()

_ZERO = Point(0.0, 0.0)


def quad_to_cubic(start: Point, ctrl: Point, end: Point) -> tuple[Point, Point, Point, Point]:
    """Degree-elevate a quadratic Bezier into cubic control points.

    Args:
        start: Start point of the quadratic
        ctrl: Single control point of the quadratic
        end: End point of the quadratic

    Returns:
        Tuple of (start, ctrl1, ctrl2, end) tracing the same curve
    """
    ctrl1 = start + (ctrl - start) * (2.0 / 3.0)
    ctrl2 = end + (ctrl - end) * (2.0 / 3.0)
    return (start, ctrl1, ctrl2, end)


@dataclass(frozen=True, slots=True)
class Bezier:
    """Cubic Bezier curve.

    Attributes:
        start: Point at t = 0
        ctrl1: Control point leaving start
        ctrl2: Control point entering end
        end: Point at t = 1
    """

    start: Point
    ctrl1: Point
    ctrl2: Point
    end: Point

    @classmethod
    def new_quad(cls, start: Point, ctrl: Point, end: Point) -> "Bezier":
        """Build the cubic equivalent to a quadratic Bezier."""
        return cls(*quad_to_cubic(start, ctrl, end))

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        return (self.start, self.ctrl1, self.ctrl2, self.end)

    def __iter__(self) -> "Iterator[Point]":
        return iter(self.control_points())

    def is_degenerate(self) -> bool:
        """True when all four control points coincide."""
        return self.start == self.ctrl1 == self.ctrl2 == self.end

    def _coordinate_scale(self) -> float:
        return max(max(abs(p.x), abs(p.y)) for p in self.control_points())

    def parametric_coefficients(
        self, coefficient_epsilon: float = 0.0
    ) -> tuple[Point, Point, Point, Point]:
        """Power-basis coefficients (a, b, c, d).

        A degree-elevated quadratic should have a == 0 but rounding leaves a
        vector of the order of machine epsilon. Any of a, b, c whose length
        is below coefficient_epsilon times the largest control point
        coordinate is snapped to zero so the distance polynomial keeps its
        true degree.

        Args:
            coefficient_epsilon: Relative snapping threshold (0 disables it)

        Returns:
            Tuple of (a, b, c, d)
        """
        start, ctrl1, ctrl2, end = self.control_points()
        a = -start + (ctrl1 - ctrl2) * 3.0 + end
        b = (start - ctrl1 * 2.0 + ctrl2) * 3.0
        c = (ctrl1 - start) * 3.0
        d = start

        if coefficient_epsilon > 0.0:
            threshold = coefficient_epsilon * self._coordinate_scale()
            a, b, c = (
                _ZERO if v.length_from_origin() <= threshold else v for v in (a, b, c)
            )
        return (a, b, c, d)

    def at(self, t: float) -> Point:
        """Evaluate the curve at parameter t.

        Raises:
            ParameterError: If t is outside [0, 1]
        """
        check_parameter(t)
        a, b, c, d = self.parametric_coefficients()
        return ((a * t + b) * t + c) * t + d

    def distance_derivative(
        self, target: Point, coefficient_epsilon: float = _DEFAULT_SOLVER.coefficient_epsilon
    ) -> Poly:
        """Half the derivative of |B(t) - target|^2, a quintic in t.

        With dt = d - target the coefficients are

            3a.a, 5a.b, 4a.c + 2b.b, 3a.dt + 3b.c, 2b.dt + c.c, c.dt

        Its roots are the parameters where the curve is locally closest to
        or farthest from target.
        """
        a, b, c, d = self.parametric_coefficients(coefficient_epsilon)
        dt = d - target
        return Poly(
            [
                3.0 * a.dot(a),
                5.0 * a.dot(b),
                4.0 * a.dot(c) + 2.0 * b.dot(b),
                3.0 * a.dot(dt) + 3.0 * b.dot(c),
                2.0 * b.dot(dt) + c.dot(c),
                c.dot(dt),
            ]
        )

    def nearest_to(
        self,
        target: Point,
        allow_endpoint: bool = False,
        config: SolverConfig | None = None,
    ) -> Nearest | None:
        """Find the point on the curve closest to target.

        Interior candidates are the stationary points of the squared
        distance strictly inside (0, 1). Endpoints at t = 0 and t = 1 are
        added only when allow_endpoint is set.

        Args:
            target: Point to measure from
            allow_endpoint: Whether t = 0 and t = 1 are candidates
            config: Solver settings (defaults when None)

        Returns:
            Nearest with index 0, or None when there is no candidate or the
            curve collapses to a single point
        """
        if self.is_degenerate():
            return None

        config = config or _DEFAULT_SOLVER
        poly = self.distance_derivative(target, config.coefficient_epsilon)
        roots = poly.real_roots_in(0.0, 1.0, config)

        candidates: list[float] = []
        if roots.kind is RootKind.FINITE:
            candidates.extend(t for t in roots if 0.0 < t < 1.0)
        if allow_endpoint:
            candidates.extend((0.0, 1.0))

        if not candidates:
            return None

        logger.debug("Nearest candidates for %s: %s", target, candidates)
        return min(Nearest.from_parameter(self.at(t), t, target) for t in candidates)

    def split_at(self, t: float) -> tuple["Bezier", "Bezier"]:
        """Split into two cubics meeting at B(t) (de Casteljau).

        The left piece covers [0, t] and the right piece [t, 1] of this
        curve. Together they trace the same path.

        Raises:
            ParameterError: If t is outside [0, 1]
        """
        split = self.at(t)
        nt = 1.0 - t
        start, ctrl1, ctrl2, end = self.control_points()

        left = Bezier(
            start,
            ctrl1 * t + start * nt,
            ctrl2 * (t * t) + ctrl1 * (2.0 * t * nt) + start * (nt * nt),
            split,
        )
        right = Bezier(
            split,
            end * (t * t) + ctrl2 * (2.0 * t * nt) + ctrl1 * (nt * nt),
            end * t + ctrl2 * nt,
            end,
        )
        return left, right
