"""Straight line segment primitive."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathgeom.core._parametric import check_parameter
from pathgeom.domain import Nearest, Point

if TYPE_CHECKING:
    from pathgeom.config import SolverConfig


@dataclass(frozen=True, slots=True)
class Segment:
    """Line from start to end, parametrized as a*t + b for t in [0, 1].

    Attributes:
        start: Point at t = 0
        end: Point at t = 1
    """

    start: Point
    end: Point

    def parametric_coefficients(self) -> tuple[Point, Point]:
        """Return (a, b) such that the segment is a*t + b."""
        return (self.end - self.start, self.start)

    def at(self, t: float) -> Point:
        """Evaluate the segment at parameter t.

        Raises:
            ParameterError: If t is outside [0, 1]
        """
        check_parameter(t)
        a, b = self.parametric_coefficients()
        return a * t + b

    def length(self) -> float:
        return self.start.distance(self.end)

    def distance_derivative(self, target: Point) -> tuple[float, float]:
        """Coefficients (p, q) of the half derivative of squared distance, p*t + q."""
        a, b = self.parametric_coefficients()
        return (a.dot(a), (b - target).dot(a))

    def nearest_to(
        self,
        target: Point,
        allow_endpoint: bool = False,
        config: "SolverConfig | None" = None,  # noqa: ARG002
    ) -> Nearest | None:
        """Find the point on the segment closest to target.

        The squared distance is quadratic in t, so its single stationary
        point is solved directly.

        Args:
            target: Point to measure from
            allow_endpoint: If True, a projection falling outside the segment
                is clamped onto the nearest endpoint; if False, only strictly
                interior results are returned
            config: Unused, accepted so both curve kinds share one signature

        Returns:
            Nearest with index 0, or None for a zero-length segment or a
            projection outside the interior when endpoints are not allowed
        """
        p, q = self.distance_derivative(target)
        if p == 0.0:
            return None

        t = -q / p
        if allow_endpoint:
            t = min(max(t, 0.0), 1.0)
        elif not 0.0 < t < 1.0:
            return None

        return Nearest.from_parameter(self.at(t), t, target)
