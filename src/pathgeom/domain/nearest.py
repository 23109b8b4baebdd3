"""Result type of nearest-point queries."""

from dataclasses import dataclass, replace

from pathgeom.domain.point import Point


@dataclass(frozen=True, slots=True, order=True)
class Nearest:
    """Closest location found for a target.

    Field order defines the total ordering used to reduce many candidates
    to one: distance first, then index, then t, then the point itself.

    Attributes:
        distance: Euclidean distance from the target to point
        index: Curve index for curve candidates, point index for vertex candidates
        t: Curve parameter in [0, 1] (0.0 for vertex candidates)
        point: Location of the candidate
    """

    distance: float
    index: int
    t: float
    point: Point

    @classmethod
    def from_point(cls, point: Point, target: Point, index: int = 0) -> "Nearest":
        return cls(distance=point.distance(target), index=index, t=0.0, point=point)

    @classmethod
    def from_parameter(cls, point: Point, t: float, target: Point, index: int = 0) -> "Nearest":
        return cls(distance=point.distance(target), index=index, t=t, point=point)

    def with_index(self, index: int) -> "Nearest":
        return replace(self, index=index)
