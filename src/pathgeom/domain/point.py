"""Two-dimensional point value type.

Point is the only coordinate type in pathgeom. It doubles as a position
and as a vector, so it carries the small set of vector operations the
curve and shape code needs.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable. Ordering compares x first, then y, which gives
    a deterministic tie-break when reducing query results.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def from_xy(cls, x: float, y: float) -> "Point":
        return cls(float(x), float(y))

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def plus(self, rhs: "Point") -> "Point":
        return Point(self.x + rhs.x, self.y + rhs.y)

    def minus(self, rhs: "Point") -> "Point":
        return Point(self.x - rhs.x, self.y - rhs.y)

    def negative(self) -> "Point":
        return Point(-self.x, -self.y)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def multiply(self, rhs: "Point") -> "Point":
        """Component-wise product."""
        return Point(self.x * rhs.x, self.y * rhs.y)

    def dot(self, rhs: "Point") -> float:
        return self.x * rhs.x + self.y * rhs.y

    def cross(self, rhs: "Point") -> float:
        """Z component of the 3D cross product; zero for collinear vectors."""
        return self.x * rhs.y - self.y * rhs.x

    def length_from_origin(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, rhs: "Point") -> float:
        return math.hypot(self.x - rhs.x, self.y - rhs.y)

    def normalize(self) -> "Point":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length_from_origin()
        if length == 0.0:
            return Point(0.0, 0.0)
        return Point(self.x / length, self.y / length)

    def polar(self) -> tuple[float, float]:
        """Convert to polar coordinates.

        Returns:
            Tuple of (r, theta) where theta is in degrees within [0, 360).
            The zero vector maps to (0.0, 0.0).
        """
        r = self.length_from_origin()
        if r == 0.0:
            return (0.0, 0.0)

        theta = math.degrees(math.atan2(self.y, self.x)) % 360.0
        # -tiny % 360.0 rounds up to exactly 360.0
        if theta >= 360.0:
            theta = 0.0
        return (r, theta)

    def move_follow(self, direction: float, length: float) -> "Point":
        """Move along a direction given in degrees."""
        rad = math.radians(direction)
        return Point(self.x + math.cos(rad) * length, self.y + math.sin(rad) * length)

    def __add__(self, rhs: "Point") -> "Point":
        return self.plus(rhs)

    def __sub__(self, rhs: "Point") -> "Point":
        return self.minus(rhs)

    def __neg__(self) -> "Point":
        return self.negative()

    def __mul__(self, factor: float) -> "Point":
        return self.scale(factor)

    __rmul__ = __mul__

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
