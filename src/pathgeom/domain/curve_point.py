"""Curve endpoint types.

A shape is a chain of curve points. Each curve point is one of exactly two
kinds:
- CornerPoint: control points are stored and move independently
- SmoothPoint: control points are derived from a direction and two handle
  lengths, so they always stay collinear with the point

CurvePoint is the closed union of the two. Both kinds expose the same
accessors (point, in_ctrl, out_ctrl, update_in_ctrl, update_out_ctrl,
move_to, move_delta) so shape code does not need to branch on the kind.
"""

from dataclasses import dataclass, replace
from typing import Any

from pathgeom.domain.point import Point


def _normalize_theta(theta: float) -> float:
    theta = theta % 360.0
    if theta >= 360.0:
        return 0.0
    return theta


@dataclass
class CornerPoint:
    """Endpoint whose control points are free.

    The control points can be changed with update_in_ctrl/update_out_ctrl
    and remove_in_ctrl/remove_out_ctrl. The point itself should be moved
    with move_to or move_delta, which can carry the control points along.

    Attributes:
        point: Position of the endpoint
        in_ctrl: Control point shaping the incoming curve, if any
        out_ctrl: Control point shaping the outgoing curve, if any
    """

    point: Point
    in_ctrl: Point | None = None
    out_ctrl: Point | None = None

    def with_in_ctrl(self, ctrl: Point) -> "CornerPoint":
        return replace(self, in_ctrl=ctrl)

    def with_out_ctrl(self, ctrl: Point) -> "CornerPoint":
        return replace(self, out_ctrl=ctrl)

    def has_in_ctrl(self) -> bool:
        return self.in_ctrl is not None

    def has_out_ctrl(self) -> bool:
        return self.out_ctrl is not None

    def update_in_ctrl(self, ctrl: Point) -> None:
        self.in_ctrl = ctrl

    def update_out_ctrl(self, ctrl: Point) -> None:
        self.out_ctrl = ctrl

    def remove_in_ctrl(self) -> None:
        self.in_ctrl = None

    def remove_out_ctrl(self) -> None:
        self.out_ctrl = None

    def move_delta(self, delta: Point, move_ctrl: bool = True) -> None:
        """Translate the point, optionally translating its control points too."""
        self.point = self.point + delta
        if move_ctrl:
            if self.in_ctrl is not None:
                self.in_ctrl = self.in_ctrl + delta
            if self.out_ctrl is not None:
                self.out_ctrl = self.out_ctrl + delta

    def move_to(self, target: Point, move_ctrl: bool = True) -> None:
        self.move_delta(target - self.point, move_ctrl)

    def _move_ctrl_delta(self, ctrl: Point, delta: Point, keep_dir: bool) -> Point:
        if not keep_dir:
            return ctrl + delta
        direction = (ctrl - self.point).normalize()
        return ctrl + direction * delta.dot(direction)

    def move_in_ctrl_delta(self, delta_x: float, delta_y: float, keep_dir: bool = False) -> None:
        """Drag the incoming control point.

        With keep_dir only the component of the drag along the current
        handle direction is applied, so the handle changes length but not
        direction.
        """
        if self.in_ctrl is not None:
            self.in_ctrl = self._move_ctrl_delta(self.in_ctrl, Point(delta_x, delta_y), keep_dir)

    def move_out_ctrl_delta(self, delta_x: float, delta_y: float, keep_dir: bool = False) -> None:
        """Drag the outgoing control point (see move_in_ctrl_delta)."""
        if self.out_ctrl is not None:
            self.out_ctrl = self._move_ctrl_delta(self.out_ctrl, Point(delta_x, delta_y), keep_dir)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "corner",
            "point": self.point.to_dict(),
            "in_ctrl": self.in_ctrl.to_dict() if self.in_ctrl is not None else None,
            "out_ctrl": self.out_ctrl.to_dict() if self.out_ctrl is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CornerPoint":
        in_ctrl = data.get("in_ctrl")
        out_ctrl = data.get("out_ctrl")
        return cls(
            point=Point.from_dict(data["point"]),
            in_ctrl=Point.from_dict(in_ctrl) if in_ctrl is not None else None,
            out_ctrl=Point.from_dict(out_ctrl) if out_ctrl is not None else None,
        )


@dataclass
class SmoothPoint:
    """Endpoint whose two control points stay collinear with it.

    theta is the angle in degrees between the outgoing handle and the X
    axis, kept in [0, 360). in_length and out_length are the handle
    lengths and are never negative. The control points are derived:

        in_ctrl  = point + direction(theta + 180) * in_length
        out_ctrl = point + direction(theta) * out_length

    Moving one control point to an absolute position recomputes theta and
    that handle's length, which rotates the other control point with it.

    Attributes:
        point: Position of the endpoint
        theta: Outgoing handle direction in degrees
        in_length: Length of the incoming handle
        out_length: Length of the outgoing handle
    """

    point: Point
    theta: float = 0.0
    in_length: float = 0.0
    out_length: float = 0.0

    def __post_init__(self) -> None:
        self.theta = _normalize_theta(self.theta)
        self.in_length = abs(self.in_length)
        self.out_length = abs(self.out_length)

    @classmethod
    def horizontal(cls, point: Point, in_length: float, out_length: float) -> "SmoothPoint":
        return cls(point, 0.0, in_length, out_length)

    @classmethod
    def vertical(cls, point: Point, in_length: float, out_length: float) -> "SmoothPoint":
        return cls(point, 90.0, in_length, out_length)

    @property
    def in_ctrl(self) -> Point:
        return self.point.move_follow(self.theta + 180.0, self.in_length)

    @property
    def out_ctrl(self) -> Point:
        return self.point.move_follow(self.theta, self.out_length)

    @property
    def out_theta(self) -> float:
        return self.theta

    @property
    def in_theta(self) -> float:
        return _normalize_theta(self.theta + 180.0)

    def update_theta(self, theta: float) -> None:
        self.theta = _normalize_theta(theta)

    update_out_theta = update_theta

    def update_in_theta(self, theta: float) -> None:
        self.theta = _normalize_theta(theta + 180.0)

    def flip(self) -> None:
        """Swap the handle directions, keeping both lengths."""
        self.update_theta(self.theta + 180.0)

    def update_in_length(self, length: float) -> None:
        """Set the incoming handle length; a negative length flips the direction."""
        self.in_length = abs(length)
        if length < 0.0:
            self.flip()

    def update_out_length(self, length: float) -> None:
        """Set the outgoing handle length; a negative length flips the direction."""
        self.out_length = abs(length)
        if length < 0.0:
            self.flip()

    def move_in_ctrl_to(self, ctrl: Point) -> None:
        length, theta = (self.point - ctrl).polar()
        self.in_length = length
        # A zero-length handle has no direction; keep the current one.
        if length > 0.0:
            self.theta = theta

    def move_out_ctrl_to(self, ctrl: Point) -> None:
        length, theta = (ctrl - self.point).polar()
        self.out_length = length
        if length > 0.0:
            self.theta = theta

    update_in_ctrl = move_in_ctrl_to
    update_out_ctrl = move_out_ctrl_to

    def move_in_ctrl_delta(self, delta_x: float, delta_y: float, keep_dir: bool = False) -> None:
        """Drag the incoming control point.

        With keep_dir the drag is projected onto the handle direction and
        only changes the handle length; dragging through the point flips
        both handles.
        """
        if keep_dir:
            direction = Point(0.0, 0.0).move_follow(self.in_theta, 1.0)
            self.update_in_length(self.in_length + Point(delta_x, delta_y).dot(direction))
        else:
            self.move_in_ctrl_to(self.in_ctrl + Point(delta_x, delta_y))

    def move_out_ctrl_delta(self, delta_x: float, delta_y: float, keep_dir: bool = False) -> None:
        """Drag the outgoing control point (see move_in_ctrl_delta)."""
        if keep_dir:
            direction = Point(0.0, 0.0).move_follow(self.out_theta, 1.0)
            self.update_out_length(self.out_length + Point(delta_x, delta_y).dot(direction))
        else:
            self.move_out_ctrl_to(self.out_ctrl + Point(delta_x, delta_y))

    def move_delta(self, delta: Point, move_ctrl: bool = True) -> None:  # noqa: ARG002
        # Control points are derived, so they always follow the point.
        self.point = self.point + delta

    def move_to(self, target: Point, move_ctrl: bool = True) -> None:
        self.move_delta(target - self.point, move_ctrl)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "smooth",
            "point": self.point.to_dict(),
            "theta": self.theta,
            "in_length": self.in_length,
            "out_length": self.out_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SmoothPoint":
        return cls(
            point=Point.from_dict(data["point"]),
            theta=float(data["theta"]),
            in_length=float(data["in_length"]),
            out_length=float(data["out_length"]),
        )


CurvePoint = CornerPoint | SmoothPoint


def curve_point_from_dict(data: dict[str, Any]) -> CurvePoint:
    """Deserialize either kind of curve point from its tagged dictionary.

    Args:
        data: Dictionary produced by CornerPoint.to_dict or SmoothPoint.to_dict

    Returns:
        CornerPoint or SmoothPoint instance

    Raises:
        ValueError: If the kind tag is missing or unknown
    """
    kind = data.get("kind")
    if kind == "corner":
        return CornerPoint.from_dict(data)
    if kind == "smooth":
        return SmoothPoint.from_dict(data)
    raise ValueError(f"Unknown curve point kind: {kind!r}")
