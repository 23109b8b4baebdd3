"""Curve union and construction from curve points.

A curve between two consecutive curve points is a Segment when neither
side contributes a control point, a degree-elevated quadratic when exactly
one side does, and a full cubic when both do.
"""

from typing import TYPE_CHECKING, Any

from pathgeom.core.bezier import Bezier
from pathgeom.core.segment import Segment
from pathgeom.domain import CurvePoint, Point

if TYPE_CHECKING:
    from pathgeom.config import SolverConfig
    from pathgeom.domain import Nearest

Curve = Segment | Bezier


def curve_between(start: CurvePoint, end: CurvePoint) -> Curve:
    """Build the curve from start to end.

    Uses start's outgoing control point and end's incoming control point.

    Args:
        start: Curve point the curve leaves
        end: Curve point the curve enters

    Returns:
        Segment, or Bezier (cubic or elevated quadratic)
    """
    out_ctrl = start.out_ctrl
    in_ctrl = end.in_ctrl

    if out_ctrl is not None and in_ctrl is not None:
        return Bezier(start.point, out_ctrl, in_ctrl, end.point)
    if out_ctrl is not None:
        return Bezier.new_quad(start.point, out_ctrl, end.point)
    if in_ctrl is not None:
        return Bezier.new_quad(start.point, in_ctrl, end.point)
    return Segment(start.point, end.point)


def curve_at(curve: Curve, t: float) -> Point:
    return curve.at(t)


def curve_nearest_to(
    curve: Curve,
    target: Point,
    allow_endpoint: bool = False,
    config: "SolverConfig | None" = None,
) -> "Nearest | None":
    return curve.nearest_to(target, allow_endpoint, config)


def curve_kind(curve: Curve) -> str:
    """Short name of the curve kind, used in output and serialization."""
    if isinstance(curve, Bezier):
        return "bezier"
    return "segment"


def curve_to_dict(curve: Curve) -> dict[str, Any]:
    """Serialize a curve as its kind and control points."""
    if isinstance(curve, Bezier):
        points = curve.control_points()
    else:
        points = (curve.start, curve.end)
    return {"kind": curve_kind(curve), "points": [p.to_dict() for p in points]}
