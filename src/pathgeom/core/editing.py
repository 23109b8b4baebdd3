"""Interactive editing operations on a shape.

These are the operations a path editor performs in response to user
input: converting points between corner and smooth, snapping a click onto
the outline, and inserting or appending points.
"""

from enum import Enum, auto

from pathgeom.config import PathGeomSettings, get_default_settings
from pathgeom.core.shape import Shape
from pathgeom.domain import CornerPoint, CurvePoint, Nearest, Point, SmoothPoint
from pathgeom.utils.logging import EditLogger, EditStats


class PointAction(Enum):
    """Action requested on an existing curve point."""

    CLICK = auto()
    DELETE = auto()
    CONVERT_TO_CORNER = auto()
    CONVERT_TO_SMOOTH = auto()


def convert_to_corner(shape: Shape, index: int) -> CornerPoint:
    """Replace the point at index with a CornerPoint at the same controls.

    Raises:
        IndexError: If index is out of range
    """
    old = shape.points()[index]
    corner = CornerPoint(old.point, in_ctrl=old.in_ctrl, out_ctrl=old.out_ctrl)
    shape.replace(index, corner)
    return corner


def convert_to_smooth(shape: Shape, index: int, default_length: float = 10.0) -> SmoothPoint:
    """Replace the point at index with a SmoothPoint.

    The handle direction comes from the existing controls, the outgoing
    control taking priority over the incoming one. A handle that did not
    exist gets default_length. A point with no controls points its
    outgoing handle at the next point (wrapping to the first).

    Args:
        shape: Shape to edit
        index: Point index
        default_length: Length of handles that did not exist

    Returns:
        The new SmoothPoint

    Raises:
        IndexError: If index is out of range
    """
    points = shape.points()
    old = points[index]
    point = old.point

    theta = 0.0
    in_length = default_length
    out_length = default_length
    calculated = False

    if old.in_ctrl is not None:
        in_length, theta = (point - old.in_ctrl).polar()
        calculated = True
    if old.out_ctrl is not None:
        out_length, theta = (old.out_ctrl - point).polar()
        calculated = True

    if not calculated and len(points) > 1:
        following = points[(index + 1) % len(points)]
        _, theta = (following.point - point).polar()

    smooth = SmoothPoint(point, theta, in_length, out_length)
    shape.replace(index, smooth)
    return smooth


class ShapeEditor:
    """Applies user edits to a shape and records them.

    Example:
        >>> editor = ShapeEditor(Shape())
        >>> _ = editor.click(Point(0, 0))
        >>> _ = editor.click(Point(10, 0))
        >>> len(editor.shape)
        2
    """

    def __init__(
        self,
        shape: Shape,
        settings: PathGeomSettings | None = None,
        logger: EditLogger | None = None,
    ) -> None:
        self.shape = shape
        self.settings = settings or get_default_settings()
        self._log = logger or EditLogger()

    @property
    def stats(self) -> EditStats:
        return self._log.stats

    def snap_to_curve_with_radius(self, target: Point, radius: float | None = None) -> Nearest | None:
        """Closest interior curve point to target, if within radius.

        Args:
            target: Click position
            radius: Snap radius (editing.snap_radius when None)

        Returns:
            Nearest tagged with the curve index, or None on a miss
        """
        if radius is None:
            radius = self.settings.editing.snap_radius

        nearest = self.shape.nearest_point_on_curves(target, False, self.settings.solver)
        if nearest is None or nearest.distance > radius:
            self._log.log_snap_miss(nearest.distance if nearest else None, radius)
            return None
        return nearest

    def insert_nearest(self, target: Point, nearest: Nearest | None) -> CurvePoint | None:
        """Insert on the snapped curve, else append to an open shape.

        Returns:
            The new point, or None when the shape is closed and nothing snapped
        """
        if nearest is not None:
            point = self.shape.insert_on_curve(nearest.index, nearest.t)
            self._log.log_insert_on_curve(nearest.index, nearest.t, len(self.shape))
            return point

        if not self.shape.closed():
            point = CornerPoint(target)
            self.shape.push(point)
            self._log.log_append(target.x, target.y, len(self.shape))
            return point

        return None

    def click(self, target: Point) -> CurvePoint | None:
        """Handle a click on empty canvas at target."""
        return self.insert_nearest(target, self.snap_to_curve_with_radius(target))

    def do_point_action(self, index: int, action: PointAction) -> None:
        """Apply an action to the point at index.

        Clicking the first point of a shape with at least two points opens
        or closes it. Clicking any other point does nothing.

        Raises:
            IndexError: If index is out of range for DELETE or a conversion
        """
        if action is PointAction.CLICK:
            if index == 0 and len(self.shape) >= 2:
                self.shape.toggle_close()
                self._log.log_toggle_close(self.shape.closed())
        elif action is PointAction.DELETE:
            self.shape.remove(index)
            self._log.log_remove(index, len(self.shape))
        elif action is PointAction.CONVERT_TO_CORNER:
            convert_to_corner(self.shape, index)
            self._log.log_conversion(index, "corner")
        elif action is PointAction.CONVERT_TO_SMOOTH:
            convert_to_smooth(self.shape, index, self.settings.editing.default_handle_length)
            self._log.log_conversion(index, "smooth")
