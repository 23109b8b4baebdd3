"""Unit tests for the curve primitives: Segment, Bezier and curve helpers."""

import pytest

from pathgeom.core.bezier import Bezier, quad_to_cubic
from pathgeom.core.curve import (
    curve_at,
    curve_between,
    curve_kind,
    curve_nearest_to,
    curve_to_dict,
)
from pathgeom.core.segment import Segment
from pathgeom.domain import CornerPoint, Point, SmoothPoint
from pathgeom.exceptions import ParameterError


def assert_point_close(actual: Point, expected: Point, abs_tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=abs_tol)
    assert actual.y == pytest.approx(expected.y, abs=abs_tol)


ARCH = Bezier(Point(0.0, 0.0), Point(0.0, 10.0), Point(10.0, 10.0), Point(10.0, 0.0))


class TestSegment:
    """Tests for Segment."""

    def test_at(self):
        """Test evaluation along the segment."""
        seg = Segment(Point(0.0, 0.0), Point(10.0, 20.0))
        assert seg.at(0.0) == Point(0.0, 0.0)
        assert seg.at(1.0) == Point(10.0, 20.0)
        assert seg.at(0.5) == Point(5.0, 10.0)

    @pytest.mark.parametrize("t", [-0.1, 1.5])
    def test_at_out_of_range(self, t):
        """Test parameters outside [0, 1] are rejected."""
        with pytest.raises(ParameterError):
            Segment(Point(0.0, 0.0), Point(1.0, 0.0)).at(t)

    def test_parameter_error_is_value_error(self):
        """Test ParameterError can be caught as ValueError."""
        with pytest.raises(ValueError, match="outside"):
            Segment(Point(0.0, 0.0), Point(1.0, 0.0)).at(2.0)

    def test_nearest_interior(self):
        """Test the perpendicular foot of (5, 3) on the X axis."""
        seg = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        n = seg.nearest_to(Point(5.0, 3.0), allow_endpoint=False)
        assert n is not None
        assert n.t == 0.5
        assert n.point == Point(5.0, 0.0)
        assert n.distance == 3.0
        assert n.index == 0

    def test_nearest_outside_without_endpoints(self):
        """Test a projection past the end gives no interior result."""
        seg = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        assert seg.nearest_to(Point(-5.0, 3.0), allow_endpoint=False) is None

    def test_nearest_outside_with_endpoints(self):
        """Test a projection past the start is clamped onto it."""
        seg = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        n = seg.nearest_to(Point(-5.0, 3.0), allow_endpoint=True)
        assert n is not None
        assert n.t == 0.0
        assert n.point == Point(0.0, 0.0)

    def test_nearest_zero_length(self):
        """Test a degenerate segment has no nearest point."""
        seg = Segment(Point(1.0, 1.0), Point(1.0, 1.0))
        assert seg.nearest_to(Point(0.0, 0.0), allow_endpoint=True) is None

    def test_parametric_coefficients(self):
        """Test a*t + b form."""
        a, b = Segment(Point(1.0, 2.0), Point(4.0, 6.0)).parametric_coefficients()
        assert a == Point(3.0, 4.0)
        assert b == Point(1.0, 2.0)


class TestBezier:
    """Tests for cubic Bezier curves."""

    def test_endpoints(self):
        """Test the curve starts and ends at its end points."""
        assert_point_close(ARCH.at(0.0), ARCH.start)
        assert_point_close(ARCH.at(1.0), ARCH.end)

    def test_midpoint(self):
        """Test B(0.5) of the symmetric arch."""
        assert_point_close(ARCH.at(0.5), Point(5.0, 7.5))

    def test_at_out_of_range(self):
        """Test parameters outside [0, 1] are rejected."""
        with pytest.raises(ParameterError):
            ARCH.at(1.01)

    def test_power_basis(self):
        """Test the power-basis coefficients of the arch."""
        a, b, c, d = ARCH.parametric_coefficients()
        assert a == Point(-20.0, 0.0)
        assert b == Point(30.0, -30.0)
        assert c == Point(0.0, 30.0)
        assert d == Point(0.0, 0.0)

    def test_nearest_symmetric(self):
        """Test a target on the axis of symmetry projects to t = 0.5."""
        n = ARCH.nearest_to(Point(5.0, 20.0), allow_endpoint=False)
        assert n is not None
        assert n.t == pytest.approx(0.5)
        assert_point_close(n.point, Point(5.0, 7.5), abs_tol=1e-6)
        assert n.distance == pytest.approx(12.5)

    def test_nearest_endpoint_allowed(self):
        """Test the start point wins when it is closest."""
        n = ARCH.nearest_to(Point(-5.0, -5.0), allow_endpoint=True)
        assert n is not None
        assert n.t == 0.0
        assert n.point == Point(0.0, 0.0)

    def test_nearest_degenerate(self):
        """Test a curve collapsed to one point has no nearest point."""
        p = Point(3.0, 3.0)
        assert Bezier(p, p, p, p).nearest_to(Point(0.0, 0.0), allow_endpoint=True) is None

    def test_nearest_is_minimum_over_samples(self):
        """Test no sampled point on the curve is closer than the result."""
        curve = Bezier(Point(0.0, 0.0), Point(30.0, 40.0), Point(-10.0, 40.0), Point(20.0, 0.0))
        target = Point(8.0, 12.0)
        n = curve.nearest_to(target, allow_endpoint=True)
        assert n is not None
        for i in range(201):
            assert curve.at(i / 200).distance(target) >= n.distance - 1e-9

    def test_distance_derivative_degree(self):
        """Test the distance polynomial of a true cubic is a quintic."""
        assert ARCH.distance_derivative(Point(1.0, 1.0)).degree() == 5

    def test_distance_derivative_vanishes_at_nearest(self):
        """Test the polynomial is zero at the nearest parameter."""
        target = Point(5.0, 20.0)
        poly = ARCH.distance_derivative(target)
        assert poly.eval(0.5) == pytest.approx(0.0, abs=1e-9)

    def test_split_shares_point(self):
        """Test both halves meet at B(t)."""
        left, right = ARCH.split_at(0.3)
        assert left.end == right.start
        assert left.start == ARCH.start
        assert right.end == ARCH.end
        assert_point_close(left.end, ARCH.at(0.3))

    def test_split_traces_same_curve(self):
        """Test the halves reproduce the original curve."""
        t = 0.3
        left, right = ARCH.split_at(t)
        for i in range(11):
            s = i / 10
            assert_point_close(left.at(s), ARCH.at(t * s))
            assert_point_close(right.at(s), ARCH.at(t + (1.0 - t) * s))

    def test_split_inner_controls_collinear(self):
        """Test the two controls next to the split point are collinear with it."""
        left, right = ARCH.split_at(0.6)
        cross = (left.ctrl2 - left.end).cross(right.ctrl1 - right.start)
        assert cross == pytest.approx(0.0, abs=1e-9)


class TestQuadratic:
    """Tests for quadratic curves represented as cubics."""

    def test_quad_to_cubic(self):
        """Test degree elevation of a quadratic."""
        start, ctrl1, ctrl2, end = quad_to_cubic(
            Point(0.0, 0.0), Point(3.0, 6.0), Point(6.0, 0.0)
        )
        assert start == Point(0.0, 0.0)
        assert_point_close(ctrl1, Point(2.0, 4.0))
        assert_point_close(ctrl2, Point(4.0, 4.0))
        assert end == Point(6.0, 0.0)

    def test_new_quad_traces_quadratic(self):
        """Test the elevated cubic matches the quadratic formula."""
        p0, p1, p2 = Point(0.0, 0.0), Point(5.0, 10.0), Point(10.0, 0.0)
        curve = Bezier.new_quad(p0, p1, p2)
        for i in range(11):
            t = i / 10
            nt = 1.0 - t
            expected = p0 * (nt * nt) + p1 * (2.0 * nt * t) + p2 * (t * t)
            assert_point_close(curve.at(t), expected)

    def test_cubic_coefficient_snapped(self):
        """Test the vanishing cubic term is snapped to zero."""
        curve = Bezier.new_quad(Point(0.1, 0.7), Point(5.3, 10.9), Point(10.7, 0.3))
        a, _, _, _ = curve.parametric_coefficients(1e-12)
        assert a == Point(0.0, 0.0)
        assert curve.distance_derivative(Point(1.0, 1.0)).degree() == 3

    def test_nearest_on_quadratic(self):
        """Test the apex of a symmetric quadratic."""
        curve = Bezier.new_quad(Point(0.0, 0.0), Point(5.0, 10.0), Point(10.0, 0.0))
        n = curve.nearest_to(Point(5.0, 10.0), allow_endpoint=False)
        assert n is not None
        assert n.t == pytest.approx(0.5)
        assert n.distance == pytest.approx(5.0)


class TestCurveBetween:
    """Tests for building curves from curve points."""

    def test_segment_without_controls(self):
        """Test no facing controls gives a Segment."""
        curve = curve_between(CornerPoint(Point(0.0, 0.0)), CornerPoint(Point(1.0, 0.0)))
        assert isinstance(curve, Segment)
        assert curve_kind(curve) == "segment"

    def test_quadratic_from_out_ctrl(self):
        """Test only the start's out control gives an elevated quadratic."""
        start = CornerPoint(Point(0.0, 0.0), out_ctrl=Point(3.0, 6.0))
        curve = curve_between(start, CornerPoint(Point(6.0, 0.0)))
        assert curve == Bezier.new_quad(Point(0.0, 0.0), Point(3.0, 6.0), Point(6.0, 0.0))

    def test_quadratic_from_in_ctrl(self):
        """Test only the end's in control gives an elevated quadratic."""
        end = CornerPoint(Point(6.0, 0.0), in_ctrl=Point(3.0, 6.0))
        curve = curve_between(CornerPoint(Point(0.0, 0.0)), end)
        assert curve == Bezier.new_quad(Point(0.0, 0.0), Point(3.0, 6.0), Point(6.0, 0.0))

    def test_cubic_from_both(self):
        """Test both facing controls give a full cubic."""
        start = CornerPoint(Point(0.0, 0.0), out_ctrl=Point(0.0, 10.0))
        end = CornerPoint(Point(10.0, 0.0), in_ctrl=Point(10.0, 10.0))
        assert curve_between(start, end) == ARCH

    def test_ignores_facing_away_controls(self):
        """Test the start's in control and the end's out control are not used."""
        start = CornerPoint(Point(0.0, 0.0), in_ctrl=Point(-5.0, 0.0))
        end = CornerPoint(Point(1.0, 0.0), out_ctrl=Point(5.0, 5.0))
        assert isinstance(curve_between(start, end), Segment)

    def test_smooth_points_give_cubic(self):
        """Test smooth points always contribute controls."""
        start = SmoothPoint.horizontal(Point(0.0, 0.0), 1.0, 2.0)
        end = SmoothPoint.horizontal(Point(10.0, 0.0), 2.0, 1.0)
        curve = curve_between(start, end)
        assert isinstance(curve, Bezier)
        assert curve_kind(curve) == "bezier"

    def test_dispatch_helpers(self):
        """Test curve_at and curve_nearest_to work on either kind."""
        seg = Segment(Point(0.0, 0.0), Point(10.0, 0.0))
        assert curve_at(seg, 0.5) == Point(5.0, 0.0)
        assert curve_nearest_to(seg, Point(5.0, 3.0)).distance == 3.0
        assert curve_nearest_to(ARCH, Point(5.0, 20.0)).t == pytest.approx(0.5)

    def test_curve_to_dict(self):
        """Test curve serialization lists the control points."""
        data = curve_to_dict(ARCH)
        assert data["kind"] == "bezier"
        assert len(data["points"]) == 4
        assert curve_to_dict(Segment(Point(0.0, 0.0), Point(1.0, 0.0)))["points"][1] == {
            "x": 1.0,
            "y": 0.0,
        }
