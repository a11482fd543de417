import math

import pytest

from geom2d import (
    Affine,
    BezierCurve,
    CurveKind,
    InfiniteSolutionsError,
    LineSegment,
    Point,
    X,
    Y,
)


def _parabola():
    return BezierCurve([Point(0.0, 0.0), Point(1.0, 2.0), Point(2.0, 0.0)])


def test_bezier_evaluate():
    curve = _parabola()
    p = curve.point_at(0.5)
    assert abs(p.x - 1.0) < 1e-6
    assert abs(p.y - 1.0) < 1e-6
    d = curve.derivative_at(0.5)
    assert abs(d.x - 2.0) < 1e-6
    assert abs(d.y - 0.0) < 1e-6
    assert curve.kind is CurveKind.BEZIER
    assert curve.degree == 2


def test_bezier_requires_two_points():
    with pytest.raises(ValueError):
        BezierCurve([Point(0.0, 0.0)])


def test_subdivide_matches_original():
    curve = BezierCurve([(0, 0), (1, 3), (3, 3), (4, 0)])
    left, right = curve.subdivide(0.25)
    assert left.final_point.almost_equals(curve.point_at(0.25))
    assert right.initial_point.almost_equals(curve.point_at(0.25))
    assert left.point_at(0.5).almost_equals(curve.point_at(0.125))
    assert right.point_at(0.5).almost_equals(curve.point_at(0.625))


def test_portion_and_reverse():
    curve = BezierCurve([(0, 0), (1, 3), (3, 3), (4, 0)])
    part = curve.portion(0.2, 0.6)
    assert part.initial_point.almost_equals(curve.point_at(0.2))
    assert part.final_point.almost_equals(curve.point_at(0.6))
    assert part.point_at(0.5).almost_equals(curve.point_at(0.4))
    flipped = curve.portion(0.6, 0.2)
    assert flipped.initial_point.almost_equals(curve.point_at(0.6))
    assert curve.reverse().point_at(0.3).almost_equals(curve.point_at(0.7))
    tail = curve.portion(1.0, 1.5)
    assert tail.initial_point.almost_equals(curve.final_point)
    assert tail.final_point.almost_equals(curve.point_at(1.5))


def test_derivative_curve():
    curve = _parabola()
    d = curve.derivative()
    assert d.degree == 1
    assert d.point_at(0.5).almost_equals(curve.derivative_at(0.5))
    flat = LineSegment((0, 0), (2, 1)).derivative()
    assert flat.point_at(0.0) == flat.point_at(1.0) == Point(2.0, 1.0)


def test_roots_in_unit_interval():
    curve = _parabola()
    roots = curve.roots(0.5, Y)
    assert len(roots) == 2
    for t in roots:
        assert math.isclose(curve.value_at(t, Y), 0.5, abs_tol=1e-9)
    assert curve.roots(5.0, Y) == []
    assert curve.roots(1.0, X) == pytest.approx([0.5])


def test_roots_infinite_on_level_set():
    flat = BezierCurve([(0, 1), (1, 1), (3, 1)])
    with pytest.raises(InfiniteSolutionsError):
        flat.roots(1.0, Y)
    assert flat.solve(1.0, Y).is_infinite


def test_nearest_point_on_bezier():
    curve = _parabola()
    assert curve.nearest_point(Point(1.0, 5.0)) == pytest.approx(0.5, abs=1e-9)
    assert curve.nearest_point(Point(-3.0, -1.0)) == 0.0
    assert curve.nearest_point(Point(6.0, -1.0)) == 1.0


def test_transformed_and_bounds():
    curve = _parabola()
    moved = curve.transformed(Affine.translate(1.0, 1.0))
    assert moved.control_points[1] == Point(2.0, 3.0)
    lo, hi = curve.bounds_fast()
    assert lo == Point(0.0, 0.0) and hi == Point(2.0, 2.0)


def test_length_of_straight_cubic():
    curve = BezierCurve([(0, 0), (1, 0), (2, 0), (3, 0)])
    assert curve.length() == pytest.approx(3.0, abs=1e-9)


def test_line_segment_basics():
    seg = LineSegment(Point(0.0, 0.0), Point(4.0, 2.0))
    assert seg.kind is CurveKind.LINE_SEGMENT
    assert seg.point_at(0.5) == Point(2.0, 1.0)
    assert seg.value_at(0.25, X) == 1.0
    assert seg.length() == pytest.approx(math.hypot(4.0, 2.0))
    assert seg.roots(2.0, X) == [0.5]
    assert seg.roots(9.0, X) == []
    assert seg.nearest_point(Point(10.0, 0.0)) == 1.0
    assert seg.nearest_point(Point(-10.0, 0.0)) == 0.0
    assert seg.reverse() == LineSegment(Point(4.0, 2.0), Point(0.0, 0.0))
    assert isinstance(seg.portion(0.0, 0.5), LineSegment)
    assert seg.portion(0.0, 0.5).final_point == Point(2.0, 1.0)


def test_line_segment_infinite_roots():
    seg = LineSegment(Point(0.0, 3.0), Point(5.0, 3.0))
    with pytest.raises(InfiniteSolutionsError):
        seg.roots(3.0, Y)
    assert seg.roots(4.0, Y) == []


def test_degenerate_segment():
    seg = LineSegment(Point(1.0, 1.0), Point(1.0, 1.0))
    assert seg.is_degenerate()
    assert seg.nearest_point(Point(5.0, 5.0)) == 0.0
    assert seg.unit_tangent_at(0.5) == Point(0.0, 0.0)
