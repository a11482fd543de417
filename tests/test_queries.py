import math

import pytest

from geom2d import (
    BezierCurve,
    LineSegment,
    Point,
    RangeError,
    Ray,
    RootKind,
    X,
    angle_between,
    are_near,
    are_same,
    distance,
    make_angle_bisector_ray,
    nearest_point_on,
    offset_between_points,
    snap_vector_midpoint,
    solve_roots,
)


def test_distance_point_to_ray_either_order():
    r = Ray(Point(0.0, 0.0), Point(1.0, 0.0))
    assert distance(Point(3.0, 4.0), r) == 4.0
    assert distance(r, Point(3.0, 4.0)) == 4.0
    # behind the origin the distance is to the origin itself
    assert distance(Point(-3.0, 4.0), r) == 5.0


def test_distance_to_degenerate_ray_is_distance_to_origin():
    r = Ray(Point(1.0, 1.0), Point(1.0, 1.0))
    assert distance(Point(4.0, 5.0), r) == 5.0


def test_are_near_point_and_ray():
    r = Ray(Point(0.0, 0.0), math.pi / 4)
    assert are_near(Point(2.0, 2.0), r)
    assert are_near(r, Point(2.0, 2.0 + 1e-3), 1e-2)
    assert not are_near(Point(2.0, 2.5), r)
    assert are_near(Point(1.0, 1.0), Point(1.0, 1.0))
    assert are_near(2.0, 2.0 + 1e-12)


def test_are_same():
    r1 = Ray(Point(0.0, 0.0), Point(1.0, 1.0))
    r2 = Ray(Point(0.0, 0.0), math.pi / 4)
    assert are_same(r1, r2)
    assert not are_same(r1, r1.reverse())
    assert not are_same(r1, r1.with_origin((0.0, 1e-3)))
    assert are_same(r1, r1.with_origin((0.0, 1e-3)), eps=1e-2)


def test_angle_between_same_ray_is_zero():
    for r in (Ray(), Ray(Point(3.0, -1.0), 2.0), Ray(Point(0.0, 0.0), -0.5)):
        assert angle_between(r, r, True) == 0.0


def test_angle_between_directions():
    east = Ray(Point(0.0, 0.0), 0.0)
    north = Ray(Point(0.0, 0.0), math.pi / 2)
    assert angle_between(east, north) == pytest.approx(math.pi / 2)
    assert angle_between(north, east) == pytest.approx(3 * math.pi / 2)
    assert angle_between(east, north, clockwise=False) == pytest.approx(3 * math.pi / 2)
    assert angle_between(north, east, clockwise=False) == pytest.approx(math.pi / 2)
    for a, b in ((east, north), (north, east)):
        assert 0.0 <= angle_between(a, b) < 2 * math.pi


def test_bisector_of_right_angle():
    r1 = Ray(Point(0.0, 0.0), 0.0)
    r2 = Ray(Point(0.0, 0.0), math.pi / 2)
    bis = make_angle_bisector_ray(r1, r2)
    assert bis.origin == Point(0.0, 0.0)
    assert bis.angle() == pytest.approx(math.pi / 4)
    assert math.isclose(bis.versor.length(), 1.0)


def test_bisector_of_reflex_sweep_is_reflected():
    r1 = Ray(Point(1.0, 1.0), math.pi / 2)
    r2 = Ray(Point(1.0, 1.0), 0.0)
    bis = make_angle_bisector_ray(r1, r2)
    assert bis.origin == Point(1.0, 1.0)
    assert bis.angle() == pytest.approx(-3 * math.pi / 4)


def test_bisector_requires_common_origin():
    r1 = Ray(Point(0.0, 0.0), 0.0)
    r2 = Ray(Point(1.0, 0.0), math.pi / 2)
    with pytest.raises(RangeError):
        make_angle_bisector_ray(r1, r2)


def test_bisector_of_opposite_rays_is_degenerate():
    r1 = Ray(Point(0.0, 0.0), Point(1.0, 0.0))
    r2 = r1.reverse()
    assert make_angle_bisector_ray(r1, r2).is_degenerate()


def test_solve_roots_reports_kind_without_raising():
    vertical = Ray(Point(0.0, 0.0), Point(0.0, 1.0))
    assert solve_roots(vertical, 0.0, X).kind is RootKind.INFINITE
    diagonal = Ray(Point(0.0, 0.0), Point(1.0, 1.0))
    result = solve_roots(diagonal, 3.0, X)
    assert result.kind is RootKind.FINITE
    assert len(result) == 1
    seg = LineSegment(Point(0.0, 0.0), Point(2.0, 0.0))
    assert list(solve_roots(seg, 1.0, X)) == [0.5]


def test_nearest_point_on_curves():
    seg = LineSegment(Point(0.0, 0.0), Point(2.0, 0.0))
    assert nearest_point_on(seg, Point(1.0, 3.0)) == Point(1.0, 0.0)
    curve = BezierCurve([(0, 0), (1, 2), (2, 0)])
    assert nearest_point_on(curve, Point(1.0, 5.0)).almost_equals(Point(1.0, 1.0), 1e-9)
    assert distance(Point(1.0, 5.0), curve) == pytest.approx(4.0)


def test_offset_between_points():
    begin, end = Point(0.0, 0.0), Point(4.0, 0.0)
    assert offset_between_points(Point(1.0, 2.0), begin, end) == 0.25
    assert offset_between_points(Point(-1.0, 0.0), begin, end) == 0.0
    assert offset_between_points(Point(9.0, 0.0), begin, end) == 1.0
    assert offset_between_points(Point(9.0, 0.0), begin, begin) == 0.0
    assert offset_between_points((1.0, 2.0), begin, end) == LineSegment(begin, end).nearest_point(
        Point(1.0, 2.0)
    )


def test_snap_vector_midpoint():
    begin, end = Point(0.0, 0.0), Point(10.0, 0.0)
    assert snap_vector_midpoint(Point(4.0, 1.0), begin, end, 0.5) == Point(5.0, 0.0)
    assert snap_vector_midpoint(Point(2.0, 1.0), begin, end, 0.5) == Point(0.0, 0.0)
    assert snap_vector_midpoint(Point(3.2, 1.0), begin, end, 0.25) == Point(2.5, 0.0)
    assert snap_vector_midpoint(Point(3.2, 1.0), begin, end, 0.0) == Point(3.2, 0.0)
    assert snap_vector_midpoint(Point(-4.0, 1.0), begin, end, 0.5) == begin
    assert snap_vector_midpoint(Point(40.0, 1.0), begin, end, 0.5) == end
