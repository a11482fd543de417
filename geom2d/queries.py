"""Distance, nearness and angle queries over points, rays and curves."""

from __future__ import annotations

import logging
import math
from numbers import Real

from .curve import Curve, Roots
from .errors import RangeError
from .numeric import resolve_eps
from .point import Dim2, Point, PointLike, as_point, middle_point
from .point import angle_between as vector_angle_between
from .point import are_near as _points_near
from .point import distance as _point_distance
from .ray import Ray

log = logging.getLogger("geom2d.queries")


def nearest_point_on(curve: Curve, p: PointLike) -> Point:
    """Return the point of ``curve`` closest to ``p``."""
    return curve.point_at(curve.nearest_point(as_point(p)))


def distance(a, b) -> float:
    """Euclidean distance between two points, or a point and a curve."""
    if isinstance(b, Curve) and not isinstance(a, Curve):
        a, b = b, a
    if isinstance(a, Curve):
        p = as_point(b)
        return _point_distance(p, nearest_point_on(a, p))
    return _point_distance(as_point(a), as_point(b))


def are_near(a, b, eps: float | None = None) -> bool:
    """Tolerance predicate for numbers, points, or a point and a curve."""
    if isinstance(a, Curve) or isinstance(b, Curve):
        return distance(a, b) <= resolve_eps(eps)
    if isinstance(a, Real) and isinstance(b, Real):
        return abs(a - b) <= resolve_eps(eps)
    return _points_near(a, b, eps)


def are_same(r1: Ray, r2: Ray, eps: float | None = None) -> bool:
    """True when both the versors and the origins are pairwise near."""
    return _points_near(r1.versor, r2.versor, eps) and _points_near(r1.origin, r2.origin, eps)


def angle_between(r1: Ray, r2: Ray, clockwise: bool = True) -> float:
    """Angle swept rotating ``r1`` onto ``r2``.

    The result lies in [0, 2*pi) when ``clockwise`` is true. With
    ``clockwise=False`` the supplement ``2*pi - angle`` is returned, so two
    coincident rays measure 2*pi in that direction.
    """
    angle = vector_angle_between(r1.versor, r2.versor)
    if angle < 0:
        angle += 2 * math.pi
    if not clockwise:
        angle = 2 * math.pi - angle
    return angle


def make_angle_bisector_ray(r1: Ray, r2: Ray) -> Ray:
    """Bisector of the angle swept from ``r1`` to ``r2``.

    Both rays must share their origin; :class:`RangeError` is raised
    otherwise. Opposite rays produce a degenerate bisector.
    """
    if not _points_near(r1.origin, r2.origin):
        log.debug("bisector requested for rays at %r and %r", r1.origin, r2.origin)
        raise RangeError("passed rays have not the same origin")

    m = middle_point(r1.point_at(1), r2.point_at(1))
    if angle_between(r1, r2) > math.pi:
        m = r1.origin * 2 - m
    return Ray(r1.origin, m)


def solve_roots(curve: Curve, v: float, dim: Dim2) -> Roots:
    """Non-raising root finding; inspect ``Roots.kind`` for the infinite case."""
    return curve.solve(v, Dim2(dim))


def offset_between_points(p: PointLike, begin: PointLike, end: PointLike) -> float:
    """Normalised position of ``p`` projected onto the segment ``begin``-``end``.

    The result is clamped to [0, 1]; a zero-length segment yields 0.
    """
    p, begin, end = as_point(p), as_point(begin), as_point(end)
    length = _point_distance(begin, end)
    if length == 0:
        return 0.0
    be = (end - begin) / length
    r = (p - begin).dot(be)
    if r < 0.0:
        return 0.0
    if r > length:
        return 1.0
    return r / length


def snap_vector_midpoint(p: PointLike, begin: PointLike, end: PointLike, snap: float) -> Point:
    """Project ``p`` onto the segment and snap it to fractions of its length.

    ``snap`` is the fraction of the segment length between snap stops, so
    ``0.5`` snaps to the ends and the midpoint. ``snap == 0`` only projects.
    """
    p, begin, end = as_point(p), as_point(begin), as_point(end)
    length = _point_distance(begin, end)
    if length == 0:
        return begin
    be = (end - begin) / length
    r = (p - begin).dot(be)

    if r < 0.0:
        return begin
    if r > length:
        return end

    if snap == 0:
        return begin + be * r
    snapdist = length * snap
    r_snapped = math.floor(r / snapdist + 0.5) * snapdist
    return begin + be * min(r_snapped, length)
