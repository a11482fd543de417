"""Intersections between linear curves (rays and line segments)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from .bezier import LineSegment
from .numeric import get_tolerance, resolve_eps
from .point import Point
from .ray import Ray

log = logging.getLogger("geom2d.intersections")

Linear = Union[Ray, LineSegment]


@dataclass(frozen=True)
class Intersection:
    kind: str  # "none", "point", "segment", "ray"
    point: Optional[Point] = None
    overlap: Optional[Linear] = None
    ta: Optional[float] = None
    tb: Optional[float] = None

    @staticmethod
    def none() -> "Intersection":
        return Intersection("none")

    @staticmethod
    def crossing(pt: Point, ta: float, tb: float) -> "Intersection":
        return Intersection("point", point=pt, ta=ta, tb=tb)

    @staticmethod
    def overlapping(curve: Linear) -> "Intersection":
        kind = "ray" if isinstance(curve, Ray) else "segment"
        return Intersection(kind, overlap=curve)

    def __bool__(self) -> bool:
        return self.kind != "none"


def _within(t: float, lo: float, hi: float, tol: float) -> bool:
    return lo - tol <= t <= hi + tol


def _clamp(t: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, t))


def _point_against(p: Point, curve: Linear, eps: float, point_first: bool) -> Intersection:
    t = curve.nearest_point(p)
    if (curve.point_at(t) - p).length() > eps:
        return Intersection.none()
    return Intersection.crossing(p, 0.0, t) if point_first else Intersection.crossing(p, t, 0.0)


def intersect(a: Linear, b: Linear, eps: float | None = None) -> Intersection:
    """Intersect two rays and/or line segments.

    Crossings report the parameter on each curve. Colinear curves report
    their overlap as a segment, or as a ray when two rays overlap without
    bound. Degenerate inputs are intersected as single points.
    """
    tol = resolve_eps(eps)
    angular = get_tolerance().angular
    pa, da = a.point_at(0.0), a.derivative_at(0.0)
    pb, db = b.point_at(0.0), b.derivative_at(0.0)
    a_lo, a_hi = a.domain()
    b_lo, b_hi = b.domain()
    la, lb = da.length(), db.length()

    if la == 0 and lb == 0:
        if (pa - pb).length() <= tol:
            return Intersection.crossing(pa, 0.0, 0.0)
        return Intersection.none()
    if la == 0:
        return _point_against(pa, b, tol, point_first=True)
    if lb == 0:
        return _point_against(pb, a, tol, point_first=False)

    qp = pb - pa
    denom = da.cross(db)
    # sine of the angle between the directions decides parallelism
    if abs(denom) <= angular * la * lb:
        if abs(qp.cross(da)) / la > tol:
            return Intersection.none()
        # colinear: express b's extent in a's parameter
        t0 = qp.dot(da) / (la * la)
        k = db.dot(da) / (la * la)
        ends = (t0 + k * b_lo, t0 + k * b_hi)
        lo = max(a_lo, min(ends))
        hi = min(a_hi, max(ends))
        if (hi - lo) * la < -tol:
            return Intersection.none()
        if math.isinf(hi):
            log.debug("rays %r and %r overlap without bound", a, b)
            return Intersection.overlapping(Ray.from_versor(a.point_at(lo), da))
        if (hi - lo) * la <= tol:
            t = _clamp(lo, a_lo, a_hi)
            pt = a.point_at(t)
            return Intersection.crossing(pt, t, b.nearest_point(pt))
        return Intersection.overlapping(LineSegment(a.point_at(lo), a.point_at(hi)))

    ta = qp.cross(db) / denom
    tb = qp.cross(da) / denom
    if _within(ta, a_lo, a_hi, tol / la) and _within(tb, b_lo, b_hi, tol / lb):
        ta = _clamp(ta, a_lo, a_hi)
        tb = _clamp(tb, b_lo, b_hi)
        return Intersection.crossing(a.point_at(ta), ta, tb)
    return Intersection.none()
