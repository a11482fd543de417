"""Rays: straight half-lines from an origin to infinity.

A ray is parametrised as ``origin + versor * t`` for ``t >= 0``. The versor
is kept at unit length, or is exactly the zero vector for a degenerate ray
built from two coincident points. Degenerate rays are ordinary values while a
user is still dragging out a guide, so queries on them fall back to defined
results instead of raising.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Union

from .bezier import LineSegment
from .curve import Curve, CurveKind, Roots
from .point import Dim2, Point, PointLike, are_near, as_point

log = logging.getLogger("geom2d.ray")

_ZERO = Point(0.0, 0.0)


def _unit_or_zero(v: Point) -> Point:
    if are_near(v, _ZERO):
        return _ZERO
    return v.normalized()


class Ray(Curve):
    """Straight ray from a specific point to infinity.

    ``Ray(origin, target)`` accepts either an angle in radians or a second
    point the ray passes through. Without arguments the ray starts at the
    origin and points along +X.
    """

    __slots__ = ("_origin", "_versor")

    kind = CurveKind.RAY

    def __init__(
        self,
        origin: PointLike = _ZERO,
        target: Union[float, PointLike, None] = None,
    ) -> None:
        self._origin = as_point(origin)
        if target is None:
            self._versor = Point(1.0, 0.0)
        elif isinstance(target, Real):
            self._versor = Point.polar(float(target))
        else:
            self._versor = _unit_or_zero(as_point(target) - self._origin)

    # --- construction -----------------------------------------------------
    @classmethod
    def from_angle(cls, origin: PointLike, angle: float) -> "Ray":
        return cls(origin, float(angle))

    @classmethod
    def from_points(cls, a: PointLike, b: PointLike) -> "Ray":
        return cls(a, as_point(b))

    @classmethod
    def from_versor(cls, origin: PointLike, versor: PointLike) -> "Ray":
        """Build a ray from a direction vector, rescaled to unit length."""
        ray = cls.__new__(cls)
        ray._origin = as_point(origin)
        ray._versor = _unit_or_zero(as_point(versor))
        return ray

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def versor(self) -> Point:
        return self._versor

    def with_origin(self, origin: PointLike) -> "Ray":
        return Ray.from_versor(origin, self._versor)

    def with_versor(self, versor: PointLike) -> "Ray":
        return Ray.from_versor(self._origin, versor)

    def with_angle(self, angle: float) -> "Ray":
        return Ray(self._origin, float(angle))

    def with_points(self, a: PointLike, b: PointLike) -> "Ray":
        return Ray.from_points(a, b)

    # --- queries ----------------------------------------------------------
    def angle(self) -> float:
        return math.atan2(self._versor.y, self._versor.x)

    def is_degenerate(self) -> bool:
        return self._versor.x == 0 and self._versor.y == 0

    def domain(self) -> tuple[float, float]:
        return (0.0, math.inf)

    def point_at(self, t: float) -> Point:
        return self._origin + self._versor * t

    def value_at(self, t: float, dim: Dim2) -> float:
        return self._origin[dim] + self._versor[dim] * t

    def derivative_at(self, t: float) -> Point:
        return self._versor

    def solve(self, v: float, dim: Dim2) -> Roots:
        dim = Dim2(dim)
        if self._versor[dim] != 0:
            t = (v - self._origin[dim]) / self._versor[dim]
            # nothing exists behind the origin
            if t >= 0:
                return Roots.finite(t)
            return Roots.finite()
        # parallel to the queried axis: coincidence is judged on the other coordinate
        if self._origin[dim.other()] == v:
            log.debug("ray %r has infinitely many roots for %s = %r", self, dim.name, v)
            return Roots.infinite()
        return Roots.finite()

    def nearest_point(self, p: PointLike) -> float:
        if self.is_degenerate():
            return 0.0
        t = (as_point(p) - self._origin).dot(self._versor)
        return max(0.0, t)

    def reverse(self) -> "Ray":
        return Ray.from_versor(self._origin, -self._versor)

    def portion(self, f: float, t: float) -> LineSegment:
        return LineSegment(self.point_at(f), self.point_at(t))

    def segment(self, f: float, t: float) -> LineSegment:
        return LineSegment(self.point_at(f), self.point_at(t))

    def transformed(self, m) -> "Ray":
        # map two points rather than the versor so shears and non-uniform scales stay correct
        return Ray(m.apply(self._origin), m.apply(self._origin + self._versor))

    # --- value semantics --------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._origin == other._origin and self._versor == other._versor

    def __hash__(self) -> int:
        return hash((self._origin, self._versor))

    def __setattr__(self, name: str, value) -> None:
        if name in Ray.__slots__ and not hasattr(self, name):
            object.__setattr__(self, name, value)
            return
        raise AttributeError(f"Ray is immutable; use with_{name.lstrip('_')}() instead")

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin!r}, versor={self._versor!r})"
