"""Bezier curve utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

from . import settings
from .curve import Curve, CurveKind, Roots
from .numeric import get_tolerance, resolve_eps
from .point import Dim2, Point, PointLike, as_point, lerp

# Imaginary parts below this are treated as numerical noise of a real root
_IMAG_TOL = 1e-9


@dataclass(frozen=True)
class BezierCurve(Curve):
    control_points: tuple[Point, ...]

    kind = CurveKind.BEZIER

    def __post_init__(self) -> None:
        pts = tuple(as_point(p) for p in self.control_points)
        if len(pts) < 2:
            raise ValueError("BezierCurve needs at least two control points")
        object.__setattr__(self, "control_points", pts)

    @classmethod
    def _from_control_points(cls, points: Sequence[Point]) -> "BezierCurve":
        return cls(tuple(points))

    @property
    def degree(self) -> int:
        return len(self.control_points) - 1

    @property
    def initial_point(self) -> Point:
        return self.control_points[0]

    @property
    def final_point(self) -> Point:
        return self.control_points[-1]

    def domain(self) -> tuple[float, float]:
        return (0.0, 1.0)

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t using de Casteljau."""
        tmp = list(self.control_points)
        n = len(tmp)
        for r in range(1, n):
            for i in range(n - r):
                tmp[i] = tmp[i] * (1 - t) + tmp[i + 1] * t
        return tmp[0]

    def subdivide(self, t: float) -> tuple["BezierCurve", "BezierCurve"]:
        """Subdivide the curve into two at parameter t."""
        tmp = list(self.control_points)
        n = len(tmp)
        left = [tmp[0]]
        right = [tmp[-1]]
        for r in range(1, n):
            for i in range(n - r):
                tmp[i] = tmp[i] * (1 - t) + tmp[i + 1] * t
            left.append(tmp[0])
            right.append(tmp[n - r - 1])
        right.reverse()
        return self._from_control_points(left), self._from_control_points(right)

    def _hodograph_points(self) -> list[Point]:
        n = self.degree
        pts = self.control_points
        return [(pts[i + 1] - pts[i]) * n for i in range(n)]

    def derivative(self) -> "BezierCurve":
        """Return the derivative curve.

        A degree-1 curve has a constant derivative, returned as a degree-1
        curve whose two control points coincide.
        """
        hodo = self._hodograph_points()
        if len(hodo) == 1:
            hodo = hodo * 2
        return BezierCurve(tuple(hodo))

    def derivative_at(self, t: float) -> Point:
        tmp = self._hodograph_points()
        n = len(tmp)
        for r in range(1, n):
            for i in range(n - r):
                tmp[i] = tmp[i] * (1 - t) + tmp[i + 1] * t
        return tmp[0]

    def coefficients(self, dim: Dim2) -> np.ndarray:
        """Power-basis coefficients of coordinate ``dim``, lowest degree first."""
        n = self.degree
        b = np.array([p[dim] for p in self.control_points], dtype=np.float64)
        coeffs = np.zeros(n + 1, dtype=np.float64)
        for k in range(n + 1):
            acc = 0.0
            for i in range(k + 1):
                acc += (-1) ** (k - i) * math.comb(k, i) * b[i]
            coeffs[k] = math.comb(n, k) * acc
        return coeffs

    def solve(self, v: float, dim: Dim2) -> Roots:
        if all(p[dim] == v for p in self.control_points):
            return Roots.infinite()
        coeffs = self.coefficients(dim)
        coeffs[0] -= v
        return Roots.finite(*_unit_interval_roots(coeffs))

    def nearest_point(self, p: PointLike) -> float:
        p = as_point(p)
        fx = self.coefficients(Dim2.X)
        fy = self.coefficients(Dim2.Y)
        fx[0] -= p.x
        fy[0] -= p.y
        # stationary points of |B(t) - p|^2
        h = P.polyadd(P.polymul(fx, P.polyder(fx)), P.polymul(fy, P.polyder(fy)))
        candidates = [0.0, 1.0]
        candidates.extend(_unit_interval_roots(np.atleast_1d(h)))
        return min(candidates, key=lambda t: (self.point_at(t) - p).length_squared())

    def portion(self, f: float, t: float) -> "BezierCurve":
        if f == t:
            pt = self.point_at(f)
            return self._from_control_points([pt] * len(self.control_points))
        if f > t:
            return self.portion(t, f).reverse()
        if f != 1.0:
            _, right = self.subdivide(f)
            left, _ = right.subdivide((t - f) / (1.0 - f))
            return left
        left, _ = self.subdivide(t)
        _, right = left.subdivide(f / t)
        return right

    def reverse(self) -> "BezierCurve":
        return self._from_control_points(self.control_points[::-1])

    def transformed(self, m) -> "BezierCurve":
        return self._from_control_points([m.apply(p) for p in self.control_points])

    def bounds_fast(self) -> tuple[Point, Point]:
        """Bounding box of the control polygon, which contains the curve."""
        xs = [p.x for p in self.control_points]
        ys = [p.y for p in self.control_points]
        return Point(min(xs), min(ys)), Point(max(xs), max(ys))

    def length(self, samples: int = settings.BEZIER_LENGTH_SAMPLES) -> float:
        """Approximate arc length from a sampled polyline."""
        ts = np.linspace(0.0, 1.0, samples)
        coeffs_x = self.coefficients(Dim2.X)
        coeffs_y = self.coefficients(Dim2.Y)
        xs = P.polyval(ts, coeffs_x)
        ys = P.polyval(ts, coeffs_y)
        return float(np.sum(np.hypot(np.diff(xs), np.diff(ys))))

    def is_degenerate(self, eps: float | None = None) -> bool:
        tol = resolve_eps(eps)
        first = self.control_points[0]
        return all((p - first).length() <= tol for p in self.control_points[1:])


class LineSegment(BezierCurve):
    """Straight segment from ``initial_point`` (t=0) to ``final_point`` (t=1)."""

    kind = CurveKind.LINE_SEGMENT

    def __init__(self, initial: PointLike = Point(0.0, 0.0), final: PointLike = Point(0.0, 0.0)) -> None:
        super().__init__((as_point(initial), as_point(final)))

    @classmethod
    def _from_control_points(cls, points: Sequence[Point]) -> "LineSegment":
        return cls(points[0], points[1])

    def vector(self) -> Point:
        return self.final_point - self.initial_point

    def point_at(self, t: float) -> Point:
        return lerp(t, self.initial_point, self.final_point)

    def value_at(self, t: float, dim: Dim2) -> float:
        a = self.initial_point[dim]
        return a + (self.final_point[dim] - a) * t

    def derivative_at(self, t: float) -> Point:
        return self.vector()

    def solve(self, v: float, dim: Dim2) -> Roots:
        a = self.initial_point[dim]
        d = self.final_point[dim] - a
        if d != 0:
            t = (v - a) / d
            if 0.0 <= t <= 1.0:
                return Roots.finite(t)
            return Roots.finite()
        if a == v:
            return Roots.infinite()
        return Roots.finite()

    def nearest_point(self, p: PointLike) -> float:
        p = as_point(p)
        d = self.vector()
        l2 = d.length_squared()
        if l2 == 0:
            return 0.0
        t = (p - self.initial_point).dot(d) / l2
        return max(0.0, min(1.0, t))

    def length(self, samples: int | None = None) -> float:
        return self.vector().length()

    def __repr__(self) -> str:
        return f"LineSegment({self.initial_point!r}, {self.final_point!r})"


def _unit_interval_roots(coeffs: np.ndarray) -> list[float]:
    """Real roots in [0, 1] of a power-basis polynomial."""
    tol = get_tolerance().parametric
    coeffs = np.trim_zeros(np.asarray(coeffs, dtype=np.float64), "b")
    if coeffs.size <= 1:
        return []
    found: list[float] = []
    for r in P.polyroots(coeffs):
        if abs(r.imag) > _IMAG_TOL:
            continue
        t = float(r.real)
        if -tol <= t <= 1.0 + tol:
            t = min(1.0, max(0.0, t))
            if all(abs(t - s) > tol for s in found):
                found.append(t)
    return sorted(found)
