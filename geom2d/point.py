"""2D points and vector helpers.

Points double as free vectors: the difference of two points is a
:class:`Point` as well. Instances are immutable; every operation returns a new
value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from numbers import Real
from typing import Iterator, Sequence, Union

from .errors import DegenerateVectorError
from .numeric import resolve_eps


class Dim2(IntEnum):
    X = 0
    Y = 1

    def other(self) -> "Dim2":
        return Dim2(1 - self.value)


X = Dim2.X
Y = Dim2.Y


@dataclass(frozen=True)
class Point:
    """A lightweight immutable 2D point/vector."""

    x: float
    y: float

    # numpy scalars defer to __rmul__ instead of broadcasting over the point
    __array_ufunc__ = None

    @classmethod
    def polar(cls, angle: float, radius: float = 1.0) -> "Point":
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    # --- basic arithmetic -------------------------------------------------
    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Point(self.x * other, self.y * other)
        # p * m applies an affine transform, matching the composition order of Affine
        apply = getattr(other, "apply", None)
        if apply is not None:
            return apply(self)
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, Real):
            return Point(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Point":
        return Point(self.x / scalar, self.y / scalar)

    def __getitem__(self, dim: int) -> float:
        if dim == 0:
            return self.x
        if dim == 1:
            return self.y
        raise IndexError(f"Point has no dimension {dim!r}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    # --- vector operations -------------------------------------------------
    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> "Point":
        """Return the unit vector pointing the same way.

        Raises :class:`DegenerateVectorError` for the zero vector; callers that
        accept degenerate input are expected to check :meth:`is_zero` first.
        """
        l = self.length()
        if l == 0 or not math.isfinite(l):
            raise DegenerateVectorError(f"Cannot normalise vector {self!r}")
        return Point(self.x / l, self.y / l)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def ccw(self) -> "Point":
        """Rotate by +90 degrees."""
        return Point(-self.y, self.x)

    def cw(self) -> "Point":
        """Rotate by -90 degrees."""
        return Point(self.y, -self.x)

    def distance_to(self, other: "Point") -> float:
        return (self - other).length()

    def almost_equals(self, other: "Point", eps: float | None = None) -> bool:
        return are_near(self, other, eps)

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce a 2-sequence (tuple, list, numpy row) to a :class:`Point`."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def dot(a: Point, b: Point) -> float:
    return a.dot(b)


def cross(a: Point, b: Point) -> float:
    return a.cross(b)


def distance(a: Point, b: Point) -> float:
    return (a - b).length()


def distance_sq(a: Point, b: Point) -> float:
    return (a - b).length_squared()


def middle_point(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def lerp(t: float, a: Point, b: Point) -> Point:
    return a * (1.0 - t) + b * t


def unit_vector(v: Point) -> Point:
    return v.normalized()


def angle_between(a: Point, b: Point) -> float:
    """Signed angle in (-pi, pi] rotating ``a`` onto ``b``."""
    return math.atan2(cross(a, b), dot(a, b))


def are_near(a, b, eps: float | None = None) -> bool:
    """Tolerance equality for two numbers or two points.

    Points are near when their Euclidean distance is at most ``eps``.
    """
    tol = resolve_eps(eps)
    if isinstance(a, Real) and isinstance(b, Real):
        return abs(a - b) <= tol
    return distance(as_point(a), as_point(b)) <= tol
