from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .errors import InfiniteSolutionsError
from .point import Dim2, Point


class CurveKind(str, Enum):
    RAY = "ray"
    LINE_SEGMENT = "line_segment"
    BEZIER = "bezier"


class RootKind(str, Enum):
    FINITE = "finite"
    INFINITE = "infinite"


@dataclass(frozen=True)
class Roots:
    """Outcome of solving ``curve.value_at(t, dim) == v``.

    ``FINITE`` carries the sorted parameters (possibly none); ``INFINITE``
    means the curve lies on the level set and every parameter is a solution.
    """

    kind: RootKind
    values: tuple[float, ...] = ()

    @staticmethod
    def finite(*values: float) -> "Roots":
        return Roots(RootKind.FINITE, tuple(sorted(values)))

    @staticmethod
    def infinite() -> "Roots":
        return Roots(RootKind.INFINITE)

    @property
    def is_infinite(self) -> bool:
        return self.kind is RootKind.INFINITE

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


class Curve(ABC):
    """Abstract parametric 2D curve."""

    kind: CurveKind

    @abstractmethod
    def domain(self) -> tuple[float, float]:
        """Return the parameter interval the curve exists on."""
        raise NotImplementedError

    @abstractmethod
    def point_at(self, t: float) -> Point:
        raise NotImplementedError

    def value_at(self, t: float, dim: Dim2) -> float:
        return self.point_at(t)[dim]

    def __call__(self, t: float) -> Point:
        return self.point_at(t)

    @abstractmethod
    def derivative_at(self, t: float) -> Point:
        raise NotImplementedError

    def unit_tangent_at(self, t: float) -> Point:
        """Unit tangent at ``t``, or the zero vector where the curve stalls."""
        d = self.derivative_at(t)
        if d.is_zero():
            return Point(0.0, 0.0)
        return d.normalized()

    @abstractmethod
    def solve(self, v: float, dim: Dim2) -> Roots:
        raise NotImplementedError

    def roots(self, v: float, dim: Dim2) -> list[float]:
        """Parameters where coordinate ``dim`` equals ``v``.

        Raises :class:`InfiniteSolutionsError` when the whole curve lies on
        that level set.
        """
        result = self.solve(v, dim)
        if result.is_infinite:
            raise InfiniteSolutionsError(
                f"{type(self).__name__} lies on {Dim2(dim).name} = {v!r}"
            )
        return list(result.values)

    @abstractmethod
    def nearest_point(self, p: Point) -> float:
        """Return the parameter of the point closest to ``p``."""
        raise NotImplementedError

    @abstractmethod
    def portion(self, f: float, t: float) -> "Curve":
        raise NotImplementedError

    @abstractmethod
    def reverse(self) -> "Curve":
        raise NotImplementedError

    @abstractmethod
    def transformed(self, m) -> "Curve":
        raise NotImplementedError

    @abstractmethod
    def is_degenerate(self) -> bool:
        raise NotImplementedError
