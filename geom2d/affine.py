"""2D affine transforms.

An :class:`Affine` stores the six coefficients ``(a, b, c, d, e, f)`` of the
map ``(x, y) -> (a*x + c*y + e, b*x + d*y + f)`` in a read-only 3x3 numpy
array. Composition follows the point-on-the-left convention: ``p * (m1 * m2)``
equals ``(p * m1) * m2``.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .errors import RangeError
from .numeric import resolve_eps
from .point import Point, PointLike, as_point


class Affine:
    """Immutable 2D affine transform."""

    __slots__ = ("_m",)

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        e: float = 0.0,
        f: float = 0.0,
    ) -> None:
        m = np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)
        m.setflags(write=False)
        self._m = m

    # --- factories --------------------------------------------------------
    @staticmethod
    def from_matrix(m: Iterable[Iterable[float]]) -> "Affine":
        """Build from a 2x3 or 3x3 column-vector matrix."""
        arr = np.asarray(m, dtype=np.float64)
        if arr.shape not in ((2, 3), (3, 3)):
            raise ValueError(f"Affine expects a 2x3 or 3x3 matrix, got {arr.shape}")
        if arr.shape == (3, 3) and not np.allclose(arr[2], [0.0, 0.0, 1.0]):
            raise ValueError("Projective matrices are not affine")
        return Affine(arr[0, 0], arr[1, 0], arr[0, 1], arr[1, 1], arr[0, 2], arr[1, 2])

    @staticmethod
    def identity() -> "Affine":
        return Affine()

    @staticmethod
    def translate(dx: float, dy: float) -> "Affine":
        return Affine(1.0, 0.0, 0.0, 1.0, dx, dy)

    @staticmethod
    def scale(sx: float, sy: float | None = None) -> "Affine":
        if sy is None:
            sy = sx
        return Affine(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @staticmethod
    def rotate(theta: float) -> "Affine":
        c = math.cos(theta)
        s = math.sin(theta)
        return Affine(c, s, -s, c, 0.0, 0.0)

    @staticmethod
    def rotate_around(center: PointLike, theta: float) -> "Affine":
        p = as_point(center)
        return Affine.translate(-p.x, -p.y) * Affine.rotate(theta) * Affine.translate(p.x, p.y)

    @staticmethod
    def skew_x(k: float) -> "Affine":
        """Horizontal shear: ``x' = x + k*y``."""
        return Affine(1.0, 0.0, k, 1.0, 0.0, 0.0)

    @staticmethod
    def skew_y(k: float) -> "Affine":
        """Vertical shear: ``y' = y + k*x``."""
        return Affine(1.0, k, 0.0, 1.0, 0.0, 0.0)

    # --- accessors --------------------------------------------------------
    @property
    def matrix(self) -> np.ndarray:
        return self._m

    @property
    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        m = self._m
        return (
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    def translation(self) -> Point:
        return Point(float(self._m[0, 2]), float(self._m[1, 2]))

    def without_translation(self) -> "Affine":
        a, b, c, d, _, _ = self.coefficients
        return Affine(a, b, c, d, 0.0, 0.0)

    def det(self) -> float:
        a, b, c, d, _, _ = self.coefficients
        return a * d - b * c

    # --- application ------------------------------------------------------
    def apply(self, p: PointLike) -> Point:
        p = as_point(p)
        m = self._m
        return Point(
            float(m[0, 0] * p.x + m[0, 1] * p.y + m[0, 2]),
            float(m[1, 0] * p.x + m[1, 1] * p.y + m[1, 2]),
        )

    def apply_array(self, points: np.ndarray) -> np.ndarray:
        """Transform an ``(N, 2)`` array of points in one go."""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"Expected an (N, 2) array, got shape {pts.shape}")
        return pts @ self._m[:2, :2].T + self._m[:2, 2]

    def __mul__(self, other: "Affine") -> "Affine":
        if not isinstance(other, Affine):
            return NotImplemented
        # self is applied first
        return Affine.from_matrix(other._m @ self._m)

    def inverse(self) -> "Affine":
        if self.det() == 0.0:
            raise RangeError("Affine transform is singular and has no inverse")
        return Affine.from_matrix(np.linalg.inv(self._m))

    # --- predicates -------------------------------------------------------
    def almost_equals(self, other: "Affine", eps: float | None = None) -> bool:
        return bool(np.all(np.abs(self._m - other._m) <= resolve_eps(eps)))

    def is_identity(self, eps: float | None = None) -> bool:
        return self.almost_equals(Affine(), eps)

    def is_translation(self, eps: float | None = None) -> bool:
        return self.without_translation().is_identity(eps)

    def preserves_angles(self, eps: float | None = None) -> bool:
        """True for similarity transforms (rotation, uniform scale, mirror)."""
        tol = resolve_eps(eps)
        a, b, c, d, _, _ = self.coefficients
        rotation_like = abs(a - d) <= tol and abs(b + c) <= tol
        mirror_like = abs(a + d) <= tol and abs(b - c) <= tol
        return rotation_like or mirror_like

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affine):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        a, b, c, d, e, f = self.coefficients
        return f"Affine({a:.6g}, {b:.6g}, {c:.6g}, {d:.6g}, {e:.6g}, {f:.6g})"
