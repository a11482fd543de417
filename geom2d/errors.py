"""Typed errors raised by the geometry kernel."""

from __future__ import annotations


class GeometryError(ValueError):
    """Raised for impossible geometry operations."""


class InfiniteSolutionsError(GeometryError):
    """A query has infinitely many solutions.

    Raised by root finding when a curve runs along the level set being
    solved for, so that "every parameter" is never confused with "none".
    """


class RangeError(GeometryError):
    """A geometric precondition of an operation does not hold."""


class DegenerateVectorError(GeometryError):
    """A zero-length vector was used where a direction is required."""
