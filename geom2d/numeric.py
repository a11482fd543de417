"""Numeric tolerances for the geometry kernel.

The process-wide default :class:`TolerancePolicy` is set with
:func:`set_tolerance`. A ``with tolerance(...)`` block overrides it only for
the current thread or asyncio task; the override lives in a context variable
and never leaks into other callers. Every predicate in the kernel also accepts
``eps=None`` and falls back to the policy in effect, so individual calls can
still pass their own tolerance.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from threading import RLock
from typing import Callable, Iterator, Optional

from . import settings


@dataclass(frozen=True)
class TolerancePolicy:
    """Container for numeric tolerances used throughout the kernel."""

    linear: float = settings.LINEAR_EPSILON
    angular: float = settings.ANGULAR_EPSILON  # radians
    parametric: float = settings.PARAMETRIC_EPSILON

    def __post_init__(self) -> None:
        for name in ("linear", "angular", "parametric"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} tolerance must be non-negative")


_policy_lock = RLock()
_default_policy: TolerancePolicy = TolerancePolicy()
_listeners: list[Callable[[TolerancePolicy], None]] = []

# stack of (marker, policy) overrides for the current context, innermost last
_overrides: ContextVar[tuple] = ContextVar("geom2d_tolerance_overrides", default=())


def get_tolerance() -> TolerancePolicy:
    stack = _overrides.get()
    if stack:
        return stack[-1][1]
    with _policy_lock:
        return _default_policy


def set_tolerance(policy: TolerancePolicy) -> None:
    """Update the process-wide default policy and notify listeners."""

    with _policy_lock:
        global _default_policy
        _default_policy = policy
        listeners = list(_listeners)
    for cb in listeners:
        cb(policy)


def on_tolerance_changed(listener: Callable[[TolerancePolicy], None]) -> None:
    with _policy_lock:
        _listeners.append(listener)


@contextmanager
def tolerance(policy: Optional[TolerancePolicy] = None, **overrides: float) -> Iterator[TolerancePolicy]:
    """Override the policy for the current context inside a ``with`` block.

    Either pass a full ``policy`` or keyword overrides of the policy in effect,
    e.g. ``tolerance(linear=1e-3)``. Blocks may exit in any order; each one
    removes only its own override.
    """
    active = policy if policy is not None else get_tolerance()
    if overrides:
        active = replace(active, **overrides)
    marker = object()
    _overrides.set(_overrides.get() + ((marker, active),))
    try:
        yield active
    finally:
        _overrides.set(tuple(entry for entry in _overrides.get() if entry[0] is not marker))


def resolve_eps(eps: Optional[float]) -> float:
    return eps if eps is not None else get_tolerance().linear


def nearly_equal(a: float, b: float, *, eps: Optional[float] = None) -> bool:
    return abs(a - b) <= resolve_eps(eps)
