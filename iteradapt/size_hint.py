"""Arithmetic on ``(lower, upper)`` size hints.

A size hint is a pair ``(lower, upper)`` where ``lower`` is a guaranteed
minimum number of remaining items and ``upper`` is either a maximum or
``None`` when no maximum is known. Values behave like unsigned machine
words: lower bounds saturate at :data:`USIZE_MAX`, and upper bounds that
would overflow become ``None``.
"""

from __future__ import annotations

from typing import Optional, Tuple

USIZE_MAX = 2**64 - 1

SizeHint = Tuple[int, Optional[int]]

__all__ = [
    "USIZE_MAX",
    "SizeHint",
    "add",
    "add_scalar",
    "sub_scalar",
    "mul",
    "mul_scalar",
    "max_hint",
    "min_hint",
]


def _saturate(value: int) -> int:
    return min(value, USIZE_MAX)


def _checked(value: int) -> Optional[int]:
    return value if value <= USIZE_MAX else None


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of two sequences placed one after the other."""
    low = _saturate(a[0] + b[0])
    if a[1] is not None and b[1] is not None:
        high = _checked(a[1] + b[1])
    else:
        high = None
    return low, high


def add_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Add an exact count ``x`` to a size hint."""
    low, high = hint
    return _saturate(low + x), None if high is None else _checked(high + x)


def sub_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Subtract an exact count ``x`` from a size hint, stopping at zero."""
    low, high = hint
    return max(low - x, 0), None if high is None else max(high - x, 0)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of the product of two sequences."""
    low = _saturate(a[0] * b[0])
    if a[1] is not None and b[1] is not None:
        high = _checked(a[1] * b[1])
    elif a[1] == 0 or b[1] == 0:
        high = 0
    else:
        high = None
    return low, high


def mul_scalar(hint: SizeHint, x: int) -> SizeHint:
    """Multiply a size hint by an exact factor ``x``."""
    low, high = hint
    return _saturate(low * x), None if high is None else _checked(high * x)


def max_hint(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of the longer of two sequences."""
    lower = max(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        upper = max(a[1], b[1])
    else:
        upper = None
    return lower, upper


def min_hint(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of the shorter of two sequences."""
    lower = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        upper = min(a[1], b[1])
    else:
        upper = a[1] if a[1] is not None else b[1]
    return lower, upper