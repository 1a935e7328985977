"""Zipping two iterables that must have the same length."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Tuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")

__all__ = ["zip_eq"]

_EMPTY: Any = object()


def zip_eq(first: Iterable[A], second: Iterable[B]) -> Iterator[Tuple[A, B]]:
    """Iterate ``first`` and ``second`` in lock step.

    Raises ``ValueError`` when one of them ends before the other.
    """
    left, right = iter(first), iter(second)
    while True:
        a = next(left, _EMPTY)
        b = next(right, _EMPTY)
        if a is _EMPTY and b is _EMPTY:
            return
        if a is _EMPTY or b is _EMPTY:
            raise ValueError("zip_eq reached the end of one iterable before the other")
        yield a, b