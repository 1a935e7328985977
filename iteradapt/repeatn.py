"""Repeating one value a fixed number of times."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["RepeatN", "repeat_n"]

_EMPTY: Any = object()


class RepeatN(Iterator[T]):
    """Iterator producing one element ``n`` times; its length is exact."""

    def __init__(self, element: T, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._element: Any = element if n > 0 else _EMPTY
        self._n = n

    def __iter__(self) -> "RepeatN[T]":
        return self

    def __next__(self) -> T:
        if self._n > 1:
            self._n -= 1
            return self._element
        if self._n == 0:
            raise StopIteration
        self._n = 0
        element, self._element = self._element, _EMPTY
        return element

    def __len__(self) -> int:
        return self._n


def repeat_n(element: T, n: int) -> RepeatN[T]:
    """Return an iterator producing ``element`` exactly ``n`` times."""
    return RepeatN(element, n)