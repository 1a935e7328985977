"""Grouping items into fixed-size tuples and sliding tuple windows."""

from __future__ import annotations

from collections import deque
from itertools import cycle, islice
from typing import Any, Deque, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

__all__ = [
    "TupleBuffer",
    "Tuples",
    "TupleWindows",
    "CircularTupleWindows",
    "tuples",
    "tuple_windows",
    "circular_tuple_windows",
]


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("tuple size must be at least 1")


class TupleBuffer(Iterator[T]):
    """Iterator over the items left over when a source did not fill a tuple."""

    def __init__(self, items: Iterable[T]) -> None:
        self._items: Deque[T] = deque(items)

    def __iter__(self) -> "TupleBuffer[T]":
        return self

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class Tuples(Iterator[Tuple[Any, ...]]):
    """Iterator producing consecutive, non-overlapping tuples of ``n`` items.

    Items that are too few to fill a last tuple are kept and can be read
    with :meth:`into_buffer`.
    """

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        self._iter = _fused(iterable)
        self._n = n
        self._buf: List[Any] = []

    def __iter__(self) -> "Tuples":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        group = tuple(islice(self._iter, self._n))
        if len(group) == self._n:
            return group
        self._buf = list(group)
        raise StopIteration

    def into_buffer(self) -> TupleBuffer[Any]:
        """Return the items read that were not enough to form a tuple."""
        return TupleBuffer(self._buf)


class TupleWindows(Iterator[Tuple[Any, ...]]):
    """Iterator over all contiguous windows of ``n`` items, as tuples."""

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        self._iter = iter(iterable)
        self._n = n
        self._last: Optional[Tuple[Any, ...]] = None

    def __iter__(self) -> "TupleWindows":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        n = self._n
        if n == 1:
            return (next(self._iter),)
        new = next(self._iter)
        if self._last is not None:
            self._last = self._last[1:] + (new,)
            return self._last
        window = (new,) + tuple(islice(self._iter, n - 1))
        if len(window) < n:
            raise StopIteration
        self._last = window
        return window


class CircularTupleWindows(Iterator[Tuple[Any, ...]]):
    """Windows of ``n`` items that wrap around to the start of the source.

    One window is produced per source item; its length is exact.
    """

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        items = list(iterable)
        self._len = len(items)
        self._windows = TupleWindows(cycle(items), n)

    def __iter__(self) -> "CircularTupleWindows":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if self._len == 0:
            raise StopIteration
        self._len -= 1
        return next(self._windows)

    def __len__(self) -> int:
        return self._len


def tuples(iterable: Iterable[Any], n: int) -> Tuples:
    """Group the items of ``iterable`` into tuples of ``n`` items."""
    return Tuples(iterable, n)


def tuple_windows(iterable: Iterable[Any], n: int) -> TupleWindows:
    """Return the overlapping windows of ``n`` items of ``iterable``."""
    return TupleWindows(iterable, n)


def circular_tuple_windows(iterable: Iterable[Any], n: int) -> CircularTupleWindows:
    """Return windows of ``n`` items that wrap around the end of ``iterable``."""
    return CircularTupleWindows(iterable, n)