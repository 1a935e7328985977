"""Padding an iterable to a minimum length."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["PadUsing", "pad_using"]


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


class PadUsing(Iterator[T]):
    """Iterator that fills in missing items up to a minimum length.

    ``filler`` is called with the position of each missing item.
    """

    def __init__(
        self, iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
    ) -> None:
        self._iter = _fused(iterable)
        self._min = min_len
        self._pos = 0
        self._filler = filler

    def __iter__(self) -> "PadUsing[T]":
        return self

    def __next__(self) -> T:
        for item in self._iter:
            self._pos += 1
            return item
        if self._pos < self._min:
            item = self._filler(self._pos)
            self._pos += 1
            return item
        raise StopIteration


def pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> PadUsing[T]:
    """Produce the items of ``iterable``, then ``filler(i)`` up to ``min_len`` items."""
    return PadUsing(iterable, min_len, filler)