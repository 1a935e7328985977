"""Splitting one iterator into two that produce the same items."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")

__all__ = ["Tee", "tee"]


class _TeeBuffer:
    __slots__ = ("backlog", "iterator", "owner")

    def __init__(self, iterator: Iterator[Any]) -> None:
        self.backlog: Deque[Any] = deque()
        self.iterator = iterator
        # The half whose id equals ``owner`` reads from the backlog.
        self.owner = False


class Tee(Iterator[T]):
    """One of two halves that both produce every item of a shared source."""

    def __init__(self, buffer: _TeeBuffer, ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __iter__(self) -> "Tee[T]":
        return self

    def __next__(self) -> T:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iterator)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item


def tee(iterable: Iterable[T]) -> Tuple[Tee[T], Tee[T]]:
    """Return two iterators that each produce all items of ``iterable``."""
    buffer = _TeeBuffer(iter(iterable))
    return Tee(buffer, True), Tee(buffer, False)