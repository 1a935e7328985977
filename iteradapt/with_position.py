"""Tagging each item with its position: first, middle, last or only."""

from __future__ import annotations

import enum
from typing import Any, Iterable, Iterator, Tuple, TypeVar

from iteradapt.peeking import Peekable

T = TypeVar("T")

__all__ = ["Position", "WithPosition", "with_position"]

_EMPTY: Any = object()


class Position(enum.Enum):
    """Where an item stands in the sequence it came from."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


class WithPosition(Iterator[Tuple[Position, T]]):
    """Iterator producing ``(position, item)`` pairs."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._peekable: Peekable[T] = Peekable(iterable)
        self._handled_first = False

    def __iter__(self) -> "WithPosition[T]":
        return self

    def __next__(self) -> Tuple[Position, T]:
        item = next(self._peekable)
        has_more = self._peekable.peek(_EMPTY) is not _EMPTY
        if not self._handled_first:
            self._handled_first = True
            return (Position.FIRST if has_more else Position.ONLY), item
        return (Position.MIDDLE if has_more else Position.LAST), item


def with_position(iterable: Iterable[T]) -> WithPosition[T]:
    """Pair every item of ``iterable`` with its :class:`Position`."""
    return WithPosition(iterable)