"""Taking items while a predicate holds, including the first that fails."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["TakeWhileInclusive", "take_while_inclusive"]


class TakeWhileInclusive(Iterator[T]):
    """Produces items while ``predicate`` holds, then the first failing item."""

    def __init__(self, iterable: Iterable[T], predicate: Callable[[T], bool]) -> None:
        self._iter = iter(iterable)
        self._predicate = predicate
        self._done = False

    def __iter__(self) -> "TakeWhileInclusive[T]":
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        item = next(self._iter)
        if not self._predicate(item):
            self._done = True
        return item


def take_while_inclusive(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> TakeWhileInclusive[T]:
    """Take items while ``predicate`` holds, including the one where it first fails."""
    return TakeWhileInclusive(iterable, predicate)