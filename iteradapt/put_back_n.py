"""An iterator that accepts any number of items pushed back onto its front."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

__all__ = ["PutBackN", "put_back_n"]


class PutBackN(Iterator[T]):
    """Iterator with a stack of pushed-back items in front of its source.

    Items put back are produced most recent first, before the rest of the
    source.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._top: List[T] = []
        self._iter = iter(iterable)

    def __iter__(self) -> "PutBackN[T]":
        return self

    def __next__(self) -> T:
        if self._top:
            return self._top.pop()
        return next(self._iter)

    def put_back(self, value: T) -> None:
        """Place ``value`` in front of the iterator."""
        self._top.append(value)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves of it.

        Raises ``StopIteration`` when the item is rejected or the iterator
        is exhausted; a rejected item is put back.
        """
        item = next(self)
        if not accept(item):
            self.put_back(item)
            raise StopIteration
        return item


def put_back_n(iterable: Iterable[T]) -> PutBackN[T]:
    """Wrap ``iterable`` so that several items can be put back onto it."""
    return PutBackN(iterable)