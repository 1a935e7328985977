"""An iterator that can look ahead any number of items."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["MultiPeek", "multipeek"]

_EMPTY: Any = object()


class MultiPeek(Iterator[T]):
    """Iterator with a peek cursor that moves forward on each :meth:`peek`.

    Calling ``next`` returns the next item and resets the cursor.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)
        self._done = False
        self._buf: Deque[T] = deque()
        self._index = 0

    def _pull(self) -> Any:
        if self._done:
            return _EMPTY
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _EMPTY

    def __iter__(self) -> "MultiPeek[T]":
        return self

    def __next__(self) -> T:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        item = self._pull()
        if item is _EMPTY:
            raise StopIteration
        return item

    def peek(self, default: Any = None) -> Any:
        """Return the item under the cursor and move the cursor forward.

        Returns ``default`` when there is nothing more to peek at; the
        cursor then stays where it is.
        """
        if self._index < len(self._buf):
            item = self._buf[self._index]
        else:
            item = self._pull()
            if item is _EMPTY:
                return default
            self._buf.append(item)
        self._index += 1
        return item

    def reset_peek(self) -> None:
        """Move the peek cursor back to the next item."""
        self._index = 0

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves of it.

        Raises ``StopIteration`` when the item is rejected or the iterator
        is exhausted; a rejected item stays in place.
        """
        if self._buf:
            candidate = self._buf[0]
        else:
            candidate = self.peek(_EMPTY)
        if candidate is not _EMPTY and not accept(candidate):
            raise StopIteration
        return next(self)


def multipeek(iterable: Iterable[T]) -> MultiPeek[T]:
    """Wrap ``iterable`` so that several items ahead can be peeked at."""
    return MultiPeek(iterable)