"""An iterator that can look at any item ahead without advancing."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Any, Callable, Deque, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["PeekNth", "peek_nth"]

_EMPTY: Any = object()


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


class PeekNth(Iterator[T]):
    """Iterator whose upcoming items can be inspected by position.

    Unlike a multi-peek cursor, ``peek_nth(n)`` always refers to the item
    that is ``n`` places after the next one, until ``next`` is called.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = _fused(iterable)
        self._buf: Deque[T] = deque()

    def __iter__(self) -> "PeekNth[T]":
        return self

    def __next__(self) -> T:
        if self._buf:
            return self._buf.popleft()
        return next(self._iter)

    def _fill(self, n: int) -> bool:
        missing = n + 1 - len(self._buf)
        if missing > 0:
            self._buf.extend(islice(self._iter, missing))
        return n < len(self._buf)

    def peek(self, default: Any = None) -> Any:
        """Return the next item without consuming it, or ``default``."""
        return self.peek_nth(0, default)

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the item ``n`` places ahead without consuming, or ``default``."""
        if n < 0:
            raise IndexError("peek position must not be negative")
        return self._buf[n] if self._fill(n) else default

    def replace_nth(self, n: int, value: T) -> T:
        """Replace the item ``n`` places ahead with ``value`` and return the old one.

        Raises ``IndexError`` when there is no such item.
        """
        if n < 0 or not self._fill(n):
            raise IndexError("no item at peek position %d" % n)
        old = self._buf[n]
        self._buf[n] = value
        return old

    def next_if(self, func: Callable[[T], bool], default: Any = None) -> Any:
        """Consume and return the next item if ``func`` accepts it, else ``default``."""
        item = next(self, _EMPTY)
        if item is _EMPTY:
            return default
        if func(item):
            return item
        self._buf.appendleft(item)
        return default

    def next_if_eq(self, expected: Any, default: Any = None) -> Any:
        """Consume and return the next item if it equals ``expected``, else ``default``."""
        return self.next_if(lambda item: item == expected, default)

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves of it.

        Raises ``StopIteration`` when the item is rejected or the iterator
        is exhausted; a rejected item stays in place.
        """
        item = self.peek(_EMPTY)
        if item is _EMPTY or not accept(item):
            raise StopIteration
        return next(self)


def peek_nth(iterable: Iterable[T]) -> PeekNth[T]:
    """Wrap ``iterable`` so that items at any distance ahead can be peeked."""
    return PeekNth(iterable)