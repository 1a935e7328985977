"""Iterators that can inspect an item before deciding to take it."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Protocol,
    TypeVar,
    runtime_checkable,
)

T = TypeVar("T")

__all__ = [
    "PeekingNext",
    "Peekable",
    "PeekingTakeWhile",
    "peekable",
    "peeking_take_while",
]

_EMPTY: Any = object()


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


@runtime_checkable
class PeekingNext(Protocol):
    """An iterator that can hand out its next item only when it is accepted.

    ``peeking_next(accept)`` returns the next item if ``accept(item)`` is
    true; otherwise it raises ``StopIteration`` and the item is kept.
    """

    def __next__(self) -> Any:
        ...

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        ...


class Peekable(Iterator[T]):
    """Iterator that can look at its next item without consuming it."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = _fused(iterable)
        self._head: Any = _EMPTY

    def __iter__(self) -> "Peekable[T]":
        return self

    def __next__(self) -> T:
        if self._head is not _EMPTY:
            item, self._head = self._head, _EMPTY
            return item
        return next(self._iter)

    def peek(self, default: Any = None) -> Any:
        """Return the next item without consuming it, or ``default``."""
        if self._head is _EMPTY:
            self._head = next(self._iter, _EMPTY)
        return default if self._head is _EMPTY else self._head

    def peeking_next(self, accept: Callable[[T], bool]) -> T:
        """Return the next item if ``accept`` approves of it, else raise ``StopIteration``."""
        item = self.peek(_EMPTY)
        if item is _EMPTY or not accept(item):
            raise StopIteration
        return next(self)


class PeekingTakeWhile(Iterator[Any]):
    """Takes items while ``predicate`` holds, leaving the first rejected one in place."""

    def __init__(self, iterator: PeekingNext, predicate: Callable[[Any], bool]) -> None:
        if not isinstance(iterator, PeekingNext):
            raise TypeError("iterator must provide peeking_next()")
        self._iter = iterator
        self._predicate = predicate

    def __iter__(self) -> "PeekingTakeWhile":
        return self

    def __next__(self) -> Any:
        return self._iter.peeking_next(self._predicate)

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        """Return the next item if both the predicate and ``accept`` approve of it."""
        predicate = self._predicate
        return self._iter.peeking_next(lambda item: predicate(item) and accept(item))


def peekable(iterable: Iterable[T]) -> Peekable[T]:
    """Wrap ``iterable`` so that its next item can be peeked at."""
    return Peekable(iterable)


def peeking_take_while(
    iterator: PeekingNext, predicate: Callable[[Any], bool]
) -> PeekingTakeWhile:
    """Take items from ``iterator`` while ``predicate`` holds, without losing the rest."""
    return PeekingTakeWhile(iterator, predicate)