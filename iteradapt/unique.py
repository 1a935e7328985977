"""Filtering out items whose key has been seen before."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Set, TypeVar

T = TypeVar("T")

__all__ = ["UniqueBy", "unique", "unique_by"]


class UniqueBy(Iterator[T]):
    """Produces each item whose key has not been produced before.

    Without a key function the items themselves are the keys. Keys must be
    hashable.
    """

    def __init__(
        self, iterable: Iterable[T], key: Optional[Callable[[T], Any]] = None
    ) -> None:
        self._iter = iter(iterable)
        self._key = key
        self._used: Set[Any] = set()

    def _key_of(self, item: T) -> Any:
        return item if self._key is None else self._key(item)

    def __iter__(self) -> "UniqueBy[T]":
        return self

    def __next__(self) -> T:
        for item in self._iter:
            key = self._key_of(item)
            if key not in self._used:
                self._used.add(key)
                return item
        raise StopIteration

    def count(self) -> int:
        """Consume the iterator and return how many new keys were left."""
        before = len(self._used)
        self._used.update(map(self._key_of, self._iter))
        return len(self._used) - before


def unique(iterable: Iterable[T]) -> UniqueBy[T]:
    """Return the items of ``iterable`` without repeats, in first-seen order."""
    return UniqueBy(iterable)


def unique_by(iterable: Iterable[T], key: Callable[[T], Any]) -> UniqueBy[T]:
    """Return the items of ``iterable`` whose ``key`` has not been seen before."""
    return UniqueBy(iterable, key)