"""Lazily produced power set of an iterable."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Iterator, List, TypeVar

T = TypeVar("T")

__all__ = ["Powerset", "powerset"]


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


class Powerset(Iterator[List[T]]):
    """Iterator over every subset of the source, ordered by size.

    Subsets of one size come in lexicographic order of positions. The
    empty set and the single-item sets are produced while the source is
    still being read, so the source may be infinite.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source = _fused(iterable)
        self._pool: List[T] = []
        self._produced = 0
        self._gen: Iterator[List[T]] = self._generate()

    def _generate(self) -> Iterator[List[T]]:
        yield []
        for item in self._source:
            self._pool.append(item)
            yield [item]
        for size in range(2, len(self._pool) + 1):
            for combo in combinations(self._pool, size):
                yield list(combo)

    def __iter__(self) -> "Powerset[T]":
        return self

    def __next__(self) -> List[T]:
        subset = next(self._gen)
        self._produced += 1
        return subset

    def count(self) -> int:
        """Consume the iterator and return how many subsets were left."""
        self._pool.extend(self._source)
        remaining = 2 ** len(self._pool) - self._produced
        self._produced += remaining
        self._gen = iter(())
        return remaining


def powerset(iterable: Iterable[T]) -> Powerset[T]:
    """Return an iterator over all subsets of ``iterable`` as lists."""
    return Powerset(iterable)