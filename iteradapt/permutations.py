"""Lazily produced ``k``-permutations of an iterable."""

from __future__ import annotations

import enum
import math
from itertools import islice
from typing import Any, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

__all__ = ["Permutations", "permutations"]

_EMPTY: Any = object()


def _fused(iterable: Iterable[T]) -> Iterator[T]:
    yield from iterable


class _State(enum.Enum):
    START = enum.auto()
    BUFFERED = enum.auto()
    LOADED = enum.auto()
    END = enum.auto()


def _advance(indices: List[int], cycles: List[int]) -> bool:
    """Step to the next permutation; return ``True`` when there is none."""
    n = len(indices)
    for i in reversed(range(len(cycles))):
        if cycles[i] == 0:
            cycles[i] = n - i - 1
            indices[i:] = indices[i + 1:] + indices[i:i + 1]
        else:
            j = n - cycles[i]
            indices[i], indices[j] = indices[j], indices[i]
            cycles[i] -= 1
            return False
    return True


class Permutations(Iterator[List[T]]):
    """Iterator over all ``k``-permutations, in lexicographic order of positions.

    Items are read from the source only as far as needed, so the source may
    be infinite.
    """

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        if k < 0:
            raise ValueError("k must not be negative")
        self._iter = _fused(iterable)
        self._vals: List[T] = []
        self._k = k
        self._state = _State.START
        self._min_n = 0
        self._indices: List[int] = []
        self._cycles: List[int] = []

    def __iter__(self) -> "Permutations[T]":
        return self

    def _pick(self) -> List[T]:
        return [self._vals[i] for i in self._indices[: self._k]]

    def _finish(self) -> None:
        self._state = _State.END
        raise StopIteration

    def __next__(self) -> List[T]:
        k = self._k
        if self._state is _State.START:
            if k == 0:
                self._state = _State.END
                return []
            self._vals.extend(islice(self._iter, k - len(self._vals)))
            if len(self._vals) != k:
                self._finish()
            self._state = _State.BUFFERED
            self._min_n = k
            return list(self._vals[:k])
        if self._state is _State.BUFFERED:
            item = next(self._iter, _EMPTY)
            if item is not _EMPTY:
                self._vals.append(item)
                result = self._vals[: k - 1] + [self._vals[self._min_n]]
                self._min_n += 1
                return result
            n = self._min_n
            self._indices = list(range(n))
            self._cycles = list(reversed(range(n - k, n)))
            for _ in range(n - k + 1):
                if _advance(self._indices, self._cycles):
                    self._finish()
            self._state = _State.LOADED
            return self._pick()
        if self._state is _State.LOADED:
            if _advance(self._indices, self._cycles):
                self._finish()
            return self._pick()
        raise StopIteration

    def count(self) -> int:
        """Consume the iterator and return how many permutations were left."""
        n = len(self._vals) + sum(1 for _ in self._iter)
        k = self._k
        state = self._state
        self._state = _State.END
        if state is _State.START:
            return 0 if n < k else math.perm(n, k)
        if state is _State.BUFFERED:
            return max(math.perm(n, k) - (self._min_n - k + 1), 0)
        if state is _State.LOADED:
            size = len(self._indices)
            total = 0
            for i, c in enumerate(self._cycles):
                total = total * (size - i) + c
            return total
        return 0


def permutations(iterable: Iterable[T], k: int) -> Permutations[T]:
    """Return an iterator over the ``k``-permutations of ``iterable`` as lists."""
    return Permutations(iterable, k)