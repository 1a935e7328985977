"""Merging and merge-joining two iterables in ascending order."""

from __future__ import annotations

import itertools
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Tuple, TypeVar

L = TypeVar("L")
R = TypeVar("R")

__all__ = [
    "EitherOrBoth",
    "Left",
    "Right",
    "Both",
    "MergeBy",
    "merge",
    "merge_by",
    "merge_join_by",
]

_EMPTY: Any = object()


class EitherOrBoth:
    """A value taken from the left side, the right side, or both."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Left(EitherOrBoth, Generic[L]):
    """A value present only on the left."""

    value: L


@dataclass(frozen=True, slots=True)
class Right(EitherOrBoth, Generic[R]):
    """A value present only on the right."""

    value: R


@dataclass(frozen=True, slots=True)
class Both(EitherOrBoth, Generic[L, R]):
    """A pair of values that compared equal."""

    left: L
    right: R


class _PutBack:
    """A fused iterator with room for a single pushed-back item."""

    __slots__ = ("_iter", "_slot", "_done")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._slot: Any = _EMPTY
        self._done = False

    def take(self) -> Any:
        if self._slot is not _EMPTY:
            item, self._slot = self._slot, _EMPTY
            return item
        if self._done:
            return _EMPTY
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _EMPTY

    def put_back(self, item: Any) -> None:
        self._slot = item


Step = Callable[[Any, Any], Tuple[Any, Any, Any]]


def _identity(value: Any) -> Any:
    return value


class MergeBy(Iterator[Any]):
    """Iterator that repeatedly picks from two base iterators.

    ``step(left, right)`` decides which item is produced; it returns
    ``(left_back, right_back, item)`` where the first two hold the items to
    keep for the next round (or an internal empty marker). When one side is
    exhausted the remaining items of the other are passed through
    ``on_left`` or ``on_right``.
    """

    def __init__(
        self,
        left: Iterable[Any],
        right: Iterable[Any],
        step: Step,
        on_left: Callable[[Any], Any] = _identity,
        on_right: Callable[[Any], Any] = _identity,
    ) -> None:
        self._left = _PutBack(left)
        self._right = _PutBack(right)
        self._step = step
        self._on_left = on_left
        self._on_right = on_right

    def __iter__(self) -> "MergeBy":
        return self

    def __next__(self) -> Any:
        left = self._left.take()
        right = self._right.take()
        if left is _EMPTY and right is _EMPTY:
            raise StopIteration
        if right is _EMPTY:
            return self._on_left(left)
        if left is _EMPTY:
            return self._on_right(right)
        left_back, right_back, item = self._step(left, right)
        if left_back is not _EMPTY:
            self._left.put_back(left_back)
        if right_back is not _EMPTY:
            self._right.put_back(right_back)
        return item

    def count(self) -> int:
        """Consume the iterator and return how many items it produced."""
        return sum(1 for _ in self)

    def last(self) -> Any:
        """Consume the iterator and return its last item, or ``None``."""
        result = None
        for result in self:
            pass
        return result

    def nth(self, n: int) -> Any:
        """Skip ``n`` items and return the next one, or ``None`` if exhausted."""
        return next(itertools.islice(self, n, None), None)


def merge_by(
    left: Iterable[Any], right: Iterable[Any], less: Callable[[Any, Any], bool]
) -> MergeBy:
    """Merge two iterables, taking the left item whenever ``less(l, r)`` holds."""

    def step(l_item: Any, r_item: Any) -> Tuple[Any, Any, Any]:
        if less(l_item, r_item):
            return _EMPTY, r_item, l_item
        return l_item, _EMPTY, r_item

    return MergeBy(left, right, step)


def merge(left: Iterable[Any], right: Iterable[Any]) -> MergeBy:
    """Merge two ascending iterables into one ascending iterator (stable)."""
    return merge_by(left, right, operator.le)


def merge_join_by(
    left: Iterable[Any], right: Iterable[Any], cmp: Callable[[Any, Any], Any]
) -> MergeBy:
    """Merge-join two ascending iterables.

    If ``cmp(l, r)`` returns an integer, a negative value yields ``Left(l)``,
    a positive one ``Right(r)`` and zero ``Both(l, r)``. If it returns a
    ``bool``, ``True`` yields ``Left(l)`` and ``False`` yields ``Right(r)``.
    """

    def step(l_item: Any, r_item: Any) -> Tuple[Any, Any, Any]:
        order = cmp(l_item, r_item)
        if isinstance(order, bool):
            if order:
                return _EMPTY, r_item, Left(l_item)
            return l_item, _EMPTY, Right(r_item)
        if order < 0:
            return _EMPTY, r_item, Left(l_item)
        if order > 0:
            return l_item, _EMPTY, Right(r_item)
        return _EMPTY, _EMPTY, Both(l_item, r_item)

    return MergeBy(left, right, step, Left, Right)