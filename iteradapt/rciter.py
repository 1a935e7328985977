"""Several handles sharing one underlying iterator."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TypeVar

T = TypeVar("T")

__all__ = ["RcIter", "rciter"]


class _Shared:
    __slots__ = ("iterator", "busy")

    def __init__(self, iterator: Iterator[Any]) -> None:
        self.iterator = iterator
        self.busy = False


class RcIter(Iterator[T]):
    """A handle on an iterator shared by all clones of the handle.

    Advancing any clone advances them all. Re-entering the shared iterator
    while it is producing an item raises ``RuntimeError``.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._shared = _Shared(iter(iterable))

    def __iter__(self) -> "RcIter[T]":
        return self

    def __next__(self) -> T:
        shared = self._shared
        if shared.busy:
            raise RuntimeError("shared iterator re-entered while producing an item")
        shared.busy = True
        try:
            return next(shared.iterator)
        finally:
            shared.busy = False

    def clone(self) -> "RcIter[T]":
        """Return another handle on the same underlying iterator."""
        other: RcIter[T] = RcIter.__new__(RcIter)
        other._shared = self._shared
        return other


def rciter(iterable: Iterable[T]) -> RcIter[T]:
    """Wrap ``iterable`` in a handle that can be cloned and shared."""
    return RcIter(iterable)