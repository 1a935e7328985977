"""Iterators that produce items from a function rather than another iterator."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

A = TypeVar("A")
S = TypeVar("S")

__all__ = [
    "RepeatCall",
    "Unfold",
    "Iterate",
    "repeat_call",
    "unfold",
    "iterate",
]


class RepeatCall(Iterator[A]):
    """Endless iterator producing the result of calling a function each time."""

    def __init__(self, function: Callable[[], A]) -> None:
        self._function = function

    def __iter__(self) -> "RepeatCall[A]":
        return self

    def __next__(self) -> A:
        return self._function()


class Unfold(Iterator[A], Generic[A, S]):
    """Iterator driven by a state and a step function.

    ``function(state)`` returns ``None`` to stop, or a pair
    ``(item, next_state)``. The current state is kept in :attr:`state`.
    """

    def __init__(
        self, initial_state: S, function: Callable[[S], Optional[Tuple[A, S]]]
    ) -> None:
        self.state = initial_state
        self._function = function

    def __iter__(self) -> "Unfold[A, S]":
        return self

    def __next__(self) -> A:
        step = self._function(self.state)
        if step is None:
            raise StopIteration
        item, self.state = step
        return item


class Iterate(Iterator[S]):
    """Endless iterator producing ``x``, ``f(x)``, ``f(f(x))`` and so on.

    The following value is computed before the current one is returned.
    """

    def __init__(self, initial_value: S, function: Callable[[S], S]) -> None:
        self._state = initial_value
        self._function = function

    def __iter__(self) -> "Iterate[S]":
        return self

    def __next__(self) -> S:
        following = self._function(self._state)
        current, self._state = self._state, following
        return current


def repeat_call(function: Callable[[], A]) -> RepeatCall[A]:
    """Return an endless iterator of ``function()`` results."""
    return RepeatCall(function)


def unfold(
    initial_state: S, function: Callable[[S], Optional[Tuple[A, S]]]
) -> Unfold[A, S]:
    """Return an iterator built from a state and a step function."""
    return Unfold(initial_state, function)


def iterate(initial_value: S, function: Callable[[S], S]) -> Iterate[S]:
    """Return an endless iterator applying ``function`` repeatedly."""
    return Iterate(initial_value, function)