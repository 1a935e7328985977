"""Running any number of iterables in lock step."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Tuple

__all__ = ["multizip"]


def multizip(*args: Iterable[Any]) -> Iterator[Tuple[Any, ...]]:
    """Produce tuples of one item from each iterable until any of them ends.

    The iterables are advanced in order, so those before the one that ran
    out may have given up one item more than the rest.
    """
    if not args:
        raise TypeError("multizip needs at least one iterable")
    return zip(*args)