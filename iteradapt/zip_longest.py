"""Zipping two iterables until both are exhausted."""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Iterator

from iteradapt.merge_join import Both, EitherOrBoth, Left, Right

__all__ = ["zip_longest"]

_EMPTY: Any = object()


def zip_longest(first: Iterable[Any], second: Iterable[Any]) -> Iterator[EitherOrBoth]:
    """Iterate both iterables together, marking which sides still had items.

    Produces ``Both(a, b)`` while both have items, then ``Left(a)`` or
    ``Right(b)`` for the rest of the longer one.
    """
    for a, b in itertools.zip_longest(first, second, fillvalue=_EMPTY):
        if b is _EMPTY:
            yield Left(a)
        elif a is _EMPTY:
            yield Right(b)
        else:
            yield Both(a, b)