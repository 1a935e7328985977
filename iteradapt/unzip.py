"""Splitting an iterable of tuples into one list per position."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

__all__ = ["multiunzip"]


def multiunzip(
    iterable: Iterable[Tuple[Any, ...]], arity: Optional[int] = None
) -> Tuple[List[Any], ...]:
    """Consume tuples of ``arity`` items and return one list per position.

    When ``arity`` is not given it is taken from the first tuple; an empty
    iterable then gives an empty tuple. A tuple of another length raises
    ``ValueError``.
    """
    if arity is not None and arity < 0:
        raise ValueError("arity must not be negative")
    columns: Optional[Tuple[List[Any], ...]] = (
        None if arity is None else tuple([] for _ in range(arity))
    )
    for row in iterable:
        row = tuple(row)
        if columns is None:
            columns = tuple([] for _ in row)
        if len(row) != len(columns):
            raise ValueError(
                "expected tuples of %d items, got %d" % (len(columns), len(row))
            )
        for column, value in zip(columns, row):
            column.append(value)
    return () if columns is None else columns