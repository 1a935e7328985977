"""Running a function over the good values of an iterable that may fail."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")

__all__ = ["ProcessResults", "process_results"]


class ProcessResults(Iterator[T]):
    """Iterator over the values of a source, stopping at the first error.

    An error is either an ``Exception`` instance produced by the source or
    an ``Exception`` raised while reading from it. The error is kept in
    :attr:`error`.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self.error: Optional[Exception] = None

    def __iter__(self) -> "ProcessResults[T]":
        return self

    def __next__(self) -> T:
        try:
            item = next(self._iter)
        except StopIteration:
            raise
        except Exception as exc:
            self.error = exc
            raise StopIteration from None
        if isinstance(item, Exception):
            self.error = item
            raise StopIteration
        return item


def process_results(
    iterable: Iterable[Any], processor: Callable[[ProcessResults[Any]], R]
) -> R:
    """Call ``processor`` with the values of ``iterable`` and return its result.

    If an error was met while ``processor`` was reading, that error is
    raised instead.
    """
    results: ProcessResults[Any] = ProcessResults(iterable)
    value = processor(results)
    if results.error is not None:
        raise results.error
    return value