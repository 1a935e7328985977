"""Finding the minimum and the maximum of an iterable in one pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")

__all__ = [
    "MinMaxResult",
    "NoElements",
    "OneElement",
    "MinMax",
    "minmax",
    "minmax_by",
]

_MISSING: Any = object()


class MinMaxResult:
    """Outcome of :func:`minmax`: no elements, one element, or a min and max."""

    __slots__ = ()

    def into_option(self) -> Optional[Tuple[Any, Any]]:
        """Return ``None`` for no elements, otherwise a ``(min, max)`` pair."""
        match self:
            case OneElement(value):
                return value, value
            case MinMax(low, high):
                return low, high
            case _:
                return None


@dataclass(frozen=True, slots=True)
class NoElements(MinMaxResult):
    """The iterable was empty."""


@dataclass(frozen=True, slots=True)
class OneElement(MinMaxResult, Generic[T]):
    """The iterable held exactly one element."""

    value: T


@dataclass(frozen=True, slots=True)
class MinMax(MinMaxResult, Generic[T]):
    """The iterable held several elements; ``min`` is not larger than ``max``."""

    min: T
    max: T


LessThan = Callable[[Any, Any, Any, Any], bool]


def _minmax_impl(
    iterable: Iterable[Any], key_for: Callable[[Any], Any], lt: LessThan
) -> MinMaxResult:
    it = iter(iterable)
    first = next(it, _MISSING)
    if first is _MISSING:
        return NoElements()
    second = next(it, _MISSING)
    if second is _MISSING:
        return OneElement(first)

    first_key, second_key = key_for(first), key_for(second)
    if lt(second, first, second_key, first_key):
        low, high, low_key, high_key = second, first, second_key, first_key
    else:
        low, high, low_key, high_key = first, second, first_key, second_key

    # Items are taken in pairs: the smaller of the pair is compared with the
    # current minimum and the larger with the current maximum.
    for small in it:
        large = next(it, _MISSING)
        small_key = key_for(small)
        if large is _MISSING:
            if lt(small, low, small_key, low_key):
                low = small
            elif not lt(small, high, small_key, high_key):
                high = small
            break
        large_key = key_for(large)
        if lt(large, small, large_key, small_key):
            small, large, small_key, large_key = large, small, large_key, small_key
        if lt(small, low, small_key, low_key):
            low, low_key = small, small_key
        if not lt(large, high, large_key, high_key):
            high, high_key = large, large_key

    return MinMax(low, high)


def minmax(
    iterable: Iterable[Any], key: Optional[Callable[[Any], Any]] = None
) -> MinMaxResult:
    """Return the first minimum and the last maximum, optionally by ``key``."""
    key_for = key if key is not None else (lambda item: item)
    return _minmax_impl(iterable, key_for, lambda x, y, xk, yk: xk < yk)


def minmax_by(
    iterable: Iterable[Any], less: Callable[[Any, Any], bool]
) -> MinMaxResult:
    """Like :func:`minmax`, ordering items by ``less(a, b)`` meaning ``a < b``."""
    return _minmax_impl(iterable, lambda item: None, lambda x, y, xk, yk: less(x, y))