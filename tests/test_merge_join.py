import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.merge_join import Both, Left, Right, merge, merge_by, merge_join_by


def ordering(left, right):
    return (left > right) - (left < right)


class Unfused:
    """Returns its items, stops once, yields a 0, then stops for good."""

    def __init__(self, items):
        self._items = iter(items)
        self._ends = 0

    def __iter__(self):
        return self

    def __next__(self):
        for item in self._items:
            return item
        self._ends += 1
        if self._ends == 2:
            return 0
        raise StopIteration


def test_empty():
    assert list(merge_join_by([], [], ordering)) == []


def test_left_only():
    assert list(merge_join_by([1, 2, 3], [], ordering)) == [Left(1), Left(2), Left(3)]


def test_right_only():
    assert list(merge_join_by([], [1, 2, 3], ordering)) == [
        Right(1),
        Right(2),
        Right(3),
    ]


def test_first_left_then_right():
    assert list(merge_join_by([1, 2, 3], [4, 5, 6], ordering)) == [
        Left(1),
        Left(2),
        Left(3),
        Right(4),
        Right(5),
        Right(6),
    ]


def test_first_right_then_left():
    assert list(merge_join_by([4, 5, 6], [1, 2, 3], ordering)) == [
        Right(1),
        Right(2),
        Right(3),
        Left(4),
        Left(5),
        Left(6),
    ]


def test_interspersed_left_and_right():
    assert list(merge_join_by([1, 3, 5], [2, 4, 6], ordering)) == [
        Left(1),
        Right(2),
        Left(3),
        Right(4),
        Left(5),
        Right(6),
    ]


def test_overlapping_left_and_right():
    assert list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], ordering)) == [
        Left(1),
        Right(2),
        Both(3, 3),
        Both(4, 4),
        Right(5),
        Left(6),
    ]


def test_left_and_right_are_distinct():
    assert Left(1) != Right(1)


def test_bool_comparison_never_joins():
    assert list(merge_join_by([1, 3], [3], operator.lt)) == [Left(1), Right(3), Left(3)]


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_equal_merge(a, b):
    a.sort()
    b.sort()
    assert list(merge(a, b)) == sorted(a + b)


def test_merge_is_stable():
    left = [(1, "a"), (2, "a")]
    right = [(1, "b"), (2, "b")]
    merged = list(merge_by(left, right, lambda l, r: l[0] <= r[0]))
    assert merged == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]


small = st.lists(st.integers(min_value=0, max_value=255))
evens = st.lists(st.integers(min_value=0, max_value=127).map(lambda x: 2 * x))
odds = st.lists(st.integers(min_value=0, max_value=127).map(lambda x: 2 * x + 1))


@given(evens, odds)
def test_merge_join_by_ordering_vs_bool(a, b):
    by_ordering = list(merge_join_by(a, b, ordering))
    by_bool = list(merge_join_by(a, b, operator.le))
    assert not any(isinstance(item, Both) for item in by_ordering)
    assert by_ordering == by_bool


@given(small, small)
def test_merge_join_by_bool_unwrapped_is_merge_by(a, b):
    expected = list(merge_by(a, b, operator.ge))
    joined = [item.value for item in merge_join_by(a, b, operator.ge)]
    assert joined == expected


@given(small, small)
def test_fused_merge(a, b):
    it = merge(Unfused(sorted(a)), Unfused(sorted(b)))
    assert list(it) == sorted(a + b)
    for _ in range(10):
        with pytest.raises(StopIteration):
            next(it)


@given(small, small)
def test_count_matches_length(a, b):
    expected = len(list(merge_join_by(a, b, ordering)))
    assert merge_join_by(a, b, ordering).count() == expected


@given(small, small)
def test_last_matches_final_item(a, b):
    items = list(merge_join_by(a, b, ordering))
    last = merge_join_by(a, b, ordering).last()
    assert last == (items[-1] if items else None)


@given(small, small, st.integers(min_value=0, max_value=600))
def test_nth_matches_indexing(a, b, n):
    items = list(merge(sorted(a), sorted(b)))
    expected = items[n] if n < len(items) else None
    assert merge(sorted(a), sorted(b)).nth(n) == expected


def test_nth_advances_iterator():
    it = merge_join_by([1, 3], [2, 3], ordering)
    assert it.nth(2) == Both(3, 3)
    assert it.nth(0) is None


def test_last_of_empty_is_none():
    assert merge([], []).last() is None