from hypothesis import given
from hypothesis import strategies as st

from iteradapt.take_while_inclusive import TakeWhileInclusive, take_while_inclusive


def test_includes_first_failing_item():
    assert list(take_while_inclusive([1, 2, 3, 4, 5], lambda x: x < 3)) == [1, 2, 3]


def test_empty_source():
    assert list(take_while_inclusive([], lambda x: True)) == []


def test_source_not_read_past_failing_item():
    source = iter([1, 5, 2, 7])
    taken = list(TakeWhileInclusive(source, lambda x: x < 3))
    assert taken == [1, 5]
    assert next(source) == 2


@given(st.lists(st.integers()))
def test_always_true_takes_everything(xs):
    assert list(take_while_inclusive(xs, lambda x: True)) == xs


@given(st.lists(st.integers(min_value=-50, max_value=50)), st.integers(-50, 50))
def test_invariants(xs, limit):
    taken = list(take_while_inclusive(xs, lambda x: x < limit))
    assert taken == xs[: len(taken)]
    assert all(x < limit for x in taken[:-1])
    if len(taken) < len(xs):
        assert taken[-1] >= limit
    if taken and taken[-1] >= limit:
        assert all(x < limit for x in xs[: len(taken) - 1])


def test_stays_done():
    it = take_while_inclusive(iter([9, 1, 1]), lambda x: x < 3)
    assert next(it) == 9
    assert next(it, None) is None
    assert next(it, None) is None