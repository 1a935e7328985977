from hypothesis import given
from hypothesis import strategies as st

from iteradapt.merge_join import Both, Left, Right
from iteradapt.zip_longest import zip_longest


def test_equal_lengths():
    assert list(zip_longest([1, 2], "ab")) == [Both(1, "a"), Both(2, "b")]


def test_left_longer():
    assert list(zip_longest([1, 2, 3], [9])) == [Both(1, 9), Left(2), Left(3)]


def test_right_longer():
    assert list(zip_longest([], [4, 5])) == [Right(4), Right(5)]


def test_both_empty():
    assert list(zip_longest([], [])) == []


def test_stays_exhausted():
    it = zip_longest([1], [])
    assert list(it) == [Left(1)]
    assert next(it, None) is None


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_size_2_zip_longest(a, b):
    items = list(zip_longest(a, b))
    assert len(items) == max(len(a), len(b))
    lefts = []
    rights = []
    for elt in items:
        match elt:
            case Both(x, y):
                lefts.append(x)
                rights.append(y)
            case Left(x):
                lefts.append(x)
            case Right(y):
                rights.append(y)
    assert lefts == a
    assert rights == b