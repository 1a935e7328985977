import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.unzip import multiunzip


def test_doc_example():
    inputs = [(1, 2, 3), (4, 5, 6), (7, 8, 9)]
    a, b, c = multiunzip(inputs)
    assert a == [1, 4, 7]
    assert b == [2, 5, 8]
    assert c == [3, 6, 9]


@given(rows=st.lists(st.tuples(st.integers(), st.text(), st.booleans())))
def test_round_trip_with_zip(rows):
    columns = multiunzip(rows, 3)
    assert len(columns) == 3
    assert list(zip(*columns)) == rows


@given(rows=st.lists(st.tuples(st.integers(), st.integers()), min_size=1))
def test_arity_inferred_from_first_row(rows):
    assert multiunzip(iter(rows)) == multiunzip(rows, 2)


def test_empty_with_arity_gives_empty_lists():
    columns = multiunzip([], 2)
    assert len(columns) == 2
    assert all(column == [] for column in columns)


def test_empty_without_arity():
    assert multiunzip([]) == ()


def test_mismatched_length_raises():
    with pytest.raises(ValueError):
        multiunzip([(1, 2), (3, 4, 5)])


def test_wrong_arity_raises():
    with pytest.raises(ValueError):
        multiunzip([(1, 2)], 3)


def test_negative_arity_raises():
    with pytest.raises(ValueError):
        multiunzip([], -1)