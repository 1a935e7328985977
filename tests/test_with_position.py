from hypothesis import given
from hypothesis import strategies as st

from iteradapt.with_position import Position, with_position


def test_empty():
    assert list(with_position([])) == []


def test_single_item_is_only():
    assert list(with_position(["a"])) == [(Position.ONLY, "a")]


def test_two_items():
    assert list(with_position([1, 2])) == [(Position.FIRST, 1), (Position.LAST, 2)]


def test_several_items():
    assert list(with_position("abcd")) == [
        (Position.FIRST, "a"),
        (Position.MIDDLE, "b"),
        (Position.MIDDLE, "c"),
        (Position.LAST, "d"),
    ]


def test_stays_exhausted():
    it = with_position([1])
    assert list(it) == [(Position.ONLY, 1)]
    assert next(it, None) is None
    assert next(it, None) is None


def test_works_on_generators():
    gen = (x * 2 for x in range(3))
    assert [p for p, _ in with_position(gen)] == [
        Position.FIRST,
        Position.MIDDLE,
        Position.LAST,
    ]


@given(st.lists(st.integers()))
def test_items_preserved_and_positions_consistent(values):
    result = list(with_position(values))
    assert [item for _, item in result] == values
    positions = [p for p, _ in result]
    if len(values) == 1:
        assert positions == [Position.ONLY]
    elif values:
        assert positions[0] is Position.FIRST
        assert positions[-1] is Position.LAST
        assert all(p is Position.MIDDLE for p in positions[1:-1])