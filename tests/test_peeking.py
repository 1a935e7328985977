import pytest

from iteradapt.multipeek import multipeek
from iteradapt.peek_nth import peek_nth
from iteradapt.peeking import peekable, peeking_take_while
from iteradapt.put_back_n import put_back_n


def _count(it):
    return sum(1 for _ in it)


def test_peeking_take_while_peekable():
    r = peekable(range(10))
    assert _count(peeking_take_while(r, lambda x: x <= 3)) == 4
    assert next(r) == 4


def test_peeking_take_while_put_back_n():
    r = put_back_n(range(6, 10))
    for elt in reversed(range(6)):
        r.put_back(elt)
    assert _count(peeking_take_while(r, lambda x: x <= 3)) == 4
    assert next(r) == 4
    assert _count(peeking_take_while(r, lambda _: True)) == 5
    assert next(r, None) is None


def test_peeking_take_while_list():
    r = peekable([1, 2, 3, 4, 5, 6])
    assert list(peeking_take_while(r, lambda x: x <= 3)) == [1, 2, 3]
    assert next(r) == 4
    _count(peeking_take_while(r, lambda _: True))
    assert next(r, None) is None


def test_peeking_take_while_reversed():
    r = peekable(reversed([1, 2, 3, 4, 5, 6]))
    assert list(peeking_take_while(r, lambda x: x >= 3)) == [6, 5, 4, 3]
    assert next(r) == 2
    _count(peeking_take_while(r, lambda _: True))
    assert next(r, None) is None


def test_peeking_take_while_nested():
    xs = peekable(range(10))
    inner = peeking_take_while(xs, lambda x: x < 6)
    ys = list(peeking_take_while(inner, lambda x: x != 3))
    assert ys == [0, 1, 2]
    assert next(xs) == 3

    xs = peekable(range(4, 10))
    inner = peeking_take_while(xs, lambda x: x != 3)
    ys = list(peeking_take_while(inner, lambda x: x < 6))
    assert ys == [4, 5]
    assert next(xs) == 6


def test_peeking_take_while_multipeek_and_peek_nth():
    mp = multipeek(range(10))
    assert list(peeking_take_while(mp, lambda x: x <= 3)) == [0, 1, 2, 3]
    assert next(mp) == 4
    pn = peek_nth("abcde")
    assert "".join(peeking_take_while(pn, lambda c: c < "c")) == "ab"
    assert next(pn) == "c"


def test_requires_peeking_iterator():
    with pytest.raises(TypeError):
        peeking_take_while(iter([1, 2]), lambda x: True)


def test_peeking_take_while_empty_peekable():
    r = peekable([])
    assert list(peeking_take_while(r, lambda _: True)) == []
    assert next(r, "end") == "end"


def test_peekable_peek():
    r = peekable([1, 2])
    assert r.peek() == 1
    assert r.peek() == 1
    assert next(r) == 1
    assert next(r) == 2
    assert r.peek("end") == "end"
    with pytest.raises(StopIteration):
        next(r)


def test_peekable_peeking_next_rejects():
    r = peekable([5])
    with pytest.raises(StopIteration):
        r.peeking_next(lambda x: x < 5)
    assert r.peeking_next(lambda x: x == 5) == 5