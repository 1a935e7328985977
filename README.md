# iteradapt

Lazy iterator adaptors and sources for Python, with no third-party
dependencies.

Every adaptor accepts any iterable and produces its results on demand. Most
read their input one item at a time; the exceptions are
`circular_tuple_windows` and `multiunzip`, which read the whole input, and the
`count()` methods, which consume what is left.

## Installation

```
pip install iteradapt
```

## What is included

| Module | Names |
| --- | --- |
| `iteradapt.merge_join` | `merge`, `merge_by`, `merge_join_by`, `MergeBy`, `EitherOrBoth` (`Left`, `Right`, `Both`) |
| `iteradapt.minmax` | `minmax`, `minmax_by`, `MinMaxResult` (`NoElements`, `OneElement`, `MinMax`) |
| `iteradapt.multipeek` | `multipeek`, `MultiPeek` |
| `iteradapt.peek_nth` | `peek_nth`, `PeekNth` |
| `iteradapt.peeking` | `peekable`, `Peekable`, `peeking_take_while`, `PeekingTakeWhile`, `PeekingNext` |
| `iteradapt.put_back_n` | `put_back_n`, `PutBackN` |
| `iteradapt.pad_tail` | `pad_using`, `PadUsing` |
| `iteradapt.permutations` | `permutations`, `Permutations` |
| `iteradapt.powerset` | `powerset`, `Powerset` |
| `iteradapt.process_results` | `process_results`, `ProcessResults` |
| `iteradapt.rciter` | `rciter`, `RcIter` |
| `iteradapt.repeatn` | `repeat_n`, `RepeatN` |
| `iteradapt.sources` | `repeat_call`, `unfold`, `iterate`, `RepeatCall`, `Unfold`, `Iterate` |
| `iteradapt.take_while_inclusive` | `take_while_inclusive`, `TakeWhileInclusive` |
| `iteradapt.tee` | `tee`, `Tee` |
| `iteradapt.tuples` | `tuples`, `tuple_windows`, `circular_tuple_windows`, `Tuples`, `TupleWindows`, `CircularTupleWindows`, `TupleBuffer` |
| `iteradapt.unique` | `unique`, `unique_by`, `UniqueBy` |
| `iteradapt.unzip` | `multiunzip` |
| `iteradapt.with_position` | `with_position`, `WithPosition`, `Position` |
| `iteradapt.zip_eq` | `zip_eq` |
| `iteradapt.zip_longest` | `zip_longest` |
| `iteradapt.multizip` | `multizip` |
| `iteradapt.size_hint` | `add`, `add_scalar`, `sub_scalar`, `mul`, `mul_scalar`, `max_hint`, `min_hint` on `(lower, upper)` pairs |

## Conventions

- Peek methods (`peek`, `peek_nth`, `next_if`, `next_if_eq`) return a
  `default` argument, `None` unless given, when there is nothing to return.
- `peeking_next(accept)` returns the next item if `accept(item)` is true and
  otherwise raises `StopIteration`, leaving the item in place. `Peekable`,
  `MultiPeek`, `PeekNth`, `PutBackN` and `PeekingTakeWhile` provide it, and
  `peeking_take_while` accepts any of them.
- `zip_eq` raises `ValueError` when one input ends before the other.
- `process_results` treats an `Exception` instance produced by the source, or
  an `Exception` raised while reading it, as an error. It stops there and
  raises that error after the processor returns.
- `merge_join_by` takes a comparison that returns an integer, giving `Left`,
  `Right` or `Both`, or a `bool`, giving only `Left` (for `True`) or `Right`.

## Examples

Merge-join two sorted sequences:

```python
from iteradapt.merge_join import merge_join_by

pairs = list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], lambda l, r: (l > r) - (l < r)))
# [Left(value=1), Right(value=2), Both(left=3, right=3),
#  Both(left=4, right=4), Right(value=5), Left(value=6)]
```

Look further ahead than the next item:

```python
from iteradapt.peek_nth import peek_nth

it = peek_nth([1, 2, 3])
it.peek_nth(0)   # 1
next(it)         # 1
it.peek_nth(1)   # 3
```

Take items while a condition holds, without losing the first one that fails:

```python
from iteradapt.peeking import peekable, peeking_take_while

numbers = peekable(range(10))
small = list(peeking_take_while(numbers, lambda x: x <= 3))   # [0, 1, 2, 3]
next(numbers)                                                 # 4
```

Lazy permutations, in lexicographic order of positions:

```python
from iteradapt.permutations import permutations

list(permutations(range(3), 2))
# [[0, 1], [0, 2], [1, 0], [1, 2], [2, 0], [2, 1]]
```

Fixed-size tuples and windows:

```python
from iteradapt.tuples import tuples, tuple_windows, circular_tuple_windows

list(tuples(range(5), 3))                   # [(0, 1, 2)]
list(tuple_windows([1, 2, 3, 4], 2))        # [(1, 2), (2, 3), (3, 4)]
list(circular_tuple_windows([1, 2, 3], 2))  # [(1, 2), (2, 3), (3, 1)]
```

Minimum and maximum in one pass:

```python
from iteradapt.minmax import minmax

minmax([3, 1, 4, 1, 5]).into_option()   # (1, 5)
```

Sources:

```python
from itertools import islice
from iteradapt.sources import iterate

list(islice(iterate(1, lambda i: i * 3), 5))   # [1, 3, 9, 27, 81]
```

## What it does not do

The iterators do not report size estimates of their own; `iteradapt.size_hint`
only provides the arithmetic on `(lower, upper)` pairs. Iterators cannot be
run backwards. There is no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```