# adprt

Runtime building blocks for algebraic dynamic programming over sequences,
in pure Python with no third-party dependencies.

## Modules

- `adprt.sequence` – the `Sequence` class (indexable, with one or more text
  tracks reached through `row()` and `rows`) and parsers that build one:
  `parse_chars`, `parse_ints` (decimal, `0x` hex and `0` octal; raises
  `ValueError` on bad input), `parse_floats` (stops at the first
  out-of-range number) and `parse_multitrack` (`#`-separated rows of equal
  length, read column by column). Also `lower_case`, `upper_case` and
  `char_to_upper`.
- `adprt.empty` – the "empty" sentinel of each answer kind: `empty_of(kind)`,
  `is_empty(value)` and `is_not_empty(*values)`.
- `adprt.terminal` – terminal parsers over the subword `seq[i:j]`:
  `const_value`, `int_terminal`, `float_terminal`, `non_terminal`,
  `char_terminal`, `char_sep`, `empty_terminal`, `rope`, `rope0`,
  `seq_length` and `seq1_length`. A parser that does not match returns the
  empty sentinel of its result kind (`None` for `rope` with a pattern).
- `adprt.filters` – syntactic filters on a subword: `char_basepairing`,
  `minsize`, `maxsize`, `equal`, `accept_all`, `onlychar`, `samesize` and
  `complete_track`.
- `adprt.alignment` – the `Alignment` answer (two aligned rows), plus
  `trace_pushback`, which moves an insertion `I` behind leading deletions
  `D`, and `append_reverse`.
- `adprt.shape` – the `Shape` string (which may also be *missing*, via
  `Shape.empty()`) with `push_after_front`, `push_before_back`, `front`,
  `back` and `tail`.
- `adprt.rules` – `Rules`, grammar productions grouped by nonterminal
  together with a shape; `to_text()` renders them as grammar source.
  `merge`, `group_by_shape`, `match_string`, `rule_name_debug`, and
  `RuleNamer`, which hands out stable `auto_gen_rule_<n>` names.
- `adprt.pareto` – Pareto front maintenance: `nosort_add`, `nosort_merge`
  for unsorted fronts, and `join_2d_step`, `join_all_step`, `sorted_add`,
  `sorted_merge` for sorted ones.
- `adprt.yukish` – divide-and-conquer Pareto fronts: `dominates`, `marry`
  and `pareto_yukish`.
- `adprt.yukish_step` – merging two fronts with the same splitting scheme:
  `co_dominates`, `marry_base`, `co_marry`, `yukish_add` and
  `yukish_merge`.
- `adprt.bitops` – `find_first_set`, `count_leading_zeroes`,
  `size_to_next_power`, and 32-bit hash steps `djb_step`, `djb_slow_step`
  and `sdbm_step`.
- `adprt.cm_alph` – `CmAlph`, a 4-bit alphabet codec (`encode`, `decode`).
- `adprt.sample` – `RanDiscrete`: collect weights with `append`, call
  `prepare`, then draw indices with `sample` or weights with
  `sample_value`.
- `adprt.bench` – `Bench`: record named events with `add_event` and get a
  table of the time between them from `report()`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from adprt.sequence import parse_chars
from adprt.filters import char_basepairing
from adprt.terminal import rope

seq = parse_chars("gaaac")
char_basepairing(seq, 0, 5)   # True: 'g' pairs with 'c'
rope(seq, 1, 4)               # "aaa"
```

Pareto fronts are kept with a comparator `compare(a, b, i)` that returns a
positive number when `a` is better than `b` in dimension `i` (counted from
1), a negative number when it is worse and zero on a tie, and that carries
the number of dimensions as its `dim` attribute. The merge functions return
a new list and leave their arguments untouched:

```python
from adprt.pareto import nosort_merge

def compare(a, b, i):
    x, y = a[i - 1], b[i - 1]
    return (x > y) - (x < y)

compare.dim = 2
front = nosort_merge([(3, 1), (1, 3)], [(2, 2), (0, 0)], compare, False)
# front == [(3, 1), (1, 3), (2, 2)]
```

## What it does not do

`adprt` is a library only. It has no command-line program, does not read
grammars or algebras, and does not generate or run a complete dynamic
programming evaluator; it provides the pieces such an evaluator uses.