"""Merging two Pareto fronts step by step with Yukish style splitting.

A comparator is a callable ``compare(a, b, i)`` that returns a positive
number when ``a`` is better than ``b`` in dimension ``i`` (counted from 1),
a negative number when it is worse and zero on a tie. It carries the
number of dimensions as its ``dim`` attribute. For a single dimension the
algorithm may ask for dimension 2, so a comparator should answer zero there.

A sorter is a callable ``sorter(a, b)`` that tells whether ``a`` comes
before ``b`` in the full sort order: best first in dimension 1, ties broken
by the later dimensions.
"""

from functools import cmp_to_key

from .pareto import nosort_add
from .yukish import (
    _Split,
    _check_blocksize,
    _first_siblings,
    _marry_2d,
    _median_split,
    _order_key,
    _split_below,
)


def _sign(value):
    return (value > 0) - (value < 0)


def _dominates(c1, c2, compare, s, dim):
    """Tell whether ``c1`` is at least as good as ``c2`` in dimensions ``s``..``dim``."""
    return all(compare(c1, c2, d) >= 0 for d in range(s, dim + 1))


def co_dominates(c1, c2, compare, s, dim):
    """Tell whether ``c1`` is at least as good as ``c2`` in dimensions ``s``..``dim``
    and strictly better in at least one of them."""
    strictly = False
    for d in range(s, dim + 1):
        result = _sign(compare(c1, c2, d))
        if result < 0:
            return False
        if result > 0:
            strictly = True
    return strictly


def _sort_key(compare, sorter, s, dim):
    """Key for the full sorter when ``s`` is 1, else for dimensions ``s``..``dim``."""
    if s != 1:
        return _order_key(compare, s, dim)

    def order(a, b):
        if sorter(a, b):
            return -1
        if sorter(b, a):
            return 1
        return 0

    return cmp_to_key(order)


def _split_not_better(items, part, compare, d, median):
    """Split a sorted range where items stop being strictly better than ``median``."""
    store = next(
        (k for k in range(part.start, part.end) if compare(median, items[k], d) >= 0),
        part.end,
    )
    unsplittable = store == part.end
    depth = part.depth + 1
    return (
        _Split(depth, unsplittable, store, part.end),
        _Split(depth, unsplittable, part.start, store),
    )


def _double_split(x, y, compare, d, blocksize, equal_to_same):
    """Split sorted ``x`` and ``y`` side by side until the blocks are small.

    With ``equal_to_same`` the better part of ``y`` holds only items strictly
    better than the median, so items equal in dimension ``d`` meet in the
    same block.
    """
    pairs = [(_Split(1, False, 0, len(x)), _Split(1, False, 0, len(y)))]
    changed = True
    while changed:
        changed = False
        refined = []
        for px, py in pairs:
            if (
                px.size > blocksize
                and py.size > blocksize
                and not px.unsplittable
                and not py.unsplittable
            ):
                worse_x, better_x, median = _median_split(x, px, compare, d)
                if equal_to_same and not better_x.unsplittable:
                    worse_y, better_y = _split_not_better(y, py, compare, d, median)
                else:
                    worse_y, better_y = _split_below(y, py, compare, d, median)
                refined.append((worse_x, worse_y))
                refined.append((better_x, better_y))
                changed = True
            else:
                refined.append((px, py))
        pairs = refined
    return pairs


def _marry_brute(x, y, compare, s, dim, keep_equal):
    """Keep the items of ``x`` that no item of ``y`` beats, by pairwise checks."""
    beats = co_dominates if keep_equal else _dominates
    return [item for item in x if not any(beats(other, item, compare, s, dim) for other in y)]


def marry_base(answers, x, y, compare, sorter, s, dim, blocksize):
    """Append to ``answers`` the items of ``x`` that no item of ``y`` dominates.

    Domination is checked on dimensions ``s`` to ``dim`` and equal items count
    as dominated. ``x`` and ``y`` are lists sorted in place. Returns ``answers``.
    """
    _check_blocksize(blocksize)
    key = _sort_key(compare, sorter, s, dim)
    x.sort(key=key)
    y.sort(key=key)

    if dim - s == 1:
        _marry_2d(answers, x, y, compare, s, dim)
        return answers

    pairs = _double_split(x, y, compare, s, blocksize, False)
    nodes = [
        (
            px.depth,
            _marry_brute(x[px.start : px.end], y[py.start : py.end], compare, s, dim, False),
        )
        for px, py in pairs
    ]
    y_parts = [y[py.start : py.end] for _, py in pairs]

    while len(nodes) > 1:
        k = _first_siblings(nodes)
        depth, worse = nodes[k]
        better = nodes[k + 1][1]
        merged = marry_base([], worse, y_parts[k + 1], compare, sorter, s + 1, dim, blocksize)
        merged.extend(better)
        nodes[k : k + 2] = [(depth - 1, merged)]
        y_parts[k : k + 2] = [y_parts[k + 1] + y_parts[k]]

    answers.extend(nodes[0][1])
    return answers


def co_marry(x, y, compare, sorter, dim, blocksize, keep_equal=False):
    """Filter two fronts against each other.

    Returns the items of ``x`` that ``y`` does not beat and the items of ``y``
    that the surviving items of ``x`` do not beat. Without ``keep_equal`` an
    item beats an equal one; with it only a strictly better item does.
    The given lists are left untouched.
    """
    _check_blocksize(blocksize)
    key = _sort_key(compare, sorter, 1, dim)
    x = sorted(x, key=key)
    y = sorted(y, key=key)

    pairs = _double_split(x, y, compare, 1, blocksize, True)
    nodes_x = []
    nodes_y = []
    for px, py in pairs:
        part_y = y[py.start : py.end]
        kept_x = _marry_brute(x[px.start : px.end], part_y, compare, 1, dim, keep_equal)
        kept_y = _marry_brute(part_y, kept_x, compare, 1, dim, keep_equal)
        nodes_x.append((px.depth, kept_x))
        nodes_y.append(kept_y)

    while len(nodes_x) > 1:
        k = _first_siblings(nodes_x)
        depth, worse_x = nodes_x[k]
        better_x = nodes_x[k + 1][1]
        worse_y, better_y = nodes_y[k], nodes_y[k + 1]

        merged_x = marry_base([], worse_x, better_y, compare, sorter, 1, dim, blocksize)
        merged_x.extend(better_x)
        merged_y = marry_base([], worse_y, better_x, compare, sorter, 1, dim, blocksize)
        merged_y.extend(better_y)

        nodes_x[k : k + 2] = [(depth - 1, merged_x)]
        nodes_y[k : k + 2] = [merged_y]

    return nodes_x[0][1], nodes_y[0]


def yukish_add(answers, item, compare, sorter, keep_equal=False):
    """Add one ``item`` to an unsorted front and return the new front."""
    return nosort_add(answers, item, compare, keep_equal)


def yukish_merge(answers, inserts, compare, sorter, keep_equal, cutoff):
    """Merge two fronts; blocks of at most ``cutoff`` items are solved pairwise."""
    answers = list(answers)
    inserts = list(inserts)
    if not inserts:
        return answers
    if not answers:
        return inserts
    if len(inserts) == 1:
        return yukish_add(answers, inserts[0], compare, sorter, keep_equal)
    kept_x, kept_y = co_marry(
        answers, inserts, compare, sorter, compare.dim, cutoff, keep_equal
    )
    return kept_x + kept_y