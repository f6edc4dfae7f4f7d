"""Divide-and-conquer Pareto front computation in the style of Yukish.

A comparator is a callable ``compare(a, b, i)`` that returns a positive
number when ``a`` is better than ``b`` in dimension ``i`` (counted from 1),
a negative number when it is worse and zero on a tie. The algorithm may ask
for a dimension one or two past ``dim`` when ``dim`` is small, so a
comparator should answer zero there.
"""

from functools import cmp_to_key
from typing import NamedTuple


class _Split(NamedTuple):
    depth: int
    unsplittable: bool
    start: int
    end: int

    @property
    def size(self):
        return self.end - self.start


def _check_blocksize(blocksize):
    if blocksize < 0:
        raise ValueError("blocksize must not be negative")


def _order_key(compare, s, dim):
    """Sort key putting better items first, dimension ``s`` deciding first."""

    def order(a, b):
        for d in range(s, dim + 1):
            result = compare(a, b, d)
            if result:
                return -1 if result > 0 else 1
        return 0

    return cmp_to_key(order)


def _first_or_tie(c1, c2, compare, s, dim):
    """Tell whether ``c1`` sorts before ``c2`` or ties with it on dimensions ``s``..``dim``."""
    for d in range(s, dim + 1):
        result = compare(c1, c2, d)
        if result:
            return result > 0
    return True


def dominates(c1, c2, compare, s, dim):
    """Tell whether ``c1`` is at least as good as ``c2`` in every dimension.

    ``s`` is accepted for call compatibility; dimensions 1 to ``dim`` are
    all checked.
    """
    return all(compare(c1, c2, d) >= 0 for d in range(1, dim + 1))


def _first_siblings(nodes):
    """Index of the first two neighbouring nodes of the same depth."""
    return next(
        k for k, (left, right) in enumerate(zip(nodes, nodes[1:])) if left[0] == right[0]
    )


def _median_split(items, part, compare, d):
    """Split a sorted range after the run of items equal to its middle one.

    Returns the worse part, the better part and the median that separates them.
    """
    mid = part.start + part.size // 2
    store = next(
        (k for k in range(mid, part.end) if compare(items[k], items[mid], d) != 0),
        part.end,
    )
    unsplittable = store == part.end
    median = items[store - 1] if unsplittable else items[store]
    depth = part.depth + 1
    worse = _Split(depth, unsplittable, store, part.end)
    better = _Split(depth, unsplittable, part.start, store)
    return worse, better, median


def _split_below(items, part, compare, d, median):
    """Split a sorted range where items become worse than ``median``."""
    store = next(
        (k for k in range(part.start, part.end) if compare(median, items[k], d) > 0),
        part.end,
    )
    unsplittable = store == part.end
    depth = part.depth + 1
    return (
        _Split(depth, unsplittable, store, part.end),
        _Split(depth, unsplittable, part.start, store),
    )


def _double_split(x, y, compare, d, blocksize):
    """Split sorted ``x`` and ``y`` side by side until the blocks are small."""
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
                worse_y, better_y = _split_below(y, py, compare, d, median)
                refined.append((worse_x, worse_y))
                refined.append((better_x, better_y))
                changed = True
            else:
                refined.append((px, py))
        pairs = refined
    return pairs


def _sorted_split(items, compare, blocksize):
    """Split items sorted by dimension 1 until the blocks are small."""
    splits = [_Split(1, False, 0, len(items))]
    changed = True
    while changed:
        changed = False
        refined = []
        for part in splits:
            if part.size > blocksize and not part.unsplittable:
                worse, better, _ = _median_split(items, part, compare, 1)
                refined.extend((worse, better))
                changed = True
            else:
                refined.append(part)
        splits = refined
    return splits


def _marry_2d(answers, x, y, compare, s, dim):
    """Keep the items of ``x`` that no item of ``y`` dominates, for two dimensions."""
    if not y:
        answers.extend(x)
        return
    sx = sy = ref = 0
    while sx < len(x) and compare(x[sx], y[0], s) > 0:
        answers.append(x[sx])
        sx += 1
    while sx < len(x):
        if sy + 1 < len(y) and _first_or_tie(y[sy + 1], x[sx], compare, s, dim):
            sy += 1
            if compare(y[sy], y[ref], dim) >= 0:
                ref = sy
        else:
            if compare(x[sx], y[ref], dim) > 0:
                answers.append(x[sx])
            sx += 1


def _marry_brute(x, y, compare, s, dim):
    return [item for item in x if not any(dominates(other, item, compare, s, dim) for other in y)]


def _brute_solve(items, compare, dim):
    """Pareto front of a block sorted by dimension 1, by pairwise checks."""
    answers = []
    for item in items:
        if not any(dominates(kept, item, compare, 2, dim) for kept in answers):
            answers.append(item)
    return answers


def marry(answers, x, y, compare, s, dim, blocksize):
    """Append to ``answers`` the items of ``x`` not dominated by any item of ``y``.

    ``x`` and ``y`` are lists; both are sorted in place on dimensions ``s``
    to ``dim``. Items of ``y`` are assumed at least as good as those of ``x``
    in the dimensions before ``s``. Returns ``answers``.
    """
    _check_blocksize(blocksize)
    key = _order_key(compare, s, dim)
    x.sort(key=key)
    y.sort(key=key)

    if dim - s == 1:
        _marry_2d(answers, x, y, compare, s, dim)
        return answers

    pairs = _double_split(x, y, compare, s, blocksize)
    nodes = [
        (px.depth, _marry_brute(x[px.start : px.end], y[py.start : py.end], compare, s, dim))
        for px, py in pairs
    ]
    y_parts = [y[py.start : py.end] for _, py in pairs]

    while len(nodes) > 1:
        k = _first_siblings(nodes)
        depth, worse = nodes[k]
        better = nodes[k + 1][1]
        merged = marry([], worse, y_parts[k + 1], compare, s + 1, dim, blocksize)
        merged.extend(better)
        nodes[k : k + 2] = [(depth - 1, merged)]
        y_parts[k : k + 2] = [y_parts[k + 1] + y_parts[k]]

    answers.extend(nodes[0][1])
    return answers


def pareto_yukish(items, compare, dim, blocksize):
    """Return the Pareto front of ``items``.

    ``items`` must be sorted best first in dimension 1. Blocks of at most
    ``blocksize`` items are solved pairwise and then joined. Equal items
    appear once in the front.
    """
    _check_blocksize(blocksize)
    items = list(items)
    nodes = [
        (part.depth, _brute_solve(items[part.start : part.end], compare, dim))
        for part in _sorted_split(items, compare, blocksize)
    ]
    while len(nodes) > 1:
        k = _first_siblings(nodes)
        depth, worse = nodes[k]
        better = nodes[k + 1][1]
        merged = marry([], worse, better, compare, 2, dim, blocksize)
        merged.extend(better)
        nodes[k : k + 2] = [(depth - 1, merged)]
    return nodes[0][1]