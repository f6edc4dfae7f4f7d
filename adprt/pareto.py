"""Pareto front maintenance for multi-objective answer lists.

A comparator is a callable ``compare(a, b, i)`` that returns a positive
number when ``a`` is better than ``b`` in dimension ``i`` (counted from 1),
a negative number when it is worse and zero on a tie. It also carries the
number of dimensions as its ``dim`` attribute.

A sorter is a callable ``sorter(a, b)`` that tells whether ``a`` comes
before ``b`` in the sort order of a sorted front: best first in dimension 1,
ties broken by the later dimensions.

Every function returns a new answer list and leaves its arguments untouched.
"""


def _sign(value):
    return (value > 0) - (value < 0)


def _relation(answer, item, compare):
    """Return (better, less): whether ``answer`` beats / loses to ``item`` somewhere."""
    better = less = False
    for dimension in range(1, compare.dim + 1):
        result = _sign(compare(answer, item, dimension))
        if result > 0:
            better = True
        elif result < 0:
            less = True
        if better and less:
            break
    return better, less


def nosort_add(answers, item, compare, keep_equal=False):
    """Add ``item`` to an unsorted front.

    ``item`` is dropped if an answer dominates it (or equals it, unless
    ``keep_equal``); answers that ``item`` dominates are removed. A surviving
    ``item`` goes to the end.
    """
    answers = list(answers)
    kept = []
    for position, answer in enumerate(answers):
        better, less = _relation(answer, item, compare)
        if better and less:
            kept.append(answer)
        elif better or (not less and not keep_equal):
            return kept + answers[position:]
        elif less:
            continue
        else:
            kept.append(answer)
    kept.append(item)
    return kept


def nosort_merge(answers, inserts, compare, keep_equal=False):
    """Merge two unsorted fronts, inserting the shorter into the longer."""
    answers = list(answers)
    inserts = list(inserts)
    if not inserts:
        return answers
    if not answers:
        return inserts
    if len(answers) < len(inserts):
        answers, inserts = inserts, answers
    for item in inserts:
        answers = nosort_add(answers, item, compare, keep_equal)
    return answers


def _drop(reference, items, index, compare, keep_equal):
    """Skip the items from ``index`` on that ``reference`` beats in dimension 2."""
    while index < len(items):
        result = compare(reference, items[index], 2)
        if result > 0 or (result == 0 and not keep_equal):
            index += 1
        else:
            break
    return index


def join_2d_step(answers, inserts, compare, keep_equal=False):
    """Merge two sorted two-dimensional fronts into one sorted front."""
    answers = list(answers)
    inserts = list(inserts)
    merged = []
    a = i = 0
    while True:
        if i == len(inserts):
            merged.extend(answers[a:])
            break
        if a == len(answers):
            merged.extend(inserts[i:])
            break
        answer, item = answers[a], inserts[i]
        first = _sign(compare(answer, item, 1))
        second = _sign(compare(answer, item, 2))
        if first < 0:
            if second < 0:
                a = _drop(item, answers, a + 1, compare, keep_equal)
            elif second == 0:
                a += 1
            merged.append(item)
            i += 1
        elif first == 0:
            if second < 0:
                a = _drop(item, answers, a + 1, compare, keep_equal)
                merged.append(item)
                i += 1
            elif second == 0:
                merged.append(answer)
                if keep_equal:
                    merged.append(item)
                a += 1
                i += 1
            else:
                i = _drop(answer, inserts, i + 1, compare, keep_equal)
                merged.append(answer)
                a += 1
        else:
            if second == 0:
                i += 1
            elif second > 0:
                i = _drop(answer, inserts, i + 1, compare, keep_equal)
            merged.append(answer)
            a += 1
    return merged


def _all_equal(a, b, compare):
    return all(compare(a, b, d) == 0 for d in range(1, compare.dim + 1))


def _covered(candidate, front, compare):
    """Tell whether an earlier front member is at least as good from dimension 2 on."""
    return any(
        all(compare(candidate, member, d) <= 0 for d in range(2, compare.dim + 1))
        for member in front
    )


def join_all_step(answers, inserts, compare, sorter, keep_equal=False):
    """Merge two sorted fronts of any dimension into one sorted front."""
    answers = list(answers)
    inserts = list(inserts)
    merged = []
    a = i = 0
    while a < len(answers) or i < len(inserts):
        if i == len(inserts) or (a < len(answers) and sorter(answers[a], inserts[i])):
            candidate = answers[a]
            a += 1
        else:
            candidate = inserts[i]
            i += 1
        if not merged:
            merged.append(candidate)
            continue
        if keep_equal and _all_equal(candidate, merged[-1], compare):
            merged.append(candidate)
            continue
        if not _covered(candidate, merged, compare):
            merged.append(candidate)
    return merged


def sorted_add(answers, item, compare, sorter, keep_equal=False):
    """Add ``item`` to a sorted front, keeping it sorted."""
    answers = list(answers)
    if not answers:
        return [item]
    if compare.dim == 2:
        return join_2d_step(answers, [item], compare, keep_equal)
    return join_all_step(answers, [item], compare, sorter, keep_equal)


def sorted_merge(answers, inserts, compare, sorter, keep_equal=False):
    """Merge two sorted fronts, keeping the result sorted."""
    answers = list(answers)
    inserts = list(inserts)
    if not inserts:
        return answers
    if not answers:
        return inserts
    if compare.dim == 2:
        return join_2d_step(answers, inserts, compare, keep_equal)
    return join_all_step(answers, inserts, compare, sorter, keep_equal)