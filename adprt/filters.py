"""Syntactic filters that accept or reject a subword ``seq[i:j]``."""

from .sequence import lower_case

_BASE_PAIRS = frozenset(
    {
        ("a", "u"),
        ("a", "t"),
        ("u", "a"),
        ("u", "g"),
        ("t", "a"),
        ("g", "c"),
        ("g", "u"),
        ("c", "g"),
    }
)


def char_basepairing(seq, i, j):
    """Tell whether the first and last character of ``seq[i:j]`` can pair."""
    if j <= i + 1:
        return False
    return (lower_case(seq[i]), lower_case(seq[j - 1])) in _BASE_PAIRS


def minsize(seq, i, j, length):
    """Accept subwords of at least ``length`` characters."""
    return j - i >= length


def maxsize(seq, i, j, length):
    """Accept subwords of at most ``length`` characters."""
    return j - i <= length


def equal(seq, i, j):
    """Accept subwords whose first and last characters are the same."""
    if j <= i + 1:
        return False
    return seq[i] == seq[j - 1]


def accept_all(seq, i, j):
    """Accept every well-formed subword of ``seq``.

    Raises ``ValueError`` when ``i:j`` is not a region of the sequence.
    """
    if not 0 <= i <= j <= len(seq):
        raise ValueError(f"region {i}:{j} lies outside a sequence of {len(seq)}")
    return True


def onlychar(seq, i, j, x):
    """Accept subwords made only of the character ``x``."""
    if j < i:
        return False
    return all(seq[k] == x for k in range(i, j))


def samesize(seq, i1, j1, i2, j2):
    """Accept two regions of the same length."""
    if i1 > j1 or i2 > j2:
        raise ValueError("region start lies after its end")
    return j1 - i1 == j2 - i2


def complete_track(seq, i, j):
    """Accept only the empty subword at the very end of the sequence."""
    n = len(seq)
    return i == n and j == n