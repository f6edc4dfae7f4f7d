"""Terminal parsers that read a value from the subword ``seq[i:j]``.

A parser that does not match returns the empty sentinel of its result kind;
an empty text result is ``None``.
"""

import math

from .empty import CHAR_EMPTY, FLOAT_EMPTY, INT_EMPTY, empty_of

_SEPARATOR = "$"


def _require(condition, message):
    if not condition:
        raise ValueError(message)


def const_value(seq, i, j, value):
    """Yield ``value`` on the empty subword."""
    _require(i == j, "a constant terminal needs an empty subword")
    return value


def _is_digit(c):
    return isinstance(c, str) and "0" <= c <= "9"


def int_terminal(seq, i, j):
    """Read a non-empty run of decimal digits as an integer."""
    _require(i < j, "an integer terminal needs a non-empty subword")
    result = 0
    for c in seq[i:j]:
        if not _is_digit(c):
            return INT_EMPTY
        result = result * 10 + ord(c) - ord("0")
    return result


def float_terminal(seq, i, j):
    """Read digits with an optional decimal point as a float."""
    _require(i < j, "a float terminal needs a non-empty subword")
    result = 0.0
    seen_point = False
    exponent = 0
    for c in seq[i:j]:
        if c == ".":
            seen_point = True
            continue
        if not _is_digit(c):
            return FLOAT_EMPTY
        if seen_point:
            exponent += 1
        result = result * 10 + (ord(c) - ord("0"))
    return result / 10**exponent


def non_terminal(seq, i, j):
    """Yield a NaN element; any other element gives the empty float."""
    _require(i + 1 == j, "a single element is needed")
    value = float(seq[i])
    if math.isnan(value):
        return value
    return FLOAT_EMPTY


def char_terminal(seq, i, j, c=None):
    """Read one element, optionally only if it equals ``c``."""
    _require(i + 1 == j, "a single element is needed")
    item = seq[i]
    if c is None or item == c:
        return item
    return empty_of(type(item))


def char_sep(seq, i, j):
    """Read one element unless it is the '$' separator."""
    _require(i + 1 == j, "a single element is needed")
    item = seq[i]
    if isinstance(item, str) and item == _SEPARATOR:
        return CHAR_EMPTY
    return item


def empty_terminal(seq, i, j):
    """Accept only the empty subword."""
    return i == j


def rope(seq, i, j, pattern=None):
    """Return the subword as text, optionally only if it equals ``pattern``."""
    if pattern is None:
        _require(i < j, "a rope terminal needs a non-empty subword")
        return "".join(seq[i:j])
    _require(i + len(pattern) == j, "subword length must match the pattern")
    text = "".join(seq[i:j])
    if text != pattern:
        return None
    return text


def rope0(seq, i, j):
    """Return the possibly empty subword as text."""
    _require(i <= j, "subword start lies after its end")
    return "".join(seq[i:j])


def seq_length(seq, i, j):
    """Return the length of a possibly empty subword."""
    _require(i <= j, "subword start lies after its end")
    return j - i


def seq1_length(seq, i, j):
    """Return the length of a non-empty subword."""
    _require(i < j, "a non-empty subword is needed")
    return j - i