"""Sentinel "empty" values that mark a missing answer of a given kind."""

import math

INT_EMPTY = 2**31 - 1
CHAR_EMPTY = chr(ord("~") + 1)
FLOAT_EMPTY = math.inf

_SIMPLE_EMPTIES = {
    bool: False,
    int: INT_EMPTY,
    float: FLOAT_EMPTY,
    str: CHAR_EMPTY,
}


def empty_of(kind):
    """Return the empty sentinel for ``kind``.

    ``kind`` is ``bool``, ``int``, ``float``, ``str`` (a single character),
    a tuple of kinds (giving a tuple of sentinels) or a class offering an
    ``empty()`` class method.
    """
    if isinstance(kind, tuple):
        return tuple(empty_of(k) for k in kind)
    if kind in _SIMPLE_EMPTIES:
        return _SIMPLE_EMPTIES[kind]
    factory = getattr(kind, "empty", None)
    if callable(factory):
        return factory()
    raise TypeError(f"no empty value known for {kind!r}")


def is_empty(value):
    """Tell whether ``value`` is the empty sentinel of its kind."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, int):
        return value == INT_EMPTY
    if isinstance(value, float):
        return value == FLOAT_EMPTY
    if isinstance(value, str):
        return value == CHAR_EMPTY
    if isinstance(value, tuple):
        flags = [is_empty(part) for part in value]
        if any(flags) != all(flags):
            raise ValueError("tuple is only partly empty")
        return not flags or flags[0]
    marker = getattr(value, "is_empty", None)
    if callable(marker):
        return bool(marker())
    if marker is not None:
        return bool(marker)
    return value == 0


def is_not_empty(*args):
    """Return True when none of the given values is empty."""
    return not any(is_empty(arg) for arg in args)