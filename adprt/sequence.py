"""Input sequences and the parsers that build them from text."""

import math
import re

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_SPACE_CHARS = " \t\n\v\f\r"

_FLOAT_PREFIX = re.compile(
    r"""[+-]?(?:
        0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | infinity | inf
      | nan(?:\([0-9A-Za-z_]*\))?
    )""",
    re.VERBOSE | re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class Sequence:
    """An indexable input sequence with one or more text tracks."""

    def __init__(self, items=(), tracks=None):
        self._items = items if isinstance(items, str) else tuple(items)
        self._default_track = tracks is None
        self._tracks = (self._items,) if tracks is None else tuple(tracks)
        if not self._tracks:
            raise ValueError("a sequence needs at least one track")

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._items[index]
        if not 0 <= index < len(self._items):
            raise IndexError(f"position {index} outside sequence of {len(self._items)}")
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._items == other._items and self._tracks == other._tracks

    def __repr__(self):
        return f"Sequence({self._items!r}, tracks={self._tracks!r})"

    @property
    def items(self):
        return self._items

    @property
    def rows(self):
        """Number of tracks."""
        return len(self._tracks)

    def row(self, index):
        """Return track ``index`` as given in the input."""
        if not 0 <= index < len(self._tracks):
            raise IndexError(f"track {index} outside {len(self._tracks)} tracks")
        return self._tracks[index]


def _tokens(text):
    """Split like repeated stream extraction; also report a final failed read."""
    text = text.split("\0", 1)[0]
    tokens = [t for t in _WHITESPACE.split(text) if t]
    trailing_failure = not text or text[-1] in _SPACE_CHARS
    return tokens, trailing_failure


def _strtod(token):
    """Parse the longest float prefix; return (value, range_error)."""
    match = _FLOAT_PREFIX.match(token)
    if not match:
        return 0.0, False
    text = match.group()
    body = text.lstrip("+-").lower()
    if body.startswith("nan"):
        return float("nan"), False
    if body.startswith("inf"):
        return float(text[: len(text) - len(body)] + "inf"), False
    if body.startswith("0x"):
        mantissa = body[2:].split("p", 1)[0]
        try:
            value = float.fromhex(text)
        except OverflowError:
            return math.inf, True
    else:
        mantissa = body.split("e", 1)[0]
        value = float(text)
    if math.isinf(value):
        return value, True
    if value == 0.0 and any(ch not in "0." for ch in mantissa):
        return value, True
    return value, False


def _strtol(token):
    """Parse the longest integer prefix in base 0; return (value, range_error)."""
    match = _INT_PREFIX.match(token)
    if not match:
        return 0, False
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    if sign == "-":
        value = -value
    return value, not _LONG_MIN <= value <= _LONG_MAX


def parse_chars(text):
    """Build a character sequence from ``text``."""
    return Sequence(text)


def parse_floats(text):
    """Parse whitespace separated numbers, stopping at the first out-of-range one."""
    tokens, _ = _tokens(text)
    values = []
    for token in tokens:
        value, range_error = _strtod(token)
        if range_error:
            break
        values.append(value)
    return Sequence(values)


def parse_ints(text):
    """Parse whitespace separated integers (decimal, 0x hex or 0 octal)."""
    tokens, trailing_failure = _tokens(text)
    values = []
    for token in tokens:
        value, range_error = _strtol(token)
        if range_error:
            raise ValueError("Int convert error.")
        values.append((value + 2**31) % 2**32 - 2**31)
    if trailing_failure:
        raise ValueError("Int input error.")
    return Sequence(values)


def parse_multitrack(text):
    """Parse '#'-separated rows of equal length into a column sequence."""
    rows = 1
    row_size = 0
    count = 0
    for ch in text:
        if ch == "#":
            rows += 1
            if not row_size:
                row_size = count
            elif row_size != count - 1:
                raise ValueError("Row sizes mismatch.")
            count = 0
        count += 1
    if not row_size and count:
        row_size = count
    if text.endswith("#"):
        rows -= 1
    stride = row_size + 1
    if row_size and (rows - 1) * stride + row_size > len(text):
        raise ValueError("Row sizes mismatch.")
    tracks = tuple(text[r * stride : r * stride + row_size] for r in range(rows))
    columns = ["".join(track[i] for track in tracks) for i in range(row_size)]
    return Sequence(columns, tracks)


def lower_case(c):
    """Lower-case a single character, leaving '_' and '+' alone."""
    if c in "_+":
        return c
    if c < "a":
        return chr(ord(c) + (ord("a") - ord("A")))
    return c


def upper_case(c):
    """Upper-case a single character, leaving '_' and '+' alone."""
    if c in "_+":
        return c
    if c >= "a":
        return chr(ord(c) - (ord("a") - ord("A")))
    return c


def _ascii_upper(text):
    return "".join(ch.upper() if "a" <= ch <= "z" else ch for ch in text)


def char_to_upper(seq):
    """Return a copy of ``seq`` with its ASCII letters upper-cased."""
    items = seq.items
    if isinstance(items, str):
        upper = _ascii_upper(items)
    else:
        upper = [_ascii_upper(x) if isinstance(x, str) else x for x in items]
    if seq._default_track:
        return Sequence(upper)
    return Sequence(upper, [seq.row(i) for i in range(seq.rows)])