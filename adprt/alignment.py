"""Alignment answers made of two aligned rows, and trace helpers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Alignment:
    """A pair of aligned rows; equality looks at the rows only."""

    first: str = ""
    second: str = ""
    is_empty: bool = field(default=False, compare=False)

    @classmethod
    def empty(cls):
        return cls(is_empty=True)

    def __str__(self):
        return f"({self.first}, {self.second})"


def trace_pushback(a, x):
    """Prepend edit operation ``a`` to ``x`` in trace order.

    An insertion 'I' is moved behind any leading deletions 'D', so that
    Ins, Ins, Del becomes Del, Ins, Ins.
    """
    if a != "I":
        return a + x
    rest = x.lstrip("D")
    return x[: len(x) - len(rest)] + a + rest


def append_reverse(s, o):
    """Return ``s`` followed by ``o`` reversed."""
    return s + o[::-1]