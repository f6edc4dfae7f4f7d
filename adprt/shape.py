"""Shape strings: compact abstractions of structures, one character each.

A shape may be *missing* (the empty answer of a computation), which is
distinct from a shape that holds no characters.
"""


class Shape:
    """A growable string of shape characters."""

    def __init__(self, chars=""):
        self._chars = str(chars)

    @classmethod
    def empty(cls):
        """Return a missing shape."""
        shape = cls()
        shape._chars = None
        return shape

    @property
    def is_empty(self):
        """True for a missing shape."""
        return self._chars is None

    def append(self, x):
        """Append a character, a string of characters or another shape."""
        if isinstance(x, Shape):
            if x._chars is None:
                raise ValueError("cannot append a missing shape")
            text = x._chars
        else:
            text = str(x)
        self._chars = (self._chars or "") + text
        return self

    def copy(self):
        other = Shape()
        other._chars = self._chars
        return other

    def __iter__(self):
        return iter(self._chars or "")

    def __len__(self):
        return len(self._chars or "")

    def __eq__(self, other):
        if isinstance(other, str):
            return self._chars is not None and self._chars == other
        if not isinstance(other, Shape):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self):
        return hash(self._chars)

    def __lt__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        if self._chars is None or other._chars is None:
            raise ValueError("missing shapes cannot be ordered")
        return self._chars < other._chars

    def __str__(self):
        return self._chars or ""

    def __repr__(self):
        if self._chars is None:
            return "Shape.empty()"
        return f"Shape({self._chars!r})"

    def _operand(self, other):
        if isinstance(other, Shape):
            if other._chars is None:
                raise ValueError("cannot concatenate a missing shape")
            return other._chars
        if isinstance(other, str):
            return other
        return None

    def __add__(self, other):
        text = self._operand(other)
        if text is None:
            return NotImplemented
        if self._chars is None:
            raise ValueError("cannot concatenate a missing shape")
        return Shape(self._chars + text)

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        if self._chars is None:
            raise ValueError("cannot concatenate a missing shape")
        return Shape(other + self._chars)


def push_after_front(shape, c, d):
    """Return a new shape with ``d`` inserted after the leading run of ``c``."""
    text = str(shape)
    rest = text.lstrip(c)
    return Shape(text[: len(text) - len(rest)] + d + rest)


def push_before_back(shape, c, d):
    """Insert ``d`` before the trailing run of ``c`` in place and return ``shape``.

    Without a trailing ``c`` the character ``d`` is simply appended.
    """
    text = str(shape)
    head = text.rstrip(c)
    if len(head) == len(text):
        return shape.append(d)
    shape._chars = head + d + text[len(head):]
    return shape


def front(shape, default=None):
    """Return the first character, or ``default`` if there is none."""
    return next(iter(shape), default)


def tail(shape):
    """Return a new shape without the first character."""
    return Shape(str(shape)[1:])


def back(shape, default=None):
    """Return the last character, or ``default`` if there is none."""
    text = str(shape)
    return text[-1] if text else default