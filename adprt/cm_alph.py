"""Four-bit alphabet for packed alignment/structure strings."""

_CODES = {
    "M": 1,
    "D": 2,
    "I": 3,
    "l": 4,
    "L": 5,
    "r": 6,
    "R": 7,
    "P": 8,
    "K": 9,
}
_CHARS = {code: char for char, code in _CODES.items()}


class CmAlph:
    """Packs characters into a word, four bits per character."""

    char_width = 4

    def encode(self, word, char, pos):
        """Return ``word`` with ``char`` placed in the nibble ending at bit ``pos``."""
        try:
            code = _CODES[char]
        except KeyError:
            raise ValueError(f"character {char!r} is not in the alphabet") from None
        if pos < 3:
            raise ValueError("position must be at least 3")
        return word | code << (pos - 3)

    def decode(self, word, pos):
        """Return the character stored at bit ``pos``, or None if there is none."""
        return _CHARS.get((word >> pos) & 15)