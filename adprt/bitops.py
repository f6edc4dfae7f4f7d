"""Bit tricks and 32-bit string hash steps."""

DJB_INITIAL = 5381
SDBM_INITIAL = 0

_MASK32 = 0xFFFFFFFF


def _check(value, bits):
    if value < 0 or value >> bits:
        raise ValueError(f"{value} does not fit in {bits} bits")


def find_first_set(value):
    """Return the 1-based index of the lowest set bit, or 0 for zero."""
    if value < 0:
        raise ValueError("value must not be negative")
    return (value & -value).bit_length()


def count_leading_zeroes(value, bits=64):
    """Count the zero bits above the highest set bit of a ``bits`` wide word."""
    if not value:
        raise ValueError("value must not be zero")
    _check(value, bits)
    return bits - value.bit_length()


def size_to_next_power(value, bits=64):
    """Round ``value`` up to the next power of two."""
    if not value:
        raise ValueError("value must not be zero")
    if value > 1 << (bits - 1):
        raise ValueError("value is too large to round up")
    ret = 1 << (bits - 1 - count_leading_zeroes(value, bits))
    return 2 * ret if ret < value else ret


def _as_word(value, bits):
    if isinstance(value, str):
        value = ord(value)
    if bits == 8:
        value &= 0xFF
        if value >= 0x80:
            value -= 0x100
        return value & _MASK32
    return value & ((1 << bits) - 1)


def _djb(state, value):
    return ((state << 5) + state + value) & _MASK32


def _sdbm(state, value):
    return (value + (state << 6) + (state << 16) - state) & _MASK32


def djb_step(state, value, bits=32):
    """Feed one word of width 8, 32 or 64 bits into a djb hash state.

    An 8-bit value is taken as a signed character.
    """
    if bits not in (8, 32, 64):
        raise ValueError(f"unsupported width {bits}")
    value = _as_word(value, bits)
    if bits == 64:
        state = _djb(state, value & _MASK32)
        return _djb(state, (value >> 32) & _MASK32)
    return _djb(state, value)


def djb_slow_step(state, value):
    """Feed a 64-bit word into a djb hash state by multiplication."""
    value = _as_word(value, 64)
    state = (state * 33 + (value & _MASK32)) & _MASK32
    return (state * 33 + ((value >> 32) & _MASK32)) & _MASK32


def sdbm_step(state, value, bits=32):
    """Feed one word of width 8, 32 or 64 bits into an sdbm hash state."""
    if bits not in (8, 32, 64):
        raise ValueError(f"unsupported width {bits}")
    value = _as_word(value, bits)
    if bits == 64:
        state = _sdbm(state, value & _MASK32)
        return _sdbm(state, (value >> 32) & _MASK32)
    return _sdbm(state, value)