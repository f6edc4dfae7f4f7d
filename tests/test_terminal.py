import math

import pytest

from adprt.empty import CHAR_EMPTY, FLOAT_EMPTY, INT_EMPTY, is_empty
from adprt.sequence import Sequence, parse_chars
from adprt.terminal import (
    char_sep,
    char_terminal,
    const_value,
    empty_terminal,
    float_terminal,
    int_terminal,
    non_terminal,
    rope,
    rope0,
    seq1_length,
    seq_length,
)


def test_const_value_on_empty_subword():
    seq = parse_chars("abc")
    assert const_value(seq, 1, 1, 42) == 42


def test_const_value_rejects_nonempty():
    with pytest.raises(ValueError):
        const_value(parse_chars("abc"), 0, 1, 42)


def test_int_terminal_reads_digits():
    seq = parse_chars("x123y")
    assert int_terminal(seq, 1, 4) == 123


def test_int_terminal_non_digit_is_empty():
    seq = parse_chars("12a")
    assert int_terminal(seq, 0, 3) == INT_EMPTY
    assert is_empty(int_terminal(seq, 0, 3))


def test_int_terminal_needs_characters():
    with pytest.raises(ValueError):
        int_terminal(parse_chars("1"), 0, 0)


def test_float_terminal_reads_decimal():
    seq = parse_chars("12.5")
    assert float_terminal(seq, 0, 4) == pytest.approx(12.5)


def test_float_terminal_without_point():
    assert float_terminal(parse_chars("7"), 0, 1) == 7.0


def test_float_terminal_bad_character_is_empty():
    assert float_terminal(parse_chars("1-2"), 0, 3) == FLOAT_EMPTY


def test_non_terminal():
    seq = Sequence([1.5, float("nan")])
    assert non_terminal(seq, 0, 1) == FLOAT_EMPTY
    assert math.isnan(non_terminal(seq, 1, 2))


def test_char_terminal():
    seq = parse_chars("ab")
    assert char_terminal(seq, 0, 1) == "a"
    assert char_terminal(seq, 1, 2, "b") == "b"
    assert char_terminal(seq, 1, 2, "a") == CHAR_EMPTY


def test_char_terminal_float_mismatch_is_infinite():
    seq = Sequence([1.0, 2.0])
    assert char_terminal(seq, 0, 1, 2.0) == math.inf


def test_char_terminal_needs_single_element():
    with pytest.raises(ValueError):
        char_terminal(parse_chars("ab"), 0, 2)


def test_char_sep():
    seq = parse_chars("a$")
    assert char_sep(seq, 0, 1) == "a"
    assert char_sep(seq, 1, 2) == CHAR_EMPTY


def test_empty_terminal():
    seq = parse_chars("ab")
    assert empty_terminal(seq, 1, 1) is True
    assert empty_terminal(seq, 0, 1) is False


def test_rope_returns_subword():
    seq = parse_chars("hello")
    assert rope(seq, 1, 4) == "ell"


def test_rope_with_pattern():
    seq = parse_chars("stefan")
    assert rope(seq, 0, 6, "stefan") == "stefan"
    assert rope(seq, 0, 6, "stefon") is None
    assert is_empty(rope(seq, 0, 6, "stefon"))


def test_rope_pattern_length_mismatch():
    with pytest.raises(ValueError):
        rope(parse_chars("abc"), 0, 3, "ab")


def test_rope0_accepts_empty():
    seq = parse_chars("abc")
    assert rope0(seq, 2, 2) == ""
    assert rope0(seq, 0, 3) == "abc"


def test_lengths():
    seq = parse_chars("abcdef")
    assert seq_length(seq, 2, 2) == 0
    assert seq_length(seq, 1, 4) == 3
    assert seq1_length(seq, 1, 4) == 3
    with pytest.raises(ValueError):
        seq1_length(seq, 2, 2)
    with pytest.raises(ValueError):
        seq_length(seq, 3, 2)