import pytest
from hypothesis import given
from hypothesis import strategies as st

from adprt.empty import empty_of, is_empty
from adprt.shape import (
    Shape,
    back,
    front,
    push_after_front,
    push_before_back,
    tail,
)

shape_text = st.text(alphabet="[]_", max_size=30)


@given(shape_text)
def test_round_trip(text):
    shape = Shape(text)
    assert str(shape) == text
    assert list(shape) == list(text)
    assert len(shape) == len(text)


@given(shape_text, shape_text)
def test_append_concatenates(a, b):
    shape = Shape(a)
    shape.append(Shape(b))
    assert str(shape) == a + b
    assert Shape(a) + Shape(b) == Shape(a + b)
    assert a + Shape(b) == Shape(a + b)


def test_missing_shape_is_empty_sentinel():
    missing = empty_of(Shape)
    assert is_empty(missing)
    assert not is_empty(Shape(""))
    assert missing == Shape.empty()
    assert missing != Shape("")


def test_append_to_missing_makes_it_present():
    shape = Shape.empty()
    shape.append("[")
    assert not shape.is_empty
    assert str(shape) == "["


def test_missing_shape_cannot_be_added():
    with pytest.raises(ValueError):
        Shape("[]") + Shape.empty()
    with pytest.raises(ValueError):
        Shape.empty() + Shape("[]")
    with pytest.raises(ValueError):
        Shape("[]").append(Shape.empty())


def test_ordering_rules():
    assert Shape("") < Shape("[")
    assert not Shape("") < Shape("")
    with pytest.raises(ValueError):
        Shape.empty() < Shape("[")


def test_equality_with_char():
    assert Shape("_") == "_"
    assert Shape("__") != "_"
    assert Shape.empty() != "_"


@given(shape_text)
def test_push_after_front_inserts_once(text):
    result = push_after_front(Shape(text), "_", "[")
    assert len(result) == len(text) + 1
    index = len(text) - len(text.lstrip("_"))
    assert str(result)[index] == "["
    assert str(result)[:index] + str(result)[index + 1:] == text


def test_push_before_back_single_char():
    shape = Shape("_")
    assert str(push_before_back(shape, "_", "]")) == "]_"


@given(shape_text)
def test_push_before_back_inserts_before_trailing_run(text):
    shape = Shape(text)
    result = push_before_back(shape, "_", "]")
    assert result is shape
    out = str(result)
    assert len(out) == len(text) + 1
    run = len(text) - len(text.rstrip("_"))
    index = len(out) - 1 - run
    assert out[index] == "]"
    assert out[:index] + out[index + 1:] == text


def test_front_back_tail():
    shape = Shape("[_]")
    assert front(shape) == "["
    assert back(shape) == "]"
    assert tail(shape) == Shape("_]")
    assert front(Shape(""), "x") == "x"
    assert back(Shape(""), "x") == "x"
    assert tail(Shape("")) == Shape("")


@given(shape_text)
def test_equal_shapes_hash_equal(text):
    assert hash(Shape(text)) == hash(Shape(text))
    assert len({Shape(text), Shape(text)}) == 1