import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adprt.sample import RanDiscrete


def make(weights, seed=0):
    dist = RanDiscrete(random.Random(seed))
    for weight in weights:
        dist.append(weight)
    dist.prepare()
    return dist


def test_single_positive_weight_is_always_drawn():
    dist = make([0, 3, 0])
    assert {dist.sample() for _ in range(200)} == {1}
    assert dist.sample_value() == 3


@given(
    st.lists(st.floats(0, 10), min_size=1, max_size=20).filter(lambda ws: sum(ws) > 0),
    st.integers(0, 1000),
)
def test_draws_hit_positive_weights(weights, seed):
    dist = make(weights, seed)
    for _ in range(20):
        index = dist.sample()
        assert 0 <= index < len(weights)
        assert weights[index] > 0


def test_frequencies_follow_weights():
    dist = make([1, 3], seed=1)
    draws = [dist.sample() for _ in range(4000)]
    share = draws.count(1) / len(draws)
    assert 0.7 < share < 0.8


def test_sample_before_prepare():
    dist = RanDiscrete(random.Random(0))
    dist.append(1.0)
    with pytest.raises(RuntimeError):
        dist.sample()


def test_prepare_without_weights():
    with pytest.raises(RuntimeError):
        RanDiscrete(random.Random(0)).prepare()


def test_append_after_prepare():
    dist = make([1.0])
    with pytest.raises(RuntimeError):
        dist.append(2.0)


def test_clear_allows_new_weights():
    dist = make([1.0, 0.0])
    dist.clear()
    assert dist.weights == ()
    dist.append(0.0)
    dist.append(5.0)
    dist.prepare()
    assert dist.sample() == 1
    assert dist.weights == (0.0, 5.0)


def test_negative_weight_rejected():
    dist = RanDiscrete(random.Random(0))
    dist.append(-1.0)
    with pytest.raises(ValueError):
        dist.prepare()


def test_all_zero_weights_rejected():
    dist = RanDiscrete(random.Random(0))
    dist.append(0.0)
    dist.append(0.0)
    with pytest.raises(ValueError):
        dist.prepare()