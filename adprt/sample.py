"""Sampling an index from a discrete weight distribution."""

import bisect
import enum
import itertools
import math
import random


class _State(enum.Enum):
    CLEAR = enum.auto()
    PUSH = enum.auto()
    SAMPLE = enum.auto()


class RanDiscrete:
    """Collects weights, then draws indices with probability proportional to them."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._weights = []
        self._cumulative = []
        self._state = _State.CLEAR

    @property
    def weights(self):
        return tuple(self._weights)

    def clear(self):
        """Drop all weights and start collecting anew."""
        self._weights.clear()
        self._cumulative = []
        self._state = _State.CLEAR

    def append(self, weight):
        """Add one weight; only allowed before ``prepare``."""
        if self._state is _State.SAMPLE:
            raise RuntimeError("cannot add weights after prepare(); call clear()")
        self._state = _State.PUSH
        self._weights.append(weight)

    def prepare(self):
        """Fix the collected weights for sampling."""
        if self._state is not _State.PUSH:
            raise RuntimeError("prepare() needs freshly added weights")
        if any(w < 0 or not math.isfinite(w) for w in self._weights):
            raise ValueError("weights must be finite and not negative")
        cumulative = list(itertools.accumulate(self._weights))
        if cumulative[-1] <= 0:
            raise ValueError("weights must not all be zero")
        self._cumulative = cumulative
        self._state = _State.SAMPLE

    def sample(self):
        """Draw an index."""
        if self._state is not _State.SAMPLE:
            raise RuntimeError("sample() needs prepare() first")
        point = self._rng.random() * self._cumulative[-1]
        index = bisect.bisect_right(self._cumulative, point)
        return min(index, len(self._weights) - 1)

    def sample_value(self):
        """Draw an index and return its weight."""
        return self._weights[self.sample()]