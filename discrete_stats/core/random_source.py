"""Uniform random sources for the sampling layer.

Every sampler draws from a ``RandomSource``: a single ``next_uniform()``
method returning a float in [0, 1). The engine receives one at construction,
so tests can pass a seeded or scripted source.

A source is not thread-safe; callers sharing one across threads must
serialize draws.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

import numpy as np

from .errors import InvalidArgumentError


class RandomSource(ABC):
    """Source of independent uniform draws on [0, 1)."""

    @abstractmethod
    def next_uniform(self) -> float:
        """Return the next draw in [0, 1)."""


class NumpyRandomSource(RandomSource):
    """Draws from a numpy ``Generator``.

    With ``seed=None`` the generator is seeded from fresh OS entropy, so two
    instances do not reproduce each other's sequence.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next_uniform(self) -> float:
        return float(self._rng.random())


class SequenceRandomSource(RandomSource):
    """Replays a fixed list of draws, cycling when exhausted."""

    def __init__(self, draws: Iterable[float]):
        self._draws = [float(u) for u in draws]
        if not self._draws:
            raise InvalidArgumentError("draws must not be empty")
        for u in self._draws:
            if not (0.0 <= u < 1.0):
                raise InvalidArgumentError(f"draws must be in [0, 1), got {u}")
        self._index = 0

    def next_uniform(self) -> float:
        u = self._draws[self._index % len(self._draws)]
        self._index += 1
        return u
