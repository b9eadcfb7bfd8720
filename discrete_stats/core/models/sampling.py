"""
Sampling distributions.

Each continuous family the engine can sample from is a small dataclass that
carries its own parameters, so a request like "normal with mean 0 and
standard deviation 2" is one value instead of a string tag plus loose
numbers. ``DistributionKind`` maps the legacy string tags onto them.

Parameters are not validated: ``low > high``, a negative ``stddev`` or a
non-positive ``rate`` give undefined results.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from ..errors import DegenerateComputationError, InvalidArgumentError
from ..statistics.distributions import normal_ppf

if TYPE_CHECKING:
    from ..random_source import RandomSource


MAX_ZERO_REDRAWS = 64


class DistributionKind(Enum):
    """Sampling distribution families."""
    UNIFORM = "uniform"
    NORMAL = "normal"
    EXPONENTIAL = "exponential"

    @classmethod
    def from_string(cls, s: str) -> "DistributionKind":
        """Create DistributionKind from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for kind in cls:
            if kind.value == s_lower:
                return kind
        raise InvalidArgumentError(f"Unknown distribution: {s}")


class SamplingDistribution(ABC):
    """A continuous distribution sampled by transforming uniform draws."""

    kind: DistributionKind

    @abstractmethod
    def sample(self, source: "RandomSource") -> float:
        """Draw one value."""

    @classmethod
    def from_params(
        cls,
        kind: "DistributionKind | str",
        param1: float,
        param2: Optional[float] = None,
    ) -> "SamplingDistribution":
        """Build a distribution from a kind and positional parameters.

        uniform: (low, high); normal: (mean, stddev); exponential: (rate,).
        A missing ``param2`` is taken as 0.0.
        """
        if isinstance(kind, str):
            kind = DistributionKind.from_string(kind)
        second = 0.0 if param2 is None else float(param2)
        if kind is DistributionKind.UNIFORM:
            return UniformDistribution(float(param1), second)
        if kind is DistributionKind.NORMAL:
            return NormalDistribution(float(param1), second)
        if kind is DistributionKind.EXPONENTIAL:
            return ExponentialDistribution(float(param1))
        raise InvalidArgumentError(f"Unknown distribution: {kind}")


@dataclass(frozen=True)
class UniformDistribution(SamplingDistribution):
    """Uniform on [low, high)."""

    low: float = 0.0
    high: float = 1.0
    kind = DistributionKind.UNIFORM

    def sample(self, source: "RandomSource") -> float:
        return self.low + (self.high - self.low) * source.next_uniform()


@dataclass(frozen=True)
class NormalDistribution(SamplingDistribution):
    """Normal with the given mean and standard deviation.

    Sampled by inverse CDF: mean + stddev * Phi^{-1}(u).
    """

    mean: float = 0.0
    stddev: float = 1.0
    kind = DistributionKind.NORMAL

    def sample(self, source: "RandomSource") -> float:
        # Phi^{-1}(0) is -inf
        for _ in range(MAX_ZERO_REDRAWS):
            u = source.next_uniform()
            if u > 0.0:
                return self.mean + self.stddev * normal_ppf(u)
        raise DegenerateComputationError(
            f"random source returned 0.0 on {MAX_ZERO_REDRAWS} consecutive draws"
        )


@dataclass(frozen=True)
class ExponentialDistribution(SamplingDistribution):
    """Exponential with rate ``rate`` (mean 1/rate).

    Sampled by inverse CDF: -log(1 - u) / rate.
    """

    rate: float = 1.0
    kind = DistributionKind.EXPONENTIAL

    def sample(self, source: "RandomSource") -> float:
        u = source.next_uniform()
        return -math.log1p(-u) / self.rate
