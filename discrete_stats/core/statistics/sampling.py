"""discrete_stats.core.statistics.sampling

Draws from continuous distributions using an injected RandomSource.

Every sampler transforms uniform draws (see ``core.models.sampling``), so a
scripted source gives fully deterministic output. Distribution parameters
are not validated.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from ..errors import InvalidArgumentError
from ..models.sampling import (
    DistributionKind,
    ExponentialDistribution,
    NormalDistribution,
    SamplingDistribution,
    UniformDistribution,
)
from ..random_source import RandomSource

logger = logging.getLogger(__name__)


DistributionSpec = Union[SamplingDistribution, DistributionKind, str]


def uniform_sample(source: RandomSource, low: float, high: float) -> float:
    """One draw from Uniform[low, high)."""
    return UniformDistribution(low, high).sample(source)


def normal_sample(source: RandomSource, mean: float, stddev: float) -> float:
    """One draw from Normal(mean, stddev)."""
    return NormalDistribution(mean, stddev).sample(source)


def exponential_sample(source: RandomSource, rate: float) -> float:
    """One draw from Exponential(rate)."""
    return ExponentialDistribution(rate).sample(source)


def generate_samples(
    source: RandomSource,
    n: int,
    distribution: DistributionSpec,
    param1: Optional[float] = None,
    param2: float = 0.0,
) -> List[float]:
    """Draw ``n`` independent samples.

    Args:
        source: uniform random source
        n: number of samples (>= 0)
        distribution: a SamplingDistribution, or a kind / string tag
            ("uniform", "normal", "exponential") combined with the
            positional parameters
        param1: first parameter when ``distribution`` is a tag
        param2: second parameter when ``distribution`` is a tag

    Raises:
        InvalidArgumentError: unknown tag, negative or non-integral n, or a tag given
            without ``param1``
    """
    if isinstance(n, bool) or n < 0 or int(n) != n:
        raise InvalidArgumentError(f"n must be a non-negative integer, got {n}")

    if not isinstance(distribution, SamplingDistribution):
        if param1 is None:
            raise InvalidArgumentError("param1 is required when distribution is given by name")
        distribution = SamplingDistribution.from_params(distribution, param1, param2)

    logger.debug("Drawing %d samples from %r", n, distribution)
    return [distribution.sample(source) for _ in range(int(n))]
