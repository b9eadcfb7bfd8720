"""discrete_stats.core.statistics.moments

Moments of a finite discrete random variable given as parallel arrays of
values and probabilities.

Every function validates lengths and the probability sum, then builds on
``expectation`` and ``variance``:

    mu      = sum(x_i p_i)
    var     = sum((x_i - mu)^2 p_i)
    skew    = sum((x_i - mu)^3 p_i) / sigma^3
    kurt    = sum((x_i - mu)^4 p_i) / sigma^4 - 3

Accumulation is plain float64 (no compensated summation).
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from ..errors import DegenerateComputationError
from .validation import DEFAULT_EPSILON, require_probabilities, require_same_length


def _as_arrays(
    values: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float,
) -> Tuple[np.ndarray, np.ndarray]:
    require_same_length(values, probabilities)
    require_probabilities(probabilities, epsilon)
    return np.asarray(values, dtype=float), np.asarray(probabilities, dtype=float)


def _central_moment(x: np.ndarray, p: np.ndarray, order: int) -> float:
    mu = float(np.dot(x, p))
    return float(np.dot((x - mu) ** order, p))


def expectation(
    values: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Probability-weighted mean of ``values``.

    Raises:
        InvalidArgumentError: lengths differ or probabilities do not sum to 1
    """
    x, p = _as_arrays(values, probabilities, epsilon)
    return float(np.dot(x, p))


def variance(
    values: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Second central moment."""
    x, p = _as_arrays(values, probabilities, epsilon)
    return _central_moment(x, p, 2)


def standard_deviation(
    values: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Square root of the variance. Zero variance gives 0.0."""
    var = variance(values, probabilities, epsilon)
    # Rounding can leave a constant variable with a tiny negative variance
    return math.sqrt(max(var, 0.0))


def covariance(
    x: Sequence[float],
    y: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Covariance of two variables defined on the same outcomes."""
    require_same_length(x, y, probabilities)
    require_probabilities(probabilities, epsilon)
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    p = np.asarray(probabilities, dtype=float)
    mu_x = float(np.dot(xa, p))
    mu_y = float(np.dot(ya, p))
    return float(np.dot((xa - mu_x) * (ya - mu_y), p))


def correlation(
    x: Sequence[float],
    y: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Pearson correlation cov(x, y) / (sigma_x sigma_y).

    Raises:
        DegenerateComputationError: either standard deviation is zero
    """
    cov = covariance(x, y, probabilities, epsilon)
    sigma_x = standard_deviation(x, probabilities, epsilon)
    sigma_y = standard_deviation(y, probabilities, epsilon)
    if sigma_x == 0.0 or sigma_y == 0.0:
        raise DegenerateComputationError("correlation is undefined for a zero standard deviation")
    return cov / (sigma_x * sigma_y)


def skewness(
    values: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Standardized third central moment.

    Raises:
        DegenerateComputationError: standard deviation is zero
    """
    x, p = _as_arrays(values, probabilities, epsilon)
    sigma = math.sqrt(max(_central_moment(x, p, 2), 0.0))
    if sigma == 0.0:
        raise DegenerateComputationError("skewness is undefined for a zero standard deviation")
    return _central_moment(x, p, 3) / sigma ** 3


def kurtosis(
    values: Sequence[float],
    probabilities: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """Excess kurtosis: standardized fourth central moment minus 3.

    Raises:
        DegenerateComputationError: standard deviation is zero
    """
    x, p = _as_arrays(values, probabilities, epsilon)
    sigma = math.sqrt(max(_central_moment(x, p, 2), 0.0))
    if sigma == 0.0:
        raise DegenerateComputationError("kurtosis is undefined for a zero standard deviation")
    return _central_moment(x, p, 4) / sigma ** 4 - 3.0
