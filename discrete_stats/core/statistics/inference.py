"""discrete_stats.core.statistics.inference

Conditional probability, Bayes' theorem, chi-square goodness of fit,
normal-mean confidence intervals and simple linear regression.

Includes:
- ``chi_square_test``: the bare statistic sum((o - e)^2 / e)
- ``chi_square_goodness_of_fit``: statistic plus p-value and decision
- ``confidence_interval_normal``: (lower, upper) with the z-score taken from
  the requested confidence level
- ``linear_regression``: closed-form least squares (slope, intercept)
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from ..errors import DegenerateComputationError, InvalidArgumentError
from ..results.inference_results import ChiSquareTestResult, ConfidenceInterval, RegressionResult
from .distributions import chi2_ppf, chi2_sf, two_sided_z
from .validation import require_same_length, validate_probability


# ----------------------------
# Probability rules
# ----------------------------


def conditional_probability(p_ab: float, p_b: float) -> float:
    """P(A | B) = P(A and B) / P(B).

    Raises:
        InvalidArgumentError: a probability is outside [0, 1], p_b is zero
            or p_ab exceeds p_b
    """
    validate_probability(p_ab)
    validate_probability(p_b)
    if p_b == 0.0:
        raise InvalidArgumentError("P(B) must be non-zero")
    if p_ab > p_b:
        raise InvalidArgumentError("P(A and B) cannot exceed P(B)")
    return p_ab / p_b


def bayes_theorem(p_b_given_a: float, p_a: float, p_b: float) -> float:
    """P(A | B) = P(B | A) P(A) / P(B).

    Raises:
        InvalidArgumentError: a probability is outside [0, 1] or p_b is zero
    """
    validate_probability(p_b_given_a)
    validate_probability(p_a)
    validate_probability(p_b)
    if p_b == 0.0:
        raise InvalidArgumentError("P(B) must be non-zero")
    return (p_b_given_a * p_a) / p_b


# ----------------------------
# Chi-square
# ----------------------------


def chi_square_test(observed: Sequence[float], expected: Sequence[float]) -> float:
    """Pearson chi-square statistic sum((o - e)^2 / e).

    Raises:
        InvalidArgumentError: length mismatch or an expected count of zero
    """
    require_same_length(observed, expected)
    statistic = 0.0
    for o, e in zip(observed, expected):
        if e == 0:
            raise InvalidArgumentError("expected frequencies must be non-zero")
        statistic += (o - e) ** 2 / e
    return statistic


def chi_square_goodness_of_fit(
    observed: Sequence[float],
    expected: Sequence[float],
    alpha: float = 0.05,
) -> ChiSquareTestResult:
    """Upper-tail chi-square goodness-of-fit test with k-1 degrees of freedom.

    Decision:
        T <= chi2_{1-alpha, k-1}

    Args:
        observed: observed frequencies
        expected: expected frequencies (non-zero)
        alpha: significance level

    Returns:
        ChiSquareTestResult (with p-value and pass/fail)
    """
    if not (0.0 < alpha < 1.0):
        raise InvalidArgumentError("alpha must be in (0,1)")
    if len(observed) < 2:
        raise InvalidArgumentError("at least two categories are required")

    test_stat = chi_square_test(observed, expected)
    dof = len(observed) - 1
    critical = chi2_ppf(1.0 - alpha, dof)

    return ChiSquareTestResult(
        test_statistic=float(test_stat),
        critical_value=float(critical),
        confidence_level=1.0 - alpha,
        passed=bool(test_stat <= critical),
        p_value=float(chi2_sf(test_stat, dof)),
        degrees_of_freedom=int(dof),
    )


# ----------------------------
# Interval estimates
# ----------------------------


def confidence_interval(mean: float, stddev: float, n: int, confidence: float = 0.95) -> ConfidenceInterval:
    """Two-sided z-interval for a normal mean with known standard deviation.

    margin = z * stddev / sqrt(n), z = Phi^{-1}(1 - (1 - confidence) / 2)

    Raises:
        InvalidArgumentError: n is not positive or confidence is outside (0, 1)
    """
    if n <= 0:
        raise InvalidArgumentError("n must be positive")
    z = two_sided_z(confidence)
    margin = z * stddev / math.sqrt(n)
    return ConfidenceInterval(
        lower=mean - margin,
        upper=mean + margin,
        confidence_level=confidence,
        z_score=z,
    )


def confidence_interval_normal(
    mean: float,
    stddev: float,
    n: int,
    confidence: float = 0.95,
) -> Tuple[float, float]:
    """(lower, upper) bounds of ``confidence_interval``."""
    return confidence_interval(mean, stddev, n, confidence).as_tuple()


# ----------------------------
# Regression
# ----------------------------


def _regression_sums(x: Sequence[float], y: Sequence[float]) -> Tuple[int, float, float, float, float]:
    if len(x) == 0 or len(y) == 0:
        raise InvalidArgumentError("x and y must not be empty")
    n = require_same_length(x, y)
    sum_x = sum(float(v) for v in x)
    sum_y = sum(float(v) for v in y)
    sum_xy = sum(float(a) * float(b) for a, b in zip(x, y))
    sum_xx = sum(float(a) * float(a) for a in x)
    return n, sum_x, sum_y, sum_xy, sum_xx


def linear_regression(x: Sequence[float], y: Sequence[float]) -> Tuple[float, float]:
    """Least-squares line through (x, y).

    slope     = (n sum(xy) - sum(x) sum(y)) / (n sum(x^2) - sum(x)^2)
    intercept = (sum(y) - slope sum(x)) / n

    Raises:
        InvalidArgumentError: empty input or length mismatch
        DegenerateComputationError: all x equal (zero denominator)
    """
    n, sum_x, sum_y, sum_xy, sum_xx = _regression_sums(x, y)
    denom = n * sum_xx - sum_x * sum_x
    if denom == 0.0:
        raise DegenerateComputationError("regression is undefined when all x values are equal")
    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def linear_regression_fit(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """``linear_regression`` plus the coefficient of determination."""
    slope, intercept = linear_regression(x, y)
    n = len(x)
    mean_y = sum(float(v) for v in y) / n
    ss_tot = sum((float(v) - mean_y) ** 2 for v in y)
    ss_res = sum((float(b) - (slope * float(a) + intercept)) ** 2 for a, b in zip(x, y))
    r_squared = 1.0 - ss_res / ss_tot if ss_tot > 0.0 else 1.0
    return RegressionResult(slope=slope, intercept=intercept, r_squared=r_squared, n=n)
