"""Tests for expectation, variance and higher moments."""

import math

import pytest

from discrete_stats.core.errors import DegenerateComputationError, InvalidArgumentError
from discrete_stats.core.statistics.moments import (
    expectation,
    variance,
    standard_deviation,
    covariance,
    correlation,
    skewness,
    kurtosis,
)


VALUES = [1.0, 2.0, 3.0]
PROBS = [0.2, 0.3, 0.5]
THIRDS = [1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0]


class TestExpectationAndVariance:
    """First and second moments."""

    def test_expectation_known_value(self):
        assert expectation(VALUES, PROBS) == pytest.approx(2.3)

    def test_variance_known_value(self):
        assert variance(VALUES, PROBS) == pytest.approx(0.61)

    def test_standard_deviation_is_sqrt_variance(self):
        assert standard_deviation(VALUES, PROBS) == pytest.approx(math.sqrt(0.61))

    def test_standard_deviation_repeatable(self):
        first = standard_deviation(VALUES, PROBS)
        assert standard_deviation(VALUES, PROBS) == first

    @pytest.mark.parametrize(
        "values, probs",
        [
            ([0.0, 10.0], [0.5, 0.5]),
            ([-4.0, 2.5, 7.0, 100.0], [0.1, 0.2, 0.3, 0.4]),
            ([1e6, 1e6 + 1.0], [0.999, 0.001]),
        ],
    )
    def test_variance_non_negative(self, values, probs):
        assert variance(values, probs) >= 0.0

    def test_constant_variable_has_zero_spread(self):
        assert variance([3.0, 3.0], [0.5, 0.5]) == 0.0
        assert standard_deviation([3.0, 3.0], [0.5, 0.5]) == 0.0

    def test_length_mismatch_rejected(self):
        with pytest.raises(InvalidArgumentError):
            expectation([1.0, 2.0], [1.0])

    @pytest.mark.parametrize("func", [expectation, variance, standard_deviation, skewness, kurtosis])
    def test_probabilities_not_summing_to_one_rejected(self, func):
        with pytest.raises(InvalidArgumentError):
            func([1.0, 2.0], [0.5, 0.4])

    def test_custom_epsilon_loosens_check(self):
        probs = [0.5, 0.5001]
        with pytest.raises(InvalidArgumentError):
            expectation([1.0, 2.0], probs)
        assert expectation([1.0, 2.0], probs, epsilon=1e-3) == pytest.approx(1.5002)


class TestCovarianceAndCorrelation:
    """Joint second moments."""

    def test_covariance_of_scaled_variable(self):
        x = [1.0, 2.0, 3.0]
        y = [2.0, 4.0, 6.0]
        assert covariance(x, y, THIRDS) == pytest.approx(4.0 / 3.0)

    def test_covariance_with_itself_is_variance(self):
        assert covariance(VALUES, VALUES, PROBS) == pytest.approx(variance(VALUES, PROBS))

    def test_correlation_perfect_positive_and_negative(self):
        x = [1.0, 2.0, 3.0]
        assert correlation(x, [2.0, 4.0, 6.0], THIRDS) == pytest.approx(1.0)
        assert correlation(x, [-1.0, -2.0, -3.0], THIRDS) == pytest.approx(-1.0)

    def test_covariance_length_mismatch(self):
        with pytest.raises(InvalidArgumentError):
            covariance([1.0, 2.0], [1.0, 2.0, 3.0], [0.5, 0.5])

    def test_correlation_zero_sigma_is_runtime_error(self):
        with pytest.raises(DegenerateComputationError):
            correlation([3.0, 3.0], [1.0, 2.0], [0.5, 0.5])
        with pytest.raises(RuntimeError):
            correlation([1.0, 2.0], [5.0, 5.0], [0.5, 0.5])


class TestShapeMoments:
    """Skewness and excess kurtosis."""

    def test_symmetric_distribution_has_zero_skew(self):
        assert skewness([-1.0, 0.0, 1.0], [0.25, 0.5, 0.25]) == pytest.approx(0.0, abs=1e-12)

    def test_skewness_matches_definition(self):
        mu = 2.3
        third = sum(((v - mu) ** 3) * p for v, p in zip(VALUES, PROBS))
        expected = third / 0.61 ** 1.5
        assert skewness(VALUES, PROBS) == pytest.approx(expected)
        assert skewness(VALUES, PROBS) < 0.0

    def test_excess_kurtosis_known_values(self):
        assert kurtosis([-1.0, 0.0, 1.0], [0.25, 0.5, 0.25]) == pytest.approx(-1.0)
        assert kurtosis([0.0, 1.0], [0.5, 0.5]) == pytest.approx(-2.0)

    @pytest.mark.parametrize("func", [skewness, kurtosis])
    def test_zero_sigma_raises(self, func):
        with pytest.raises(DegenerateComputationError):
            func([7.0, 7.0], [0.5, 0.5])
