"""Statistics engine facade.

``StatisticsEngine`` bundles the pure functions of ``core.statistics`` with
an EngineOptions instance and one RandomSource. The source is created (or
injected) at construction and shared by all sampling methods for the
lifetime of the engine; there is no reseeding API.

Sampling methods advance the source and are not thread-safe. Every other
method is a pure function of its arguments and the options.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidArgumentError
from .models.options import EngineOptions
from .models.variables import DiscreteRandomVariable, JointDistribution
from .random_source import NumpyRandomSource, RandomSource
from .results.inference_results import ChiSquareTestResult, ConfidenceInterval, RegressionResult
from .statistics import combinatorics, empirical, inference, information, moments, sampling, validation

logger = logging.getLogger(__name__)


class StatisticsEngine:
    """Discrete probability and statistics operations.

    Args:
        options: engine configuration (defaults to ``EngineOptions()``)
        random_source: uniform source for sampling (defaults to an
            entropy-seeded ``NumpyRandomSource``)
    """

    def __init__(
        self,
        options: Optional[EngineOptions] = None,
        random_source: Optional[RandomSource] = None,
    ):
        self.options = options or EngineOptions()
        self._source = random_source if random_source is not None else NumpyRandomSource()
        logger.debug("StatisticsEngine created with %r, source %s",
                     self.options, type(self._source).__name__)

    @property
    def random_source(self) -> RandomSource:
        return self._source

    @property
    def epsilon(self) -> float:
        return self.options.epsilon

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_probabilities(self, probabilities: Sequence[float]) -> bool:
        return validation.validate_probabilities(probabilities, self.epsilon)

    def validate_probability(self, p: float) -> None:
        validation.validate_probability(p)

    # ------------------------------------------------------------------
    # Moments
    # ------------------------------------------------------------------

    def expectation(self, values: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.expectation(values, probabilities, self.epsilon)

    def variance(self, values: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.variance(values, probabilities, self.epsilon)

    def standard_deviation(self, values: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.standard_deviation(values, probabilities, self.epsilon)

    def covariance(self, x: Sequence[float], y: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.covariance(x, y, probabilities, self.epsilon)

    def correlation(self, x: Sequence[float], y: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.correlation(x, y, probabilities, self.epsilon)

    def skewness(self, values: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.skewness(values, probabilities, self.epsilon)

    def kurtosis(self, values: Sequence[float], probabilities: Sequence[float]) -> float:
        return moments.kurtosis(values, probabilities, self.epsilon)

    def random_variable(self, values: Sequence[float], probabilities: Sequence[float]) -> DiscreteRandomVariable:
        """Validated DiscreteRandomVariable using this engine's tolerance."""
        return DiscreteRandomVariable(list(values), list(probabilities), epsilon=self.epsilon)

    # ------------------------------------------------------------------
    # Empirical distributions
    # ------------------------------------------------------------------

    def pmf(self, dataset: Sequence[float]) -> Dict[float, float]:
        return empirical.pmf(dataset)

    def cdf(self, dataset: Sequence[float]) -> Dict[float, float]:
        return empirical.cdf(dataset, cap=self.options.cdf_cap)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def uniform_sample(self, low: float, high: float) -> float:
        return sampling.uniform_sample(self._source, low, high)

    def normal_sample(self, mean: float, stddev: float) -> float:
        return sampling.normal_sample(self._source, mean, stddev)

    def exponential_sample(self, rate: float) -> float:
        return sampling.exponential_sample(self._source, rate)

    def generate_samples(
        self,
        n: int,
        distribution: sampling.DistributionSpec,
        param1: Optional[float] = None,
        param2: float = 0.0,
    ) -> List[float]:
        return sampling.generate_samples(self._source, n, distribution, param1, param2)

    # ------------------------------------------------------------------
    # Information theory
    # ------------------------------------------------------------------

    def shannon_entropy(self, probabilities: Sequence[float]) -> float:
        return information.shannon_entropy(probabilities, self.epsilon)

    def mutual_information(
        self,
        joint: "Sequence[Sequence[float]] | JointDistribution",
        marginal_x: Optional[Sequence[float]] = None,
        marginal_y: Optional[Sequence[float]] = None,
    ) -> float:
        """Mutual information in bits.

        Accepts a JointDistribution, the raw table with both marginals, or
        the raw table alone (marginals derived from row and column sums).
        Passing only one marginal raises InvalidArgumentError.
        """
        if isinstance(joint, JointDistribution):
            return information.mutual_information(joint.joint, joint.marginal_x, joint.marginal_y)
        if (marginal_x is None) != (marginal_y is None):
            raise InvalidArgumentError("pass both marginals or neither")
        if marginal_x is None:
            joint = JointDistribution.from_joint(joint)
            return information.mutual_information(joint.joint, joint.marginal_x, joint.marginal_y)
        return information.mutual_information(joint, marginal_x, marginal_y)

    def joint_entropy(self, joint: Sequence[Sequence[float]]) -> float:
        return information.joint_entropy(joint, self.epsilon)

    def kl_divergence(self, p: Sequence[float], q: Sequence[float]) -> float:
        return information.kl_divergence(p, q, self.epsilon)

    # ------------------------------------------------------------------
    # Inference & regression
    # ------------------------------------------------------------------

    def conditional_probability(self, p_ab: float, p_b: float) -> float:
        return inference.conditional_probability(p_ab, p_b)

    def bayes_theorem(self, p_b_given_a: float, p_a: float, p_b: float) -> float:
        return inference.bayes_theorem(p_b_given_a, p_a, p_b)

    def chi_square_test(self, observed: Sequence[float], expected: Sequence[float]) -> float:
        return inference.chi_square_test(observed, expected)

    def chi_square_goodness_of_fit(
        self,
        observed: Sequence[float],
        expected: Sequence[float],
        alpha: Optional[float] = None,
    ) -> ChiSquareTestResult:
        if alpha is None:
            alpha = self.options.alpha
        return inference.chi_square_goodness_of_fit(observed, expected, alpha)

    def confidence_interval_normal(
        self,
        mean: float,
        stddev: float,
        n: int,
        confidence: Optional[float] = None,
    ) -> Tuple[float, float]:
        if confidence is None:
            confidence = self.options.confidence_level
        return inference.confidence_interval_normal(mean, stddev, n, confidence)

    def confidence_interval(
        self,
        mean: float,
        stddev: float,
        n: int,
        confidence: Optional[float] = None,
    ) -> ConfidenceInterval:
        if confidence is None:
            confidence = self.options.confidence_level
        return inference.confidence_interval(mean, stddev, n, confidence)

    def linear_regression(self, x: Sequence[float], y: Sequence[float]) -> Tuple[float, float]:
        return inference.linear_regression(x, y)

    def linear_regression_fit(self, x: Sequence[float], y: Sequence[float]) -> RegressionResult:
        return inference.linear_regression_fit(x, y)

    # ------------------------------------------------------------------
    # Combinatorics
    # ------------------------------------------------------------------

    def factorial(self, n: int) -> float:
        return combinatorics.factorial(n)

    def combination(self, n: int, k: int) -> float:
        return combinatorics.combination(n, k)

    def permutation(self, n: int, k: int) -> float:
        return combinatorics.permutation(n, k)

    def log_combination(self, n: int, k: int) -> float:
        return combinatorics.log_combination(n, k)

    def __repr__(self) -> str:
        return f"StatisticsEngine({self.options!r})"
