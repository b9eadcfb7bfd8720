"""Statistics routines for the discrete statistics engine.

This package holds the pure functions the engine is built from:
- Validation of probability scalars and vectors
- Combinatorics (float and log-domain)
- Moments of discrete random variables
- Empirical PMF/CDF
- Sampling from continuous families via an injected random source
- Information measures (entropy, mutual information)
- Inference (Bayes, chi-square, confidence intervals, regression)
- Normal and chi-square distribution functions

No SciPy dependency is required.
"""

from .validation import validate_probabilities, validate_probability
from .combinatorics import factorial, combination, permutation, log_factorial, log_combination, log_permutation
from .moments import expectation, variance, standard_deviation, covariance, correlation, skewness, kurtosis
from .empirical import pmf, cdf
from .distributions import normal_cdf, normal_ppf, chi2_cdf, chi2_sf, chi2_ppf
from .information import shannon_entropy, mutual_information, joint_entropy, kl_divergence
from .inference import (
    conditional_probability,
    bayes_theorem,
    chi_square_test,
    chi_square_goodness_of_fit,
    confidence_interval,
    confidence_interval_normal,
    linear_regression,
    linear_regression_fit,
)
from .sampling import uniform_sample, normal_sample, exponential_sample, generate_samples

__all__ = [
    "validate_probabilities",
    "validate_probability",
    "factorial",
    "combination",
    "permutation",
    "log_factorial",
    "log_combination",
    "log_permutation",
    "expectation",
    "variance",
    "standard_deviation",
    "covariance",
    "correlation",
    "skewness",
    "kurtosis",
    "pmf",
    "cdf",
    "normal_cdf",
    "normal_ppf",
    "chi2_cdf",
    "chi2_sf",
    "chi2_ppf",
    "shannon_entropy",
    "mutual_information",
    "joint_entropy",
    "kl_divergence",
    "conditional_probability",
    "bayes_theorem",
    "chi_square_test",
    "chi_square_goodness_of_fit",
    "confidence_interval",
    "confidence_interval_normal",
    "linear_regression",
    "linear_regression_fit",
    "uniform_sample",
    "normal_sample",
    "exponential_sample",
    "generate_samples",
]
