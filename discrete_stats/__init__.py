"""
Discrete Statistics - probability and statistics engine

Expectation, variance and higher moments of finite discrete random
variables, empirical distributions, sampling, information measures,
hypothesis tests, regression and combinatorics.

Conventions:
- Probability vectors: must sum to 1 within epsilon (default 1e-10)
- Empirical PMF/CDF: dicts keyed by value, ascending key order
- Information measures: bits (base-2 logarithm), 0 * log 0 = 0
- Kurtosis: excess kurtosis (normal distribution = 0)
- Errors: InvalidArgumentError (ValueError) for bad inputs,
  DegenerateComputationError (RuntimeError) for undefined results
"""

__version__ = "1.0.0"
__author__ = "Discrete Statistics"

from .core import StatisticsEngine, EngineOptions
from .core import (
    StatisticsError,
    InvalidArgumentError,
    DegenerateComputationError,
)
from .core import (
    DiscreteRandomVariable,
    JointDistribution,
    DistributionKind,
    UniformDistribution,
    NormalDistribution,
    ExponentialDistribution,
)
from .core import RandomSource, NumpyRandomSource, SequenceRandomSource
from .core import ChiSquareTestResult, ConfidenceInterval, RegressionResult

__all__ = [
    # Version
    "__version__",

    # Engine
    "StatisticsEngine",
    "EngineOptions",

    # Errors
    "StatisticsError",
    "InvalidArgumentError",
    "DegenerateComputationError",

    # Models
    "DiscreteRandomVariable",
    "JointDistribution",
    "DistributionKind",
    "UniformDistribution",
    "NormalDistribution",
    "ExponentialDistribution",

    # Random sources
    "RandomSource",
    "NumpyRandomSource",
    "SequenceRandomSource",

    # Results
    "ChiSquareTestResult",
    "ConfidenceInterval",
    "RegressionResult",
]
