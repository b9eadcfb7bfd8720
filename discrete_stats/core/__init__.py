"""
Core module for the discrete statistics engine.

Pure numeric code over finite discrete distributions and datasets. The only
mutable state is the random source held by a StatisticsEngine instance.
"""

from .errors import StatisticsError, InvalidArgumentError, DegenerateComputationError

from .models import (
    EngineOptions,
    DiscreteRandomVariable,
    JointDistribution,
    DistributionKind,
    SamplingDistribution,
    UniformDistribution,
    NormalDistribution,
    ExponentialDistribution,
)

from .results import ChiSquareTestResult, ConfidenceInterval, RegressionResult

from .random_source import RandomSource, NumpyRandomSource, SequenceRandomSource

from .engine import StatisticsEngine

__all__ = [
    # Errors
    "StatisticsError",
    "InvalidArgumentError",
    "DegenerateComputationError",

    # Models
    "EngineOptions",
    "DiscreteRandomVariable",
    "JointDistribution",
    "DistributionKind",
    "SamplingDistribution",
    "UniformDistribution",
    "NormalDistribution",
    "ExponentialDistribution",

    # Results
    "ChiSquareTestResult",
    "ConfidenceInterval",
    "RegressionResult",

    # Random sources
    "RandomSource",
    "NumpyRandomSource",
    "SequenceRandomSource",

    # Engine
    "StatisticsEngine",
]
