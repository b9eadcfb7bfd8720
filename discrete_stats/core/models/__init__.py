"""
Data models for the statistics engine.

This module provides the core value types:
- DiscreteRandomVariable: parallel values/probabilities
- JointDistribution: 2D probability table with marginals
- Sampling distributions: Uniform, Normal, Exponential
- EngineOptions: configuration for the engine
"""

from .options import EngineOptions
from .variables import DiscreteRandomVariable, JointDistribution
from .sampling import (
    DistributionKind,
    SamplingDistribution,
    UniformDistribution,
    NormalDistribution,
    ExponentialDistribution,
)

__all__ = [
    # Options
    "EngineOptions",

    # Variables
    "DiscreteRandomVariable",
    "JointDistribution",

    # Sampling distributions
    "DistributionKind",
    "SamplingDistribution",
    "UniformDistribution",
    "NormalDistribution",
    "ExponentialDistribution",
]
