"""
Engine options for the statistics engine.

This module defines the configuration shared by every operation of a
StatisticsEngine instance: the probability-sum tolerance, the default
confidence level for interval estimates and the CDF cap.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..errors import InvalidArgumentError
from ..statistics.validation import DEFAULT_EPSILON


@dataclass
class EngineOptions:
    """
    Configuration options for the statistics engine.

    Attributes:
        epsilon: Tolerance on |sum(p) - 1| for probability vectors (default: 1e-10)
        confidence_level: Default confidence level for intervals (default: 0.95)
        cdf_cap: Upper bound applied to cumulative probabilities (default: 1.0)
    """

    epsilon: float = DEFAULT_EPSILON
    confidence_level: float = 0.95
    cdf_cap: float = 1.0

    def __post_init__(self):
        """Validate options after initialization."""
        if self.epsilon <= 0:
            raise InvalidArgumentError("epsilon must be positive")

        if not 0 < self.confidence_level < 1:
            raise InvalidArgumentError("confidence_level must be between 0 and 1")

        if not 0 < self.cdf_cap <= 1:
            raise InvalidArgumentError("cdf_cap must be in (0, 1]")

    @property
    def alpha(self) -> float:
        """
        Significance level (complement of confidence level).

        Returns:
            Alpha value for statistical tests
        """
        return 1.0 - self.confidence_level

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "epsilon": self.epsilon,
            "confidence_level": self.confidence_level,
            "cdf_cap": self.cdf_cap,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineOptions':
        """
        Create EngineOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New EngineOptions instance
        """
        return cls(
            epsilon=data.get("epsilon", DEFAULT_EPSILON),
            confidence_level=data.get("confidence_level", 0.95),
            cdf_cap=data.get("cdf_cap", 1.0),
        )

    @classmethod
    def default(cls) -> 'EngineOptions':
        """Create options with default values."""
        return cls()

    @classmethod
    def strict(cls) -> 'EngineOptions':
        """
        Create options with a tighter probability-sum tolerance.

        Returns:
            EngineOptions with epsilon 1e-12
        """
        return cls(epsilon=1e-12)

    def __repr__(self) -> str:
        return (
            f"EngineOptions("
            f"eps={self.epsilon}, "
            f"conf={self.confidence_level})"
        )
