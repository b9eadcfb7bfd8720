"""
Discrete random variables and joint distributions.

These are transient value types: a DiscreteRandomVariable pairs values with
probabilities index by index, a JointDistribution holds a 2D probability
table together with its marginals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List, Sequence

from ..errors import InvalidArgumentError
from ..statistics import moments
from ..statistics.validation import (
    DEFAULT_EPSILON,
    require_probabilities,
    require_same_length,
    validate_probability,
)


@dataclass
class DiscreteRandomVariable:
    """
    A finite discrete random variable.

    Attributes:
        values: Possible outcomes
        probabilities: probabilities[i] is P(X = values[i])
        epsilon: Tolerance on the probability sum
    """

    values: List[float]
    probabilities: List[float]
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self):
        self.values = [float(v) for v in self.values]
        self.probabilities = [float(p) for p in self.probabilities]
        self.validate()

    def validate(self) -> None:
        """
        Check the variable's invariants.

        Raises:
            InvalidArgumentError: lengths differ, a probability is outside
                [0, 1] or the probabilities do not sum to 1
        """
        require_same_length(self.values, self.probabilities)
        for p in self.probabilities:
            validate_probability(p)
        require_probabilities(self.probabilities, self.epsilon)

    def __len__(self) -> int:
        return len(self.values)

    def expectation(self) -> float:
        return moments.expectation(self.values, self.probabilities, self.epsilon)

    def variance(self) -> float:
        return moments.variance(self.values, self.probabilities, self.epsilon)

    def standard_deviation(self) -> float:
        return moments.standard_deviation(self.values, self.probabilities, self.epsilon)

    def skewness(self) -> float:
        return moments.skewness(self.values, self.probabilities, self.epsilon)

    def kurtosis(self) -> float:
        return moments.kurtosis(self.values, self.probabilities, self.epsilon)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": list(self.values),
            "probabilities": list(self.probabilities),
            "epsilon": self.epsilon,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DiscreteRandomVariable':
        return cls(
            values=data["values"],
            probabilities=data["probabilities"],
            epsilon=data.get("epsilon", DEFAULT_EPSILON),
        )

    @classmethod
    def from_pmf(cls, mapping: Dict[float, float]) -> 'DiscreteRandomVariable':
        """Build from a value -> probability mapping (e.g. an empirical PMF)."""
        return cls(values=list(mapping.keys()), probabilities=list(mapping.values()))


@dataclass
class JointDistribution:
    """
    Joint distribution of two discrete variables.

    Attributes:
        joint: joint[i][j] is P(X = x_i, Y = y_j)
        marginal_x: P(X = x_i), one entry per row of ``joint``
        marginal_y: P(Y = y_j), one entry per column of ``joint``
    """

    joint: List[List[float]]
    marginal_x: List[float] = field(default_factory=list)
    marginal_y: List[float] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check the table shape against the marginals.

        Raises:
            InvalidArgumentError: empty table, ragged rows or a shape that
                does not match (len(marginal_x), len(marginal_y))
        """
        if not self.joint or not self.joint[0]:
            raise InvalidArgumentError("joint distribution must not be empty")
        n_cols = len(self.joint[0])
        if any(len(row) != n_cols for row in self.joint):
            raise InvalidArgumentError("joint distribution rows must have equal length")
        if len(self.joint) != len(self.marginal_x):
            raise InvalidArgumentError("joint rows must match marginal_x length")
        if n_cols != len(self.marginal_y):
            raise InvalidArgumentError("joint columns must match marginal_y length")

    @property
    def shape(self) -> tuple:
        return (len(self.marginal_x), len(self.marginal_y))

    @classmethod
    def from_joint(cls, joint: Sequence[Sequence[float]]) -> 'JointDistribution':
        """Build from a table alone, deriving marginals by row and column sums."""
        table = [[float(v) for v in row] for row in joint]
        if not table or not table[0]:
            raise InvalidArgumentError("joint distribution must not be empty")
        n_cols = len(table[0])
        if any(len(row) != n_cols for row in table):
            raise InvalidArgumentError("joint distribution rows must have equal length")
        marginal_x = [sum(row) for row in table]
        marginal_y = [sum(row[j] for row in table) for j in range(n_cols)]
        return cls(joint=table, marginal_x=marginal_x, marginal_y=marginal_y)
