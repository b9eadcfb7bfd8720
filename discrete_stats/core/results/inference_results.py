"""
Result classes for hypothesis tests and regression.

These are the structured outputs of the richer inference helpers
(``chi_square_goodness_of_fit``, ``confidence_interval``,
``linear_regression_fit``). Each serializes to a JSON-safe dictionary.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Optional, Sequence, List


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


@dataclass
class ChiSquareTestResult:
    """
    Result of a chi-square goodness-of-fit test.

    The test rejects the expected frequencies when the statistic exceeds the
    upper critical value of the chi-square distribution with k-1 degrees of
    freedom.

    Attributes:
        test_statistic: sum((o - e)^2 / e)
        critical_value: Upper critical value at the given confidence
        confidence_level: Confidence level of the test (1 - alpha)
        passed: True if test_statistic <= critical_value
        p_value: Upper-tail probability of the statistic
        degrees_of_freedom: Number of categories minus one
    """

    test_statistic: float
    critical_value: float
    confidence_level: float
    passed: bool
    p_value: Optional[float] = None
    degrees_of_freedom: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize chi-square test result to dictionary."""
        return {
            "test_name": "chi_square_goodness_of_fit",
            "test_statistic": _json_safe_value(self.test_statistic),
            "critical_value": _json_safe_value(self.critical_value),
            "confidence_level": self.confidence_level,
            "passed": self.passed,
            "p_value": _json_safe_value(self.p_value),
            "degrees_of_freedom": self.degrees_of_freedom
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChiSquareTestResult':
        """Create ChiSquareTestResult from dictionary."""
        return cls(
            test_statistic=data["test_statistic"],
            critical_value=data["critical_value"],
            confidence_level=data["confidence_level"],
            passed=data["passed"],
            p_value=data.get("p_value"),
            degrees_of_freedom=data.get("degrees_of_freedom")
        )


@dataclass
class ConfidenceInterval:
    """
    Two-sided confidence interval for a normal mean.

    Attributes:
        lower: mean - margin
        upper: mean + margin
        confidence_level: Requested confidence level
        z_score: Standard normal critical value used for the margin
    """

    lower: float
    upper: float
    confidence_level: float
    z_score: float

    @property
    def margin(self) -> float:
        """Half-width of the interval."""
        return 0.5 * (self.upper - self.lower)

    def as_tuple(self) -> tuple:
        return (self.lower, self.upper)

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lower": _json_safe_value(self.lower),
            "upper": _json_safe_value(self.upper),
            "confidence_level": self.confidence_level,
            "z_score": _json_safe_value(self.z_score),
        }


@dataclass
class RegressionResult:
    """
    Ordinary least-squares fit of y = slope * x + intercept.

    Attributes:
        slope: Fitted slope
        intercept: Fitted intercept
        r_squared: Coefficient of determination (1.0 when y is constant and fitted exactly)
        n: Number of points
    """

    slope: float
    intercept: float
    r_squared: float
    n: int

    def predict(self, x: "float | Sequence[float]") -> "float | List[float]":
        """Evaluate the fitted line at one x or a sequence of x."""
        if isinstance(x, (int, float)):
            return self.slope * float(x) + self.intercept
        return [self.slope * float(xi) + self.intercept for xi in x]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slope": _json_safe_value(self.slope),
            "intercept": _json_safe_value(self.intercept),
            "r_squared": _json_safe_value(self.r_squared),
            "n": self.n,
        }
