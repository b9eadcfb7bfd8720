"""Result containers for hypothesis tests, interval estimates and regression."""

from .inference_results import ChiSquareTestResult, ConfidenceInterval, RegressionResult

__all__ = [
    "ChiSquareTestResult",
    "ConfidenceInterval",
    "RegressionResult",
]
