"""Error types raised by the statistics engine.

Two kinds are distinguished:
- InvalidArgumentError: the caller passed data that violates a cheap
  precondition (length mismatch, probability out of range, empty dataset).
- DegenerateComputationError: every input is individually valid but the
  derived quantity is mathematically undefined (zero standard deviation,
  singular regression denominator).

Both subclass the matching builtin so existing ``except ValueError`` and
``except RuntimeError`` handlers keep working.
"""


class StatisticsError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(StatisticsError, ValueError):
    """Raised when an argument fails a precondition check."""


class DegenerateComputationError(StatisticsError, RuntimeError):
    """Raised when valid inputs combine into an undefined result."""
