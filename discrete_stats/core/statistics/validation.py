"""discrete_stats.core.statistics.validation

Precondition checks for probability scalars and vectors.

``validate_probabilities`` only checks the sum. Negative entries are not
rejected here; operations that need them rejected check separately.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..errors import InvalidArgumentError


DEFAULT_EPSILON = 1e-10


def validate_probabilities(probabilities: Sequence[float], epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True iff the probabilities sum to 1 within ``epsilon``."""
    total = math.fsum(float(p) for p in probabilities)
    return abs(total - 1.0) <= epsilon


def require_probabilities(probabilities: Sequence[float], epsilon: float = DEFAULT_EPSILON) -> None:
    """Raise InvalidArgumentError unless the vector sums to 1."""
    if not validate_probabilities(probabilities, epsilon):
        raise InvalidArgumentError("probabilities must sum to 1")


def validate_probability(p: float) -> None:
    """Raise InvalidArgumentError unless 0 <= p <= 1."""
    if p < 0.0 or p > 1.0:
        raise InvalidArgumentError(f"probability must be in [0, 1], got {p}")


def require_same_length(*sequences: Sequence[float]) -> int:
    """Return the common length of ``sequences`` or raise InvalidArgumentError."""
    lengths = {len(s) for s in sequences}
    if len(lengths) != 1:
        raise InvalidArgumentError("input sequences must have the same length")
    return lengths.pop()
