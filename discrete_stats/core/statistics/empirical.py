"""discrete_stats.core.statistics.empirical

Empirical PMF and CDF of a dataset.

Both mappings are returned with keys in ascending numeric order, which is
the order the CDF accumulates in.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from ..errors import InvalidArgumentError


def pmf(dataset: Sequence[float]) -> Dict[float, float]:
    """Relative frequency of each distinct value.

    Raises:
        InvalidArgumentError: dataset is empty
    """
    if len(dataset) == 0:
        raise InvalidArgumentError("dataset must not be empty")
    data = np.asarray(dataset, dtype=float)
    # np.unique returns sorted keys
    keys, counts = np.unique(data, return_counts=True)
    n = float(data.size)
    return {float(k): float(c) / n for k, c in zip(keys, counts)}


def cdf(dataset: Sequence[float], cap: float = 1.0) -> Dict[float, float]:
    """Cumulative relative frequency, each value capped at ``cap``."""
    result: Dict[float, float] = {}
    running = 0.0
    for value, prob in pmf(dataset).items():
        running += prob
        result[value] = min(running, cap)
    return result
