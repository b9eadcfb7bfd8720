"""discrete_stats.core.statistics.information

Information-theoretic measures in bits (base-2 logarithm).

Zero-probability terms are skipped, i.e. 0 * log 0 is taken as 0.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..errors import InvalidArgumentError
from .validation import DEFAULT_EPSILON, require_probabilities, require_same_length


def shannon_entropy(probabilities: Sequence[float], epsilon: float = DEFAULT_EPSILON) -> float:
    """H(X) = -sum(p log2 p).

    Raises:
        InvalidArgumentError: probabilities do not sum to 1
    """
    require_probabilities(probabilities, epsilon)
    p = np.asarray(probabilities, dtype=float)
    p = p[p > 0.0]
    if p.size == 0:
        return 0.0
    return float(-np.sum(p * np.log2(p)))


def _check_joint_shape(
    joint: Sequence[Sequence[float]],
    marginal_x: Sequence[float],
    marginal_y: Sequence[float],
) -> None:
    if len(joint) == 0 or len(marginal_x) == 0 or len(marginal_y) == 0:
        raise InvalidArgumentError("joint and marginal distributions must not be empty")
    if len(joint) != len(marginal_x):
        raise InvalidArgumentError("joint rows must match marginal_x length")
    for row in joint:
        if len(row) != len(marginal_y):
            raise InvalidArgumentError("joint columns must match marginal_y length")


def mutual_information(
    joint: Sequence[Sequence[float]],
    marginal_x: Sequence[float],
    marginal_y: Sequence[float],
) -> float:
    """I(X;Y) = sum(p_xy log2(p_xy / (p_x p_y))).

    Terms where p_xy, p_x or p_y is zero are skipped.

    Raises:
        InvalidArgumentError: empty input or joint shape does not match the
            marginals
    """
    _check_joint_shape(joint, marginal_x, marginal_y)
    pxy = np.asarray(joint, dtype=float)
    px = np.asarray(marginal_x, dtype=float)[:, np.newaxis]
    py = np.asarray(marginal_y, dtype=float)[np.newaxis, :]
    outer = px * py

    mask = (pxy > 0.0) & (px > 0.0) & (py > 0.0)
    if not np.any(mask):
        return 0.0
    return float(np.sum(pxy[mask] * np.log2(pxy[mask] / outer[mask])))


def joint_entropy(joint: Sequence[Sequence[float]], epsilon: float = DEFAULT_EPSILON) -> float:
    """H(X, Y) of a joint table whose entries sum to 1."""
    if len(joint) == 0:
        raise InvalidArgumentError("joint distribution must not be empty")
    flat = [float(v) for row in joint for v in row]
    return shannon_entropy(flat, epsilon)


def kl_divergence(
    p: Sequence[float],
    q: Sequence[float],
    epsilon: float = DEFAULT_EPSILON,
) -> float:
    """D_KL(P || Q) = sum(p log2(p / q)).

    Raises:
        InvalidArgumentError: length mismatch, either vector does not sum
            to 1, or q is zero where p is positive
    """
    require_same_length(p, q)
    require_probabilities(p, epsilon)
    require_probabilities(q, epsilon)
    total = 0.0
    for pi, qi in zip(p, q):
        if pi <= 0.0:
            continue
        if qi <= 0.0:
            raise InvalidArgumentError("q must be positive wherever p is positive")
        total += pi * math.log2(pi / qi)
    return total
