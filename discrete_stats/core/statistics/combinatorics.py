"""discrete_stats.core.statistics.combinatorics

Factorial, combinations and permutations.

The plain versions return floats computed from factorial ratios. They are
exact up to n = 22 (the largest factorial representable in a float64
mantissa), lose precision above that, and overflow to ``inf`` for n > 170.

For large n use the log-domain versions, which go through ``math.lgamma``:

    log_combination(n, k) = lgamma(n+1) - lgamma(k+1) - lgamma(n-k+1)
"""

from __future__ import annotations

import math

from ..errors import InvalidArgumentError


EXACT_FACTORIAL_LIMIT = 22
MAX_FACTORIAL_ARG = 170


def _check_non_negative_integer(n: float, name: str = "n") -> int:
    if isinstance(n, bool) or n < 0 or int(n) != n:
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {n}")
    return int(n)


def _check_k(n: float, k: float) -> tuple:
    n_int = _check_non_negative_integer(n, "n")
    k_int = _check_non_negative_integer(k, "k")
    if k_int > n_int:
        raise InvalidArgumentError(f"k must not exceed n (k={k_int}, n={n_int})")
    return n_int, k_int


def factorial(n: int) -> float:
    """n! as a float.

    Iterative product; returns 1.0 for n = 0 and ``inf`` once the product
    leaves the float64 range.
    """
    n_int = _check_non_negative_integer(n)
    result = 1.0
    for i in range(2, n_int + 1):
        result *= i
    return result


def combination(n: int, k: int) -> float:
    """Number of k-subsets of an n-set, n! / (k! (n-k)!)."""
    n_int, k_int = _check_k(n, k)
    return factorial(n_int) / (factorial(k_int) * factorial(n_int - k_int))


def permutation(n: int, k: int) -> float:
    """Number of ordered k-arrangements of an n-set, n! / (n-k)!."""
    n_int, k_int = _check_k(n, k)
    return factorial(n_int) / factorial(n_int - k_int)


# ----------------------------
# Log domain
# ----------------------------


def log_factorial(n: int) -> float:
    """Natural log of n!."""
    n_int = _check_non_negative_integer(n)
    return math.lgamma(n_int + 1.0)


def log_combination(n: int, k: int) -> float:
    """Natural log of nCk."""
    n_int, k_int = _check_k(n, k)
    return log_factorial(n_int) - log_factorial(k_int) - log_factorial(n_int - k_int)


def log_permutation(n: int, k: int) -> float:
    """Natural log of nPk."""
    n_int, k_int = _check_k(n, k)
    return log_factorial(n_int) - log_factorial(n_int - k_int)
