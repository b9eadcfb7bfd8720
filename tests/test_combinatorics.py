"""Tests for factorial, combinations and permutations."""

import math

import pytest

from discrete_stats.core.errors import InvalidArgumentError
from discrete_stats.core.statistics.combinatorics import (
    factorial,
    combination,
    permutation,
    log_factorial,
    log_combination,
    log_permutation,
    EXACT_FACTORIAL_LIMIT,
    MAX_FACTORIAL_ARG,
)


@pytest.mark.parametrize(
    "n, expected",
    [(0, 1.0), (1, 1.0), (5, 120.0), (10, 3628800.0)],
)
def test_factorial_small_values(n, expected):
    assert factorial(n) == expected


def test_factorial_exact_up_to_limit():
    n = EXACT_FACTORIAL_LIMIT
    assert factorial(n) == float(math.factorial(n))


def test_factorial_overflows_to_inf_past_limit():
    assert math.isfinite(factorial(MAX_FACTORIAL_ARG))
    assert math.isinf(factorial(MAX_FACTORIAL_ARG + 1))


@pytest.mark.parametrize("n", [-1, 2.5])
def test_factorial_rejects_invalid_input(n):
    with pytest.raises(InvalidArgumentError):
        factorial(n)


@pytest.mark.parametrize(
    "n, k, expected",
    [(5, 2, 10.0), (5, 0, 1.0), (5, 5, 1.0), (10, 3, 120.0), (0, 0, 1.0)],
)
def test_combination_known_values(n, k, expected):
    assert combination(n, k) == pytest.approx(expected)


@pytest.mark.parametrize("n", [0, 1, 6, 15, 20])
def test_combination_symmetry(n):
    for k in range(n + 1):
        assert combination(n, k) == combination(n, n - k)


@pytest.mark.parametrize(
    "n, k, expected",
    [(5, 2, 20.0), (5, 0, 1.0), (5, 5, 120.0), (10, 3, 720.0)],
)
def test_permutation_known_values(n, k, expected):
    assert permutation(n, k) == pytest.approx(expected)


@pytest.mark.parametrize("func", [combination, permutation, log_combination, log_permutation])
def test_k_greater_than_n_rejected(func):
    with pytest.raises(InvalidArgumentError):
        func(3, 4)


def test_log_domain_matches_float_for_moderate_n():
    assert math.exp(log_factorial(10)) == pytest.approx(factorial(10))
    assert math.exp(log_combination(20, 7)) == pytest.approx(combination(20, 7))
    assert math.exp(log_permutation(12, 4)) == pytest.approx(permutation(12, 4))


def test_log_combination_handles_large_n():
    # C(1000, 500) overflows a float; its log does not
    value = log_combination(1000, 500)
    assert math.isfinite(value)
    assert value == pytest.approx(math.log(math.comb(1000, 500)), rel=1e-10)
