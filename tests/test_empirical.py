"""Tests for empirical PMF and CDF construction."""

import pytest

from discrete_stats.core.errors import InvalidArgumentError
from discrete_stats.core.statistics.empirical import pmf, cdf


DATASETS = [
    [1.0],
    [3.0, 1.0, 2.0, 1.0],
    [0.1] * 7 + [0.2] * 3,
    [5.0, -2.0, 5.0, 3.5, -2.0, 0.0, 11.0, 3.5, 3.5],
    [float(i % 13) for i in range(1000)],
]


def test_pmf_counts_frequencies():
    result = pmf([3.0, 1.0, 2.0, 1.0])
    assert result == {1.0: 0.5, 2.0: 0.25, 3.0: 0.25}


def test_pmf_keys_in_ascending_order():
    result = pmf([5.0, -2.0, 5.0, 3.5, 0.0])
    assert list(result.keys()) == [-2.0, 0.0, 3.5, 5.0]


@pytest.mark.parametrize("data", DATASETS)
def test_pmf_sums_to_one(data):
    assert sum(pmf(data).values()) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("func", [pmf, cdf])
def test_empty_dataset_rejected(func):
    with pytest.raises(InvalidArgumentError):
        func([])


def test_cdf_accumulates_in_key_order():
    result = cdf([3.0, 1.0, 2.0, 1.0])
    assert list(result.keys()) == [1.0, 2.0, 3.0]
    assert result[1.0] == pytest.approx(0.5)
    assert result[2.0] == pytest.approx(0.75)
    assert result[3.0] == pytest.approx(1.0)


@pytest.mark.parametrize("data", DATASETS)
def test_cdf_monotone_and_ends_at_one(data):
    values = list(cdf(data).values())
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert values[-1] == pytest.approx(1.0, abs=1e-9)
    assert all(v <= 1.0 for v in values)


def test_cdf_respects_cap():
    result = cdf([1.0, 2.0], cap=0.6)
    assert result == {1.0: 0.5, 2.0: 0.6}
