"""Tests for entropy, mutual information and KL divergence."""

import math

import pytest

from discrete_stats.core.errors import InvalidArgumentError
from discrete_stats.core.statistics.information import (
    shannon_entropy,
    mutual_information,
    joint_entropy,
    kl_divergence,
)


@pytest.mark.parametrize(
    "probs, expected",
    [
        ([0.5, 0.5], 1.0),
        ([1.0], 0.0),
        ([0.25] * 4, 2.0),
        ([0.5, 0.5, 0.0], 1.0),
    ],
)
def test_shannon_entropy_known_values(probs, expected):
    assert shannon_entropy(probs) == pytest.approx(expected)


def test_shannon_entropy_fair_coin_is_one_bit():
    assert shannon_entropy([0.5, 0.5]) == 1.0


def test_shannon_entropy_rejects_non_normalized():
    with pytest.raises(InvalidArgumentError):
        shannon_entropy([0.5, 0.4])


class TestMutualInformation:
    """I(X;Y) over a joint table."""

    def test_independent_variables_share_no_information(self):
        joint = [[0.25, 0.25], [0.25, 0.25]]
        assert mutual_information(joint, [0.5, 0.5], [0.5, 0.5]) == pytest.approx(0.0, abs=1e-12)

    def test_identical_variables_share_their_entropy(self):
        joint = [[0.5, 0.0], [0.0, 0.5]]
        assert mutual_information(joint, [0.5, 0.5], [0.5, 0.5]) == pytest.approx(1.0)

    def test_zero_marginal_terms_skipped(self):
        joint = [[0.5, 0.0, 0.0], [0.0, 0.5, 0.0]]
        assert mutual_information(joint, [0.5, 0.5], [0.5, 0.5, 0.0]) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "joint, mx, my",
        [
            ([], [0.5, 0.5], [0.5, 0.5]),
            ([[0.5, 0.5]], [], [0.5, 0.5]),
            ([[0.5, 0.5]], [1.0], []),
            ([[0.5, 0.5]], [0.5, 0.5], [0.5, 0.5]),
            ([[0.25, 0.25], [0.25, 0.25]], [0.5, 0.5], [1.0]),
            ([[0.25, 0.25], [0.5]], [0.5, 0.5], [0.5, 0.5]),
        ],
    )
    def test_shape_errors(self, joint, mx, my):
        with pytest.raises(InvalidArgumentError):
            mutual_information(joint, mx, my)


def test_joint_entropy_of_uniform_table():
    assert joint_entropy([[0.25, 0.25], [0.25, 0.25]]) == pytest.approx(2.0)


def test_kl_divergence_values():
    p = [0.5, 0.5]
    q = [0.25, 0.75]
    expected = 0.5 * math.log2(0.5 / 0.25) + 0.5 * math.log2(0.5 / 0.75)
    assert kl_divergence(p, q) == pytest.approx(expected)
    assert kl_divergence(p, p) == 0.0


def test_kl_divergence_requires_support():
    with pytest.raises(InvalidArgumentError):
        kl_divergence([0.5, 0.5], [1.0, 0.0])
    # p = 0 terms contribute nothing
    assert kl_divergence([1.0, 0.0], [0.5, 0.5]) == pytest.approx(1.0)
