"""Tests for return contribution attribution."""
import math

import pytest

from portfolio_analytics.analytics.contribution import calculate_contributions


@pytest.mark.parametrize(
    "returns, weights",
    [
        ([10.0, 20.0], [50.0, 50.0]),
        ([12.5, -4.0, 30.0], [40.0, 35.0, 25.0]),
        ([-8.0, -2.0], [70.0, 30.0]),
    ],
)
def test_contributions_sum_to_100(returns, weights):
    contributions = calculate_contributions(returns, weights)
    assert sum(contributions) == pytest.approx(100.0, abs=1e-6)


def test_contribution_values():
    # weighted returns 5 and 10 -> portfolio 15
    assert calculate_contributions([10.0, 20.0], [50.0, 50.0]) == pytest.approx(
        [100 / 3, 200 / 3]
    )


def test_negative_contribution_is_reported():
    contributions = calculate_contributions([20.0, -10.0], [50.0, 50.0])
    assert contributions[1] < 0
    assert contributions == pytest.approx([200.0, -100.0])


def test_zero_portfolio_return_gives_zeros():
    assert calculate_contributions([10.0, -10.0], [50.0, 50.0]) == [0.0, 0.0]
    assert calculate_contributions([0.0], [100.0]) == [0.0]


def test_non_finite_values_are_coerced_to_zero():
    contributions = calculate_contributions([float("nan"), 10.0], [50.0, 50.0])
    assert contributions == [0.0, 0.0]
    contributions = calculate_contributions([float("inf"), 10.0], [50.0, 50.0])
    assert all(math.isfinite(c) for c in contributions)


def test_weights_not_summing_to_100():
    contributions = calculate_contributions([10.0, 30.0], [20.0, 20.0])
    assert all(math.isfinite(c) for c in contributions)
    assert contributions == pytest.approx([25.0, 75.0])


def test_length_mismatch_pads_with_zero():
    assert calculate_contributions([10.0, 5.0], [100.0]) == [100.0, 0.0]


def test_empty():
    assert calculate_contributions([], []) == []
