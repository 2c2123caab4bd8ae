# test_dice_distribution.py
from collections import Counter

import pytest

from dice_roller import Roller

# chi-squared critical value, 5 degrees of freedom, p = 0.001
_CHI2_CRIT_DF5 = 20.515


@pytest.fixture
def roller():
    return Roller(seed=20240601)


@pytest.mark.slow
def test_single_d6_is_uniform(roller):
    n = 10_000
    counts = Counter(roller.roll_single(6) for _ in range(n))
    assert set(counts) == {1, 2, 3, 4, 5, 6}
    expected = n / 6
    chi2 = sum((counts[face] - expected) ** 2 / expected for face in range(1, 7))
    assert chi2 < _CHI2_CRIT_DF5


@pytest.mark.slow
def test_dice_within_a_roll_are_uniform(roller):
    counts: Counter[int] = Counter()
    for _ in range(2_500):
        counts.update(roller.roll_with_modifier(4, 6, 0).rolls)
    n = sum(counts.values())
    expected = n / 6
    chi2 = sum((counts[face] - expected) ** 2 / expected for face in range(1, 7))
    assert chi2 < _CHI2_CRIT_DF5


@pytest.mark.slow
def test_advantage_and_disadvantage_skew_the_mean(roller):
    n = 10_000
    plain = sum(roller.roll_single(20) for _ in range(n)) / n
    adv = sum(roller.roll_with_advantage(20) for _ in range(n)) / n
    dis = sum(roller.roll_with_disadvantage(20) for _ in range(n)) / n
    # Expected: 13.825 / 10.5 / 7.175
    assert dis < plain < adv
    assert 13.3 < adv < 14.3
    assert 6.7 < dis < 7.7


@pytest.mark.slow
def test_advantage_draws_are_independent(roller):
    # Two independent d6 draws both land on 1 (or both on 6) about 1 time in 36;
    # a reused single draw would do so 1 time in 6.
    highs = [roller.roll_with_advantage(6) for _ in range(500)]
    lows = [roller.roll_with_disadvantage(6) for _ in range(500)]
    assert highs.count(1) < 40
    assert lows.count(6) < 40
