from __future__ import annotations

import math

import numpy as np
import pytest

from eda_toolkit.stats import InvalidDomainError, binomial_coefficient, hypergeometric_pmf


def test_binomial_coefficient_is_zero_outside_range() -> None:
    assert binomial_coefficient(5, 2) == 10
    assert binomial_coefficient(5, 6) == 0
    assert binomial_coefficient(5, -1) == 0
    assert binomial_coefficient(0, 0) == 1


def test_jackpot_probability_for_six_from_forty_eight() -> None:
    assert hypergeometric_pmf(48, 6, 6) == 1 / math.comb(48, 6)
    assert hypergeometric_pmf(48, 6, 6) == pytest.approx(1 / 12271512)


@pytest.mark.parametrize("total, slots", [(0, 0), (5, 5), (10, 3), (48, 6), (49, 6), (7, 4)])
def test_probabilities_sum_to_one(total: int, slots: int) -> None:
    probabilities = [hypergeometric_pmf(total, slots, matched) for matched in range(slots + 1)]
    assert sum(probabilities) == pytest.approx(1.0)
    assert all(0.0 <= value <= 1.0 for value in probabilities)


@pytest.mark.parametrize("matched", [-2, -1, 4, 10])
def test_match_count_outside_slots_has_zero_probability(matched: int) -> None:
    assert hypergeometric_pmf(10, 3, matched) == 0.0


def test_more_slots_than_population_has_zero_probability() -> None:
    assert hypergeometric_pmf(5, 7, 2) == 0.0


@pytest.mark.parametrize("total, slots", [(-1, 2), (5, -1)])
def test_negative_sizes_raise(total: int, slots: int) -> None:
    with pytest.raises(InvalidDomainError):
        hypergeometric_pmf(total, slots, 1)


@pytest.mark.parametrize("args", [(48.0, 6, 6), (48, 6, 2.5), (True, 1, 1)])
def test_non_integer_arguments_raise(args: tuple) -> None:
    with pytest.raises(TypeError):
        hypergeometric_pmf(*args)


def test_accepts_numpy_integers() -> None:
    assert hypergeometric_pmf(np.int64(48), np.int32(6), np.int64(6)) == hypergeometric_pmf(48, 6, 6)


def test_two_matches_in_a_small_draw() -> None:
    # C(3, 2) * C(7, 1) / C(10, 3)
    assert hypergeometric_pmf(10, 3, 2) == pytest.approx(21 / 120)
