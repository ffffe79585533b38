"""
Tests for Summary Statistics
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from errdist.errors import EmptySampleError, NumericDomainError
from errdist.stats import as_sample, mean, median, percentile, std

NINE = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]


class TestLocation:
    def test_mean(self) -> None:
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_mean_of_array(self) -> None:
        assert mean(np.array([[1.0, 2.0], [3.0, 6.0]])) == 3.0

    def test_median_odd(self) -> None:
        assert median(NINE) == 5.0

    def test_median_even_interpolates(self) -> None:
        assert median([4.0, 1.0, 3.0, 2.0]) == 2.5

    def test_median_ignores_order(self) -> None:
        assert median([9.0, 1.0, 5.0, 3.0, 7.0]) == 5.0


class TestSpread:
    def test_std_uses_bessel_correction(self) -> None:
        assert std(NINE) == pytest.approx(math.sqrt(7.5))

    def test_std_single_observation(self) -> None:
        assert std([4.2]) == 0.0

    def test_std_matches_numpy(self) -> None:
        values = np.random.default_rng(3).normal(10.0, 2.0, 500)

        assert std(values) == pytest.approx(float(np.std(values, ddof=1)), rel=1e-12)


@pytest.mark.parametrize("value", [0.1, -3.7, 1e6 + 0.3, 1234.5678])
def test_constant_sample_is_exact(value: float) -> None:
    values = [value] * 7

    assert mean(values) == value
    assert std(values) == 0.0
    assert median(values) == value
    assert percentile(values, 0.159) == value
    assert percentile(values, 0.841) == value


class TestPercentile:
    def test_extremes(self) -> None:
        values = [3.0, -1.0, 8.5, 2.0]

        assert percentile(values, 0.0) == -1.0
        assert percentile(values, 1.0) == 8.5

    def test_linear_interpolation(self) -> None:
        assert percentile([10.0, 20.0], 0.25) == pytest.approx(12.5)
        assert percentile(NINE, 0.841) == pytest.approx(7.728)
        assert percentile(NINE, 0.159) == pytest.approx(2.272)

    def test_single_observation(self) -> None:
        assert percentile([4.0], 0.3) == 4.0

    def test_deterministic(self) -> None:
        values = list(np.random.default_rng(0).normal(size=101))

        assert percentile(values, 0.37) == percentile(values, 0.37)

    def test_does_not_modify_input(self) -> None:
        values = np.array([3.0, 1.0, 2.0])
        percentile(values, 0.5)

        np.testing.assert_array_equal(values, [3.0, 1.0, 2.0])

    @pytest.mark.parametrize("p", [-0.01, 1.01, math.nan])
    def test_rank_out_of_range(self, p: float) -> None:
        with pytest.raises(NumericDomainError):
            percentile(NINE, p)


@pytest.mark.parametrize("func", [mean, std, median, lambda xs: percentile(xs, 0.5)])
@pytest.mark.parametrize("empty", [[], (), np.array([])])
def test_empty_sample(func, empty) -> None:
    with pytest.raises(EmptySampleError):
        func(empty)


def test_as_sample_flattens() -> None:
    arr = as_sample([[1, 2], [3, 4]])

    assert arr.dtype == np.float64
    assert arr.shape == (4,)
