"""
Common fixtures and utilities for distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np

from errdist.errors import NumericDomainError
from errdist.types import Interval1D


class BaseDistributionTest:
    """Base class for all distribution tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))


class UniformErrors:
    """
    Uniform distribution on ``[low, high]`` satisfying the Distribution protocol
    structurally, without inheriting from it.
    """

    def __init__(self, low: float, high: float) -> None:
        self.low = low
        self.high = high

    @property
    def support(self) -> Interval1D:
        return Interval1D(self.low, self.high)

    def _wrap(self, values: Any, query: Any) -> Any:
        return float(values) if np.ndim(query) == 0 else values

    def probability_density_at(self, x: Any) -> Any:
        arr = np.asarray(x, dtype=np.float64)
        inside = (arr >= self.low) & (arr <= self.high)
        return self._wrap(np.where(inside, 1.0 / (self.high - self.low), 0.0), x)

    def max_value_for_probability(self, p: Any) -> Any:
        return self._wrap(np.full(np.shape(p), self.high), p)

    def min_value_for_probability(self, p: Any) -> Any:
        return self._wrap(np.full(np.shape(p), self.low), p)

    def cumulative_probability_at(self, x: Any) -> Any:
        arr = np.asarray(x, dtype=np.float64)
        return self._wrap(np.clip((arr - self.low) / (self.high - self.low), 0.0, 1.0), x)

    def value_at_cumulative_probability(self, p: Any) -> Any:
        arr = np.asarray(p, dtype=np.float64)
        if np.any((arr < 0) | (arr > 1)):
            raise NumericDomainError("p must be in [0, 1]")
        return self._wrap(self.low + arr * (self.high - self.low), p)

    def descending_cumulative_probability_at(self, x: Any) -> Any:
        return 1.0 - self.cumulative_probability_at(x)

    def value_at_descending_cumulative_probability(self, p: Any) -> Any:
        return self.value_at_cumulative_probability(1.0 - np.asarray(p, dtype=np.float64))
