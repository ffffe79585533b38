"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: the set of
queries every univariate distribution answers, and helpers that work on any
object satisfying it.

Notes
-----
- Implementations satisfy the protocol structurally; they do not need to
  inherit from it.
- ``max_value_for_probability`` / ``min_value_for_probability`` invert the
  *density* on each side of the mode. They are not quantiles; use
  ``value_at_cumulative_probability`` for that.
- Every query accepts a scalar or an array and mirrors the input kind in its
  result.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from errdist.stats.summary import as_sample

if TYPE_CHECKING:
    from errdist.types import Interval1D, Observations, Query, Result


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by calibrators and consumers."""

    @property
    def support(self) -> Interval1D: ...

    def probability_density_at(self, x: Query) -> Result:
        """Density at ``x``."""
        ...

    def max_value_for_probability(self, p: Query) -> Result:
        """Upper value whose density equals ``p``."""
        ...

    def min_value_for_probability(self, p: Query) -> Result:
        """Lower value whose density equals ``p``."""
        ...

    def cumulative_probability_at(self, x: Query) -> Result:
        """``P(X <= x)``."""
        ...

    def value_at_cumulative_probability(self, p: Query) -> Result:
        """Quantile function, the inverse of :meth:`cumulative_probability_at`."""
        ...

    def descending_cumulative_probability_at(self, x: Query) -> Result:
        """``P(X > x) = 1 - F(x)``."""
        ...

    def value_at_descending_cumulative_probability(self, p: Query) -> Result:
        """Inverse of :meth:`descending_cumulative_probability_at`."""
        ...


def log_likelihood(distribution: Distribution, values: Observations) -> float:
    """
    Log-likelihood of observations under a distribution.

    Parameters
    ----------
    distribution : Distribution
        Model whose density is evaluated.
    values : Sequence[float] or numpy.ndarray
        Observations.

    Returns
    -------
    float
        ``sum(log(pdf(x)))``; ``-inf`` if any observation has zero density.

    Raises
    ------
    EmptySampleError
        If there are no observations.
    """
    arr = as_sample(values, "log-likelihood")
    densities = np.asarray(distribution.probability_density_at(arr), dtype=np.float64)

    if np.any(densities <= 0.0):
        return float("-inf")
    return float(np.sum(np.log(densities)))


__all__ = [
    "Distribution",
    "log_likelihood",
]
