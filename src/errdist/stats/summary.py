"""
Summary Statistics
==================

Location and spread estimators over a finite, non-empty observation sample.

Notes
-----
- Inputs may be any sequence of reals or a NumPy array; arrays are flattened.
- :func:`std` applies Bessel's correction (``ddof=1``); a single observation
  has zero spread.
- :func:`percentile` interpolates linearly between the order statistics that
  bracket the fractional index ``p * (n - 1)``, so ``p = 0`` is the minimum
  and ``p = 1`` the maximum. :func:`median` is ``percentile(xs, 0.5)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from errdist.errors import EmptySampleError, NumericDomainError

if TYPE_CHECKING:
    from errdist.types import NumericArray, Observations


def as_sample(xs: Observations, what: str = "sample") -> NumericArray:
    """
    Convert observations to a flat ``float64`` array.

    Parameters
    ----------
    xs : Sequence[float] or numpy.ndarray
        Observations.
    what : str, default "sample"
        Name of the requested statistic, used in the error message.

    Returns
    -------
    NumericArray
        1-D copy-free view (when possible) of the observations.

    Raises
    ------
    EmptySampleError
        If there are no observations.
    """
    arr = np.asarray(xs, dtype=np.float64).ravel()
    if arr.size == 0:
        raise EmptySampleError(what)
    return arr


def mean(xs: Observations) -> float:
    """Arithmetic mean of the observations."""
    arr = as_sample(xs, "mean")
    # Shifted by the first observation: constant samples give back that value exactly.
    return float(arr[0] + np.mean(arr - arr[0]))


def std(xs: Observations) -> float:
    """
    Sample standard deviation of the observations.

    Returns ``0.0`` for a single observation instead of the undefined
    ``ddof=1`` estimate.
    """
    arr = as_sample(xs, "standard deviation")
    if arr.size == 1:
        return 0.0
    return float(np.std(arr - arr[0], ddof=1))


def percentile(xs: Observations, p: float) -> float:
    """
    Value at rank ``p`` of the ascending observations.

    Parameters
    ----------
    xs : Sequence[float] or numpy.ndarray
        Observations.
    p : float
        Rank in ``[0, 1]``.

    Returns
    -------
    float
        Linearly interpolated order statistic.

    Raises
    ------
    EmptySampleError
        If there are no observations.
    NumericDomainError
        If ``p`` is outside ``[0, 1]`` or NaN.
    """
    if math.isnan(p) or not 0.0 <= p <= 1.0:
        raise NumericDomainError(f"Percentile rank must be in [0, 1], got {p}")

    arr = as_sample(xs, "percentile")
    return float(np.quantile(arr, p, method="linear"))


def median(xs: Observations) -> float:
    """Median of the observations (``percentile(xs, 0.5)``)."""
    return percentile(xs, 0.5)


__all__ = [
    "as_sample",
    "mean",
    "median",
    "percentile",
    "std",
]
