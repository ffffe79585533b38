"""
Normal Distribution
===================

Gaussian model over measurement errors, parametrized by mean and standard
deviation, with two calibration constructors over observation samples.

A standard deviation of zero turns the model into a point mass (Dirac) at the
mean. The point-mass branch answers every query through fixed conventions
rather than raising:

- density is ``1`` at the mean and ``0`` elsewhere;
- the cumulative function is ``0`` below the mean, ``0.5`` at it and ``1``
  above it, and the descending one mirrors it;
- quantiles are ``-max_float`` below ``0.5``, the mean at ``0.5`` and
  ``+max_float`` above it (largest finite double rather than ``inf``);
- the density-level bounds collapse onto the mean.

The ``0.5`` at the atom and the extreme-value quantiles are a convention kept
for compatibility with existing calibration results, not a mathematical
necessity.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

from errdist.errors import NumericDomainError
from errdist.stats import summary
from errdist.types import Interval1D

if TYPE_CHECKING:
    from errdist.types import NumericArray, Observations, Query, Result

logger = logging.getLogger(__name__)

_SQRT_2PI = math.sqrt(2 * math.pi)
_MAX_FLOAT = sys.float_info.max


def _as_query(x: Query) -> NumericArray:
    return np.asarray(x, dtype=np.float64)


def _as_result(values: NumericArray, query: NumericArray) -> Result:
    """Return a float for scalar queries and an array otherwise."""
    if query.ndim == 0:
        return float(values)
    return cast("NumericArray", np.asarray(values, dtype=np.float64))


def _check_probability(p: NumericArray, what: str) -> None:
    """
    Validate cumulative probabilities.

    Raises
    ------
    NumericDomainError
        If any value is NaN or outside ``[0, 1]``.
    """
    invalid = np.isnan(p) | (p < 0.0) | (p > 1.0)
    if np.any(invalid):
        bad = p[invalid] if p.ndim else p
        raise NumericDomainError(f"{what} must be in [0, 1], got {bad}")


@dataclass(frozen=True, slots=True)
class NormalDistribution:
    """
    Normal (Gaussian) distribution, or a point mass when ``std == 0``.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mean : float
        Location parameter μ.
    std : float
        Scale parameter σ, non-negative. Zero selects the point-mass branch.

    Raises
    ------
    NumericDomainError
        If ``mean`` is not finite, or ``std`` is negative or not finite.
    """

    mean: float
    std: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.mean):
            raise NumericDomainError(f"mean must be finite, got {self.mean}")
        if not math.isfinite(self.std) or self.std < 0:
            raise NumericDomainError(f"std must be finite and >= 0, got {self.std}")
        object.__setattr__(self, "mean", float(self.mean))
        object.__setattr__(self, "std", float(self.std))

    @classmethod
    def from_sample(cls, xs: Observations) -> NormalDistribution:
        """
        Calibrate on the mean and sample standard deviation of observations.

        Parameters
        ----------
        xs : Sequence[float] or numpy.ndarray
            Observations, e.g. measurement errors.

        Returns
        -------
        NormalDistribution
            Distribution with ``mean = mean(xs)`` and ``std = std(xs)``.

        Raises
        ------
        EmptySampleError
            If there are no observations.
        """
        arr = summary.as_sample(xs, "normal calibration")
        distribution = cls(summary.mean(arr), summary.std(arr))
        _log_calibration("classical", arr.size, distribution)
        return distribution

    @classmethod
    def from_sample_robust(cls, xs: Observations) -> NormalDistribution:
        """
        Calibrate on the median and the 15.9 %-84.1 % percentile spread.

        For a Gaussian the 15.9th and 84.1th percentiles sit one standard
        deviation below and above the mean, so half their distance estimates
        ``std`` while ignoring outliers in the tails. The estimate assumes a
        single mode centred on the median.

        Parameters
        ----------
        xs : Sequence[float] or numpy.ndarray
            Observations, e.g. measurement errors.

        Returns
        -------
        NormalDistribution
            Distribution with ``mean = median(xs)`` and
            ``std = (percentile(xs, 0.841) - percentile(xs, 0.159)) / 2``.

        Raises
        ------
        EmptySampleError
            If there are no observations.
        """
        arr = summary.as_sample(xs, "robust normal calibration")
        spread = summary.percentile(arr, 0.841) - summary.percentile(arr, 0.159)
        distribution = cls(summary.median(arr), spread / 2)
        _log_calibration("robust", arr.size, distribution)
        return distribution

    @property
    def is_degenerate(self) -> bool:
        """Whether all mass sits on the mean (``std == 0``)."""
        return self.std == 0

    @property
    def var(self) -> float:
        """Variance ``std ** 2``."""
        return self.std**2

    @property
    def support(self) -> Interval1D:
        """The single point ``{mean}`` when degenerate, the real line otherwise."""
        if self.is_degenerate:
            return Interval1D(self.mean, self.mean)
        return Interval1D()

    def probability_density_at(self, x: Query) -> Result:
        """
        Density at ``x``.

        In the point-mass branch this is ``1.0`` at the mean and ``0.0``
        elsewhere; that is a convention, it does not integrate to one.
        """
        arr = _as_query(x)
        if self.is_degenerate:
            values = np.where(arr == self.mean, 1.0, 0.0)
            values = np.where(np.isnan(arr), np.nan, values)
        else:
            coefficient = 1.0 / (self.std * _SQRT_2PI)
            exponent = -((arr - self.mean) ** 2) / (2 * self.std**2)
            values = coefficient * np.exp(exponent)
        return _as_result(values, arr)

    def _density_offset(self, p: NumericArray) -> NumericArray:
        """Distance from the mean at which the density equals ``p``."""
        argument = self.std * p * _SQRT_2PI
        invalid = np.isnan(argument) | (argument <= 0.0) | (argument > 1.0)
        if np.any(invalid):
            bad = p[invalid] if p.ndim else p
            raise NumericDomainError(
                f"Density level must be in (0, {1.0 / (self.std * _SQRT_2PI)}], got {bad}"
            )
        return cast("NumericArray", np.sqrt(-2 * self.std**2 * np.log(argument)))

    def max_value_for_probability(self, p: Query) -> Result:
        """
        Upper value whose density equals ``p``.

        Parameters
        ----------
        p : float or array
            Density level, not a cumulative probability.

        Returns
        -------
        float or NumericArray
            ``mean + sqrt(-2σ² ln(σ p √(2π)))``, or ``mean`` when degenerate.

        Raises
        ------
        NumericDomainError
            If ``σ p √(2π)`` is not in ``(0, 1]``, i.e. no point has that density.
        """
        arr = _as_query(p)
        if self.is_degenerate:
            return _as_result(np.full(arr.shape, self.mean), arr)
        return _as_result(self.mean + self._density_offset(arr), arr)

    def min_value_for_probability(self, p: Query) -> Result:
        """Lower counterpart of :meth:`max_value_for_probability`."""
        arr = _as_query(p)
        if self.is_degenerate:
            return _as_result(np.full(arr.shape, self.mean), arr)
        return _as_result(self.mean - self._density_offset(arr), arr)

    def cumulative_probability_at(self, x: Query) -> Result:
        """``P(X <= x)``; ``0.5`` exactly at the atom of a point mass."""
        arr = _as_query(x)
        if self.is_degenerate:
            values = np.select(
                [np.isnan(arr), arr < self.mean, arr == self.mean],
                [np.nan, 0.0, 0.5],
                default=1.0,
            )
        else:
            values = ndtr((arr - self.mean) / self.std)
        return _as_result(values, arr)

    def value_at_cumulative_probability(self, p: Query) -> Result:
        """
        Quantile function.

        Parameters
        ----------
        p : float or array
            Cumulative probability in ``[0, 1]``.

        Returns
        -------
        float or NumericArray
            ``x`` such that ``P(X <= x) = p``. In the continuous branch ``p = 0``
            and ``p = 1`` map to ``-inf`` and ``inf``. A point mass returns the
            largest finite double with the sign of ``p - 0.5``, and the mean at
            ``p = 0.5``.

        Raises
        ------
        NumericDomainError
            If ``p`` is outside ``[0, 1]``.
        """
        arr = _as_query(p)
        _check_probability(arr, "Cumulative probability")
        if self.is_degenerate:
            values = np.select([arr < 0.5, arr == 0.5], [-_MAX_FLOAT, self.mean], default=_MAX_FLOAT)
        else:
            values = self.mean + self.std * ndtri(arr)
        return _as_result(values, arr)

    def descending_cumulative_probability_at(self, x: Query) -> Result:
        """``P(X > x) = 1 - P(X <= x)``; ``0.5`` exactly at the atom of a point mass."""
        arr = _as_query(x)
        if self.is_degenerate:
            values = np.select(
                [np.isnan(arr), arr > self.mean, arr == self.mean],
                [np.nan, 0.0, 0.5],
                default=1.0,
            )
        else:
            values = ndtr((self.mean - arr) / self.std)
        return _as_result(values, arr)

    def value_at_descending_cumulative_probability(self, p: Query) -> Result:
        """
        Inverse of :meth:`descending_cumulative_probability_at`.

        Raises
        ------
        NumericDomainError
            If ``p`` is outside ``[0, 1]``.
        """
        arr = _as_query(p)
        _check_probability(arr, "Descending cumulative probability")
        if self.is_degenerate:
            values = np.select([arr < 0.5, arr == 0.5], [_MAX_FLOAT, self.mean], default=-_MAX_FLOAT)
        else:
            values = self.mean - self.std * ndtri(arr)
        return _as_result(values, arr)

    def density_interval(self, p: float) -> Interval1D:
        """
        Closed interval where the density is at least ``p``.

        Bounded by :meth:`min_value_for_probability` and
        :meth:`max_value_for_probability`; a point mass yields ``[mean, mean]``.
        """
        return Interval1D(
            float(self.min_value_for_probability(p)),
            float(self.max_value_for_probability(p)),
        )

    def central_interval(self, coverage: float) -> Interval1D:
        """
        Quantile interval holding ``coverage`` of the probability mass.

        Parameters
        ----------
        coverage : float
            Mass in ``[0, 1]`` between the bounds, split evenly on both tails.

        Returns
        -------
        Interval1D
            ``[ppf((1 - c) / 2), ppf((1 + c) / 2)]``.

        Raises
        ------
        NumericDomainError
            If ``coverage`` is outside ``[0, 1]``.
        """
        _check_probability(_as_query(coverage), "Coverage")
        return Interval1D(
            float(self.value_at_cumulative_probability((1 - coverage) / 2)),
            float(self.value_at_cumulative_probability((1 + coverage) / 2)),
        )

    def sample(self, n: int, rng: np.random.Generator | None = None) -> NumericArray:
        """
        Draw ``n`` independent values.

        Parameters
        ----------
        n : int
            Number of draws.
        rng : numpy.random.Generator, optional
            Source of randomness; a fresh default generator when omitted.

        Returns
        -------
        NumericArray
            1-D array of length ``n``.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        if self.is_degenerate:
            return np.full(n, self.mean)
        generator = rng if rng is not None else np.random.default_rng()
        return generator.normal(self.mean, self.std, size=n)


def _log_calibration(method: str, size: int, distribution: NormalDistribution) -> None:
    logger.debug(
        "%s normal calibration on %d observations: mean=%g std=%g",
        method,
        size,
        distribution.mean,
        distribution.std,
    )
    if distribution.is_degenerate and size > 1:
        logger.info(
            "%s calibration on %d observations gave zero spread; using a point mass at %g",
            method,
            size,
            distribution.mean,
        )


__all__ = [
    "NormalDistribution",
]
