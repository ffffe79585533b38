"""
Core Type Definitions
=====================

Numeric aliases, interval value objects and the name enumerations shared by
the summary statistics, the distributions and the calibration register.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for float arrays returned by distribution queries."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

Observations = Sequence[float] | NDArray[Any]
"""Type alias for an observation sample accepted by statistics and calibrators."""

Query = Number | NDArray[Any]
"""Type alias for a scalar or array argument of a distribution query."""

Result = float | NumericArray
"""Type alias for a distribution query result, mirroring the argument kind."""


class ContinuousSupportShape1D(Enum):
    """
    Enumeration of 1D interval shapes.

    Attributes
    ----------
    REAL_LINE
        Entire real line (-∞, ∞).
    RAY_LEFT
        Right-bounded ray (-∞, b].
    RAY_RIGHT
        Left-bounded ray [a, ∞).
    BOUNDED_INTERVAL
        Bounded interval [a, b].
    EMPTY
        Empty interval.
    SINGLE_POINT
        Single point {a}.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Used both for the support of a distribution and for the windows
    (density-level and quantile intervals) derived from it.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Open the interval at infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NDArray[Any]) -> BoolArray: ...

    def contains(self, x: Number | NDArray[Any]) -> bool | BoolArray:
        """
        Check if point(s) lie in the interval.

        Parameters
        ----------
        x : Number or array
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def width(self) -> float:
        """Distance between the endpoints (``inf`` for unbounded intervals)."""
        if self.is_empty:
            return 0.0
        return self.right - self.left

    @property
    def is_empty(self) -> bool:
        """Check if the interval contains no point."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """
        Get the topological shape of the interval.

        Returns
        -------
        ContinuousSupportShape1D
            Classification of the interval's shape.
        """
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        if self.left == -inf:
            if self.right == inf:
                return ContinuousSupportShape1D.REAL_LINE
            return ContinuousSupportShape1D.RAY_LEFT
        if self.right == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL


class CharacteristicName(StrEnum):
    """
    Names of the queries every distribution answers.

    ``DENSITY_MAX`` and ``DENSITY_MIN`` invert the density, they are not
    quantiles; ``PPF`` and ``ISF`` invert the cumulative functions.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    SF = "sf"
    ISF = "isf"
    DENSITY_MAX = "density_max"
    DENSITY_MIN = "density_min"


class FamilyName(StrEnum):
    NORMAL = "Normal"


class CalibrationMethod(StrEnum):
    """
    Estimators used to derive distribution parameters from observations.

    Attributes
    ----------
    CLASSICAL : str
        Mean and sample standard deviation.
    ROBUST : str
        Median and half the 15.9 %-84.1 % inter-percentile range.
    """

    CLASSICAL = "classical"
    ROBUST = "robust"


__all__ = [
    "BoolArray",
    "CalibrationMethod",
    "CharacteristicName",
    "ContinuousSupportShape1D",
    "FamilyName",
    "Interval1D",
    "Number",
    "NumPyNumber",
    "NumericArray",
    "Observations",
    "Query",
    "Result",
]
