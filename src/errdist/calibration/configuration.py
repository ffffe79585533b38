"""
Calibrators Configuration
=========================

This module registers the built-in calibrators and exposes :func:`calibrate`,
the by-name entry point used by callers that derive tolerance windows from
measured errors:

- ``Normal`` / ``classical``: mean and sample standard deviation.
- ``Normal`` / ``robust``: median and half the 15.9 %-84.1 % percentile range.

Notes
-----
- Registration happens once, lazily, through :func:`configure_calibrators_register`.
- :func:`reset_calibrators_register` restores a clean state (used by tests).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING

from errdist.calibration.registry import CalibratorRegister
from errdist.distributions.normal import NormalDistribution
from errdist.types import CalibrationMethod, FamilyName

if TYPE_CHECKING:
    from errdist.distributions.distribution import Distribution
    from errdist.types import Observations


@lru_cache(maxsize=1)
def configure_calibrators_register() -> CalibratorRegister:
    """
    Register all built-in calibrators in the global registry.

    Returns
    -------
    CalibratorRegister
        The global registry of calibrators.
    """
    register = CalibratorRegister()
    register.register(FamilyName.NORMAL, CalibrationMethod.CLASSICAL, NormalDistribution.from_sample)
    register.register(
        FamilyName.NORMAL, CalibrationMethod.ROBUST, NormalDistribution.from_sample_robust
    )
    return register


def reset_calibrators_register() -> None:
    """
    Reset the cached calibrators registry.
    """
    configure_calibrators_register.cache_clear()
    CalibratorRegister._reset()


def calibrate(
    values: Observations,
    family: FamilyName | str = FamilyName.NORMAL,
    method: CalibrationMethod | str = CalibrationMethod.ROBUST,
) -> Distribution:
    """
    Calibrate a distribution on observations.

    Parameters
    ----------
    values : Sequence[float] or numpy.ndarray
        Observations, e.g. precursor mass errors.
    family : FamilyName or str, default "Normal"
        Distribution family to fit.
    method : CalibrationMethod or str, default "robust"
        Estimator used to derive the parameters.

    Returns
    -------
    Distribution
        The calibrated distribution.

    Raises
    ------
    ValueError
        If no calibrator is registered for ``family`` and ``method``.
    EmptySampleError
        If there are no observations.
    """
    calibrator = configure_calibrators_register().get(family, method)
    return calibrator(values)
