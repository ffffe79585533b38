"""
Global registry of calibrators using singleton pattern.

A calibrator turns an observation sample into a distribution. Calibrators are
keyed by distribution family and calibration method so that a caller can pick
an estimator by name, e.g. from a search-parameter setting.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ClassVar, TypeAlias

    from errdist.distributions.distribution import Distribution
    from errdist.types import Observations

    Calibrator: TypeAlias = Callable[[Observations], Distribution]

logger = logging.getLogger(__name__)


class CalibratorRegister:
    """
    Singleton registry of calibrators.

    Maps ``(family, method)`` pairs to callables building a distribution
    from observations.
    """

    _instance: ClassVar[CalibratorRegister | None] = None
    _calibrators: dict[tuple[str, str], Calibrator]

    def __new__(cls) -> CalibratorRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._calibrators = {}
        return cls._instance

    @classmethod
    def get(cls, family: str, method: str) -> Calibrator:
        """
        Retrieve a calibrator.

        Parameters
        ----------
        family : str
            Distribution family name, e.g. ``"Normal"``.
        method : str
            Calibration method name, e.g. ``"robust"``.

        Returns
        -------
        Callable
            Calibrator building a distribution from observations.

        Raises
        ------
        ValueError
            If no calibrator is registered under ``(family, method)``.
        """
        self = cls()
        key = (str(family), str(method))
        if key not in self._calibrators:
            raise ValueError(f"No {method} calibrator for family {family} found in register")
        return self._calibrators[key]

    @classmethod
    def register(cls, family: str, method: str, calibrator: Calibrator) -> None:
        """
        Register a calibrator.

        Raises
        ------
        ValueError
            If a calibrator is already registered under ``(family, method)``.
        """
        self = cls()
        key = (str(family), str(method))
        if key in self._calibrators:
            raise ValueError(f"{method} calibrator for family {family} already found in register")
        self._calibrators[key] = calibrator
        logger.debug("Registered %s calibrator for family %s", method, family)

    @classmethod
    def contains(cls, family: str, method: str) -> bool:
        return (str(family), str(method)) in cls()._calibrators

    @classmethod
    def methods(cls, family: str) -> list[str]:
        """Names of the calibration methods registered for ``family``."""
        return [method for fam, method in cls()._calibrators if fam == str(family)]

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance and all registered calibrators."""
        cls._instance = None
