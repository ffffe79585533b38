"""
Distributions subpackage

Interfaces and implementations for the probability models calibrated on
measurement errors:

- distribution protocol and log-likelihood (:mod:`.distribution`);
- normal / point-mass model with calibration constructors (:mod:`.normal`);
- by-name query dispatch (:mod:`.characteristics`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .characteristics import GenericCharacteristic, evaluate
from .distribution import Distribution, log_likelihood
from .normal import NormalDistribution

__all__ = [
    # distribution
    "Distribution",
    "log_likelihood",
    # implementations
    "NormalDistribution",
    # characteristics
    "GenericCharacteristic",
    "evaluate",
]
