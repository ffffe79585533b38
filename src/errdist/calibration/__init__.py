"""
Calibration subpackage

Named calibrators turning observation samples into distributions, and the
global register they live in.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .configuration import (
    calibrate,
    configure_calibrators_register,
    reset_calibrators_register,
)
from .registry import CalibratorRegister

__all__ = [
    "CalibratorRegister",
    "calibrate",
    "configure_calibrators_register",
    "reset_calibrators_register",
]
