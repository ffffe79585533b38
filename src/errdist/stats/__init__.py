"""
Statistics subpackage

Summary statistics over observation samples used by the calibrators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .summary import as_sample, mean, median, percentile, std

__all__ = [
    "as_sample",
    "mean",
    "median",
    "percentile",
    "std",
]
