"""
Exceptions raised by statistics, distributions and calibrators.

Both errors derive from :class:`ValueError`, so callers catching invalid
parameter errors keep working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class EmptySampleError(ValueError):
    """A statistic or calibrator was given zero observations."""

    def __init__(self, what: str = "sample") -> None:
        super().__init__(f"Cannot compute {what} of an empty sample")


class NumericDomainError(ValueError):
    """An argument lies outside the domain supported by the computation."""


__all__ = [
    "EmptySampleError",
    "NumericDomainError",
]
