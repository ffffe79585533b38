"""
errdist
=======

Probability models for empirical measurement errors: summary statistics,
the distribution interface, the normal / point-mass model and its
calibrators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .calibration import *
from .calibration import __all__ as _calibration_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("errdist")
__all__ = [
    "__version__",
    *_calibration_all,
    *_distr_all,
    *_errors_all,
    *_types_all,
]

del _calibration_all
del _distr_all
del _errors_all
del _types_all
