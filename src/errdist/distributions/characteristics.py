"""
Characteristics API
===================

Lightweight wrapper for calling a distribution's query (e.g., ``pdf``,
``cdf``, ``ppf``) by name.

This module exposes a generic helper, :class:`GenericCharacteristic`, that
resolves a :class:`~errdist.types.CharacteristicName` to the bound query
method of a :class:`~errdist.distributions.distribution.Distribution`, plus
ready-made instances for every name.

Notes
-----
- ``density_max`` / ``density_min`` are density-level bounds and ``ppf`` /
  ``isf`` are quantiles; they resolve to different methods.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from errdist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable

    from errdist.distributions.distribution import Distribution
    from errdist.types import Query, Result

_METHODS: dict[CharacteristicName, str] = {
    CharacteristicName.PDF: "probability_density_at",
    CharacteristicName.CDF: "cumulative_probability_at",
    CharacteristicName.PPF: "value_at_cumulative_probability",
    CharacteristicName.SF: "descending_cumulative_probability_at",
    CharacteristicName.ISF: "value_at_descending_cumulative_probability",
    CharacteristicName.DENSITY_MAX: "max_value_for_probability",
    CharacteristicName.DENSITY_MIN: "min_value_for_probability",
}


@dataclass(slots=True, frozen=True)
class GenericCharacteristic:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : CharacteristicName or str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Raises
    ------
    ValueError
        If ``name`` is not a known characteristic.

    Examples
    --------
    >>> from errdist.distributions.characteristics import GenericCharacteristic
    >>> from errdist.distributions.normal import NormalDistribution
    >>> PDF = GenericCharacteristic("pdf")
    >>> round(PDF(NormalDistribution(0.0, 1.0), 0.0), 7)
    0.3989423
    """

    name: CharacteristicName

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", CharacteristicName(self.name))

    def resolve(self, distribution: "Distribution") -> "Callable[[Query], Result]":
        """Return the bound query method of ``distribution``."""
        return cast("Callable[[Query], Result]", getattr(distribution, _METHODS[self.name]))

    def __call__(self, distribution: "Distribution", data: "Query") -> "Result":
        """
        Evaluate the characteristic on the given data.

        Parameters
        ----------
        distribution : Distribution
            Distribution answering the query.
        data : float or array
            Argument of the query.

        Returns
        -------
        float or NumericArray
            Characteristic value at ``data``.
        """
        return self.resolve(distribution)(data)


PDF = GenericCharacteristic(CharacteristicName.PDF)
CDF = GenericCharacteristic(CharacteristicName.CDF)
PPF = GenericCharacteristic(CharacteristicName.PPF)
SF = GenericCharacteristic(CharacteristicName.SF)
ISF = GenericCharacteristic(CharacteristicName.ISF)
DENSITY_MAX = GenericCharacteristic(CharacteristicName.DENSITY_MAX)
DENSITY_MIN = GenericCharacteristic(CharacteristicName.DENSITY_MIN)


def evaluate(
    distribution: "Distribution", name: CharacteristicName | str, value: "Query"
) -> "Result":
    """Evaluate the characteristic called ``name`` of ``distribution`` at ``value``."""
    return GenericCharacteristic(CharacteristicName(name))(distribution, value)


__all__ = [
    "CDF",
    "DENSITY_MAX",
    "DENSITY_MIN",
    "GenericCharacteristic",
    "ISF",
    "PDF",
    "PPF",
    "SF",
    "evaluate",
]
