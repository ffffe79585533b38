"""
Tests for the Distribution protocol and protocol-level helpers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from errdist.distributions.distribution import Distribution, log_likelihood
from errdist.distributions.normal import NormalDistribution
from errdist.errors import EmptySampleError

from .base import UniformErrors


class TestDistributionProtocol:
    def test_normal_satisfies_protocol(self) -> None:
        assert isinstance(NormalDistribution(0.0, 1.0), Distribution)
        assert isinstance(NormalDistribution(0.0, 0.0), Distribution)

    def test_structural_implementation_satisfies_protocol(self) -> None:
        assert isinstance(UniformErrors(-1.0, 1.0), Distribution)

    def test_unrelated_object_does_not_satisfy_protocol(self) -> None:
        assert not isinstance(object(), Distribution)
        assert not isinstance([0.1, 0.2], Distribution)


class TestLogLikelihood:
    def test_normal_matches_scipy(self) -> None:
        values = np.array([-0.4, 0.0, 1.3, 2.2])
        distr = NormalDistribution(0.5, 1.2)

        expected = float(np.sum(norm.logpdf(values, loc=0.5, scale=1.2)))
        assert log_likelihood(distr, values) == pytest.approx(expected, rel=1e-12)

    def test_accepts_plain_sequences(self) -> None:
        distr = NormalDistribution(0.0, 1.0)

        assert log_likelihood(distr, [0.0]) == pytest.approx(-0.5 * math.log(2 * math.pi))

    def test_uniform_all_in_support(self) -> None:
        distr = UniformErrors(0.0, 1.0)
        # log L = sum log(1) = 0
        assert log_likelihood(distr, [0.1, 0.9, 0.3]) == pytest.approx(0.0, abs=1e-12)

    def test_uniform_out_of_support_is_minus_inf(self) -> None:
        distr = UniformErrors(0.0, 1.0)

        assert np.isneginf(log_likelihood(distr, [0.1, 1.5, 0.3]))

    def test_empty_sample(self) -> None:
        with pytest.raises(EmptySampleError):
            log_likelihood(NormalDistribution(0.0, 1.0), [])
