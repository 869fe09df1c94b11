"""
Pytest fixtures for SigProc tests.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so failures are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_signal(rng):
    """Factory for complex random signals of a given length."""
    def make(n):
        return rng.standard_normal(n) + 1j * rng.standard_normal(n)
    return make
