"""Pytest fixtures for plotting tests.

All tests in this directory require matplotlib, so we skip the entire
module if matplotlib is not available.
"""

from __future__ import annotations

import numpy as np
import pytest

# Skip all tests in this directory if matplotlib is not installed
pytest.importorskip("matplotlib")

# Use non-interactive backend for tests
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt


@pytest.fixture
def dopplergram() -> np.ndarray:
    """A 20x30 velocity map: a tilted plane from -15 to +15 km/s with a NaN hole."""
    yy, xx = np.mgrid[0:20, 0:30]
    image = (xx - 14.5) + 0.1 * (yy - 9.5)
    image[5, 5] = np.nan
    return image


@pytest.fixture(autouse=True)
def close_figures():
    """Close all figures after each test to avoid memory leaks."""
    yield
    plt.close("all")
