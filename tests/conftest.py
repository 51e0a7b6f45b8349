"""Pytest configuration and fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from epiglyph.config import EpiglyphConfig, reset_config
from epiglyph.core import OutlinePath, analyze
from epiglyph.models import Curve


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def square_path():
    """Closed 10x10 square, counter-clockwise from the origin."""
    return OutlinePath([[(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]])


@pytest.fixture
def unit_circle_samples():
    """Four samples on the unit circle: 1, i, -1, -i."""
    return np.array([1 + 0j, 0 + 1j, -1 + 0j, 0 - 1j])


@pytest.fixture
def random_samples():
    """Reproducible noisy closed loop."""
    rng = np.random.default_rng(7)
    theta = np.linspace(0, 2 * np.pi, 96, endpoint=False)
    radius = 1 + 0.3 * rng.standard_normal(96)
    return radius * np.exp(1j * theta) + (0.5 - 0.25j)


@pytest.fixture
def make_curve():
    """Build a Curve straight from samples, skipping path sampling."""

    def _make(samples, path_length=1.0):
        samples = np.asarray(samples, dtype=complex)
        return Curve(samples=samples, terms=analyze(samples), path_length=path_length)

    return _make


@pytest.fixture
def small_config():
    """Small, fast settings for session and rendering tests."""
    return EpiglyphConfig(sample_count=64, term_count=16, width=200, height=100, fps=10)
