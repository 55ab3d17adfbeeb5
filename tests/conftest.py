"""Pytest configuration and shared fixtures."""

import math
import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting finite test numbers."""
    return [
        0.0,
        -0.0,
        1,
        -1,
        0.5,
        -0.5,
        100,
        -100,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        5e-324,  # Smallest subnormal
        0.1 + 0.2,  # Floating point edge case
    ]


@pytest.fixture
def non_finite_numbers():
    """Provide the IEEE 754 values that are not finite."""
    return [math.inf, -math.inf, math.nan]
