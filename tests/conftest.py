"""Pytest configuration and fixtures for Saturation Control tests."""

import pytest
from pathlib import Path

from core.config import SaturationRange


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def saturation_range():
    """Return a freshly constructed SaturationRange with default bounds."""
    return SaturationRange()


class FixedRandom:
    """Random source returning a fixed value from random()."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for random sources that always return the given value."""
    return FixedRandom
