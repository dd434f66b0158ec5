"""Shared fixtures."""

import random

import pytest


@pytest.fixture
def rng():
    """Deterministic RNG for the property loops."""
    return random.Random(0)
