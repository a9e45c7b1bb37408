"""Shared fixtures for fproots tests."""

import random
import pytest
from fproots.gfp import PrimeField

P61 = (1 << 61) - 1  # Mersenne prime


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (large degree)")


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def gf7():
    return PrimeField(7)


@pytest.fixture
def gf101():
    return PrimeField(101)


@pytest.fixture
def gf61():
    return PrimeField(P61)


@pytest.fixture(params=[11, 101, 65537, P61])
def field(request):
    """Odd primes large enough to take the algebraic path."""
    return PrimeField(request.param)


@pytest.fixture
def sample_elements(rng, gf61):
    """10 random GF(2^61 - 1) elements for property testing."""
    return [gf61.rand_element(rng) for _ in range(10)]
