"""Shared fixtures for mulgroup tests."""

import logging
import random
import pytest


SMALL_PRIMES = [
    7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97, 101, 103,
]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (large sweeps)")


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def small_primes():
    return list(SMALL_PRIMES)


@pytest.fixture
def small_composites():
    return [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 27, 33, 35, 49]


@pytest.fixture(autouse=True)
def _reset_cli_logger():
    """The CLI installs a stream handler; drop it so it never outlives capsys."""
    yield
    logger = logging.getLogger("mulgroup")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
