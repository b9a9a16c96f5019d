"""Miller-Rabin probabilistic primality test.

A composite survives one round with probability at most 1/4, so `rounds`
independent witnesses bound the false-positive rate by 4^-rounds.
"""

import logging

from mulgroup.errors import ErrorKind, SubgroupError
from mulgroup.modarith import mod_exp, mod_mul, rand_between

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 5


def decompose(n: int) -> tuple:
    """Write n - 1 = 2^r * s with s odd. Returns (r, s)."""
    if n < 2:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"n must be >= 2, got {n}")
    r = 0
    s = n - 1
    while s % 2 == 0:
        r += 1
        s //= 2
    return r, s


def _witness_passes(a: int, n: int, r: int, s: int) -> bool:
    """One Miller-Rabin round with witness a. False means n is composite."""
    x = mod_exp(a, s, n)
    if x == 1 or x == n - 1:
        return True
    # r == 0 (even n) squares zero times
    for _ in range(max(r - 1, 0)):
        x = mod_mul(x, x, n)
        if x == n - 1:
            return True
    return False


def is_prime(n: int, rounds: int = DEFAULT_ROUNDS, rng=None) -> bool:
    """Probabilistic primality check.

    Args:
        n: Integer to test.
        rounds: Number of random witnesses; must be >= 1.
        rng: Optional random.Random instance for deterministic tests.

    Returns:
        False if n is certainly composite (or <= 1), True if n is
        probably prime.
    """
    if rounds < 1:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"rounds must be >= 1, got {rounds}")
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True

    r, s = decompose(n)
    for _ in range(rounds):
        a = rand_between(2, n - 2, rng)
        if not _witness_passes(a, n, r, s):
            logger.debug("witness %d proves %d composite", a, n)
            return False
    return True
