"""Primitive root (generator) discovery for the multiplicative group mod p.

A generator has order exactly p - 1. The test walks every proper divisor
f of p - 1 and rejects g if g^((p-1)/f) == 1. Checking only the prime
divisors would suffice; the full divisor walk is a superset of that check.

Candidates are drawn at random from [2, p-2]. About phi(p-1)/(p-1) of
them are generators, so the search ends quickly in expectation but has
no built-in cap. Pass max_attempts to bound it.
"""

import logging
from itertools import islice

from mulgroup.divisors import prime_factors, proper_divisors
from mulgroup.errors import ErrorKind, SubgroupError
from mulgroup.modarith import mod_exp, rand_between

logger = logging.getLogger(__name__)


def sample_candidate(p: int, rng=None) -> int:
    """Uniform generator candidate from [2, p-2]."""
    if p < 5:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"no candidates in [2, p-2] for p={p}")
    return rand_between(2, p - 2, rng)


def candidate_stream(p: int, rng=None):
    """Endless iterator of generator candidates for p."""
    while True:
        yield sample_candidate(p, rng)


def is_generator(p: int, g: int, divisors: list = None) -> bool:
    """True if g generates the full multiplicative group mod prime p.

    divisors: optional precomputed proper_divisors(p - 1), so a search
    over many candidates scans p - 1 only once.
    """
    if g % p == 0:
        return False
    order = p - 1
    if divisors is None:
        divisors = proper_divisors(order)
    for f in divisors:
        if mod_exp(g, order // f, p) == 1:
            return False
    return True


def find_generator(p: int, rng=None, candidates=None,
                   max_attempts: int = None) -> int:
    """Search for a generator of the multiplicative group mod prime p.

    Args:
        p: A prime modulus.
        rng: Optional random.Random instance for deterministic tests.
        candidates: Optional iterable of residues to try instead of
            random samples.
        max_attempts: Optional cap on the number of candidates tried.

    Returns:
        The first candidate that passes is_generator.
    """
    if p < 2:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"p must be >= 2, got {p}")
    if max_attempts is not None and max_attempts < 1:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"max_attempts must be >= 1, got {max_attempts}")
    # [2, p-2] is empty for p < 5; p - 1 is the lone generator there
    if p < 5 and candidates is None:
        return p - 1

    source = candidates if candidates is not None else candidate_stream(p, rng)
    if max_attempts is not None:
        source = islice(source, max_attempts)

    order_divisors = proper_divisors(p - 1)
    attempts = 0
    for g in source:
        attempts += 1
        if is_generator(p, g, order_divisors):
            logger.debug("generator %d mod %d found after %d attempt(s)",
                         g, p, attempts)
            return g

    raise SubgroupError(ErrorKind.GENERATOR_NOT_FOUND,
                        f"p={p} after {attempts} attempt(s)")


def multiplicative_order(g: int, p: int) -> int:
    """Smallest d > 0 with g^d == 1 mod prime p."""
    if g % p == 0:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"{g} is not invertible mod {p}")
    order = p - 1
    for q in prime_factors(order):
        while order % q == 0 and mod_exp(g, order // q, p) == 1:
            order //= q
    return order
