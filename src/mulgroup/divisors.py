"""Divisor enumeration for the group order p - 1.

divisors() scans 1..k linearly. That scan is the practical ceiling on the
size of p this package handles; past DIVISOR_SCAN_LIMIT a warning is
logged on every call.
"""

import logging

from mulgroup.errors import ErrorKind, SubgroupError

logger = logging.getLogger(__name__)

DIVISOR_SCAN_LIMIT = 10 ** 7


def divisors(k: int) -> list:
    """All positive divisors of k in ascending order, starting at 1 and ending at k."""
    if k < 1:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"k must be >= 1, got {k}")
    if k > DIVISOR_SCAN_LIMIT:
        logger.warning("linear divisor scan of %d exceeds limit %d; "
                       "expect this to be slow", k, DIVISOR_SCAN_LIMIT)
    return [i for i in range(1, k + 1) if k % i == 0]


def proper_divisors(k: int) -> list:
    """Divisors of k other than 1 and k itself."""
    return [d for d in divisors(k) if d != 1 and d != k]


def prime_factors(k: int) -> list:
    """Distinct prime factors of k by trial division, ascending."""
    if k < 1:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"k must be >= 1, got {k}")
    factors = []
    d = 2
    while d * d <= k:
        if k % d == 0:
            factors.append(d)
            while k % d == 0:
                k //= d
        d += 1
    if k > 1:
        factors.append(k)
    return factors
