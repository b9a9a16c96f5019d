"""Modular arithmetic over Z/mZ — the primitive every other module uses.

Residues are plain Python ints. Products of two residues are formed at
full width (Python int has no fixed size) and reduced once, so a modulus
near 2^64 never wraps the way a native 64-bit multiply would.
"""

import secrets

from mulgroup.errors import ErrorKind, SubgroupError


def mod_mul(a: int, b: int, modulus: int) -> int:
    """(a * b) mod modulus. The 2x-width intermediate is exact."""
    return (a * b) % modulus


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """base^exponent mod modulus by binary square-and-multiply.

    The exponent is consumed bit by bit, low bit first, with no reduction
    of its own. Returns a value in [0, modulus).
    """
    if modulus < 1:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"modulus must be >= 1, got {modulus}")
    if exponent < 0:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"exponent must be >= 0, got {exponent}")

    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = mod_mul(result, base, modulus)
        exponent >>= 1
        base = mod_mul(base, base, modulus)
    return result


def is_factor(factor: int, number: int) -> bool:
    """True when factor evenly divides number."""
    if factor == 0:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT, "factor must be nonzero")
    return number % factor == 0


def rand_between(lo: int, hi: int, rng=None) -> int:
    """Uniform integer from the closed range [lo, hi].

    rng: optional random.Random instance for deterministic tests. Without
    one, draws come from the secrets module.
    """
    if hi < lo:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"empty range [{lo}, {hi}]")
    if rng is not None:
        return rng.randint(lo, hi)
    return lo + secrets.randbelow(hi - lo + 1)
