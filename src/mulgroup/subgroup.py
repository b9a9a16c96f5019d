"""Multiplicative subgroups of prescribed order inside (Z/pZ)*.

The unique subgroup of order n (n | p-1) is generated by w = g^((p-1)/n)
for any generator g of the full group. Its elements are returned in
ascending order, so the identity 1 is first and the result does not
depend on which generator the random search happened to find.
"""

import logging

from mulgroup.errors import ErrorKind, SubgroupError
from mulgroup.modarith import is_factor, mod_exp, mod_mul
from mulgroup.primality import DEFAULT_ROUNDS, is_prime
from mulgroup.primitive_root import find_generator, multiplicative_order

logger = logging.getLogger(__name__)


def _validate(p: int, n: int, rounds: int, rng) -> None:
    """Cheap up-front checks, run before any generator search."""
    if n < 1:
        raise SubgroupError(ErrorKind.INVALID_ARGUMENT,
                            f"n must be >= 1, got {n}")
    if not is_prime(p, rounds, rng):
        raise SubgroupError(ErrorKind.NOT_PRIME, f"p={p}")
    if not is_factor(n, p - 1):
        raise SubgroupError(ErrorKind.NOT_FACTOR, f"n={n}, p-1={p - 1}")


def build_subgroup(p: int, n: int, rounds: int = DEFAULT_ROUNDS, rng=None,
                   max_attempts: int = None, candidates=None) -> list:
    """Compute the multiplicative subgroup of order n modulo prime p.

    Args:
        p: Modulus; must pass is_prime(p, rounds).
        n: Subgroup order; must divide p - 1.
        rounds: Miller-Rabin rounds for the primality check.
        rng: Optional random.Random instance for deterministic tests.
        max_attempts: Optional cap on the generator search.
        candidates: Optional iterable of generator candidates to try
            instead of random samples.

    Returns:
        The n distinct residues of the subgroup, ascending (1 first).

    Raises:
        SubgroupError: NOT_PRIME, NOT_FACTOR, INVALID_ARGUMENT, or
            GENERATOR_NOT_FOUND when max_attempts runs out.
    """
    _validate(p, n, rounds, rng)
    g = find_generator(p, rng=rng, candidates=candidates,
                       max_attempts=max_attempts)
    step = (p - 1) // n

    seen = set()
    elements = []
    for i in range(1, n + 1):
        e = mod_exp(g, i * step, p)
        if e in seen:
            logger.debug("duplicate subgroup element %d at i=%d", e, i)
            continue
        seen.add(e)
        elements.append(e)

    if len(elements) != n:
        raise RuntimeError(
            f"subgroup mod {p} has {len(elements)} elements, expected {n} "
            f"(generator {g})")

    elements.sort()
    logger.info("built subgroup of order %d mod %d from generator %d", n, p, g)
    return elements


def root_of_unity(p: int, n: int, rounds: int = DEFAULT_ROUNDS, rng=None,
                  max_attempts: int = None, candidates=None) -> int:
    """A primitive n-th root of unity mod p: g^((p-1)/n) for a generator g.

    Powers w^0, w^1, ..., w^(n-1) enumerate the subgroup in generation
    order. Which root is returned depends on the generator found.
    """
    _validate(p, n, rounds, rng)
    g = find_generator(p, rng=rng, candidates=candidates,
                       max_attempts=max_attempts)
    return mod_exp(g, (p - 1) // n, p)


def verify_subgroup(elements: list, p: int, n: int) -> bool:
    """Check that elements form the cyclic subgroup of order n mod p.

    Size n, pairwise distinct, 1 first, every e^n == 1, closed under
    multiplication, and at least one element of order exactly n.
    """
    if len(elements) != n or len(set(elements)) != n:
        return False
    if not elements or elements[0] != 1:
        return False
    members = set(elements)
    if any(not 0 < e < p for e in elements):
        return False
    if any(mod_exp(e, n, p) != 1 for e in elements):
        return False
    for a in elements:
        for b in elements:
            if mod_mul(a, b, p) not in members:
                return False
    return any(multiplicative_order(e, p) == n for e in elements)
