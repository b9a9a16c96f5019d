"""Tests for modular arithmetic primitives."""

import pytest
from mulgroup.errors import ErrorKind, SubgroupError
from mulgroup.modarith import is_factor, mod_exp, mod_mul, rand_between

# Largest prime below 2^64
P64 = 18446744073709551557
M61 = (1 << 61) - 1


class TestModExp:

    def test_small_values(self):
        assert mod_exp(2, 10, 1000) == 24
        assert mod_exp(3, 4, 7) == 4   # 81 = 11*7 + 4
        assert mod_exp(5, 1, 7) == 5

    def test_zero_exponent(self):
        for m in (2, 7, 97, P64):
            assert mod_exp(12345, 0, m) == 1

    def test_modulus_one(self):
        assert mod_exp(5, 0, 1) == 0
        assert mod_exp(5, 3, 1) == 0

    def test_base_reduced_first(self):
        assert mod_exp(7 + 3, 5, 7) == mod_exp(3, 5, 7)
        assert mod_exp(-1, 3, 7) == 6

    def test_matches_builtin_pow(self, rng):
        for _ in range(50):
            m = rng.randint(2, 1 << 64)
            b = rng.randint(0, 1 << 70)
            e = rng.randint(0, 1 << 40)
            assert mod_exp(b, e, m) == pow(b, e, m)

    def test_result_in_range(self, rng):
        for _ in range(50):
            m = rng.randint(1, 10 ** 6)
            r = mod_exp(rng.randint(0, 10 ** 9), rng.randint(0, 1000), m)
            assert 0 <= r < m

    def test_near_64_bit_no_wraparound(self):
        """(p-1)^2 == 1 mod p even when p is close to 2^64."""
        assert mod_exp(P64 - 1, 2, P64) == 1
        assert mod_exp(P64 - 1, 3, P64) == P64 - 1

    def test_fermat_little_theorem(self, rng):
        for p in (M61, P64):
            for _ in range(5):
                a = rng.randint(1, p - 1)
                assert mod_exp(a, p - 1, p) == 1

    def test_invalid_modulus(self):
        with pytest.raises(SubgroupError) as exc:
            mod_exp(2, 3, 0)
        assert exc.value.kind is ErrorKind.INVALID_ARGUMENT

    def test_negative_exponent(self):
        with pytest.raises(SubgroupError) as exc:
            mod_exp(2, -1, 7)
        assert exc.value.kind is ErrorKind.INVALID_ARGUMENT


class TestModMul:

    def test_basic(self):
        assert mod_mul(3, 5, 7) == 1
        assert mod_mul(0, 5, 7) == 0

    def test_large_multiply_no_overflow(self):
        a = P64 - 1  # -1 mod P64
        assert mod_mul(a, a, P64) == 1
        assert mod_mul(a, 2, P64) == P64 - 2


class TestIsFactor:

    def test_divides(self):
        assert is_factor(3, 6)
        assert is_factor(1, 17)
        assert is_factor(6, 6)

    def test_does_not_divide(self):
        assert not is_factor(4, 6)
        assert not is_factor(5, 17)

    def test_zero_factor_rejected(self):
        with pytest.raises(SubgroupError):
            is_factor(0, 6)


class TestRandBetween:

    def test_in_range(self, rng):
        for _ in range(200):
            assert 2 <= rand_between(2, 5, rng) <= 5

    def test_covers_range(self, rng):
        values = {rand_between(2, 5, rng) for _ in range(200)}
        assert values == {2, 3, 4, 5}

    def test_os_entropy_in_range(self):
        for _ in range(50):
            assert 10 <= rand_between(10, 12) <= 12

    def test_single_point(self, rng):
        assert rand_between(4, 4, rng) == 4
        assert rand_between(4, 4) == 4

    def test_empty_range(self, rng):
        with pytest.raises(SubgroupError):
            rand_between(3, 2, rng)
