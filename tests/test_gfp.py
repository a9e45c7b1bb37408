"""Tests for GF(p) field arithmetic."""

import random
import pytest
from fproots.gfp import PrimeField

P61 = (1 << 61) - 1


class TestFieldAxioms:
    """Verify field axioms hold for GF(2^61 - 1)."""

    def test_closure(self, gf61, sample_elements):
        for a in sample_elements:
            for b in sample_elements:
                assert 0 <= gf61.add(a, b) < P61
                assert 0 <= gf61.mul(a, b) < P61

    def test_distributivity(self, gf61, rng):
        for _ in range(20):
            a, b, c = [gf61.rand_element(rng) for _ in range(3)]
            assert gf61.mul(a, gf61.add(b, c)) == gf61.add(gf61.mul(a, b), gf61.mul(a, c))

    def test_additive_inverse(self, gf61, sample_elements):
        for a in sample_elements:
            assert gf61.add(a, gf61.neg(a)) == 0

    def test_multiplicative_inverse(self, gf61, rng):
        for _ in range(20):
            a = gf61.rand_nonzero(rng)
            assert gf61.mul(a, gf61.inv(a)) == 1

    def test_inverse_of_zero_raises(self, gf7):
        with pytest.raises(ZeroDivisionError):
            gf7.inv(0)


class TestArithmetic:
    """Concrete arithmetic tests."""

    def test_wraparound(self, gf7):
        assert gf7.add(6, 1) == 0
        assert gf7.sub(0, 1) == 6
        assert gf7.mul(6, 6) == 1  # (-1)*(-1)
        assert gf7.neg(0) == 0
        assert gf7.neg(3) == 4

    def test_div(self, gf7):
        assert gf7.div(6, 3) == 2
        assert gf7.div(1, 3) == 5  # 3 * 5 = 15 = 1

    def test_reduce_negative(self, gf7):
        assert gf7.reduce(-1) == 6
        assert gf7.reduce(15) == 1

    def test_half(self):
        assert PrimeField(7).half == 3
        assert PrimeField(2).half == 0
        assert PrimeField(P61).half == (P61 - 1) // 2

    def test_euler_criterion(self, gf7):
        # squares mod 7 are 1, 2, 4
        assert [a for a in range(7) if gf7.is_residue(a)] == [1, 2, 4]

    def test_bad_modulus(self):
        with pytest.raises(ValueError):
            PrimeField(1)

    def test_equality(self):
        assert PrimeField(7) == PrimeField(7)
        assert PrimeField(7) != PrimeField(11)
        assert len({PrimeField(7), PrimeField(7)}) == 1


class TestSampling:

    def test_range(self, gf7, rng):
        seen = {gf7.rand_element(rng) for _ in range(500)}
        assert seen == set(range(7))

    def test_nonzero(self, gf7, rng):
        for _ in range(200):
            assert gf7.rand_nonzero(rng) != 0

    def test_deterministic(self, gf61):
        a = [gf61.rand_element(random.Random(5)) for _ in range(3)]
        b = [gf61.rand_element(random.Random(5)) for _ in range(3)]
        assert a == b
