"""Tests for the RootList container."""

import pytest
from fproots.gfp import PrimeField
from fproots.poly import FieldPolynomial
from fproots.factor import RootList


def lin(a, p=101):
    return FieldPolynomial.linear_factor(p, a)


class TestRootList:

    def test_empty(self, gf101):
        r = RootList(gf101)
        assert len(r) == 0
        assert r.num == 0
        assert r.alloc == 0
        assert list(r) == []
        assert r.roots() == []
        assert r.root_values() == []
        assert r.product() == FieldPolynomial.one(gf101)

    def test_accepts_modulus(self):
        assert RootList(101).field == PrimeField(101)

    def test_fit_length_reserves(self, gf101):
        r = RootList(gf101)
        r.fit_length(3)
        assert r.alloc == 3
        assert r.num == 0
        # never shrinks
        r.fit_length(2)
        assert r.alloc == 3
        # grows at least by doubling
        r.fit_length(4)
        assert r.alloc == 6
        r.fit_length(20)
        assert r.alloc == 20

    def test_iteration_stops_at_num(self, gf101):
        r = RootList(gf101)
        r.fit_length(10)
        r.append(lin(4), 2)
        r.append(lin(9), 1)
        assert r.alloc == 10
        assert len(r) == 2
        assert list(r) == [(lin(4), 2), (lin(9), 1)]
        assert r.roots() == [(4, 2), (9, 1)]

    def test_append_grows(self, gf101):
        r = RootList(gf101)
        for a in range(5):
            r.append(lin(a), 1)
        assert r.num == 5
        assert r.alloc >= r.num

    def test_append_copies(self, gf101):
        r = RootList(gf101)
        g = lin(7)
        r.append(g, 1)
        assert r[0][0] == g
        assert r[0][0] is not g

    def test_getitem(self, gf101):
        r = RootList(gf101)
        r.fit_length(8)
        r.append(lin(1), 3)
        r.append(lin(2), 5)
        assert r[0] == (lin(1), 3)
        assert r[-1] == (lin(2), 5)
        assert r[-2] == (lin(1), 3)
        with pytest.raises(IndexError):
            r[2]
        with pytest.raises(IndexError):
            r[-3]

    def test_root_values_sorted(self, gf101):
        r = RootList(gf101)
        for a in (50, 3, 17):
            r.append(lin(a), 1)
        assert r.root_values() == [3, 17, 50]
        assert [a for a, _ in r.roots()] == [50, 3, 17]

    def test_product(self, gf101):
        r = RootList(gf101)
        r.append(lin(2), 2)
        r.append(lin(5), 1)
        assert r.product() == FieldPolynomial.from_roots(gf101, [2, 2, 5])

    def test_rejects_nonlinear(self, gf101):
        r = RootList(gf101)
        with pytest.raises(AssertionError):
            r.append(FieldPolynomial.from_roots(gf101, [1, 2]), 1)
        with pytest.raises(AssertionError):
            r.append(FieldPolynomial(gf101, [1, 3]), 1)

    def test_repr(self, gf101):
        r = RootList(gf101)
        r.append(lin(6), 2)
        assert repr(r) == "RootList(101, [(6, 2)])"
