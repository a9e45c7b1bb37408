"""RootList: the (linear factor, multiplicity) collection filled by the root finder."""

from fproots.gfp import PrimeField
from fproots.poly import FieldPolynomial, as_field


class RootList:
    """Append-only list of monic linear factors x - a with exponents.

    Storage is managed explicitly: fit_length() reserves slots ahead of a
    bulk insertion, `num` counts the slots in use and `alloc` the slots
    reserved.
    """

    __slots__ = ('field', 'polys', 'exps', 'num')

    def __init__(self, field):
        self.field: PrimeField = as_field(field)
        self.polys: list = []
        self.exps: list = []
        self.num = 0

    @property
    def alloc(self) -> int:
        return len(self.polys)

    def fit_length(self, n: int):
        """Make room for at least n entries."""
        if n <= self.alloc:
            return
        n = max(n, 2 * self.alloc)
        extra = n - self.alloc
        self.polys.extend([None] * extra)
        self.exps.extend([0] * extra)

    def append(self, poly: FieldPolynomial, exp: int):
        """Record poly (monic, degree 1) with multiplicity exp."""
        assert poly.degree() == 1 and poly.is_monic()
        assert poly.field == self.field
        self.fit_length(self.num + 1)
        self.polys[self.num] = poly.copy()
        self.exps[self.num] = exp
        self.num += 1

    def __len__(self) -> int:
        return self.num

    def __iter__(self):
        return zip(self.polys[:self.num], self.exps[:self.num])

    def __getitem__(self, i: int) -> tuple:
        if not -self.num <= i < self.num:
            raise IndexError("RootList index out of range")
        i %= self.num
        return self.polys[i], self.exps[i]

    def __repr__(self) -> str:
        return f"RootList({self.field.p}, {self.roots()})"

    def roots(self) -> list:
        """[(a, multiplicity), ...] in discovery order, a being the root of x - a."""
        neg = self.field.neg
        return [(neg(poly.coeffs[0]), e) for poly, e in self]

    def root_values(self) -> list:
        """Sorted root values, without multiplicities."""
        return sorted(a for a, _ in self.roots())

    def product(self) -> FieldPolynomial:
        """prod (x - a)^e over all entries."""
        result = FieldPolynomial.one(self.field)
        for poly, e in self:
            result = result.mul(poly ** e)
        return result
