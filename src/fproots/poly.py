"""Univariate polynomials over GF(p).

Coefficients are stored lowest degree first as a list of ints in [0, p),
with no trailing zeros: the zero polynomial is the empty list and has
degree -1. All arithmetic is schoolbook; the operations needed by the
root finder are division with remainder, GCD, a Newton power-series
inverse and modular powering against a precomputed inverse.

Every method returns a new polynomial; instances are never mutated
after construction, so callers may share them freely.
"""

from fproots.gfp import PrimeField


def as_field(field) -> PrimeField:
    """Accept a PrimeField or a bare modulus."""
    if isinstance(field, PrimeField):
        return field
    return PrimeField(field)


def _normalize(c: list) -> list:
    while c and not c[-1]:
        c.pop()
    return c


class FieldPolynomial:
    """A polynomial over a prime field."""

    __slots__ = ('field', 'coeffs')

    def __init__(self, field, coeffs=()):
        self.field = as_field(field)
        p = self.field.p
        self.coeffs = _normalize([c % p for c in coeffs])

    @classmethod
    def _make(cls, field: PrimeField, coeffs: list) -> 'FieldPolynomial':
        # coeffs already reduced mod p; only trailing zeros are dropped
        poly = cls.__new__(cls)
        poly.field = field
        poly.coeffs = _normalize(coeffs)
        return poly

    @classmethod
    def zero(cls, field) -> 'FieldPolynomial':
        return cls._make(as_field(field), [])

    @classmethod
    def one(cls, field) -> 'FieldPolynomial':
        return cls._make(as_field(field), [1])

    @classmethod
    def x(cls, field) -> 'FieldPolynomial':
        """The indeterminate."""
        return cls._make(as_field(field), [0, 1])

    @classmethod
    def constant(cls, field, c: int) -> 'FieldPolynomial':
        return cls(field, [c])

    @classmethod
    def linear_factor(cls, field, a: int) -> 'FieldPolynomial':
        """The monic linear factor x - a."""
        field = as_field(field)
        return cls._make(field, [field.neg(a % field.p), 1])

    @classmethod
    def from_roots(cls, field, roots) -> 'FieldPolynomial':
        """prod (x - a) over the given roots, repeats included."""
        field = as_field(field)
        result = cls.one(field)
        for a in roots:
            result = result.mul(cls.linear_factor(field, a))
        return result

    @property
    def modulus(self) -> int:
        return self.field.p

    def degree(self) -> int:
        return len(self.coeffs) - 1

    def leading(self) -> int:
        """Leading coefficient, 0 for the zero polynomial."""
        return self.coeffs[-1] if self.coeffs else 0

    def is_zero(self) -> bool:
        return not self.coeffs

    def is_one(self) -> bool:
        return self.coeffs == [1]

    def is_monic(self) -> bool:
        return self.leading() == 1

    def copy(self) -> 'FieldPolynomial':
        return self._make(self.field, self.coeffs[:])

    def __eq__(self, other) -> bool:
        if not isinstance(other, FieldPolynomial):
            return NotImplemented
        return self.field == other.field and self.coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash((self.field.p, tuple(self.coeffs)))

    def __bool__(self) -> bool:
        return bool(self.coeffs)

    def __repr__(self) -> str:
        return f"FieldPolynomial({self.field.p}, {self.coeffs})"

    def __str__(self) -> str:
        if not self.coeffs:
            return '0'
        terms = []
        for i in range(len(self.coeffs) - 1, -1, -1):
            c = self.coeffs[i]
            if c == 0:
                continue
            if i == 0:
                terms.append(str(c))
            else:
                mono = 'x' if i == 1 else f'x^{i}'
                terms.append(mono if c == 1 else f'{c}*{mono}')
        return ' + '.join(terms)

    def __call__(self, x: int) -> int:
        """Evaluate at x using Horner's method."""
        f = self.field
        x %= f.p
        result = 0
        for c in reversed(self.coeffs):
            result = f.add(f.mul(result, x), c)
        return result

    def _check(self, other: 'FieldPolynomial'):
        if self.field != other.field:
            raise ValueError(
                f"Polynomials over different fields: {self.field.p} and {other.field.p}")

    def add(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        self._check(other)
        a, b = self.coeffs, other.coeffs
        if len(a) < len(b):
            a, b = b, a
        c = a[:]
        f = self.field
        for i, b_i in enumerate(b):
            c[i] = f.add(c[i], b_i)
        return self._make(f, c)

    def sub(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        self._check(other)
        f = self.field
        c = self.coeffs + [0] * (len(other.coeffs) - len(self.coeffs))
        for i, b_i in enumerate(other.coeffs):
            c[i] = f.sub(c[i], b_i)
        return self._make(f, c)

    def neg(self) -> 'FieldPolynomial':
        f = self.field
        return self._make(f, [f.neg(c) for c in self.coeffs])

    def add_scalar(self, c: int) -> 'FieldPolynomial':
        """self + c for a field element (any int, reduced mod p)."""
        f = self.field
        coeffs = self.coeffs[:] if self.coeffs else [0]
        coeffs[0] = f.reduce(coeffs[0] + c)
        return self._make(f, coeffs)

    def scale(self, c: int) -> 'FieldPolynomial':
        f = self.field
        c %= f.p
        if c == 0:
            return self.zero(f)
        return self._make(f, [f.mul(c, a) for a in self.coeffs])

    def mul(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        self._check(other)
        a, b = self.coeffs, other.coeffs
        if not a or not b:
            return self.zero(self.field)
        if len(a) > len(b):
            a, b = b, a
        p = self.field.p
        c = [0] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        return self._make(self.field, [c_i % p for c_i in c])

    def shift_left(self, n: int) -> 'FieldPolynomial':
        """Multiply by x^n."""
        if n < 0:
            raise ValueError(f"Shift must be non-negative, got {n}")
        if not self.coeffs:
            return self.copy()
        return self._make(self.field, [0] * n + self.coeffs)

    def shift_right(self, n: int) -> 'FieldPolynomial':
        """Drop the n lowest coefficients (floor division by x^n)."""
        if n < 0:
            raise ValueError(f"Shift must be non-negative, got {n}")
        return self._make(self.field, self.coeffs[n:])

    def truncate(self, n: int) -> 'FieldPolynomial':
        """self mod x^n."""
        return self._make(self.field, self.coeffs[:n])

    def reverse(self, length: int) -> 'FieldPolynomial':
        """Reverse the first `length` coefficients: x^(length-1) * self(1/x)."""
        c = self.coeffs[:length]
        c.extend([0] * (length - len(c)))
        c.reverse()
        return self._make(self.field, c)

    def make_monic(self) -> 'FieldPolynomial':
        """Scale to leading coefficient 1. The zero polynomial stays zero."""
        if not self.coeffs or self.coeffs[-1] == 1:
            return self.copy()
        return self.scale(self.field.inv(self.coeffs[-1]))

    def divmod(self, other: 'FieldPolynomial') -> tuple:
        """Quotient and remainder of long division by a nonzero polynomial."""
        self._check(other)
        b = other.coeffs
        if not b:
            raise ZeroDivisionError("Division by the zero polynomial")
        f = self.field
        p = f.p
        m, n = len(self.coeffs), len(b)
        if m < n:
            return self.zero(f), self.copy()
        b1 = f.inv(b[-1])
        q, r = [0] * (m - n + 1), self.coeffs[:]
        for i in range(m - n, -1, -1):
            q_i = (r[i + n - 1] * b1) % p
            q[i] = q_i
            if q_i:
                for j in range(n):
                    r[i + j] = (r[i + j] - q_i * b[j]) % p
        return self._make(f, q), self._make(f, r[:n - 1])

    def div(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        return self.divmod(other)[0]

    def rem(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        return self.divmod(other)[1]

    def derivative(self) -> 'FieldPolynomial':
        f = self.field
        return self._make(f, [f.mul(i % f.p, c) for i, c in enumerate(self.coeffs)][1:])

    def pth_root(self) -> 'FieldPolynomial':
        """g with g^p == self, for self a polynomial in x^p.

        In GF(p) every element is its own p-th root, so only the exponents
        are divided by p.
        """
        p = self.field.p
        if any(c for i, c in enumerate(self.coeffs) if i % p):
            raise ValueError("Polynomial is not a p-th power")
        return self._make(self.field, self.coeffs[::p])

    def gcd(self, other: 'FieldPolynomial') -> 'FieldPolynomial':
        """Monic greatest common divisor; gcd(0, 0) is 0."""
        self._check(other)
        a, b = self, other
        while b.coeffs:
            a, b = b, a.rem(b)
        return a.make_monic()

    def inv_series_newton(self, n: int) -> 'FieldPolynomial':
        """g with self * g == 1 mod x^n, by Newton iteration g <- g(2 - self*g).

        Requires a nonzero constant term.
        """
        if not self.coeffs or self.coeffs[0] == 0:
            raise ZeroDivisionError("Series with zero constant term is not invertible")
        f = self.field
        g = self._make(f, [f.inv(self.coeffs[0])])
        k = 1
        while k < n:
            k = min(2 * k, n)
            e = self.truncate(k).mul(g).truncate(k)
            g = g.mul(e.neg().add_scalar(2)).truncate(k)
        return g.truncate(n)

    def precompute_inverse(self) -> 'FieldPolynomial':
        """Newton inverse of the reversal, used by rem_preinv against self."""
        length = len(self.coeffs)
        return self.reverse(length).inv_series_newton(length)

    def rem_preinv(self, mod: 'FieldPolynomial', modinv: 'FieldPolynomial') -> 'FieldPolynomial':
        """self mod `mod`, with `modinv = mod.precompute_inverse()`.

        Division-free: the reversed quotient is a truncated product with the
        inverse series. Valid for deg self <= 2 deg mod; larger inputs fall
        back to long division.
        """
        self._check(mod)
        m = self.degree() - mod.degree()
        if m < 0:
            return self.copy()
        if m > mod.degree():
            return self.rem(mod)
        q = self.reverse(len(self.coeffs)).truncate(m + 1).mul(modinv).truncate(m + 1)
        q = q.reverse(m + 1)
        return self.sub(q.mul(mod))

    def mulmod_preinv(self, other: 'FieldPolynomial', mod: 'FieldPolynomial',
                      modinv: 'FieldPolynomial') -> 'FieldPolynomial':
        return self.mul(other).rem_preinv(mod, modinv)

    def powmod_preinv(self, e: int, mod: 'FieldPolynomial',
                      modinv: 'FieldPolynomial') -> 'FieldPolynomial':
        """self^e mod `mod` by left-to-right square-and-multiply."""
        if e < 0:
            raise ValueError(f"Exponent must be non-negative, got {e}")
        base = self.rem(mod) if self.degree() >= mod.degree() else self
        if e == 0:
            return self.one(self.field).rem(mod)
        result = base
        for i in range(e.bit_length() - 2, -1, -1):
            result = result.mulmod_preinv(result, mod, modinv)
            if (e >> i) & 1:
                result = result.mulmod_preinv(base, mod, modinv)
        return result

    def __neg__(self):
        return self.neg()

    def __add__(self, other):
        if isinstance(other, int):
            return self.add_scalar(other)
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, int):
            return self.add_scalar(-other)
        return self.sub(other)

    def __rsub__(self, other):
        return self.neg().add_scalar(other)

    def __mul__(self, other):
        if isinstance(other, int):
            return self.scale(other)
        return self.mul(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        return self.div(other)

    def __mod__(self, other):
        return self.rem(other)

    def __divmod__(self, other):
        return self.divmod(other)

    def __pow__(self, e: int):
        if e < 0:
            raise ValueError(f"Exponent must be non-negative, got {e}")
        result = self.one(self.field)
        base = self
        while e:
            if e & 1:
                result = result.mul(base)
            e >>= 1
            if e:
                base = base.mul(base)
        return result
