"""GF(p) field arithmetic — scalar primitive for fproots.

All operations over the prime field of a given modulus p.
Elements are plain Python ints in [0, p); zero and one are 0 and 1.
The modulus is assumed to be prime (probable prime is enough); this is
never checked.
"""


class PrimeField:
    """Field operations object for GF(p)."""

    __slots__ = ('p', 'half')

    def __init__(self, p: int):
        if p < 2:
            raise ValueError(f"Modulus must be >= 2, got {p}")
        self.p = p
        # (p - 1) / 2, exponent of Euler's criterion
        self.half = (p - 1) >> 1

    def __eq__(self, other) -> bool:
        return isinstance(other, PrimeField) and other.p == self.p

    def __hash__(self) -> int:
        return hash(self.p)

    def __repr__(self) -> str:
        return f"PrimeField({self.p})"

    def reduce(self, x: int) -> int:
        """x mod p, for any Python int (negative included)."""
        return x % self.p

    def add(self, a: int, b: int) -> int:
        """(a + b) mod p."""
        s = a + b
        if s >= self.p:
            s -= self.p
        return s

    def sub(self, a: int, b: int) -> int:
        """(a - b) mod p."""
        s = a - b
        if s < 0:
            s += self.p
        return s

    def mul(self, a: int, b: int) -> int:
        """(a * b) mod p."""
        return (a * b) % self.p

    def neg(self, a: int) -> int:
        """(-a) mod p."""
        return self.p - a if a != 0 else 0

    def inv(self, a: int) -> int:
        """Multiplicative inverse via Fermat's little theorem: a^(p-2) mod p."""
        if a == 0:
            raise ZeroDivisionError(f"Cannot invert zero in GF({self.p})")
        return pow(a, self.p - 2, self.p)

    def div(self, a: int, b: int) -> int:
        """(a / b) mod p = a * b^(-1) mod p."""
        return self.mul(a, self.inv(b))

    def is_residue(self, a: int) -> bool:
        """Euler's criterion: a^((p-1)/2) == 1 for nonzero squares."""
        return a != 0 and pow(a, self.half, self.p) == 1

    def rand_element(self, rng) -> int:
        """Sample a uniform random element from GF(p) via rejection sampling."""
        bits = self.p.bit_length()
        while True:
            r = rng.getrandbits(bits)
            if r < self.p:
                return r

    def rand_nonzero(self, rng) -> int:
        """Sample a uniform random nonzero element from GF(p)."""
        while True:
            r = self.rand_element(rng)
            if r != 0:
                return r
