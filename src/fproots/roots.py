"""Roots of polynomials over GF(p), with optional multiplicities.

Pipeline per polynomial (or per squarefree class, when multiplicities are
wanted):

1. Tiny moduli (p < SMALL_MODULUS) are scanned by evaluating at every
   field element. This sidesteps p = 2, where (p - 1) / 2 = 0.
2. The root 0 is recorded and the largest power of x dividing f is
   removed.
3. The residue split separates roots by quadratic character.
4. Each part is bisected with randomized Rabin splits on an explicit
   stack until only linear factors remain.

The stack never holds more than WORD_BITS entries: a chunk at depth d has
a degree of at most WORD_BITS - d bits, because the smaller factor of every
split goes to the next slot and has at most half the degree.
"""

import logging
import random
import sys
from contextlib import contextmanager

from fproots.factor import RootList
from fproots.poly import FieldPolynomial
from fproots.split import split_residues, split_rabin
from fproots.squarefree import factor_squarefree

_logger = logging.getLogger(__name__)

WORD_BITS = sys.maxsize.bit_length() + 1  # 64 on 64-bit builds
SMALL_MODULUS = 10


class ZeroPolynomialError(ValueError):
    """Roots were requested for the zero polynomial."""


class Workspace:
    """Scratch slots for one root-finding call.

    `work` holds the driver's monic copy of the input; `stack` is the
    bisection stack, fixed at `bits` slots.
    """

    __slots__ = ('bits', 'work', 'stack')

    def __init__(self, bits: int = WORD_BITS):
        self.bits = bits
        self.work: FieldPolynomial = None
        self.stack: list = [None] * bits

    def clear(self):
        self.work = None
        for i in range(self.bits):
            self.stack[i] = None


@contextmanager
def workspace(bits: int = WORD_BITS):
    """Allocate a Workspace and release its slots on exit, errors included."""
    ws = Workspace(bits)
    try:
        yield ws
    finally:
        ws.clear()


def _scan_small_modulus(roots: RootList, f: FieldPolynomial, mult: int):
    """Brute force: try every element of the field."""
    field = f.field
    for x in range(field.p):
        if f(x) == 0:
            roots.append(FieldPolynomial.linear_factor(field, x), mult)


def _strip_zero_roots(roots: RootList, f: FieldPolynomial, mult: int) -> FieldPolynomial:
    """Record the root 0 if present and divide out the largest power of x."""
    if f.coeffs[0] != 0:
        return f
    roots.append(FieldPolynomial.x(f.field), mult)
    i = 1
    while i < len(f.coeffs) and f.coeffs[i] == 0:
        i += 1
    return f.shift_right(i)


def _push_roots(roots: RootList, f: FieldPolynomial, mult: int, ws: Workspace,
                rng, small_modulus: int = SMALL_MODULUS):
    """Append every root of the monic f to `roots` with exponent mult."""
    assert f.degree() >= 1
    assert f.is_monic()

    if f.modulus < small_modulus:
        _logger.debug("scanning all %d elements", f.modulus)
        _scan_small_modulus(roots, f, mult)
        return

    f = _strip_zero_roots(roots, f, mult)
    if f.degree() <= 1:
        if f.degree() == 1:
            roots.append(f, mult)
        return

    stack = ws.stack
    a, b = split_residues(f)
    stack[0], stack[1] = a, b
    roots.fit_length(roots.num + a.degree() + b.degree())

    # the first split failed if b = 1
    sp = 2 if b.degree() > 0 else 1
    while sp > 0:
        sp -= 1
        assert sp < ws.bits
        g = stack[sp]
        stack[sp] = None
        assert g.degree() >= 0
        assert g.degree().bit_length() <= ws.bits - sp

        if g.degree() <= 1:
            if g.degree() == 1:
                assert roots.num < roots.alloc
                roots.append(g, mult)
            continue

        assert sp + 1 < ws.bits
        stack[sp], stack[sp + 1] = split_rabin(g, rng)
        assert stack[sp + 1].degree().bit_length() <= ws.bits - (sp + 1)
        assert stack[sp].degree().bit_length() <= ws.bits - sp
        sp += 2


class RootFinder:
    """Configurable root finder.

    seed: seeds a fresh random.Random for every call (None: OS entropy).
    rng: a caller-owned random.Random, reused across calls; wins over seed.
    small_modulus: fields smaller than this are brute-force scanned.
    word_bits: capacity of the bisection stack; inputs of degree d need
        d.bit_length() + 1 slots.
    """

    def __init__(self, seed=None, rng=None, small_modulus: int = SMALL_MODULUS,
                 word_bits: int = WORD_BITS):
        if small_modulus < 3:
            raise ValueError(f"small_modulus must be >= 3, got {small_modulus}")
        if word_bits < 2:
            raise ValueError(f"word_bits must be >= 2, got {word_bits}")
        self.seed = seed
        self.rng = rng
        self.small_modulus = small_modulus
        self.word_bits = word_bits

    def _make_rng(self):
        if self.rng is not None:
            return self.rng
        return random.Random(self.seed)

    def roots(self, f: FieldPolynomial, with_multiplicity: bool = False) -> RootList:
        """All roots of f in GF(p).

        With with_multiplicity, each root carries its multiplicity in f;
        otherwise every distinct root is reported once with exponent 1.
        Raises ZeroPolynomialError for the zero polynomial. f is not
        modified.
        """
        r = RootList(f.field)
        d = f.degree()
        _logger.debug("roots: degree %d over GF(%d), with_multiplicity=%s",
                      d, f.modulus, with_multiplicity)

        if d < 2:
            if d == 1:
                r.fit_length(1)
                r.append(f.make_monic(), 1)
            elif d < 0:
                raise ZeroPolynomialError("Input polynomial is zero")
            return r

        if d.bit_length() + 1 > self.word_bits:
            raise ValueError(
                f"Degree {d} needs a stack of {d.bit_length() + 1} slots, word_bits is {self.word_bits}")

        rng = self._make_rng()
        with workspace(self.word_bits) as ws:
            if with_multiplicity:
                for g, e in factor_squarefree(f):
                    _push_roots(r, g, e, ws, rng, self.small_modulus)
            else:
                ws.work = f.make_monic()
                _push_roots(r, ws.work, 1, ws, rng, self.small_modulus)
        return r


def find_roots(f: FieldPolynomial, with_multiplicity: bool = False, *,
               seed=None, rng=None) -> RootList:
    """Find the roots of f over its prime field. See RootFinder.roots."""
    return RootFinder(seed=seed, rng=rng).roots(f, with_multiplicity)
