"""Rabin splitting of polynomials over GF(p) into products of linear factors.

By Euler's criterion a nonzero a in GF(p) satisfies a^h = 1 if a is a
square and a^h = -1 otherwise, with h = (p - 1) / 2. So for f with
nonzero roots, gcd(f, x^h - 1) and gcd(f, x^h + 1) collect the square
and non-square roots of f, each exactly once. Replacing x by a random
shift x + delta reshuffles which roots land on which side; a split into
two proper factors happens with probability about 1/2 per draw.

Both splitters need p odd; the root finder scans tiny fields instead.
"""

import logging

from fproots.poly import FieldPolynomial

_logger = logging.getLogger(__name__)


def split_residues(f: FieldPolynomial) -> tuple:
    """First-level split of f by the quadratic character of its roots.

    f must be monic with nonzero constant term and degree >= 2. Returns
    (a, b) where a = gcd(f, x^h - 1) and b = gcd(f, x^h + 1), swapped so
    that deg a >= deg b. Both are monic and squarefree even if f is not;
    b is 1 when every root of f shares one quadratic character, and
    deg a + deg b is the number of distinct roots of f in GF(p).
    """
    assert f.degree() >= 2 and f.is_monic()
    assert f.coeffs[0] != 0
    field = f.field
    finv = f.precompute_inverse()

    t = FieldPolynomial.x(field).powmod_preinv(field.half, f, finv)
    a = f.gcd(t.add_scalar(-1))
    b = f.gcd(t.add_scalar(1))

    if a.degree() < b.degree():
        a, b = b, a
    _logger.debug("residue split: degree %d -> %d + %d",
                  f.degree(), a.degree(), b.degree())
    return a, b


def split_rabin(f: FieldPolynomial, rng) -> tuple:
    """Split f into two proper monic factors (a, b) with deg a >= deg b >= 1.

    f must be monic, squarefree, of degree >= 2 and a product of linear
    factors over GF(p). Draws delta uniformly from GF(p) and takes
    a = gcd((x + delta)^h - 1, f) until 0 < deg a < deg f; b = f / a.
    Las Vegas: always correct, the number of draws is random.
    """
    assert f.degree() >= 2 and f.is_monic()
    field = f.field
    assert field.p > 2
    finv = f.precompute_inverse()

    retries = 0
    while True:
        delta = field.rand_element(rng)
        shifted = FieldPolynomial(field, [delta, 1])
        t = shifted.powmod_preinv(field.half, f, finv)
        a = f.gcd(t.add_scalar(-1))
        if 0 < a.degree() < f.degree():
            break
        retries += 1
        _logger.debug("rabin split: delta=%d gave trivial factor of degree %d, retry %d",
                      delta, f.degree(), retries)

    b = f.div(a)
    if a.degree() < b.degree():
        a, b = b, a
    return a, b
