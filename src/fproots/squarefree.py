"""Squarefree factorization over GF(p).

Yun's algorithm, extended with the p-th root step that characteristic p
needs: factors whose multiplicity is divisible by p vanish from the
derivative and are recovered from the p-th root of what is left over.
"""

import logging

from fproots.poly import FieldPolynomial

_logger = logging.getLogger(__name__)


def factor_squarefree(f: FieldPolynomial) -> list:
    """Decompose f into [(g_i, e_i), ...] with f = lc(f) * prod g_i^e_i.

    Each g_i is monic, squarefree and of degree >= 1, the g_i are pairwise
    coprime and the e_i are distinct. Sorted by increasing multiplicity.
    A nonzero constant yields [].
    """
    if f.is_zero():
        raise ValueError("Squarefree factorization of the zero polynomial")
    classes = sorted(_squarefree(f.make_monic()), key=lambda ge: ge[1])
    _logger.debug("squarefree: degree %d over GF(%d) -> %d classes",
                  f.degree(), f.modulus, len(classes))
    return classes


def _squarefree(f: FieldPolynomial) -> list:
    if f.degree() <= 0:
        return []
    p = f.modulus

    df = f.derivative()
    if df.is_zero():
        # f is a polynomial in x^p
        return [(g, e * p) for g, e in _squarefree(f.pth_root())]

    result = []
    c = f.gcd(df)
    w = f.div(c)
    i = 1
    while w.degree() > 0:
        y = w.gcd(c)
        z = w.div(y)
        if z.degree() > 0:
            result.append((z, i))
        w = y
        c = c.div(y)
        i += 1

    # c now only holds factors whose multiplicity is a multiple of p
    if c.degree() > 0:
        result.extend((g, e * p) for g, e in _squarefree(c.pth_root()))
    return result
