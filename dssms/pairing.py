"""Optimal ate pairing on BLS12-381.

The G2 argument lives on the sextic twist y^2 = x^3 + 4(u + 1) over Fp2.
It is mapped into Fp12 by (x, y) -> (x / w^2, y / w^3), where w^6 = u + 1.
Line functions are evaluated scaled by w^3. The final exponentiation
removes that factor, and it removes vertical-line denominators too.
"""

from __future__ import annotations

from dssms.curve import BLS_X, CURVE_ORDER, G1Point, G2Point
from dssms.fields import FIELD_MODULUS, Fp2, Fp6, Fp12

_ATE_LOOP_COUNT = abs(BLS_X)
_HARD_EXPONENT, _remainder = divmod(FIELD_MODULUS**4 - FIELD_MODULUS**2 + 1, CURVE_ORDER)
if _remainder:
    raise ArithmeticError("curve order does not divide the cyclotomic polynomial")
del _remainder


def _line(t: G2Point, r: G2Point, p: G1Point) -> Fp12:
    """Line through t and r (tangent if equal), evaluated at p and scaled by w^3."""
    xt, yt = t.x, t.y
    xp, yp = p.x, p.y
    if xt == r.x:
        if (yt + r.y).is_zero():
            # Vertical line x = xt / w^2, scaled: xp * w^2 - xt.
            return Fp12(Fp6(-xt, Fp2(xp)))
        slope = (3 * xt.square()) * (2 * yt).inverse()
    else:
        slope = (r.y - yt) * (r.x - xt).inverse()
    return Fp12(
        Fp6(slope * xt - yt, -(slope * xp)),
        Fp6(None, Fp2(yp)),
    )


def _miller_loop(p: G1Point, q: G2Point) -> Fp12:
    f = Fp12.one()
    t = q
    for bit in bin(_ATE_LOOP_COUNT)[3:]:
        f = f.square() * _line(t, t, p)
        t = t + t
        if bit == "1":
            f = f * _line(t, q, p)
            t = t + q
    # The loop parameter of BLS12-381 is negative.
    return f.conjugate() if BLS_X < 0 else f


def _final_exponentiation(f: Fp12) -> Fp12:
    # Easy part: f^((p^6 - 1)(p^2 + 1)).
    f = f.conjugate() * f.inverse()
    f = f.frobenius(2) * f
    # Hard part: (p^4 - p^2 + 1) / r.
    return f**_HARD_EXPONENT


def pairing(p: G1Point, q: G2Point) -> Fp12:
    """Reduced optimal ate pairing e(p, q) with p in G1 and q in G2.

    Raises ValueError when the result is degenerate (one or zero),
    which is what happens when either point is the point at infinity.
    """
    if not isinstance(p, G1Point):
        raise TypeError("first pairing argument must be a G1Point")
    if not isinstance(q, G2Point):
        raise TypeError("second pairing argument must be a G2Point")
    if p.is_infinity() or q.is_infinity():
        raise ValueError("pairing error: degenerate result")
    result = _final_exponentiation(_miller_loop(p, q))
    if result.is_one() or result.is_zero():
        raise ValueError("pairing error: degenerate result")
    return result