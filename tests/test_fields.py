import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from dssms.fields import FIELD_MODULUS, NONRESIDUE, Fp2, Fp6, Fp12

coords = st.integers(min_value=0, max_value=FIELD_MODULUS - 1)
fp2s = st.builds(Fp2, coords, coords)
nonzero_fp2s = fp2s.filter(lambda a: not a.is_zero())
fp6s = st.builds(Fp6, fp2s, fp2s, fp2s)
nonzero_fp6s = fp6s.filter(lambda a: not a.is_zero())
fp12s = st.builds(Fp12, fp6s, fp6s)
nonzero_fp12s = fp12s.filter(lambda a: not a.is_zero())


def test_u_squared_is_minus_one():
    u = Fp2(0, 1)
    assert u * u == Fp2(-1)
    assert u.square() == Fp2(-1)


def test_fp2_reduces_coordinates():
    assert Fp2(FIELD_MODULUS + 5, 2 * FIELD_MODULUS) == Fp2(5, 0)
    assert hash(Fp2(1 + FIELD_MODULUS, 2)) == hash(Fp2(1, 2))


def test_fp2_is_zero():
    assert Fp2(FIELD_MODULUS, 2 * FIELD_MODULUS).is_zero() is True
    assert Fp2(0, 1).is_zero() is False


@given(nonzero_fp2s)
def test_fp2_inverse(a):
    assert a * a.inverse() == Fp2.one()


def test_fp2_zero_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Fp2.zero().inverse()


@given(coords, coords)
def test_fp2_conjugate(x, y):
    a = Fp2(x, y)
    product = a * a.conjugate()
    assert product == Fp2(product.c0, 0)
    assert a.conjugate() == Fp2(x, -y)
    assert a.conjugate().conjugate() == a


@given(fp2s, fp2s, fp2s)
def test_fp2_distributive(a, b, c):
    assert a * (b + c) - (a * b + a * c) == Fp2.zero()
    assert (a - b) + b == a


@given(coords, coords)
def test_fp2_square_matches_mul(x, y):
    a = Fp2(x, y)
    assert a.square() == a * a


@given(coords, coords, coords, coords)
def test_fp2_division(ax, ay, bx, by):
    a = Fp2(ax, ay)
    b = Fp2(bx, by)
    assume(not b.is_zero())
    assert (a * b) / b == a
    assert a / b == a * b.inverse()
    assert b / b == Fp2.one()


@settings(max_examples=25, deadline=None)
@given(coords, coords)
def test_fp2_frobenius_is_pth_power(x, y):
    a = Fp2(x, y)
    assert a.frobenius() == a ** FIELD_MODULUS
    assert a.frobenius() == Fp2(x, y).conjugate()
    assert a.frobenius(2) == a


def test_v_cubed_is_nonresidue():
    v = Fp6(0, 1, 0)
    assert v * v * v == Fp6(NONRESIDUE)


@settings(max_examples=25, deadline=None)
@given(nonzero_fp6s)
def test_fp6_inverse(a):
    assert a * a.inverse() == Fp6.one()


def test_fp6_zero_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Fp6.zero().inverse()


def test_fp6_is_zero():
    assert Fp6().is_zero() is True
    assert Fp6(0, 0, Fp2(0, 1)).is_zero() is False


@settings(max_examples=25, deadline=None)
@given(fp6s, fp6s, fp6s)
def test_fp6_ring_laws(a, b, c):
    assert a * b == b * a
    assert a * (b + c) - (a * b + a * c) == Fp6.zero()


@settings(max_examples=25, deadline=None)
@given(fp6s)
def test_fp6_mul_by_v(a):
    assert a.mul_by_v() == a * Fp6(0, 1, 0)


@settings(max_examples=5, deadline=None)
@given(fp2s, fp2s, fp2s)
def test_fp6_frobenius_is_pth_power(c0, c1, c2):
    a = Fp6(c0, c1, c2)
    assert a.frobenius() == a ** FIELD_MODULUS
    assert a.frobenius(6) == a


def test_fp6_rejects_bad_coefficient():
    with pytest.raises(TypeError):
        Fp6("x")


def test_w_squared_is_v():
    w = Fp12(0, 1)
    assert w * w == Fp12(Fp6(0, 1, 0))


@settings(max_examples=25, deadline=None)
@given(nonzero_fp12s)
def test_fp12_inverse(a):
    product = a * a.inverse()
    assert product == Fp12.one()
    assert product.is_one()


def test_fp12_zero_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Fp12.zero().inverse()


@settings(max_examples=25, deadline=None)
@given(fp12s)
def test_fp12_square_matches_mul(a):
    assert a.square() == a * a
    assert (a * Fp12.one()).square() == a * a
    assert Fp12.one().square() == Fp12.one()


@settings(max_examples=25, deadline=None)
@given(fp12s)
def test_fp12_conjugate(a):
    assert a.conjugate().conjugate() == a
    assert (a * a.conjugate()).c1.is_zero()
    assert (a * a.conjugate()).c1 == Fp6.zero()
    assert Fp12.one().conjugate() == Fp12.one()


@settings(max_examples=5, deadline=None)
@given(fp12s)
def test_fp12_frobenius(a):
    assert a.frobenius() == a ** FIELD_MODULUS
    assert a.frobenius(6) == a.conjugate()
    assert a.frobenius(12) == a
    assert Fp12.one().frobenius() == Fp12.one()


def test_fp12_one():
    one = Fp12.one()
    assert one.is_one() is True
    assert one.is_zero() is False
    assert Fp12.zero().is_zero() is True
    assert Fp12(0, 1).is_one() is False


@settings(max_examples=25, deadline=None)
@given(nonzero_fp12s)
def test_fp12_powers(a):
    assert (a ** 0).is_one()
    assert Fp12.one() * a == a
    assert a ** 3 == a * a * a
    assert a ** -3 == (a ** 3).inverse()


@settings(max_examples=25, deadline=None)
@given(fp12s, fp2s)
def test_fp12_scalar_mul(a, s):
    assert a * s == a * Fp12(Fp6(s))
    assert s * a == a * s