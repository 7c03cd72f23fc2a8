import pytest

from dssms.curve import CURVE_ORDER, G1Point, G2Point, g1_generator, g2_generator
from dssms.fields import Fp12
from dssms.pairing import pairing


@pytest.fixture(scope="module")
def base():
    return pairing(g1_generator(), g2_generator())


def test_non_degenerate(base):
    assert not base.is_one()
    assert not base.is_zero()


def test_result_has_order_r(base):
    assert (base**CURVE_ORDER).is_one()


def test_linear_in_first_argument(base):
    assert pairing(g1_generator() * 3, g2_generator()) == base**3


def test_linear_in_second_argument(base):
    assert pairing(g1_generator(), g2_generator() * 5) == base**5


def test_scalar_moves_between_arguments():
    a = 0x1234567890ABCDEF
    left = pairing(g1_generator() * a, g2_generator())
    right = pairing(g1_generator(), g2_generator() * a)
    assert left == right


def test_negated_point_gives_inverse(base):
    neg = pairing(-g1_generator(), g2_generator())
    assert neg * base == Fp12.one()
    assert neg == base.conjugate()


def test_sum_of_points_multiplies(base):
    p = g1_generator()
    lhs = pairing(p * 2 + p * 7, g2_generator())
    assert lhs == base**9


def test_infinity_in_g1_raises():
    with pytest.raises(ValueError):
        pairing(G1Point(), g2_generator())


def test_infinity_in_g2_raises():
    with pytest.raises(ValueError):
        pairing(g1_generator(), G2Point())


def test_order_multiple_raises():
    with pytest.raises(ValueError):
        pairing(g1_generator() * CURVE_ORDER, g2_generator())


def test_swapped_arguments_rejected():
    with pytest.raises(TypeError):
        pairing(g2_generator(), g1_generator())