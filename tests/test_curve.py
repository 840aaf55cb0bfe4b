import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from schnorr_sponge.curve import BASE_MODULUS, G1Point
from schnorr_sponge.params import MODULUS

scalars = st.integers(min_value=0, max_value=MODULUS - 1)


def test_generator_compresses_to_x_one_without_flags():
    assert G1Point.generator().compress() == b"\x01" + b"\x00" * 31


def test_identity_compresses_with_infinity_flag():
    assert G1Point.identity().compress() == b"\x00" * 31 + b"\x40"


def test_negated_generator_carries_negative_flag():
    data = (-G1Point.generator()).compress()
    assert data[-1] == 0x80
    assert data[:-1] == b"\x01" + b"\x00" * 30


def test_generator_plus_negation_is_identity():
    g = G1Point.generator()
    assert (g + (-g)).is_identity()
    assert (g - g) == G1Point.identity()


def test_identity_is_neutral():
    g = G1Point.generator()
    assert G1Point.identity() + g == g
    assert g + G1Point.identity() == g


def test_multiplication_by_small_scalars():
    g = G1Point.generator()
    assert g * 0 == G1Point.identity()
    assert g * 1 == g
    assert g * 2 == g + g
    assert 3 * g == g + g + g


def test_group_order_is_scalar_modulus():
    g = G1Point.generator()
    assert g * (MODULUS - 1) == -g
    assert (g * (MODULUS - 1) + g).is_identity()


def test_point_off_curve_is_rejected():
    with pytest.raises(ValueError):
        G1Point(1, 3)


def test_coordinates_outside_field_are_rejected():
    with pytest.raises(ValueError):
        G1Point(1 + BASE_MODULUS, 2)


def test_multiplication_by_non_integer_raises():
    with pytest.raises(TypeError):
        G1Point.generator() * 1.5


def test_equal_points_hash_equally():
    g = G1Point.generator()
    doubled = g * 2
    assert {doubled, g + g} == {doubled}


@settings(max_examples=15, deadline=None)
@given(scalars, scalars)
def test_scalar_multiplication_distributes(a, b):
    g = G1Point.generator()
    assert g * a + g * b == g * ((a + b) % MODULUS)


@settings(max_examples=15, deadline=None)
@given(scalars)
def test_negative_scalar_negates(k):
    g = G1Point.generator()
    assert g * (-k) == -(g * k)


@settings(max_examples=15, deadline=None)
@given(scalars)
def test_multiples_stay_on_curve_and_compress_to_32_bytes(k):
    point = G1Point.generator() * k
    data = point.compress()
    assert len(data) == 32
    if not point.is_identity():
        assert (point.y ** 2 - point.x ** 3 - 3) % BASE_MODULUS == 0