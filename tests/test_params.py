import pytest
from hypothesis import given
from hypothesis import strategies as st

from schnorr_sponge.params import (
    MODULUS,
    hex_to_field,
    mds,
    round_constants,
    round_constants_count,
    sbox,
    sbox_inv,
)

field_elements = st.integers(min_value=0, max_value=MODULUS - 1)


def test_round_constants_count():
    assert round_constants_count() == 340


def test_round_constants_length_matches_count():
    assert len(round_constants()) == round_constants_count()


def test_round_constants_are_reduced():
    assert all(0 <= c < MODULUS for c in round_constants())


def test_first_and_last_round_constants():
    constants = round_constants()
    assert constants[0] == int(
        "0eb544fee2815dda7f53e29ccac98ed7d889bb4ebd47c3864f3c2bd81a6da891", 16
    )
    assert constants[-1] == int(
        "29eb1de42a3ad381b23b4131426897a32709b29d53bb946dfd15784d1f63e572", 16
    )


def test_recovered_constant_matches_known_digits():
    text = f"{round_constants()[158]:064x}"
    assert text.startswith("0ebf7ad29ca13804e1422e")
    assert text.endswith("ff43e76e929035498130a7f1572")
    assert text[22:-27].isdigit()


def test_neighbours_of_recovered_constant():
    constants = round_constants()
    assert constants[157] == int(
        "0f5633df1972b9455953d88a63f80647a9ac77c6c0f85d4561972dd8fab8bd14", 16
    )
    assert constants[159] == int(
        "1aff13c81bda47e80b02962173bba343e18f94bee27c8a57661b1103a720ffe2", 16
    )


def test_mds_shape_and_corners():
    matrix = mds()
    assert len(matrix) == 5
    assert all(len(row) == 5 for row in matrix)
    assert matrix[0][0] == int(
        "251e7fdf99591080080b0af133b9e4369f22e57ace3cd7f64fc6fdbcf38d7da1", 16
    )
    assert matrix[4][4] == int(
        "14074bb14c982c81c9ad171e4f35fe49b39c4a7a72dbb6d9c98d803bfed65e64", 16
    )


def test_hex_to_field_small_values():
    assert hex_to_field("0x01") == 1
    assert hex_to_field("0x" + "00" * 31 + "2a") == 0x2A


def test_hex_to_field_masks_high_bits():
    assert hex_to_field(f"0x{(1 << 255) | 7:064x}") == 7


def test_hex_to_field_rejects_modulus():
    with pytest.raises(ValueError):
        hex_to_field(f"0x{MODULUS:064x}")


def test_hex_to_field_rejects_bad_hex():
    with pytest.raises(ValueError):
        hex_to_field("0xzz")
    with pytest.raises(ValueError):
        hex_to_field("0x123")


def test_hex_to_field_rejects_oversized_input():
    with pytest.raises(ValueError):
        hex_to_field("0x" + "00" * 65)


@given(field_elements)
def test_hex_to_field_round_trip(value):
    assert hex_to_field(f"0x{value:064x}") == value


def test_sbox_small_value():
    assert sbox(2) == 32


def test_sbox_of_minus_one():
    assert sbox(MODULUS - 1) == MODULUS - 1


@given(field_elements)
def test_sbox_inverse_round_trip(value):
    assert sbox_inv(sbox(value)) == value
    assert sbox(sbox_inv(value)) == value


@given(field_elements, field_elements)
def test_sbox_is_multiplicative(a, b):
    assert sbox(a * b) == sbox(a) * sbox(b) % MODULUS