import string

import pytest

from schnorr_sponge.constants_head import raw_constants_head


FIRST_CONSTANT = "0x0eb544fee2815dda7f53e29ccac98ed7d889bb4ebd47c3864f3c2bd81a6da891"
SIXTH_CONSTANT = "0x2eb4f99c69f966ebf8a42192de7ff61621c7bb47b93750c2b9ea08d18446c122"


def test_count_is_whole_rounds():
    constants = raw_constants_head()
    assert len(constants) == 158
    # The opening four full rounds use the first 20 constants.
    assert len(constants) > 20


def test_first_constant_matches_source():
    assert raw_constants_head()[0] == FIRST_CONSTANT


def test_first_partial_round_constant_matches_source():
    assert raw_constants_head()[20] == (
        "0x0a01776bb22f4b6b8eccff33e76fded3144fb7e3ac14e846a91e64afb1500eff"
    )


def test_last_constant_matches_source():
    assert raw_constants_head()[-1] == (
        "0x0f5633df1972b9455953d88a63f80647a9ac77c6c0f85d4561972dd8fab8bd14"
    )


@pytest.mark.parametrize("index", range(158))
def test_each_constant_is_prefixed_32_byte_hex(index):
    value = raw_constants_head()[index]
    assert value.startswith("0x")
    digits = value[2:]
    assert len(digits) == 64
    assert set(digits) <= set(string.hexdigits.lower())
    assert len(bytes.fromhex(digits)) == 32


def test_constants_fit_in_254_bits():
    for value in raw_constants_head():
        assert int(value, 16).bit_length() <= 254


def test_constants_are_distinct():
    constants = raw_constants_head()
    assert len(set(constants)) == len(constants)


def test_repeated_calls_agree():
    first = raw_constants_head()
    second = raw_constants_head()
    assert first[5] == SIXTH_CONSTANT
    assert second[5] == SIXTH_CONSTANT
    assert len(first) == len(second) == 158
    assert list(first) == list(second)


def test_result_is_immutable():
    constants = raw_constants_head()
    with pytest.raises(TypeError):
        constants[0] = "0x00"  # type: ignore[index]
    assert constants[0] == FIRST_CONSTANT
    assert raw_constants_head()[0] == FIRST_CONSTANT