from unittest import mock

from schnorr_sponge.curve import G1Point
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.params import MODULUS


def test_public_key_matches_private_key():
    keypair = Keypair.generate()
    assert 0 <= keypair.private_key < MODULUS
    assert keypair.public_key == G1Point.generator() * keypair.private_key


def test_private_key_drawn_from_scalar_field():
    with mock.patch("secrets.randbelow", return_value=7) as draw:
        keypair = Keypair.generate()
    draw.assert_called_once_with(MODULUS)
    assert keypair.private_key == 7
    assert keypair.public_key == G1Point.generator() * 7


def test_repr_hides_private_key():
    keypair = Keypair.generate()
    assert "private_key" not in repr(keypair)
    assert "public_key" in repr(keypair)