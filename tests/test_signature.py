from dataclasses import replace
from unittest import mock

from schnorr_sponge.curve import G1Point
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.params import MODULUS
from schnorr_sponge.signature import Signature
from schnorr_sponge.transcript import PoseidonTranscript


def test_single_signature_valid():
    message = 16
    keypair = Keypair.generate()
    signature = Signature.sign(keypair, PoseidonTranscript(), message)
    assert signature.verify(keypair.public_key, PoseidonTranscript(), message)


def test_single_signature_invalid():
    message = 16
    bad_message = 666
    keypair = Keypair.generate()
    signature = Signature.sign(keypair, PoseidonTranscript(), message)
    assert not signature.verify(keypair.public_key, PoseidonTranscript(), bad_message)


def test_wrong_public_key_fails():
    keypair = Keypair.generate()
    other = Keypair.generate()
    signature = Signature.sign(keypair, PoseidonTranscript(), 11082015)
    assert not signature.verify(other.public_key, PoseidonTranscript(), 11082015)


def test_tampered_response_fails():
    keypair = Keypair.generate()
    signature = Signature.sign(keypair, PoseidonTranscript(), 16)
    tampered = replace(signature, s=(signature.s + 1) % MODULUS)
    assert not tampered.verify(keypair.public_key, PoseidonTranscript(), 16)


def test_commitment_comes_from_nonce():
    keypair = Keypair.generate()
    with mock.patch("secrets.randbelow", return_value=5):
        signature = Signature.sign(keypair, PoseidonTranscript(), 16)
    assert signature.r == G1Point.generator() * 5
    assert signature.verify(keypair.public_key, PoseidonTranscript(), 16)


def test_response_lies_in_scalar_field():
    keypair = Keypair.generate()
    signature = Signature.sign(keypair, PoseidonTranscript(), 16)
    assert 0 <= signature.s < MODULUS