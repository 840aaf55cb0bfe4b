"""MuSig multi-signatures with Poseidon transcripts for Fiat-Shamir."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Sequence

from schnorr_sponge.curve import G1Point
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.params import MODULUS
from schnorr_sponge.transcript import Transcript, poseidon_transcript


def _key_coefficient(keyset_challenge: int, pub_key: G1Point) -> int:
    transcript = poseidon_transcript()
    transcript.absorb_scalar(keyset_challenge)
    transcript.absorb_point(pub_key)
    return transcript.squeeze_challenge()


@dataclass(frozen=True)
class MuSig:
    """An aggregated signature: the summed nonce point and summed response."""

    agg_r: G1Point
    agg_s: int

    @staticmethod
    def keyset_challenge(pub_keys: Sequence[G1Point]) -> int:
        """Hash all public keys, in order, into a single challenge."""
        transcript = poseidon_transcript()
        for pub_key in pub_keys:
            transcript.absorb_point(pub_key)
        return transcript.squeeze_challenge()

    @staticmethod
    def agg_pub_keys(pub_keys: Sequence[G1Point], keyset_challenge: int) -> G1Point:
        """Sum the public keys, each weighted by its own coefficient."""
        total = G1Point.identity()
        for pub_key in pub_keys:
            total = total + pub_key * _key_coefficient(keyset_challenge, pub_key)
        return total

    @staticmethod
    def create_nonce() -> tuple[int, G1Point]:
        """Draw a random nonce and return it with its commitment."""
        nonce = secrets.randbelow(MODULUS)
        return nonce, G1Point.generator() * nonce

    @staticmethod
    def sign(
        keypair: Keypair,
        message: int,
        keyset_challenge: int,
        agg_pub_key: G1Point,
        agg_r: G1Point,
        r: int,
    ) -> int:
        """Compute one participant's partial signature."""
        transcript = poseidon_transcript()
        transcript.absorb_point(agg_pub_key)
        transcript.absorb_point(agg_r)
        transcript.absorb_scalar(message)
        challenge = transcript.squeeze_challenge()

        coefficient = _key_coefficient(keyset_challenge, keypair.public_key)
        return (r + challenge * coefficient * keypair.private_key) % MODULUS

    def verify(
        self,
        message: int,
        transcript: Transcript,
        agg_pub_key: G1Point,
        agg_r: G1Point,
        agg_s: int,
    ) -> bool:
        """Check ``generator * agg_s == agg_r + agg_pub_key * challenge``."""
        transcript.absorb_point(agg_pub_key)
        transcript.absorb_point(agg_r)
        transcript.absorb_scalar(message)
        challenge = transcript.squeeze_challenge()

        return G1Point.generator() * agg_s == agg_r + agg_pub_key * challenge