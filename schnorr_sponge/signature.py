"""Schnorr signatures with Fiat-Shamir challenges from a transcript."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from schnorr_sponge.curve import G1Point
from schnorr_sponge.keypair import Keypair
from schnorr_sponge.params import MODULUS
from schnorr_sponge.transcript import Transcript


@dataclass(frozen=True)
class Signature:
    """A nonce commitment ``r`` and a response scalar ``s``."""

    r: G1Point
    s: int

    @classmethod
    def sign(cls, keypair: Keypair, transcript: Transcript, message: int) -> Signature:
        """Sign ``message``, absorbing the commitment, public key and message."""
        nonce = secrets.randbelow(MODULUS)
        commitment = G1Point.generator() * nonce

        transcript.absorb_point(commitment)
        transcript.absorb_point(keypair.public_key)
        transcript.absorb_scalar(message)
        challenge = transcript.squeeze_challenge()

        return cls(commitment, (nonce + challenge * keypair.private_key) % MODULUS)

    def verify(self, public_key: G1Point, transcript: Transcript, message: int) -> bool:
        """Check ``generator * s == public_key * challenge + r``."""
        transcript.absorb_point(self.r)
        transcript.absorb_point(public_key)
        transcript.absorb_scalar(message)
        challenge = transcript.squeeze_challenge()

        return G1Point.generator() * self.s == public_key * challenge + self.r