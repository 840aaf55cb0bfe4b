"""Schnorr key pairs over BN254 G1."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field

from schnorr_sponge.curve import G1Point
from schnorr_sponge.params import MODULUS


@dataclass(frozen=True)
class Keypair:
    """A private scalar and its public point ``generator * private_key``."""

    private_key: int = field(repr=False)
    public_key: G1Point

    @classmethod
    def generate(cls) -> Keypair:
        """Draw a uniformly random private key and derive the public key."""
        private_key = secrets.randbelow(MODULUS)
        return cls(private_key, G1Point.generator() * private_key)