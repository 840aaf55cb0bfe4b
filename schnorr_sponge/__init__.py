"""Schnorr and MuSig signatures over BN254 with Poseidon-based transcripts."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "constants_head",
    "curve",
    "keypair",
    "musig",
    "params",
    "poseidon",
    "signature",
    "sponge",
    "transcript",
]