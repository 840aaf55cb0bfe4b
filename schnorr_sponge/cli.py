"""Command-line demonstrations of single and multi-party signing."""

from __future__ import annotations

import argparse
from typing import Sequence

from schnorr_sponge.keypair import Keypair
from schnorr_sponge.musig import MuSig
from schnorr_sponge.params import MODULUS
from schnorr_sponge.signature import Signature
from schnorr_sponge.transcript import PoseidonTranscript

_BASIC_MESSAGE = 11082015
_MUSIG_MESSAGE = 16


def _flag(value: bool) -> str:
    return "true" if value else "false"


def run_basic() -> bool:
    """Sign and verify one message with a fresh keypair, reporting the outcome."""
    keypair = Keypair.generate()
    signature = Signature.sign(keypair, PoseidonTranscript(), _BASIC_MESSAGE)
    valid = signature.verify(keypair.public_key, PoseidonTranscript(), _BASIC_MESSAGE)
    print(f"Signed message: {_BASIC_MESSAGE}")
    print(f"Signature verification passed: {_flag(valid)}")
    return valid


def run_musig() -> bool:
    """Produce and verify a two-party MuSig signature, reporting the outcome."""
    k1 = Keypair.generate()
    r1, commitment1 = MuSig.create_nonce()
    k2 = Keypair.generate()
    r2, commitment2 = MuSig.create_nonce()

    pub_keys = [k1.public_key, k2.public_key]
    keyset_challenge = MuSig.keyset_challenge(pub_keys)
    agg_pub_key = MuSig.agg_pub_keys(pub_keys, keyset_challenge)
    agg_r = commitment1 + commitment2

    s1 = MuSig.sign(k1, _MUSIG_MESSAGE, keyset_challenge, agg_pub_key, agg_r, r1)
    s2 = MuSig.sign(k2, _MUSIG_MESSAGE, keyset_challenge, agg_pub_key, agg_r, r2)
    agg_s = (s1 + s2) % MODULUS

    musig = MuSig(agg_r, agg_s)
    valid = musig.verify(_MUSIG_MESSAGE, PoseidonTranscript(), agg_pub_key, agg_r, agg_s)
    print(f"MuSig signature is valid: {_flag(valid)}")
    return valid


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demonstration; exit status 0 when every signature verifies."""
    parser = argparse.ArgumentParser(description="Schnorr signature demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("basic", "musig", "all"),
        default="all",
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    results = []
    if args.demo in ("basic", "all"):
        results.append(run_basic())
    if args.demo in ("musig", "all"):
        results.append(run_musig())
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())