"""Fiat-Shamir transcripts that absorb curve points and scalars."""

from __future__ import annotations

from abc import ABC, abstractmethod

from schnorr_sponge.curve import G1Point
from schnorr_sponge.params import MODULUS
from schnorr_sponge.sponge import PoseidonSponge

_SCALAR_BITS = MODULUS.bit_length()
_SCALAR_BYTES = (_SCALAR_BITS + 7) // 8


def _scalar_from_bytes(data: bytes) -> int:
    """Read little-endian bytes as a scalar, dropping bits above the modulus size."""
    value = int.from_bytes(data[:_SCALAR_BYTES], "little")
    value &= (1 << _SCALAR_BITS) - 1
    if value >= MODULUS:
        raise ValueError("encoded point does not map to a scalar field element")
    return value


class Transcript(ABC):
    """A transcript that absorbs points and scalars and yields challenges."""

    @abstractmethod
    def absorb_point(self, point: G1Point) -> None:
        """Absorb a curve point."""

    @abstractmethod
    def absorb_scalar(self, scalar: int) -> None:
        """Absorb a scalar field element."""

    @abstractmethod
    def squeeze_challenge(self) -> int:
        """Derive a challenge from everything absorbed so far."""


class PoseidonTranscript(Transcript):
    """Transcript backed by a Poseidon sponge.

    A point is absorbed through its compressed encoding read back as a
    scalar; the flag bits of the encoding do not take part.
    """

    def __init__(self) -> None:
        self._sponge = PoseidonSponge()

    def __repr__(self) -> str:
        return f"PoseidonTranscript({self._sponge!r})"

    def absorb_point(self, point: G1Point) -> None:
        self._sponge.update([_scalar_from_bytes(point.compress())])

    def absorb_scalar(self, scalar: int) -> None:
        self._sponge.update([scalar])

    def squeeze_challenge(self) -> int:
        return self._sponge.squeeze()


def poseidon_transcript() -> Transcript:
    """Create a fresh Poseidon transcript."""
    return PoseidonTranscript()