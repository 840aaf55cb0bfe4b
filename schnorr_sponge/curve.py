"""Points of the BN254 G1 group in affine coordinates.

The curve is ``y^2 = x^3 + 3`` over the base field. The group has prime
order equal to the scalar field modulus, so scalars are reduced modulo
that order before multiplication.
"""

from __future__ import annotations

from dataclasses import dataclass

from schnorr_sponge.params import MODULUS as SCALAR_MODULUS

BASE_MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
"""Order of the BN254 base field."""

CURVE_B = 3

_COORD_BYTES = 32
_FLAG_INFINITY = 0x40
_FLAG_Y_NEGATIVE = 0x80


def _inverse(value: int) -> int:
    return pow(value % BASE_MODULUS, -1, BASE_MODULUS)


@dataclass(frozen=True, eq=False)
class G1Point:
    """A point of BN254 G1; the identity carries ``infinity=True``."""

    x: int
    y: int
    infinity: bool = False

    def __post_init__(self) -> None:
        if self.infinity:
            if self.x or self.y:
                raise ValueError("the point at infinity has zero coordinates")
            return
        if not (0 <= self.x < BASE_MODULUS and 0 <= self.y < BASE_MODULUS):
            raise ValueError("coordinates must lie in the base field")
        if (self.y * self.y - pow(self.x, 3, BASE_MODULUS) - CURVE_B) % BASE_MODULUS:
            raise ValueError("point is not on the curve")

    @classmethod
    def generator(cls) -> G1Point:
        """The standard generator ``(1, 2)``."""
        return cls(1, 2)

    @classmethod
    def identity(cls) -> G1Point:
        """The point at infinity, the neutral element of the group."""
        return cls(0, 0, infinity=True)

    def is_identity(self) -> bool:
        """Whether this is the point at infinity."""
        return self.infinity

    def __add__(self, other: object) -> G1Point:
        if not isinstance(other, G1Point):
            return NotImplemented
        if self.infinity:
            return other
        if other.infinity:
            return self
        if self.x == other.x:
            if (self.y + other.y) % BASE_MODULUS == 0:
                return G1Point.identity()
            slope = 3 * self.x * self.x * _inverse(2 * self.y)
        else:
            slope = (other.y - self.y) * _inverse(other.x - self.x)
        slope %= BASE_MODULUS
        x3 = (slope * slope - self.x - other.x) % BASE_MODULUS
        y3 = (slope * (self.x - x3) - self.y) % BASE_MODULUS
        return G1Point(x3, y3)

    def __neg__(self) -> G1Point:
        if self.infinity:
            return self
        return G1Point(self.x, -self.y % BASE_MODULUS)

    def __sub__(self, other: object) -> G1Point:
        if not isinstance(other, G1Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> G1Point:
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        remaining = scalar % SCALAR_MODULUS
        result = G1Point.identity()
        addend = self
        while remaining:
            if remaining & 1:
                result = result + addend
            remaining >>= 1
            if remaining:
                addend = addend + addend
        return result

    def __rmul__(self, scalar: object) -> G1Point:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, G1Point):
            return NotImplemented
        if self.infinity or other.infinity:
            return self.infinity and other.infinity
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.infinity))

    def compress(self) -> bytes:
        """Encode as 32 little-endian bytes of ``x`` with flags in the top two bits.

        Bit 6 of the last byte marks the point at infinity, bit 7 marks a
        ``y`` coordinate greater than its negation.
        """
        if self.infinity:
            x, flags = 0, _FLAG_INFINITY
        else:
            negated = -self.y % BASE_MODULUS
            x = self.x
            flags = 0 if self.y <= negated else _FLAG_Y_NEGATIVE
        data = bytearray(x.to_bytes(_COORD_BYTES, "little"))
        data[-1] |= flags
        return bytes(data)