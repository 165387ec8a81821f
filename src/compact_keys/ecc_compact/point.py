"""
Compact encoding of P-256 points.

A SEC1 compressed point stores x plus a parity byte for y. The compact form
drops that byte and stores x only:

    compact(P) = x as 32 big-endian bytes

Every x on the curve has two candidate y values, y and p - y. Decoding always
picks the smaller one. A point is therefore only compactable when its own y
is the smaller root:

    compactable(x, y)  <=>  y <= p - y

About half of all points qualify, so key generation retries until it lands
on one. This must match other implementations bit for bit: a key is only
interoperable if every peer recovers the same y from the same 32 bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Self

from cryptography.hazmat.primitives.asymmetric import ec

from compact_keys.exceptions import InvalidPointError, NotCompactError
from compact_keys.types import Bytes32

__all__ = [
    "AffinePoint",
    "CURVE",
    "FIELD_SIZE",
    "P256_B",
    "P256_N",
    "P256_P",
    "decode_point",
    "encode_point",
    "is_compactable",
]


CURVE: Final = ec.SECP256R1()
"""The P-256 curve as understood by the cryptography library."""

FIELD_SIZE: Final[int] = 32
"""Size in bytes of a field element and of a scalar."""

P256_P: Final = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
"""P-256 field prime."""

P256_N: Final = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551
"""P-256 group order."""

P256_B: Final = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
"""P-256 curve coefficient b (a = -3)."""


@dataclass(frozen=True, slots=True)
class AffinePoint:
    """
    A finite point on P-256.

    Construction checks the curve equation y^2 = x^3 - 3x + b (mod p);
    the point at infinity cannot be represented.

    Attributes:
        x: The x-coordinate.
        y: The y-coordinate.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < P256_P and 0 <= self.y < P256_P):
            raise InvalidPointError("coordinates are not field elements")
        rhs = (pow(self.x, 3, P256_P) - 3 * self.x + P256_B) % P256_P
        if pow(self.y, 2, P256_P) != rhs:
            raise InvalidPointError("point is not on the P-256 curve")

    @classmethod
    def from_public_key(cls, public_key: ec.EllipticCurvePublicKey) -> Self:
        """Extract the affine coordinates of a library public key."""
        numbers = public_key.public_numbers()
        return cls(x=numbers.x, y=numbers.y)

    def to_public_key(self) -> ec.EllipticCurvePublicKey:
        """Build a library public key usable for ECDSA verification."""
        return ec.EllipticCurvePublicNumbers(self.x, self.y, CURVE).public_key()

    def negate(self) -> AffinePoint:
        """Return the point with the other y root, (x, p - y)."""
        return AffinePoint(x=self.x, y=(P256_P - self.y) % P256_P)


def is_compactable(point: AffinePoint) -> bool:
    """
    Check whether a point survives a compact encode/decode round trip.

    Decoding picks the smaller of the two y roots, so the point is
    compactable iff its y is that root.
    """
    return point.y <= P256_P - point.y


def encode_point(point: AffinePoint) -> Bytes32:
    """
    Encode a compactable point as its 32-byte big-endian x-coordinate.

    Args:
        point: A compactable point.

    Returns:
        The compact encoding.

    Raises:
        ValueError: If the point is not compactable. Callers only ever hold
            compactable points, so this signals a programming error.
    """
    if not is_compactable(point):
        raise ValueError("cannot compact-encode a point whose y is the upper root")
    return Bytes32.from_int(point.x)


def decode_point(data: bytes) -> AffinePoint:
    """
    Recover the compactable point whose x-coordinate is `data`.

    The library decompresses x with an arbitrary parity, and the smaller of
    y and p - y is kept.

    Args:
        data: 32-byte big-endian x-coordinate.

    Returns:
        The unique compactable point with that x.

    Raises:
        InvalidLengthError: If `data` is not 32 bytes.
        NotCompactError: If x is not a field element or not on the curve.
    """
    x_bytes = Bytes32(data)
    x = x_bytes.to_int()
    if x >= P256_P:
        raise NotCompactError("x-coordinate is not a field element")

    try:
        key = ec.EllipticCurvePublicKey.from_encoded_point(CURVE, b"\x02" + x_bytes)
    except ValueError as e:
        raise NotCompactError(f"no P-256 point has x-coordinate {x_bytes.hex()}") from e

    y = key.public_numbers().y
    return AffinePoint(x=x, y=min(y, P256_P - y))
