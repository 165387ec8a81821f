"""
ECDSA signature values.

Signatures travel as DER. The fixed-width form is r || s, each 32 bytes
big-endian, for callers that need a constant size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Self

from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from compact_keys.exceptions import SignatureDecodeError

from .point import FIELD_SIZE, P256_N

__all__ = [
    "RAW_SIGNATURE_LENGTH",
    "Signature",
]


RAW_SIGNATURE_LENGTH: Final[int] = 2 * FIELD_SIZE
"""Size of the fixed-width r || s form."""


@dataclass(frozen=True, slots=True)
class Signature:
    """
    An ECDSA signature over P-256.

    Attributes:
        r: First signature component, in [1, n-1].
        s: Second signature component, in [1, n-1].
    """

    r: int
    s: int

    def __post_init__(self) -> None:
        if not (0 < self.r < P256_N and 0 < self.s < P256_N):
            raise SignatureDecodeError("signature components out of range")

    @classmethod
    def from_der(cls, data: bytes) -> Self:
        """
        Parse a DER-encoded signature.

        Raises:
            SignatureDecodeError: If the bytes are not valid DER or r, s are out of range.
        """
        try:
            r, s = decode_dss_signature(data)
        except ValueError as e:
            raise SignatureDecodeError(f"malformed DER signature: {e}") from e
        return cls(r=r, s=s)

    def to_der(self) -> bytes:
        """Encode as a DER ECDSA-Sig-Value."""
        return encode_dss_signature(self.r, self.s)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Parse the fixed-width r || s form.

        Raises:
            SignatureDecodeError: If the length is wrong or r, s are out of range.
        """
        if len(data) != RAW_SIGNATURE_LENGTH:
            raise SignatureDecodeError(
                f"Expected {RAW_SIGNATURE_LENGTH} signature bytes, got {len(data)}"
            )
        return cls(
            r=int.from_bytes(data[:FIELD_SIZE], "big"),
            s=int.from_bytes(data[FIELD_SIZE:], "big"),
        )

    def to_bytes(self) -> bytes:
        """Encode as the fixed-width r || s form."""
        return self.r.to_bytes(FIELD_SIZE, "big") + self.s.to_bytes(FIELD_SIZE, "big")
