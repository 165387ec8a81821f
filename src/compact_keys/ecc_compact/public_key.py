"""
Compact P-256 public keys.

Wire format, 33 bytes:

    [tag:1][x:32]

The tag carries the network and the ECC_COMPACT key type; x is the compact
point encoding. For display the 33 bytes are Base58Check encoded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Self

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from compact_keys.base58 import Base58
from compact_keys.config import DEFAULT_NETWORK
from compact_keys.exceptions import InvalidLengthError, SignatureInvalidError
from compact_keys.key_tag import KeyTag, KeyType, Network
from compact_keys.types import Bytes33

from .point import AffinePoint, decode_point, encode_point
from .signature import Signature

__all__ = [
    "PUBLIC_KEY_LENGTH",
    "PublicKey",
]

logger = logging.getLogger(__name__)


PUBLIC_KEY_LENGTH: Final[int] = 33
"""Tag byte plus 32-byte compact point."""


@dataclass(frozen=True, slots=True)
class PublicKey:
    """
    A compactable P-256 public key bound to a network.

    Equality and hashing only look at the point; the network is carried
    for serialization.

    Attributes:
        point: The public point, always compactable.
        network: Network the key was constructed for.
    """

    point: AffinePoint
    network: Network = field(default=DEFAULT_NETWORK, compare=False)

    def to_bytes(self) -> Bytes33:
        """
        Serialize as tag byte plus compact point.

        Returns:
            33-byte tagged public key.
        """
        tag = KeyTag(network=self.network, key_type=KeyType.ECC_COMPACT)
        return Bytes33(bytes([tag.to_byte()]) + encode_point(self.point))

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Parse a 33-byte tagged public key.

        Raises:
            InvalidLengthError: If data is not 33 bytes.
            UnknownNetworkError: If the tag names no known network.
            UnknownKeyTypeError: If the tag names no known key type.
            UnsupportedKeyTypeError: If the tag is not ECC_COMPACT.
            NotCompactError: If the body is not a compactable point.
        """
        if len(data) != PUBLIC_KEY_LENGTH:
            raise InvalidLengthError("PublicKey", expected=PUBLIC_KEY_LENGTH, actual=len(data))

        tag = KeyTag.from_byte(data[0])
        tag.expect_key_type(KeyType.ECC_COMPACT)
        return cls(point=decode_point(data[1:]), network=tag.network)

    def to_b58(self) -> str:
        """Return the Base58Check display form of the tagged key."""
        return Base58.encode_check(self.to_bytes())

    @classmethod
    def from_b58(cls, s: str) -> Self:
        """
        Parse the Base58Check display form.

        Raises:
            Base58Error: If the string is not valid Base58Check.
            CompactKeysError: Any error raised by `from_bytes`.
        """
        return cls.from_bytes(Base58.decode_check(s))

    def __str__(self) -> str:
        return self.to_b58()

    def verify(self, message: bytes, signature: bytes) -> None:
        """
        Verify an ECDSA-SHA256 signature over `message`.

        Args:
            message: The signed data.
            signature: DER-encoded ECDSA signature.

        Raises:
            SignatureDecodeError: If the signature is not well-formed DER.
            SignatureInvalidError: If the signature does not match.
        """
        parsed = Signature.from_der(signature)
        try:
            self.point.to_public_key().verify(
                parsed.to_der(), message, ec.ECDSA(hashes.SHA256())
            )
        except InvalidSignature as e:
            logger.debug("Signature rejected for public key %s", self)
            raise SignatureInvalidError() from e
