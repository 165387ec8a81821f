"""
Compact P-256 keypairs.

Wire format, 33 bytes:

    [tag:1][scalar:32]

The scalar is big-endian and zero-padded. Only keys whose public point is
compactable are produced by generation, so the public half always fits the
32-byte compact encoding.
"""

from __future__ import annotations

import hmac
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final, Self

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from compact_keys.config import DEFAULT_NETWORK
from compact_keys.exceptions import InvalidLengthError, InvalidScalarError, NotCompactError
from compact_keys.key_tag import KeyTag, KeyType, Network
from compact_keys.types import Bytes32, Bytes33

from .point import CURVE, FIELD_SIZE, P256_N, AffinePoint, is_compactable
from .public_key import PublicKey

__all__ = [
    "KEYPAIR_LENGTH",
    "Keypair",
]

logger = logging.getLogger(__name__)


KEYPAIR_LENGTH: Final[int] = 33
"""Tag byte plus 32-byte private scalar."""


def _parse_scalar(data: bytes) -> int:
    """
    Read a big-endian private scalar and check it is in [1, n-1].

    Raises:
        InvalidScalarError: If the scalar is zero or not below the group order.
    """
    scalar = Bytes32(data).to_int()
    if not 0 < scalar < P256_N:
        raise InvalidScalarError("private scalar is outside [1, n-1]")
    return scalar


def _random_scalar(rng: Callable[[int], bytes]) -> int:
    """Draw a uniform scalar in [1, n-1] by rejection sampling."""
    while True:
        candidate = int.from_bytes(rng(FIELD_SIZE), "big")
        if 0 < candidate < P256_N:
            return candidate


@dataclass(frozen=True, slots=True, eq=False)
class Keypair:
    """
    P-256 keypair whose public point is compactable.

    The private key is held as a library key object and never appears in
    `repr()`.

    Attributes:
        network: Network the key belongs to.
        private_key: The P-256 private key.
        public_key: The matching public key.
    """

    network: Network
    private_key: ec.EllipticCurvePrivateKey = field(repr=False)
    public_key: PublicKey

    @classmethod
    def _from_scalar(cls, network: Network, scalar: int) -> Self:
        private_key = ec.derive_private_key(scalar, CURVE)
        point = AffinePoint.from_public_key(private_key.public_key())
        return cls(
            network=network,
            private_key=private_key,
            public_key=PublicKey(point=point, network=network),
        )

    @classmethod
    def generate(
        cls,
        network: Network = DEFAULT_NETWORK,
        rng: Callable[[int], bytes] = os.urandom,
    ) -> Self:
        """
        Generate a random keypair with a compactable public point.

        Scalars are redrawn until the point is compactable. Each draw
        succeeds with probability about 1/2, so the loop has no cap: the
        chance of it running long is negligible, though never zero.

        Args:
            network: Network to bind the key to.
            rng: Cryptographically secure source returning `n` random bytes.

        Returns:
            A fresh keypair.
        """
        attempts = 1
        keypair = cls._from_scalar(network, _random_scalar(rng))
        while not is_compactable(keypair.public_key.point):
            attempts += 1
            keypair = cls._from_scalar(network, _random_scalar(rng))

        logger.debug("Generated compactable keypair after %d attempt(s)", attempts)
        return keypair

    @classmethod
    def generate_from_entropy(cls, network: Network, entropy: bytes) -> Self:
        """
        Derive a keypair deterministically from 32 bytes of entropy.

        Unlike `generate`, this never resamples: the same entropy always
        gives the same key or the same error.

        Args:
            network: Network to bind the key to.
            entropy: 32 bytes read as a big-endian scalar.

        Returns:
            The derived keypair.

        Raises:
            InvalidLengthError: If entropy is not 32 bytes.
            InvalidScalarError: If the scalar is outside [1, n-1].
            NotCompactError: If the derived public point is not compactable.
        """
        keypair = cls._from_scalar(network, _parse_scalar(entropy))
        if not is_compactable(keypair.public_key.point):
            logger.debug("Entropy yields a non-compactable public key")
            raise NotCompactError("entropy-derived public key is not compactable")
        return keypair

    def to_bytes(self) -> Bytes33:
        """
        Serialize as tag byte plus 32-byte private scalar.

        Returns:
            33-byte tagged keypair.
        """
        tag = KeyTag(network=self.network, key_type=KeyType.ECC_COMPACT)
        return Bytes33(bytes([tag.to_byte()]) + self._scalar_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Parse a 33-byte tagged keypair.

        The public point is derived from the scalar. Its compactability is
        not rechecked, since stored scalars come from generation.

        Raises:
            InvalidLengthError: If data is not 33 bytes.
            UnknownNetworkError: If the tag names no known network.
            UnknownKeyTypeError: If the tag names no known key type.
            UnsupportedKeyTypeError: If the tag is not ECC_COMPACT.
            InvalidScalarError: If the scalar is outside [1, n-1].
        """
        if len(data) != KEYPAIR_LENGTH:
            raise InvalidLengthError("Keypair", expected=KEYPAIR_LENGTH, actual=len(data))

        tag = KeyTag.from_byte(data[0])
        tag.expect_key_type(KeyType.ECC_COMPACT)
        return cls._from_scalar(tag.network, _parse_scalar(data[1:]))

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message with ECDSA-SHA256.

        Args:
            message: Data to sign, of any length.

        Returns:
            DER-encoded ECDSA signature.
        """
        return self.private_key.sign(message, ec.ECDSA(hashes.SHA256()))

    def _scalar_bytes(self) -> Bytes32:
        return Bytes32.from_int(self.private_key.private_numbers().private_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keypair):
            return NotImplemented
        return (
            self.network == other.network
            and self.public_key == other.public_key
            and hmac.compare_digest(self._scalar_bytes(), other._scalar_bytes())
        )
