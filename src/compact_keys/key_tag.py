"""
One-byte key tag.

Every serialized key starts with a tag byte identifying the network the key
belongs to and the key-type variant of the bytes that follow:

    tag = network | key_type

    bit:   7 6 5 4   3 2 1 0
          [network] [key type]

The high nibble selects the network, the low nibble the key type. Decoders
for one key type accept the general tag and reject the others, so several
key-type implementations can share the same wire format.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final, Self

from .exceptions import UnknownKeyTypeError, UnknownNetworkError, UnsupportedKeyTypeError
from .types import StrictBaseModel

__all__ = [
    "KeyTag",
    "KeyType",
    "Network",
]


_NETWORK_MASK: Final[int] = 0xF0
"""Bits of the tag holding the network."""

_KEY_TYPE_MASK: Final[int] = 0x0F
"""Bits of the tag holding the key type."""


class Network(IntEnum):
    """Networks a key can be bound to (already shifted into the high nibble)."""

    MAINNET = 0x00
    """Production network."""

    TESTNET = 0x10
    """Test network."""


class KeyType(IntEnum):
    """
    Key-type variants sharing the tagged wire format.

    Only `ECC_COMPACT` is implemented by this package. The remaining codes
    are reserved so that tags written by other implementations parse.
    """

    ECC_COMPACT = 0x00
    """P-256 key with a compactable public point (32-byte x only)."""

    ED25519 = 0x01
    """Ed25519 key."""

    MULTISIG = 0x02
    """Multi-signature key."""

    SECP256K1 = 0x03
    """secp256k1 key."""

    RSA = 0x04
    """RSA key."""


class KeyTag(StrictBaseModel):
    """Network and key type of a serialized key, packed into one byte."""

    network: Network
    """Network the key belongs to."""

    key_type: KeyType
    """Key-type variant of the key bytes."""

    def to_byte(self) -> int:
        """Pack the tag into a single byte value."""
        return int(self.network) | int(self.key_type)

    @classmethod
    def from_byte(cls, value: int) -> Self:
        """
        Unpack a tag byte.

        Args:
            value: Tag byte in [0, 255].

        Returns:
            The decoded tag.

        Raises:
            UnknownNetworkError: If the high nibble is not a known network.
            UnknownKeyTypeError: If the low nibble is not a known key type.
        """
        try:
            network = Network(value & _NETWORK_MASK)
        except ValueError as e:
            raise UnknownNetworkError(value) from e
        try:
            key_type = KeyType(value & _KEY_TYPE_MASK)
        except ValueError as e:
            raise UnknownKeyTypeError(value) from e
        return cls(network=network, key_type=key_type)

    def expect_key_type(self, key_type: KeyType) -> None:
        """
        Check that this tag names the given key type.

        Raises:
            UnsupportedKeyTypeError: If the tag names a different key type.
        """
        if self.key_type != key_type:
            raise UnsupportedKeyTypeError(self.key_type.name, key_type.name)
