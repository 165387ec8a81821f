"""
Base58 and Base58Check encoding for human-readable keys.

Public keys are displayed as Base58Check strings:

    payload  = version || data
    checksum = sha256(sha256(payload))[:4]
    string   = base58(payload || checksum)

Keys use version 0, and the mainnet ECC_COMPACT tag is also 0, so their
strings start with "11".
"""

from __future__ import annotations

import hashlib
from typing import Final

from .exceptions import Base58Error

__all__ = [
    "Base58",
]


_CHECKSUM_LENGTH: Final[int] = 4
"""Number of double-SHA256 bytes appended as checksum."""


def _checksum(payload: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:_CHECKSUM_LENGTH]


class Base58:
    """
    Base58 encoding/decoding (Bitcoin-style alphabet).

    Base58 excludes visually ambiguous characters (0, O, I, l) making it
    suitable for human-readable identifiers like public keys.
    """

    ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    """Base58 alphabet (Bitcoin style, excludes 0, O, I, l)."""

    @classmethod
    def encode(cls, data: bytes) -> str:
        """
        Encode bytes as Base58 string.

        Leading zero bytes become leading '1' characters.
        """
        leading_zeros = len(data) - len(data.lstrip(b"\x00"))

        num = int.from_bytes(data, "big")
        result: list[str] = []

        while num > 0:
            num, remainder = divmod(num, 58)
            result.append(cls.ALPHABET[remainder])

        result.extend([cls.ALPHABET[0]] * leading_zeros)
        return "".join(reversed(result))

    @classmethod
    def decode(cls, s: str) -> bytes:
        """
        Decode Base58 string to bytes.

        Leading '1' characters become leading zero bytes.

        Raises:
            Base58Error: If string contains invalid characters.
        """
        leading_ones = len(s) - len(s.lstrip(cls.ALPHABET[0]))

        num = 0
        for char in s:
            index = cls.ALPHABET.find(char)
            if index < 0:
                raise Base58Error(f"Invalid Base58 character: {char!r}")
            num = num * 58 + index

        if num == 0:
            result = b""
        else:
            result = num.to_bytes((num.bit_length() + 7) // 8, "big")

        return b"\x00" * leading_ones + result

    @classmethod
    def encode_check(cls, data: bytes, version: int = 0) -> str:
        """
        Encode bytes as Base58Check with a one-byte version prefix.

        Args:
            data: Payload to encode.
            version: Version byte prepended to the payload.

        Returns:
            Base58Check string.
        """
        payload = bytes([version]) + data
        return cls.encode(payload + _checksum(payload))

    @classmethod
    def decode_check(cls, s: str, version: int = 0) -> bytes:
        """
        Decode a Base58Check string and strip its version and checksum.

        Args:
            s: Base58Check string.
            version: Version byte the string must carry.

        Returns:
            The payload without version byte and checksum.

        Raises:
            Base58Error: On invalid characters, a bad checksum or a version mismatch.
        """
        raw = cls.decode(s)
        if len(raw) < 1 + _CHECKSUM_LENGTH:
            raise Base58Error(f"Base58Check string too short: {len(raw)} bytes")

        payload, checksum = raw[:-_CHECKSUM_LENGTH], raw[-_CHECKSUM_LENGTH:]
        if _checksum(payload) != checksum:
            raise Base58Error("Base58Check checksum mismatch")
        if payload[0] != version:
            raise Base58Error(f"Unexpected Base58Check version {payload[0]}, expected {version}")
        return payload[1:]
