"""Exception hierarchy for compact key encoding, parsing and signatures."""

from __future__ import annotations


class CompactKeysError(Exception):
    """
    Base exception for all key-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidLengthError(CompactKeysError):
    """
    Raised when an encoded value has the wrong number of bytes.

    Attributes:
        type_name: The type being decoded.
        expected: The exact length required.
        actual: The length received.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{type_name} expects exactly {expected} bytes, got {actual}")


class KeyTagError(CompactKeysError):
    """Base class for errors decoding the one-byte key tag."""


class UnknownNetworkError(KeyTagError):
    """
    Raised when the network bits of a key tag are not recognized.

    Attributes:
        tag: The full tag byte.
    """

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"Unknown network in key tag 0x{tag:02x}")


class UnknownKeyTypeError(KeyTagError):
    """
    Raised when the key-type bits of a key tag are not recognized.

    Attributes:
        tag: The full tag byte.
    """

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"Unknown key type in key tag 0x{tag:02x}")


class UnsupportedKeyTypeError(KeyTagError):
    """
    Raised when a valid tag names a key type this decoder does not handle.

    Attributes:
        key_type: Name of the key type found in the tag.
        expected: Name of the key type the decoder handles.
    """

    def __init__(self, key_type: str, expected: str) -> None:
        self.key_type = key_type
        self.expected = expected
        super().__init__(f"Unsupported key type {key_type}, expected {expected}")


class InvalidScalarError(CompactKeysError):
    """Raised when a private scalar is outside [1, n-1]."""


class InvalidPointError(CompactKeysError):
    """Raised when coordinates do not describe a point on the curve."""


class NotCompactError(CompactKeysError):
    """
    Raised when a point is not compactable.

    Covers both bytes that do not decode to a compactable point and
    entropy-derived keys whose public point is not compactable.
    """

    def __init__(self, detail: str = "point is not compactable") -> None:
        super().__init__(detail)


class SignatureError(CompactKeysError):
    """Base class for signature-related errors."""


class SignatureDecodeError(SignatureError):
    """Raised when signature bytes are not a well-formed ECDSA signature."""


class SignatureInvalidError(SignatureError):
    """Raised when a well-formed signature does not verify."""

    def __init__(self, detail: str = "signature verification failed") -> None:
        super().__init__(detail)


class Base58Error(CompactKeysError):
    """Raised on invalid Base58 characters, bad checksums or versions."""
