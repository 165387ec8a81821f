"""Network-tagged compact P-256 keys for peer identity."""

from .base58 import Base58
from .ecc_compact import (
    KEYPAIR_LENGTH,
    PUBLIC_KEY_LENGTH,
    AffinePoint,
    Keypair,
    PublicKey,
    Signature,
    decode_point,
    encode_point,
    is_compactable,
)
from .exceptions import (
    Base58Error,
    CompactKeysError,
    InvalidLengthError,
    InvalidPointError,
    InvalidScalarError,
    KeyTagError,
    NotCompactError,
    SignatureDecodeError,
    SignatureError,
    SignatureInvalidError,
    UnknownKeyTypeError,
    UnknownNetworkError,
    UnsupportedKeyTypeError,
)
from .key_tag import KeyTag, KeyType, Network

__all__ = [
    # Keys
    "Keypair",
    "PublicKey",
    "Signature",
    "KEYPAIR_LENGTH",
    "PUBLIC_KEY_LENGTH",
    # Point codec
    "AffinePoint",
    "decode_point",
    "encode_point",
    "is_compactable",
    # Tags
    "KeyTag",
    "KeyType",
    "Network",
    # Display
    "Base58",
    # Exceptions
    "CompactKeysError",
    "InvalidLengthError",
    "KeyTagError",
    "UnknownNetworkError",
    "UnknownKeyTypeError",
    "UnsupportedKeyTypeError",
    "InvalidScalarError",
    "InvalidPointError",
    "NotCompactError",
    "SignatureError",
    "SignatureDecodeError",
    "SignatureInvalidError",
    "Base58Error",
]
