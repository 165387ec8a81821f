"""
Compact P-256 keys.

P-256 keypairs whose public point is stored as its x-coordinate only,
with the network and key type in a leading tag byte.
"""

from .keypair import KEYPAIR_LENGTH, Keypair
from .point import AffinePoint, decode_point, encode_point, is_compactable
from .public_key import PUBLIC_KEY_LENGTH, PublicKey
from .signature import Signature

__all__ = [
    "AffinePoint",
    "KEYPAIR_LENGTH",
    "Keypair",
    "PUBLIC_KEY_LENGTH",
    "PublicKey",
    "Signature",
    "decode_point",
    "encode_point",
    "is_compactable",
]
