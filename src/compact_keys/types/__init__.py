"""Reusable type definitions for compact key encodings."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32, Bytes33

__all__ = [
    "BaseBytes",
    "Bytes32",
    "Bytes33",
    "StrictBaseModel",
]
