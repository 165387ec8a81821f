"""Test helpers for compact key tests."""

from .rng import scripted_rng
from .scalars import COMPACT_SCALAR, NON_COMPACT_SCALAR, scalar_bytes

__all__ = [
    "COMPACT_SCALAR",
    "NON_COMPACT_SCALAR",
    "scalar_bytes",
    "scripted_rng",
]
