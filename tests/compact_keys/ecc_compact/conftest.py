"""Shared fixtures for compact key tests."""

from __future__ import annotations

import pytest

from compact_keys.ecc_compact import Keypair
from compact_keys.key_tag import Network


@pytest.fixture(scope="module")
def keypair() -> Keypair:
    """A random mainnet keypair shared by a test module."""
    return Keypair.generate(Network.MAINNET)
