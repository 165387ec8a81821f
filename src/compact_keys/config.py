"""
Global configuration for compact keys.

This module contains environment-specific settings read once at import.
"""

import os

from compact_keys.key_tag import Network

_SUPPORTED_NETWORKS: dict[str, Network] = {
    "mainnet": Network.MAINNET,
    "testnet": Network.TESTNET,
}

COMPACT_KEYS_NETWORK = os.environ.get("COMPACT_KEYS_NETWORK", "mainnet").lower()
"""The network name ('mainnet' or 'testnet'). Defaults to 'mainnet'."""

if COMPACT_KEYS_NETWORK not in _SUPPORTED_NETWORKS:
    raise ValueError(
        f"Invalid COMPACT_KEYS_NETWORK environment variable: '{COMPACT_KEYS_NETWORK}'. "
        f"Supported values: {list(_SUPPORTED_NETWORKS)}"
    )

DEFAULT_NETWORK: Network = _SUPPORTED_NETWORKS[COMPACT_KEYS_NETWORK]
"""Network used for key generation when the caller does not name one."""
