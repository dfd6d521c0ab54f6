"""
Network configuration for the governance proposal tooling.

Maps chains to their RPC defaults and block-explorer (ABI registry)
endpoints. Chains are looked up by name or by chain id.
"""

import os
from typing import Any

from src.proposal.errors import UnsupportedChainError


# =============================================================================
# CHAIN CONFIGURATIONS
# =============================================================================

# Every chain is served by the single Etherscan V2 endpoint, selected by
# the ``chainid`` query parameter.
ETHERSCAN_V2_API_URL = "https://api.etherscan.io/v2/api"

CHAINS: dict[str, dict[str, Any]] = {
    "mainnet": {
        "chain_id": 1,
        "name": "Ethereum Mainnet",
        "currency": "ETH",
        "explorer": {
            "name": "Etherscan",
            "url": "https://etherscan.io",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
    "sepolia": {
        "chain_id": 11155111,
        "name": "Sepolia",
        "currency": "ETH",
        "explorer": {
            "name": "Etherscan Sepolia",
            "url": "https://sepolia.etherscan.io",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
    "holesky": {
        "chain_id": 17000,
        "name": "Holesky",
        "currency": "ETH",
        "explorer": {
            "name": "Etherscan Holesky",
            "url": "https://holesky.etherscan.io",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
    "optimism": {
        "chain_id": 10,
        "name": "OP Mainnet",
        "currency": "ETH",
        "explorer": {
            "name": "Optimistic Etherscan",
            "url": "https://optimistic.etherscan.io",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
    "polygon": {
        "chain_id": 137,
        "name": "Polygon",
        "currency": "POL",
        "explorer": {
            "name": "PolygonScan",
            "url": "https://polygonscan.com",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
    "base": {
        "chain_id": 8453,
        "name": "Base",
        "currency": "ETH",
        "explorer": {
            "name": "BaseScan",
            "url": "https://basescan.org",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
    "arbitrum": {
        "chain_id": 42161,
        "name": "Arbitrum One",
        "currency": "ETH",
        "explorer": {
            "name": "Arbiscan",
            "url": "https://arbiscan.io",
            "api_url": ETHERSCAN_V2_API_URL,
        },
    },
}

# Chain ID to name mapping
CHAIN_ID_TO_NAME: dict[int, str] = {
    config["chain_id"]: name for name, config in CHAINS.items()
}

# Network timeouts
RPC_TIMEOUT: int = 30  # seconds


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_chain_config(chain: str | int | None = None) -> dict[str, Any]:
    """Get configuration for a specific chain.

    Args:
        chain: Chain name (e.g., 'mainnet', 'sepolia') or chain ID.
               If None, uses CHAIN environment variable or defaults to 'mainnet'.

    Returns:
        Chain configuration dictionary.

    Raises:
        UnsupportedChainError: If chain is not supported.
    """
    if chain is None:
        chain = os.getenv("CHAIN", "mainnet")

    if isinstance(chain, int):
        name = CHAIN_ID_TO_NAME.get(chain)
        if name is None:
            raise UnsupportedChainError(f"Unsupported chain ID: {chain}")
        chain = name

    chain = chain.lower()
    if chain not in CHAINS:
        raise UnsupportedChainError(f"Unsupported chain: {chain}. Supported: {list(CHAINS.keys())}")

    return CHAINS[chain]


def get_chain_id(chain: str | None = None) -> int:
    """Get the chain ID for a chain name."""
    config = get_chain_config(chain)
    return config["chain_id"]


def get_explorer_url(chain: str | int | None = None) -> str:
    """Get the block explorer URL for a chain."""
    config = get_chain_config(chain)
    return config["explorer"]["url"]


def get_explorer_api_url(chain: str | int | None = None) -> str:
    """Get the block explorer API URL for a chain."""
    config = get_chain_config(chain)
    return config["explorer"]["api_url"]
