"""
Web3 setup helper - connection and signer utilities for the CLI commands.

Public API
----------
get_web3_instance(rpc_url=None)
    Return a Web3 instance connected to the specified RPC URL.
    Falls back to the RPC_URL environment variable.
load_signer(private_key=None)
    Return the LocalAccount for PRIVATE_KEY, or None when unset.
"""
from __future__ import annotations

import os
from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from src.config.network import RPC_TIMEOUT

__all__ = ["get_web3_instance", "load_signer"]


def get_web3_instance(rpc_url: str | None = None) -> Web3:
    """
    Get a Web3 instance connected to the specified RPC URL.

    Args:
        rpc_url: Optional RPC URL. If not provided, uses the RPC_URL env var.

    Returns:
        Web3 instance

    Raises:
        RuntimeError: If no RPC URL is available or the node is unreachable
    """
    if rpc_url is None:
        rpc_url = os.getenv("RPC_URL")

    if rpc_url is None:
        raise RuntimeError("No RPC URL available. Set RPC_URL or pass --rpc-url.")

    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": RPC_TIMEOUT}))
    if not w3.is_connected():
        raise RuntimeError(f"Failed to connect to RPC {rpc_url}")
    return w3


def load_signer(private_key: str | None = None) -> Optional[LocalAccount]:
    key = private_key or os.getenv("PRIVATE_KEY")
    if not key:
        return None
    return Account.from_key(key)
