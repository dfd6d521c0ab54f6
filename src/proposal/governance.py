"""
Call data for the governance contract's ``createBinaryProposal``.
"""
from __future__ import annotations

from typing import Any

from eth_abi import decode, encode
from eth_utils import to_bytes, to_checksum_address

from .encoding import function_selector
from .models import ProposalBatch

__all__ = [
    "CREATE_BINARY_PROPOSAL_TYPES",
    "CREATE_BINARY_PROPOSAL_SIGNATURE",
    "encode_create_binary_proposal",
    "decode_create_binary_proposal",
]

EXECUTION_PARAMS_TYPE = "(address[],uint256[],string[],bytes[],bool[])"
CREATE_BINARY_PROPOSAL_TYPES = [
    "address",  # executor
    "address",  # voting power strategy
    EXECUTION_PARAMS_TYPE,
    "uint256",  # start time
    "uint256",  # end time
    "string",  # link
]
CREATE_BINARY_PROPOSAL_SIGNATURE = f"createBinaryProposal({','.join(CREATE_BINARY_PROPOSAL_TYPES)})"


def encode_create_binary_proposal(
    executor: str,
    strategy: str,
    batch: ProposalBatch,
    start_timestamp: int,
    end_timestamp: int,
    link: str,
) -> str:
    """Return 0x-prefixed call data for ``createBinaryProposal``."""
    targets, values, signatures, calldatas, delegatecalls = batch.as_execution_params()
    args = [
        to_checksum_address(executor),
        to_checksum_address(strategy),
        ([to_checksum_address(t) for t in targets], values, signatures, calldatas, delegatecalls),
        int(start_timestamp),
        int(end_timestamp),
        link,
    ]
    data = function_selector(CREATE_BINARY_PROPOSAL_SIGNATURE) + encode(CREATE_BINARY_PROPOSAL_TYPES, args)
    return "0x" + data.hex()


def decode_create_binary_proposal(tx_data: str) -> dict[str, Any]:
    """Inverse of ``encode_create_binary_proposal``.

    Raises:
        ValueError: if ``tx_data`` is not a ``createBinaryProposal`` call.
    """
    raw = to_bytes(hexstr=tx_data)
    selector = function_selector(CREATE_BINARY_PROPOSAL_SIGNATURE)
    if raw[:4] != selector:
        raise ValueError(f"Not a createBinaryProposal call (selector 0x{raw[:4].hex()})")

    executor, strategy, params, start, end, link = decode(CREATE_BINARY_PROPOSAL_TYPES, raw[4:])
    batch = ProposalBatch()
    targets, values, signatures, calldatas, delegatecalls = params
    batch.targets = [to_checksum_address(t) for t in targets]
    batch.values = list(values)
    batch.signatures = list(signatures)
    batch.calldatas = [bytes(c) for c in calldatas]
    batch.with_delegatecalls = list(delegatecalls)
    return {
        "executor": to_checksum_address(executor),
        "votingPowerStrategy": to_checksum_address(strategy),
        "batch": batch,
        "startTimestamp": start,
        "endTimestamp": end,
        "link": link,
    }
