"""
Configuration package for the governance proposal tooling.
"""

from src.config.network import (
    CHAINS,
    CHAIN_ID_TO_NAME,
    get_chain_config,
    get_chain_id,
    get_explorer_url,
    get_explorer_api_url,
)

from src.config.proposal_config import (
    ProposalConfig,
    load_proposal_config,
    parse_proposal_config,
    write_proposal_output,
)

from src.config.abis import (
    GNOSIS_WALLET_ABI
)

__all__ = [
    # Network
    'CHAINS',
    'CHAIN_ID_TO_NAME',
    'get_chain_config',
    'get_chain_id',
    'get_explorer_url',
    'get_explorer_api_url',

    # Proposal input
    'ProposalConfig',
    'load_proposal_config',
    'parse_proposal_config',
    'write_proposal_output',

    # ABIs
    'GNOSIS_WALLET_ABI',
]
