"""
Contract ABIs for the external contracts the proposal tooling talks to.
"""

from .gnosis_wallet import GNOSIS_WALLET_ABI

__all__ = [
    'GNOSIS_WALLET_ABI',
]
