"""
Submission of encoded governance calls to a Gnosis MultiSigWallet.
"""
import logging

from eth_account.signers.local import LocalAccount
from web3 import Web3

from src.config.abis import GNOSIS_WALLET_ABI

logger = logging.getLogger(__name__)

SUBMIT_GAS_LIMIT = 2_000_000


def get_wallet(w3: Web3, wallet_address: str):
    return w3.eth.contract(address=Web3.to_checksum_address(wallet_address), abi=GNOSIS_WALLET_ABI)


def is_owner(w3: Web3, wallet_address: str, account: str) -> bool:
    wallet = get_wallet(w3, wallet_address)
    return bool(wallet.functions.isOwner(Web3.to_checksum_address(account)).call())


def submit_transaction(
    w3: Web3,
    account: LocalAccount,
    wallet_address: str,
    destination: str,
    data: str,
    value: int = 0,
) -> str:
    """Propose ``destination.call{value}(data)`` to the multisig and wait for it to mine.

    Returns the transaction hash as a hex string.
    """
    wallet = get_wallet(w3, wallet_address)
    tx = wallet.functions.submitTransaction(
        Web3.to_checksum_address(destination), value, Web3.to_bytes(hexstr=data)
    ).build_transaction({
        'from': account.address,
        'nonce': w3.eth.get_transaction_count(account.address),
        'gas': SUBMIT_GAS_LIMIT,
        'chainId': w3.eth.chain_id,
    })

    signed_tx = account.sign_transaction(tx)
    tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
    logger.info("Submitted to multisig %s: %s", wallet_address, tx_hash.hex())

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=300)
    if receipt.status != 1:
        raise RuntimeError(f"Multisig submission {tx_hash.hex()} reverted")
    return tx_hash.hex()
