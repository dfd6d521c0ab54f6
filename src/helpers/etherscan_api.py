import os
import logging

import requests

from src.config.network import RPC_TIMEOUT, get_chain_config
from src.proposal.abi import AbiDescriptor
from src.proposal.errors import AbiFetchError, MissingCredentialError

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)

API_KEY_ENV_VARS = ("ETHERSCAN_KEY", "ETHERSCAN_API_KEY")


def get_api_key() -> str | None:
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value:
            return value
    return None


class EtherscanClient:
    """Fetches verified contract ABIs from an Etherscan-style explorer API.

    Nothing is cached: every ``fetch_abi`` call hits the API.
    """

    def __init__(self, chain_id: int, api_key: str | None = None, session=None):
        self.api_key = api_key or get_api_key()
        if not self.api_key:
            raise MissingCredentialError(
                f"Require etherscan key, set one of {', '.join(API_KEY_ENV_VARS)}"
            )
        # raises UnsupportedChainError for unknown chain ids
        self.chain = get_chain_config(chain_id)
        self.url = self.chain["explorer"]["api_url"]
        self.session = session or requests

    # ---------- core ----------

    def fetch_abi_json(self, address: str) -> str:
        params = {
            "chainid": self.chain["chain_id"],
            "module": "contract",
            "action": "getabi",
            "address": address,
            "apikey": self.api_key,
        }

        logger.debug("--- Fetching ABI from %s ---", self.chain["explorer"]["name"])
        logger.debug("URL: %s address: %s", self.url, address)

        try:
            response = self.session.get(self.url, params=params, timeout=RPC_TIMEOUT)
        except requests.exceptions.RequestException as e:
            raise AbiFetchError(f"ABI request for {address} failed: {e}") from e

        logger.debug("Status Code: %s", response.status_code)

        try:
            payload = response.json()
        except requests.exceptions.JSONDecodeError as e:
            raise AbiFetchError(f"Could not decode explorer response for {address}") from e

        if str(payload.get("status")) != "1":
            raise AbiFetchError(f"{address}: {payload.get('result') or payload.get('message')}")
        return payload["result"]

    def fetch_abi(self, address: str) -> AbiDescriptor:
        return AbiDescriptor.from_json(self.fetch_abi_json(address))
