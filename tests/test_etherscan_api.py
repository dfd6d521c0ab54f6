import json

import pytest
import requests

from src.config.network import get_explorer_api_url
from src.helpers.etherscan_api import EtherscanClient
from src.proposal.errors import AbiFetchError, MissingCredentialError, UnsupportedChainError

from conftest import TARGET, TARGET_ABI


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv("ETHERSCAN_KEY", raising=False)
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)


def test_missing_key():
    with pytest.raises(MissingCredentialError):
        EtherscanClient(1)


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv("ETHERSCAN_KEY", "env-key")
    assert EtherscanClient(1).api_key == "env-key"


def test_unsupported_chain():
    with pytest.raises(UnsupportedChainError):
        EtherscanClient(999999, api_key="k")


def test_fetch_abi():
    session = FakeSession(FakeResponse({"status": "1", "message": "OK", "result": json.dumps(TARGET_ABI)}))
    client = EtherscanClient(11155111, api_key="k", session=session)

    abi = client.fetch_abi(TARGET)

    assert [f.name for f in abi.functions] == ["setFee", "setRecipients", "deposit", "fee"]
    url, params = session.requests[0]
    assert url == get_explorer_api_url(11155111) == "https://api.etherscan.io/v2/api"
    assert params == {
        "chainid": 11155111, "module": "contract", "action": "getabi", "address": TARGET, "apikey": "k",
    }


@pytest.mark.parametrize("chain_id", [1, 10, 137, 8453, 42161])
def test_all_chains_share_the_v2_endpoint(chain_id):
    session = FakeSession(FakeResponse({"status": "1", "result": json.dumps(TARGET_ABI)}))
    EtherscanClient(chain_id, api_key="k", session=session).fetch_abi(TARGET)
    url, params = session.requests[0]
    assert url == "https://api.etherscan.io/v2/api"
    assert params["chainid"] == chain_id


@pytest.mark.parametrize("chain_id", [3, 4, 5, 42])
def test_retired_testnets_are_unsupported(chain_id):
    with pytest.raises(UnsupportedChainError):
        EtherscanClient(chain_id, api_key="k")


def test_every_call_hits_the_api():
    session = FakeSession(FakeResponse({"status": "1", "result": json.dumps(TARGET_ABI)}))
    client = EtherscanClient(1, api_key="k", session=session)
    client.fetch_abi(TARGET)
    client.fetch_abi(TARGET)
    assert len(session.requests) == 2


def test_unverified_contract():
    session = FakeSession(FakeResponse({
        "status": "0", "message": "NOTOK", "result": "Contract source code not verified",
    }))
    client = EtherscanClient(1, api_key="k", session=session)
    with pytest.raises(AbiFetchError, match="not verified"):
        client.fetch_abi(TARGET)


def test_network_error():
    session = FakeSession(requests.exceptions.ConnectionError("boom"))
    client = EtherscanClient(1, api_key="k", session=session)
    with pytest.raises(AbiFetchError):
        client.fetch_abi(TARGET)


def test_non_json_response():
    session = FakeSession(FakeResponse(requests.exceptions.JSONDecodeError("bad", "doc", 0), status_code=502))
    client = EtherscanClient(1, api_key="k", session=session)
    with pytest.raises(AbiFetchError):
        client.fetch_abi(TARGET)
