import json
import time

import pytest

from src.proposal.abi import AbiDescriptor

TARGET = "0x" + "11" * 20
PROXY = "0x" + "22" * 20
IMPLEMENTATION = "0x" + "33" * 20
RECIPIENT = "0x" + "44" * 20
GOVERNANCE = "0x" + "55" * 20
EXECUTOR = "0x" + "66" * 20
STRATEGY = "0x" + "77" * 20
WALLET = "0x" + "88" * 20


def fn(name, inputs=(), mutability="nonpayable", outputs=()):
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": "", "type": t} for t in outputs],
        "stateMutability": mutability,
    }


TARGET_ABI = [
    {"type": "constructor", "inputs": [{"name": "admin", "type": "address"}], "stateMutability": "nonpayable"},
    fn("setFee", [("fee", "uint256")]),
    fn("setRecipients", [("recipients", "address[]"), ("weights", "uint256[]")]),
    fn("deposit", [("to", "address")], mutability="payable"),
    fn("fee", mutability="view", outputs=["uint256"]),
    {"type": "event", "name": "FeeSet", "inputs": [{"name": "fee", "type": "uint256", "indexed": False}]},
]

PROXY_ABI = [
    fn("implementation", mutability="view", outputs=["address"]),
    fn("upgradeTo", [("newImplementation", "address")]),
]

IMPLEMENTATION_ABI = [
    fn("setRate", [("rate", "uint256"), ("enabled", "bool")]),
    fn("rate", mutability="view", outputs=["uint256"]),
]


class FakeRegistry:
    """ABI registry backed by a dict, records every lookup."""

    def __init__(self, abis):
        self.abis = {addr.lower(): abi for addr, abi in abis.items()}
        self.lookups = []

    def fetch_abi(self, address):
        self.lookups.append(address)
        return AbiDescriptor.from_json(self.abis[address.lower()])


@pytest.fixture
def registry():
    return FakeRegistry({
        TARGET: TARGET_ABI,
        PROXY: PROXY_ABI,
        IMPLEMENTATION: IMPLEMENTATION_ABI,
    })


@pytest.fixture
def proposal_data():
    now = int(time.time())
    return {
        "governance": GOVERNANCE,
        "executor": EXECUTOR,
        "votingPowerStrategy": STRATEGY,
        "gnosisWallet": WALLET,
        "contractsToCall": [TARGET, PROXY],
        "startTimestamp": now + 3600,
        "endTimestamp": now + 7 * 86400,
        "link": "ipfs://QmProposal",
        "outputFilename": "proposal_out.json",
    }


@pytest.fixture
def proposal_file(tmp_path, proposal_data):
    path = tmp_path / "proposal.json"
    path.write_text(json.dumps(proposal_data))
    return path
