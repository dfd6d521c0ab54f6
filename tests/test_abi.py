import json

import pytest

from src.proposal.abi import AbiDescriptor, detect_proxy
from src.proposal.errors import AbiFetchError, AmbiguousSelectionError

from conftest import IMPLEMENTATION_ABI, PROXY_ABI, TARGET_ABI, fn


def test_only_functions_are_kept():
    abi = AbiDescriptor.from_json(TARGET_ABI)
    assert [f.name for f in abi.functions] == ["setFee", "setRecipients", "deposit", "fee"]


def test_accepts_json_text():
    abi = AbiDescriptor.from_json(json.dumps(TARGET_ABI))
    assert len(abi.functions) == 4


def test_invalid_json_is_a_fetch_error():
    with pytest.raises(AbiFetchError):
        AbiDescriptor.from_json("Contract source code not verified")


def test_mutating_functions_exclude_views():
    abi = AbiDescriptor.from_json(TARGET_ABI)
    assert [f.signature for f in abi.mutating_functions()] == [
        "setFee(uint256)",
        "setRecipients(address[],uint256[])",
        "deposit(address)",
    ]


def test_payable_flag():
    abi = AbiDescriptor.from_json(TARGET_ABI)
    payable = {f.name: f.is_payable for f in abi.functions}
    assert payable == {"setFee": False, "setRecipients": False, "deposit": True, "fee": False}


def test_legacy_constant_and_payable_flags():
    legacy = [
        {"constant": True, "inputs": [], "name": "owner", "outputs": [], "payable": False, "type": "function"},
        {"constant": False, "inputs": [], "name": "kill", "outputs": [], "payable": False, "type": "function"},
        {"constant": False, "inputs": [], "name": "fund", "outputs": [], "payable": True, "type": "function"},
    ]
    abi = AbiDescriptor.from_json(legacy)
    assert [f.name for f in abi.mutating_functions()] == ["kill", "fund"]
    assert abi.find_function("fund").is_payable


def test_tuple_parameters_have_canonical_signature():
    abi = AbiDescriptor.from_json([{
        "type": "function",
        "name": "execute",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "calls", "type": "tuple[]", "components": [
                {"name": "target", "type": "address"},
                {"name": "data", "type": "bytes"},
            ]},
            {"name": "deadline", "type": "uint256"},
        ],
    }])
    assert abi.functions[0].signature == "execute((address,bytes)[],uint256)"


def test_detect_proxy():
    assert detect_proxy(AbiDescriptor.from_json(PROXY_ABI))
    assert not detect_proxy(AbiDescriptor.from_json(TARGET_ABI))
    assert not detect_proxy(AbiDescriptor.from_json(IMPLEMENTATION_ABI))


def test_implementation_with_arguments_is_not_a_proxy():
    abi = AbiDescriptor.from_json([fn("implementation", [("id", "bytes32")], mutability="view")])
    assert not detect_proxy(abi)


OVERLOADED_ABI = [
    fn("mint", [("amount", "uint256")]),
    fn("mint", [("to", "address"), ("amount", "uint256")]),
    fn("pause"),
]


def test_find_function_by_unique_name():
    abi = AbiDescriptor.from_json(OVERLOADED_ABI)
    assert abi.find_function("pause").signature == "pause()"


def test_overloaded_name_is_ambiguous():
    abi = AbiDescriptor.from_json(OVERLOADED_ABI)
    with pytest.raises(AmbiguousSelectionError, match="overloaded"):
        abi.find_function("mint")


def test_overload_resolved_by_signature():
    abi = AbiDescriptor.from_json(OVERLOADED_ABI)
    selected = abi.find_function("mint(address, uint256)")
    assert [p.name for p in selected.inputs] == ["to", "amount"]


def test_view_functions_are_not_selectable():
    abi = AbiDescriptor.from_json(TARGET_ABI)
    with pytest.raises(AmbiguousSelectionError):
        abi.find_function("fee")
    assert abi.find_function("fee", mutating_only=False).name == "fee"
