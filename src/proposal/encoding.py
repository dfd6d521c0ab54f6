"""
ABI encoding of coerced operator values.

Operator answers arrive as JSON-ish Python values (strings, lists, ints);
``normalize_value`` turns them into what ``eth_abi`` expects before encoding.
"""
from __future__ import annotations

from typing import Any

from eth_abi import decode, encode
from eth_abi.grammar import TupleType, parse
from eth_utils import to_bytes, to_checksum_address
from web3 import Web3

__all__ = ["function_selector", "normalize_value", "encode_arguments", "decode_arguments"]


def function_selector(signature: str) -> bytes:
    """First 4 bytes of keccak(signature)."""
    return bytes(Web3.keccak(text=signature)[:4])


def _normalize(abi_type, value: Any, components=()) -> Any:
    """``components`` are the AbiParams of a tuple type, used to map JSON objects."""
    if abi_type.is_array:
        return [_normalize(abi_type.item_type, v, components) for v in value]

    if isinstance(abi_type, TupleType):
        if isinstance(value, dict):
            value = _struct_values(components, value)
        return tuple(
            _normalize(c, v, components[i].components if i < len(components) else ())
            for i, (c, v) in enumerate(zip(abi_type.components, value))
        )

    base = abi_type.base
    if base == "address":
        return to_checksum_address(value)
    if base == "bytes" and isinstance(value, str):
        return to_bytes(hexstr=value)
    if base in ("uint", "int") and isinstance(value, str):
        return int(value, 16) if value.lower().startswith("0x") else int(value)
    if base == "bool" and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        raise ValueError(f"Not a boolean: {value!r}")
    return value


def _struct_values(components, value: dict) -> list[Any]:
    if not components:
        raise ValueError("Struct given as a JSON object but its component names are unknown, use a JSON array")
    missing = [c.name for c in components if c.name not in value]
    if missing:
        raise ValueError(f"Struct is missing fields: {', '.join(missing)}")
    return [value[c.name] for c in components]


def normalize_value(type_str: str, value: Any, components=()) -> Any:
    """Shape ``value`` for ``eth_abi`` according to ``type_str``.

    ``components`` (the AbiParam components of a tuple parameter) let a
    struct be given as a JSON object keyed by field name.
    """
    return _normalize(parse(type_str), value, components)


def encode_arguments(types: list[str], values: list[Any], params=None) -> bytes:
    """ABI-encode ``values`` without a selector."""
    if len(types) != len(values):
        raise ValueError(f"Expected {len(types)} arguments, got {len(values)}")
    components = [p.components for p in params] if params else [()] * len(types)
    normalized = [normalize_value(t, v, c) for t, v, c in zip(types, values, components)]
    return encode(types, normalized)


def decode_arguments(types: list[str], data: bytes) -> tuple:
    return decode(types, data)
