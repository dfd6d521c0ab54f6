"""
Typed view over a contract's JSON ABI.

Public API
----------
AbiDescriptor.from_json(abi)
    Build a descriptor from a JSON ABI (list of dicts or JSON string).
AbiDescriptor.mutating_functions()
    Functions that change state, i.e. candidates for a governance call.
AbiDescriptor.find_function(selection)
    Resolve a name or full signature to exactly one function.
detect_proxy(abi)
    True when the ABI exposes a zero-argument ``implementation()`` function.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .errors import AbiFetchError, AmbiguousSelectionError

__all__ = ["AbiParam", "FunctionDescriptor", "AbiDescriptor", "detect_proxy"]

READ_ONLY_MUTABILITY = ("view", "pure")


@dataclass(frozen=True)
class AbiParam:
    name: str
    type: str
    components: tuple[AbiParam, ...] = ()

    @classmethod
    def from_json(cls, entry: dict[str, Any]) -> AbiParam:
        components = tuple(cls.from_json(c) for c in entry.get("components") or ())
        return cls(name=entry.get("name", ""), type=entry["type"], components=components)

    @property
    def canonical_type(self) -> str:
        """Type string as used in signatures, with tuples expanded."""
        if not self.type.startswith("tuple"):
            return self.type
        inner = ",".join(c.canonical_type for c in self.components)
        # keep any array suffix, e.g. tuple[] -> (address,uint256)[]
        return f"({inner}){self.type[len('tuple'):]}"


@dataclass(frozen=True)
class FunctionDescriptor:
    name: str
    inputs: tuple[AbiParam, ...]
    is_mutating: bool
    is_payable: bool

    @classmethod
    def from_json(cls, entry: dict[str, Any]) -> FunctionDescriptor:
        mutability = entry.get("stateMutability")
        if mutability is not None:
            is_mutating = mutability not in READ_ONLY_MUTABILITY
            is_payable = mutability == "payable"
        else:
            # pre-0.5 compiler output only carries constant/payable flags
            is_mutating = not entry.get("constant", False)
            is_payable = bool(entry.get("payable", False))
        return cls(
            name=entry["name"],
            inputs=tuple(AbiParam.from_json(p) for p in entry.get("inputs") or ()),
            is_mutating=is_mutating,
            is_payable=is_payable,
        )

    @property
    def input_types(self) -> list[str]:
        return [p.canonical_type for p in self.inputs]

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.input_types)})"


@dataclass
class AbiDescriptor:
    functions: list[FunctionDescriptor] = field(default_factory=list)

    @classmethod
    def from_json(cls, abi: str | list[dict[str, Any]]) -> AbiDescriptor:
        if isinstance(abi, str):
            try:
                abi = json.loads(abi)
            except json.JSONDecodeError as e:
                raise AbiFetchError(f"ABI is not valid JSON: {e}") from e
        if not isinstance(abi, list):
            raise AbiFetchError(f"ABI must be a list of entries, got {type(abi).__name__}")
        functions = [
            FunctionDescriptor.from_json(entry)
            for entry in abi
            if entry.get("type", "function") == "function"
        ]
        return cls(functions=functions)

    def mutating_functions(self) -> list[FunctionDescriptor]:
        return [f for f in self.functions if f.is_mutating]

    def find_function(self, selection: str, mutating_only: bool = True) -> FunctionDescriptor:
        """Resolve ``selection`` to a single function.

        A full signature (``name(type,...)``) matches exactly; a bare name
        only resolves when the ABI has a single function of that name.

        Raises:
            AmbiguousSelectionError: no match, or a bare name shared by
                overloaded functions.
        """
        candidates = self.mutating_functions() if mutating_only else self.functions
        selection = selection.strip()
        if "(" in selection:
            matches = [f for f in candidates if f.signature == selection.replace(" ", "")]
        else:
            matches = [f for f in candidates if f.name == selection]

        if len(matches) != 1:
            if not matches:
                raise AmbiguousSelectionError(f"No function matches '{selection}'")
            options = ", ".join(f.signature for f in matches)
            raise AmbiguousSelectionError(
                f"'{selection}' is overloaded, select by full signature: {options}"
            )
        return matches[0]


def detect_proxy(abi: AbiDescriptor) -> bool:
    """Whether ``abi`` looks like a transparent proxy."""
    return any(f.name == "implementation" and not f.inputs for f in abi.functions)
