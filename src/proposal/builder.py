"""
Interactive builder for the execution parameters of a binary proposal.

For each target the builder fetches the verified ABI (following a proxy to
its implementation when the operator supplies one), lets the operator pick a
state-changing function, coerces the arguments and ABI-encodes them.

Any failure aborts the whole batch; nothing partial is returned.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

from eth_abi.exceptions import EncodingError
from eth_utils import to_checksum_address

from .abi import AbiDescriptor, FunctionDescriptor, detect_proxy
from .coercion import coerce_argument
from .encoding import encode_arguments
from .errors import AmbiguousSelectionError, InvalidArgumentError
from .models import CallSpec, ProposalBatch
from .prompts import Operator, Prompt

logger = logging.getLogger(__name__)

__all__ = ["AbiRegistry", "ProposalCallBuilder"]


class AbiRegistry(Protocol):
    def fetch_abi(self, address: str) -> AbiDescriptor: ...


class ProposalCallBuilder:
    def __init__(self, registry: AbiRegistry, operator: Operator):
        self.registry = registry
        self.operator = operator

    # ---------- ABI resolution ----------

    def resolve_abi(self, address: str) -> AbiDescriptor:
        return self.registry.fetch_abi(address)

    def detect_proxy(self, abi: AbiDescriptor) -> bool:
        return detect_proxy(abi)

    def resolve_logic_abi(self, address: str) -> AbiDescriptor:
        """ABI to select from: the implementation's when ``address`` is a proxy."""
        abi = self.resolve_abi(address)
        if not self.detect_proxy(abi):
            return abi
        # the implementation slot is usually admin-only, so ask instead of reading it
        implementation = self.operator.ask(
            Prompt("input", "implementation", f"Implementation address of {address} for function list")
        ).strip()
        logger.info("%s is a proxy, using ABI of implementation %s", address, implementation)
        return self.resolve_abi(implementation)

    # ---------- selection ----------

    def select_function(self, address: str, abi: AbiDescriptor) -> FunctionDescriptor:
        candidates = abi.mutating_functions()
        if not candidates:
            raise AmbiguousSelectionError(f"{address} has no state-changing functions")
        choice = self.operator.ask(
            Prompt(
                "select",
                "function",
                f"Select function for contract {address}",
                choices=[f.signature for f in candidates],
            )
        )
        return abi.find_function(choice)

    def argument_prompts(self, function: FunctionDescriptor) -> list[Prompt]:
        return [
            Prompt("input", p.name or f"arg{i}", f"{p.name or f'arg{i}'} ({p.canonical_type})")
            for i, p in enumerate(function.inputs)
        ]

    def collect_arguments(self, function: FunctionDescriptor) -> list[Any]:
        values = []
        for param, prompt in zip(function.inputs, self.argument_prompts(function)):
            raw = self.operator.ask(prompt)
            values.append(coerce_argument(param.type, raw))
        return values

    def select_call(self, address: str, abi: AbiDescriptor) -> CallSpec:
        function = self.select_function(address, abi)
        args = self.collect_arguments(function)

        value = 0
        if function.is_payable:
            # wei, not scaled like integer arguments
            answer = self.operator.ask(Prompt("number", "weiValue", "Ether wei value"))
            try:
                value = int(answer)
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(f"Invalid wei value for {function.signature}: {answer!r}") from e

        delegate_call = bool(self.operator.ask(Prompt("confirm", "delegatecall", "Use delegate call?")))

        try:
            encoded = encode_arguments(function.input_types, args, params=function.inputs)
        except (EncodingError, ValueError, TypeError) as e:
            raise InvalidArgumentError(f"Cannot encode arguments for {address}.{function.signature}: {e}") from e
        call = CallSpec(
            target=to_checksum_address(address),
            signature=function.signature,
            encoded_args=encoded,
            value=value,
            use_delegate_call=delegate_call,
        )
        logger.info(
            "Call %s.%s value=%s delegatecall=%s",
            call.target, call.signature, call.value, call.use_delegate_call,
        )
        return call

    # ---------- batch ----------

    def build_batch(self, targets: list[str]) -> ProposalBatch:
        batch = ProposalBatch()
        for address in targets:
            abi = self.resolve_logic_abi(address)
            batch.append(self.select_call(address, abi))
        return batch
