"""
Call and batch containers produced by the proposal builder.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .encoding import function_selector

__all__ = ["CallSpec", "ProposalBatch"]


@dataclass(frozen=True)
class CallSpec:
    """One call of a proposal. ``encoded_args`` carries no selector."""

    target: str
    signature: str
    encoded_args: bytes
    value: int = 0
    use_delegate_call: bool = False

    @property
    def calldata_hex(self) -> str:
        return "0x" + self.encoded_args.hex()

    def calldata(self) -> bytes:
        """Full call data as the executor would send it."""
        return function_selector(self.signature) + self.encoded_args


@dataclass
class ProposalBatch:
    """Index-aligned execution parameters of a binary proposal."""

    targets: list[str] = field(default_factory=list)
    values: list[int] = field(default_factory=list)
    signatures: list[str] = field(default_factory=list)
    calldatas: list[bytes] = field(default_factory=list)
    with_delegatecalls: list[bool] = field(default_factory=list)

    def append(self, call: CallSpec) -> None:
        self.targets.append(call.target)
        self.values.append(call.value)
        self.signatures.append(call.signature)
        self.calldatas.append(call.encoded_args)
        self.with_delegatecalls.append(call.use_delegate_call)

    def __len__(self) -> int:
        return len(self.targets)

    def calls(self) -> list[CallSpec]:
        return [
            CallSpec(
                target=self.targets[i],
                signature=self.signatures[i],
                encoded_args=self.calldatas[i],
                value=self.values[i],
                use_delegate_call=self.with_delegatecalls[i],
            )
            for i in range(len(self))
        ]

    def as_execution_params(self) -> tuple[list[Any], ...]:
        """The (targets, weiValues, signatures, calldatas, withDelegatecalls) tuple."""
        return (
            list(self.targets),
            list(self.values),
            list(self.signatures),
            list(self.calldatas),
            list(self.with_delegatecalls),
        )
