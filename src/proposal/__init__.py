"""
Proposal building: ABI model, literal coercion, operator prompts and the
interactive call builder.
"""

from .abi import AbiDescriptor, AbiParam, FunctionDescriptor, detect_proxy
from .coercion import coerce_argument, coerce_numeric_literal, parse_structured_literal
from .errors import (
    AbiFetchError,
    AmbiguousSelectionError,
    InvalidTimestampError,
    MissingCredentialError,
    ProposalConfigError,
    ProposalError,
    UnsupportedChainError,
)
from .models import CallSpec, ProposalBatch
from .prompts import ConsoleOperator, Prompt, ScriptedOperator

__all__ = [
    "AbiDescriptor",
    "AbiParam",
    "FunctionDescriptor",
    "detect_proxy",
    "coerce_argument",
    "coerce_numeric_literal",
    "parse_structured_literal",
    "AbiFetchError",
    "AmbiguousSelectionError",
    "InvalidTimestampError",
    "MissingCredentialError",
    "ProposalConfigError",
    "ProposalError",
    "UnsupportedChainError",
    "CallSpec",
    "ProposalBatch",
    "ConsoleOperator",
    "Prompt",
    "ScriptedOperator",
]
