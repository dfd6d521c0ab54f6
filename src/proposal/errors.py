"""
Error taxonomy for the proposal tooling.

Every error here is terminal: the CLI logs it and exits non-zero without
writing the output artifact.
"""


class ProposalError(Exception):
    """Base class for all proposal-building failures."""


class MissingCredentialError(ProposalError):
    """No ABI registry API key configured."""


class UnsupportedChainError(ProposalError):
    """The connected chain has no known ABI registry endpoint."""


class AbiFetchError(ProposalError):
    """The registry rejected the lookup (unverified contract, bad key, ...)."""


class AmbiguousSelectionError(ProposalError):
    """A function selection does not resolve to exactly one ABI entry."""


class InvalidTimestampError(ProposalError):
    """Proposal start/end timestamps fail validation."""


class ProposalConfigError(ProposalError):
    """The proposal input file is missing fields or malformed."""


class InvalidArgumentError(ProposalError):
    """An operator answer cannot be coerced or ABI-encoded for its parameter."""
