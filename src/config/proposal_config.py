"""
Proposal input file.

Example::

    {
      "governance": "0x...",
      "executor": "0x...",
      "votingPowerStrategy": "0x...",
      "gnosisWallet": "0x...",
      "contractsToCall": ["0x...", "0x..."],
      "startTimestamp": 1700000000,
      "endTimestamp": 1700600000,
      "link": "ipfs://...",
      "outputFilename": "proposal_out.json"
    }
"""
from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eth_utils import is_address, to_checksum_address

from src.proposal.errors import InvalidTimestampError, ProposalConfigError

REQUIRED_KEYS = (
    "governance",
    "executor",
    "votingPowerStrategy",
    "contractsToCall",
    "startTimestamp",
    "endTimestamp",
    "link",
    "outputFilename",
)
ADDRESS_KEYS = ("governance", "executor", "votingPowerStrategy")


@dataclass
class ProposalConfig:
    governance: str
    executor: str
    voting_power_strategy: str
    contracts_to_call: list[str]
    start_timestamp: int
    end_timestamp: int
    link: str
    output_path: Path
    gnosis_wallet: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    def validate_timestamps(self, now: int | None = None) -> None:
        """Require ``now <= start < end``."""
        if now is None:
            now = int(time.time())
        if self.start_timestamp < now:
            raise InvalidTimestampError(f"Bad start timestamp, use value > {now}")
        if self.end_timestamp <= self.start_timestamp:
            raise InvalidTimestampError(
                f"Bad start and end timestamps: end {self.end_timestamp} <= start {self.start_timestamp}"
            )


def _checksum(key: str, value: Any) -> str:
    if not isinstance(value, str) or not is_address(value):
        raise ProposalConfigError(f"'{key}' is not a valid address: {value!r}")
    return to_checksum_address(value)


def parse_proposal_config(data: dict[str, Any], base_dir: Path | None = None) -> ProposalConfig:
    missing = [k for k in REQUIRED_KEYS if k not in data]
    if missing:
        raise ProposalConfigError(f"Missing keys in proposal file: {', '.join(missing)}")

    targets = data["contractsToCall"]
    if not isinstance(targets, list) or not targets:
        raise ProposalConfigError("'contractsToCall' must be a non-empty list of addresses")

    try:
        start = int(data["startTimestamp"])
        end = int(data["endTimestamp"])
    except (TypeError, ValueError) as e:
        raise ProposalConfigError(f"Timestamps must be integers: {e}") from e

    wallet = data.get("gnosisWallet")
    output = Path(data["outputFilename"])
    if base_dir is not None and not output.is_absolute():
        output = base_dir / output

    return ProposalConfig(
        governance=_checksum("governance", data["governance"]),
        executor=_checksum("executor", data["executor"]),
        voting_power_strategy=_checksum("votingPowerStrategy", data["votingPowerStrategy"]),
        contracts_to_call=[_checksum("contractsToCall", t) for t in targets],
        start_timestamp=start,
        end_timestamp=end,
        link=str(data["link"]),
        output_path=output,
        gnosis_wallet=_checksum("gnosisWallet", wallet) if wallet else None,
        raw=dict(data),
    )


def load_proposal_config(path: str | Path, now: int | None = None) -> ProposalConfig:
    """Read and validate a proposal file. Timestamps are checked here, before
    anything touches the network or the operator."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ProposalConfigError(f"Cannot read proposal file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ProposalConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ProposalConfigError(f"{path} must contain a JSON object")

    config = parse_proposal_config(data, base_dir=path.parent)
    config.validate_timestamps(now)
    return config


def write_proposal_output(config: ProposalConfig, tx_data: str) -> Path:
    """Write the input fields plus ``txData`` to the configured output file."""
    output = dict(config.raw)
    output["txData"] = tx_data
    config.output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config.output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2)
    return config.output_path
