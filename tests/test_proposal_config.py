import json

import pytest
from eth_utils import to_checksum_address

from src.config.proposal_config import load_proposal_config, parse_proposal_config, write_proposal_output
from src.proposal.errors import InvalidTimestampError, ProposalConfigError

from conftest import GOVERNANCE, PROXY, TARGET, WALLET


def test_load_valid_file(proposal_file, proposal_data):
    config = load_proposal_config(proposal_file)

    assert config.governance == to_checksum_address(GOVERNANCE)
    assert config.contracts_to_call == [to_checksum_address(TARGET), to_checksum_address(PROXY)]
    assert config.gnosis_wallet == to_checksum_address(WALLET)
    assert config.start_timestamp == proposal_data["startTimestamp"]
    # output path is relative to the input file
    assert config.output_path == proposal_file.parent / "proposal_out.json"


def test_start_in_the_past_is_rejected(proposal_data):
    config = parse_proposal_config(proposal_data)
    with pytest.raises(InvalidTimestampError, match="Bad start timestamp"):
        config.validate_timestamps(now=proposal_data["startTimestamp"] + 1)


@pytest.mark.parametrize("delta", [0, -1])
def test_end_not_after_start_is_rejected(proposal_data, delta):
    proposal_data["endTimestamp"] = proposal_data["startTimestamp"] + delta
    config = parse_proposal_config(proposal_data)
    with pytest.raises(InvalidTimestampError):
        config.validate_timestamps(now=proposal_data["startTimestamp"] - 10)


def test_load_validates_timestamps(tmp_path, proposal_data):
    proposal_data["endTimestamp"] = proposal_data["startTimestamp"]
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(proposal_data))
    with pytest.raises(InvalidTimestampError):
        load_proposal_config(path)


def test_missing_keys(proposal_data):
    del proposal_data["executor"]
    del proposal_data["link"]
    with pytest.raises(ProposalConfigError, match="executor, link"):
        parse_proposal_config(proposal_data)


def test_gnosis_wallet_is_optional(proposal_data):
    del proposal_data["gnosisWallet"]
    assert parse_proposal_config(proposal_data).gnosis_wallet is None


def test_bad_address(proposal_data):
    proposal_data["contractsToCall"] = [TARGET, "0x1234"]
    with pytest.raises(ProposalConfigError, match="contractsToCall"):
        parse_proposal_config(proposal_data)


def test_empty_targets(proposal_data):
    proposal_data["contractsToCall"] = []
    with pytest.raises(ProposalConfigError):
        parse_proposal_config(proposal_data)


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ProposalConfigError):
        load_proposal_config(path)


def test_write_output_keeps_input_fields(proposal_file, proposal_data):
    config = load_proposal_config(proposal_file)
    path = write_proposal_output(config, "0xdeadbeef")

    written = json.loads(path.read_text())
    assert written["txData"] == "0xdeadbeef"
    for key, value in proposal_data.items():
        assert written[key] == value
