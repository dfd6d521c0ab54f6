#!/usr/bin/env python3
"""
Create the call data for a binary governance proposal.

Usage:
    python -m src.commands.create_binary_proposal -f proposal.json
    python -m src.commands.create_binary_proposal -f proposal.json --send
    python -m src.commands.create_binary_proposal -f proposal.json --answers answers.json

The proposal file names the governance contract, executor, voting power
strategy, the contracts to call and the voting window. For each contract the
operator picks a function and its arguments; the encoded
``createBinaryProposal`` call is written to ``outputFilename`` as ``txData``.
With --send, and if the signer owns the configured multisig, the call is
also submitted to the multisig.
"""

import argparse
import sys

from dotenv import load_dotenv

from src.config.logging_config import get_command_logger
from src.config.proposal_config import ProposalConfig, load_proposal_config, write_proposal_output
from src.helpers.etherscan_api import EtherscanClient
from src.helpers.multisig import is_owner, submit_transaction
from src.helpers.web3_setup import get_web3_instance, load_signer
from src.proposal.builder import ProposalCallBuilder
from src.proposal.errors import ProposalError
from src.proposal.governance import encode_create_binary_proposal
from src.proposal.prompts import ConsoleOperator, load_answers


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create binary governance proposal call data")
    parser.add_argument("-f", "--file", required=True, help="JSON file for settings and addresses")
    parser.add_argument("-s", "--send", action="store_true", help="Send tx to multisig wallet")
    parser.add_argument("--rpc-url", help="RPC endpoint (default: RPC_URL env)")
    parser.add_argument("--answers", help="JSON list of recorded operator answers")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def build_tx_data(config: ProposalConfig, builder: ProposalCallBuilder) -> str:
    batch = builder.build_batch(config.contracts_to_call)
    return encode_create_binary_proposal(
        config.executor,
        config.voting_power_strategy,
        batch,
        config.start_timestamp,
        config.end_timestamp,
        config.link,
    )


def run(args: argparse.Namespace, logger) -> int:
    # timestamps are validated here, before any RPC or prompt
    config = load_proposal_config(args.file)

    w3 = get_web3_instance(args.rpc_url)
    signer = load_signer()
    if signer is not None:
        logger.info("Signing txns with %s", signer.address)
    chain_id = w3.eth.chain_id

    registry = EtherscanClient(chain_id)
    operator = load_answers(args.answers) if args.answers else ConsoleOperator()
    builder = ProposalCallBuilder(registry, operator)

    tx_data = build_tx_data(config, builder)
    output_path = write_proposal_output(config, tx_data)
    logger.info("Proposal call data written to %s", output_path)

    if args.send:
        if config.gnosis_wallet is None:
            logger.warning("--send given but no gnosisWallet in %s, not sending", args.file)
        elif signer is None:
            logger.warning("--send given but PRIVATE_KEY is not set, not sending")
        elif not is_owner(w3, config.gnosis_wallet, signer.address):
            logger.warning("%s is not an owner of %s, not sending", signer.address, config.gnosis_wallet)
        else:
            logger.info("Sending tx to gnosisWallet %s", config.gnosis_wallet)
            submit_transaction(w3, signer, config.gnosis_wallet, config.governance, tx_data)
    return 0


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logger = get_command_logger("create_binary_proposal", debug=args.debug)
    try:
        return run(args, logger)
    except ProposalError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    except RuntimeError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
