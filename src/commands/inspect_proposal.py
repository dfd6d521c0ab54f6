#!/usr/bin/env python3
"""
Print the calls inside a proposal output file for review.

Usage:
    python -m src.commands.inspect_proposal proposal_out.json
    python -m src.commands.inspect_proposal proposal_out.json --json
"""

import argparse
import json
import sys
from datetime import datetime, timezone

from src.proposal.governance import decode_create_binary_proposal


def describe(tx_data: str) -> dict:
    decoded = decode_create_binary_proposal(tx_data)
    batch = decoded["batch"]
    return {
        "executor": decoded["executor"],
        "votingPowerStrategy": decoded["votingPowerStrategy"],
        "startTimestamp": decoded["startTimestamp"],
        "endTimestamp": decoded["endTimestamp"],
        "link": decoded["link"],
        "calls": [
            {
                "target": call.target,
                "value": call.value,
                "signature": call.signature,
                "calldata": call.calldata_hex,
                "withDelegatecall": call.use_delegate_call,
            }
            for call in batch.calls()
        ],
    }


def _fmt_ts(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def print_summary(summary: dict) -> None:
    print(f"Executor:        {summary['executor']}")
    print(f"Voting strategy: {summary['votingPowerStrategy']}")
    print(f"Voting window:   {_fmt_ts(summary['startTimestamp'])} -> {_fmt_ts(summary['endTimestamp'])}")
    print(f"Link:            {summary['link']}")
    print(f"\n{len(summary['calls'])} call(s):")
    for i, call in enumerate(summary["calls"]):
        mode = "delegatecall" if call["withDelegatecall"] else "call"
        print(f"  [{i}] {mode} {call['target']}.{call['signature']} value={call['value']}")
        print(f"      calldata: {call['calldata']}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Decode a binary proposal output file")
    parser.add_argument("file", help="Output file written by create_binary_proposal")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    args = parser.parse_args(argv)

    with open(args.file, encoding="utf-8") as f:
        data = json.load(f)
    if "txData" not in data:
        print(f"No txData in {args.file}", file=sys.stderr)
        return 1

    try:
        summary = describe(data["txData"])
    except ValueError as e:
        print(f"Cannot decode txData: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
