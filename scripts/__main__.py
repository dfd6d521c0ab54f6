#!/usr/bin/env python3
"""
Entry point for running scripts as a module.

Usage:
    python -m scripts                                        # Show available commands
    python -m scripts create_binary_proposal -f proposal.json
    python -m scripts inspect_proposal proposal_out.json
"""
import sys


def main():
    """Main entry point for scripts module."""
    available_commands = {
        "create_binary_proposal": "Build createBinaryProposal call data interactively",
        "inspect_proposal": "Decode and print the calls of a proposal output file",
    }

    if len(sys.argv) < 2:
        print("Usage: python -m scripts <command>")
        print("\nAvailable commands:")
        for cmd, desc in available_commands.items():
            print(f"  {cmd:30} - {desc}")
        print("\nExample: python -m scripts create_binary_proposal -f proposal.json")
        sys.exit(0)

    command = sys.argv[1]

    # Remove the command from argv so submodules see correct args
    sys.argv = [f"scripts.{command}"] + sys.argv[2:]

    if command == "create_binary_proposal":
        from src.commands.create_binary_proposal import main as run
        sys.exit(run())
    elif command == "inspect_proposal":
        from src.commands.inspect_proposal import main as run
        sys.exit(run())
    else:
        print(f"Unknown command: {command}")
        print("Run 'python -m scripts' to see available commands.")
        sys.exit(1)


if __name__ == "__main__":
    main()
