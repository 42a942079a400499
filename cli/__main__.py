#!/usr/bin/env python3
"""
Teller CLI - ATM simulation over in-memory accounts.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    session      Log in and run an interactive ATM session
    users        Inspect the users and accounts loaded at startup

Examples:
    python -m cli session
    python -m cli session --seed my_users.json
    python -m cli users list
"""

import sys
import argparse
from pathlib import Path
from cli import session, users
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Teller - ATM simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Create subparsers for each command
    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    session.setup_parser(subparsers)
    users.setup_parser(subparsers)

    # Parse arguments and execute
    args = parser.parse_args()

    # Call the appropriate handler function
    if hasattr(args, "func"):
        try:
            # Load configuration
            config = load_config()
            if getattr(args, "seed", None):
                config.seed_file = Path(args.seed)

            # Set up logging
            setup_logging(config)

            # Create services container for dependency injection
            services = Services(config)

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
