#!/usr/bin/env python3

from cli.session import format_money
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all seeded users and their accounts."""
    users = services.directory.users()

    if not users:
        logger.info("No users found.")
        return

    logger.info("\nUsers:")
    logger.info("=" * 80)
    for user in users:
        logger.info(f"Name: {user.name}")
        for account_id in services.directory.accounts_of(user):
            account = user.get_account(account_id)
            logger.info(
                f"  {account.id} ({account.kind.value}): {format_money(account.balance)}"
            )
        logger.info("-" * 80)

    logger.info(f"\nTotal users: {len(users)}")


def setup_parser(subparsers):
    """Setup users subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "users",
        help="Inspect seeded users",
        description="List the users and accounts loaded at startup",
    )

    users_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available user commands",
        dest="subcommand",
        required=True,
    )

    # users list
    list_parser = users_subparsers.add_parser("list", help="List all users")
    list_parser.add_argument(
        "--seed",
        help="Path to a users seed file (overrides the configured one)",
    )
    list_parser.set_defaults(func=cmd_list)
