"""Build the startup Directory from a JSON seed file."""

import json
from decimal import Decimal
from pathlib import Path
from typing import List

from models.account import Account, AccountKind
from models.user import User
from services.directory import Directory


def build_user(user_data: dict) -> User:
    """Create a User and its accounts from one seed entry.

    Args:
        user_data: Dict with "name", "pin" and an "accounts" list of
                   {"id", "kind", "balance"} dicts.

    Returns:
        The populated User.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If an account kind is unknown.
    """
    user = User(name=user_data["name"], pin=str(user_data["pin"]))

    for account_data in user_data.get("accounts", []):
        kind = AccountKind(account_data["kind"])
        # Balances go through str so JSON floats do not carry binary noise
        balance = Decimal(str(account_data.get("balance", "0.00")))
        user.add_account(
            Account(
                account_id=account_data["id"],
                owner_name=user.name,
                kind=kind,
                balance=balance,
            )
        )

    return user


def build_directory(users_data: List[dict]) -> Directory:
    """Create a Directory with every user in users_data registered."""
    directory = Directory()
    for user_data in users_data:
        directory.register(build_user(user_data))
    return directory


def load_directory(seed_file: Path) -> Directory:
    """Load users and accounts from a JSON seed file.

    Args:
        seed_file: Path to the seed file.

    Returns:
        Directory populated with the seeded users.

    Raises:
        FileNotFoundError: If the seed file does not exist.
        json.JSONDecodeError: If the seed file is not valid JSON.
    """
    with open(seed_file, "r") as f:
        users_data = json.load(f)

    return build_directory(users_data)
