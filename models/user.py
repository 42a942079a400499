"""User model: an account holder and the accounts they own."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from models.account import Account


@dataclass
class User:
    """Represents an ATM user.

    Attributes:
        name: Unique user name, also the directory key.
        pin: PIN, compared as plain text.
        accounts: Owned accounts keyed by account id.
    """

    name: str
    pin: str
    accounts: Dict[str, Account] = field(default_factory=dict, repr=False)

    def add_account(self, account: Account) -> None:
        """Add an account, replacing any existing one with the same id."""
        self.accounts[account.id] = account

    def get_account(self, account_id: str) -> Optional[Account]:
        return self.accounts.get(account_id)

    def check_pin(self, pin: str) -> bool:
        return self.pin == pin
