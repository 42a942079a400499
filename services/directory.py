"""User directory: maps user names to users and authenticates them."""

from typing import Dict, List

from errors import ErrorKind, OperationResult
from models.user import User


class Directory:
    """In-memory registry of users for one ATM session.

    The directory is built once at startup (see services.seed), passed to
    the services container, and only read while the session runs.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}

    def register(self, user: User) -> None:
        """Add a user. An existing user with the same name is replaced."""
        self._users[user.name] = user

    def users(self) -> List[User]:
        """Get all registered users, in registration order."""
        return list(self._users.values())

    def authenticate(self, name: str, pin: str) -> OperationResult:
        """Check a name/PIN pair.

        Unknown users and wrong PINs produce the same failure so callers
        cannot tell which names exist.

        Returns:
            OperationResult with the User as value, or AUTH_FAILED.
        """
        user = self._users.get(name)
        if user is None or not user.check_pin(pin):
            return OperationResult.fail(
                ErrorKind.AUTH_FAILED, "Invalid username or PIN."
            )
        return OperationResult.ok(user)

    def accounts_of(self, user: User) -> List[str]:
        """Get the ids of the accounts owned by a user."""
        return list(user.accounts.keys())

    def account_of(self, user: User, account_id: str) -> OperationResult:
        """Look up one of the user's accounts by id.

        Returns:
            OperationResult with the Account as value, or NOT_FOUND if the
            user does not own an account with that id.
        """
        account = user.get_account(account_id)
        if account is None:
            return OperationResult.fail(
                ErrorKind.NOT_FOUND, f"Account '{account_id}' not found."
            )
        return OperationResult.ok(account)
