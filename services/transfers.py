"""Transfer service: transfers between a user's own accounts by id."""

from errors import OperationResult
from models.account import Account, validate_amount
from models.user import User


class TransferService:
    """Service for transfers addressed by target account id."""

    def __init__(self, directory):
        """Initialize the transfer service.

        Args:
            directory: Directory used to resolve target account ids.
        """
        self.directory = directory

    def transfer(
        self, user: User, source: Account, target_id: str, amount
    ) -> OperationResult:
        """Transfer money from source to another account of the same user.

        Args:
            user: The logged-in user; the target must be one of their accounts.
            source: Account to debit.
            target_id: Id of the account to credit.
            amount: Amount to move.

        Returns:
            OperationResult from Account.transfer, or INVALID_AMOUNT /
            NOT_FOUND before anything is touched.
        """
        _, error = validate_amount(amount)
        if error:
            return error

        lookup = self.directory.account_of(user, target_id)
        if not lookup.success:
            return lookup

        return source.transfer(lookup.value, amount)
