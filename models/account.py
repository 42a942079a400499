"""Account model for the teller.

An Account is a single class tagged with an AccountKind. The withdrawal rules
that differ between kinds live in the _WITHDRAWAL_POLICIES table, so adding a
kind means adding a policy function, not a subclass.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from errors import ErrorKind, OperationResult
from models.transaction import TransactionKind, TransactionRecord

OVERDRAFT_LIMIT = Decimal("100.00")
SAVINGS_WITHDRAWAL_LIMIT = Decimal("500.00")
MAX_AMOUNT = Decimal("1000000000.00")
CENT = Decimal("0.01")


class AccountKind(Enum):
    CHECKING = "checking"
    SAVINGS = "savings"


def _check_checking_withdrawal(
    balance: Decimal, amount: Decimal
) -> Optional[OperationResult]:
    """Checking balances may go negative down to -OVERDRAFT_LIMIT."""
    if balance - amount < -OVERDRAFT_LIMIT:
        return OperationResult.fail(
            ErrorKind.INSUFFICIENT_FUNDS,
            "Withdrawal failed: Overdraft limit exceeded.",
        )
    return None


def _check_savings_withdrawal(
    balance: Decimal, amount: Decimal
) -> Optional[OperationResult]:
    """Savings withdrawals are capped per withdrawal and never overdraw."""
    # The cap is checked first: it applies regardless of balance
    if amount > SAVINGS_WITHDRAWAL_LIMIT:
        return OperationResult.fail(
            ErrorKind.LIMIT_EXCEEDED,
            "Withdrawal failed: Exceeds savings withdrawal limit.",
        )
    if amount > balance:
        return OperationResult.fail(
            ErrorKind.INSUFFICIENT_FUNDS, "Withdrawal failed: Insufficient funds."
        )
    return None


WithdrawalPolicy = Callable[[Decimal, Decimal], Optional[OperationResult]]

_WITHDRAWAL_POLICIES: Dict[AccountKind, WithdrawalPolicy] = {
    AccountKind.CHECKING: _check_checking_withdrawal,
    AccountKind.SAVINGS: _check_savings_withdrawal,
}


def get_withdrawal_policy(kind: AccountKind) -> WithdrawalPolicy:
    """Get the withdrawal check function for an account kind."""
    if kind not in _WITHDRAWAL_POLICIES:
        raise ValueError(f"Unknown account kind: {kind}")
    return _WITHDRAWAL_POLICIES[kind]


def validate_amount(amount) -> Tuple[Optional[Decimal], Optional[OperationResult]]:
    """Coerce an amount to Decimal and check it is a valid money amount.

    Valid amounts are finite, positive, whole cents and at most MAX_AMOUNT.

    Args:
        amount: Decimal, int or numeric string. Floats are converted through
            their string form.

    Returns:
        (amount quantized to cents, None) if valid, otherwise
        (None, failed OperationResult).
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        value = None

    if value is None or not value.is_finite() or value <= 0:
        return None, OperationResult.fail(
            ErrorKind.INVALID_AMOUNT, "Amount must be greater than zero."
        )
    # Magnitude first: quantizing a huge value would overflow the context
    if value > MAX_AMOUNT:
        return None, OperationResult.fail(
            ErrorKind.INVALID_AMOUNT, f"Amount must not exceed {MAX_AMOUNT}."
        )
    if value != value.quantize(CENT):
        return None, OperationResult.fail(
            ErrorKind.INVALID_AMOUNT, "Amount must be in whole cents."
        )
    return value.quantize(CENT), None


class Account:
    """A bank account owned by a single user.

    Args:
        account_id: Unique account identifier, e.g. "CHK123".
        owner_name: Display name of the account holder.
        kind: Checking or savings; selects the withdrawal policy.
        balance: Opening balance.
    """

    def __init__(
        self,
        account_id: str,
        owner_name: str,
        kind: AccountKind,
        balance: Decimal = Decimal("0.00"),
    ):
        self._id = account_id
        self._owner_name = owner_name
        self._kind = kind
        self._balance = Decimal(balance).quantize(CENT)
        self._history: List[TransactionRecord] = []
        self._withdrawal_check = get_withdrawal_policy(kind)

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id!r}, owner_name={self._owner_name!r}, "
            f"kind={self._kind.value}, balance={self._balance})"
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def kind(self) -> AccountKind:
        return self._kind

    @property
    def balance(self) -> Decimal:
        return self._balance

    def history(self) -> Tuple[TransactionRecord, ...]:
        """Get the transaction history, oldest first."""
        return tuple(self._history)

    def deposit(self, amount) -> OperationResult:
        """Credit the account. Fails only on an invalid amount."""
        value, error = validate_amount(amount)
        if error:
            return error

        self._balance += value
        self._history.append(TransactionRecord(TransactionKind.DEPOSIT, value))
        return OperationResult.ok(self._balance)

    def withdraw(self, amount) -> OperationResult:
        """Debit the account if the kind's withdrawal policy allows it.

        Returns:
            OperationResult with the new balance on success, or
            INVALID_AMOUNT / INSUFFICIENT_FUNDS / LIMIT_EXCEEDED. A failed
            withdrawal leaves balance and history untouched.
        """
        value, error = validate_amount(amount)
        if error:
            return error

        error = self._withdrawal_check(self._balance, value)
        if error:
            return error

        self._balance -= value
        self._history.append(TransactionRecord(TransactionKind.WITHDRAW, value))
        return OperationResult.ok(self._balance)

    def transfer(self, target: "Account", amount) -> OperationResult:
        """Move money to another account: withdraw here, deposit there.

        The funds check uses the raw balance, so a checking account cannot
        dip into its overdraft through a transfer even though a direct
        withdrawal could. On success the source history gains a WITHDRAW
        record followed by a TRANSFER_OUT record, and the target gains a
        DEPOSIT record. On failure neither account changes.

        Returns:
            OperationResult with the new source balance on success, or
            INVALID_AMOUNT / INSUFFICIENT_FUNDS, or LIMIT_EXCEEDED when a
            savings source is over its per-withdrawal cap.
        """
        value, error = validate_amount(amount)
        if error:
            return error

        if value > self._balance:
            return OperationResult.fail(
                ErrorKind.INSUFFICIENT_FUNDS, "Transfer failed: Insufficient funds."
            )

        # A savings source can still refuse here (withdrawal cap)
        result = self.withdraw(value)
        if not result.success:
            return result

        target.deposit(value)
        self._history.append(
            TransactionRecord(
                TransactionKind.TRANSFER_OUT, value, counterparty_id=target.id
            )
        )
        return OperationResult.ok(self._balance)
