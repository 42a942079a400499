#!/usr/bin/env python3

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from errors import ErrorKind, OperationResult
from logger import get_logger

logger = get_logger()

MENU = (
    "\n1. Check Balance\n2. Deposit\n3. Withdraw\n4. Transfer"
    "\n5. Transaction History\n6. Exit"
)

_ERROR_MESSAGES = {
    ErrorKind.AUTH_FAILED: "Invalid username or PIN!",
    ErrorKind.NOT_FOUND: "Invalid account number!",
    ErrorKind.INSUFFICIENT_FUNDS: "Insufficient funds.",
    ErrorKind.LIMIT_EXCEEDED: "Exceeds savings withdrawal limit.",
    ErrorKind.INVALID_AMOUNT: "Amount must be positive and in whole cents.",
}


def format_money(amount: Decimal) -> str:
    """Format an amount for display, e.g. -$1,050.00."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def error_message(result: OperationResult) -> str:
    """Pick the user-facing message for a failed result."""
    return _ERROR_MESSAGES.get(result.error, result.error_message or "Unknown error.")


class Session:
    """Interactive ATM session: login, account selection, then the menu loop.

    Args:
        services: Services container with directory and transfers.
        read: Function used to prompt for a line of input. Raises EOFError
              when input is exhausted.
    """

    def __init__(self, services, read: Callable[[str], str] = input):
        self.services = services
        self._read = read
        self.user = None
        self.account = None
        self._commands = {
            1: self.show_balance,
            2: self.deposit,
            3: self.withdraw,
            4: self.transfer,
            5: self.show_history,
        }

    def run(self) -> None:
        """Run the session until the user exits or input runs out."""
        try:
            if not self.login() or not self.select_account():
                return
            self.command_loop()
        except EOFError:
            logger.info("\nSession ended.")

    def prompt(self, text: str) -> str:
        return self._read(text).strip()

    def login(self) -> bool:
        name = self.prompt("Enter username: ")
        pin = self.prompt("Enter PIN: ")

        result = self.services.directory.authenticate(name, pin)
        if not result.success:
            logger.error(error_message(result))
            return False

        self.user = result.value
        logger.info("Login successful!")
        logger.info(f"Accounts for {self.user.name}:")
        for account_id in self.services.directory.accounts_of(self.user):
            logger.info(f" - {account_id}")
        return True

    def select_account(self) -> bool:
        account_id = self.prompt("Enter account number: ")

        result = self.services.directory.account_of(self.user, account_id)
        if not result.success:
            logger.error(error_message(result))
            return False

        self.account = result.value
        return True

    def command_loop(self) -> None:
        while True:
            print(MENU)
            choice = self.prompt("Choose an option: ")

            try:
                option = int(choice)
            except ValueError:
                logger.error("Invalid input! Please enter a number.")
                continue

            if option == 6:
                logger.info("Goodbye!")
                return

            command = self._commands.get(option)
            if command is None:
                logger.error("Invalid choice!")
                continue

            command()

    def read_amount(self, text: str) -> Optional[Decimal]:
        """Prompt for an amount; None if the entry is not a number."""
        raw = self.prompt(text)
        try:
            return Decimal(raw)
        except InvalidOperation:
            logger.error("Invalid amount! Please enter a number.")
            return None

    def show_balance(self) -> None:
        logger.info(f"Balance: {format_money(self.account.balance)}")

    def deposit(self) -> None:
        amount = self.read_amount("Enter deposit amount: ")
        if amount is None:
            return

        result = self.account.deposit(amount)
        self._report(result, "Deposit successful!")

    def withdraw(self) -> None:
        amount = self.read_amount("Enter withdrawal amount: ")
        if amount is None:
            return

        result = self.account.withdraw(amount)
        self._report(result, "Withdrawal successful!")

    def transfer(self) -> None:
        target_id = self.prompt("Enter target account number: ")
        amount = self.read_amount("Enter transfer amount: ")
        if amount is None:
            return

        result = self.services.transfers.transfer(
            self.user, self.account, target_id, amount
        )
        self._report(result, "Transfer successful!")

    def show_history(self) -> None:
        logger.info(
            f"\nTransaction History for {self.account.owner_name} ({self.account.id}):"
        )
        history = self.account.history()
        if not history:
            logger.info("No transactions yet.")
            return
        for record in history:
            logger.info(record.describe())

    def _report(self, result: OperationResult, success_text: str) -> None:
        if result.success:
            logger.info(
                f"{success_text} New balance: {format_money(self.account.balance)}"
            )
        else:
            logger.debug(f"Operation failed: {result.error_message}")
            logger.error(error_message(result))


def cmd_start(args, services):
    """Start an interactive ATM session."""
    print("\nWelcome to Teller ATM")
    print("=" * 80)
    Session(services).run()


def setup_parser(subparsers):
    """Setup session subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "session",
        help="Start an ATM session",
        description="Log in and run balance, deposit, withdraw and transfer commands",
    )
    parser.add_argument(
        "--seed",
        help="Path to a users seed file (overrides the configured one)",
    )
    parser.set_defaults(func=cmd_start)
