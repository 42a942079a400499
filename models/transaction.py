from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionKind(Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    TRANSFER_OUT = "transfer_out"


@dataclass(frozen=True)
class TransactionRecord:
    kind: TransactionKind
    amount: Decimal
    counterparty_id: Optional[str] = None  # target account for transfers
    created_at: datetime = field(default_factory=datetime.now)

    def describe(self) -> str:
        """Render the record as a single history line, e.g. 'Deposited: $50.00'."""
        if self.kind == TransactionKind.DEPOSIT:
            return f"Deposited: ${self.amount:,.2f}"
        if self.kind == TransactionKind.WITHDRAW:
            return f"Withdrawn: ${self.amount:,.2f}"
        return f"Transferred: ${self.amount:,.2f} to {self.counterparty_id}"
