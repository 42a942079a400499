"""Error kinds and the result type returned by fallible core operations.

Business-rule failures are returned, not raised, so the session controller
can pick a message for each kind and carry on with the command loop.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Kinds of recoverable failure a core operation can report."""

    AUTH_FAILED = "auth_failed"
    NOT_FOUND = "not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    LIMIT_EXCEEDED = "limit_exceeded"  # savings single-withdrawal cap
    INVALID_AMOUNT = "invalid_amount"


@dataclass
class OperationResult:
    """Result of a core operation.

    Attributes:
        success: True if the operation was applied.
        error: Kind of failure, None on success.
        error_message: Human readable detail for the failure.
        value: Payload on success (e.g. the authenticated User).
    """

    success: bool
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    value: Any = None

    @classmethod
    def ok(cls, value: Any = None) -> "OperationResult":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, error=error, error_message=message)
