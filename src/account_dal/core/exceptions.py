"""Data access exceptions."""

from decimal import Decimal
from typing import Any


class AppError(Exception):
    """Base exception for data access errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class StorageError(AppError):
    """Raised when a statement against the Account table fails."""

    def __init__(self, operation: str, cause: BaseException, **keys: Any):
        self.operation = operation
        self.keys = keys
        self.cause = cause
        detail = ", ".join(f"{k}={v!r}" for k, v in keys.items())
        where = f" ({detail})" if detail else ""
        super().__init__(
            f"Error while trying to {operation}{where}: {cause}",
            code="STORAGE_ERROR",
        )


class TransferError(AppError):
    """
    Raised when a leg of a fund transfer fails.

    The transaction has already been rolled back, so both balances are
    unchanged.
    """

    def __init__(
        self,
        amount: Decimal,
        source_id: int,
        destination_id: int,
        cause: BaseException,
    ):
        self.amount = amount
        self.source_id = source_id
        self.destination_id = destination_id
        self.cause = cause
        super().__init__(
            f"Error while moving {amount} from account with id {source_id} "
            f"to account with id {destination_id}: {cause}. "
            "Transaction successfully rolled back.",
            code="TRANSFER_ERROR",
        )


class RollbackError(AppError):
    """
    Raised when rolling back a failed transfer also fails.

    Balances of both accounts may be inconsistent and must be reconciled
    outside this layer.
    """

    def __init__(
        self,
        amount: Decimal,
        source_id: int,
        destination_id: int,
        cause: BaseException,
        rollback_cause: BaseException,
    ):
        self.amount = amount
        self.source_id = source_id
        self.destination_id = destination_id
        self.cause = cause
        self.rollback_cause = rollback_cause
        super().__init__(
            f"Error while rolling back transaction which occurred while moving "
            f"{amount} from account with id {source_id} to account with id "
            f"{destination_id}. Transfer error: {cause}. "
            f"Rollback error: {rollback_cause}",
            code="ROLLBACK_ERROR",
        )
