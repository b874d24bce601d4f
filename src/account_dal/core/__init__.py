"""Core utilities and shared functionality."""

from account_dal.core.exceptions import (
    AppError,
    ValidationError,
    StorageError,
    TransferError,
    RollbackError,
)

__all__ = [
    "AppError",
    "ValidationError",
    "StorageError",
    "TransferError",
    "RollbackError",
]
