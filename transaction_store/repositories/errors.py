"""Failure values carried inside repository results."""
from __future__ import annotations


class TransactionRepositoryError(RuntimeError):
    """Base class for transaction repository failures."""


class TransactionNotFoundError(TransactionRepositoryError):
    """Raised when a lookup by id or reference matches no record."""


class TransactionStoreError(TransactionRepositoryError):
    """Raised when the underlying store fails; ``__cause__`` holds the original error."""


class TransactionUpdateRejectedError(TransactionRepositoryError):
    """Raised when a transaction is in a state that forbids the requested update."""


__all__ = [
    "TransactionNotFoundError",
    "TransactionRepositoryError",
    "TransactionStoreError",
    "TransactionUpdateRejectedError",
]
