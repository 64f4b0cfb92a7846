"""Transaction persistence: port, mapper, store and adapter."""

from .errors import (
    TransactionNotFoundError,
    TransactionRepositoryError,
    TransactionStoreError,
    TransactionUpdateRejectedError,
)
from .mapper import TransactionMapper
from .ports import TransactionRepository
from .store import SortDirection, SQLAlchemyTransactionStore, TransactionStore
from .transaction_repository import NEWEST_FIRST, SQLAlchemyTransactionRepository

__all__ = [
    "NEWEST_FIRST",
    "SQLAlchemyTransactionRepository",
    "SQLAlchemyTransactionStore",
    "SortDirection",
    "TransactionMapper",
    "TransactionNotFoundError",
    "TransactionRepository",
    "TransactionRepositoryError",
    "TransactionStore",
    "TransactionStoreError",
    "TransactionUpdateRejectedError",
]
