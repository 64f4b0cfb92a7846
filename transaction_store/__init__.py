"""Persistence layer for payment transactions."""

from .core.result import Result, ResultStateError
from .domain import Transaction, TransactionStatus
from .repositories import (
    SQLAlchemyTransactionRepository,
    SQLAlchemyTransactionStore,
    TransactionMapper,
    TransactionRepository,
)

__all__ = [
    "Result",
    "ResultStateError",
    "SQLAlchemyTransactionRepository",
    "SQLAlchemyTransactionStore",
    "Transaction",
    "TransactionMapper",
    "TransactionRepository",
    "TransactionStatus",
]
