"""Domain entities."""

from .transaction import DEFAULT_CURRENCY, FINAL_STATUSES, Transaction, TransactionStatus

__all__ = ["DEFAULT_CURRENCY", "FINAL_STATUSES", "Transaction", "TransactionStatus"]
