"""Contracts for transaction persistence."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from transaction_store.core.result import Result
from transaction_store.domain.transaction import Transaction
from transaction_store.repositories.errors import TransactionRepositoryError


@runtime_checkable
class TransactionRepository(Protocol):
    """Port through which the rest of the system persists transactions.

    Every method is a coroutine returning a :class:`Result`; implementations
    must not let exceptions escape. List operations return transactions
    ordered by ``created_at`` with the most recent first, and an empty list
    is a success.
    """

    async def create(self, transaction: Transaction) -> Result[Transaction, TransactionRepositoryError]:
        """Persist a new transaction and return the stored version."""

    async def find_by_id(self, transaction_id: str) -> Result[Transaction, TransactionRepositoryError]:
        """Return the transaction with ``transaction_id`` or a not-found failure."""

    async def find_by_reference(self, reference: str) -> Result[Transaction, TransactionRepositoryError]:
        """Return the transaction with ``reference`` or a not-found failure."""

    async def find_all(self) -> Result[list[Transaction], TransactionRepositoryError]:
        """Return every transaction, newest first."""

    async def find_by_customer_id(self, customer_id: str) -> Result[list[Transaction], TransactionRepositoryError]:
        """Return the customer's transactions, newest first."""

    async def find_by_customer_email(
        self, customer_email: str
    ) -> Result[list[Transaction], TransactionRepositoryError]:
        """Return the transactions placed with ``customer_email``, newest first."""

    async def update(self, transaction: Transaction) -> Result[Transaction, TransactionRepositoryError]:
        """Persist changes to an existing transaction and return the stored version."""

    async def exists_by_id(self, transaction_id: str) -> Result[bool, TransactionRepositoryError]:
        """Report whether a transaction with ``transaction_id`` is stored."""


__all__ = ["TransactionRepository"]
