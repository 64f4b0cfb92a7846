"""Relational implementation of the transaction repository port."""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import TypeVar

from transaction_store.core.result import Result
from transaction_store.domain.transaction import Transaction
from transaction_store.repositories.errors import (
    TransactionNotFoundError,
    TransactionRepositoryError,
    TransactionStoreError,
)
from transaction_store.repositories.mapper import TransactionMapper
from transaction_store.repositories.store import SortDirection, TransactionStore

T = TypeVar("T")

NEWEST_FIRST: Mapping[str, SortDirection] = {"created_at": "desc"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SQLAlchemyTransactionRepository:
    """Fulfils :class:`TransactionRepository` on top of a :class:`TransactionStore`.

    Store exceptions never escape: each one is logged and returned as a failed
    result whose message names the operation that failed. ``created_at`` is
    stamped on create and ``updated_at`` on every write, using ``clock``.
    """

    def __init__(
        self,
        store: TransactionStore,
        *,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock or _utcnow

    async def create(self, transaction: Transaction) -> Result[Transaction, TransactionRepositoryError]:
        now = self._clock()
        stamped = replace(transaction, created_at=now, updated_at=now)
        try:
            saved = await self._store.save(TransactionMapper.to_record(stamped))
            domain = TransactionMapper.to_domain(saved)
        except Exception as exc:
            return self._store_failure("Error creating transaction", "Failed to create transaction", exc)
        self._logger.info("Transaction created: %s", domain.id)
        return Result.ok(domain)

    async def find_by_id(self, transaction_id: str) -> Result[Transaction, TransactionRepositoryError]:
        return await self._find_one(
            {"id": transaction_id},
            not_found=f"Transaction not found with id: {transaction_id}",
            log_message="Error finding transaction by id",
        )

    async def find_by_reference(self, reference: str) -> Result[Transaction, TransactionRepositoryError]:
        return await self._find_one(
            {"reference": reference},
            not_found=f"Transaction not found with reference: {reference}",
            log_message="Error finding transaction by reference",
        )

    async def find_all(self) -> Result[list[Transaction], TransactionRepositoryError]:
        return await self._find_many(None, log_message="Error finding all transactions")

    async def find_by_customer_id(self, customer_id: str) -> Result[list[Transaction], TransactionRepositoryError]:
        return await self._find_many(
            {"customer_id": customer_id},
            log_message="Error finding transactions by customer id",
        )

    async def find_by_customer_email(
        self, customer_email: str
    ) -> Result[list[Transaction], TransactionRepositoryError]:
        self._logger.debug("Finding transactions for email: %s", customer_email)
        result = await self._find_many(
            {"customer_email": customer_email},
            log_message="Error finding transactions by customer email",
        )
        if result.is_success:
            self._logger.debug("Found %d transactions for email: %s", len(result.value), customer_email)
        return result

    async def update(self, transaction: Transaction) -> Result[Transaction, TransactionRepositoryError]:
        stamped = replace(transaction, updated_at=self._clock())
        try:
            saved = await self._store.save(TransactionMapper.to_record(stamped))
            domain = TransactionMapper.to_domain(saved)
        except Exception as exc:
            return self._store_failure("Error updating transaction", "Failed to update transaction", exc)
        self._logger.info("Transaction updated: %s", domain.id)
        return Result.ok(domain)

    async def exists_by_id(self, transaction_id: str) -> Result[bool, TransactionRepositoryError]:
        try:
            count = await self._store.count({"id": transaction_id})
        except Exception as exc:
            return self._store_failure(
                "Error checking transaction existence",
                "Failed to check transaction existence",
                exc,
            )
        return Result.ok(count > 0)

    async def _find_one(
        self,
        where: Mapping[str, object],
        *,
        not_found: str,
        log_message: str,
    ) -> Result[Transaction, TransactionRepositoryError]:
        try:
            record = await self._store.find_one(where)
            domain = TransactionMapper.to_domain(record) if record is not None else None
        except Exception as exc:
            return self._store_failure(log_message, "Failed to find transaction", exc)
        if domain is None:
            return Result.fail(TransactionNotFoundError(not_found))
        return Result.ok(domain)

    async def _find_many(
        self,
        where: Mapping[str, object] | None,
        *,
        log_message: str,
    ) -> Result[list[Transaction], TransactionRepositoryError]:
        try:
            records = await self._store.find(where, NEWEST_FIRST)
            domains = [TransactionMapper.to_domain(record) for record in records]
        except Exception as exc:
            return self._store_failure(log_message, "Failed to find transactions", exc)
        return Result.ok(domains)

    def _store_failure(self, log_message: str, prefix: str, exc: Exception) -> Result[T, TransactionRepositoryError]:
        self._logger.error("%s: %s", log_message, exc, exc_info=exc)
        error = TransactionStoreError(f"{prefix}: {exc}")
        error.__cause__ = exc
        return Result.fail(error)


__all__ = ["NEWEST_FIRST", "SQLAlchemyTransactionRepository"]
