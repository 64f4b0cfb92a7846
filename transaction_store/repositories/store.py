"""Relational store for transaction records."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Literal, Protocol, runtime_checkable

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from transaction_store.db.session import session_scope
from transaction_store.models import TransactionRecord

SortDirection = Literal["asc", "desc"]


@runtime_checkable
class TransactionStore(Protocol):
    """Relational store operations the repository adapter relies on.

    ``where`` maps record attribute names to values matched by equality;
    ``order_by`` maps attribute names to a sort direction. Implementations
    raise on failure.
    """

    async def save(self, record: TransactionRecord) -> TransactionRecord:
        """Insert or replace ``record`` by primary key and return the stored row."""

    async def find_one(self, where: Mapping[str, object]) -> TransactionRecord | None:
        """Return the first row matching ``where`` or ``None``."""

    async def find(
        self,
        where: Mapping[str, object] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> Sequence[TransactionRecord]:
        """Return all rows matching ``where`` in ``order_by`` order."""

    async def count(self, where: Mapping[str, object]) -> int:
        """Return the number of rows matching ``where``."""


class SQLAlchemyTransactionStore:
    """Runs each store call in its own session and database transaction."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def save(self, record: TransactionRecord) -> TransactionRecord:
        async with session_scope(self._session_factory) as session:
            merged = await session.merge(record)
            await session.flush()
            return merged

    async def find_one(self, where: Mapping[str, object]) -> TransactionRecord | None:
        statement = self._filtered(select(TransactionRecord), where).limit(1)
        async with session_scope(self._session_factory) as session:
            result = await session.execute(statement)
            return result.scalars().first()

    async def find(
        self,
        where: Mapping[str, object] | None = None,
        order_by: Mapping[str, SortDirection] | None = None,
    ) -> Sequence[TransactionRecord]:
        statement = self._filtered(select(TransactionRecord), where or {})
        for attribute, direction in (order_by or {}).items():
            column = self._column(attribute)
            statement = statement.order_by(column.desc() if direction == "desc" else column.asc())
        async with session_scope(self._session_factory) as session:
            result = await session.execute(statement)
            return list(result.scalars().all())

    async def count(self, where: Mapping[str, object]) -> int:
        statement = self._filtered(select(func.count()).select_from(TransactionRecord), where)
        async with session_scope(self._session_factory) as session:
            result = await session.execute(statement)
            return int(result.scalar_one())

    def _filtered(self, statement: Select, where: Mapping[str, object]) -> Select:
        for attribute, value in where.items():
            statement = statement.where(self._column(attribute) == value)
        return statement

    @staticmethod
    def _column(attribute: str) -> InstrumentedAttribute:
        if attribute not in inspect(TransactionRecord).column_attrs:
            raise ValueError(f"Unknown transaction attribute: {attribute}")
        return getattr(TransactionRecord, attribute)


__all__ = ["SQLAlchemyTransactionStore", "SortDirection", "TransactionStore"]
