from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from transaction_store.core.config import Settings
from transaction_store.db.session import build_engine, build_session_factory, create_schema
from transaction_store.domain import Transaction, TransactionStatus
from transaction_store.repositories import SQLAlchemyTransactionRepository, SQLAlchemyTransactionStore

TRANSACTION_ID = "123e4567-e89b-12d3-a456-426614174000"
FIXED_TIME = datetime(2024, 1, 9, 10, 0, 0, tzinfo=timezone.utc)

DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def build_transaction(**overrides: Any) -> Transaction:
    """Return a fully populated transaction, with ``overrides`` applied."""

    values: dict[str, Any] = {
        "id": TRANSACTION_ID,
        "customer_id": "customer-123",
        "customer_email": "test@example.com",
        "amount_in_cents": 100000,
        "currency": "COP",
        "status": TransactionStatus.PENDING,
        "reference": "ORDER-123456",
        "acceptance_token": "acceptance-token",
        "accept_personal_auth": "personal-auth-token",
        "payment_method": {"type": "CARD"},
        "wompi_transaction_id": "wompi-123",
        "redirect_url": "https://example.com/redirect",
        "payment_link_id": "link-123",
        "customer_full_name": "John Doe",
        "customer_phone_number": "+573001234567",
        "shipping_address": {"city": "Bogotá", "address": "Calle 123"},
        "metadata": {"orderId": "123"},
        "error_message": None,
        "created_at": FIXED_TIME,
        "updated_at": FIXED_TIME,
    }
    values.update(overrides)
    return Transaction(**values)


@pytest.fixture()
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture()
def clock(fixed_time: datetime) -> Callable[[], datetime]:
    return lambda: fixed_time


@pytest.fixture()
def transaction() -> Transaction:
    return build_transaction()


@pytest.fixture()
def store() -> AsyncMock:
    """Store collaborator double; every method is awaitable."""

    return AsyncMock(spec=SQLAlchemyTransactionStore)


@pytest.fixture()
def repository(store: AsyncMock, clock: Callable[[], datetime]) -> SQLAlchemyTransactionRepository:
    return SQLAlchemyTransactionRepository(store, clock=clock)


@pytest_asyncio.fixture()
async def engine() -> AsyncIterator[AsyncEngine]:
    settings = Settings(database_url=DATABASE_URL, database_pool_pre_ping=False)
    async_engine = build_engine(
        settings,
        poolclass=StaticPool,
    )
    await create_schema(async_engine)
    try:
        yield async_engine
    finally:
        await async_engine.dispose()


@pytest.fixture()
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture()
def sql_store(session_factory: async_sessionmaker[AsyncSession]) -> SQLAlchemyTransactionStore:
    return SQLAlchemyTransactionStore(session_factory)
