from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from tests.conftest import FIXED_TIME, build_transaction
from transaction_store.domain import Transaction, TransactionStatus


def _create(**overrides: object) -> Transaction:
    values: dict[str, object] = {
        "id": "id-123",
        "customer_id": "customer-123",
        "customer_email": "test@example.com",
        "amount_in_cents": 100000,
        "reference": "ORDER-123456",
        "acceptance_token": "acceptance-token",
        "accept_personal_auth": "personal-auth-token",
    }
    values.update(overrides)
    return Transaction.create(**values)  # type: ignore[arg-type]


def test_create_builds_pending_transaction_with_defaults() -> None:
    transaction = _create(now=FIXED_TIME)

    assert transaction.status is TransactionStatus.PENDING
    assert transaction.currency == "COP"
    assert transaction.wompi_transaction_id is None
    assert transaction.redirect_url is None
    assert transaction.payment_link_id is None
    assert transaction.error_message is None
    assert transaction.created_at == FIXED_TIME
    assert transaction.updated_at == FIXED_TIME


def test_create_defaults_timestamps_to_utc_now() -> None:
    before = datetime.now(timezone.utc)
    transaction = _create()
    after = datetime.now(timezone.utc)

    assert before <= transaction.created_at <= after
    assert transaction.created_at.tzinfo is not None


def test_create_rejects_negative_amount() -> None:
    with pytest.raises(ValueError, match="must not be negative"):
        _create(amount_in_cents=-1)


def test_create_rejects_invalid_currency() -> None:
    with pytest.raises(ValueError, match="3-letter"):
        _create(currency="PESO")


def test_zero_amount_is_allowed() -> None:
    assert _create(amount_in_cents=0).amount_in_cents == 0


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"amount_in_cents": -1}, "must not be negative"),
        ({"currency": "COPX"}, "3-letter"),
        ({"currency": ""}, "3-letter"),
    ],
)
def test_direct_construction_enforces_invariants(overrides: dict[str, object], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        build_transaction(**overrides)


def test_replace_cannot_produce_invalid_transaction() -> None:
    with pytest.raises(ValueError, match="must not be negative"):
        dataclasses.replace(build_transaction(), amount_in_cents=-500)


def test_transactions_are_hashable_by_id() -> None:
    pending = build_transaction()
    approved = pending.update_status(TransactionStatus.APPROVED, now=FIXED_TIME)

    assert hash(pending) == hash(approved)
    assert pending != approved
    assert len({pending, approved}) == 2
    assert len({pending, build_transaction()}) == 1


def test_transaction_is_immutable() -> None:
    transaction = build_transaction()

    with pytest.raises(dataclasses.FrozenInstanceError):
        transaction.status = TransactionStatus.APPROVED  # type: ignore[misc]


def test_update_status_returns_new_instance_and_refreshes_updated_at() -> None:
    transaction = build_transaction(wompi_transaction_id=None)
    later = FIXED_TIME + timedelta(minutes=5)

    updated = transaction.update_status(
        TransactionStatus.APPROVED,
        wompi_transaction_id="wompi-999",
        metadata={"reason": "approved"},
        now=later,
    )

    assert transaction.status is TransactionStatus.PENDING
    assert updated.status is TransactionStatus.APPROVED
    assert updated.wompi_transaction_id == "wompi-999"
    assert updated.metadata == {"reason": "approved"}
    assert updated.created_at == FIXED_TIME
    assert updated.updated_at == later


def test_update_status_keeps_existing_values_when_arguments_are_omitted() -> None:
    transaction = build_transaction()

    updated = transaction.update_status(TransactionStatus.DECLINED, error_message="Insufficient funds")

    assert updated.wompi_transaction_id == transaction.wompi_transaction_id
    assert updated.redirect_url == transaction.redirect_url
    assert updated.payment_link_id == transaction.payment_link_id
    assert updated.metadata == transaction.metadata
    assert updated.error_message == "Insufficient funds"


@pytest.mark.parametrize(
    ("status", "is_final"),
    [
        (TransactionStatus.PENDING, False),
        (TransactionStatus.ERROR, False),
        (TransactionStatus.APPROVED, True),
        (TransactionStatus.DECLINED, True),
        (TransactionStatus.VOIDED, True),
    ],
)
def test_is_final(status: TransactionStatus, is_final: bool) -> None:
    assert build_transaction(status=status).is_final() is is_final


def test_status_predicates() -> None:
    assert build_transaction(status=TransactionStatus.PENDING).is_pending()
    assert build_transaction(status=TransactionStatus.APPROVED).is_approved()
    assert build_transaction(status=TransactionStatus.DECLINED).is_declined()
    assert not build_transaction(status=TransactionStatus.APPROVED).is_pending()
