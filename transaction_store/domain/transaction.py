"""Payment transaction domain entity."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, TypeVar

DEFAULT_CURRENCY = "COP"

_T = TypeVar("_T")


class TransactionStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    VOIDED = "VOIDED"
    ERROR = "ERROR"


FINAL_STATUSES = frozenset(
    {TransactionStatus.APPROVED, TransactionStatus.DECLINED, TransactionStatus.VOIDED}
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _keep(new: _T | None, current: _T | None) -> _T | None:
    return new if new is not None else current


@dataclass(slots=True, frozen=True)
class Transaction:
    """A payment transaction as seen by the rest of the system.

    Instances are immutable; state changes return a new instance. Optional
    fields use ``None`` for "absent". The entity knows nothing about how it is
    stored. Construction raises ``ValueError`` for a negative amount or a
    currency code that is not three characters long. Equality compares every
    field; the hash uses ``id`` only, since the JSON fields are dicts.
    """

    id: str
    customer_id: str
    customer_email: str
    amount_in_cents: int
    currency: str
    status: TransactionStatus
    reference: str
    acceptance_token: str
    accept_personal_auth: str
    payment_method: dict[str, Any] | None = None
    wompi_transaction_id: str | None = None
    redirect_url: str | None = None
    payment_link_id: str | None = None
    customer_full_name: str | None = None
    customer_phone_number: str | None = None
    shipping_address: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    error_message: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.amount_in_cents < 0:
            raise ValueError(f"amount_in_cents must not be negative, got {self.amount_in_cents}")
        if len(self.currency) != 3:
            raise ValueError(f"currency must be a 3-letter code, got {self.currency!r}")

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def create(
        cls,
        *,
        id: str,
        customer_id: str,
        customer_email: str,
        amount_in_cents: int,
        reference: str,
        acceptance_token: str,
        accept_personal_auth: str,
        currency: str = DEFAULT_CURRENCY,
        payment_method: dict[str, Any] | None = None,
        customer_full_name: str | None = None,
        customer_phone_number: str | None = None,
        shipping_address: dict[str, Any] | None = None,
        metadata: dict[str, Any] | None = None,
        now: datetime | None = None,
    ) -> Transaction:
        """Build a new pending transaction stamped with ``now`` (UTC by default)."""
        timestamp = now or _utcnow()
        return cls(
            id=id,
            customer_id=customer_id,
            customer_email=customer_email,
            amount_in_cents=amount_in_cents,
            currency=currency,
            status=TransactionStatus.PENDING,
            reference=reference,
            acceptance_token=acceptance_token,
            accept_personal_auth=accept_personal_auth,
            payment_method=payment_method,
            customer_full_name=customer_full_name,
            customer_phone_number=customer_phone_number,
            shipping_address=shipping_address,
            metadata=metadata,
            created_at=timestamp,
            updated_at=timestamp,
        )

    def update_status(
        self,
        new_status: TransactionStatus,
        *,
        wompi_transaction_id: str | None = None,
        redirect_url: str | None = None,
        payment_link_id: str | None = None,
        metadata: dict[str, Any] | None = None,
        error_message: str | None = None,
        now: datetime | None = None,
    ) -> Transaction:
        """Return a copy in ``new_status``; omitted arguments keep current values."""
        return replace(
            self,
            status=new_status,
            wompi_transaction_id=_keep(wompi_transaction_id, self.wompi_transaction_id),
            redirect_url=_keep(redirect_url, self.redirect_url),
            payment_link_id=_keep(payment_link_id, self.payment_link_id),
            metadata=_keep(metadata, self.metadata),
            error_message=_keep(error_message, self.error_message),
            updated_at=now or _utcnow(),
        )

    def is_pending(self) -> bool:
        return self.status == TransactionStatus.PENDING

    def is_approved(self) -> bool:
        return self.status == TransactionStatus.APPROVED

    def is_declined(self) -> bool:
        return self.status == TransactionStatus.DECLINED

    def is_final(self) -> bool:
        return self.status in FINAL_STATUSES


__all__ = ["DEFAULT_CURRENCY", "FINAL_STATUSES", "Transaction", "TransactionStatus"]
