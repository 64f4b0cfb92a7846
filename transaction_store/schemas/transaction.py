"""Pydantic schemas for transaction resources."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from transaction_store.domain.transaction import Transaction, TransactionStatus


class TransactionStatusUpdate(BaseModel):
    status: TransactionStatus
    wompi_transaction_id: str | None = Field(default=None, max_length=100)
    metadata: dict[str, Any] | None = None
    error_message: str | None = None


class TransactionRead(BaseModel):
    id: str
    customer_id: str
    customer_email: str
    amount_in_cents: int = Field(..., ge=0)
    currency: str = Field(..., min_length=3, max_length=3)
    status: TransactionStatus
    reference: str
    payment_method: dict[str, Any] | None = None
    wompi_transaction_id: str | None = None
    redirect_url: str | None = None
    payment_link_id: str | None = None
    customer_full_name: str | None = None
    customer_phone_number: str | None = None
    shipping_address: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    error_message: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def from_entity(cls, transaction: Transaction) -> TransactionRead:
        """Build the read model; acceptance tokens are never exposed."""
        return cls(
            id=transaction.id,
            customer_id=transaction.customer_id,
            customer_email=transaction.customer_email,
            amount_in_cents=transaction.amount_in_cents,
            currency=transaction.currency,
            status=transaction.status,
            reference=transaction.reference,
            payment_method=transaction.payment_method,
            wompi_transaction_id=transaction.wompi_transaction_id,
            redirect_url=transaction.redirect_url,
            payment_link_id=transaction.payment_link_id,
            customer_full_name=transaction.customer_full_name,
            customer_phone_number=transaction.customer_phone_number,
            shipping_address=transaction.shipping_address,
            metadata=transaction.metadata,
            error_message=transaction.error_message,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


__all__ = ["TransactionRead", "TransactionStatusUpdate"]
