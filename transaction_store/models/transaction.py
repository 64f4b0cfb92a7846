"""Transaction ORM model."""
from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from transaction_store.domain.transaction import DEFAULT_CURRENCY, TransactionStatus
from transaction_store.models.base import Base, TimestampMixin


class TransactionRecord(TimestampMixin, Base):
    """Storage shape of a payment transaction.

    Column names follow the existing ``transactions`` table, which uses
    camelCase identifiers.
    """

    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    customer_id: Mapped[str] = mapped_column("customerId", String(36), nullable=False)
    customer_email: Mapped[str] = mapped_column("customerEmail", String(255), nullable=False)
    amount_in_cents: Mapped[int] = mapped_column("amountInCents", BigInteger, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default=DEFAULT_CURRENCY)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=TransactionStatus.PENDING.value)
    reference: Mapped[str] = mapped_column(String(100), nullable=False)
    acceptance_token: Mapped[str] = mapped_column("acceptanceToken", Text, nullable=False)
    accept_personal_auth: Mapped[str] = mapped_column("acceptPersonalAuth", Text, nullable=False)
    payment_method: Mapped[dict[str, Any] | None] = mapped_column("paymentMethod", JSON, nullable=True)
    wompi_transaction_id: Mapped[str | None] = mapped_column("wompiTransactionId", String(100), nullable=True)
    redirect_url: Mapped[str | None] = mapped_column("redirectUrl", Text, nullable=True)
    payment_link_id: Mapped[str | None] = mapped_column("paymentLinkId", String(100), nullable=True)
    customer_full_name: Mapped[str | None] = mapped_column("customerFullName", String(255), nullable=True)
    customer_phone_number: Mapped[str | None] = mapped_column("customerPhoneNumber", String(50), nullable=True)
    shipping_address: Mapped[dict[str, Any] | None] = mapped_column("shippingAddress", JSON, nullable=True)
    # ``metadata`` is reserved on declarative classes
    metadata_: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)
    error_message: Mapped[str | None] = mapped_column("errorMessage", Text, nullable=True)

    def __repr__(self) -> str:
        return f"TransactionRecord(id={self.id!r}, reference={self.reference!r}, status={self.status!r})"


__all__ = ["TransactionRecord"]
