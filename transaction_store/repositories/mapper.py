"""Translation between the transaction entity and its storage record."""
from __future__ import annotations

from typing import Any

from transaction_store.domain.transaction import Transaction, TransactionStatus
from transaction_store.models import TransactionRecord


def _copy_map(value: dict[str, Any] | None) -> dict[str, Any] | None:
    return dict(value) if value is not None else None


class TransactionMapper:
    """Stateless field-for-field projection between entity and record."""

    @staticmethod
    def to_record(transaction: Transaction) -> TransactionRecord:
        return TransactionRecord(
            id=transaction.id,
            customer_id=transaction.customer_id,
            customer_email=transaction.customer_email,
            amount_in_cents=transaction.amount_in_cents,
            currency=transaction.currency,
            status=transaction.status.value,
            reference=transaction.reference,
            acceptance_token=transaction.acceptance_token,
            accept_personal_auth=transaction.accept_personal_auth,
            payment_method=_copy_map(transaction.payment_method),
            wompi_transaction_id=transaction.wompi_transaction_id,
            redirect_url=transaction.redirect_url,
            payment_link_id=transaction.payment_link_id,
            customer_full_name=transaction.customer_full_name,
            customer_phone_number=transaction.customer_phone_number,
            shipping_address=_copy_map(transaction.shipping_address),
            metadata_=_copy_map(transaction.metadata),
            error_message=transaction.error_message,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )

    @staticmethod
    def to_domain(record: TransactionRecord) -> Transaction:
        return Transaction(
            id=record.id,
            customer_id=record.customer_id,
            customer_email=record.customer_email,
            amount_in_cents=record.amount_in_cents,
            currency=record.currency,
            status=TransactionStatus(record.status),
            reference=record.reference,
            acceptance_token=record.acceptance_token,
            accept_personal_auth=record.accept_personal_auth,
            payment_method=_copy_map(record.payment_method),
            wompi_transaction_id=record.wompi_transaction_id,
            redirect_url=record.redirect_url,
            payment_link_id=record.payment_link_id,
            customer_full_name=record.customer_full_name,
            customer_phone_number=record.customer_phone_number,
            shipping_address=_copy_map(record.shipping_address),
            metadata=_copy_map(record.metadata_),
            error_message=record.error_message,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


__all__ = ["TransactionMapper"]
