"""Transaction status update workflow."""
from __future__ import annotations

import logging

from transaction_store.core.result import Result
from transaction_store.domain.transaction import Transaction
from transaction_store.repositories.errors import TransactionRepositoryError, TransactionUpdateRejectedError
from transaction_store.repositories.ports import TransactionRepository
from transaction_store.schemas.transaction import TransactionStatusUpdate


class TransactionStatusService:
    """Moves a transaction to a new status unless it has already settled."""

    def __init__(self, repository: TransactionRepository, *, logger: logging.Logger | None = None) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    async def update_status(
        self,
        reference: str,
        update: TransactionStatusUpdate,
    ) -> Result[Transaction, TransactionRepositoryError]:
        self._logger.info("Updating transaction %s to status %s", reference, update.status.value)

        found = await self._repository.find_by_reference(reference)
        if found.is_failure:
            self._logger.warning("Transaction lookup failed for reference %s: %s", reference, found.error)
            return found

        transaction = found.value
        if transaction.is_final():
            self._logger.warning(
                "Cannot update transaction %s - already in final status: %s",
                reference,
                transaction.status.value,
            )
            return Result.fail(
                TransactionUpdateRejectedError(
                    f"Transaction is in final status {transaction.status.value} and cannot be updated"
                )
            )

        updated = transaction.update_status(
            update.status,
            wompi_transaction_id=update.wompi_transaction_id,
            metadata=update.metadata,
            error_message=update.error_message,
        )
        result = await self._repository.update(updated)
        if result.is_success:
            self._logger.info("Transaction %s updated successfully to status %s", reference, update.status.value)
        return result


__all__ = ["TransactionStatusService"]
