"""Application services built on the repository port."""

from .transactions import TransactionStatusService

__all__ = ["TransactionStatusService"]
