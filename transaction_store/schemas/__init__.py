"""Pydantic schemas package."""

from .transaction import TransactionRead, TransactionStatusUpdate

__all__ = ["TransactionRead", "TransactionStatusUpdate"]
