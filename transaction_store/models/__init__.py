"""ORM models package."""
from .base import Base, TimestampMixin, UTCDateTime
from .transaction import TransactionRecord

__all__ = [
    "Base",
    "TimestampMixin",
    "TransactionRecord",
    "UTCDateTime",
]
