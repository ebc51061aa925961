"""Common value objects shared across all domain modules."""

from .ids import RecordId

__all__ = [
    "RecordId",
]
