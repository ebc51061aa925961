"""
Domain common module.

Identifiers and the domain exception hierarchy shared by every domain
module. Entities are plain dataclasses keyed by a ``RecordId``.
"""

from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    ValidationError,
)
from .value_objects import RecordId

__all__ = [
    "BusinessRuleViolationError",
    "DomainError",
    "RecordId",
    "ValidationError",
]
