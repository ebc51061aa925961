"""
Application common module.

Contains base types for the application layer:
- Result: Result type for use case outcomes
- Pagination: Page parameters and paginated results
"""

from .pagination import (
    MAX_PAGE_SIZE,
    PaginatedResult,
    Pagination,
    clamp_page_size,
    page_count_for,
)
from .result import Failure, Result, Success

__all__ = [
    "MAX_PAGE_SIZE",
    "Failure",
    "PaginatedResult",
    "Pagination",
    "Result",
    "Success",
    "clamp_page_size",
    "page_count_for",
]
