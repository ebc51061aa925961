"""
Pagination types for the word list.

Example:
    pagination = Pagination(page=3, page_size=100)
    page = PaginatedResult(items=rows[pagination.offset:pagination.end], total=201,
                           pagination=pagination)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Maximum allowed page size
MAX_PAGE_SIZE = 200
DEFAULT_PAGE_SIZE = 100


def page_count_for(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items. Never less than one."""
    if page_size < 1:
        raise ValueError("Page size must be at least 1")
    return max(1, -(-total // page_size))


def clamp_page_size(page_size: int, max_page_size: int = MAX_PAGE_SIZE) -> int:
    """Force a requested page size into [1, max_page_size]."""
    return min(max_page_size, max(1, page_size))


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")

    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return (self.page - 1) * self.page_size

    @property
    def end(self) -> int:
        """Index one past the last item on this page."""
        return self.page * self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: Items on the current page
        total: Total number of items across all pages
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Number of items per page."""
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """Total number of pages (at least one, even when empty)."""
        return page_count_for(self.total, self.pagination.page_size)

    @property
    def has_next(self) -> bool:
        """Check if there is a next page."""
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there is a previous page."""
        return self.pagination.page > 1
