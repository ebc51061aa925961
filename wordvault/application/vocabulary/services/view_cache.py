"""
Sorted, filtered and paginated projection of the record set.

Sorting the whole set is the expensive part, so the sorted list is memoized
under a composite key and only rebuilt when one of its inputs changes.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from wordvault.application.common.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginatedResult,
    Pagination,
    clamp_page_size,
    page_count_for,
)
from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.utils import collation_key, fold_text

logger = structlog.get_logger(__name__)


class SortMode(str, Enum):
    """Word list orderings offered to the user."""

    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_REVIEWED = "mostReviewed"
    LEAST_REVIEWED = "leastReviewed"
    ALPHABETICAL = "alphabetical"


# Ties fall back to newest-first except for the two pure date orders.
_SORT_KEYS: dict[SortMode, Callable[[Record], Any]] = {
    SortMode.NEWEST: lambda r: -r.created_at,
    SortMode.OLDEST: lambda r: r.created_at,
    SortMode.MOST_REVIEWED: lambda r: (-r.review_count, -r.created_at),
    SortMode.LEAST_REVIEWED: lambda r: (r.review_count, -r.created_at),
    SortMode.ALPHABETICAL: lambda r: (collation_key(r.word), -r.created_at),
}


@dataclass(frozen=True)
class ViewCacheKey:
    """Every input that determines the sorted list."""

    version: int
    sort_mode: SortMode
    page_size: int
    search_term: str


def matches_search(record: Record, term: str) -> bool:
    """Case-insensitive substring match on word or meaning. ``term`` is folded."""
    return term in fold_text(record.word) or term in fold_text(record.meaning)


class RecordViewCache:
    """
    View over a RecordSet with search, sort and pagination state.

    An empty (or whitespace-only) search term means no filter. Changing the
    search term, sort mode or page size goes back to the first page. The
    current page is clamped into [1, page_count] whenever it is read, so a
    delete that removes the last page moves the caller to the new last page.
    """

    def __init__(
        self,
        record_set: RecordSet,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
        sort_mode: SortMode = SortMode.NEWEST,
    ) -> None:
        self._record_set = record_set
        self._max_page_size = max_page_size
        self._page_size = clamp_page_size(page_size, max_page_size)
        self._sort_mode = sort_mode
        self._search_term = ""
        self._page = 1
        self._cache_key: ViewCacheKey | None = None
        self._cache: list[Record] = []

    # ---- View state ----

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    @property
    def page_size(self) -> int:
        return self._page_size

    def set_search_term(self, term: str) -> None:
        self._search_term = term
        self._page = 1

    def set_sort_mode(self, mode: SortMode | str) -> None:
        self._sort_mode = SortMode(mode)
        self._page = 1

    def set_page_size(self, page_size: int) -> None:
        self._page_size = clamp_page_size(page_size, self._max_page_size)
        self._page = 1

    def set_page(self, page: int) -> int:
        """Move to ``page``, clamped into range. Returns the resulting page."""
        self._page = max(1, min(page, self.page_count()))
        return self._page

    def next_page(self) -> int:
        return self.set_page(self._page + 1)

    def previous_page(self) -> int:
        return self.set_page(self._page - 1)

    # ---- Derived data ----

    def cache_key(self) -> ViewCacheKey:
        return ViewCacheKey(
            version=self._record_set.version,
            sort_mode=self._sort_mode,
            page_size=self._page_size,
            search_term=fold_text(self._search_term),
        )

    def sorted_records(self) -> list[Record]:
        """
        Filtered and sorted records for the current view state.

        Returns the memoized list object itself while the cache key is
        unchanged. Callers must not mutate it.
        """
        key = self.cache_key()
        if key == self._cache_key:
            return self._cache

        source = self._record_set.records
        if key.search_term:
            source = tuple(r for r in source if matches_search(r, key.search_term))

        self._cache = sorted(source, key=_SORT_KEYS[key.sort_mode])
        self._cache_key = key
        logger.debug(
            "view_cache_rebuilt",
            version=key.version,
            sort_mode=key.sort_mode.value,
            matched=len(self._cache),
        )
        return self._cache

    def total(self) -> int:
        """Number of records in the current (possibly filtered) view."""
        return len(self.sorted_records())

    def page_count(self) -> int:
        return page_count_for(self.total(), self._page_size)

    def current_page(self) -> int:
        """Current page, clamped into [1, page_count]."""
        self._page = max(1, min(self._page, self.page_count()))
        return self._page

    def page(self) -> PaginatedResult[Record]:
        """Rows of the current page together with paging metadata."""
        records = self.sorted_records()
        pagination = Pagination(page=self.current_page(), page_size=self._page_size)
        return PaginatedResult(
            items=records[pagination.offset : pagination.end],
            total=len(records),
            pagination=pagination,
        )

    def renderable_rows(self) -> list[Record]:
        return self.page().items
