"""Pydantic schemas for Word API request/response validation."""

from pydantic import BaseModel, Field

from wordvault.application.common.pagination import PaginatedResult
from wordvault.domain.vocabulary.entities.record import Record


class WordBase(BaseModel):
    """Base schema for Word."""

    word: str = Field(..., description="The word or phrase being learned")
    meaning: str = Field(..., description="Meaning or translation")
    example: str = Field(default="", description="Optional example sentence")


class WordCreateRequest(WordBase):
    """Schema for adding a new word. Blank word or meaning is rejected with 400."""


class Word(WordBase):
    """Schema for Word response."""

    id: int
    created_at: int | float
    review_count: int
    interval: int
    next_review_at: int | float
    last_reviewed_at: int | float

    @classmethod
    def from_record(cls, record: Record) -> "Word":
        return cls(
            id=record.id.value,
            word=record.word,
            meaning=record.meaning,
            example=record.example,
            created_at=record.created_at,
            review_count=int(record.review_count),
            interval=int(record.interval),
            next_review_at=record.next_review_at,
            last_reviewed_at=record.last_reviewed_at,
        )


class WordListResponse(BaseModel):
    """One page of the word list plus counters for the header."""

    items: list[Word] = Field(..., description="Words on the current page")
    total: int = Field(..., description="Number of words matching the search")
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool
    total_count: int = Field(..., description="Number of stored words, ignoring the search")
    due_count: int = Field(..., description="Number of words due for review now")

    @classmethod
    def from_page(
        cls, page: PaginatedResult[Record], total_count: int, due_count: int
    ) -> "WordListResponse":
        return cls(
            items=[Word.from_record(record) for record in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
            total_count=total_count,
            due_count=due_count,
        )
