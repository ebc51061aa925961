"""
Record entity for a single vocabulary entry.
"""

from dataclasses import dataclass

from wordvault.domain.common.exceptions import ValidationError
from wordvault.domain.common.value_objects import RecordId


@dataclass
class Record:
    """
    Vocabulary entry with its spaced-repetition scheduling state.

    Business Rules:
    - Word and meaning cannot be empty after trimming
    - ID is assigned by the store and never changes afterwards
    - Timestamps are epoch milliseconds

    Scheduling fields loaded from storage or an import may hold invalid
    values (NaN, negative, zero) until the record normalizer repairs them.
    """

    id: RecordId
    word: str
    meaning: str
    example: str
    created_at: float
    review_count: float = 0
    interval: float = 1
    next_review_at: float = 0
    last_reviewed_at: float = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.word or not self.word.strip():
            raise ValidationError("Word cannot be empty", field="word")
        if not self.meaning or not self.meaning.strip():
            raise ValidationError("Meaning cannot be empty", field="meaning")

    def is_due(self, now: float) -> bool:
        """Whether the record is scheduled for review at ``now``."""
        return self.next_review_at <= now

    @classmethod
    def create(
        cls,
        word: str,
        meaning: str,
        example: str,
        now: int,
    ) -> "Record":
        """Create a new record due immediately (ID will be 0 until persisted)."""
        return cls(
            id=RecordId.generate(),
            word=word.strip(),
            meaning=meaning.strip(),
            example=example.strip(),
            created_at=now,
            review_count=0,
            interval=1,
            next_review_at=now,
            last_reviewed_at=0,
        )

    @classmethod
    def create_with_id(
        cls,
        id: RecordId,
        word: str,
        meaning: str,
        example: str,
        created_at: float,
        review_count: float,
        interval: float,
        next_review_at: float,
        last_reviewed_at: float,
    ) -> "Record":
        """Reconstitute a record from persistence."""
        return cls(
            id=id,
            word=word,
            meaning=meaning,
            example=example,
            created_at=created_at,
            review_count=review_count,
            interval=interval,
            next_review_at=next_review_at,
            last_reviewed_at=last_reviewed_at,
        )
