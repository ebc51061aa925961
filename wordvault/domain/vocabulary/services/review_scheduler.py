"""
Spaced-repetition scheduling for vocabulary records.

Successful recall doubles the interval; a miss resets it to one day without
touching the review count, which counts successful recalls only. Due dates
are anchored to local midnight so a review at any time of day schedules
the same way.
"""

from dataclasses import replace
from enum import Enum

from wordvault.domain.vocabulary.entities.record import Record
from wordvault.utils import local_midnight_after, round_half_up


class ReviewOutcome(str, Enum):
    """Result of presenting a record during review."""

    KNOWN = "known"
    UNKNOWN = "unknown"

    @classmethod
    def from_known(cls, known: bool) -> "ReviewOutcome":
        return cls.KNOWN if known else cls.UNKNOWN


class ReviewScheduler:
    """Domain service applying review outcomes to a record's schedule."""

    def is_due(self, record: Record, now: float) -> bool:
        """A record is due once its next review time has passed."""
        return record.is_due(now)

    def due_records(self, records: list[Record] | tuple[Record, ...], now: float) -> list[Record]:
        """Filter records that are due at ``now``, preserving order."""
        return [record for record in records if self.is_due(record, now)]

    def next_interval(self, record: Record, outcome: ReviewOutcome) -> int:
        """Interval in days after the given outcome."""
        if outcome is ReviewOutcome.KNOWN:
            return max(1, round_half_up(record.interval * 2))
        return 1

    def apply(self, record: Record, outcome: ReviewOutcome, now: int) -> Record:
        """
        Return a copy of the record with the outcome applied.

        Args:
            record: Record being reviewed (already normalized)
            outcome: Known or unknown
            now: Time of the review (epoch ms)

        Returns:
            New Record with interval, next_review_at, review_count and
            last_reviewed_at updated
        """
        interval = self.next_interval(record, outcome)
        review_count = record.review_count + 1 if outcome is ReviewOutcome.KNOWN else record.review_count

        return replace(
            record,
            interval=interval,
            next_review_at=local_midnight_after(now, interval),
            review_count=review_count,
            last_reviewed_at=now,
        )
