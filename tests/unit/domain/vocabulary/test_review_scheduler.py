"""Tests for ReviewScheduler domain service."""

from tests.conftest import FIXED_NOW, local_midnight, make_record
from wordvault.domain.vocabulary.services.review_scheduler import ReviewOutcome, ReviewScheduler


class TestReviewScheduler:
    def test_due_when_next_review_has_passed(self) -> None:
        scheduler = ReviewScheduler()
        assert scheduler.is_due(make_record(next_review_at=FIXED_NOW), FIXED_NOW)
        assert scheduler.is_due(make_record(next_review_at=FIXED_NOW - 1), FIXED_NOW)
        assert not scheduler.is_due(make_record(next_review_at=FIXED_NOW + 1), FIXED_NOW)

    def test_due_records_preserves_order(self) -> None:
        scheduler = ReviewScheduler()
        records = [
            make_record(id=1, next_review_at=FIXED_NOW - 5),
            make_record(id=2, next_review_at=FIXED_NOW + 5),
            make_record(id=3, next_review_at=FIXED_NOW),
        ]

        due = scheduler.due_records(records, FIXED_NOW)

        assert [r.id.value for r in due] == [1, 3]

    def test_known_doubles_interval(self) -> None:
        scheduler = ReviewScheduler()
        record = make_record(interval=4, review_count=2)

        updated = scheduler.apply(record, ReviewOutcome.KNOWN, FIXED_NOW)

        assert updated.interval == 8
        assert updated.review_count == 3
        assert updated.last_reviewed_at == FIXED_NOW
        assert updated.next_review_at == local_midnight(2025, 3, 18)

    def test_first_known_schedules_two_days_out(self) -> None:
        scheduler = ReviewScheduler()

        updated = scheduler.apply(make_record(), ReviewOutcome.KNOWN, FIXED_NOW)

        assert updated.interval == 2
        assert updated.next_review_at == local_midnight(2025, 3, 12)

    def test_known_rounds_half_away_from_zero(self) -> None:
        scheduler = ReviewScheduler()
        record = make_record(interval=1.25)

        assert scheduler.next_interval(record, ReviewOutcome.KNOWN) == 3

    def test_unknown_resets_interval_and_keeps_count(self) -> None:
        scheduler = ReviewScheduler()
        record = make_record(interval=16, review_count=5)

        updated = scheduler.apply(record, ReviewOutcome.UNKNOWN, FIXED_NOW)

        assert updated.interval == 1
        assert updated.review_count == 5
        assert updated.last_reviewed_at == FIXED_NOW
        assert updated.next_review_at == local_midnight(2025, 3, 11)

    def test_apply_returns_copy(self) -> None:
        scheduler = ReviewScheduler()
        record = make_record()

        scheduler.apply(record, ReviewOutcome.KNOWN, FIXED_NOW)

        assert record.interval == 1
        assert record.review_count == 0

    def test_outcome_from_known(self) -> None:
        assert ReviewOutcome.from_known(True) is ReviewOutcome.KNOWN
        assert ReviewOutcome.from_known(False) is ReviewOutcome.UNKNOWN
