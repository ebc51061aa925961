"""
Domain service that repairs missing or invalid scheduling fields.

This is a pure domain service with no infrastructure dependencies.
"""

from dataclasses import dataclass, replace

from wordvault.domain.vocabulary.entities.record import Record
from wordvault.utils import is_finite_number


@dataclass(frozen=True)
class NormalizationResult:
    """A record after normalization and whether any field was repaired."""

    record: Record
    changed: bool


class RecordNormalizer:
    """
    Domain service for repairing records written by older app versions.

    Rules are applied independently per field, in this order:
    - created_at not finite or <= 0 -> now
    - review_count not finite or < 0 -> 0
    - interval not finite or < 1 -> 1
    - next_review_at not finite or <= 0 -> now
    - last_reviewed_at not finite or < 0 -> 0

    Applying it to its own output never changes anything further.
    """

    def normalize(self, record: Record, now: int) -> NormalizationResult:
        """
        Repair a single record.

        Args:
            record: Record as read from storage or import
            now: Reference timestamp (epoch ms) used for repaired timestamps

        Returns:
            NormalizationResult with the (possibly unchanged) record
        """
        repairs: dict[str, float] = {}

        if not is_finite_number(record.created_at) or record.created_at <= 0:
            repairs["created_at"] = now

        if not is_finite_number(record.review_count) or record.review_count < 0:
            repairs["review_count"] = 0

        if not is_finite_number(record.interval) or record.interval < 1:
            repairs["interval"] = 1

        if not is_finite_number(record.next_review_at) or record.next_review_at <= 0:
            repairs["next_review_at"] = now

        if not is_finite_number(record.last_reviewed_at) or record.last_reviewed_at < 0:
            repairs["last_reviewed_at"] = 0

        if not repairs:
            return NormalizationResult(record=record, changed=False)
        return NormalizationResult(record=replace(record, **repairs), changed=True)

    def normalize_all(self, records: list[Record], now: int) -> tuple[list[Record], list[Record]]:
        """
        Repair a batch of records against a single reference time.

        Args:
            records: Records as read from storage
            now: Reference timestamp (epoch ms)

        Returns:
            Tuple of (all_records_normalized, changed_records)
        """
        normalized: list[Record] = []
        changed: list[Record] = []

        for record in records:
            result = self.normalize(record, now)
            normalized.append(result.record)
            if result.changed:
                changed.append(result.record)

        return normalized, changed
