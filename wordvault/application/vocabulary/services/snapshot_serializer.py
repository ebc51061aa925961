"""
JSON snapshot format shared by manual export, import and the backup file.

A snapshot is a JSON array of objects with camelCase keys:
id, word, meaning, example, createdAt, reviewCount, interval,
nextReviewAt, lastReviewedAt.
"""

import json
from typing import Any

from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.exceptions import FormatError
from wordvault.utils import as_number, clean_text

INVALID_JSON_MESSAGE = "Invalid JSON file."
NOT_AN_ARRAY_MESSAGE = "Backup format must be a JSON array."


def record_to_row(record: Record) -> dict[str, Any]:
    """Snapshot row for a record. Whole-number floats are written as integers."""
    return {
        "id": record.id.value,
        "word": record.word,
        "meaning": record.meaning,
        "example": record.example or "",
        "createdAt": as_number(record.created_at),
        "reviewCount": as_number(record.review_count),
        "interval": as_number(record.interval),
        "nextReviewAt": as_number(record.next_review_at),
        "lastReviewedAt": as_number(record.last_reviewed_at),
    }


def record_from_row(row: object) -> Record | None:
    """
    Build an unsaved record from one imported row.

    Text fields are trimmed. Numeric fields are coerced leniently; anything
    missing or non-numeric becomes NaN and is left for the record normalizer
    to repair. The incoming id is ignored.

    Returns:
        The record, or None if the row is not an object or lacks a word or
        meaning
    """
    if not isinstance(row, dict):
        return None

    word = clean_text(row.get("word"))
    meaning = clean_text(row.get("meaning"))
    if not word or not meaning:
        return None

    return Record(
        id=RecordId.generate(),
        word=word,
        meaning=meaning,
        example=clean_text(row.get("example")),
        created_at=as_number(row.get("createdAt")),
        review_count=as_number(row.get("reviewCount")),
        interval=as_number(row.get("interval")),
        next_review_at=as_number(row.get("nextReviewAt")),
        last_reviewed_at=as_number(row.get("lastReviewedAt")),
    )


class SnapshotSerializer:
    """Encodes records to snapshot bytes and decodes import payloads."""

    def dumps(self, records: list[Record] | tuple[Record, ...], pretty: bool = False) -> bytes:
        """
        Serialize records as UTF-8 JSON.

        Args:
            records: Normalized records
            pretty: Indent with two spaces (manual export) instead of the
                compact form used for the backup file
        """
        rows = [record_to_row(record) for record in records]
        if pretty:
            text = json.dumps(rows, ensure_ascii=False, allow_nan=False, indent=2)
        else:
            text = json.dumps(rows, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
        return text.encode("utf-8")

    def parse(self, payload: bytes | str) -> list[Any]:
        """
        Decode an import payload into its list of rows.

        Raises:
            FormatError: If the payload is not valid JSON or not an array
        """
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FormatError(INVALID_JSON_MESSAGE) from e

        if not isinstance(data, list):
            raise FormatError(NOT_AN_ARRAY_MESSAGE)
        return data


class RecordSetSnapshot:
    """Callable producing the compact backup payload for the current record set."""

    def __init__(self, record_set: RecordSet, serializer: SnapshotSerializer) -> None:
        self._record_set = record_set
        self._serializer = serializer

    def __call__(self) -> bytes:
        return self._serializer.dumps(self._record_set.records)
