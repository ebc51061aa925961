"""Protocol for the vocabulary record store."""

from typing import Any, Protocol

from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record


class RecordStoreProtocol(Protocol):
    """
    Asynchronous, transactional persistence for records and metadata.

    Every call is atomic: either its full effect is durable or nothing is.
    Failures raise StorageError.
    """

    async def create(self, record: Record) -> RecordId:
        """
        Insert a new record.

        Args:
            record: Record to insert; any id it carries is ignored

        Returns:
            Fresh store-assigned id, greater than every id assigned before
        """
        ...

    async def update(self, record: Record) -> None:
        """
        Upsert a record by id.

        Args:
            record: Record with an assigned id
        """
        ...

    async def update_existing(self, record: Record) -> bool:
        """
        Update a record by id, never inserting it.

        Args:
            record: Record with an assigned id

        Returns:
            True if updated, False if no record with that id exists
        """
        ...

    async def put_many(self, records: list[Record]) -> None:
        """
        Upsert several records in a single transaction.

        Args:
            records: Records with assigned ids; empty input is a no-op
        """
        ...

    async def delete(self, record_id: RecordId) -> bool:
        """
        Delete a record.

        Args:
            record_id: The record ID

        Returns:
            True if deleted, False if not found
        """
        ...

    async def get_all(self) -> list[Record]:
        """
        Load every record, ordered by id.

        Returns:
            Records exactly as stored (not normalized)
        """
        ...

    async def set_meta(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Store a JSON-serializable metadata value under ``key``."""
        ...

    async def get_meta(self, key: str) -> Any | None:  # noqa: ANN401
        """Return the metadata value for ``key``, or None if unset."""
        ...
