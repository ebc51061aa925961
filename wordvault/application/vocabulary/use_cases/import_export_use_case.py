"""
Use case for JSON snapshot export and deduplicating import.
"""

import asyncio

import structlog

from wordvault.application.vocabulary.protocols.record_store import RecordStoreProtocol
from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.backup_synchronizer import BackupSynchronizer
from wordvault.application.vocabulary.services.snapshot_serializer import (
    SnapshotSerializer,
    record_from_row,
)
from wordvault.application.vocabulary.use_cases.record_use_case import RecordUseCase
from wordvault.constants import BACKUP_REASON_IMPORT
from wordvault.domain.vocabulary.services.deduplication_service import (
    RecordDeduplicationService,
)
from wordvault.domain.vocabulary.services.record_normalizer import RecordNormalizer
from wordvault.exceptions import StorageError
from wordvault.utils import Clock, now_ms

logger = structlog.get_logger(__name__)

DEFAULT_YIELD_INTERVAL = 1500


class ImportExportUseCase:
    """Use case for moving the whole record set in and out as JSON."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        record_set: RecordSet,
        record_use_case: RecordUseCase,
        synchronizer: BackupSynchronizer,
        serializer: SnapshotSerializer | None = None,
        normalizer: RecordNormalizer | None = None,
        deduplication_service: RecordDeduplicationService | None = None,
        clock: Clock = now_ms,
        yield_interval: int = DEFAULT_YIELD_INTERVAL,
    ) -> None:
        self.store = store
        self.record_set = record_set
        self.record_use_case = record_use_case
        self.synchronizer = synchronizer
        self.serializer = serializer or SnapshotSerializer()
        self.normalizer = normalizer or RecordNormalizer()
        self.deduplication_service = deduplication_service or RecordDeduplicationService()
        self.clock = clock
        self.yield_interval = max(1, yield_interval)

    def export_snapshot(self, pretty: bool = True) -> bytes:
        """Serialize every record. Pretty-printed unless ``pretty`` is False."""
        return self.serializer.dumps(self.record_set.records, pretty=pretty)

    async def import_snapshot(self, payload: bytes | str) -> int:
        """
        Insert every new, valid row of a snapshot.

        Rows that are not objects or lack a word or meaning are skipped, as
        are rows whose word/meaning pair already exists in the store or
        earlier in the same payload. Incoming ids are discarded.

        Args:
            payload: Raw JSON text

        Returns:
            Number of records inserted

        Raises:
            FormatError: If the payload is not a JSON array; nothing is inserted
            StorageError: If an insert fails; rows inserted before the
                failure stay in the store
        """
        rows = self.serializer.parse(payload)

        seen = self.deduplication_service.existing_keys(self.record_set.records)
        now = self.clock()
        inserted = 0
        skipped = 0

        for row in rows:
            record = record_from_row(row)
            if record is None or not self.deduplication_service.claim(
                record.word, record.meaning, seen
            ):
                skipped += 1
                continue

            record = self.normalizer.normalize(record, now).record
            try:
                await self.store.create(record)
            except StorageError:
                logger.warning("import_interrupted", inserted=inserted)
                raise
            inserted += 1

            # Let other tasks run during large imports.
            if inserted % self.yield_interval == 0:
                await asyncio.sleep(0)

        await self.record_use_case.reload()
        self.synchronizer.schedule_backup(BACKUP_REASON_IMPORT)

        logger.info("imported_words", inserted=inserted, skipped=skipped)
        return inserted
