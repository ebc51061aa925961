"""
Use cases for adding, deleting and reloading vocabulary records.

Every mutation goes through the store first. The in-memory record set is
only replaced after the store confirmed the write, then a debounced backup
is requested.
"""

import structlog

from wordvault.application.vocabulary.protocols.record_store import RecordStoreProtocol
from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.backup_synchronizer import BackupSynchronizer
from wordvault.constants import BACKUP_REASON_DELETE, BACKUP_REASON_SAVE
from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.domain.vocabulary.services.record_normalizer import RecordNormalizer
from wordvault.exceptions import RecordNotFoundError, ValidationError
from wordvault.utils import Clock, clean_text, now_ms

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Word and meaning are required."


class RecordUseCase:
    """Use case for record persistence and the in-memory working copy."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        record_set: RecordSet,
        synchronizer: BackupSynchronizer,
        normalizer: RecordNormalizer | None = None,
        clock: Clock = now_ms,
    ) -> None:
        self.store = store
        self.record_set = record_set
        self.synchronizer = synchronizer
        self.normalizer = normalizer or RecordNormalizer()
        self.clock = clock

    async def reload(self) -> int:
        """
        Load every stored record, repair it and refresh the record set.

        Records the normalizer changed are written back in one transaction
        before the record set is replaced.

        Returns:
            Number of records loaded

        Raises:
            StorageError: If reading or writing back fails; the record set
                is left untouched
        """
        stored = await self.store.get_all()
        records, changed = self.normalizer.normalize_all(stored, self.clock())
        if changed:
            await self.store.put_many(changed)
            logger.info("repaired_records", count=len(changed))

        self.record_set.replace_all(records)
        return len(records)

    async def save(self, word: str, meaning: str, example: str = "") -> Record:
        """
        Add a new record, due immediately.

        Args:
            word: Word text (trimmed, required)
            meaning: Meaning text (trimmed, required)
            example: Optional example sentence

        Returns:
            The stored record with its assigned id

        Raises:
            ValidationError: If word or meaning is empty after trimming
            StorageError: If the store rejects the write
        """
        word = clean_text(word)
        meaning = clean_text(meaning)
        if not word or not meaning:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        record = Record.create(word, meaning, clean_text(example), self.clock())
        record_id = await self.store.create(record)
        await self.reload()
        self.synchronizer.schedule_backup(BACKUP_REASON_SAVE)

        logger.info("saved_word", record_id=record_id.value)
        return self.record_set.get(record_id) or record

    async def delete(self, record_id: int) -> None:
        """
        Delete a record by id.

        Raises:
            RecordNotFoundError: If no record has this id
            StorageError: If the store rejects the delete
        """
        deleted = record_id > 0 and await self.store.delete(RecordId(record_id))
        if not deleted:
            raise RecordNotFoundError(record_id)

        await self.reload()
        self.synchronizer.schedule_backup(BACKUP_REASON_DELETE)
        logger.info("deleted_word", record_id=record_id)
