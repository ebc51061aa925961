"""
Use case for linking the external backup file and restoring the link at startup.
"""

import structlog

from wordvault.application.vocabulary.protocols.backup_target import BackupTargetFactory
from wordvault.application.vocabulary.protocols.record_store import RecordStoreProtocol
from wordvault.application.vocabulary.services.backup_synchronizer import (
    BackupOutcome,
    BackupSynchronizer,
)
from wordvault.constants import (
    BACKUP_REASON_LINKED,
    BACKUP_REASON_STARTUP,
    BACKUP_TARGET_META_KEY,
)

logger = structlog.get_logger(__name__)


class BackupLinkUseCase:
    """Use case for attaching the backup target and persisting its reference."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        synchronizer: BackupSynchronizer,
        target_factory: BackupTargetFactory,
    ) -> None:
        self.store = store
        self.synchronizer = synchronizer
        self.target_factory = target_factory

    async def link(self, location: str) -> BackupOutcome:
        """
        Link a backup file and write it immediately.

        Args:
            location: Path of the backup file

        Returns:
            Outcome of the initial write

        Raises:
            BackupPermissionError: If the file cannot be written
            StorageError: If the reference cannot be persisted
        """
        target = self.target_factory(location)
        target.ensure_access()

        await self.store.set_meta(BACKUP_TARGET_META_KEY, target.reference)
        self.synchronizer.link(target)
        return await self.synchronizer.backup_now(BACKUP_REASON_LINKED)

    async def restore(self) -> BackupOutcome:
        """
        Re-attach the backup target remembered from a previous run.

        Returns:
            NOT_LINKED if no reference was stored, otherwise the outcome of
            the startup write (RELINK_REQUIRED if access was lost meanwhile)
        """
        reference = await self.store.get_meta(BACKUP_TARGET_META_KEY)
        if not isinstance(reference, str) or not reference:
            return BackupOutcome.NOT_LINKED

        self.synchronizer.link(self.target_factory(reference))
        outcome = await self.synchronizer.backup_now(BACKUP_REASON_STARTUP)
        logger.info("backup_link_restored", reference=reference, outcome=outcome.value)
        return outcome
