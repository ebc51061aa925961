"""
Facade owning the vocabulary components for one user.

This is the surface the UI (and the HTTP API) talks to. It turns expected
errors into Result values and keeps the last user-visible status message.
"""

import structlog

from wordvault.application.common.result import Failure, Result, Success
from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.backup_synchronizer import (
    BackupOutcome,
    BackupSynchronizer,
)
from wordvault.application.vocabulary.services.view_cache import RecordViewCache, SortMode
from wordvault.application.vocabulary.use_cases.backup_link_use_case import BackupLinkUseCase
from wordvault.application.vocabulary.use_cases.import_export_use_case import (
    ImportExportUseCase,
)
from wordvault.application.vocabulary.use_cases.record_use_case import RecordUseCase
from wordvault.application.vocabulary.use_cases.review_use_case import ReviewUseCase
from wordvault.domain.common.exceptions import DomainError
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.domain.vocabulary.entities.review_session import PresentedCard
from wordvault.exceptions import (
    BackupPermissionError,
    FormatError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

DEFAULT_BACKUP_FILE_NAME = "vocab_backup.json"


class VocabularyApp:
    """
    Explicit context for the vocabulary app.

    Owns the record set, the view over it, the review drill and the backup
    synchronizer. Methods returning Result never raise for expected
    failures; ``status`` holds the message to show the user.
    """

    def __init__(
        self,
        record_set: RecordSet,
        view_cache: RecordViewCache,
        record_use_case: RecordUseCase,
        review_use_case: ReviewUseCase,
        import_export_use_case: ImportExportUseCase,
        backup_link_use_case: BackupLinkUseCase,
        synchronizer: BackupSynchronizer,
        backup_file_name: str = DEFAULT_BACKUP_FILE_NAME,
    ) -> None:
        self.record_set = record_set
        self.view_cache = view_cache
        self.record_use_case = record_use_case
        self.review_use_case = review_use_case
        self.import_export_use_case = import_export_use_case
        self.backup_link_use_case = backup_link_use_case
        self.synchronizer = synchronizer
        self.backup_file_name = backup_file_name
        self.status = ""
        self.last_error: Exception | None = None
        synchronizer.set_status_callback(self._set_status)

    def _set_status(self, message: str) -> None:
        self.status = message

    def _fail(self, error: Exception, message: str) -> Failure[str]:
        self.last_error = error
        self._set_status(message)
        return Failure(message)

    # ---- Loading ----

    async def load(self) -> Result[int, str]:
        """Load and repair all stored records."""
        try:
            count = await self.record_use_case.reload()
        except StorageError as e:
            logger.error("load_failed", error=e.message)
            return self._fail(e, "App failed to initialize.")
        logger.info("loaded_words", count=count)
        return Success(count)

    # ---- Counts and view ----

    def due_count(self) -> int:
        return self.review_use_case.due_count()

    def total_count(self) -> int:
        return len(self.record_set)

    def current_page(self) -> int:
        return self.view_cache.current_page()

    def page_count(self) -> int:
        return self.view_cache.page_count()

    def set_page(self, page: int) -> int:
        return self.view_cache.set_page(page)

    def next_page(self) -> int:
        return self.view_cache.next_page()

    def previous_page(self) -> int:
        return self.view_cache.previous_page()

    def set_search_term(self, term: str) -> None:
        self.view_cache.set_search_term(term)

    def set_sort_mode(self, mode: SortMode | str) -> None:
        self.view_cache.set_sort_mode(mode)

    def set_page_size(self, page_size: int) -> None:
        self.view_cache.set_page_size(page_size)

    def renderable_rows(self) -> list[Record]:
        return self.view_cache.renderable_rows()

    # ---- Mutations ----

    async def save(self, word: str, meaning: str, example: str = "") -> Result[Record, str]:
        try:
            record = await self.record_use_case.save(word, meaning, example)
        except ValidationError as e:
            return self._fail(e, e.message)
        except StorageError as e:
            logger.error("save_failed", error=e.message)
            return self._fail(e, "Unable to save word.")
        self._set_status("Saved.")
        return Success(record)

    async def delete_record(self, record_id: int) -> Result[int, str]:
        try:
            await self.record_use_case.delete(record_id)
        except RecordNotFoundError as e:
            return self._fail(e, e.message)
        except StorageError as e:
            logger.error("delete_failed", record_id=record_id, error=e.message)
            return self._fail(e, "Unable to delete word.")
        self._set_status("Word deleted.")
        return Success(record_id)

    # ---- Review ----

    def start_review(self) -> int:
        size = self.review_use_case.start()
        if size == 0:
            self._set_status("No words due for review")
        return size

    def current_card(self) -> PresentedCard | None:
        return self.review_use_case.current_card()

    def reveal(self) -> PresentedCard | None:
        return self.review_use_case.reveal()

    async def answer(self, known: bool) -> Result[Record | None, str]:
        """
        Record a known/unknown answer for the current card.

        Success carries the updated record, or None when the card's record
        had been deleted and was simply dropped from the drill.
        """
        try:
            updated = await self.review_use_case.answer(known)
        except DomainError as e:
            return self._fail(e, e.message)
        except StorageError as e:
            logger.error("answer_failed", error=e.message)
            return self._fail(e, "Unable to save review.")
        self._set_status("Marked known." if known else "Marked unknown.")
        return Success(updated)

    def exit_review(self) -> None:
        self.review_use_case.exit()

    # ---- Backup ----

    async def link_backup_target(self, location: str) -> Result[BackupOutcome, str]:
        try:
            outcome = await self.backup_link_use_case.link(location)
        except (BackupPermissionError, StorageError) as e:
            logger.warning("link_backup_failed", location=location, error=e.message)
            return self._fail(e, "Unable to link backup file.")
        return Success(outcome)

    async def restore_backup_link(self) -> BackupOutcome:
        """Re-attach the remembered backup file, or show the linking tip."""
        try:
            outcome = await self.backup_link_use_case.restore()
        except StorageError as e:
            logger.error("restore_backup_link_failed", error=e.message)
            return BackupOutcome.NOT_LINKED
        if outcome is BackupOutcome.NOT_LINKED:
            self._set_status(
                f"Tip: Link {self.backup_file_name} once for true overwrite auto-backup."
            )
        return outcome

    def flush_backup(self, reason: str) -> BackupOutcome:
        return self.synchronizer.flush(reason)

    async def shutdown_backup(self, reason: str) -> BackupOutcome:
        """Flush the backup, then wait until any write already running has drained."""
        outcome = self.flush_backup(reason)
        await self.synchronizer.wait_idle()
        return outcome

    # ---- Import / export ----

    def export_snapshot(self) -> bytes:
        data = self.import_export_use_case.export_snapshot(pretty=True)
        self._set_status(f"Exported {self.backup_file_name}")
        return data

    async def import_snapshot(self, payload: bytes | str) -> Result[int, str]:
        try:
            inserted = await self.import_export_use_case.import_snapshot(payload)
        except FormatError as e:
            return self._fail(e, e.message)
        except StorageError as e:
            logger.error("import_failed", error=e.message)
            return self._fail(e, "Import failed.")
        self._set_status(f"Imported {inserted:,} new words.")
        return Success(inserted)
