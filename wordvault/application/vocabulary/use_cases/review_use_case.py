"""
Use case for the review drill.

The session pool is a snapshot of the records that were due when the drill
started. Answers are applied to the freshest in-memory copy of the record,
persisted, and only then reflected in the record set and the session.
"""

import asyncio

import structlog

from wordvault.application.vocabulary.protocols.record_store import RecordStoreProtocol
from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.backup_synchronizer import BackupSynchronizer
from wordvault.constants import BACKUP_REASON_REVIEW
from wordvault.domain.common.exceptions import BusinessRuleViolationError
from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.domain.vocabulary.entities.review_session import PresentedCard, ReviewSession
from wordvault.domain.vocabulary.services.review_scheduler import ReviewOutcome, ReviewScheduler
from wordvault.utils import Clock, now_ms

logger = structlog.get_logger(__name__)


class ReviewUseCase:
    """Use case driving a ReviewSession against the record set and store."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        record_set: RecordSet,
        session: ReviewSession,
        synchronizer: BackupSynchronizer,
        scheduler: ReviewScheduler | None = None,
        clock: Clock = now_ms,
    ) -> None:
        self.store = store
        self.record_set = record_set
        self.session = session
        self.synchronizer = synchronizer
        self.scheduler = scheduler or ReviewScheduler()
        self.clock = clock
        self._answer_lock = asyncio.Lock()

    def due_count(self) -> int:
        return len(self.scheduler.due_records(self.record_set.records, self.clock()))

    def start(self) -> int:
        """Start a drill over the records due now. Returns the pool size."""
        due = self.scheduler.due_records(self.record_set.records, self.clock())
        size = self.session.start(due)
        logger.info("review_started", pool_size=size)
        return size

    def current_card(self) -> PresentedCard | None:
        return self.session.card

    def reveal(self) -> PresentedCard | None:
        self.session.reveal()
        return self.session.card

    async def answer(self, known: bool) -> Record | None:
        """
        Apply a known/unknown answer to the current card.

        The card is fixed when the call is made. Overlapping calls are
        serialized, and a call whose card was already answered fails
        instead of answering the next one.

        Returns:
            The updated record, or None if the record was deleted after the
            drill started (it is dropped from the pool without a write)

        Raises:
            BusinessRuleViolationError: If no card is being presented, or the
                card was answered by an earlier call
            StorageError: If the update fails; the session does not advance
                and the record set is untouched
        """
        current = self.session.require_answerable()
        async with self._answer_lock:
            if not self._is_current(current.id):
                raise BusinessRuleViolationError("answer_once", "This word was already answered")

            fresh = self.record_set.get(current.id)
            if fresh is None:
                self._drop_deleted(current.id)
                return None

            outcome = ReviewOutcome.from_known(known)
            updated = self.scheduler.apply(fresh, outcome, self.clock())
            if not await self.store.update_existing(updated):
                # Deleted while the write was queued; never re-insert it.
                self._drop_deleted(current.id)
                return None

            self.record_set.patch(updated)
            if self._is_current(current.id):
                self.session.complete_current()
            self.synchronizer.schedule_backup(BACKUP_REASON_REVIEW)

        logger.info(
            "review_answered",
            record_id=updated.id.value,
            outcome=outcome.value,
            interval=updated.interval,
        )
        return updated

    def exit(self) -> None:
        self.session.exit()

    def _is_current(self, record_id: RecordId) -> bool:
        current = self.session.current
        return current is not None and current.id == record_id

    def _drop_deleted(self, record_id: RecordId) -> None:
        if self._is_current(record_id):
            self.session.complete_current()
        logger.info("review_skipped_deleted", record_id=record_id.value)
