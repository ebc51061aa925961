"""
Debounced, coalescing writer of the full record set to the linked backup file.

Mutations call ``schedule_backup``; a burst of them produces a single write
once the debounce delay passes without another mutation. At most one write
is in flight at any time. A request arriving during a write is remembered
(the latest reason wins) and served right after the running write finishes,
with a snapshot taken at that moment.
"""

import asyncio
from collections.abc import Callable
from enum import Enum

import structlog

from wordvault.application.vocabulary.protocols.backup_target import BackupTargetProtocol
from wordvault.exceptions import BackupPermissionError

logger = structlog.get_logger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 10.0

BACKUP_FAILED_MESSAGE = "Auto backup failed. Relink backup file."

SnapshotProvider = Callable[[], bytes]
StatusCallback = Callable[[str], None]


class BackupState(str, Enum):
    IDLE = "idle"
    WRITING = "writing"
    WRITING_WITH_PENDING = "writing_with_pending"


class BackupOutcome(str, Enum):
    """What happened to a backup request."""

    SYNCED = "synced"
    QUEUED = "queued"
    NOT_LINKED = "not_linked"
    RELINK_REQUIRED = "relink_required"
    FAILED = "failed"


def synced_message(reason: str) -> str:
    return f"Backup synced ({reason})"


class BackupSynchronizer:
    """
    Single-writer state machine for the external backup file.

    States:
        IDLE: nothing is being written
        WRITING: one write in flight, nothing queued
        WRITING_WITH_PENDING: one write in flight and another requested

    Failures never disable the synchronizer. A revoked permission is reported
    as RELINK_REQUIRED and the next mutation simply tries again.
    """

    def __init__(
        self,
        snapshot_provider: SnapshotProvider,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        on_status: StatusCallback | None = None,
    ) -> None:
        self._snapshot_provider = snapshot_provider
        self._debounce_seconds = debounce_seconds
        self._on_status = on_status
        self._target: BackupTargetProtocol | None = None
        self._state = BackupState.IDLE
        self._pending_reason: str | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[BackupOutcome]] = set()

    # ---- Target ----

    @property
    def target(self) -> BackupTargetProtocol | None:
        return self._target

    def link(self, target: BackupTargetProtocol) -> None:
        """Attach (or replace) the backup target."""
        self._target = target
        logger.info("backup_target_linked", target=target.reference)

    def set_status_callback(self, callback: StatusCallback | None) -> None:
        self._on_status = callback

    # ---- State ----

    @property
    def state(self) -> BackupState:
        return self._state

    @property
    def pending_reason(self) -> str | None:
        return self._pending_reason

    # ---- Requests ----

    def schedule_backup(self, reason: str) -> None:
        """
        Request a backup after the debounce delay.

        Re-arms the timer on every call; only the last reason is kept.
        Must be called from a running event loop.
        """
        self.cancel_scheduled()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._debounce_seconds, self._on_timer, reason)

    def cancel_scheduled(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def backup_now(self, reason: str) -> BackupOutcome:
        """
        Write a snapshot immediately, unless a write is already running.

        Returns:
            Outcome of the last write performed by this call, QUEUED if the
            request was handed to the running write, NOT_LINKED if no target
            is attached
        """
        if self._target is None:
            return BackupOutcome.NOT_LINKED

        if self._state is not BackupState.IDLE:
            self._queue(reason)
            return BackupOutcome.QUEUED

        self._state = BackupState.WRITING
        try:
            outcome = await self._write(reason)
            while self._pending_reason is not None:
                reason, self._pending_reason = self._pending_reason, None
                self._state = BackupState.WRITING
                outcome = await self._write(reason)
        finally:
            self._state = BackupState.IDLE
            self._pending_reason = None
        return outcome

    def flush(self, reason: str) -> BackupOutcome:
        """
        Best-effort synchronous write for teardown, bypassing the debounce.

        If a write is in flight the reason is queued instead, so two writes
        never overlap.
        """
        self.cancel_scheduled()
        if self._target is None:
            return BackupOutcome.NOT_LINKED

        if self._state is not BackupState.IDLE:
            self._queue(reason)
            return BackupOutcome.QUEUED

        self._state = BackupState.WRITING
        try:
            target = self._target
            try:
                target.ensure_access()
                target.write(self._snapshot_provider())
            except BackupPermissionError as e:
                return self._fail(BackupOutcome.RELINK_REQUIRED, reason, e)
            except OSError as e:
                return self._fail(BackupOutcome.FAILED, reason, e)
            return self._succeed(reason)
        finally:
            self._state = BackupState.IDLE

    async def wait_idle(self) -> None:
        """Wait for backups started by fired timers to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ---- Internals ----

    def _queue(self, reason: str) -> None:
        self._pending_reason = reason
        self._state = BackupState.WRITING_WITH_PENDING
        logger.debug("backup_queued", reason=reason)

    def _on_timer(self, reason: str) -> None:
        self._timer = None
        task = asyncio.ensure_future(self.backup_now(reason))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _write(self, reason: str) -> BackupOutcome:
        target = self._target
        if target is None:
            return BackupOutcome.NOT_LINKED

        try:
            target.ensure_access()
            # Snapshot is taken when this write starts, never earlier.
            data = self._snapshot_provider()
            await asyncio.to_thread(target.write, data)
        except BackupPermissionError as e:
            return self._fail(BackupOutcome.RELINK_REQUIRED, reason, e)
        except OSError as e:
            return self._fail(BackupOutcome.FAILED, reason, e)
        return self._succeed(reason)

    def _succeed(self, reason: str) -> BackupOutcome:
        logger.info("backup_synced", reason=reason)
        self._report(synced_message(reason))
        return BackupOutcome.SYNCED

    def _fail(self, outcome: BackupOutcome, reason: str, error: Exception) -> BackupOutcome:
        logger.warning("backup_failed", reason=reason, outcome=outcome.value, error=str(error))
        self._report(BACKUP_FAILED_MESSAGE)
        return outcome

    def _report(self, message: str) -> None:
        if self._on_status is not None:
            self._on_status(message)
