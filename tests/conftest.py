"""Pytest configuration and fixtures."""

import random
import threading
from collections.abc import Generator
from datetime import datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.backup_synchronizer import BackupSynchronizer
from wordvault.application.vocabulary.services.snapshot_serializer import (
    RecordSetSnapshot,
    SnapshotSerializer,
)
from wordvault.application.vocabulary.services.view_cache import RecordViewCache
from wordvault.application.vocabulary.use_cases import (
    BackupLinkUseCase,
    ImportExportUseCase,
    RecordUseCase,
    ReviewUseCase,
)
from wordvault.application.vocabulary.vocabulary_app import VocabularyApp
from wordvault.config import Settings
from wordvault.core import container
from wordvault.database import build_engine, create_schema, dispose_engine, initialize_database
from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.domain.vocabulary.entities.review_session import ReviewSession
from wordvault.exceptions import BackupPermissionError
from wordvault.infrastructure.vocabulary.record_store import SqlAlchemyRecordStore
from wordvault.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Monday afternoon, local time
FIXED_NOW = int(datetime(2025, 3, 10, 14, 30).timestamp() * 1000)
DAY_MS = 24 * 60 * 60 * 1000


def local_midnight(year: int, month: int, day: int) -> int:
    return int(datetime(year, month, day).timestamp() * 1000)


class FixedClock:
    """Clock returning a settable epoch-ms value."""

    def __init__(self, now: int = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance_days(self, days: int) -> None:
        self.now += days * DAY_MS


class FakeBackupTarget:
    """In-memory backup target recording every write."""

    def __init__(self, reference: str = "/backups/vocab_backup.json") -> None:
        self._reference = reference
        self.writes: list[bytes] = []
        self.deny_access = False
        self.fail_writes = False
        self.gate: threading.Event | None = None

    @property
    def reference(self) -> str:
        return self._reference

    def ensure_access(self) -> None:
        if self.deny_access:
            raise BackupPermissionError(self._reference, "permission revoked")

    def write(self, data: bytes) -> None:
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.fail_writes:
            raise OSError("disk full")
        self.writes.append(data)


def make_record(
    id: int = 1,
    word: str = "ubiquitous",
    meaning: str = "present everywhere",
    example: str = "",
    created_at: float = FIXED_NOW,
    review_count: float = 0,
    interval: float = 1,
    next_review_at: float = FIXED_NOW,
    last_reviewed_at: float = 0,
) -> Record:
    return Record.create_with_id(
        id=RecordId(id),
        word=word,
        meaning=meaning,
        example=example,
        created_at=created_at,
        review_count=review_count,
        interval=interval,
        next_review_at=next_review_at,
        last_reviewed_at=last_reviewed_at,
    )


def build_vocabulary_app(
    store: Any,  # noqa: ANN401
    clock: FixedClock,
    targets: dict[str, FakeBackupTarget] | None = None,
    seed: int = 7,
    debounce_seconds: float = 3600.0,
    yield_interval: int = 1500,
) -> VocabularyApp:
    """Wire a VocabularyApp by hand, with fake backup targets keyed by path."""
    targets = targets if targets is not None else {}

    def target_factory(location: str) -> FakeBackupTarget:
        return targets.setdefault(location, FakeBackupTarget(location))

    record_set = RecordSet()
    serializer = SnapshotSerializer()
    synchronizer = BackupSynchronizer(
        RecordSetSnapshot(record_set, serializer), debounce_seconds=debounce_seconds
    )
    record_use_case = RecordUseCase(store, record_set, synchronizer, clock=clock)
    return VocabularyApp(
        record_set=record_set,
        view_cache=RecordViewCache(record_set),
        record_use_case=record_use_case,
        review_use_case=ReviewUseCase(
            store,
            record_set,
            ReviewSession(rng=random.Random(seed)),
            synchronizer,
            clock=clock,
        ),
        import_export_use_case=ImportExportUseCase(
            store,
            record_set,
            record_use_case,
            synchronizer,
            serializer=serializer,
            clock=clock,
            yield_interval=yield_interval,
        ),
        backup_link_use_case=BackupLinkUseCase(store, synchronizer, target_factory),
        synchronizer=synchronizer,
    )


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Fresh in-memory database with the schema created."""
    engine = build_engine(TEST_DATABASE_URL)
    create_schema(engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        engine.dispose()


@pytest.fixture
def store(session_factory: sessionmaker[Session]) -> SqlAlchemyRecordStore:
    return SqlAlchemyRecordStore(session_factory)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def backup_targets() -> dict[str, FakeBackupTarget]:
    return {}


@pytest.fixture
def vocabulary_app(
    store: SqlAlchemyRecordStore,
    clock: FixedClock,
    backup_targets: dict[str, FakeBackupTarget],
) -> VocabularyApp:
    return build_vocabulary_app(store, clock, backup_targets)


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Test client running the real lifespan against an in-memory database."""
    initialize_database(Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test"))
    container.reset_singletons()

    with TestClient(app) as test_client:
        yield test_client

    container.reset_singletons()
    dispose_engine()
