import random

from dependency_injector import containers, providers

from wordvault.application.vocabulary.record_set import RecordSet
from wordvault.application.vocabulary.services.backup_synchronizer import BackupSynchronizer
from wordvault.application.vocabulary.services.snapshot_serializer import (
    RecordSetSnapshot,
    SnapshotSerializer,
)
from wordvault.application.vocabulary.services.view_cache import RecordViewCache
from wordvault.application.vocabulary.use_cases.backup_link_use_case import BackupLinkUseCase
from wordvault.application.vocabulary.use_cases.import_export_use_case import (
    ImportExportUseCase,
)
from wordvault.application.vocabulary.use_cases.record_use_case import RecordUseCase
from wordvault.application.vocabulary.use_cases.review_use_case import ReviewUseCase
from wordvault.application.vocabulary.vocabulary_app import VocabularyApp
from wordvault.config import get_settings
from wordvault.database import get_session_factory
from wordvault.domain.vocabulary.entities.review_session import ReviewSession
from wordvault.domain.vocabulary.services.deduplication_service import (
    RecordDeduplicationService,
)
from wordvault.domain.vocabulary.services.record_normalizer import RecordNormalizer
from wordvault.domain.vocabulary.services.review_scheduler import ReviewScheduler
from wordvault.infrastructure.vocabulary.backup import FileBackupTarget
from wordvault.infrastructure.vocabulary.record_store import SqlAlchemyRecordStore
from wordvault.utils import now_ms


class Container(containers.DeclarativeContainer):
    """Dependency injection container.

    The app serves a single local user, so the stateful components are
    singletons for the lifetime of the process.
    """

    settings = providers.Singleton(get_settings)
    session_factory = providers.Singleton(get_session_factory)
    clock = providers.Object(now_ms)
    rng = providers.Singleton(random.Random)

    # Persistence
    record_store = providers.Singleton(SqlAlchemyRecordStore, session_factory=session_factory)
    backup_target_factory = providers.Object(FileBackupTarget)

    # Domain services (pure domain logic, no db)
    record_normalizer = providers.Factory(RecordNormalizer)
    review_scheduler = providers.Factory(ReviewScheduler)
    record_deduplication_service = providers.Factory(RecordDeduplicationService)

    # In-memory state
    record_set = providers.Singleton(RecordSet)
    view_cache = providers.Singleton(
        RecordViewCache,
        record_set=record_set,
        page_size=settings.provided.DEFAULT_PAGE_SIZE,
        max_page_size=settings.provided.MAX_PAGE_SIZE,
    )
    review_session = providers.Singleton(
        ReviewSession,
        rng=rng,
        meaning_first_probability=settings.provided.REVIEW_MEANING_FIRST_PROBABILITY,
    )

    # Backup
    snapshot_serializer = providers.Singleton(SnapshotSerializer)
    backup_snapshot = providers.Singleton(
        RecordSetSnapshot,
        record_set=record_set,
        serializer=snapshot_serializer,
    )
    backup_synchronizer = providers.Singleton(
        BackupSynchronizer,
        snapshot_provider=backup_snapshot,
        debounce_seconds=settings.provided.BACKUP_DEBOUNCE_SECONDS,
    )

    # Vocabulary module, application use cases
    record_use_case = providers.Singleton(
        RecordUseCase,
        store=record_store,
        record_set=record_set,
        synchronizer=backup_synchronizer,
        normalizer=record_normalizer,
        clock=clock,
    )
    review_use_case = providers.Singleton(
        ReviewUseCase,
        store=record_store,
        record_set=record_set,
        session=review_session,
        synchronizer=backup_synchronizer,
        scheduler=review_scheduler,
        clock=clock,
    )
    import_export_use_case = providers.Singleton(
        ImportExportUseCase,
        store=record_store,
        record_set=record_set,
        record_use_case=record_use_case,
        synchronizer=backup_synchronizer,
        serializer=snapshot_serializer,
        normalizer=record_normalizer,
        deduplication_service=record_deduplication_service,
        clock=clock,
        yield_interval=settings.provided.IMPORT_YIELD_INTERVAL,
    )
    backup_link_use_case = providers.Singleton(
        BackupLinkUseCase,
        store=record_store,
        synchronizer=backup_synchronizer,
        target_factory=backup_target_factory,
    )

    vocabulary_app = providers.Singleton(
        VocabularyApp,
        record_set=record_set,
        view_cache=view_cache,
        record_use_case=record_use_case,
        review_use_case=review_use_case,
        import_export_use_case=import_export_use_case,
        backup_link_use_case=backup_link_use_case,
        synchronizer=backup_synchronizer,
        backup_file_name=settings.provided.BACKUP_FILE_NAME,
    )


container = Container()
