"""
SQLAlchemy implementation of the asynchronous record store.

The database driver is synchronous. Each store call runs its whole
transaction in a worker thread, and calls are serialized so that two
operations never interleave.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.exceptions import StorageError
from wordvault.infrastructure.vocabulary.repositories import MetaRepository, RecordRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyRecordStore:
    """Record store backed by a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self._lock = asyncio.Lock()

    async def _run(self, operation: str, work: Callable[[Session], T]) -> T:
        async with self._lock:
            return await asyncio.to_thread(self._transaction, operation, work)

    def _transaction(self, operation: str, work: Callable[[Session], T]) -> T:
        try:
            with self.session_factory() as session, session.begin():
                return work(session)
        except SQLAlchemyError as e:
            logger.error(f"Record store operation '{operation}' failed: {e}")
            raise StorageError(operation, str(e)) from e

    async def create(self, record: Record) -> RecordId:
        return await self._run("create", lambda db: RecordRepository(db).add(record))

    async def update(self, record: Record) -> None:
        await self._run("update", lambda db: RecordRepository(db).save(record))

    async def update_existing(self, record: Record) -> bool:
        return await self._run(
            "update_existing", lambda db: RecordRepository(db).update_existing(record)
        )

    async def put_many(self, records: list[Record]) -> None:
        if not records:
            return

        def work(db: Session) -> None:
            repository = RecordRepository(db)
            for record in records:
                repository.save(record)

        await self._run("put_many", work)

    async def delete(self, record_id: RecordId) -> bool:
        return await self._run("delete", lambda db: RecordRepository(db).delete(record_id))

    async def get_all(self) -> list[Record]:
        return await self._run("get_all", lambda db: RecordRepository(db).find_all())

    async def set_meta(self, key: str, value: Any) -> None:  # noqa: ANN401
        await self._run("set_meta", lambda db: MetaRepository(db).set(key, value))

    async def get_meta(self, key: str) -> Any | None:  # noqa: ANN401
        return await self._run("get_meta", lambda db: MetaRepository(db).get(key))
