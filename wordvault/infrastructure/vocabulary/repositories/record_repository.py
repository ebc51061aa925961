"""Repository for Record domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.infrastructure.vocabulary.mappers.record_mapper import RecordMapper
from wordvault.models import Word as WordORM


class RecordRepository:
    """Repository for Record domain entities.

    Works inside the caller's session and never commits; transaction
    boundaries belong to the record store.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = RecordMapper()

    def find_all(self) -> list[Record]:
        """
        Get every stored record.

        Returns:
            List of record entities ordered by id
        """
        stmt = select(WordORM).order_by(WordORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars()]

    def add(self, record: Record) -> RecordId:
        """
        Insert a new record, ignoring any id it carries.

        Returns:
            The id assigned by the database
        """
        orm_model = self.mapper.to_orm(record)
        orm_model.id = None
        self.db.add(orm_model)
        self.db.flush()
        return RecordId(orm_model.id)

    def save(self, record: Record) -> None:
        """Insert or update a record by its id."""
        existing = self.db.get(WordORM, record.id.value) if record.id.is_assigned else None
        if existing:
            self.mapper.to_orm(record, existing)
        else:
            self.db.add(self.mapper.to_orm(record))
        self.db.flush()

    def update_existing(self, record: Record) -> bool:
        """
        Overwrite a stored record without ever inserting it.

        Returns:
            True if updated, False if the row no longer exists
        """
        existing = self.db.get(WordORM, record.id.value)
        if not existing:
            return False
        self.mapper.to_orm(record, existing)
        self.db.flush()
        return True

    def delete(self, record_id: RecordId) -> bool:
        """
        Delete a record.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(WordORM, record_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.flush()
        return True
