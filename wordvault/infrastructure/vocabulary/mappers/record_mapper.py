"""Mapper for Word ORM ↔ Record domain conversion."""

from wordvault.domain.common.value_objects import RecordId
from wordvault.domain.vocabulary.entities.record import Record
from wordvault.models import Word as WordORM
from wordvault.utils import as_number, is_finite_number


def _column_value(value: float) -> float | None:
    """NaN and infinities are stored as NULL."""
    return value if is_finite_number(value) else None


class RecordMapper:
    """Mapper for Word ORM ↔ Record domain conversion."""

    def to_domain(self, orm_model: WordORM) -> Record:
        """Convert ORM model to domain entity. Missing numbers become NaN."""
        return Record.create_with_id(
            id=RecordId(orm_model.id),
            word=orm_model.word,
            meaning=orm_model.meaning,
            example=orm_model.example or "",
            created_at=as_number(orm_model.created_at),
            review_count=as_number(orm_model.review_count),
            interval=as_number(orm_model.interval),
            next_review_at=as_number(orm_model.next_review_at),
            last_reviewed_at=as_number(orm_model.last_reviewed_at),
        )

    def to_orm(self, domain_entity: Record, orm_model: WordORM | None = None) -> WordORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.word = domain_entity.word
            orm_model.meaning = domain_entity.meaning
            orm_model.example = domain_entity.example or ""
            orm_model.created_at = _column_value(domain_entity.created_at)
            orm_model.review_count = _column_value(domain_entity.review_count)
            orm_model.interval = _column_value(domain_entity.interval)
            orm_model.next_review_at = _column_value(domain_entity.next_review_at)
            orm_model.last_reviewed_at = _column_value(domain_entity.last_reviewed_at)
            return orm_model

        # Create new
        return WordORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            word=domain_entity.word,
            meaning=domain_entity.meaning,
            example=domain_entity.example or "",
            created_at=_column_value(domain_entity.created_at),
            review_count=_column_value(domain_entity.review_count),
            interval=_column_value(domain_entity.interval),
            next_review_at=_column_value(domain_entity.next_review_at),
            last_reviewed_at=_column_value(domain_entity.last_reviewed_at),
        )
