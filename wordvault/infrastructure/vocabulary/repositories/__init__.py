from .meta_repository import MetaRepository
from .record_repository import RecordRepository

__all__ = ["MetaRepository", "RecordRepository"]
