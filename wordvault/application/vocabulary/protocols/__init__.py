from .backup_target import BackupTargetFactory, BackupTargetProtocol
from .record_store import RecordStoreProtocol

__all__ = [
    "BackupTargetFactory",
    "BackupTargetProtocol",
    "RecordStoreProtocol",
]
