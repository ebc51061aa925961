from .backup_synchronizer import BackupOutcome, BackupState, BackupSynchronizer
from .snapshot_serializer import RecordSetSnapshot, SnapshotSerializer
from .view_cache import RecordViewCache, SortMode

__all__ = [
    "BackupOutcome",
    "BackupState",
    "BackupSynchronizer",
    "RecordSetSnapshot",
    "RecordViewCache",
    "SnapshotSerializer",
    "SortMode",
]
