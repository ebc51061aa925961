from .backup_link_use_case import BackupLinkUseCase
from .import_export_use_case import ImportExportUseCase
from .record_use_case import RecordUseCase
from .review_use_case import ReviewUseCase

__all__ = [
    "BackupLinkUseCase",
    "ImportExportUseCase",
    "RecordUseCase",
    "ReviewUseCase",
]
