from .file_backup_target import FileBackupTarget

__all__ = ["FileBackupTarget"]
