"""Backup target writing the snapshot to a JSON file on disk."""

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from wordvault.exceptions import BackupPermissionError

logger = logging.getLogger(__name__)


class FileBackupTarget:
    """
    Overwrites a single backup file atomically.

    The snapshot is written to a temporary file in the same directory and
    then moved over the target, so readers only ever see a complete file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser().resolve()

    @property
    def reference(self) -> str:
        return str(self.path)

    def ensure_access(self) -> None:
        """
        Check that the backup file can be (re)written.

        Raises:
            BackupPermissionError: If the directory is missing or read-only,
                or the file exists and is not writable
        """
        directory = self.path.parent
        if not directory.is_dir():
            raise BackupPermissionError(self.reference, "directory does not exist")
        if self.path.is_dir():
            raise BackupPermissionError(self.reference, "path is a directory")
        if self.path.exists() and not os.access(self.path, os.W_OK):
            raise BackupPermissionError(self.reference, "file is not writable")
        if not os.access(directory, os.W_OK | os.X_OK):
            raise BackupPermissionError(self.reference, "directory is not writable")

    def write(self, data: bytes) -> None:
        """
        Replace the file contents with ``data``.

        Raises:
            BackupPermissionError: If the operating system denies access
            OSError: For any other I/O failure
        """
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
        except PermissionError as e:
            raise BackupPermissionError(self.reference, str(e)) from e

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_name, self.path)
        except PermissionError as e:
            self._discard(temp_name)
            raise BackupPermissionError(self.reference, str(e)) from e
        except OSError:
            self._discard(temp_name)
            raise

        logger.debug(f"Wrote {len(data)} bytes to backup file {self.path}")

    @staticmethod
    def _discard(temp_name: str) -> None:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(temp_name)
