"""Tests for FileBackupTarget."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from wordvault.exceptions import BackupPermissionError
from wordvault.infrastructure.vocabulary.backup import FileBackupTarget


class TestFileBackupTarget:
    def test_reference_is_absolute_path(self, tmp_path: Path) -> None:
        target = FileBackupTarget(tmp_path / "vocab_backup.json")
        assert Path(target.reference).is_absolute()
        assert target.reference.endswith("vocab_backup.json")

    def test_write_creates_and_overwrites(self, tmp_path: Path) -> None:
        path = tmp_path / "vocab_backup.json"
        target = FileBackupTarget(path)

        target.ensure_access()
        target.write(b"[1]")
        target.write(b"[1,2]")

        assert path.read_bytes() == b"[1,2]"
        assert [p.name for p in tmp_path.iterdir()] == ["vocab_backup.json"]

    def test_missing_directory_is_permission_error(self, tmp_path: Path) -> None:
        target = FileBackupTarget(tmp_path / "gone" / "vocab_backup.json")

        with pytest.raises(BackupPermissionError):
            target.ensure_access()

    def test_directory_path_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(BackupPermissionError):
            FileBackupTarget(tmp_path).ensure_access()

    def test_failed_replace_keeps_previous_file(self, tmp_path: Path) -> None:
        path = tmp_path / "vocab_backup.json"
        path.write_bytes(b"[old]")
        target = FileBackupTarget(path)

        with (
            patch("os.replace", side_effect=PermissionError("access denied")),
            pytest.raises(BackupPermissionError),
        ):
            target.write(b"[new]")

        assert path.read_bytes() == b"[old]"
        assert [p.name for p in tmp_path.iterdir()] == ["vocab_backup.json"]

    def test_other_io_errors_propagate(self, tmp_path: Path) -> None:
        target = FileBackupTarget(tmp_path / "vocab_backup.json")

        with (
            patch("os.fsync", side_effect=OSError(28, "No space left on device")),
            pytest.raises(OSError) as exc_info,
        ):
            target.write(b"[]")

        assert not isinstance(exc_info.value, BackupPermissionError)
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX non-root")
    def test_read_only_file_is_permission_error(self, tmp_path: Path) -> None:
        path = tmp_path / "vocab_backup.json"
        path.write_bytes(b"[]")
        path.chmod(0o444)

        with pytest.raises(BackupPermissionError):
            FileBackupTarget(path).ensure_access()
