"""Protocol for the external backup resource."""

from collections.abc import Callable
from typing import Protocol


class BackupTargetProtocol(Protocol):
    """External resource that mirrors the full record set."""

    @property
    def reference(self) -> str:
        """Opaque reference persisted in metadata so the link survives restarts."""
        ...

    def ensure_access(self) -> None:
        """
        Re-validate that the resource can be written.

        Raises:
            BackupPermissionError: If the resource is unavailable or access
                was revoked
        """
        ...

    def write(self, data: bytes) -> None:
        """
        Replace the resource contents with ``data``.

        The write must never leave a partially written resource behind.

        Raises:
            BackupPermissionError: If access is denied
            OSError: For other I/O failures
        """
        ...


# Rebuilds a target from the reference stored in metadata.
BackupTargetFactory = Callable[[str], BackupTargetProtocol]
