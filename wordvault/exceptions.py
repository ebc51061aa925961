"""Custom exception hierarchy for the wordvault application."""


class WordVaultError(Exception):
    """Base exception for all wordvault errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WordVaultError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class RecordNotFoundError(NotFoundError):
    """Vocabulary record not found error."""

    def __init__(self, record_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with record ID or custom message."""
        self.record_id = record_id
        if message:
            super().__init__(message)
        elif record_id is not None:
            super().__init__(f"Word with id {record_id} not found")
        else:
            super().__init__("Word not found")


class ValidationError(WordVaultError):
    """Validation error (empty required field on save or import)."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class FormatError(ValidationError):
    """Malformed import payload. The whole import is aborted."""


class StorageError(WordVaultError):
    """Storage engine failure. The transaction was rolled back."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failed store operation and reason."""
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage operation '{operation}' failed: {reason}", status_code=500)


class BackupPermissionError(WordVaultError):
    """External backup file is unavailable or access was revoked.

    Recoverable: the user has to relink the backup file.
    """

    def __init__(self, target: str, reason: str) -> None:
        """Initialize with the backup target description and reason."""
        self.target = target
        self.reason = reason
        super().__init__(f"Backup target '{target}' is not writable: {reason}", status_code=409)
