"""
Application constants.

This module contains constants used throughout the application.
"""

# Metadata key under which the linked backup file reference is persisted.
# Kept identical to the key written by earlier versions of the app.
BACKUP_TARGET_META_KEY = "backupFileHandle"

# Reasons passed to the backup synchronizer, shown in status messages.
BACKUP_REASON_SAVE = "save"
BACKUP_REASON_DELETE = "delete"
BACKUP_REASON_REVIEW = "review"
BACKUP_REASON_IMPORT = "import"
BACKUP_REASON_LINKED = "linked"
BACKUP_REASON_STARTUP = "startup"
BACKUP_REASON_SHUTDOWN = "shutdown"
