"""
Exception taxonomy for release-notes synchronization.

Every fatal condition derives from ReleaseNotesSyncError so the entrypoint can
map it to a non-zero exit. Notification failures are not exceptions; they are
reported through NotificationResult.
"""


class ReleaseNotesSyncError(Exception):
    """Base class for every fatal sync failure."""


class ConfigurationError(ReleaseNotesSyncError):
    """An environment or CLI setting could not be interpreted."""


# ---------------------------------------------------------------------------
# Raised by IDocumentStore adapters
# ---------------------------------------------------------------------------


class DocumentReadError(ReleaseNotesSyncError):
    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Error reading file {path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentNotFoundError(DocumentReadError):
    def __init__(self, path) -> None:
        super().__init__(path, "no such file")


class DocumentWriteError(ReleaseNotesSyncError):
    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Error writing file {path}: {reason}")
        self.path = path
        self.reason = reason


# ---------------------------------------------------------------------------
# Raised by SyncReleaseNotesUseCase
# ---------------------------------------------------------------------------


class SourceUnreadableError(ReleaseNotesSyncError):
    """The source changelog could not be read."""


class ParseFailureError(ReleaseNotesSyncError):
    """The source changelog holds no usable version section."""


class DestinationWriteFailureError(ReleaseNotesSyncError):
    """The merged release notes could not be written back."""
