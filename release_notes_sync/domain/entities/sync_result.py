"""
Domain entities describing the outcome of a sync run and of its notification.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class NotificationStatus(str, Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of a best-effort notification. Failures are carried, not raised."""

    status: NotificationStatus
    detail: Optional[str] = None

    @classmethod
    def sent(cls) -> "NotificationResult":
        return cls(NotificationStatus.SENT)

    @classmethod
    def skipped(cls, reason: str) -> "NotificationResult":
        return cls(NotificationStatus.SKIPPED, reason)

    @classmethod
    def failed(cls, error: str) -> "NotificationResult":
        return cls(NotificationStatus.FAILED, error)

    @property
    def ok(self) -> bool:
        return self.status is not NotificationStatus.FAILED


class SyncStatus(str, Enum):
    UPDATED = "updated"
    ALREADY_PRESENT = "already_present"


@dataclass(frozen=True)
class SyncResult:
    status: SyncStatus
    version: str
    release_notes_path: Path
    notification: Optional[NotificationResult] = None
