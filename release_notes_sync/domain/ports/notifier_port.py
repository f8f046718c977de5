"""
Port (interface) for status notifications.
Infrastructure adapters (e.g. WebhookNotifier) must implement this interface.
"""

from abc import ABC, abstractmethod

from release_notes_sync.domain.entities.sync_result import NotificationResult


class INotifier(ABC):
    @abstractmethod
    def notify(self, message: str) -> NotificationResult:
        """Deliver *message* on a best-effort basis.

        Must never raise for delivery problems; report them through the
        returned NotificationResult instead.
        """
        ...
