"""
Infrastructure adapter: incoming webhook (Slack-style) → INotifier.

Posts ``{"text": message}`` to the configured URL with requests. Delivery is
advisory: every transport or HTTP error is turned into a FAILED
NotificationResult and logged, never raised.
"""

from typing import Optional

import requests

from release_notes_sync.domain.entities.sync_result import NotificationResult
from release_notes_sync.domain.ports.notifier_port import INotifier
from release_notes_sync.infrastructure.logging.structlog_config import get_logger

logger = get_logger(__name__)


class WebhookNotifier(INotifier):
    """Sends plain-text status messages to a webhook endpoint."""

    def __init__(
        self,
        webhook_url: Optional[str],
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._timeout = timeout
        self._session = session

    def notify(self, message: str) -> NotificationResult:
        if not self._webhook_url:
            logger.info("notification_skipped", reason="no webhook URL configured")
            return NotificationResult.skipped("no webhook URL configured")

        post = self._session.post if self._session is not None else requests.post
        try:
            response = post(
                self._webhook_url,
                json={"text": message},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("notification_delivery_failed", error=str(exc))
            return NotificationResult.failed(str(exc))

        logger.info("notification_sent", status_code=response.status_code)
        return NotificationResult.sent()
