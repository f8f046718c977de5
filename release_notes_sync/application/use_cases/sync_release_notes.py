"""
Use-case: copy the newest changelog release into the release-notes page.
Depends only on Domain ports, entities and the pure application services;
file access and notification delivery are injected.

Flow: read changelog -> parse latest entry -> existence check -> merge in
memory -> single write -> best-effort notification.
structlog is the logging framework and is allowed in the application layer.
"""

import structlog

from release_notes_sync.application.messages import update_notification
from release_notes_sync.application.services.changelog_parser import parse_latest_entry
from release_notes_sync.application.services.release_notes_merger import (
    contains_version,
    merge_release,
)
from release_notes_sync.domain.entities.sync_result import SyncResult, SyncStatus
from release_notes_sync.domain.entities.sync_settings import SyncSettings
from release_notes_sync.domain.entities.version_entry import VersionEntry
from release_notes_sync.domain.errors import (
    DestinationWriteFailureError,
    DocumentNotFoundError,
    DocumentReadError,
    DocumentWriteError,
    ParseFailureError,
    SourceUnreadableError,
)
from release_notes_sync.domain.ports.document_store_port import IDocumentStore
from release_notes_sync.domain.ports.notifier_port import INotifier


logger = structlog.get_logger(__name__)


class SyncReleaseNotesUseCase:
    def __init__(
        self,
        store: IDocumentStore,
        notifier: INotifier,
        settings: SyncSettings,
    ) -> None:
        """
        Args:
            store:    IDocumentStore implementation (e.g. LocalDocumentStore).
            notifier: INotifier implementation (e.g. WebhookNotifier).
            settings: Paths and endpoint for this run.
        """
        self._store = store
        self._notifier = notifier
        self._settings = settings

    def execute(self) -> SyncResult:
        """Run one synchronization.

        Raises:
            SourceUnreadableError:        the changelog cannot be read.
            ParseFailureError:            the changelog has no usable release.
            DocumentReadError:            the release notes exist but cannot be read.
            DestinationWriteFailureError: the merged release notes cannot be written.
        """
        settings = self._settings
        logger.info("sync_started", changelog_path=str(settings.changelog_path))

        entry = self._load_latest_entry()
        logger.info("latest_version_found", version=entry.header)

        existing = self._load_release_notes()
        if contains_version(existing, entry):
            logger.info("version_already_present", version=entry.header)
            return SyncResult(
                status=SyncStatus.ALREADY_PRESENT,
                version=entry.header,
                release_notes_path=settings.release_notes_path,
            )

        updated = merge_release(existing, entry)
        try:
            self._store.write(settings.release_notes_path, updated)
        except DocumentWriteError as exc:
            raise DestinationWriteFailureError(str(exc)) from exc
        logger.info(
            "release_notes_written",
            release_notes_path=str(settings.release_notes_path),
            version=entry.header,
        )

        notification = self._notifier.notify(update_notification(entry.header))
        if notification.ok:
            logger.info("notification_done", status=notification.status.value, detail=notification.detail)
        else:
            logger.warning("notification_failed", error=notification.detail)

        return SyncResult(
            status=SyncStatus.UPDATED,
            version=entry.header,
            release_notes_path=settings.release_notes_path,
            notification=notification,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load_latest_entry(self) -> VersionEntry:
        path = self._settings.changelog_path
        try:
            changelog = self._store.read(path)
        except DocumentReadError as exc:
            raise SourceUnreadableError(str(exc)) from exc

        entry = parse_latest_entry(changelog)
        if entry.is_empty:
            raise ParseFailureError(f"No version header found in changelog {path}")
        if not entry.body:
            raise ParseFailureError(f"Version {entry.header} in {path} has no content")
        return entry

    def _load_release_notes(self) -> str:
        path = self._settings.release_notes_path
        try:
            return self._store.read(path)
        except DocumentNotFoundError:
            logger.info("release_notes_missing", release_notes_path=str(path))
            return ""
