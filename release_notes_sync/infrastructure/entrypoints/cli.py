"""
CLI entry point for the release-notes sync.

This module is the Composition Root: it loads settings, wires the
infrastructure adapters (LocalDocumentStore, WebhookNotifier) to
SyncReleaseNotesUseCase and maps the outcome to a process exit code.

Run from the docs repository root (usually from CI):

    export SDK_CHANGELOG_PATH=../sdk/CHANGELOG.md
    export SLACK_WEBHOOK_URL=https://hooks.slack.com/services/...
    release-notes-sync
"""

import argparse
import sys
from typing import Optional, Sequence

from release_notes_sync.application.use_cases.sync_release_notes import SyncReleaseNotesUseCase
from release_notes_sync.domain.entities.sync_result import SyncStatus
from release_notes_sync.domain.errors import ReleaseNotesSyncError
from release_notes_sync.infrastructure.config.settings import load_dotenv_settings
from release_notes_sync.infrastructure.filesystem.local_document_store import LocalDocumentStore
from release_notes_sync.infrastructure.logging.structlog_config import configure_logging, get_logger
from release_notes_sync.infrastructure.notifications.webhook_notifier import WebhookNotifier

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-notes-sync",
        description="Copy the latest CHANGELOG.md release into release-notes.md.",
    )
    parser.add_argument(
        "--changelog",
        help="Path to the source changelog (overrides SDK_CHANGELOG_PATH).",
    )
    parser.add_argument(
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR (overrides LOG_LEVEL).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_dotenv_settings(changelog_path=args.changelog, log_level=args.log_level)
        configure_logging(settings.log_level)

        use_case = SyncReleaseNotesUseCase(
            store=LocalDocumentStore(),
            notifier=WebhookNotifier(settings.webhook_url, timeout=settings.webhook_timeout),
            settings=settings,
        )
        result = use_case.execute()
    except ReleaseNotesSyncError as exc:
        logger.error("sync_failed", error=str(exc))
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if result.status is SyncStatus.ALREADY_PRESENT:
        print(f"✅ {result.version} already exists in release notes, no update needed")
    else:
        print(f"🎉 Release notes updated with {result.version} in {result.release_notes_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
