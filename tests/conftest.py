"""Shared pytest fixtures for the release-notes-sync test suite.

Provides in-memory stand-ins for the document store and notifier ports plus
sample changelog / release-notes documents.
"""

from pathlib import Path
from typing import Dict, List, Optional

import pytest
import structlog

from release_notes_sync.domain.entities.sync_result import NotificationResult
from release_notes_sync.domain.entities.sync_settings import SyncSettings
from release_notes_sync.domain.errors import (
    DocumentNotFoundError,
    DocumentReadError,
    DocumentWriteError,
)
from release_notes_sync.domain.ports.document_store_port import IDocumentStore
from release_notes_sync.domain.ports.notifier_port import INotifier

CHANGELOG = """# Changelog

All notable changes to the SDK are documented here.

## [2.0.0] - 2024-05-01

### Added
- Streaming responses

### Fixed
- Retry on 429

## [1.0.0] - 2024-01-10

- Initial release
"""

RELEASE_NOTES = """---
title: Release Notes
sidebar_position: 3
---

## Overview

Release history for the SDK.

## [1.0.0] - 2024-01-10

- Initial release
"""


# ============================================================================
# Port fakes
# ============================================================================


class InMemoryDocumentStore(IDocumentStore):
    def __init__(self, documents: Optional[Dict[str, str]] = None) -> None:
        self.documents: Dict[str, str] = dict(documents or {})
        self.writes: List[tuple] = []
        self.unreadable: set = set()
        self.unwritable: set = set()

    def read(self, path: Path) -> str:
        key = str(path)
        if key in self.unreadable:
            raise DocumentReadError(path, "permission denied")
        if key not in self.documents:
            raise DocumentNotFoundError(path)
        return self.documents[key]

    def write(self, path: Path, text: str) -> None:
        key = str(path)
        if key in self.unwritable:
            raise DocumentWriteError(path, "read-only file system")
        self.writes.append((key, text))
        self.documents[key] = text

    def exists(self, path: Path) -> bool:
        return str(path) in self.documents


class RecordingNotifier(INotifier):
    def __init__(self, result: Optional[NotificationResult] = None) -> None:
        self.messages: List[str] = []
        self.result = result or NotificationResult.sent()

    def notify(self, message: str) -> NotificationResult:
        self.messages.append(message)
        return self.result


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop any logging configuration a test installed (e.g. via the CLI)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> SyncSettings:
    return SyncSettings(
        changelog_path=Path("CHANGELOG.md"),
        release_notes_path=Path("release-notes.md"),
        webhook_url="https://hooks.example.com/T000/B000",
    )


@pytest.fixture
def store(settings) -> InMemoryDocumentStore:
    return InMemoryDocumentStore(
        {
            str(settings.changelog_path): CHANGELOG,
            str(settings.release_notes_path): RELEASE_NOTES,
        }
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def changelog_text() -> str:
    return CHANGELOG


@pytest.fixture
def release_notes_text() -> str:
    return RELEASE_NOTES


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(NotificationResult.failed("connection refused"))
