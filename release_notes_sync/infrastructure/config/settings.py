"""
Environment → SyncSettings.

The only module that reads process environment variables. Variable names
follow the CI workflow that drives the sync:

    SDK_CHANGELOG_PATH  source changelog (default ./CHANGELOG.md)
    SLACK_WEBHOOK_URL   optional notification endpoint
    WEBHOOK_TIMEOUT     seconds to wait for the webhook (default 10)
    LOG_LEVEL           DEBUG, INFO, WARNING or ERROR (default INFO)

The release-notes destination is fixed at ./release-notes.md.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from release_notes_sync.domain.entities.sync_settings import (
    DEFAULT_CHANGELOG_PATH,
    RELEASE_NOTES_PATH,
    SyncSettings,
)
from release_notes_sync.domain.errors import ConfigurationError


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    changelog_path: Optional[str] = None,
    log_level: Optional[str] = None,
) -> SyncSettings:
    """Build SyncSettings from *environ* (os.environ by default).

    Explicit arguments take precedence over environment values; they carry the
    CLI flags.

    Raises:
        ConfigurationError: if WEBHOOK_TIMEOUT is not a positive number.
    """
    env = os.environ if environ is None else environ

    raw_timeout = env.get("WEBHOOK_TIMEOUT", "10")
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigurationError(f"WEBHOOK_TIMEOUT must be a number, got {raw_timeout!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"WEBHOOK_TIMEOUT must be positive, got {raw_timeout!r}")

    return SyncSettings(
        changelog_path=Path(changelog_path or env.get("SDK_CHANGELOG_PATH") or DEFAULT_CHANGELOG_PATH),
        release_notes_path=RELEASE_NOTES_PATH,
        webhook_url=env.get("SLACK_WEBHOOK_URL") or None,
        webhook_timeout=timeout,
        log_level=(log_level or env.get("LOG_LEVEL") or "INFO").upper(),
    )


def load_dotenv_settings(**overrides) -> SyncSettings:
    """Load .env from the working directory (if any) into os.environ, then build settings."""
    load_dotenv(find_dotenv(usecwd=True))
    return load_settings(**overrides)
