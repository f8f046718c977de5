"""
Domain entity holding the process-wide settings of a sync run.
Built once by the composition root and passed explicitly to the use case and
adapters, so nothing below the entrypoint reads os.environ.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_CHANGELOG_PATH = Path("./CHANGELOG.md")
RELEASE_NOTES_PATH = Path("./release-notes.md")


@dataclass(frozen=True)
class SyncSettings:
    changelog_path: Path = DEFAULT_CHANGELOG_PATH
    release_notes_path: Path = RELEASE_NOTES_PATH
    webhook_url: Optional[str] = None
    webhook_timeout: float = 10.0
    log_level: str = "INFO"
