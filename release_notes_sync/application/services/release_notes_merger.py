"""
Application service: splice a VersionEntry into an existing release-notes page.

Every function here is pure: documents go in as strings and a new string comes
out. The release-notes page is MDX, so a leading front-matter block delimited
by ``---`` lines is left in place, and a ``## Overview`` section (when present)
stays above all release entries.
"""

from typing import Optional

from release_notes_sync.application.services.changelog_parser import is_version_header
from release_notes_sync.domain.entities.version_entry import VersionEntry

OVERVIEW_PREFIX = "## Overview"
FRONT_MATTER_DELIMITER = "---"


def contains_version(document: str, entry: VersionEntry) -> bool:
    return bool(entry.header) and entry.header in document


def remove_duplicate_headers(document: str) -> str:
    """Drop every repeated version-header line, keeping its first occurrence.

    Only the header line is removed; the lines under it stay where they are.
    """
    seen: set[str] = set()
    kept: list[str] = []
    for line in document.split("\n"):
        if is_version_header(line):
            key = line.strip()
            if key in seen:
                continue
            seen.add(key)
        kept.append(line)
    return "\n".join(kept)


def front_matter_end(lines: list[str]) -> int:
    """Index of the first line after a leading front-matter block, or 0."""
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return 0
    for idx in range(1, len(lines)):
        if lines[idx].strip() == FRONT_MATTER_DELIMITER:
            return idx + 1
    # Unterminated front matter is treated as ordinary content.
    return 0


def find_overview(lines: list[str]) -> Optional[int]:
    for idx in range(front_matter_end(lines), len(lines)):
        if lines[idx].startswith(OVERVIEW_PREFIX):
            return idx
    return None


def _splice(before: list[str], entry: VersionEntry, after: list[str]) -> str:
    head = "\n".join(before).rstrip()
    tail = "\n".join(after).lstrip()
    # one blank line before the entry, two after
    return f"{head}\n\n{entry.full}\n\n\n{tail}".strip()


def insert_after_overview(document: str, entry: VersionEntry) -> str:
    """Place *entry* right before the first release that follows the Overview.

    When no release follows, the entry goes after the Overview's own content.
    Falls back to prepend_entry() if the document has no Overview section.
    """
    lines = document.split("\n")
    overview = find_overview(lines)
    if overview is None:
        return prepend_entry(document, entry)

    insert_at = len(lines)
    for idx in range(overview + 1, len(lines)):
        if is_version_header(lines[idx]):
            insert_at = idx
            break
    return _splice(lines[:insert_at], entry, lines[insert_at:])


def prepend_entry(document: str, entry: VersionEntry) -> str:
    lines = document.split("\n")
    body_start = front_matter_end(lines)
    if body_start:
        head = "\n".join(lines[:body_start])
        tail = "\n".join(lines[body_start:]).strip()
        return f"{head}\n\n{entry.full}\n\n{tail}".strip()
    return f"{entry.full}\n\n{document}".strip()


def merge_release(document: str, entry: VersionEntry) -> str:
    """Merge *entry* into the release-notes *document* and return the new text.

    Steps:
      1. collapse duplicated version headers left by earlier corrupted merges;
      2. if the entry's header is already present, stop there (idempotent);
      3. otherwise insert after the Overview section, or prepend.

    Args:
        document: Current release notes; pass "" when the file does not exist.
        entry:    Parsed release block; must carry a header.

    Raises:
        ValueError: if *entry* has no header.
    """
    if entry.is_empty:
        raise ValueError("cannot merge a version entry without a header")

    cleaned = remove_duplicate_headers(document)
    if contains_version(cleaned, entry):
        return cleaned.strip()
    if find_overview(cleaned.split("\n")) is not None:
        return insert_after_overview(cleaned, entry)
    return prepend_entry(cleaned, entry)
