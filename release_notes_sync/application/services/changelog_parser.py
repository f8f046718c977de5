"""
Application service: extract the newest release block from a changelog.
Pure text transform; depends only on Domain entities.
"""

from release_notes_sync.domain.entities.version_entry import VersionEntry

VERSION_HEADER_PREFIX = "## ["


def is_version_header(line: str) -> bool:
    return line.startswith(VERSION_HEADER_PREFIX)


def parse_latest_entry(changelog: str) -> VersionEntry:
    """Return the first ``## [x.y.z]`` section of *changelog*.

    The section runs from the first version header up to, but excluding, the
    next version header or the end of the document.

    Returns:
        VersionEntry.empty() when the changelog holds no version header.
    """
    header = ""
    section: list[str] = []

    for line in changelog.splitlines():
        if is_version_header(line):
            if header:
                break
            header = line.strip()
        elif header:
            section.append(line)

    if not header:
        return VersionEntry.empty()

    # Stray header lines inside the span are dropped.
    body_lines = [line for line in section if not is_version_header(line)]
    body = "\n".join(body_lines)
    return VersionEntry(
        header=header,
        body=body.strip(),
        full=f"{header}\n{body}".strip(),
    )
