"""
Infrastructure adapter: local filesystem → IDocumentStore.

Documents are read and written as UTF-8 text. OSError details are confined
here and re-raised as domain errors so the use case never sees them.
"""

from pathlib import Path

from release_notes_sync.domain.errors import (
    DocumentNotFoundError,
    DocumentReadError,
    DocumentWriteError,
)
from release_notes_sync.domain.ports.document_store_port import IDocumentStore

ENCODING = "utf-8"


class LocalDocumentStore(IDocumentStore):
    """Reads and writes whole text files on the local disk."""

    def read(self, path: Path) -> str:
        path = Path(path)
        try:
            with open(path, "r", encoding=ENCODING) as fh:
                return fh.read()
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(path, str(exc)) from exc

    def write(self, path: Path, text: str) -> None:
        """Replace the file at *path*; missing parent directories are created."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=ENCODING) as fh:
                fh.write(text)
        except OSError as exc:
            raise DocumentWriteError(path, str(exc)) from exc

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()
