"""
Port (interface) for reading and writing whole text documents.
Infrastructure adapters (e.g. LocalDocumentStore) must implement this interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IDocumentStore(ABC):
    @abstractmethod
    def read(self, path: Path) -> str:
        """Return the full text of the document at *path*.

        Raises:
            DocumentNotFoundError: if nothing exists at *path*.
            DocumentReadError:     on any other read failure.
        """
        ...

    @abstractmethod
    def write(self, path: Path, text: str) -> None:
        """Replace the document at *path* with *text* in a single write.

        Raises:
            DocumentWriteError: if the document cannot be written.
        """
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool: ...
