"""
Domain entity for a single release block parsed out of a changelog.
Zero external dependencies, pure Python dataclass only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionEntry:
    header: str
    body: str
    full: str

    @classmethod
    def empty(cls) -> "VersionEntry":
        """Entry returned when a changelog holds no version header at all."""
        return cls(header="", body="", full="")

    @property
    def is_empty(self) -> bool:
        return not self.header
