"""Archive port: read and unpack packed archives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class ArchivePort(Protocol):
    """Contract for the archive-extraction collaborator.

    Infrastructure layer provides the implementation (ZipArchive).
    Both methods raise ArchiveExtractionError on unreadable archives.
    """

    def has_entry(self, archive: Path, entry: str) -> bool:
        """Check for an entry without extracting the archive.

        Args:
            archive: Packed archive path
            entry: '/'-separated entry name, e.g. "META-INF/persistence.xml"

        Raises:
            ArchiveExtractionError: Archive cannot be opened
        """
        ...

    def extract(self, archive: Path, target: Path) -> None:
        """Unpack the whole archive into target.

        Args:
            archive: Packed archive path
            target: Directory to unpack into (created if missing)

        Raises:
            ArchiveExtractionError: Archive cannot be read or unpacked
        """
        ...
