"""File deleter port: recursive deletion of temporary artifacts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class FileDeleterPort(Protocol):
    """Contract for the recursive file-deletion utility."""

    def delete(self, path: Path) -> None:
        """Delete file or directory tree.

        Raises:
            OSError: Path cannot be removed
        """
        ...
