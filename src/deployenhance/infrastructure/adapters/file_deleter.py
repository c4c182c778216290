"""Filesystem deleter adapter."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ShutilFileDeleter:
    """Deletes files and directory trees with shutil/pathlib.

    Missing paths are not an error: another actor may have removed them.
    """

    def delete(self, path: Path) -> None:
        """Delete path recursively.

        Raises:
            OSError: Path exists but cannot be removed
        """
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
