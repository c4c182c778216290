"""Zip-based archive adapter.

Implements ArchivePort with zipfile. Jar, war and ear files are zip files.
"""

from __future__ import annotations

import shutil
import zipfile
import zlib
from typing import TYPE_CHECKING

from deployenhance.domain.exceptions import ArchiveExtractionError

if TYPE_CHECKING:
    from pathlib import Path

# What zipfile raises on archives it cannot read: truncation (EOFError),
# unsupported compression (NotImplementedError), encrypted members
# (RuntimeError), corrupt deflate streams (zlib.error), bad headers.
_READ_ERRORS = (OSError, EOFError, RuntimeError, ValueError, zipfile.BadZipFile, zlib.error)


class ZipArchive:
    """Archive adapter over zipfile.

    Stateless. FAIL-FIRST: every read problem becomes ArchiveExtractionError.
    """

    def has_entry(self, archive: Path, entry: str) -> bool:
        """Check for entry by name without extracting.

        Raises:
            ArchiveExtractionError: Archive missing, unreadable or not a zip
        """
        try:
            with zipfile.ZipFile(archive) as zf:
                zf.getinfo(entry)
        except KeyError:
            return False
        except _READ_ERRORS as e:
            raise ArchiveExtractionError(archive=archive, reason=str(e)) from e

        return True

    def extract(self, archive: Path, target: Path) -> None:
        """Unpack archive into target.

        Member names escaping target ("..", absolute paths) are neutralised by
        zipfile.extractall. A target created here is removed again on failure.

        Raises:
            ArchiveExtractionError: Archive unreadable, member not extractable
                or target not writable
        """
        created = not target.exists()

        try:
            target.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(target)
        except _READ_ERRORS as e:
            if created:
                shutil.rmtree(target, ignore_errors=True)
            raise ArchiveExtractionError(archive=archive, reason=str(e)) from e
