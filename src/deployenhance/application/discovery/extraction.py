"""Archive expansion into deterministic sibling directories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deployenhance.domain.model.extraction import Extraction
from deployenhance.domain.model.layout import extraction_dir_for

if TYPE_CHECKING:
    from pathlib import Path

    from deployenhance.domain.ports.archive import ArchivePort

logger = logging.getLogger(__name__)


def expand_archive(archive: Path, archive_port: ArchivePort, extension: str) -> Extraction:
    """Make an archive's content filesystem-addressable.

    Unpacks archive to its sibling directory (archive path minus extension).
    An already existing directory is reused as is and never marked as created,
    so cleanup leaves it alone.

    Args:
        archive: Packed archive path
        archive_port: Extraction collaborator
        extension: Archive extension to strip

    Returns:
        Extraction record

    Raises:
        ArchiveExtractionError: Archive cannot be unpacked
    """
    target = extraction_dir_for(archive, extension)

    if target.is_dir():
        logger.debug("reusing existing directory %s for %s", target, archive)
        return Extraction(archive=archive, target=target, created=False)

    archive_port.extract(archive, target)
    logger.debug("extracted %s to %s", archive, target)
    return Extraction(archive=archive, target=target, created=True)
