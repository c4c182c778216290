"""Descriptor discovery in one artifact location.

Recognised layouts:
- exploded directory: <dir>/META-INF/persistence.xml
- web application classes: <web>/WEB-INF/classes, descriptor at
  <web>/WEB-INF/persistence.xml or <web>/WEB-INF/classes/META-INF/persistence.xml
- packed archive: <name>.jar containing META-INF/persistence.xml
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deployenhance.application.discovery.extraction import expand_archive
from deployenhance.domain.exceptions import ArchiveExtractionError
from deployenhance.domain.model.descriptor import DiscoveredDescriptor
from deployenhance.domain.model.layout import (
    DESCRIPTOR_NAME,
    META_INF_PERSISTENCE_XML,
    is_web_classes_dir,
)

if TYPE_CHECKING:
    from pathlib import Path

    from deployenhance.domain.ports.archive import ArchivePort

logger = logging.getLogger(__name__)


def locate_descriptor(
    location: Path,
    archive_port: ArchivePort,
    *,
    archive_extension: str = ".jar",
) -> DiscoveredDescriptor | None:
    """Find the persistence descriptor of one artifact location.

    A packed archive holding a descriptor is extracted as a side effect; the
    returned descriptor then carries the Extraction record.

    Args:
        location: Directory or packed archive from the deployment event
        archive_port: Archive collaborator (entry probing and extraction)
        archive_extension: Extension identifying packed archives

    Returns:
        Discovered descriptor, or None if the location has none. Unreadable
        archives are logged and yield None.
    """
    location = location.absolute()

    if location.is_dir():
        return _locate_in_directory(location)

    if location.suffix == archive_extension and location.is_file():
        return _locate_in_archive(location, archive_port, archive_extension)

    return None


def _locate_in_directory(directory: Path) -> DiscoveredDescriptor | None:
    """Web layout first (sibling WEB-INF descriptor wins), then exploded layout."""
    if is_web_classes_dir(directory):
        candidates = (
            directory.parent / DESCRIPTOR_NAME,
            directory / META_INF_PERSISTENCE_XML,
        )
    else:
        candidates = (directory / META_INF_PERSISTENCE_XML,)

    for candidate in candidates:
        if candidate.is_file():
            return DiscoveredDescriptor(path=candidate)

    return None


def _locate_in_archive(
    archive: Path,
    archive_port: ArchivePort,
    extension: str,
) -> DiscoveredDescriptor | None:
    """Probe archive for the descriptor entry, extract the archive if found."""
    try:
        if not archive_port.has_entry(archive, META_INF_PERSISTENCE_XML):
            return None
        extraction = expand_archive(archive, archive_port, extension)
    except ArchiveExtractionError as e:
        logger.warning("skipping unreadable archive %s: %s", archive, e.reason)
        return None

    return DiscoveredDescriptor(
        path=extraction.target / META_INF_PERSISTENCE_XML,
        extraction=extraction,
    )
