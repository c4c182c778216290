"""Cleanup of extraction directories created during one event."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from deployenhance.domain.model.extraction import Extraction
    from deployenhance.domain.ports.file_deleter import FileDeleterPort

logger = logging.getLogger(__name__)


class CleanupManager:
    """Removes extraction directories so none outlives its event.

    Only directories the event created are removed; pre-existing ones stay.
    """

    def __init__(self, deleter: FileDeleterPort) -> None:
        """Initialize with the deletion collaborator."""
        self._deleter = deleter

    def cleanup(self, extractions: Iterable[Extraction]) -> tuple[Path, ...]:
        """Delete created extraction targets that still exist.

        Never raises: a directory that cannot be removed is logged and left.

        Returns:
            Directories actually removed
        """
        removed: list[Path] = []

        for extraction in extractions:
            if not extraction.created or not extraction.target.exists():
                continue

            try:
                self._deleter.delete(extraction.target)
            except Exception:
                logger.warning("can't delete extracted %s", extraction.target, exc_info=True)
                continue

            logger.debug("deleted extracted %s", extraction.target)
            removed.append(extraction.target)

        return tuple(removed)
