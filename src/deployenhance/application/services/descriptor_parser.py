"""Persistence descriptor parser.

Streams the descriptor once and yields archive references (jar-file entries).
The rest of the persistence schema is not interpreted.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from deployenhance.domain.exceptions import DescriptorParseError
from deployenhance.domain.model.layout import JAR_FILE_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)


class DescriptorParser:
    """Namespace-aware, non-validating streaming scan for jar-file entries.

    Built once and injected into the orchestrator. Stateless between parses.

    Example:
        parser = DescriptorParser()
        parser.parse(Path("/app/META-INF/persistence.xml"))
        ('../lib/model.jar',)
    """

    def __init__(self, element_suffix: str = JAR_FILE_SUFFIX) -> None:
        """Initialize parser.

        Args:
            element_suffix: Local element names ending with this are captured

        Raises:
            ValueError: If element_suffix is empty
        """
        if not element_suffix:
            raise ValueError("element_suffix must not be empty")

        self._suffix = element_suffix

    def iter_references(self, path: Path) -> Iterator[str]:
        """Lazily yield reference texts in document order.

        Duplicates are preserved. Surrounding whitespace is stripped and
        empty elements are ignored.

        Raises:
            DescriptorParseError: File unreadable, not well-formed XML or in
                an unknown encoding, raised when the scan reaches the problem.
        """
        try:
            for _event, element in ET.iterparse(path, events=("end",)):
                if not _local_name(element.tag).endswith(self._suffix):
                    continue
                text = (element.text or "").strip()
                if text:
                    yield text
        except ET.ParseError as e:
            raise DescriptorParseError(path=path, reason=str(e)) from e
        except (LookupError, UnicodeError, ValueError) as e:
            # expat: unknown declared encoding (LookupError), undecodable bytes
            raise DescriptorParseError(path=path, reason=f"{type(e).__name__}: {e}") from e
        except OSError as e:
            raise DescriptorParseError(path=path, reason=e.strerror or str(e)) from e

    def parse(self, path: Path) -> tuple[str, ...]:
        """All references of a descriptor.

        A descriptor that cannot be parsed is logged and contributes nothing.

        Args:
            path: Descriptor file

        Returns:
            References in document order, empty on parse failure
        """
        try:
            return tuple(self.iter_references(path))
        except DescriptorParseError as e:
            logger.error("%s", e)
            return ()


def _local_name(tag: object) -> str:
    """Strip '{namespace}' from an ElementTree tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]
