"""Class-root resolution for a discovered descriptor."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from deployenhance.domain.model.descriptor import DescriptorEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from deployenhance.domain.model.descriptor import DiscoveredDescriptor


def resolve_reference(base_dir: Path, reference: str) -> Path:
    """Resolve a jar-file reference against the base directory's parent.

    ".." segments are collapsed lexically, symlinks are not followed.

    Examples:
        /deploy/app, lib/model.jar -> /deploy/lib/model.jar
        /deploy/app, ../libB.jar   -> /libB.jar
    """
    return Path(os.path.normpath(base_dir.parent / reference))


def resolve_class_roots(base_dir: Path, references: Iterable[str]) -> tuple[Path, ...]:
    """Base directory followed by one resolved path per reference, in order."""
    return (base_dir, *(resolve_reference(base_dir, ref) for ref in references))


def build_entry(discovered: DiscoveredDescriptor, references: Iterable[str]) -> DescriptorEntry:
    """Descriptor entry for a discovered descriptor and its references."""
    return DescriptorEntry(
        descriptor=discovered.path,
        class_roots=resolve_class_roots(discovered.base_dir, references),
    )
