"""Persistence descriptor value objects and the per-event descriptor mapping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from deployenhance.domain.model.layout import base_directory_for

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from deployenhance.domain.model.extraction import Extraction


@dataclass(frozen=True, slots=True)
class DiscoveredDescriptor:
    """Descriptor found in one artifact location.

    Attributes:
        path: Absolute descriptor path
        extraction: Extraction that made the descriptor addressable, if any
    """

    path: Path
    extraction: Extraction | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path.is_absolute():
            raise ValueError(f"path must be absolute, got {self.path}")

    @property
    def base_dir(self) -> Path:
        """Directory owning the descriptor."""
        return base_directory_for(self.path)


@dataclass(frozen=True, slots=True)
class DescriptorEntry:
    """Descriptor with the class roots it governs.

    Attributes:
        descriptor: Absolute descriptor path (mapping key)
        class_roots: Base directory first, then one root per jar-file reference
    """

    descriptor: Path
    class_roots: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_roots:
            raise ValueError(f"class_roots must not be empty for {self.descriptor}")

    @property
    def base_dir(self) -> Path:
        """First class root: the directory owning the descriptor."""
        return self.class_roots[0]

    @property
    def referenced_roots(self) -> tuple[Path, ...]:
        """Class roots resolved from jar-file references."""
        return self.class_roots[1:]


@dataclass(frozen=True, slots=True)
class DescriptorMapping:
    """Descriptor -> class roots for one deployment event.

    Immutable accumulator: each phase returns a new mapping.
    Descriptor keys are unique; entries keep discovery order.

    Attributes:
        entries: Descriptor entries in discovery order
        extractions: Archives unpacked while building the mapping
    """

    entries: tuple[DescriptorEntry, ...] = ()
    extractions: tuple[Extraction, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        keys = [entry.descriptor for entry in self.entries]
        if len(keys) != len(set(keys)):
            raise ValueError("descriptor keys must be unique")

    def with_entry(self, entry: DescriptorEntry) -> DescriptorMapping:
        """Return mapping with entry added.

        A repeated descriptor replaces the earlier entry at its position.
        """
        entries = list(self.entries)
        for index, existing in enumerate(entries):
            if existing.descriptor == entry.descriptor:
                entries[index] = entry
                break
        else:
            entries.append(entry)

        return replace(self, entries=tuple(entries))

    def with_extraction(self, extraction: Extraction) -> DescriptorMapping:
        """Return mapping with extraction recorded (once per target)."""
        if any(e.target == extraction.target for e in self.extractions):
            return self
        return replace(self, extractions=(*self.extractions, extraction))

    def get(self, descriptor: Path) -> DescriptorEntry | None:
        """Entry for descriptor, or None."""
        for entry in self.entries:
            if entry.descriptor == descriptor:
                return entry
        return None

    def __iter__(self) -> Iterator[DescriptorEntry]:
        """Iterate entries in discovery order."""
        return iter(self.entries)

    def __len__(self) -> int:
        """Number of descriptors."""
        return len(self.entries)

    def __bool__(self) -> bool:
        """True if at least one descriptor was found."""
        return bool(self.entries)
