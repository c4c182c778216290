"""Outcome of processing one deployment event."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class OutcomeStatus(Enum):
    """What happened to one descriptor.

    ENHANCED: Tool ran without raising
    FAILED: Tool raised, other descriptors unaffected
    NOT_ATTEMPTED: Abandoned after a systemic options failure
    """

    ENHANCED = auto()
    FAILED = auto()
    NOT_ATTEMPTED = auto()


@dataclass(frozen=True, slots=True)
class DescriptorOutcome:
    """Result for one descriptor.

    Attributes:
        descriptor: Absolute descriptor path
        class_roots: Class roots attributed to the descriptor
        class_file_count: Class files handed to the tool (0 if not attempted)
        status: What happened
        error: Error text for FAILED / NOT_ATTEMPTED, None otherwise
    """

    descriptor: Path
    class_roots: tuple[Path, ...]
    class_file_count: int
    status: OutcomeStatus
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.class_file_count < 0:
            raise ValueError(f"class_file_count must be >= 0, got {self.class_file_count}")
        if self.status is OutcomeStatus.ENHANCED and self.error is not None:
            raise ValueError("ENHANCED outcome must not carry an error")


@dataclass(frozen=True, slots=True)
class EnhancementReport:
    """Everything observable about one deployment event.

    Attributes:
        locations: Artifact locations of the event
        outcomes: One outcome per discovered descriptor, discovery order
        cleaned: Extraction directories removed at the end
        skipped: True if the enhancer tool is unavailable (nothing was done)
        aborted: True if a systemic failure abandoned remaining descriptors
    """

    locations: tuple[Path, ...]
    outcomes: tuple[DescriptorOutcome, ...] = ()
    cleaned: tuple[Path, ...] = ()
    skipped: bool = False
    aborted: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.skipped and (self.outcomes or self.cleaned or self.aborted):
            raise ValueError("skipped report must not carry outcomes, cleanup or abort")

    @classmethod
    def skipped_for(cls, locations: tuple[Path, ...]) -> EnhancementReport:
        """Report for an event handled as a no-op."""
        return cls(locations=locations, skipped=True)

    @property
    def descriptor_count(self) -> int:
        """Number of descriptors discovered."""
        return len(self.outcomes)

    @property
    def enhanced_count(self) -> int:
        """Descriptors whose classes were enhanced."""
        return sum(1 for o in self.outcomes if o.status is OutcomeStatus.ENHANCED)

    @property
    def failed_count(self) -> int:
        """Descriptors whose enhancement raised."""
        return sum(1 for o in self.outcomes if o.status is OutcomeStatus.FAILED)

    @property
    def class_file_count(self) -> int:
        """Class files handed to the tool across all descriptors."""
        return sum(o.class_file_count for o in self.outcomes)
