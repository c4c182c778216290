"""Archive extraction record."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Extraction:
    """Packed archive unpacked to its sibling directory during one event.

    Attributes:
        archive: Packed archive path
        target: Directory the archive was unpacked into
        created: True if this event created target (only those are cleaned up)
    """

    archive: Path
    target: Path
    created: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.archive == self.target:
            raise ValueError(f"target must differ from archive: {self.archive}")
