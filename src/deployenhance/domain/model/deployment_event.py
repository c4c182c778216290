"""Deployment event value object."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DeploymentEvent:
    """Artifact locations of one deployed application.

    Supplied by the container, read-only here. Order is the container's order.

    Attributes:
        locations: Directories or packed archives, in deployment order.
    """

    locations: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for location in self.locations:
            if not isinstance(location, Path):
                raise TypeError(f"locations must be Path, got {type(location).__name__}")

    @classmethod
    def of(cls, *locations: str | os.PathLike[str]) -> DeploymentEvent:
        """Create event from path-like values."""
        return cls(locations=tuple(Path(location) for location in locations))

    def __len__(self) -> int:
        """Number of artifact locations."""
        return len(self.locations)
