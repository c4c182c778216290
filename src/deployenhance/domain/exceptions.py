"""Domain exceptions: all public errors of deployenhance.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application raise these, the orchestrator decides which ones
are per-location, per-descriptor or systemic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DeployEnhanceError(Exception):
    """Base for all deployenhance error exceptions.

    Allows: except DeployEnhanceError to catch all library errors.
    """


class ToolUnavailableError(DeployEnhanceError, LookupError):
    """Enhancer tool (or its options constructor) cannot be resolved.

    Expected configuration state, not a deployment failure.

    Attributes:
        name: Dotted name that failed to resolve.
        reason: Why resolution failed.
    """

    def __init__(self, *, name: str, reason: str) -> None:
        """Initialize with name and reason."""
        self.name = name
        self.reason = reason
        super().__init__(f"cannot resolve '{name}': {reason}")


class ArchiveExtractionError(DeployEnhanceError, OSError):
    """Packed archive cannot be opened, read or extracted.

    Attributes:
        archive: Archive path.
        reason: Error description.
    """

    def __init__(self, *, archive: Path, reason: str) -> None:
        """Initialize with archive path and reason."""
        self.archive = archive
        self.reason = reason
        super().__init__(f"{archive}: {reason}")


class DescriptorParseError(DeployEnhanceError, ValueError):
    """Persistence descriptor is unreadable or malformed XML.

    Attributes:
        path: Descriptor path.
        reason: Error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with descriptor path and reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"can't parse '{path}': {reason}")


class OptionsConstructionError(DeployEnhanceError, RuntimeError):
    """Enhancer options value cannot be built.

    Systemic: remaining descriptors of the event are abandoned.
    Preserves original traceback via __cause__.

    Attributes:
        descriptor: Descriptor the options were built for.
        original: Exception raised by the options constructor.
    """

    def __init__(self, descriptor: Path, original: BaseException) -> None:
        """Initialize with descriptor and original exception."""
        self.descriptor = descriptor
        self.original = original
        super().__init__(
            f"can't create enhancer options for {descriptor}: "
            f"{type(original).__name__}: {original}"
        )
        self.__cause__ = original


class EnhancementFailedError(DeployEnhanceError, RuntimeError):
    """Enhancer tool raised while enhancing one descriptor's classes.

    Per descriptor: other descriptors are still processed.

    Attributes:
        descriptor: Descriptor whose classes failed.
        original: Exception raised by the tool.
    """

    def __init__(self, descriptor: Path, original: BaseException) -> None:
        """Initialize with descriptor and original exception."""
        self.descriptor = descriptor
        self.original = original
        super().__init__(
            f"enhancement failed for {descriptor}: {type(original).__name__}: {original}"
        )
        self.__cause__ = original
