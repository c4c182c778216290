"""Enhancement unit: what is handed to the enhancer tool for one descriptor."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class EnhancementUnit:
    """Class files of one descriptor plus the tool options built for it.

    Created just before invocation, discarded after.

    Attributes:
        descriptor: Absolute descriptor path
        class_files: Absolute class-file paths, union over all class roots
        options: Options value from the tool's options constructor
    """

    descriptor: Path
    class_files: tuple[str, ...]
    options: object

    def __len__(self) -> int:
        """Number of class files."""
        return len(self.class_files)
