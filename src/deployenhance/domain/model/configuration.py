"""Enhancer configuration.

Names of the external enhancer tool and the layout conventions it relies on.
Host code usually builds this from its own settings via from_mapping().
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_ENHANCER_ENTRY_POINT = "openjpa.enhance:PCEnhancer.run"
DEFAULT_OPTIONS_FACTORY = "openjpa.lib.util:Options"
DEFAULT_PROPERTIES_FILE_PROPERTY = "propertiesFile"


@dataclass(frozen=True, slots=True)
class EnhancerConfig:
    """Enhancer configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        enhancer_entry_point: "module:attr.path" of the callable taking
            (class-file paths, options).
        options_factory: "module:attr.path" of the callable taking a
            property mapping and returning the options value.
        properties_file_property: Options property carrying the descriptor path.
        archive_extension: File extension identifying packed archives.
        class_extension: File extension identifying compiled classes.
    """

    enhancer_entry_point: str = DEFAULT_ENHANCER_ENTRY_POINT
    options_factory: str = DEFAULT_OPTIONS_FACTORY
    properties_file_property: str = DEFAULT_PROPERTIES_FILE_PROPERTY
    archive_extension: str = ".jar"
    class_extension: str = ".class"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("enhancer_entry_point", "options_factory"):
            value = getattr(self, name)
            module, sep, attr = value.partition(":")
            if not sep or not module or not attr:
                raise ValueError(f"{name} must be 'module:attr', got {value!r}")

        if not self.properties_file_property:
            raise ValueError("properties_file_property must not be empty")

        for name in ("archive_extension", "class_extension"):
            value = getattr(self, name)
            if len(value) < 2 or not value.startswith("."):
                raise ValueError(f"{name} must start with '.', got {value!r}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> EnhancerConfig:
        """Create config from a plain mapping (e.g. a [tool.deployenhance] table).

        Keys may use '-' or '_'. Missing keys take defaults.

        Raises:
            ValueError: Unknown key or invalid value.
            TypeError: Non-string value.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, str] = {}

        for key, value in values.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ValueError(f"unknown enhancer config key: {key!r}")
            if not isinstance(value, str):
                raise TypeError(f"{key} must be str, got {type(value).__name__}")
            kwargs[name] = value

        return cls(**kwargs)
