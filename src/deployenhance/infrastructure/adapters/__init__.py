"""Infrastructure adapters for external collaborators."""

from deployenhance.infrastructure.adapters.file_deleter import ShutilFileDeleter
from deployenhance.infrastructure.adapters.tool_probe import (
    ImportedEnhancerTool,
    probe_enhancer_tool,
    resolve_name,
)
from deployenhance.infrastructure.adapters.zip_archive import ZipArchive

__all__ = [
    "ImportedEnhancerTool",
    "ShutilFileDeleter",
    "ZipArchive",
    "probe_enhancer_tool",
    "resolve_name",
]
