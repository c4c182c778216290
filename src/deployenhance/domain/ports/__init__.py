"""Domain ports (interfaces/protocols)."""

from deployenhance.domain.ports.archive import ArchivePort
from deployenhance.domain.ports.enhancer_tool import EnhancerToolPort
from deployenhance.domain.ports.file_deleter import FileDeleterPort
from deployenhance.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ArchivePort",
    "EnhancerToolPort",
    "FileDeleterPort",
    "ReporterProtocol",
]
