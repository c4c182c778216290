"""Discovery layer for deployment artifacts.

Functions to discover what to enhance:
- Persistence descriptors in artifact locations
- Archive expansion into sibling directories
- Compiled classes under class roots
"""

from deployenhance.application.discovery.classes import collect_class_files
from deployenhance.application.discovery.extraction import expand_archive
from deployenhance.application.discovery.locator import locate_descriptor

__all__ = [
    "collect_class_files",
    "expand_archive",
    "locate_descriptor",
]
