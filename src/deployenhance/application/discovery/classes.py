"""Compiled class discovery under a class root."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def collect_class_files(root: Path, extension: str = ".class") -> tuple[str, ...]:
    """Collect absolute paths of all class files beneath root.

    Order is lexical per directory level, depth-first.

    Args:
        root: Class root
        extension: Compiled-class file extension

    Returns:
        Absolute path strings; empty if root is not a directory

    Example:
        >>> collect_class_files(Path("/app"))
        ('/app/com/acme/Order.class', '/app/com/acme/OrderLine.class')
    """
    if not root.is_dir():
        return ()

    return tuple(_walk(root.absolute(), extension))


def _walk(directory: Path, extension: str) -> list[str]:
    """Depth-first walk, entries sorted by name at each level."""
    result: list[str] = []

    for item in sorted(directory.iterdir(), key=lambda p: p.name):
        if item.is_dir():
            result.extend(_walk(item, extension))
        elif item.is_file() and item.name.endswith(extension):
            result.append(str(item))

    return result
