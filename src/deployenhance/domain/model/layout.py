"""Well-known artifact layout: descriptor locations and derived paths."""

from __future__ import annotations

from pathlib import Path

DESCRIPTOR_NAME = "persistence.xml"
META_INF_PERSISTENCE_XML = "META-INF/persistence.xml"
WEB_INF_PERSISTENCE_XML = "/WEB-INF/persistence.xml"
WEB_INF = "WEB-INF"
CLASSES = "classes"
JAR_FILE_SUFFIX = "jar-file"


def is_web_classes_dir(directory: Path) -> bool:
    """Check whether directory is a web application's WEB-INF/classes."""
    return directory.name == CLASSES and directory.parent.name == WEB_INF


def base_directory_for(descriptor: Path) -> Path:
    """Directory that owns a descriptor.

    Strips the layout suffix from the descriptor path:
        /app/META-INF/persistence.xml -> /app
        /web/WEB-INF/classes/META-INF/persistence.xml -> /web/WEB-INF/classes
        /web/WEB-INF/persistence.xml -> /web

    Raises:
        ValueError: Descriptor is not in a known layout.
    """
    text = descriptor.as_posix()

    if text.endswith("/" + META_INF_PERSISTENCE_XML):
        return Path(text[: -len(META_INF_PERSISTENCE_XML)])

    if text.endswith(WEB_INF_PERSISTENCE_XML):
        return Path(text[: -len(WEB_INF_PERSISTENCE_XML)])

    raise ValueError(f"descriptor is not in a known layout: {descriptor}")


def extraction_dir_for(archive: Path, extension: str = ".jar") -> Path:
    """Deterministic sibling directory an archive is extracted to.

    Archive path with its extension removed: /deploy/app.jar -> /deploy/app

    Raises:
        ValueError: Archive name does not end with extension.
    """
    if not archive.name.endswith(extension) or archive.name == extension:
        raise ValueError(f"archive name must end with {extension!r}: {archive}")

    return archive.with_name(archive.name[: -len(extension)])
