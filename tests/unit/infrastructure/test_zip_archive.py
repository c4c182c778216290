"""Tests for ZipArchive adapter."""

from pathlib import Path

import pytest

from deployenhance.domain.exceptions import ArchiveExtractionError
from deployenhance.infrastructure.adapters.zip_archive import ZipArchive
from tests.factories import CLASS_BYTES, make_jar, make_persistence_jar, set_compression_method


class TestHasEntry:
    """Tests for ZipArchive.has_entry()."""

    def test_present(self, tmp_path: Path) -> None:
        """Descriptor entry found."""
        jar = make_persistence_jar(tmp_path / "app.jar")
        assert ZipArchive().has_entry(jar, "META-INF/persistence.xml") is True

    def test_absent(self, tmp_path: Path) -> None:
        """Missing entry is False, not an error."""
        jar = make_jar(tmp_path / "lib.jar", {"A.class": CLASS_BYTES})
        assert ZipArchive().has_entry(jar, "META-INF/persistence.xml") is False

    def test_not_a_zip(self, tmp_path: Path) -> None:
        """Garbage file raises ArchiveExtractionError."""
        bogus = tmp_path / "bogus.jar"
        bogus.write_bytes(b"not a zip at all")

        with pytest.raises(ArchiveExtractionError) as exc_info:
            ZipArchive().has_entry(bogus, "META-INF/persistence.xml")

        assert exc_info.value.archive == bogus

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing archive raises ArchiveExtractionError (an OSError)."""
        with pytest.raises(OSError):
            ZipArchive().has_entry(tmp_path / "gone.jar", "META-INF/persistence.xml")


class TestExtract:
    """Tests for ZipArchive.extract()."""

    def test_unpacks_all_entries(self, tmp_path: Path) -> None:
        """Every member lands under target with its relative path."""
        jar = make_persistence_jar(tmp_path / "app.jar", classes=("com/acme/Order.class",))
        target = tmp_path / "app"

        ZipArchive().extract(jar, target)

        assert (target / "META-INF" / "persistence.xml").is_file()
        assert (target / "com" / "acme" / "Order.class").read_bytes() == CLASS_BYTES
        assert jar.is_file()

    def test_escaping_member_stays_inside(self, tmp_path: Path) -> None:
        """Member names with '..' do not escape target."""
        jar = make_jar(tmp_path / "evil.jar", {"../outside.class": CLASS_BYTES})
        target = tmp_path / "sandbox" / "evil"

        ZipArchive().extract(jar, target)

        assert not (tmp_path / "sandbox" / "outside.class").exists()
        assert (target / "outside.class").is_file()

    def test_failure_removes_created_target(self, tmp_path: Path) -> None:
        """Target created for a broken archive is removed again."""
        bogus = tmp_path / "bogus.jar"
        bogus.write_bytes(b"garbage")
        target = tmp_path / "bogus"

        with pytest.raises(ArchiveExtractionError):
            ZipArchive().extract(bogus, target)

        assert not target.exists()

    def test_failure_keeps_existing_target(self, tmp_path: Path) -> None:
        """Pre-existing target is never removed."""
        bogus = tmp_path / "bogus.jar"
        bogus.write_bytes(b"garbage")
        target = tmp_path / "bogus"
        target.mkdir()

        with pytest.raises(ArchiveExtractionError):
            ZipArchive().extract(bogus, target)

        assert target.is_dir()

    def test_unsupported_compression_removes_created_target(self, tmp_path: Path) -> None:
        """Member in an unsupported method (deflate64): wrapped error, no leftover."""
        jar = make_persistence_jar(tmp_path / "d64.jar", classes=("com/acme/Order.class",))
        set_compression_method(jar, "com/acme/Order.class", 9)
        target = tmp_path / "d64"

        assert ZipArchive().has_entry(jar, "META-INF/persistence.xml") is True
        with pytest.raises(ArchiveExtractionError) as exc_info:
            ZipArchive().extract(jar, target)

        assert isinstance(exc_info.value.__cause__, NotImplementedError)
        assert not target.exists()

    def test_truncated_archive_wrapped(self, tmp_path: Path) -> None:
        """Cut-off archive raises ArchiveExtractionError, target removed."""
        jar = make_persistence_jar(tmp_path / "cut.jar")
        jar.write_bytes(jar.read_bytes()[:40])
        target = tmp_path / "cut"

        with pytest.raises(ArchiveExtractionError):
            ZipArchive().extract(jar, target)

        assert not target.exists()
