"""Tests for discovery/classes.py."""

from pathlib import Path

from deployenhance.application.discovery.classes import collect_class_files
from tests.factories import write_classes


class TestCollectClassFiles:
    """Tests for collect_class_files."""

    def test_collects_recursively(self, tmp_path: Path) -> None:
        """Class files at every depth, as absolute strings."""
        write_classes(tmp_path, "A.class", "com/acme/Order.class", "com/acme/deep/Line.class")

        result = collect_class_files(tmp_path)

        assert set(result) == {
            str(tmp_path / "A.class"),
            str(tmp_path / "com" / "acme" / "Order.class"),
            str(tmp_path / "com" / "acme" / "deep" / "Line.class"),
        }

    def test_ignores_other_files(self, tmp_path: Path) -> None:
        """Only the class extension counts."""
        write_classes(tmp_path, "com/acme/Order.class")
        (tmp_path / "com" / "acme" / "Order.java").write_text("class Order {}")
        (tmp_path / "META-INF").mkdir()
        (tmp_path / "META-INF" / "persistence.xml").write_text("<persistence/>")

        assert collect_class_files(tmp_path) == (str(tmp_path / "com" / "acme" / "Order.class"),)

    def test_lexical_order_per_level(self, tmp_path: Path) -> None:
        """Deterministic depth-first, name-sorted order."""
        write_classes(tmp_path, "b/Z.class", "a/Y.class", "C.class", "a/X.class")

        result = collect_class_files(tmp_path)

        assert result == (
            str(tmp_path / "C.class"),
            str(tmp_path / "a" / "X.class"),
            str(tmp_path / "a" / "Y.class"),
            str(tmp_path / "b" / "Z.class"),
        )

    def test_file_root_contributes_nothing(self, tmp_path: Path) -> None:
        """A file (e.g. a jar) is not a class root."""
        jar = tmp_path / "lib.jar"
        jar.write_bytes(b"PK")

        assert collect_class_files(jar) == ()

    def test_missing_root_contributes_nothing(self, tmp_path: Path) -> None:
        """Nonexistent root yields nothing."""
        assert collect_class_files(tmp_path / "missing") == ()

    def test_directory_named_like_class(self, tmp_path: Path) -> None:
        """Directories ending in .class are walked, not collected."""
        write_classes(tmp_path, "odd.class/Inner.class")

        assert collect_class_files(tmp_path) == (str(tmp_path / "odd.class" / "Inner.class"),)

    def test_custom_extension(self, tmp_path: Path) -> None:
        """Configured extension is used."""
        write_classes(tmp_path, "A.klass", "B.class")

        assert collect_class_files(tmp_path, ".klass") == (str(tmp_path / "A.klass"),)
