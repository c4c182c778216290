"""Tests for domain/model/layout.py."""

from pathlib import Path

import pytest

from deployenhance.domain.model.layout import (
    base_directory_for,
    extraction_dir_for,
    is_web_classes_dir,
)


class TestBaseDirectoryFor:
    """Tests for base_directory_for."""

    def test_metadata_layout_strips_meta_inf(self) -> None:
        """Exploded/extracted artifact: base is the artifact root."""
        assert base_directory_for(Path("/deploy/app/META-INF/persistence.xml")) == Path(
            "/deploy/app"
        )

    def test_metadata_layout_inside_web_classes(self) -> None:
        """Nested metadata descriptor: base is WEB-INF/classes."""
        descriptor = Path("/deploy/web/WEB-INF/classes/META-INF/persistence.xml")

        assert base_directory_for(descriptor) == Path("/deploy/web/WEB-INF/classes")

    def test_web_layout_strips_web_inf(self) -> None:
        """Sibling descriptor: base is the web application root."""
        assert base_directory_for(Path("/deploy/web/WEB-INF/persistence.xml")) == Path(
            "/deploy/web"
        )

    def test_unknown_layout_raises(self) -> None:
        """Descriptor outside both layouts is rejected."""
        with pytest.raises(ValueError, match="known layout"):
            base_directory_for(Path("/deploy/app/persistence.xml"))

    def test_similar_directory_name_not_matched(self) -> None:
        """XMETA-INF is not META-INF."""
        with pytest.raises(ValueError, match="known layout"):
            base_directory_for(Path("/deploy/app/XMETA-INF/persistence.xml"))


class TestExtractionDirFor:
    """Tests for extraction_dir_for."""

    def test_strips_extension(self) -> None:
        """app.jar -> app, same parent."""
        assert extraction_dir_for(Path("/deploy/app.jar")) == Path("/deploy/app")

    def test_only_last_extension(self) -> None:
        """Dots inside the name are kept."""
        assert extraction_dir_for(Path("/deploy/model-1.2.jar")) == Path("/deploy/model-1.2")

    def test_custom_extension(self) -> None:
        """Configured extension is stripped."""
        assert extraction_dir_for(Path("/deploy/app.par"), ".par") == Path("/deploy/app")

    def test_wrong_extension_raises(self) -> None:
        """Name not ending with extension is rejected."""
        with pytest.raises(ValueError, match="must end with"):
            extraction_dir_for(Path("/deploy/app.zip"))

    def test_bare_extension_raises(self) -> None:
        """'.jar' alone would map to an empty name."""
        with pytest.raises(ValueError, match="must end with"):
            extraction_dir_for(Path("/deploy/.jar"))


class TestIsWebClassesDir:
    """Tests for is_web_classes_dir."""

    def test_web_classes(self) -> None:
        """WEB-INF/classes is recognised."""
        assert is_web_classes_dir(Path("/deploy/web/WEB-INF/classes"))

    def test_plain_classes(self) -> None:
        """classes outside WEB-INF is not."""
        assert not is_web_classes_dir(Path("/deploy/target/classes"))

    def test_web_inf_itself(self) -> None:
        """WEB-INF is not its classes directory."""
        assert not is_web_classes_dir(Path("/deploy/web/WEB-INF"))
