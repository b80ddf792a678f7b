"""Unit tests for identity assignment."""

import os

from syndox.core.identity import (
    create_file_hash_item,
    create_files_hash,
    resolve_path_from_cwd,
)


class TestResolvePath:
    """Tests for full path resolution."""

    def test_joins_with_cwd(self) -> None:
        """Test that relative paths are joined to the working directory."""
        assert resolve_path_from_cwd("src/a.py", "/work") == os.path.normpath("/work/src/a.py")

    def test_normalizes_parent_segments(self) -> None:
        """Test that '..' segments are collapsed."""
        assert resolve_path_from_cwd("../lib/x.py", "/work/app") == os.path.normpath(
            "/work/lib/x.py"
        )

    def test_absolute_path_is_kept(self) -> None:
        """Test that absolute paths ignore the working directory."""
        assert resolve_path_from_cwd("/abs/a.py", "/work") == os.path.normpath("/abs/a.py")

    def test_defaults_to_process_cwd(self) -> None:
        """Test that omitting cwd uses os.getcwd()."""
        assert resolve_path_from_cwd("a.py") == os.path.join(os.getcwd(), "a.py")


class TestCreateFileHashItem:
    """Tests for single item creation."""

    def test_fields(self) -> None:
        """Test that a new item carries index, full path and empty content."""
        item = create_file_hash_item("src/a.py", cwd="/work")

        assert item.index == "src/a.py"
        assert item.full_path == os.path.normpath("/work/src/a.py")
        assert item.data == ""
        assert item.ast == {}
        assert item.id

    def test_ids_are_unique(self) -> None:
        """Test that each call generates a different identifier."""
        ids = {create_file_hash_item("src/a.py", cwd="/work").id for _ in range(50)}
        assert len(ids) == 50


class TestCreateFilesHash:
    """Tests for building a FileHash."""

    def test_keys_are_paths(self) -> None:
        """Test that the map has exactly one entry per path."""
        file_hash = create_files_hash(["src/a.js", "src/b.js"], cwd="/work")

        assert list(file_hash) == ["src/a.js", "src/b.js"]
        assert file_hash["src/b.js"].index == "src/b.js"

    def test_ids_regenerate_every_call(self) -> None:
        """Test that identifiers are not reused between calls."""
        first = create_files_hash(["src/a.js"], cwd="/work")
        second = create_files_hash(["src/a.js"], cwd="/work")

        assert first["src/a.js"].id != second["src/a.js"].id
        assert first["src/a.js"].full_path == second["src/a.js"].full_path

    def test_empty(self) -> None:
        """Test that no paths produce an empty map."""
        assert create_files_hash([]) == {}
