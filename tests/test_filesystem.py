"""Tests for filesystem abstraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from lint_bootstrap.filesystem import RealFileSystem
from lint_bootstrap.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """RealFileSystem is structurally a FileSystem."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_exists_true(self, tmp_path: Path) -> None:
        """Test exists returns True for existing path."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(test_file) is True

    def test_exists_false(self, tmp_path: Path) -> None:
        """Test exists returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.exists(tmp_path / "missing.txt") is False

    def test_is_dir_true(self, tmp_path: Path) -> None:
        """Test is_dir returns True for directory."""
        fs = RealFileSystem()
        test_dir = tmp_path / "subdir"
        test_dir.mkdir()

        assert fs.is_dir(test_dir) is True

    def test_is_dir_false_for_file(self, tmp_path: Path) -> None:
        """Test is_dir returns False for file."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_dir(test_file) is False

    def test_is_dir_false_for_missing(self, tmp_path: Path) -> None:
        """Test is_dir returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.is_dir(tmp_path / "missing") is False

    def test_is_symlink_dangling(self, tmp_path: Path) -> None:
        """Test is_symlink is True for a link whose target is missing."""
        fs = RealFileSystem()
        link = tmp_path / "link.cjs"
        link.symlink_to(tmp_path / "missing.cjs")

        assert fs.exists(link) is False
        assert fs.is_symlink(link) is True

    def test_is_symlink_false_for_file(self, tmp_path: Path) -> None:
        """Test is_symlink returns False for a regular file."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_symlink(test_file) is False

    def test_list_dir_sorted(self, tmp_path: Path) -> None:
        """Test list_dir returns sorted entry names."""
        fs = RealFileSystem()
        (tmp_path / "b.cjs").touch()
        (tmp_path / ".eslintignore").touch()
        (tmp_path / "a").mkdir()

        assert fs.list_dir(tmp_path) == [".eslintignore", "a", "b.cjs"]

    def test_copy_file(self, tmp_path: Path) -> None:
        """Test copying a file."""
        fs = RealFileSystem()
        src = tmp_path / "src.cjs"
        src.write_text("module.exports = {};\n")
        dst = tmp_path / "dst.cjs"

        fs.copy_file(src, dst)

        assert dst.read_text() == "module.exports = {};\n"

    def test_copy_file_missing_source_raises(self, tmp_path: Path) -> None:
        """Test copying a non-existent file raises an OSError."""
        fs = RealFileSystem()

        with pytest.raises(OSError):
            fs.copy_file(tmp_path / "missing.cjs", tmp_path / "dst.cjs")
