"""Filesystem abstraction for testability.

This module provides a filesystem abstraction that enables testing
without real I/O operations. The RealFileSystem implementation
wraps standard library operations.
"""

from __future__ import annotations

import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link, even a dangling one."""
        return path.is_symlink()

    def list_dir(self, path: Path) -> list[str]:
        """List the entry names of a directory."""
        return sorted(entry.name for entry in path.iterdir())

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file, preserving its permission bits."""
        shutil.copy2(src, dst)
