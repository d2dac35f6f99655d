"""Protocol definitions for the external collaborators.

The bootstrap pipeline never touches processes, files or the console
directly. It goes through these interfaces, which enables:
- Running the whole pipeline against test doubles
- Keeping the decision logic free of I/O details

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for shell command execution."""

    def run(self, command: str, quiet: bool = False) -> int:
        """Execute a shell command and wait for it to exit.

        Args:
            command: Command line to execute through the shell.
            quiet: Suppress the command's output.

        Returns:
            The process exit status.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link, dangling or not.

        Args:
            path: Path to check.

        Returns:
            True if path is a symlink, False otherwise.
        """
        ...

    def list_dir(self, path: Path) -> list[str]:
        """List the entry names of a directory.

        Args:
            path: Directory to list.

        Returns:
            Sorted entry names.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a single file.

        Args:
            src: Source file.
            dst: Destination file.

        Raises:
            OSError: If the copy fails.
        """
        ...


@runtime_checkable
class Notifier(Protocol):
    """Protocol for user-facing notifications.

    Notifications are fire-and-forget; the pipeline never inspects them.
    """

    def show_success(self, message: str) -> None:
        """Report a completed step."""
        ...

    def show_error(self, message: str) -> None:
        """Report a failure."""
        ...

    def show_info(self, message: str) -> None:
        """Report progress."""
        ...

    def show_summary(self, manager: str, installed: dict[str, list[str]]) -> None:
        """Report the packages installed by a run.

        Args:
            manager: Name of the package manager used.
            installed: Packages keyed by dependency kind ("dev", "runtime").
        """
        ...
