"""Validation of the bundled config assets.

Validation is exhaustive rather than fail-fast: every missing subfolder
and file is collected so the user can fix them all in one pass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from lint_bootstrap.assets import SubfolderSpec
from lint_bootstrap.protocols import FileSystem, Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissingAsset:
    """A required asset that was not found.

    Attributes:
        kind: One of "root", "folder" or "file".
        path: The expected location.
    """

    kind: str
    path: Path

    def describe(self) -> str:
        """Human-readable description of the missing asset."""
        if self.kind == "file":
            return f"Missing config file: {self.path}"
        if self.kind == "folder":
            return f"Missing config folder: {self.path}"
        return f"Config assets root not found: {self.path}"


class ValidationResult:
    """Result of validating the config asset tree."""

    __slots__ = ("missing", "valid")

    def __init__(self, missing: list[MissingAsset] | None = None) -> None:
        """Initialize validation result.

        Args:
            missing: Assets found to be missing, in discovery order.
        """
        self.missing = missing or []
        self.valid = len(self.missing) == 0

    def __bool__(self) -> bool:
        return self.valid

    @property
    def missing_paths(self) -> list[Path]:
        """Paths of all missing assets."""
        return [m.path for m in self.missing]


class ConfigAssetValidator:
    """Checks that the config asset tree is complete before a run."""

    def __init__(self, filesystem: FileSystem, notifier: Notifier) -> None:
        """Initialize validator.

        Args:
            filesystem: Filesystem abstraction used for all checks.
            notifier: Sink for per-asset failure reports.
        """
        self.fs = filesystem
        self.notifier = notifier

    def validate(self, root: Path, subfolders: Sequence[SubfolderSpec]) -> ValidationResult:
        """Validate the asset tree under root.

        A missing root is reported on its own since it usually means the
        tool is being run from the wrong directory. A missing subfolder
        skips the file checks for that subfolder. A required file that is
        actually a directory counts as missing.

        Args:
            root: Assets root directory.
            subfolders: Required subfolders and their files.

        Returns:
            ValidationResult listing every missing asset.
        """
        if not self.fs.is_dir(root):
            missing = MissingAsset("root", root)
            self.notifier.show_error(
                f"{missing.describe()}. Are you running from the right directory?"
            )
            return ValidationResult([missing])

        failures: list[MissingAsset] = []
        for spec in subfolders:
            folder = root / spec.name
            if not self.fs.is_dir(folder):
                failures.append(MissingAsset("folder", folder))
                continue

            folder_failures = [
                MissingAsset("file", folder / filename)
                for filename in sorted(spec.required_files)
                if not self._is_file(folder / filename)
            ]
            if folder_failures:
                logger.debug("Present in %s: %s", folder, self.fs.list_dir(folder))
            failures.extend(folder_failures)

        for failure in failures:
            self.notifier.show_error(failure.describe())

        return ValidationResult(failures)

    def _is_file(self, path: Path) -> bool:
        return self.fs.exists(path) and not self.fs.is_dir(path)
