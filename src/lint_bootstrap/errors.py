"""Error taxonomy for the bootstrap pipeline.

Every error is terminal to a run. The orchestrator reports it and exits
with status 1.
"""

from __future__ import annotations

from pathlib import Path


class BootstrapError(Exception):
    """Base class for bootstrap failures.

    Attributes:
        hint: Optional follow-up guidance shown after the error message.
    """

    hint: str | None = None


class MissingConfigAssetsError(BootstrapError):
    """One or more bundled config assets are missing."""

    def __init__(self, missing: list[Path]) -> None:
        self.missing = missing
        super().__init__(f"{len(missing)} required config asset(s) missing")


class NoPackageManagerFoundError(BootstrapError):
    """None of the supported package managers is present on the host."""

    def __init__(self, candidates: list[str]) -> None:
        self.candidates = candidates
        super().__init__(
            "No package manager was found "
            f"(tried: {', '.join(candidates)}). Do you have Node.js installed?"
        )


class UninitializedProjectError(BootstrapError):
    """The target project has no package manifest."""

    hint = "For frontend projects, try initializing the project using: `npx create-vite`"

    def __init__(self, manifest: Path) -> None:
        self.manifest = manifest
        super().__init__(
            f"No {manifest.name} detected. "
            "Please initialize your project before proceeding."
        )


class InstallCommandFailedError(BootstrapError):
    """The package manager exited with a non-zero status."""

    def __init__(self, manager: str, command: str, status: int) -> None:
        self.manager = manager
        self.command = command
        self.status = status
        super().__init__(f"{manager} exited with status {status}: {command}")


class ConfigCopyError(BootstrapError):
    """A config file could not be copied into the project."""

    def __init__(self, destination: Path, reason: OSError) -> None:
        self.destination = destination
        self.reason = reason
        super().__init__(f"Failed to copy {destination.name}: {reason}")
