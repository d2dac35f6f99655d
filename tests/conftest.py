"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lint_bootstrap.assets import (
    DEFAULT_ASSETS_ROOT,
    ESLINT_CONFIG,
    ESLINT_FOLDER,
    ESLINT_IGNORE,
    ESLINT_REACT_CONFIG,
    ESLINT_SOLID_CONFIG,
)


class FakeRunner:
    """CommandRunner double that records commands and answers by prefix.

    Probe commands (``which <name>``) succeed only for managers listed in
    ``available``. Any other command returns ``status``.
    """

    def __init__(self, available: set[str] | None = None, status: int = 0) -> None:
        self.available = available or set()
        self.status = status
        self.commands: list[str] = []

    def run(self, command: str, quiet: bool = False) -> int:
        self.commands.append(command)
        verb, _, target = command.partition(" ")
        if verb in ("which", "where"):
            return 0 if target in self.available else 1
        return self.status

    @property
    def probes(self) -> list[str]:
        return [c for c in self.commands if c.startswith(("which ", "where "))]

    @property
    def installs(self) -> list[str]:
        return [c for c in self.commands if not c.startswith(("which ", "where "))]


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """Factory for runners with a custom set of installed managers."""
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner where only npm is installed."""
    return FakeRunner(available={"npm"})


@pytest.fixture
def mock_notifier() -> MagicMock:
    """Create a mock Notifier that records every message."""
    return MagicMock()


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_symlink.return_value = False
    fs.list_dir.return_value = []
    return fs


@pytest.fixture(autouse=True)
def posix_locate(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the POSIX probe command regardless of the host platform."""
    monkeypatch.setattr("lint_bootstrap.package_managers.sys.platform", "linux")


# ============================================================================
# Filesystem Layout Fixtures
# ============================================================================


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Create a complete config assets tree and return its parent dir."""
    base = tmp_path / "tool"
    eslint_dir = base / DEFAULT_ASSETS_ROOT / ESLINT_FOLDER
    eslint_dir.mkdir(parents=True)
    (eslint_dir / ESLINT_CONFIG).write_text("// base\n")
    (eslint_dir / ESLINT_REACT_CONFIG).write_text("// react\n")
    (eslint_dir / ESLINT_SOLID_CONFIG).write_text("// solid\n")
    (eslint_dir / ESLINT_IGNORE).write_text("node_modules\n")
    return base


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create an initialized target project."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "package.json").write_text('{"name": "demo"}\n')
    return project
