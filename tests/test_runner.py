"""Tests for shell command runner."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

from lint_bootstrap.protocols import CommandRunner
from lint_bootstrap.runner import SPAWN_FAILED_STATUS, ShellCommandRunner


class TestShellCommandRunner:
    """Tests for ShellCommandRunner."""

    def test_satisfies_protocol(self) -> None:
        """ShellCommandRunner is structurally a CommandRunner."""
        assert isinstance(ShellCommandRunner(), CommandRunner)

    @patch("lint_bootstrap.runner.subprocess.run")
    def test_returns_exit_status(self, mock_run: MagicMock) -> None:
        """Exit status of the child process is returned."""
        mock_run.return_value = subprocess.CompletedProcess("npm i", 3)

        assert ShellCommandRunner().run("npm i") == 3
        mock_run.assert_called_once_with("npm i", shell=True, check=False)

    @patch("lint_bootstrap.runner.subprocess.run")
    def test_quiet_discards_output(self, mock_run: MagicMock) -> None:
        """Quiet mode sends stdout and stderr to devnull."""
        mock_run.return_value = subprocess.CompletedProcess("which npm", 0)

        ShellCommandRunner().run("which npm", quiet=True)

        _, kwargs = mock_run.call_args
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL

    @patch("lint_bootstrap.runner.subprocess.run")
    def test_spawn_failure(self, mock_run: MagicMock) -> None:
        """A shell that cannot be started reports the spawn failure status."""
        mock_run.side_effect = OSError("no shell")

        assert ShellCommandRunner().run("npm i") == SPAWN_FAILED_STATUS

    def test_real_command(self) -> None:
        """A real shell command reports its exit code."""
        runner = ShellCommandRunner()

        assert runner.run("exit 0", quiet=True) == 0
        assert runner.run("exit 4", quiet=True) == 4
