"""Shell command execution."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

# Exit status reported when the shell itself could not be started
SPAWN_FAILED_STATUS = 127


class ShellCommandRunner:
    """Runs commands through the system shell and reports their exit status.

    Satisfies the CommandRunner protocol structurally.
    """

    def run(self, command: str, quiet: bool = False) -> int:
        """Execute a shell command and wait for it to exit.

        Args:
            command: Command line to execute.
            quiet: Discard the command's output instead of inheriting
                the terminal.

        Returns:
            The process exit status.
        """
        logger.debug("Running: %s", command)
        kwargs = {}
        if quiet:
            kwargs["stdout"] = subprocess.DEVNULL
            kwargs["stderr"] = subprocess.DEVNULL
        try:
            completed = subprocess.run(command, shell=True, check=False, **kwargs)
        except OSError as e:
            logger.debug("Could not spawn '%s': %s", command, e)
            return SPAWN_FAILED_STATUS
        logger.debug("'%s' exited with status %d", command, completed.returncode)
        return completed.returncode
