"""Package manager detection and install commands."""

from __future__ import annotations

import logging
import shlex
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from lint_bootstrap.errors import NoPackageManagerFoundError
from lint_bootstrap.protocols import CommandRunner, Notifier

logger = logging.getLogger(__name__)

DEV_FLAG = "-D"


@dataclass(frozen=True)
class PackageManagerSpec:
    """Static description of a supported package manager.

    Attributes:
        name: Executable name.
        install_verb: Subcommand that adds packages to the project.
    """

    name: str
    install_verb: str


# Priority order: first one present on the host wins
CANDIDATES: tuple[PackageManagerSpec, ...] = (
    PackageManagerSpec(name="pnpm", install_verb="add"),
    PackageManagerSpec(name="yarn", install_verb="add"),
    PackageManagerSpec(name="npm", install_verb="i"),
)


def locate_command(name: str) -> str:
    """Get the host command that checks whether an executable is on PATH."""
    if sys.platform == "win32":
        return f"where {name}"
    return f"which {name}"


class PackageManager:
    """A package manager bound to a command runner."""

    def __init__(self, spec: PackageManagerSpec, runner: CommandRunner) -> None:
        self.spec = spec
        self.runner = runner

    @property
    def name(self) -> str:
        return self.spec.name

    def probe(self) -> bool:
        """Check whether this package manager is installed."""
        return self.runner.run(locate_command(self.name), quiet=True) == 0

    def install_command(self, packages: Sequence[str], dev: bool) -> str:
        """Build the install command line.

        Args:
            packages: Package identifiers to install.
            dev: Install as development dependencies.

        Returns:
            Shell command string.
        """
        parts = [self.name, self.spec.install_verb]
        if dev:
            parts.append(DEV_FLAG)
        parts.extend(shlex.quote(pkg) for pkg in packages)
        return " ".join(parts)

    def install_dev(self, packages: Sequence[str]) -> int:
        """Install packages as development dependencies.

        Returns:
            Exit status of the install command, 0 if there was nothing to install.
        """
        return self._install(packages, dev=True)

    def install_runtime(self, packages: Sequence[str]) -> int:
        """Install packages as runtime dependencies.

        Returns:
            Exit status of the install command, 0 if there was nothing to install.
        """
        return self._install(packages, dev=False)

    def _install(self, packages: Sequence[str], dev: bool) -> int:
        if not packages:
            return 0
        return self.runner.run(self.install_command(packages, dev))


class PackageManagerResolver:
    """Selects the first supported package manager present on the host."""

    def __init__(
        self,
        runner: CommandRunner,
        notifier: Notifier,
        candidates: Sequence[PackageManagerSpec] = CANDIDATES,
    ) -> None:
        """Initialize resolver.

        Args:
            runner: Runner used for probing and for the resolved manager.
            notifier: Sink for the selection notice.
            candidates: Package managers in priority order.
        """
        self.runner = runner
        self.notifier = notifier
        self.candidates = tuple(candidates)

    def resolve(self) -> PackageManager:
        """Probe candidates in order and return the first one found.

        Returns:
            The selected PackageManager.

        Raises:
            NoPackageManagerFoundError: If no candidate is installed.
        """
        for spec in self.candidates:
            manager = PackageManager(spec, self.runner)
            if manager.probe():
                self.notifier.show_info(f"Using {manager.name} as the package manager...")
                return manager
            logger.debug("Package manager '%s' not found", spec.name)

        raise NoPackageManagerFoundError([spec.name for spec in self.candidates])
