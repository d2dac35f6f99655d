"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lint_bootstrap.bootstrap import BootstrapOrchestrator


@dataclass
class AppContext:
    """Container for application dependencies.

    The orchestrator owns every collaborator it needs, so tests can inject
    a double for it alone.
    """

    orchestrator: BootstrapOrchestrator


def create_context(
    assets_dir: Path | None = None,
    project_dir: Path | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        assets_dir: Directory holding the config assets root. Defaults to cwd.
        project_dir: Target project directory. Defaults to cwd.

    Returns:
        Configured AppContext with all dependencies.
    """
    from lint_bootstrap.console import ConsoleNotifier
    from lint_bootstrap.filesystem import RealFileSystem
    from lint_bootstrap.package_managers import PackageManagerResolver
    from lint_bootstrap.runner import ShellCommandRunner

    notifier = ConsoleNotifier()
    resolver = PackageManagerResolver(ShellCommandRunner(), notifier)
    orchestrator = BootstrapOrchestrator.create(
        filesystem=RealFileSystem(),
        notifier=notifier,
        resolver=resolver,
        assets_dir=assets_dir or Path.cwd(),
        project_dir=project_dir or Path.cwd(),
    )

    return AppContext(orchestrator=orchestrator)
