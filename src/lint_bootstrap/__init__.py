"""Bootstrap ESLint configuration and dependencies into an existing project."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from lint_bootstrap.protocols import (
    CommandRunner,
    FileSystem,
    Notifier,
)

__all__ = [
    "__version__",
    "CommandRunner",
    "FileSystem",
    "Notifier",
]
