"""Bootstrap pipeline: validate, resolve, copy configs, install dependencies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from lint_bootstrap.assets import (
    DEFAULT_ASSET_LAYOUT,
    ESLINT_CONFIG,
    ESLINT_FOLDER,
    ESLINT_IGNORE,
    ConfigFolderSpec,
)
from lint_bootstrap.dependencies import (
    DependencySet,
    Framework,
    compute_dependencies,
    config_variant,
)
from lint_bootstrap.errors import (
    BootstrapError,
    ConfigCopyError,
    InstallCommandFailedError,
    MissingConfigAssetsError,
    UninitializedProjectError,
)
from lint_bootstrap.package_managers import PackageManager, PackageManagerResolver
from lint_bootstrap.protocols import FileSystem, Notifier
from lint_bootstrap.validation import ConfigAssetValidator

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class BootstrapPlan:
    """What a run will copy and install for the selected framework.

    Attributes:
        framework: Selected framework variant.
        dependencies: Packages to install.
        config_source: Asset to copy as the project's ESLint config.
        ignore_source: Asset to copy as the project's ignore file.
    """

    framework: Framework
    dependencies: DependencySet
    config_source: Path
    ignore_source: Path


class BootstrapOrchestrator:
    """Runs the bootstrap pipeline against a target project.

    Each step is a gate: a failure ends the run before any later step.
    Use factory method `create()` for production instantiation.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        notifier: Notifier,
        validator: ConfigAssetValidator,
        resolver: PackageManagerResolver,
        assets_dir: Path,
        project_dir: Path,
        layout: ConfigFolderSpec = DEFAULT_ASSET_LAYOUT,
    ) -> None:
        """Initialize orchestrator with required dependencies.

        Args:
            filesystem: Filesystem abstraction.
            notifier: Sink for user-facing messages.
            validator: Config asset validator.
            resolver: Package manager resolver.
            assets_dir: Directory containing the assets root.
            project_dir: Target project directory.
            layout: Required asset layout.
        """
        self.fs = filesystem
        self.notifier = notifier
        self.validator = validator
        self.resolver = resolver
        self.assets_dir = assets_dir
        self.project_dir = project_dir
        self.layout = layout

    @classmethod
    def create(
        cls,
        filesystem: FileSystem,
        notifier: Notifier,
        resolver: PackageManagerResolver,
        assets_dir: Path,
        project_dir: Path,
        layout: ConfigFolderSpec = DEFAULT_ASSET_LAYOUT,
    ) -> BootstrapOrchestrator:
        """Factory method for production instantiation.

        Builds the validator from the given filesystem and notifier.

        Returns:
            Configured BootstrapOrchestrator instance.
        """
        return cls(
            filesystem=filesystem,
            notifier=notifier,
            validator=ConfigAssetValidator(filesystem, notifier),
            resolver=resolver,
            assets_dir=assets_dir,
            project_dir=project_dir,
            layout=layout,
        )

    @property
    def assets_root(self) -> Path:
        return self.assets_dir / self.layout.root_name

    def plan(self, framework: Framework) -> BootstrapPlan:
        """Compute the packages and config sources for a framework."""
        eslint_dir = self.assets_root / ESLINT_FOLDER
        return BootstrapPlan(
            framework=framework,
            dependencies=compute_dependencies(framework),
            config_source=eslint_dir / config_variant(framework),
            ignore_source=eslint_dir / ESLINT_IGNORE,
        )

    def run(self, framework: Framework | str | None = None) -> int:
        """Run the full pipeline.

        Args:
            framework: Framework selector. Strings are parsed
                case-insensitively; unknown values select the base config.

        Returns:
            Process exit code: 0 on success, 1 on any failure.
        """
        if not isinstance(framework, Framework):
            framework = Framework.parse(framework)

        try:
            self._run(framework)
        except BootstrapError as e:
            self.notifier.show_error(str(e))
            if e.hint:
                self.notifier.show_info(e.hint)
            return EXIT_FAILURE
        except OSError as e:
            logger.debug("Bootstrap aborted by I/O error", exc_info=True)
            self.notifier.show_error(f"Filesystem error: {e}")
            return EXIT_FAILURE
        return EXIT_OK

    def _run(self, framework: Framework) -> None:
        result = self.validator.validate(self.assets_root, self.layout.subfolders)
        if not result:
            raise MissingConfigAssetsError(result.missing_paths)

        manager = self.resolver.resolve()
        self._check_manifest()

        plan = self.plan(framework)
        logger.debug("Framework '%s' uses %s", framework.value, plan.config_source.name)

        self._copy_if_absent(plan.config_source, self.project_dir / ESLINT_CONFIG)
        self._copy_if_absent(plan.ignore_source, self.project_dir / ESLINT_IGNORE)

        installed = self._install(manager, plan.dependencies)
        self.notifier.show_summary(manager.name, installed)

    def _check_manifest(self) -> None:
        manifest = self.project_dir / MANIFEST_FILE
        if not self.fs.exists(manifest):
            raise UninitializedProjectError(manifest)

    def _copy_if_absent(self, src: Path, dst: Path) -> bool:
        """Copy src to dst unless dst already exists.

        A symlink at dst counts as existing even when its target does not,
        so the copy never writes through a link.

        Returns:
            True if the file was copied.

        Raises:
            ConfigCopyError: If the copy fails.
        """
        if self.fs.exists(dst) or self.fs.is_symlink(dst):
            logger.debug("%s already exists, leaving it untouched", dst)
            return False

        self.notifier.show_info(f"No {dst.name} detected. Copying one...")
        try:
            self.fs.copy_file(src, dst)
        except OSError as e:
            raise ConfigCopyError(dst, e) from e
        self.notifier.show_success(f"Copied {dst.name}.")
        return True

    def _install(self, manager: PackageManager, deps: DependencySet) -> dict[str, list[str]]:
        """Install non-empty dependency sets.

        Returns:
            Installed packages keyed by dependency kind.

        Raises:
            InstallCommandFailedError: If the package manager exits non-zero.
        """
        installed: dict[str, list[str]] = {}

        if deps.dev:
            status = manager.install_dev(deps.dev)
            if status != 0:
                raise InstallCommandFailedError(
                    manager.name, manager.install_command(deps.dev, dev=True), status
                )
            installed["dev"] = list(deps.dev)

        if deps.runtime:
            status = manager.install_runtime(deps.runtime)
            if status != 0:
                raise InstallCommandFailedError(
                    manager.name, manager.install_command(deps.runtime, dev=False), status
                )
            installed["runtime"] = list(deps.runtime)

        return installed
