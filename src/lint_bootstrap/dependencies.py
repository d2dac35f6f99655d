"""Framework selection and dependency set computation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lint_bootstrap.assets import ESLINT_CONFIG, ESLINT_REACT_CONFIG, ESLINT_SOLID_CONFIG

BASE_DEV_PACKAGES: tuple[str, ...] = (
    "eslint",
    "eslint-define-config",
    "eslint-plugin-import",
    "eslint-plugin-promise",
    "eslint-plugin-simple-import-sort",
    "@typescript-eslint/eslint-plugin",
    "@typescript-eslint/parser",
)

BASE_RUNTIME_PACKAGES: tuple[str, ...] = ()


class Framework(str, Enum):
    """Framework variant selected on the command line."""

    NONE = "none"
    REACT = "react"
    SOLID = "solid"

    @classmethod
    def parse(cls, value: str | None) -> Framework:
        """Parse a selector case-insensitively.

        Unrecognized values, including typos, select the base variant.
        """
        if not value:
            return cls.NONE
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NONE


FRAMEWORK_DEV_PACKAGES: dict[Framework, tuple[str, ...]] = {
    Framework.NONE: (),
    Framework.REACT: (
        "eslint-plugin-jsx-a11y",
        "eslint-plugin-react",
        "eslint-plugin-react-hooks",
    ),
    Framework.SOLID: (
        "eslint-plugin-jsx-a11y",
        "eslint-plugin-solid",
    ),
}

CONFIG_VARIANTS: dict[Framework, str] = {
    Framework.NONE: ESLINT_CONFIG,
    Framework.REACT: ESLINT_REACT_CONFIG,
    Framework.SOLID: ESLINT_SOLID_CONFIG,
}


@dataclass
class DependencySet:
    """Packages to install, split by dependency kind."""

    dev: list[str] = field(default_factory=list)
    runtime: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if len(set(self.dev)) != len(self.dev):
            raise ValueError("dev packages contain duplicates")
        if len(set(self.runtime)) != len(self.runtime):
            raise ValueError("runtime packages contain duplicates")
        if set(self.dev) & set(self.runtime):
            raise ValueError("a package cannot be both a dev and a runtime dependency")


def compute_dependencies(framework: Framework) -> DependencySet:
    """Build the dependency set for a framework.

    Args:
        framework: Selected framework variant.

    Returns:
        Base packages plus the framework-specific lint plugins.
    """
    return DependencySet(
        dev=[*BASE_DEV_PACKAGES, *FRAMEWORK_DEV_PACKAGES[framework]],
        runtime=list(BASE_RUNTIME_PACKAGES),
    )


def config_variant(framework: Framework) -> str:
    """Get the asset filename of the config variant for a framework."""
    return CONFIG_VARIANTS[framework]
