"""Layout of the bundled linter configuration assets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Root directory holding the bundled assets, relative to the assets dir
DEFAULT_ASSETS_ROOT = "configs"

ESLINT_FOLDER = "eslint"
ESLINT_CONFIG = ".eslintrc.cjs"
ESLINT_REACT_CONFIG = ".eslintrc.react.cjs"
ESLINT_SOLID_CONFIG = ".eslintrc.solid.cjs"
ESLINT_IGNORE = ".eslintignore"


class SubfolderSpec(BaseModel):
    """A required asset subfolder and the files it must contain."""

    model_config = ConfigDict(frozen=True)

    name: str
    required_files: frozenset[str] = Field(default_factory=frozenset)


class ConfigFolderSpec(BaseModel):
    """The full asset tree checked before a bootstrap run."""

    model_config = ConfigDict(frozen=True)

    root_name: str = DEFAULT_ASSETS_ROOT
    subfolders: tuple[SubfolderSpec, ...] = ()


DEFAULT_ASSET_LAYOUT = ConfigFolderSpec(
    root_name=DEFAULT_ASSETS_ROOT,
    subfolders=(
        SubfolderSpec(
            name=ESLINT_FOLDER,
            required_files=frozenset(
                {ESLINT_CONFIG, ESLINT_REACT_CONFIG, ESLINT_SOLID_CONFIG, ESLINT_IGNORE}
            ),
        ),
    ),
)
