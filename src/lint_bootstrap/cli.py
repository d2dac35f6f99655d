"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from lint_bootstrap import __version__
from lint_bootstrap.context import create_context

app = typer.Typer(
    name="lint-bootstrap",
    help="Copy ESLint configs into an existing project and install its dependencies",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"lint-bootstrap v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route diagnostic logging to the console when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def main(
    framework: Annotated[
        str | None,
        typer.Argument(help="Framework variant: react or solid (anything else uses the base config)"),
    ] = None,
    assets_dir: Annotated[
        Path | None,
        typer.Option(
            "--assets-dir",
            "-a",
            envvar="LINT_BOOTSTRAP_ASSETS_DIR",
            help="Directory containing the configs/ assets (defaults to cwd)",
        ),
    ] = None,
    project_dir: Annotated[
        Path | None,
        typer.Option(
            "--project-dir",
            "-C",
            envvar="LINT_BOOTSTRAP_PROJECT_DIR",
            help="Project to bootstrap (defaults to cwd)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Show diagnostic logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    _context=None,
) -> None:
    """Bootstrap ESLint into the project in the current directory."""
    configure_logging(verbose)
    ctx = _context or create_context(assets_dir=assets_dir, project_dir=project_dir)

    code = ctx.orchestrator.run(framework)
    if code != 0:
        raise typer.Exit(code)


if __name__ == "__main__":
    app()
