"""Console output for bootstrap runs."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table


class ConsoleNotifier:
    """Prints notifications to the terminal.

    Satisfies the Notifier protocol structurally.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize notifier.

        Args:
            console: Console to print to. Defaults to a new stdout console.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]\u2713[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]\u2717[/red] {message}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {message}")

    def show_summary(self, manager: str, installed: dict[str, list[str]]) -> None:
        """Display installed packages table.

        Args:
            manager: Package manager used for the install.
            installed: Packages keyed by dependency kind.
        """
        rows = [(kind, pkg) for kind, packages in installed.items() for pkg in packages]
        if not rows:
            self.console.print("[yellow]No packages installed[/yellow]")
            return

        table = Table(title=f"Installed with {manager}")
        table.add_column("Package", style="cyan")
        table.add_column("Kind")

        for kind, pkg in rows:
            table.add_row(pkg, kind)

        self.console.print(table)
