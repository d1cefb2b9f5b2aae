"""Rich-based progress reporter implementation."""
from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ..core.models import ProcessingStats


class RichProgressReporter:
    """Progress reporter using Rich for terminal output.

    Implements the ProgressReporter protocol with Rich console output.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        console: Console | None = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Enable verbose output.
            quiet: Suppress all non-essential output.
            console: Console to print to (default: stderr).
        """
        self._console = console or Console(stderr=True, soft_wrap=True)
        self._verbose = verbose
        self._quiet = quiet

    # --- Logging Methods ---

    def info(self, message: str) -> None:
        """Log an info message."""
        if not self._quiet:
            self._console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        """Log a success message."""
        if not self._quiet:
            self._console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Log an error message."""
        self._console.print(f"[bold red]Error:[/bold red] {escape(message)}", style="red")

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose:
            self._console.print(f"[dim]  {escape(message)}[/dim]")

    # --- Specialized Output ---

    def print_header(self, title: str) -> None:
        """Print a styled header."""
        if self._quiet:
            return

        text = Text(title, style="bold cyan")
        self._console.print(Panel(text, border_style="cyan"))

    def print_config(self, config_items: dict) -> None:
        """Print configuration as a table."""
        if self._quiet:
            return

        table = Table(title="Configuration", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        for key, value in config_items.items():
            table.add_row(key, escape(str(value)))

        self._console.print(table)

    def print_stats(self, stats: ProcessingStats) -> None:
        """Print processing statistics."""
        if self._quiet:
            return

        table = Table(title="Sorting Complete", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Entries Scanned", str(stats.entries_seen))
        table.add_row("Files Moved", str(stats.files_moved))
        for category, count in stats.by_category.items():
            table.add_row(f"  {category.value}", str(count))
        table.add_row("Left in Place", str(stats.no_extension + stats.unclassified))
        table.add_row("Directories Skipped", str(stats.directories_skipped))

        if stats.collisions_skipped > 0:
            table.add_row("Name Collisions Skipped", str(stats.collisions_skipped))
        if stats.renamed > 0:
            table.add_row("Renamed on Collision", str(stats.renamed))
        if stats.replaced > 0:
            table.add_row("Replaced Existing", str(stats.replaced))

        if stats.elapsed_seconds > 0:
            table.add_row("", "")  # Blank row
            table.add_row("Time Elapsed", f"{stats.elapsed_seconds:.2f}s")

        self._console.print(table)


class QuietProgressReporter:
    """Minimal progress reporter that only shows warnings and errors."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        pass

    def print_header(self, title: str) -> None:
        pass

    def print_config(self, config_items: dict) -> None:
        pass

    def print_stats(self, stats: ProcessingStats) -> None:
        pass
