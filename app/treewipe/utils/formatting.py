"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from treewipe.core.theme import get_theme
from treewipe.models.result import DeletionResult, DeletionStatus


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_results_table(title: str = "Deletion Results") -> Table:
    """Create a pre-configured table for deletion results.

    Args:
        title: Table title.

    Returns:
        Rich Table with Path, Status and Details columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold", overflow="fold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")
    return table


def format_status(result: DeletionResult) -> str:
    """Format a deletion status with color markup.

    Args:
        result: The result to format.

    Returns:
        Rich markup string for status display.
    """
    if result.dry_run and result.succeeded:
        return "[info]dry-run[/]"
    if result.status == DeletionStatus.SUCCEEDED:
        return "[deleted]deleted[/]"
    if result.status == DeletionStatus.SKIPPED_NONEXISTENT:
        return "[skipped]missing[/]"
    return "[failed]failed[/]"


def print_info(message: str) -> None:
    """Print an info message. Messages are plain text, never markup."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    console.print(f"[success]{escape(message)}[/]")
