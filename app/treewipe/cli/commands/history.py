"""`treewipe history`: list what earlier runs removed."""

import json
from datetime import datetime
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from treewipe.core.state import StateManager
from treewipe.models.history import HistoryEntry
from treewipe.utils.formatting import console, print_info

app = typer.Typer(
    name="history",
    help="View history of deletions.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def history(
    ctx: typer.Context,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of entries to show.",
        ),
    ] = 20,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show history of deletions.

    Examples:
        treewipe history            # Show last 20 entries
        treewipe history -n 50      # Show last 50 entries
        treewipe history --json     # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    entries = StateManager().get_history(limit=limit)

    if not entries:
        print_info("No history entries found.")
        return

    if json_output:
        typer.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
    else:
        _print_table(entries)


def _print_table(entries: list[HistoryEntry]) -> None:
    table = Table(title="Deletion History")
    for column, style in (
        ("ID", "dim"),
        ("When", "info"),
        ("Action", "header"),
        ("Paths", "text"),
        ("Complete?", "warning"),
    ):
        table.add_column(column, style=style)

    for entry in entries:
        table.add_row(
            entry.id[:8],
            _format_timestamp(entry.timestamp),
            entry.action_type.value,
            escape(_summarize_paths(entry.items)),
            "[success]Yes[/]" if entry.success else "[error]No[/]",
        )

    console.print(table)


def _summarize_paths(paths: tuple[str, ...], shown: int = 3) -> str:
    """Join the first few paths, noting how many were left out."""
    summary = ", ".join(paths[:shown])
    hidden = len(paths) - shown
    return f"{summary} (+{hidden} more)" if hidden > 0 else summary


def _format_timestamp(iso_timestamp: str) -> str:
    """Render an ISO timestamp in local time as YYYY-MM-DD HH:MM."""
    return datetime.fromisoformat(iso_timestamp).astimezone().strftime("%Y-%m-%d %H:%M")
