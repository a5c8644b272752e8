"""Recursive erase command.

Provides `treewipe erase` to remove one or more directory trees,
with a deletion plan, confirmation prompt, dry-run and JSON output.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from treewipe.core.config import require_config
from treewipe.core.state import record_erasures
from treewipe.eraser.operator import EraseOperator
from treewipe.models.result import EraseReport
from treewipe.utils.formatting import (
    console,
    create_results_table,
    format_status,
    print_info,
    print_success,
    print_warning,
)


class OutputFormat(str, Enum):
    """Output format options for erase results."""

    TABLE = "table"
    JSON = "json"


def erase(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Directory trees to erase."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    keep_dirs: Annotated[
        bool,
        typer.Option(
            "--keep-dirs",
            help="Delete files only; leave nested directories in place.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Erase directory trees, files first, then directories bottom-up.

    Entries that cannot be deleted are reported and never stop the rest
    of the run. Exits with status 1 unless every tree was fully removed.

    Examples:
        treewipe erase build/ dist/
        treewipe erase --dry-run ~/.cache/old-app
        treewipe erase -y --format json tmp/
    """
    config = require_config()
    roots = [str(p) for p in paths]
    prune = config.prune_directories and not keep_dirs

    if not dry_run and not yes and config.confirm:
        console.print("[bold_header]Trees to erase:[/]")
        for root in roots:
            console.print(f"  {escape(root)}")
        confirmed = typer.confirm(
            f"\nProceed with erasing {len(roots)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    operator = EraseOperator(
        dry_run=dry_run,
        prune_directories=prune,
        extra_protected=config.protected_paths,
    )
    reports = operator.erase(roots)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps([r.to_dict() for r in reports], indent=2))
    else:
        _print_reports(reports)

    if not dry_run and config.record_history:
        try:
            if record_erasures(reports) is not None and output_format == OutputFormat.TABLE:
                print_info("Erasures recorded to history.")
        except (OSError, RuntimeError) as e:
            print_warning(f"Could not record to history: {e}")

    if any(not r.complete for r in reports):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_reports(reports: list[EraseReport]) -> None:
    """Display erase reports as a table followed by a summary."""
    dry_run = any(r.dry_run for r in reports)
    table = create_results_table("Erase Results (dry-run)" if dry_run else "Erase Results")

    for report in reports:
        counts = f"{report.files_deleted} files, {report.directories_deleted} dirs"
        detail = counts if report.result.succeeded else (report.result.error or "Not removed")
        table.add_row(escape(report.root), format_status(report.result), escape(detail))
        for failure in report.failures:
            table.add_row(
                f"  {escape(failure.path)}", format_status(failure), escape(failure.error or "")
            )

    console.print(table)

    removed = sum(1 for r in reports if r.complete)
    incomplete = len(reports) - removed

    if dry_run:
        print_info(f"Dry-run: {removed} tree(s) would be erased.")
    elif incomplete:
        print_warning(f"{removed} erased, {incomplete} not fully removed")
    else:
        print_success(f"All {removed} tree(s) erased.")
