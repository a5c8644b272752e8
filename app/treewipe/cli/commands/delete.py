"""Single-entry deletion commands.

This module provides `treewipe delete` for removing one file or empty
directory, and `treewipe safe-delete` for the existence-checked variant.
"""

from pathlib import Path
from typing import Annotated

import typer

from treewipe.core.config import require_config
from treewipe.core.state import record_deletion
from treewipe.eraser.deleter import delete_entry, safe_delete
from treewipe.errors import DeletionError
from treewipe.models.result import DeletionStatus
from treewipe.utils.formatting import print_error, print_info, print_success, print_warning


def delete(
    path: Annotated[
        Path,
        typer.Argument(help="File, symlink or empty directory to delete."),
    ],
    tolerant: Annotated[
        bool,
        typer.Option(
            "--tolerant",
            "-t",
            help="Report failure without an error message.",
        ),
    ] = False,
) -> None:
    """Delete a single file or empty directory.

    Fails if the path does not exist or is a non-empty directory.

    Examples:
        treewipe delete build.log
        treewipe delete --tolerant maybe-there.tmp
    """
    config = require_config()
    path_str = str(path)

    try:
        deleted = delete_entry(path_str, tolerant=tolerant)
    except DeletionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not deleted:
        print_warning(f"Not deleted: {path_str}")
        raise typer.Exit(code=1)

    print_success(f"Deleted {path_str}")
    _record(path_str, "treewipe delete", enabled=config.record_history)


def safe_delete_command(
    path: Annotated[
        Path,
        typer.Argument(help="File, symlink or empty directory to delete if present."),
    ],
) -> None:
    """Delete a path only if it exists.

    A missing path is not an error. Any other failure is reported
    and exits with status 1.

    Examples:
        treewipe safe-delete stale.lock
    """
    config = require_config()
    result = safe_delete(path)

    if result.status == DeletionStatus.SKIPPED_NONEXISTENT:
        print_info(f"Nothing to delete: {result.path} does not exist.")
        return

    if result.failed:
        print_error(result.error or f"Cannot delete {result.path}")
        raise typer.Exit(code=1)

    print_success(f"Deleted {result.path}")
    _record(result.path, "treewipe safe-delete", enabled=config.record_history)


def _record(path: str, command: str, *, enabled: bool) -> None:
    """Append a deletion to history, warning instead of failing."""
    if not enabled:
        return
    try:
        record_deletion(path, command=command)
    except (OSError, RuntimeError) as e:
        print_warning(f"Could not record to history: {e}")
