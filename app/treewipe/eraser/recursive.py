"""Recursive directory eraser.

Empties a directory tree entry by entry and removes it bottom-up.
The whole tree is enumerated before the first deletion so traversal
never observes a directory it is in the middle of emptying.
"""

import logging

from treewipe.eraser.deleter import PathArg, coerce_path, resolve_backend, safe_delete
from treewipe.errors import from_os_error
from treewipe.filesystem.backend import FilesystemBackend
from treewipe.filesystem.models import FilesystemEntry
from treewipe.models.result import DeletionResult, EraseReport, ErrorKind

logger = logging.getLogger(__name__)


def erase_tree(
    root: PathArg,
    *,
    backend: FilesystemBackend | None = None,
    prune_directories: bool = True,
    dry_run: bool = False,
) -> EraseReport:
    """Remove a directory and everything beneath it.

    Every non-directory entry is deleted first, then (when
    prune_directories is set) every nested directory deepest-first,
    and finally the root. Individual failures never abort the run;
    they are collected in the report's ``failures``. A failed nested
    deletion leaves its parent non-empty, so the root removal then
    fails too.

    With prune_directories=False only files are deleted before the
    root, so a root with subdirectories cannot be removed.

    A root that is not a directory is deleted as a single entry. A root
    that cannot be examined at all yields a failed report, never an
    exception.

    Args:
        root: Directory to erase.
        backend: Filesystem backend to operate on.
        prune_directories: Remove nested directories bottom-up.
        dry_run: Report what would be removed without deleting.

    Returns:
        EraseReport whose ``result`` is the outcome of removing the root.
    """
    root_str = coerce_path(root)
    fs = resolve_backend(backend)

    try:
        entries = fs.walk(root_str)
    except OSError as e:
        error = from_os_error(root_str, e)
        logger.warning("%s", error)
        return EraseReport(root=root_str, result=DeletionResult.from_error(error), dry_run=dry_run)

    if not entries:
        logger.debug("Nothing to erase at %s", root_str)
        return EraseReport(root=root_str, result=DeletionResult.missing(root_str), dry_run=dry_run)

    root_entry, nested = entries[0], entries[1:]
    if not root_entry.is_dir:
        return _erase_single(root_str, fs, dry_run=dry_run)

    files = [e for e in nested if not e.is_dir]
    directories: list[FilesystemEntry] = []
    if prune_directories:
        directories = sorted((e for e in nested if e.is_dir), key=lambda e: e.depth, reverse=True)

    if dry_run:
        leftover = len(nested) - len(files) - len(directories)
        return _plan(root_str, files, directories, leftover=leftover)

    failures: list[DeletionResult] = []
    files_deleted = _delete_all(files, fs, failures)
    directories_deleted = _delete_all(directories, fs, failures)

    result = safe_delete(root_str, backend=fs)
    if failures:
        logger.warning("%d entries under %s could not be deleted", len(failures), root_str)

    return EraseReport(
        root=root_str,
        result=result,
        failures=tuple(failures),
        files_deleted=files_deleted,
        directories_deleted=directories_deleted,
    )


def _delete_all(
    entries: list[FilesystemEntry],
    fs: FilesystemBackend,
    failures: list[DeletionResult],
) -> int:
    """Safe-delete each entry, appending failures. Returns the number deleted."""
    deleted = 0
    for entry in entries:
        result = safe_delete(entry.path, backend=fs)
        if result.failed:
            failures.append(result)
        elif result.succeeded:
            deleted += 1
    return deleted


def _erase_single(root: str, fs: FilesystemBackend, *, dry_run: bool) -> EraseReport:
    """Handle an erase root that is a file, symlink or other entry."""
    if dry_run:
        logger.info("Dry-run: would delete %s", root)
        return EraseReport(
            root=root, result=DeletionResult.ok(root, dry_run=True), files_deleted=1, dry_run=True
        )

    result = safe_delete(root, backend=fs)
    return EraseReport(root=root, result=result, files_deleted=1 if result else 0)


def _plan(
    root: str,
    files: list[FilesystemEntry],
    directories: list[FilesystemEntry],
    leftover: int,
) -> EraseReport:
    """Build the dry-run report for a directory root.

    Args:
        root: Root directory.
        files: Non-directory entries that would be deleted.
        directories: Nested directories that would be pruned.
        leftover: Nested directories that would be left in place.
    """
    for entry in (*files, *directories):
        logger.info("Dry-run: would delete %s", entry.path)

    if leftover:
        result = DeletionResult.fail(
            root,
            ErrorKind.NOT_EMPTY,
            f"{leftover} subdirectories would remain under {root}",
        )
    else:
        logger.info("Dry-run: would delete %s", root)
        result = DeletionResult.ok(root, dry_run=True)

    return EraseReport(
        root=root,
        result=result,
        files_deleted=len(files),
        directories_deleted=len(directories),
        dry_run=True,
    )
