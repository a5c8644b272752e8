"""Single-entry deletion.

Provides the primitive deleter in its strict and tolerant forms, a
result-returning variant, and the existence-checked safe delete that
never raises for filesystem failures.
"""

import logging
import os

from treewipe.errors import DeletionError, from_os_error
from treewipe.filesystem.backend import FilesystemBackend, LocalFilesystem
from treewipe.models.result import DeletionResult

logger = logging.getLogger(__name__)

_default_backend = LocalFilesystem()

PathArg = str | os.PathLike[str]


def coerce_path(path: PathArg) -> str:
    """Normalize a path argument to a non-empty string.

    Raises:
        ValueError: If the path is empty.
    """
    path_str = os.fspath(path)
    if not path_str:
        msg = "Path cannot be empty"
        raise ValueError(msg)
    return path_str


def resolve_backend(backend: FilesystemBackend | None) -> FilesystemBackend:
    """Return the given backend, or the shared local filesystem."""
    return backend if backend is not None else _default_backend


def delete_entry(
    path: PathArg,
    *,
    tolerant: bool = False,
    backend: FilesystemBackend | None = None,
) -> bool:
    """Delete exactly one filesystem entry.

    The entry must be a file, a symlink or an empty directory.

    Args:
        path: Path to delete.
        tolerant: If True, return False on failure instead of raising.
        backend: Filesystem backend to operate on. Defaults to the real one.

    Returns:
        True if the entry was deleted, False on failure in tolerant mode.

    Raises:
        NotFoundError: If the entry does not exist (strict mode).
        NotEmptyError: If the entry is a non-empty directory (strict mode).
        PermissionDeniedError: If the OS refuses the deletion (strict mode).
        DeletionError: For any other filesystem failure (strict mode).
        ValueError: If path is empty, in either mode.
    """
    path_str = coerce_path(path)
    fs = resolve_backend(backend)

    try:
        fs.remove(path_str)
    except OSError as e:
        error = from_os_error(path_str, e)
        if tolerant:
            logger.debug("Tolerated deletion failure: %s", error)
            return False
        raise error from e

    logger.debug("Deleted %s", path_str)
    return True


def try_delete(path: PathArg, *, backend: FilesystemBackend | None = None) -> DeletionResult:
    """Delete one entry and report the outcome as a DeletionResult.

    Unlike tolerant delete_entry(), the failure cause is kept as a
    tagged ErrorKind and message rather than collapsed to False.

    Args:
        path: Path to delete.
        backend: Filesystem backend to operate on.

    Returns:
        Succeeded or failed DeletionResult. A missing entry is a failure
        tagged NOT_FOUND, since no existence check is made.
    """
    path_str = coerce_path(path)
    try:
        delete_entry(path_str, backend=backend)
    except DeletionError as e:
        return DeletionResult.from_error(e)
    return DeletionResult.ok(path_str)


def safe_delete(path: PathArg, *, backend: FilesystemBackend | None = None) -> DeletionResult:
    """Delete an entry if it exists, never raising for filesystem errors.

    A missing path is skipped without attempting deletion. Any error
    raised by the strict deleter becomes a failed result carrying the
    error message. The entry can still vanish between the existence
    check and the delete; that case is reported as NOT_FOUND.

    Args:
        path: Path to delete.
        backend: Filesystem backend to operate on.

    Returns:
        DeletionResult that is truthy only if the entry was deleted.
    """
    path_str = coerce_path(path)
    fs = resolve_backend(backend)

    if not fs.exists(path_str):
        logger.debug("Nothing to delete at %s", path_str)
        return DeletionResult.missing(path_str)

    try:
        delete_entry(path_str, backend=fs)
    except DeletionError as e:
        logger.warning("%s", e)
        return DeletionResult.from_error(e)

    return DeletionResult.ok(path_str)
