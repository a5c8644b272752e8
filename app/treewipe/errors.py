"""Deletion error taxonomy.

Every failure of the single-entry deleter in strict mode surfaces as a
DeletionError subclass carrying the offending path, the underlying cause
message and a machine-readable ErrorKind tag.
"""

import errno
import os

from treewipe.models.result import ErrorKind


class DeletionError(Exception):
    """Base exception for a failed deletion.

    Attributes:
        path: Path that could not be deleted.
        cause: Message of the underlying OS error.
        kind: Tag classifying the failure.
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, path: str, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot delete {path}: {cause}")


class NotFoundError(DeletionError):
    """Raised when the target path does not exist."""

    kind = ErrorKind.NOT_FOUND


class NotEmptyError(DeletionError):
    """Raised when the target is a directory that still has entries."""

    kind = ErrorKind.NOT_EMPTY


class PermissionDeniedError(DeletionError):
    """Raised when the OS refuses the deletion."""

    kind = ErrorKind.PERMISSION_DENIED


_ERRNO_MAP: dict[int, type[DeletionError]] = {
    errno.ENOENT: NotFoundError,
    errno.ENOTDIR: NotFoundError,  # a parent component is not a directory
    errno.ENOTEMPTY: NotEmptyError,
    errno.EEXIST: NotEmptyError,  # some platforms report rmdir of a non-empty dir this way
    errno.EISDIR: NotEmptyError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
}


def from_os_error(path: str | os.PathLike[str], exc: OSError) -> DeletionError:
    """Translate an OSError into the matching DeletionError subclass.

    Args:
        path: Path the failed operation targeted.
        exc: The OSError raised by the filesystem.

    Returns:
        DeletionError subclass instance (not raised).
    """
    error_cls = _ERRNO_MAP.get(exc.errno or 0)
    if error_cls is None:
        if isinstance(exc, FileNotFoundError):
            error_cls = NotFoundError
        elif isinstance(exc, PermissionError):
            error_cls = PermissionDeniedError
        else:
            error_cls = DeletionError
    cause = exc.strerror or str(exc)
    return error_cls(os.fspath(path), cause)
