"""Deletion result models.

This module defines the explicit result type returned by non-raising
deletion operations, so callers can match on a status and a tagged
error kind instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from treewipe.errors import DeletionError


class DeletionStatus(str, Enum):
    """Outcome of a single deletion attempt.

    Attributes:
        SUCCEEDED: The entry was removed (or would be, in dry-run).
        FAILED: Deletion was attempted and failed.
        SKIPPED_NONEXISTENT: The entry did not exist, nothing was attempted.
    """

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED_NONEXISTENT = "skipped_nonexistent"


class ErrorKind(str, Enum):
    """Classification of a deletion failure.

    Attributes:
        NOT_FOUND: Target vanished before it could be deleted.
        NOT_EMPTY: Target is a directory that still has entries.
        PERMISSION_DENIED: The OS refused, or the path is protected.
        OTHER: Any other filesystem error.
    """

    NOT_FOUND = "not_found"
    NOT_EMPTY = "not_empty"
    PERMISSION_DENIED = "permission_denied"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of a single deletion attempt.

    Truthy only when the entry was deleted, so ``if safe_delete(p):``
    reads naturally while ``status`` and ``error_kind`` stay available
    for callers that need to tell failures apart.

    Attributes:
        path: Path that was operated on.
        status: Outcome of the attempt.
        error_kind: Failure tag, None unless status is FAILED.
        error: Descriptive failure message, None unless status is FAILED.
        dry_run: Whether this was a simulated deletion.
    """

    path: str
    status: DeletionStatus
    error_kind: ErrorKind | None = None
    error: str | None = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate result consistency after initialization."""
        if self.status == DeletionStatus.FAILED and self.error_kind is None:
            msg = "Failed result requires an error kind"
            raise ValueError(msg)
        if self.status != DeletionStatus.FAILED and self.error_kind is not None:
            msg = f"Error kind is only valid on failed results, got {self.status.value}"
            raise ValueError(msg)

    def __bool__(self) -> bool:
        return self.status == DeletionStatus.SUCCEEDED

    @property
    def succeeded(self) -> bool:
        """Check if the entry was deleted."""
        return self.status == DeletionStatus.SUCCEEDED

    @property
    def failed(self) -> bool:
        """Check if deletion was attempted and failed."""
        return self.status == DeletionStatus.FAILED

    @property
    def skipped(self) -> bool:
        """Check if the entry did not exist."""
        return self.status == DeletionStatus.SKIPPED_NONEXISTENT

    @classmethod
    def ok(cls, path: str, *, dry_run: bool = False) -> DeletionResult:
        """Create a successful result."""
        return cls(path=path, status=DeletionStatus.SUCCEEDED, dry_run=dry_run)

    @classmethod
    def missing(cls, path: str) -> DeletionResult:
        """Create a result for a path that did not exist."""
        return cls(path=path, status=DeletionStatus.SKIPPED_NONEXISTENT)

    @classmethod
    def fail(cls, path: str, kind: ErrorKind, error: str) -> DeletionResult:
        """Create a failed result with a tagged error."""
        return cls(path=path, status=DeletionStatus.FAILED, error_kind=kind, error=error)

    @classmethod
    def from_error(cls, error: DeletionError) -> DeletionResult:
        """Create a failed result from a DeletionError.

        Args:
            error: The error raised by a strict deletion.

        Returns:
            Failed DeletionResult carrying the error's kind and message.
        """
        return cls.fail(error.path, error.kind, str(error))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "path": self.path,
            "status": self.status.value,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error": self.error,
            "dry_run": self.dry_run,
        }


@dataclass(frozen=True, slots=True)
class EraseReport:
    """Outcome of erasing one directory tree.

    ``result`` is the outcome of removing the root itself. It does not
    distinguish a missing root from a root left non-empty by a failed
    nested deletion; ``failures`` lists every nested failure for callers
    that need to know which entries survived.

    Attributes:
        root: Root path that was erased.
        result: Outcome of the final root removal.
        failures: Every nested entry that could not be deleted.
        files_deleted: Number of non-directory entries removed.
        directories_deleted: Number of nested directories removed (root excluded).
        dry_run: Whether this was a simulated erase.
    """

    root: str
    result: DeletionResult
    failures: tuple[DeletionResult, ...] = ()
    files_deleted: int = 0
    directories_deleted: int = 0
    dry_run: bool = False

    def __bool__(self) -> bool:
        return bool(self.result)

    @property
    def complete(self) -> bool:
        """Check if the whole tree, root included, was removed."""
        return self.result.succeeded and not self.failures

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "root": self.root,
            "result": self.result.to_dict(),
            "failures": [f.to_dict() for f in self.failures],
            "files_deleted": self.files_deleted,
            "directories_deleted": self.directories_deleted,
            "dry_run": self.dry_run,
        }
