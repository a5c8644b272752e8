"""Batch erase operator.

Handles erasing several directory trees with dry-run support and
protected path rejection, isolating failures per root.
"""

import logging
from collections.abc import Iterable

from treewipe.eraser.recursive import erase_tree
from treewipe.filesystem.backend import FilesystemBackend
from treewipe.filesystem.protected import is_protected_path
from treewipe.models.result import DeletionResult, EraseReport, ErrorKind

logger = logging.getLogger(__name__)


class EraseOperator:
    """Erases directory trees on request.

    Attributes:
        _dry_run: If True, simulate erasures without modifying the filesystem.
        _prune_directories: If True, remove nested directories bottom-up.
        _backend: Filesystem backend, None for the real filesystem.
        _extra_protected: User-configured protected patterns.
    """

    def __init__(
        self,
        dry_run: bool = False,
        prune_directories: bool = True,
        backend: FilesystemBackend | None = None,
        extra_protected: Iterable[str] = (),
    ) -> None:
        """Initialize the EraseOperator.

        Args:
            dry_run: If True, report what would be erased without erasing.
            prune_directories: If False, only files are removed before the root.
            backend: Filesystem backend to operate on.
            extra_protected: Additional protected path patterns.
        """
        self._dry_run = dry_run
        self._prune_directories = prune_directories
        self._backend = backend
        self._extra_protected = tuple(extra_protected)

    @property
    def dry_run(self) -> bool:
        """Whether this operator only simulates erasures."""
        return self._dry_run

    def erase(self, paths: list[str]) -> list[EraseReport]:
        """Erase multiple roots and return one report per root.

        Each root is checked against protected patterns first. Protected
        roots are skipped with a failed report; others are erased
        independently, so one failing root never stops the rest.

        Args:
            paths: Roots to erase.

        Returns:
            List of EraseReport, one per input path, in input order.
        """
        reports: list[EraseReport] = []

        for path in paths:
            if self._is_protected(path):
                logger.warning("Refusing to erase protected path %s", path)
                reports.append(
                    EraseReport(
                        root=path,
                        result=DeletionResult.fail(
                            path,
                            ErrorKind.PERMISSION_DENIED,
                            f"Protected path cannot be erased: {path}",
                        ),
                        dry_run=self._dry_run,
                    )
                )
                continue

            reports.append(
                erase_tree(
                    path,
                    backend=self._backend,
                    prune_directories=self._prune_directories,
                    dry_run=self._dry_run,
                )
            )

        return reports

    def _is_protected(self, path: str) -> bool:
        """Check if a root is protected from erasure."""
        return is_protected_path(path, self._extra_protected)
