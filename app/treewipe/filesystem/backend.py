"""Filesystem backend abstraction.

This module defines the FilesystemBackend interface the deletion
operations work against, and the LocalFilesystem implementation that
talks to the real operating system.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod

from treewipe.filesystem.models import EntryKind, FilesystemEntry

logger = logging.getLogger(__name__)


class FilesystemBackend(ABC):
    """Abstract base class for filesystem backends.

    A backend provides the three primitives the deleters need: an
    eager tree enumerator, an existence query and a single-entry
    delete. Alternative backends (e.g. an in-memory tree for tests)
    must raise the same OSError subclasses the OS would.

    Example:
        >>> fs = LocalFilesystem()
        >>> for entry in fs.walk("/tmp/build"):
        ...     print(entry.kind.value, entry.path)
    """

    @abstractmethod
    def walk(self, root: str) -> list[FilesystemEntry]:
        """Enumerate every entry reachable from root, root included.

        The result is fully materialized before it is returned. The root
        comes first; parents always precede their children. Order among
        siblings is unspecified. Symlinks are reported, never followed.

        Args:
            root: Path to start from.

        Returns:
            List of entries, or an empty list if root does not exist.

        Raises:
            OSError: If root exists but cannot be examined, for example
                when a parent directory cannot be searched.
        """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether an entry exists at path.

        Dangling symlinks count as existing.

        Args:
            path: Path to check.

        Returns:
            True if an entry is present, False otherwise.
        """

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a single file, symlink or empty directory.

        Args:
            path: Path to remove.

        Raises:
            FileNotFoundError: If nothing exists at path.
            OSError: If path is a non-empty directory (ENOTEMPTY).
            PermissionError: If the OS refuses the removal.
        """

    @abstractmethod
    def kind_of(self, path: str) -> EntryKind | None:
        """Classify the entry at path without following symlinks.

        Args:
            path: Path to classify.

        Returns:
            EntryKind of the entry, or None if it does not exist.

        Raises:
            OSError: If the path cannot be examined for another reason.
        """


def _kind_from_mode(mode: int) -> EntryKind:
    """Map an lstat mode to an EntryKind."""
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


class LocalFilesystem(FilesystemBackend):
    """Backend operating on the real filesystem through the os module."""

    def walk(self, root: str) -> list[FilesystemEntry]:
        """Enumerate root and its contents depth-first.

        Directories that cannot be listed are logged and reported
        without children; removing them later will fail naturally if
        they are not empty.
        """
        try:
            root_stat = os.lstat(root)
        except (FileNotFoundError, NotADirectoryError):
            # ENOTDIR: a parent is not a directory, so root cannot exist
            return []

        root_entry = FilesystemEntry(path=root, kind=_kind_from_mode(root_stat.st_mode), depth=0)
        entries: list[FilesystemEntry] = [root_entry]
        if not root_entry.is_dir:
            return entries

        # Explicit stack keeps deep trees clear of the recursion limit
        stack: list[tuple[str, int]] = [(root, 0)]
        while stack:
            directory, depth = stack.pop()
            try:
                with os.scandir(directory) as it:
                    children = list(it)
            except OSError as e:
                logger.warning("Cannot list directory %s: %s", directory, e)
                continue

            for child in children:
                try:
                    mode = child.stat(follow_symlinks=False).st_mode
                except FileNotFoundError:
                    # Removed by someone else since scandir
                    continue
                except OSError as e:
                    logger.warning("Cannot stat %s: %s", child.path, e)
                    mode = 0

                entry = FilesystemEntry(
                    path=child.path,
                    kind=_kind_from_mode(mode),
                    depth=depth + 1,
                )
                entries.append(entry)
                if entry.is_dir:
                    stack.append((child.path, depth + 1))

        return entries

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def kind_of(self, path: str) -> EntryKind | None:
        try:
            return _kind_from_mode(os.lstat(path).st_mode)
        except (FileNotFoundError, NotADirectoryError):
            return None

    def remove(self, path: str) -> None:
        """Remove a single entry with unlink or rmdir.

        rmdir is used only for real directories so a symlink to a
        directory removes the link, never the target.
        """
        mode = os.lstat(path).st_mode
        if stat.S_ISDIR(mode):
            os.rmdir(path)
        else:
            os.unlink(path)
        logger.debug("Removed %s", path)
