"""In-memory filesystem backend.

A dict-backed directory tree implementing FilesystemBackend, used to
exercise the deleters without touching the real filesystem. It raises
the same OSError subclasses, with the same errno values, as the OS.
"""

import errno
import os
import posixpath

from treewipe.filesystem.backend import FilesystemBackend
from treewipe.filesystem.models import EntryKind, FilesystemEntry


def _os_error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class MemoryFilesystem(FilesystemBackend):
    """Virtual POSIX-style filesystem held in a dictionary.

    Paths are normalized with posixpath; the root "/" always exists.
    Any entry can be locked, after which removing it raises
    PermissionError, simulating a file held open or owned by root.

    Example:
        >>> fs = MemoryFilesystem()
        >>> fs.add_file("/data/a.txt")
        >>> fs.exists("/data")
        True
    """

    def __init__(self) -> None:
        self._entries: dict[str, EntryKind] = {"/": EntryKind.DIRECTORY}
        self._locked: set[str] = set()
        self.removed: list[str] = []

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath("/" + path.lstrip("/"))

    def _add(self, path: str, kind: EntryKind) -> None:
        norm = self._norm(path)
        parent = posixpath.dirname(norm)
        if parent != norm and parent not in self._entries:
            self.add_dir(parent)
        elif parent in self._entries and self._entries[parent] != EntryKind.DIRECTORY:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, parent)

        existing = self._entries.get(norm)
        if existing == EntryKind.DIRECTORY and kind != EntryKind.DIRECTORY:
            raise _os_error(IsADirectoryError, errno.EISDIR, norm)
        if existing is not None and existing != kind:
            raise _os_error(FileExistsError, errno.EEXIST, norm)
        self._entries[norm] = kind

    def add_dir(self, path: str) -> None:
        """Create a directory, creating missing parents."""
        self._add(path, EntryKind.DIRECTORY)

    def add_file(self, path: str) -> None:
        """Create a regular file, creating missing parents."""
        self._add(path, EntryKind.FILE)

    def add_symlink(self, path: str) -> None:
        """Create a symlink entry; its target is irrelevant here."""
        self._add(path, EntryKind.SYMLINK)

    def lock(self, path: str) -> None:
        """Make removal of path fail with PermissionError."""
        self._locked.add(self._norm(path))

    def unlock(self, path: str) -> None:
        """Undo a previous lock()."""
        self._locked.discard(self._norm(path))

    def _children(self, directory: str) -> list[str]:
        return sorted(
            p for p in self._entries if p != directory and posixpath.dirname(p) == directory
        )

    def walk(self, root: str) -> list[FilesystemEntry]:
        norm = self._norm(root)
        if norm not in self._entries:
            return []

        entries: list[FilesystemEntry] = []
        stack: list[tuple[str, int]] = [(norm, 0)]
        while stack:
            path, depth = stack.pop()
            kind = self._entries[path]
            entries.append(FilesystemEntry(path=path, kind=kind, depth=depth))
            if kind == EntryKind.DIRECTORY:
                stack.extend((child, depth + 1) for child in reversed(self._children(path)))
        return entries

    def exists(self, path: str) -> bool:
        return self._norm(path) in self._entries

    def kind_of(self, path: str) -> EntryKind | None:
        return self._entries.get(self._norm(path))

    def _missing_error(self, norm: str, path: str) -> OSError:
        """ENOTDIR if the nearest existing ancestor is not a directory, else ENOENT."""
        ancestor = posixpath.dirname(norm)
        while ancestor not in self._entries:
            ancestor = posixpath.dirname(ancestor)
        if self._entries[ancestor] != EntryKind.DIRECTORY:
            return _os_error(NotADirectoryError, errno.ENOTDIR, path)
        return _os_error(FileNotFoundError, errno.ENOENT, path)

    def remove(self, path: str) -> None:
        norm = self._norm(path)
        if norm not in self._entries:
            raise self._missing_error(norm, path)
        if norm in self._locked or norm == "/":
            raise _os_error(PermissionError, errno.EACCES, path)
        if self._entries[norm] == EntryKind.DIRECTORY and self._children(norm):
            raise _os_error(OSError, errno.ENOTEMPTY, path)
        del self._entries[norm]
        self.removed.append(norm)
