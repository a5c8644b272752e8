"""Filesystem domain models for tree traversal.

This module defines the data structures produced while enumerating
a directory tree before deletion: entry kinds and the transient
entry records handed from the enumerator to the eraser.
"""

from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Kind of a filesystem entry.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory (never a symlink to one).
        SYMLINK: Symbolic link, valid or dangling. Never followed.
        OTHER: FIFO, socket, device node or anything else.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FilesystemEntry:
    """A path annotated with its kind, produced during traversal.

    Attributes:
        path: Filesystem path of the entry.
        kind: Classification of the entry.
        depth: Distance from the traversal root (the root itself is 0).
    """

    path: str
    kind: EntryKind
    depth: int = 0

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth must be non-negative, got {self.depth}"
            raise ValueError(msg)

    @property
    def is_dir(self) -> bool:
        """Check if the entry is a real directory."""
        return self.kind == EntryKind.DIRECTORY
