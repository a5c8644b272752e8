"""Filesystem access module.

This module provides the backend abstraction the deleters operate on,
the real and in-memory backends, traversal models, and protected path
management.
"""

from treewipe.filesystem.backend import FilesystemBackend, LocalFilesystem
from treewipe.filesystem.memory import MemoryFilesystem
from treewipe.filesystem.models import EntryKind, FilesystemEntry
from treewipe.filesystem.protected import PROTECTED_PATH_PATTERNS, is_protected_path

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "EntryKind",
    "FilesystemBackend",
    "FilesystemEntry",
    "LocalFilesystem",
    "MemoryFilesystem",
    "is_protected_path",
]
