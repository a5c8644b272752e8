"""Protected filesystem paths that must never be erased.

This module defines root patterns that are critical for system
operation or user security. Erasing one of these roots is refused
outright; the check applies to erase roots, not to entries found
beneath a root.
"""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

# Protected root patterns (glob-style).
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_PATH_PATTERNS: list[str] = [
    # Filesystem root and home
    "/",
    "~",
    # SSH and security
    "~/.ssh",
    "~/.ssh/*",
    "~/.gnupg",
    "~/.gnupg/*",
    # XDG base directories themselves
    "~/.config",
    "~/.local",
    "~/.local/share",
    "~/.cache",
    # System trees
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/lib",
    "/lib64",
    "/opt",
    "/proc",
    "/root",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
]


def _normalize(path: str) -> str:
    """Expand ~ and make path absolute without resolving symlinks."""
    return os.path.abspath(os.path.expanduser(path))


def is_protected_path(path: str, extra_patterns: Iterable[str] = ()) -> bool:
    """Check if a path is protected and must not be erased.

    The path is expanded and made absolute before comparison. Patterns
    using ~ notation are expanded to the actual home directory and
    matched with fnmatch for glob-style matching.

    Args:
        path: Filesystem path to check.
        extra_patterns: Additional user-configured patterns.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    home = str(Path.home())
    target = _normalize(path)

    for pattern in (*PROTECTED_PATH_PATTERNS, *extra_patterns):
        expanded = home + pattern[1:] if pattern.startswith("~") else pattern

        if fnmatch.fnmatch(target, expanded):
            return True

    return False
