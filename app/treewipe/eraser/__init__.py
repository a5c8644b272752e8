"""Deletion operations.

This module provides the single-entry deleter, safe delete, the
recursive directory eraser and the batch erase operator.
"""

from treewipe.eraser.deleter import delete_entry, safe_delete, try_delete
from treewipe.eraser.operator import EraseOperator
from treewipe.eraser.recursive import erase_tree

__all__ = [
    "EraseOperator",
    "delete_entry",
    "erase_tree",
    "safe_delete",
    "try_delete",
]
