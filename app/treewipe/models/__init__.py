"""Data models for treewipe.

This module exports the result and history models.
"""

from treewipe.models.history import HistoryActionType, HistoryEntry, create_history_entry
from treewipe.models.result import DeletionResult, DeletionStatus, EraseReport, ErrorKind

__all__ = [
    "DeletionResult",
    "DeletionStatus",
    "EraseReport",
    "ErrorKind",
    "HistoryActionType",
    "HistoryEntry",
    "create_history_entry",
]
