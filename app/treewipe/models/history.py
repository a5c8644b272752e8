"""Audit records of completed deletions.

Each successful ``delete``, ``safe-delete`` or ``erase`` run can append a
HistoryEntry to a JSON Lines file. Deleted data cannot be brought back,
so entries only answer "what did treewipe remove, and when".
"""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class HistoryActionType(str, Enum):
    """Kind of run that produced a history entry."""

    DELETE = "delete"
    ERASE = "erase"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One recorded run.

    Attributes:
        id: Short random identifier, 12 hex characters.
        timestamp: ISO 8601 time of the run, in UTC.
        action_type: Whether a single entry or whole trees were removed.
        items: Paths that were removed.
        success: False if any recorded tree kept entries that could not
            be deleted.
        metadata: Free-form context such as the command and entry counts.
    """

    id: str
    timestamp: str
    action_type: HistoryActionType
    items: tuple[str, ...]
    success: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("History entry ID cannot be empty")
        if not self.timestamp:
            raise ValueError("Timestamp cannot be empty")
        if not self.items:
            raise ValueError("History entry must have at least one item")

    def to_dict(self) -> dict[str, Any]:
        """Plain-JSON form: enum as its value, items as a list."""
        data = asdict(self)
        data["action_type"] = self.action_type.value
        data["items"] = list(self.items)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryEntry:
        """Rebuild an entry from to_dict() output.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If action_type is unknown or a field is empty.
        """
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            action_type=HistoryActionType(data["action_type"]),
            items=tuple(map(str, data["items"])),
            success=bool(data.get("success", True)),
            metadata=dict(data.get("metadata") or {}),
        )

    def to_json_line(self) -> str:
        """Compact single-line JSON, without the trailing newline."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json_line(cls, line: str) -> HistoryEntry:
        """Parse one line of the history file.

        Raises:
            json.JSONDecodeError: If the line is not JSON.
            KeyError: If a required key is missing.
            ValueError: If the data is invalid.
        """
        return cls.from_dict(json.loads(line))


def create_history_entry(
    action_type: HistoryActionType,
    items: list[str],
    success: bool = True,
    metadata: dict[str, Any] | None = None,
) -> HistoryEntry:
    """Stamp a new entry with a fresh id and the current UTC time.

    Raises:
        ValueError: If items is empty.
    """
    if not items:
        raise ValueError("Cannot create history entry with no items")

    return HistoryEntry(
        id=uuid.uuid4().hex[:12],
        timestamp=datetime.now(UTC).isoformat(),
        action_type=action_type,
        items=tuple(items),
        success=success,
        metadata=dict(metadata or {}),
    )
