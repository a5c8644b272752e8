"""Deletion history persistence.

StateManager reads and appends the JSONL history file; record_erasures
and record_deletion turn deleter outcomes into history entries.
"""

import logging
from pathlib import Path

from treewipe.core.paths import HISTORY_FILENAME, ensure_state_dir, get_history_path
from treewipe.models.history import HistoryActionType, HistoryEntry, create_history_entry
from treewipe.models.result import EraseReport

logger = logging.getLogger(__name__)


class StateManager:
    """Append-only deletion history in a JSON Lines file.

    One HistoryEntry per line, so recording never rewrites the file and a
    damaged line only loses that one entry.
    """

    def __init__(self, state_dir: Path | None = None) -> None:
        """Point the manager at a history file.

        Args:
            state_dir: Directory for history.jsonl. Defaults to the XDG
                state directory.
        """
        self._custom_dir = state_dir
        self._history_path = (
            get_history_path() if state_dir is None else state_dir / HISTORY_FILENAME
        )

    @property
    def history_path(self) -> Path:
        return self._history_path

    def record_action(self, entry: HistoryEntry) -> None:
        """Append one entry, creating the state directory on first use.

        Raises:
            RuntimeError: If the XDG state directory cannot be created.
            OSError: If the file cannot be written.
        """
        if self._custom_dir is None:
            ensure_state_dir()
        else:
            self._custom_dir.mkdir(parents=True, exist_ok=True)

        with self._history_path.open(mode="a", encoding="utf-8") as f:
            f.write(entry.to_json_line() + "\n")

    def get_history(self, limit: int | None = None) -> list[HistoryEntry]:
        """Return recorded entries, newest first.

        Lines that do not parse are logged and skipped. A missing file
        means no history yet.

        Args:
            limit: Maximum number of entries to return, None for all.
        """
        if not self._history_path.exists():
            return []

        entries: list[HistoryEntry] = []
        with self._history_path.open(encoding="utf-8") as f:
            for line_num, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    entries.append(HistoryEntry.from_json_line(raw))
                except (KeyError, TypeError, ValueError) as e:
                    logger.warning("Skipping corrupt history line %d: %s", line_num, e)

        entries.reverse()
        return entries if limit is None else entries[:limit]


def record_erasures(
    reports: list[EraseReport],
    command: str = "treewipe erase",
    state: StateManager | None = None,
) -> HistoryEntry | None:
    """Record the roots that were actually removed to history.

    Dry-run reports and roots that were not removed are left out.

    Args:
        reports: Reports returned by an erase run.
        command: Command that triggered the erasures.
        state: StateManager to write to. Defaults to the standard location.

    Returns:
        The recorded entry, or None if nothing was removed.

    Raises:
        RuntimeError: If the state directory cannot be created.
        OSError: If the history file cannot be written.
    """
    removed = [r for r in reports if r.result.succeeded and not r.dry_run]
    if not removed:
        return None

    entry = create_history_entry(
        action_type=HistoryActionType.ERASE,
        items=[r.root for r in removed],
        success=all(r.complete for r in removed),
        metadata={
            "command": command,
            "files_deleted": sum(r.files_deleted for r in removed),
            "directories_deleted": sum(r.directories_deleted for r in removed),
        },
    )
    (state or StateManager()).record_action(entry)
    return entry


def record_deletion(
    path: str,
    command: str = "treewipe delete",
    state: StateManager | None = None,
) -> HistoryEntry:
    """Record a single-entry deletion to history.

    Args:
        path: Path that was deleted.
        command: Command that triggered the deletion.
        state: StateManager to write to. Defaults to the standard location.

    Returns:
        The recorded entry.
    """
    entry = create_history_entry(
        action_type=HistoryActionType.DELETE,
        items=[path],
        metadata={"command": command},
    )
    (state or StateManager()).record_action(entry)
    return entry
