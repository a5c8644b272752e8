"""Unit tests for StateManager and history recording helpers."""

import json
import logging
from pathlib import Path

import pytest
from treewipe.core.state import StateManager, record_deletion, record_erasures
from treewipe.models.history import HistoryActionType, HistoryEntry, create_history_entry
from treewipe.models.result import DeletionResult, EraseReport, ErrorKind


@pytest.fixture
def manager(tmp_path: Path) -> StateManager:
    """Create a StateManager with temporary directory."""
    return StateManager(state_dir=tmp_path / "state")


def _report(
    root: str,
    *,
    ok: bool = True,
    failures: int = 0,
    dry_run: bool = False,
) -> EraseReport:
    result = DeletionResult.ok(root, dry_run=dry_run) if ok else DeletionResult.missing(root)
    failed = tuple(
        DeletionResult.fail(f"{root}/f{i}", ErrorKind.PERMISSION_DENIED, "denied")
        for i in range(failures)
    )
    return EraseReport(
        root=root, result=result, failures=failed, files_deleted=2, dry_run=dry_run
    )


class TestStateManager:
    """Tests for StateManager."""

    def test_history_path_property(self, tmp_path: Path) -> None:
        """history_path returns correct path."""
        assert StateManager(state_dir=tmp_path).history_path == tmp_path / "history.jsonl"

    def test_record_creates_file_and_directories(self, manager: StateManager) -> None:
        """record_action creates the state directory and file."""
        entry = create_history_entry(HistoryActionType.DELETE, ["/x"])

        manager.record_action(entry)

        assert manager.history_path.exists()
        line = manager.history_path.read_text().strip()
        assert json.loads(line)["items"] == ["/x"]

    def test_default_state_dir(self) -> None:
        """Without override the XDG state directory is used and created."""
        manager = StateManager()
        manager.record_action(create_history_entry(HistoryActionType.DELETE, ["/x"]))

        assert manager.history_path.exists()

    def test_get_history_newest_first(self, manager: StateManager) -> None:
        """Entries come back newest first."""
        for name in ("/first", "/second", "/third"):
            manager.record_action(create_history_entry(HistoryActionType.DELETE, [name]))

        history = manager.get_history()

        assert [e.items[0] for e in history] == ["/third", "/second", "/first"]

    def test_get_history_limit(self, manager: StateManager) -> None:
        """limit caps the number of entries."""
        for i in range(5):
            manager.record_action(create_history_entry(HistoryActionType.DELETE, [f"/p{i}"]))

        assert len(manager.get_history(limit=2)) == 2

    def test_get_history_missing_file(self, manager: StateManager) -> None:
        """No history file means no entries."""
        assert manager.get_history() == []

    def test_corrupt_lines_skipped(
        self, manager: StateManager, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Corrupt lines are logged and skipped."""
        good = create_history_entry(HistoryActionType.ERASE, ["/ok"])
        manager.history_path.parent.mkdir(parents=True)
        manager.history_path.write_text(f"not json\n\n{good.to_json_line()}\n")

        with caplog.at_level(logging.WARNING, logger="treewipe.core.state"):
            history = manager.get_history()

        assert history == [good]
        assert "corrupt history line 1" in caplog.text


class TestRecordErasures:
    """Tests for record_erasures."""

    def test_records_removed_roots_only(self, manager: StateManager) -> None:
        """Roots that were not removed are left out."""
        entry = record_erasures(
            [_report("/a"), _report("/b", ok=False), _report("/c", failures=1)],
            state=manager,
        )

        assert entry is not None
        assert entry.action_type == HistoryActionType.ERASE
        assert entry.items == ("/a", "/c")
        assert entry.success is False
        assert entry.metadata["files_deleted"] == 4
        assert manager.get_history() == [entry]

    def test_nothing_removed(self, manager: StateManager) -> None:
        """No entry is written when nothing was removed."""
        assert record_erasures([_report("/a", ok=False)], state=manager) is None
        assert not manager.history_path.exists()

    def test_dry_run_not_recorded(self, manager: StateManager) -> None:
        """Dry-run reports are never recorded."""
        assert record_erasures([_report("/a", dry_run=True)], state=manager) is None


class TestRecordDeletion:
    """Tests for record_deletion."""

    def test_records_delete(self, manager: StateManager) -> None:
        """A single deletion is recorded with its command."""
        entry = record_deletion("/tmp/x", command="treewipe delete", state=manager)

        assert entry.action_type == HistoryActionType.DELETE
        assert entry.metadata == {"command": "treewipe delete"}
        assert HistoryEntry.from_json_line(manager.history_path.read_text()) == entry
