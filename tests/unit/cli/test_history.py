"""Unit tests for history command.

Tests for the CLI history command implementation.
"""

import json

import pytest
from treewipe.cli.main import app
from treewipe.core.state import StateManager
from treewipe.models.history import HistoryActionType, HistoryEntry
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def sample_history_entries() -> list[HistoryEntry]:
    """Create sample history entries, oldest first."""
    return [
        HistoryEntry(
            id="abc123456789",
            timestamp="2026-01-25T10:00:00+00:00",
            action_type=HistoryActionType.ERASE,
            items=("/a", "/b", "/c", "/d", "/e"),
            success=False,
            metadata={"command": "treewipe erase"},
        ),
        HistoryEntry(
            id="def678901234",
            timestamp="2026-01-26T14:30:00+00:00",
            action_type=HistoryActionType.DELETE,
            items=("/tmp/x",),
            metadata={"command": "treewipe delete"},
        ),
    ]


@pytest.fixture
def recorded(sample_history_entries: list[HistoryEntry]) -> list[HistoryEntry]:
    """Write the sample entries to the isolated history file."""
    manager = StateManager()
    for entry in sample_history_entries:
        manager.record_action(entry)
    return sample_history_entries


class TestHistoryCommand:
    """Tests for treewipe history command."""

    def test_history_help(self) -> None:
        """History command shows help."""
        result = runner.invoke(app, ["history", "--help"])

        assert result.exit_code == 0
        assert "--limit" in result.output
        assert "--json" in result.output

    def test_empty_history(self) -> None:
        """No entries prints a notice."""
        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "No history entries found." in result.output

    @pytest.mark.usefixtures("recorded")
    def test_table_output(self) -> None:
        """Entries are shown newest first with truncated path lists."""
        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "Deletion History" in result.output
        assert "def67890" in result.output
        assert "+2" in result.output
        assert result.output.index("def67890") < result.output.index("abc12345")

    @pytest.mark.usefixtures("recorded")
    def test_json_output(self) -> None:
        """--json emits the stored entries."""
        result = runner.invoke(app, ["history", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [d["id"] for d in data] == ["def678901234", "abc123456789"]
        assert data[1]["action_type"] == "erase"
        assert data[1]["success"] is False

    @pytest.mark.usefixtures("recorded")
    def test_limit(self) -> None:
        """-n caps the number of entries."""
        result = runner.invoke(app, ["history", "-n", "1", "--json"])

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 1
