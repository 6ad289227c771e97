"""Tests for the command history."""

import pytest

from ytsections.models import HISTORY_LIMIT, CommandHistory, clear_history, record_to_history


def test_record_into_empty_history() -> None:
    assert record_to_history([], "A") == ["A"]


def test_record_same_command_twice_keeps_one() -> None:
    history = record_to_history([], "A")
    assert record_to_history(history, "A") == ["A"]


def test_record_existing_command_moves_to_front() -> None:
    history = record_to_history(record_to_history([], "B"), "A")
    assert history == ["A", "B"]
    assert record_to_history(history, "B") == ["B", "A"]


def test_record_does_not_mutate_input() -> None:
    history = ["B", "A"]
    record_to_history(history, "C")
    assert history == ["B", "A"]


def test_oldest_entry_is_evicted() -> None:
    history: list[str] = []
    for i in range(HISTORY_LIMIT + 1):
        history = record_to_history(history, f"cmd {i}")
    assert len(history) == HISTORY_LIMIT
    assert history[0] == f"cmd {HISTORY_LIMIT}"
    assert "cmd 0" not in history


def test_repeated_records_stabilize() -> None:
    history = record_to_history(["B", "C"], "A")
    assert record_to_history(record_to_history(history, "A"), "A") == history


@pytest.mark.parametrize("history", [[], ["A"], [f"cmd {i}" for i in range(HISTORY_LIMIT)]])
def test_clear_history(history: list[str]) -> None:
    assert clear_history(history) == []


def test_command_history_class() -> None:
    history = CommandHistory()
    for cmd in ("A", "B", "A", "C"):
        history.record(cmd)
    assert history.entries == ["C", "A", "B"]
    assert len(history) == 3
    assert history[0] == "C"
    history.clear()
    assert list(history) == []


def test_command_history_initial_entries_keep_order() -> None:
    history = CommandHistory(["new", "old", "new"], limit=3)
    assert history.entries == ["new", "old"]


def test_command_history_rejects_empty_limit() -> None:
    with pytest.raises(ValueError):
        CommandHistory(limit=0)
