"""Tests for the triage state machine."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from filetriage.discovery import FileCategory, FileRecord
from filetriage.triage import (
    Decision,
    DecisionEntry,
    DecisionStatistics,
    TriageSession,
    TriageState,
    new_session,
)


def _record(name: str) -> FileRecord:
    return FileRecord(
        path=Path(name),
        name=name,
        size=0,
        modified_at=datetime.now(timezone.utc),
        category=FileCategory.TEXT,
    )


def _session(count: int) -> TriageSession:
    return new_session([_record(f"file{index + 1}.txt") for index in range(count)])


def test_new_session_starts_at_first_file() -> None:
    files = [_record("file1.txt"), _record("file2.txt")]

    session = new_session(files)

    assert session.files == tuple(files)
    assert session.cursor == 0
    assert session.history == ()
    assert session.current_file() == files[0]
    assert session.state is TriageState.IN_PROGRESS


def test_empty_session() -> None:
    session = _session(0)

    assert session.current_file() is None
    assert session.state is TriageState.EMPTY
    assert session.advance() is False
    assert session.retreat() is False
    assert session.cursor == 0


def test_advance_saturates_at_last_file() -> None:
    session = _session(3)

    assert session.advance() is True
    assert session.cursor == 1
    assert session.advance() is True
    assert session.cursor == 2
    assert session.state is TriageState.AT_END

    assert session.advance() is False
    assert session.cursor == 2
    assert session.current_file().name == "file3.txt"


def test_single_file_session_is_at_end() -> None:
    session = _session(1)

    assert session.state is TriageState.AT_END
    assert session.advance() is False
    assert session.cursor == 0


def test_retreat_saturates_at_first_file() -> None:
    session = _session(2)
    session.advance()

    assert session.retreat() is True
    assert session.cursor == 0
    assert session.retreat() is False
    assert session.cursor == 0


@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_cursor_stays_in_bounds(count: int) -> None:
    session = _session(count)
    upper = max(count - 1, 0)

    for _ in range(count + 3):
        session.advance()
        assert 0 <= session.cursor <= upper
    assert session.cursor == upper

    for _ in range(count + 3):
        session.retreat()
        assert 0 <= session.cursor <= upper
    assert session.cursor == 0


def test_record_decision_does_not_move_cursor() -> None:
    session = _session(2)

    entry = session.record_decision(Decision.KEEP)

    assert entry == (0, Decision.KEEP)
    assert session.cursor == 0
    assert session.history == ((0, Decision.KEEP),)


def test_record_then_undo_restores_history() -> None:
    session = _session(3)
    session.record_decision(Decision.KEEP)
    session.advance()
    before = session.history

    pushed = session.record_decision(Decision.TRASH)
    undone = session.undo()

    assert undone == pushed == DecisionEntry(1, Decision.TRASH)
    assert session.history == before


def test_undo_returns_latest_and_keeps_cursor() -> None:
    session = _session(2)
    session.record_decision(Decision.KEEP)
    session.advance()
    session.record_decision(Decision.TRASH)

    undone = session.undo()

    assert undone == (1, Decision.TRASH)
    assert undone.index == 1
    assert undone.decision is Decision.TRASH
    assert session.history == ((0, Decision.KEEP),)
    assert session.cursor == 1


def test_undo_on_empty_history() -> None:
    session = _session(1)

    assert session.undo() is None
    assert session.history == ()
    assert session.cursor == 0


def test_redeciding_an_index_stacks_entries() -> None:
    session = _session(1)
    session.record_decision(Decision.KEEP)
    session.record_decision(Decision.TRASH)

    assert session.resolved_decisions() == {0: Decision.TRASH}
    assert session.undo() == (0, Decision.TRASH)
    assert session.resolved_decisions() == {0: Decision.KEEP}


def test_decisions_are_recordable_on_empty_session() -> None:
    session = _session(0)

    session.record_decision(Decision.TRASH)

    assert session.history == ((0, Decision.TRASH),)


def test_history_snapshot_cannot_alias_state() -> None:
    session = _session(2)
    session.record_decision(Decision.KEEP)

    snapshot = session.history
    session.record_decision(Decision.TRASH)

    assert snapshot == ((0, Decision.KEEP),)
    assert len(session.history) == 2


def test_record_decision_accepts_string_values() -> None:
    session = _session(1)

    entry = session.record_decision("trash")  # type: ignore[arg-type]

    assert entry.decision is Decision.TRASH


def test_statistics_use_latest_decision_per_file() -> None:
    session = _session(4)
    session.record_decision(Decision.KEEP)
    session.advance()
    session.record_decision(Decision.KEEP)
    session.record_decision(Decision.TRASH)
    session.advance()
    session.record_decision(Decision.TRASH)

    stats = session.statistics()

    assert stats == DecisionStatistics(total_files=4, kept=1, trashed=2)
    assert stats.undecided == 1
    assert session.progress() == pytest.approx(75.0)


def test_progress_of_empty_session() -> None:
    assert _session(0).progress() == 0.0
