"""Cursor and decision-history state machine for a triage run."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from filetriage.discovery.models import FileRecord
from filetriage.formatting import calculate_progress

from .models import Decision, DecisionEntry, DecisionStatistics, TriageState


class TriageSession:
    """Track the current file and the decisions made over a fixed file list.

    Navigation saturates at both ends of the list and decisions are kept on a
    linear stack. Recording a decision never moves the cursor and undoing one
    never moves it back; callers compose those operations themselves.
    """

    def __init__(self, files: Iterable[FileRecord]) -> None:
        self._files: Tuple[FileRecord, ...] = tuple(files)
        self._cursor = 0
        self._history: list[DecisionEntry] = []

    def __len__(self) -> int:
        return len(self._files)

    @property
    def files(self) -> Tuple[FileRecord, ...]:
        """Return the files under triage in presentation order."""
        return self._files

    @property
    def cursor(self) -> int:
        """Return the index of the file currently presented."""
        return self._cursor

    @property
    def history(self) -> Tuple[DecisionEntry, ...]:
        """Return a snapshot of the decision stack, most recent last."""
        return tuple(self._history)

    @property
    def state(self) -> TriageState:
        """Return whether the session is empty, in progress, or on its last file."""
        if not self._files:
            return TriageState.EMPTY
        if self._cursor == len(self._files) - 1:
            return TriageState.AT_END
        return TriageState.IN_PROGRESS

    def advance(self) -> bool:
        """Move to the next file, returning False when already at the last one."""
        if self._cursor < len(self._files) - 1:
            self._cursor += 1
            return True
        return False

    def retreat(self) -> bool:
        """Move to the previous file, returning False when already at the first one."""
        if self._cursor > 0:
            self._cursor -= 1
            return True
        return False

    def current_file(self) -> Optional[FileRecord]:
        """Return the file under the cursor, or None for an empty session."""
        if not self._files:
            return None
        return self._files[self._cursor]

    def record_decision(self, decision: Decision) -> DecisionEntry:
        """Push ``decision`` for the current cursor onto the history stack.

        Args:
            decision: Decision to record.

        Returns:
            DecisionEntry: The entry that was pushed.
        """
        entry = DecisionEntry(self._cursor, Decision(decision))
        self._history.append(entry)
        return entry

    def undo(self) -> Optional[DecisionEntry]:
        """Pop and return the most recent decision, or None if there is none."""
        if not self._history:
            return None
        return self._history.pop()

    def resolved_decisions(self) -> Dict[int, Decision]:
        """Return the latest decision recorded for each decided index."""
        resolved: Dict[int, Decision] = {}
        for index, decision in self._history:
            resolved[index] = decision
        return resolved

    def statistics(self) -> DecisionStatistics:
        """Summarize the effective decisions over the session's files."""
        resolved = self.resolved_decisions().values()
        return DecisionStatistics(
            total_files=len(self._files),
            kept=sum(1 for decision in resolved if decision is Decision.KEEP),
            trashed=sum(1 for decision in resolved if decision is Decision.TRASH),
        )

    def progress(self) -> float:
        """Return the percentage of files that carry a decision."""
        return calculate_progress(len(self.resolved_decisions()), len(self._files))


def new_session(files: Iterable[FileRecord]) -> TriageSession:
    """Create a session positioned on the first of ``files``."""
    return TriageSession(files)


__all__ = ["TriageSession", "new_session"]
