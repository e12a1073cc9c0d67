"""Triage decision models."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Decision(str, Enum):
    """Outcome chosen by the operator for a single file."""

    KEEP = "keep"
    TRASH = "trash"


class DecisionEntry(NamedTuple):
    """Decision recorded against the file at ``index``."""

    index: int
    decision: Decision


class TriageState(str, Enum):
    """Coarse position of a session within its file list."""

    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    AT_END = "at_end"


class DecisionStatistics(BaseModel):
    """Aggregate counts over the effective decisions of a session.

    Attributes:
        total_files: Number of files in the session.
        kept: Files whose latest decision is keep.
        trashed: Files whose latest decision is trash.
    """

    model_config = ConfigDict(frozen=True)

    total_files: int = Field(ge=0)
    kept: int = Field(default=0, ge=0)
    trashed: int = Field(default=0, ge=0)

    @property
    def undecided(self) -> int:
        """Return the number of files without a decision."""
        return max(0, self.total_files - self.kept - self.trashed)


__all__ = ["Decision", "DecisionEntry", "TriageState", "DecisionStatistics"]
