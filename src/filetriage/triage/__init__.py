"""Triage state machine over discovered files."""

from .models import Decision, DecisionEntry, DecisionStatistics, TriageState
from .session import TriageSession, new_session

__all__ = [
    "Decision",
    "DecisionEntry",
    "DecisionStatistics",
    "TriageSession",
    "TriageState",
    "new_session",
]
