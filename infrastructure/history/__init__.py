"""
Session history providers.

This package provides implementations of the SessionHistoryProvider port
defined in application.ports. The in-memory provider serves history
snapshots handed over by the host application.

Usage:
    from infrastructure.history import InMemorySessionHistory

    history = InMemorySessionHistory(sessions=completed_sessions)
    best = await history.get_exercise_best_weights()
"""

from infrastructure.history.in_memory_session_history import InMemorySessionHistory

__all__ = [
    "InMemorySessionHistory",
]
