"""
Session History Provider Interface (Port).

This module defines the read-only interface the highlight engine uses to
look at past workouts. Implementations own storage, timeouts and retries;
the engine only awaits the results and lets any failure propagate.
"""
from typing import Protocol, Dict, List

from domain.models.session import WorkoutSession
from domain.models.weight import WeightRecord


class SessionHistoryProvider(Protocol):
    """
    Abstract interface for historical workout data.

    Both operations are coroutines so that implementations backed by a
    database or a remote service can suspend while fetching.
    """

    async def get_exercise_best_weights(self) -> Dict[str, WeightRecord]:
        """
        Get the all-time best set for every exercise ever logged.

        Returns:
            Mapping of exercise name (case-sensitive, as stored) to the
            heaviest completed set for that exercise.
        """
        ...

    async def get_recent_sessions(self, limit: int) -> List[WorkoutSession]:
        """
        Get the most recent workout sessions.

        Args:
            limit: Maximum number of sessions to return

        Returns:
            Sessions ordered most recent first, at most `limit` entries.
        """
        ...
