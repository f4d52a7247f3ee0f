"""
In-memory implementation of SessionHistoryProvider.

Serves a snapshot of workout history held in memory. Best weights are
aggregated from the stored sessions the same way the on-device database
does it, unless the snapshot already carries pre-aggregated best weights.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from domain.models.session import SessionStatus, SetStatus, WorkoutSession
from domain.models.weight import DEFAULT_WEIGHT_UNIT, WeightRecord

logger = logging.getLogger(__name__)


def _recency_key(session: WorkoutSession) -> Tuple:
    # Sessions without a start time sort after timed ones on the same date
    start = session.start_time
    return (session.date, start is not None, start.timestamp() if start else 0.0)


class InMemorySessionHistory:
    """
    In-memory SessionHistoryProvider.

    Only completed sessions count as history, and only completed sets with
    a positive weight count towards best weights.
    """

    def __init__(
        self,
        sessions: Optional[Iterable[WorkoutSession]] = None,
        best_weights: Optional[Dict[str, WeightRecord]] = None,
    ):
        """
        Initialize with a history snapshot.

        Args:
            sessions: Past sessions in any order
            best_weights: Pre-aggregated best weights; computed from
                `sessions` when omitted
        """
        self._sessions: List[WorkoutSession] = list(sessions or [])
        self._best_weights = dict(best_weights) if best_weights is not None else None

    def add_session(self, session: WorkoutSession) -> None:
        """Add a session to the snapshot."""
        self._sessions.append(session)

    def _completed_sessions(self) -> List[WorkoutSession]:
        completed = [s for s in self._sessions if s.status == SessionStatus.COMPLETED]
        return sorted(completed, key=_recency_key, reverse=True)

    async def get_exercise_best_weights(self) -> Dict[str, WeightRecord]:
        """Get the heaviest completed set per exercise name."""
        if self._best_weights is not None:
            return dict(self._best_weights)

        best: Dict[str, WeightRecord] = {}
        for session in self._sessions:
            if session.status != SessionStatus.COMPLETED:
                continue
            for exercise in session.exercises:
                for session_set in exercise.sets:
                    weight = session_set.actual_weight
                    if session_set.status != SetStatus.COMPLETED or not weight or weight <= 0:
                        continue
                    current = best.get(exercise.exercise_name)
                    if current is None or weight > current.weight:
                        best[exercise.exercise_name] = WeightRecord(
                            weight=weight,
                            reps=session_set.actual_reps or 0,
                            unit=(
                                session_set.actual_weight_unit
                                or session_set.target_weight_unit
                                or DEFAULT_WEIGHT_UNIT
                            ),
                        )

        logger.debug(f"Aggregated best weights for {len(best)} exercises")
        return dict(sorted(best.items()))

    async def get_recent_sessions(self, limit: int) -> List[WorkoutSession]:
        """Get completed sessions, newest first, at most `limit`."""
        if limit <= 0:
            return []
        return self._completed_sessions()[:limit]
