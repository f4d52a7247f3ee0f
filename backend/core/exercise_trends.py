"""
Exercise trend over recent sessions.

Classifies an exercise as improving, stable or declining by comparing the
total completed weight of its newest and oldest session within a recent
window.
"""
from enum import Enum
from typing import List, Sequence

from domain.models.session import SetStatus, WorkoutSession


DEFAULT_TREND_SESSIONS = 5
TREND_MARGIN = 0.05


class ExerciseTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


def _exercise_total_weight(session: WorkoutSession, exercise_name: str) -> float:
    total = 0.0
    for exercise in session.exercises:
        if exercise.exercise_name != exercise_name:
            continue
        for session_set in exercise.sets:
            if session_set.status == SetStatus.COMPLETED and session_set.actual_weight is not None:
                total += session_set.actual_weight
    return total


def calculate_exercise_trend(
    sessions: Sequence[WorkoutSession],
    exercise_name: str,
    limit: int = DEFAULT_TREND_SESSIONS,
) -> ExerciseTrend:
    """
    Calculate the trend of an exercise across recent sessions.

    Args:
        sessions: Sessions ordered most recent first
        exercise_name: Exact exercise name
        limit: Number of most recent sessions containing the exercise to consider

    Returns:
        IMPROVING if the newest total beats the oldest by more than 5%,
        DECLINING if it trails by more than 5%, STABLE otherwise (including
        when fewer than two sessions contain the exercise)
    """
    totals: List[float] = []
    for session in sessions:
        if len(totals) >= limit:
            break
        if session.has_exercise_with_sets(exercise_name):
            totals.append(_exercise_total_weight(session, exercise_name))

    if len(totals) < 2:
        return ExerciseTrend.STABLE

    recent = totals[0]
    older = totals[-1]

    if recent > older * (1 + TREND_MARGIN):
        return ExerciseTrend.IMPROVING
    if recent < older * (1 - TREND_MARGIN):
        return ExerciseTrend.DECLINING
    return ExerciseTrend.STABLE
