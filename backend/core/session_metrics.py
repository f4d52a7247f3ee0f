"""
Session metrics shared by the highlight engine and the guided session.

Pure functions over a single WorkoutSession:
- Heaviest completed set per exercise
- Total session volume (weight x reps)
- Trackable exercises, progress and resume position
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from domain.models.session import SessionExercise, SetStatus, WorkoutSession
from domain.models.weight import DEFAULT_WEIGHT_UNIT, WeightRecord


# =============================================================================
# Weight & Volume
# =============================================================================


def get_exercise_max_weight(exercise: SessionExercise) -> Optional[WeightRecord]:
    """
    Get the heaviest completed set of an exercise.

    Only completed sets with a positive actual weight count. When several
    sets share the maximum weight, the first one wins.

    Returns:
        WeightRecord for the heaviest set, or None if nothing was lifted
    """
    max_weight = 0.0
    max_set = None

    for session_set in exercise.sets:
        weight = session_set.actual_weight
        if session_set.status == SetStatus.COMPLETED and weight and weight > max_weight:
            max_weight = weight
            max_set = session_set

    if max_set is None:
        return None

    return WeightRecord(
        weight=max_weight,
        reps=max_set.actual_reps or 0,
        unit=max_set.actual_weight_unit or DEFAULT_WEIGHT_UNIT,
    )


def get_session_max_weights(session: WorkoutSession) -> Dict[str, WeightRecord]:
    """
    Get the heaviest completed set for each exercise name in a session.

    Group headers (exercises without sets) are skipped. If the same name
    appears twice, the later exercise's maximum replaces the earlier one
    while the name keeps its original position.
    """
    maxes: Dict[str, WeightRecord] = {}

    for exercise in session.exercises:
        if not exercise.sets:
            continue

        exercise_max = get_exercise_max_weight(exercise)
        if exercise_max is not None:
            maxes[exercise.exercise_name] = exercise_max

    return maxes


def calculate_session_volume(session: WorkoutSession) -> float:
    """Total weight x reps over every completed set in the session."""
    return float(sum(
        session_set.volume
        for exercise in session.exercises
        for session_set in exercise.sets
    ))


# =============================================================================
# Guided Session Progress
# =============================================================================


@dataclass
class SessionProgress:
    """Set counts for a session in progress."""
    completed: int
    total: int

    @property
    def fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total


def get_trackable_exercises(session: Optional[WorkoutSession]) -> List[SessionExercise]:
    """Exercises that have sets to perform (superset/section headers excluded)."""
    if session is None:
        return []
    return [exercise for exercise in session.exercises if exercise.sets]


def calculate_session_progress(session: Optional[WorkoutSession]) -> SessionProgress:
    """
    Count finished sets against all trackable sets.

    Skipped sets count as finished: the user has moved past them.
    """
    completed = 0
    total = 0

    for exercise in get_trackable_exercises(session):
        for session_set in exercise.sets:
            total += 1
            if session_set.status in (SetStatus.COMPLETED, SetStatus.SKIPPED):
                completed += 1

    return SessionProgress(completed=completed, total=total)


def find_first_pending_position(exercises: List[SessionExercise]) -> Tuple[int, int]:
    """
    Find where to resume a session.

    Returns:
        (exercise_index, set_index) of the first pending set, or (0, 0)
        when every set is finished
    """
    for exercise_index, exercise in enumerate(exercises):
        for set_index, session_set in enumerate(exercise.sets):
            if session_set.status == SetStatus.PENDING:
                return exercise_index, set_index
    return 0, 0
