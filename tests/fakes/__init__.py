"""
Fake Implementations and Factories for Testing.

This package provides in-memory fake implementations of the port
interfaces for fast, isolated testing, plus factory functions for building
sessions without repeating boilerplate.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeSessionHistoryProvider, create_session, create_exercise

    session = create_session(
        "current",
        exercises=[create_exercise("Bench Press", [(185, 5), (195, 3)])],
    )
    provider = FakeSessionHistoryProvider(sessions=[session])
"""
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from domain.models import (
    GroupType,
    SessionExercise,
    SessionSet,
    SessionStatus,
    SetStatus,
    WorkoutSession,
)

from tests.fakes.session_history import FakeSessionHistoryProvider


SetSpec = Union[SessionSet, Tuple[Optional[float], Optional[int]]]


# =============================================================================
# Factory Functions
# =============================================================================


def create_set(
    weight: Optional[float] = None,
    reps: Optional[int] = None,
    *,
    set_id: Optional[str] = None,
    order_index: int = 0,
    status: SetStatus = SetStatus.COMPLETED,
    unit: Optional[str] = "lbs",
) -> SessionSet:
    """
    Create a SessionSet with actual weight and reps.

    Args:
        weight: Actual weight lifted
        reps: Actual reps performed
        set_id: Set ID; generated from order_index when omitted
        order_index: Position within the exercise
        status: Completion status (completed by default)
        unit: Actual weight unit

    Returns:
        SessionSet
    """
    return SessionSet(
        id=set_id or f"set-{order_index + 1}",
        order_index=order_index,
        actual_weight=weight,
        actual_weight_unit=unit if weight is not None else None,
        actual_reps=reps,
        status=status,
    )


def create_exercise(
    name: str,
    sets: Iterable[SetSpec] = (),
    *,
    exercise_id: Optional[str] = None,
    order_index: int = 0,
    group_type: Optional[GroupType] = None,
    group_name: Optional[str] = None,
    parent_exercise_id: Optional[str] = None,
    equipment_type: Optional[str] = None,
) -> SessionExercise:
    """
    Create a SessionExercise.

    Sets may be given as SessionSet objects or (weight, reps) tuples, which
    become completed sets in lbs.
    """
    exercise_id = exercise_id or name.lower().replace(" ", "-")
    built: List[SessionSet] = []
    for index, spec in enumerate(sets):
        if isinstance(spec, SessionSet):
            built.append(spec)
        else:
            weight, reps = spec
            built.append(create_set(
                weight,
                reps,
                set_id=f"{exercise_id}-set-{index + 1}",
                order_index=index,
            ))

    return SessionExercise(
        id=exercise_id,
        exercise_name=name,
        order_index=order_index,
        equipment_type=equipment_type,
        group_type=group_type,
        group_name=group_name,
        parent_exercise_id=parent_exercise_id,
        sets=built,
    )


def create_session(
    session_id: str,
    *,
    name: str = "Push Day",
    session_date: date = date(2024, 1, 15),
    exercises: Optional[Sequence[SessionExercise]] = None,
    workout_template_id: Optional[str] = None,
    status: SessionStatus = SessionStatus.COMPLETED,
) -> WorkoutSession:
    """
    Create a WorkoutSession.

    Args:
        session_id: Session ID
        name: Workout name
        session_date: Calendar date
        exercises: Exercises in order
        workout_template_id: Originating template
        status: Session status (completed by default)

    Returns:
        WorkoutSession
    """
    return WorkoutSession(
        id=session_id,
        name=name,
        date=session_date,
        exercises=list(exercises or []),
        workout_template_id=workout_template_id,
        status=status,
    )


def create_history_provider(
    *,
    sessions: Optional[List[WorkoutSession]] = None,
    best_weights: Optional[dict] = None,
) -> FakeSessionHistoryProvider:
    """Create a FakeSessionHistoryProvider with optional seed data."""
    return FakeSessionHistoryProvider(sessions=sessions, best_weights=best_weights)


__all__ = [
    "FakeSessionHistoryProvider",
    "create_set",
    "create_exercise",
    "create_session",
    "create_history_provider",
]
