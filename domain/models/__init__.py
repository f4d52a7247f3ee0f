"""
Domain models for the Workout Analytics engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core concepts:
- WorkoutSession: A performed workout, the aggregate root
- SessionExercise: An exercise (or superset/section header) within a session
- SessionSet: One performed, skipped or pending set
- WeightRecord: Heaviest set for an exercise
- PlateBreakdown: Plates to load on each side of a barbell
- WorkoutHighlight: A display-ready achievement

Usage:
    >>> from datetime import date
    >>> from domain.models import WorkoutSession, SessionExercise, SessionSet

    >>> session = WorkoutSession(
    ...     id="s1",
    ...     name="Leg Day",
    ...     date=date(2024, 1, 15),
    ...     exercises=[
    ...         SessionExercise(
    ...             id="e1",
    ...             exercise_name="Back Squat",
    ...             sets=[SessionSet(id="set1", actual_weight=225, actual_reps=5, status="completed")],
    ...         )
    ...     ],
    ... )

    >>> # Serialize to JSON
    >>> json_str = session.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> session = WorkoutSession.model_validate_json(json_str)
"""

from domain.models.highlight import (
    ExercisePR,
    HighlightType,
    VolumeComparison,
    WorkoutHighlight,
)
from domain.models.plates import PLATE_TOLERANCE, PlateBreakdown, PlateCount
from domain.models.session import (
    ExerciseStatus,
    GroupType,
    SessionExercise,
    SessionSet,
    SessionStatus,
    SetStatus,
    WorkoutSession,
)
from domain.models.weight import (
    DEFAULT_WEIGHT_UNIT,
    WeightRecord,
    WeightUnit,
    format_weight,
)

__all__ = [
    # Sessions
    "WorkoutSession",
    "SessionExercise",
    "SessionSet",
    # Weights and plates
    "WeightRecord",
    "WeightUnit",
    "DEFAULT_WEIGHT_UNIT",
    "format_weight",
    "PlateBreakdown",
    "PlateCount",
    "PLATE_TOLERANCE",
    # Highlights
    "WorkoutHighlight",
    "ExercisePR",
    "VolumeComparison",
    # Enums
    "SetStatus",
    "ExerciseStatus",
    "SessionStatus",
    "GroupType",
    "HighlightType",
]
