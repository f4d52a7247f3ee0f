"""
Domain layer for the Workout Analytics engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ExercisePR,
    PlateBreakdown,
    SessionExercise,
    SessionSet,
    VolumeComparison,
    WeightRecord,
    WorkoutHighlight,
    WorkoutSession,
)

__all__ = [
    "ExercisePR",
    "PlateBreakdown",
    "SessionExercise",
    "SessionSet",
    "VolumeComparison",
    "WeightRecord",
    "WorkoutHighlight",
    "WorkoutSession",
]
