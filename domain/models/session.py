"""
Workout session models consumed by the analytics engine.

Sessions, exercises and sets are owned by the session-tracking and
persistence layers. The analytics engine only reads them, so they are
frozen value objects here.

Examples:
    >>> from datetime import date
    >>> session = WorkoutSession(
    ...     id="s1",
    ...     name="Push Day",
    ...     date=date(2024, 1, 15),
    ...     exercises=[
    ...         SessionExercise(
    ...             id="e1",
    ...             exercise_name="Bench Press",
    ...             sets=[
    ...                 SessionSet(
    ...                     id="set1",
    ...                     actual_weight=185,
    ...                     actual_reps=5,
    ...                     status=SetStatus.COMPLETED,
    ...                 )
    ...             ],
    ...         )
    ...     ],
    ... )
"""

from datetime import date as Date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.weight import WeightUnit


class SetStatus(str, Enum):
    """Completion state of a single set."""

    PENDING = "pending"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


class ExerciseStatus(str, Enum):
    """Aggregate state of an exercise within a session."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"


class SessionStatus(str, Enum):
    """Overall state of a workout session."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELED = "canceled"


class GroupType(str, Enum):
    """
    How an exercise is grouped with its neighbours.

    - SUPERSET: performed back-to-back with sets interleaved
    - SECTION: organizational grouping only (e.g., "Warmup")
    """

    SUPERSET = "superset"
    SECTION = "section"


class SessionSet(BaseModel):
    """One performed (or skipped) unit of work belonging to an exercise."""

    id: str = Field(..., min_length=1)
    order_index: int = Field(default=0, ge=0)

    # Drop set support
    parent_set_id: Optional[str] = None
    drop_sequence: Optional[int] = Field(default=None, ge=0)

    # Planned
    target_weight: Optional[float] = Field(default=None, ge=0)
    target_weight_unit: Optional[WeightUnit] = None
    target_reps: Optional[int] = Field(default=None, ge=0)
    target_time: Optional[int] = Field(default=None, ge=0, description="Seconds")
    target_rpe: Optional[float] = Field(default=None, ge=0, le=10)
    rest_seconds: Optional[int] = Field(default=None, ge=0)

    # Actual performance
    actual_weight: Optional[float] = Field(default=None, ge=0)
    actual_weight_unit: Optional[WeightUnit] = None
    actual_reps: Optional[int] = Field(default=None, ge=0)
    actual_time: Optional[int] = Field(default=None, ge=0, description="Seconds")
    actual_rpe: Optional[float] = Field(default=None, ge=0, le=10)

    completed_at: Optional[datetime] = None
    status: SetStatus = SetStatus.PENDING
    notes: Optional[str] = None
    tempo: Optional[str] = None
    is_dropset: bool = False
    is_per_side: bool = False

    @property
    def is_completed(self) -> bool:
        return self.status == SetStatus.COMPLETED

    @property
    def volume(self) -> float:
        """
        Weight x reps for a completed set.

        Sets without a weight or without reps (bodyweight, timed) and sets
        that were not completed contribute nothing.
        """
        if self.is_completed and self.actual_weight and self.actual_reps:
            return self.actual_weight * self.actual_reps
        return 0.0

    model_config = {"frozen": True}


class SessionExercise(BaseModel):
    """
    An exercise performed within a session.

    Exercises with no sets are group headers (a superset or section
    label); their members point back at them through `parent_exercise_id`.
    """

    id: str = Field(..., min_length=1)
    exercise_name: str = Field(..., min_length=1)
    order_index: int = Field(default=0, ge=0)
    notes: Optional[str] = None
    equipment_type: Optional[str] = None
    group_type: Optional[GroupType] = None
    group_name: Optional[str] = None
    parent_exercise_id: Optional[str] = None
    sets: List[SessionSet] = Field(default_factory=list)
    status: ExerciseStatus = ExerciseStatus.PENDING

    @property
    def is_header(self) -> bool:
        """True for superset/section headers that carry no sets."""
        return not self.sets

    model_config = {"frozen": True}


class WorkoutSession(BaseModel):
    """A single workout as performed on a calendar date."""

    id: str = Field(..., min_length=1)
    workout_template_id: Optional[str] = Field(
        default=None, description="Template/plan the session originated from"
    )
    name: str = Field(..., min_length=1)
    date: Date = Field(..., description="Calendar date of the workout")
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = Field(default=None, ge=0, description="Seconds")
    notes: Optional[str] = None
    exercises: List[SessionExercise] = Field(default_factory=list)
    status: SessionStatus = SessionStatus.COMPLETED

    def find_exercise(self, exercise_name: str) -> Optional[SessionExercise]:
        """Return the first exercise with this exact name, if any."""
        for exercise in self.exercises:
            if exercise.exercise_name == exercise_name:
                return exercise
        return None

    def has_exercise_with_sets(self, exercise_name: str) -> bool:
        """True if an exercise with this exact name has at least one set."""
        return any(
            ex.exercise_name == exercise_name and ex.sets
            for ex in self.exercises
        )

    model_config = {"frozen": True}
