"""
Post-workout highlight models.

Highlights are derived, display-ready facts. They are recomputed on
demand and never persisted by the analytics engine.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from domain.models.weight import DEFAULT_WEIGHT_UNIT, WeightUnit


class HighlightType(str, Enum):
    """Kinds of achievement a completed workout can surface."""

    PERSONAL_RECORD = "pr"
    WEIGHT_INCREASE = "weight_increase"
    VOLUME_INCREASE = "volume_increase"
    STREAK = "streak"


class ExercisePR(BaseModel):
    """
    A weight improvement for one exercise.

    Used for both personal records and "vs last time" weight increases.
    When `old_weight` is None this is the first record ever logged for the
    exercise.
    """

    exercise_name: str
    new_weight: float
    new_reps: int = 0
    old_weight: Optional[float] = None
    old_reps: Optional[int] = None
    unit: WeightUnit = DEFAULT_WEIGHT_UNIT

    @property
    def is_first_record(self) -> bool:
        return self.old_weight is None

    model_config = {"frozen": True}


class VolumeComparison(BaseModel):
    """Session volume compared with the most recent similar session."""

    current_volume: float
    previous_volume: float
    percentage_increase: float

    model_config = {"frozen": True}


class WorkoutHighlight(BaseModel):
    """A tagged achievement ready for display."""

    type: HighlightType
    emoji: str = Field(..., description="Decoration shown next to the title")
    title: str = Field(..., description="Short label, e.g. 'New PR!'")
    message: str

    model_config = {"frozen": True}
