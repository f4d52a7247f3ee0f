"""
Weight value objects for barbell and session analytics.

Weights always travel with their unit. Nothing in the analytics engine
converts between pounds and kilograms; comparisons and arithmetic happen
within a single unit.
"""

from typing import Literal, Union

from pydantic import BaseModel, Field


WeightUnit = Literal["lbs", "kg"]

DEFAULT_WEIGHT_UNIT: WeightUnit = "lbs"


def format_weight(value: Union[int, float]) -> str:
    """
    Render a weight magnitude without a trailing ".0".

    Examples:
        >>> format_weight(225.0)
        '225'
        >>> format_weight(152.5)
        '152.5'
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


class WeightRecord(BaseModel):
    """
    The heaviest set logged for one exercise.

    Used both for the historical all-time best supplied by the session
    history provider and for the per-exercise maximum inside a session.

    Examples:
        >>> record = WeightRecord(weight=225, reps=5, unit="lbs")
        >>> str(record)
        '225lbs x 5'
    """

    weight: float = Field(..., ge=0, description="Weight of the heaviest set")
    reps: int = Field(default=0, ge=0, description="Reps performed at that weight")
    unit: WeightUnit = Field(default=DEFAULT_WEIGHT_UNIT, description="Unit of measurement")

    def __str__(self) -> str:
        return f"{format_weight(self.weight)}{self.unit} x {self.reps}"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"weight": 225, "reps": 5, "unit": "lbs"},
                {"weight": 100, "reps": 3, "unit": "kg"},
            ]
        },
    }
