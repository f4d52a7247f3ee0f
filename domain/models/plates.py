"""
Plate breakdown value objects for the barbell plate calculator.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.weight import WeightUnit, format_weight


# Floating point tolerance for "exactly loadable" weights, in the session unit
PLATE_TOLERANCE = 0.01


class PlateCount(BaseModel):
    """A number of identical plates loaded on one side of the bar."""

    weight: float = Field(..., gt=0, description="Weight of a single plate")
    count: int = Field(..., ge=1, description="Number of plates of this weight")

    @property
    def total(self) -> float:
        """Combined weight of these plates."""
        return self.weight * self.count

    def __str__(self) -> str:
        return f"{self.count}x{format_weight(self.weight)}"

    model_config = {"frozen": True}


class PlateBreakdown(BaseModel):
    """
    Plates required on each side of a barbell to reach a target weight.

    When `is_achievable` is True the plates add up to `weight_per_side`
    (within PLATE_TOLERANCE) and `remainder` is None. Otherwise `remainder`
    holds the signed weight that could not be loaded: positive when the
    standard plates fall short, negative when the target is lighter than
    the bar itself.

    Examples:
        >>> breakdown = PlateBreakdown(
        ...     weight_per_side=25,
        ...     unit="lbs",
        ...     bar_weight=45,
        ...     plates=[PlateCount(weight=25, count=1)],
        ...     is_achievable=True,
        ... )
        >>> breakdown.loaded_weight
        95.0
    """

    weight_per_side: float = Field(..., ge=0, description="Weight per side, excluding the bar")
    unit: WeightUnit = Field(..., description="Unit of measurement")
    bar_weight: float = Field(..., ge=0, description="Weight of the empty bar")
    plates: List[PlateCount] = Field(
        default_factory=list,
        description="Plates per side, heaviest first",
    )
    is_achievable: bool = Field(..., description="True if standard plates load the exact weight")
    remainder: Optional[float] = Field(
        default=None,
        description="Signed leftover per side, only when not achievable",
    )

    @property
    def plate_weight_per_side(self) -> float:
        """Sum of the plates actually loaded on one side."""
        return sum(plate.total for plate in self.plates)

    @property
    def loaded_weight(self) -> float:
        """Total weight on the bar with the listed plates on both sides."""
        return self.bar_weight + 2 * self.plate_weight_per_side

    @property
    def is_bar_only(self) -> bool:
        """True when no plates are needed (or possible)."""
        return not self.plates

    model_config = {"frozen": True}
