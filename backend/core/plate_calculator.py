"""
Plate Calculator for barbell exercises.

This module provides the barbell loading logic used while a session is
displayed:
- Per-side plate breakdown for a target total weight (greedy, heaviest first)
- Barbell exercise classification (pluggable keyword heuristic)
- Text rendering of a breakdown
"""
import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

from application.ports.barbell_classifier import BarbellClassifier
from domain.models.plates import PLATE_TOLERANCE, PlateBreakdown, PlateCount
from domain.models.weight import DEFAULT_WEIGHT_UNIT, WeightUnit, format_weight

logger = logging.getLogger(__name__)


# =============================================================================
# Standard Equipment
# =============================================================================

STANDARD_PLATES: Dict[str, List[float]] = {
    "lbs": [45, 35, 25, 10, 5, 2.5],
    "kg": [25, 20, 15, 10, 5, 2.5, 1.25],
}

STANDARD_BAR_WEIGHTS: Dict[str, float] = {
    "lbs": 45,
    "kg": 20,
}

# Guards floor() against values like 4.9999999 that should be 5
_FLOOR_EPSILON = 1e-9


def standard_bar_weight(unit: WeightUnit) -> float:
    """Weight of an Olympic bar in the given unit (45 lbs / 20 kg)."""
    return STANDARD_BAR_WEIGHTS[unit]


# =============================================================================
# Barbell Classification
# =============================================================================

BARBELL_EXCLUDE_KEYWORDS = (
    "dumbbell",
    "kettlebell",
    "bodyweight",
    "cable",
    "machine",
)

BARBELL_EXERCISE_KEYWORDS = (
    "deadlift",
    "bench press",
    "overhead press",
    "strict press",
    "power clean",
    "hang clean",
    "clean and jerk",
    "snatch",
    "front squat",
    "back squat",
    "romanian deadlift",
    "rdl",
    "bent over row",
    "pendlay row",
)


class KeywordBarbellClassifier:
    """
    Default BarbellClassifier based on exercise name keywords.

    Rules, in order:
    1. Equipment type mentioning "barbell" wins.
    2. An exercise name mentioning "barbell" wins.
    3. Names mentioning other equipment (dumbbell, cable, ...) are excluded.
    4. Otherwise the name must contain a known barbell lift.

    Matching is case-insensitive. Extra lift names can be supplied for gyms
    that use their own naming (e.g., "zercher").
    """

    def __init__(
        self,
        extra_keywords: Optional[Iterable[str]] = None,
        exclude_keywords: Sequence[str] = BARBELL_EXCLUDE_KEYWORDS,
    ):
        self._keywords = tuple(BARBELL_EXERCISE_KEYWORDS) + tuple(
            k.strip().lower() for k in (extra_keywords or []) if k.strip()
        )
        self._exclude_keywords = tuple(k.lower() for k in exclude_keywords)

    def is_barbell_exercise(
        self,
        exercise_name: str,
        equipment_type: Optional[str] = None,
    ) -> bool:
        if equipment_type and "barbell" in equipment_type.lower():
            return True

        lower_name = exercise_name.lower()

        if "barbell" in lower_name:
            return True

        if any(keyword in lower_name for keyword in self._exclude_keywords):
            return False

        return any(keyword in lower_name for keyword in self._keywords)


_default_classifier = KeywordBarbellClassifier()


def is_barbell_exercise(
    exercise_name: str,
    equipment_type: Optional[str] = None,
    classifier: Optional[BarbellClassifier] = None,
) -> bool:
    """
    Determine whether an exercise is loaded on a barbell.

    Args:
        exercise_name: Exercise name as logged
        equipment_type: Optional freeform equipment type
        classifier: Strategy to use; defaults to KeywordBarbellClassifier

    Returns:
        True if the plate calculator applies to this exercise
    """
    return (classifier or _default_classifier).is_barbell_exercise(
        exercise_name, equipment_type
    )


# =============================================================================
# Plate Breakdown
# =============================================================================


def calculate_plates(
    total_weight: float,
    unit: WeightUnit = DEFAULT_WEIGHT_UNIT,
    bar_weight: Optional[float] = None,
    available_plates: Optional[Sequence[float]] = None,
) -> PlateBreakdown:
    """
    Calculate the plates needed on each side of the bar.

    Uses a greedy, heaviest-first decomposition. This is exact for the
    standard plate inventories, where each plate size divides evenly into
    the next larger size.

    Targets lighter than the bar are not an error: they come back as an
    unachievable breakdown with no plates and a negative remainder. NaN or
    infinite weights come back unachievable with no remainder.

    Args:
        total_weight: Target total weight including the bar
        unit: "lbs" or "kg"
        bar_weight: Bar weight; defaults to the standard bar for the unit
        available_plates: Plate sizes to use; defaults to the standard set

    Returns:
        PlateBreakdown for one side of the bar
    """
    bar = bar_weight if bar_weight is not None else standard_bar_weight(unit)

    weight_per_side = (total_weight - bar) / 2

    if not math.isfinite(weight_per_side):
        logger.warning(f"Cannot load a non-finite target: total={total_weight} bar={bar}")
        return PlateBreakdown(
            weight_per_side=0,
            unit=unit,
            bar_weight=bar if math.isfinite(bar) and bar >= 0 else standard_bar_weight(unit),
            plates=[],
            is_achievable=False,
        )

    if weight_per_side < 0:
        logger.debug(
            f"Target {format_weight(total_weight)}{unit} is below the "
            f"{format_weight(bar)}{unit} bar"
        )
        return PlateBreakdown(
            weight_per_side=0,
            unit=unit,
            bar_weight=bar,
            plates=[],
            is_achievable=False,
            remainder=weight_per_side,
        )

    if available_plates is None:
        plate_sizes = STANDARD_PLATES[unit]
    else:
        plate_sizes = sorted((p for p in available_plates if p > 0), reverse=True)

    plates: List[PlateCount] = []
    remaining = weight_per_side

    for plate_weight in plate_sizes:
        count = math.floor(remaining / plate_weight + _FLOOR_EPSILON)
        if count > 0:
            plates.append(PlateCount(weight=plate_weight, count=count))
            remaining -= count * plate_weight

    is_achievable = abs(remaining) < PLATE_TOLERANCE

    return PlateBreakdown(
        weight_per_side=weight_per_side,
        unit=unit,
        bar_weight=bar,
        plates=plates,
        is_achievable=is_achievable,
        remainder=None if is_achievable else remaining,
    )


# =============================================================================
# Formatting
# =============================================================================


def _format_shortfall(remainder: float, unit: str) -> str:
    # One decimal, halves rounded up (1.25 -> "1.3")
    rounded = math.floor(remainder * 10 + 0.5) / 10
    return f" (+{rounded:.1f}{unit} short)"


def format_plate_breakdown(breakdown: PlateBreakdown) -> str:
    """
    Format a breakdown as a human-readable string.

    A positive shortfall is appended whenever the plates cannot reach the
    target, including when not even the smallest plate fits.

    Examples:
        "Bar only"
        "Bar only (+1.3lbs short)"
        "45lbs"
        "2×45lbs + 10lbs"
        "45lbs + 5lbs + 2.5lbs (+1.3lbs short)"
    """
    unit = breakdown.unit

    if breakdown.plates:
        result = " + ".join(
            f"{format_weight(p.weight)}{unit}" if p.count == 1
            else f"{p.count}×{format_weight(p.weight)}{unit}"
            for p in breakdown.plates
        )
    else:
        result = "Bar only"

    if breakdown.remainder is not None and breakdown.remainder > PLATE_TOLERANCE:
        return result + _format_shortfall(breakdown.remainder, unit)

    return result


def format_complete_plate_setup(breakdown: PlateBreakdown) -> str:
    """
    Format the full bar setup, naming the bar and the per-side plates.

    Example:
        "45lbs bar + 2×45lbs per side"
    """
    if not breakdown.plates:
        return format_plate_breakdown(breakdown)

    bar = f"{format_weight(breakdown.bar_weight)}{breakdown.unit}"
    return f"{bar} bar + {format_plate_breakdown(breakdown)} per side"
