"""
Unit tests for the barbell plate calculator.

Tests cover:
- Greedy per-side plate breakdown (lbs and kg)
- Unachievable and below-bar targets
- Barbell exercise classification
- Breakdown formatting
"""
import pytest

from backend.core.plate_calculator import (
    STANDARD_BAR_WEIGHTS,
    STANDARD_PLATES,
    KeywordBarbellClassifier,
    calculate_plates,
    format_complete_plate_setup,
    format_plate_breakdown,
    is_barbell_exercise,
    standard_bar_weight,
)
from domain.models import PlateBreakdown, PlateCount


def _plates(breakdown: PlateBreakdown):
    return [(p.weight, p.count) for p in breakdown.plates]


# =============================================================================
# Plate Breakdown Tests
# =============================================================================


@pytest.mark.unit
class TestCalculatePlates:
    """Tests for calculate_plates()."""

    def test_single_plate_per_side(self):
        """95 lbs is a 45 lbs bar plus a 25 on each side."""
        breakdown = calculate_plates(95, "lbs")

        assert breakdown.weight_per_side == 25
        assert breakdown.bar_weight == 45
        assert _plates(breakdown) == [(25, 1)]
        assert breakdown.is_achievable is True
        assert breakdown.remainder is None

    def test_multiple_plates_of_same_size(self):
        breakdown = calculate_plates(225, "lbs")

        assert breakdown.weight_per_side == 90
        assert _plates(breakdown) == [(45, 2)]
        assert breakdown.is_achievable is True

    def test_mixed_plates_heaviest_first(self):
        """275 lbs is a 45 lbs bar plus 115 per side."""
        breakdown = calculate_plates(275, "lbs")

        assert _plates(breakdown) == [(45, 2), (25, 1)]
        assert breakdown.is_achievable is True

    def test_fractional_plates(self):
        breakdown = calculate_plates(140, "lbs")

        # 47.5 per side
        assert _plates(breakdown) == [(45, 1), (2.5, 1)]
        assert breakdown.is_achievable is True

    def test_bar_only(self):
        breakdown = calculate_plates(45, "lbs")

        assert breakdown.weight_per_side == 0
        assert breakdown.plates == []
        assert breakdown.is_achievable is True
        assert breakdown.is_bar_only is True

    def test_unachievable_weight_reports_remainder(self):
        """152.5 lbs leaves 1.25 lbs per side that no standard plate covers."""
        breakdown = calculate_plates(152.5, "lbs")

        assert breakdown.weight_per_side == 53.75
        assert _plates(breakdown) == [(45, 1), (5, 1), (2.5, 1)]
        assert breakdown.is_achievable is False
        assert breakdown.remainder == pytest.approx(1.25)

    def test_target_below_bar_is_not_an_error(self):
        breakdown = calculate_plates(30, "lbs")

        assert breakdown.weight_per_side == 0
        assert breakdown.plates == []
        assert breakdown.is_achievable is False
        assert breakdown.remainder == pytest.approx(-7.5)

    def test_lighter_than_smallest_plate(self):
        """47.5 lbs needs 1.25 lbs per side, below the 2.5 lb plate."""
        breakdown = calculate_plates(47.5, "lbs")

        assert breakdown.plates == []
        assert breakdown.is_achievable is False
        assert breakdown.remainder == pytest.approx(1.25)

    @pytest.mark.parametrize("total", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_target_is_unachievable(self, total):
        breakdown = calculate_plates(total, "lbs")

        assert breakdown.weight_per_side == 0
        assert breakdown.plates == []
        assert breakdown.is_achievable is False
        assert breakdown.remainder is None
        assert breakdown.bar_weight == 45

    def test_non_finite_bar_falls_back_to_standard_bar(self):
        breakdown = calculate_plates(135, "kg", bar_weight=float("nan"))

        assert breakdown.is_achievable is False
        assert breakdown.bar_weight == 20

    def test_kg_uses_kg_bar_and_plates(self):
        breakdown = calculate_plates(100, "kg")

        assert breakdown.bar_weight == 20
        assert breakdown.weight_per_side == 40
        assert _plates(breakdown) == [(25, 1), (15, 1)]
        assert breakdown.is_achievable is True

    def test_kg_change_plates(self):
        breakdown = calculate_plates(142.5, "kg")

        # 61.25 per side
        assert _plates(breakdown) == [(25, 2), (10, 1), (1.25, 1)]
        assert breakdown.is_achievable is True

    def test_custom_bar_weight(self):
        breakdown = calculate_plates(125, "lbs", bar_weight=35)

        assert breakdown.bar_weight == 35
        assert _plates(breakdown) == [(45, 1)]

    def test_custom_plate_inventory(self):
        breakdown = calculate_plates(135, "lbs", available_plates=[10, 25])

        assert _plates(breakdown) == [(25, 1), (10, 2)]
        assert breakdown.is_achievable is True

    def test_default_unit_is_lbs(self):
        breakdown = calculate_plates(135)

        assert breakdown.unit == "lbs"
        assert breakdown.bar_weight == 45

    @pytest.mark.parametrize("total", [45, 95, 135, 185, 225, 315, 405, 142.5, 137.5])
    def test_plates_never_exceed_weight_per_side(self, total):
        breakdown = calculate_plates(total, "lbs")

        assert breakdown.plate_weight_per_side <= breakdown.weight_per_side + 0.01
        if breakdown.is_achievable:
            assert breakdown.loaded_weight == pytest.approx(total)
        else:
            assert breakdown.plate_weight_per_side + breakdown.remainder == pytest.approx(
                breakdown.weight_per_side
            )

    @pytest.mark.parametrize("total", [20, 60, 102.5, 142.5])
    def test_kg_plates_never_exceed_weight_per_side(self, total):
        breakdown = calculate_plates(total, "kg")

        assert breakdown.plate_weight_per_side <= breakdown.weight_per_side + 0.01
        assert breakdown.is_achievable is True
        assert breakdown.loaded_weight == pytest.approx(total)

    def test_plate_sizes_strictly_descending(self):
        breakdown = calculate_plates(402.5, "lbs")

        weights = [p.weight for p in breakdown.plates]
        assert weights == sorted(weights, reverse=True)
        assert len(weights) == len(set(weights))


@pytest.mark.unit
class TestStandardEquipment:
    """Tests for standard plates and bars."""

    def test_standard_bar_weights(self):
        assert standard_bar_weight("lbs") == 45
        assert standard_bar_weight("kg") == 20
        assert STANDARD_BAR_WEIGHTS == {"lbs": 45, "kg": 20}

    def test_standard_plates_descending(self):
        for plates in STANDARD_PLATES.values():
            assert plates == sorted(plates, reverse=True)

    def test_plate_count_total(self):
        assert PlateCount(weight=45, count=2).total == 90


# =============================================================================
# Barbell Classification Tests
# =============================================================================


@pytest.mark.unit
class TestIsBarbellExercise:
    """Tests for barbell exercise classification."""

    @pytest.mark.parametrize("name", [
        "Back Squat",
        "Bench Press",
        "DEADLIFT",
        "Romanian Deadlift",
        "Barbell Curl",
        "Pendlay Row",
        "Power Clean",
    ])
    def test_barbell_lifts(self, name):
        assert is_barbell_exercise(name) is True

    @pytest.mark.parametrize("name", [
        "Dumbbell Bench Press",
        "Cable Row",
        "Machine Chest Press",
        "Kettlebell Swing",
        "Bicep Curl",
        "Pull Up",
    ])
    def test_non_barbell_exercises(self, name):
        assert is_barbell_exercise(name) is False

    def test_equipment_type_wins(self):
        assert is_barbell_exercise("Hip Thrust", "Barbell") is True

    def test_barbell_in_name_beats_exclusions(self):
        assert is_barbell_exercise("Barbell Machine Hybrid Row") is True

    def test_extra_keywords(self):
        classifier = KeywordBarbellClassifier(extra_keywords=["Zercher", " "])

        assert is_barbell_exercise("Zercher Squat") is False
        assert is_barbell_exercise("Zercher Squat", classifier=classifier) is True
        assert classifier.is_barbell_exercise("Back Squat") is True

    def test_custom_exclusions(self):
        classifier = KeywordBarbellClassifier(exclude_keywords=["smith"])

        assert classifier.is_barbell_exercise("Smith Bench Press") is False
        assert classifier.is_barbell_exercise("Machine Bench Press") is True


# =============================================================================
# Formatting Tests
# =============================================================================


@pytest.mark.unit
class TestFormatPlateBreakdown:
    """Tests for breakdown formatting."""

    def test_bar_only(self):
        assert format_plate_breakdown(calculate_plates(45)) == "Bar only"

    def test_below_bar_formats_as_bar_only(self):
        assert format_plate_breakdown(calculate_plates(30)) == "Bar only"

    def test_single_plate_has_no_count(self):
        assert format_plate_breakdown(calculate_plates(135)) == "45lbs"

    def test_multiple_plates(self):
        assert format_plate_breakdown(calculate_plates(245)) == "2×45lbs + 10lbs"

    def test_fractional_plate(self):
        assert format_plate_breakdown(calculate_plates(140)) == "45lbs + 2.5lbs"

    def test_shortfall_is_shown(self):
        formatted = format_plate_breakdown(calculate_plates(152.5))

        assert formatted == "45lbs + 5lbs + 2.5lbs (+1.3lbs short)"

    def test_shortfall_rounds_half_up(self):
        """51.25 per side with only 45s and 5s leaves exactly 1.25."""
        breakdown = calculate_plates(147.5, "lbs", available_plates=[45, 5])

        assert format_plate_breakdown(breakdown) == "45lbs + 5lbs (+1.3lbs short)"

    def test_no_plates_fit_shows_shortfall(self):
        assert format_plate_breakdown(calculate_plates(47.5)) == "Bar only (+1.3lbs short)"

    def test_non_finite_target_formats_as_bar_only(self):
        assert format_plate_breakdown(calculate_plates(float("nan"))) == "Bar only"

    def test_kg(self):
        assert format_plate_breakdown(calculate_plates(100, "kg")) == "25kg + 15kg"


@pytest.mark.unit
class TestFormatCompletePlateSetup:
    """Tests for the full bar setup string."""

    def test_bar_only(self):
        assert format_complete_plate_setup(calculate_plates(45)) == "Bar only"

    def test_names_bar_and_plates(self):
        setup = format_complete_plate_setup(calculate_plates(225))

        assert setup == "45lbs bar + 2×45lbs per side"

    def test_kg_bar(self):
        setup = format_complete_plate_setup(calculate_plates(60, "kg"))

        assert setup == "20kg bar + 20kg per side"

    def test_no_plates_fit_shows_shortfall(self):
        setup = format_complete_plate_setup(calculate_plates(47.5))

        assert setup == "Bar only (+1.3lbs short)"

    def test_below_bar(self):
        assert format_complete_plate_setup(calculate_plates(30)) == "Bar only"
