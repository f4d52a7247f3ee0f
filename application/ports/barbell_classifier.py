"""
Barbell Classifier Interface (Port).

Deciding whether an exercise is loaded on a barbell is a naming heuristic.
Gyms with nonstandard exercise names can plug in their own classifier
instead of changing the plate calculator.
"""
from typing import Protocol, Optional


class BarbellClassifier(Protocol):
    """Strategy deciding whether the plate calculator applies to an exercise."""

    def is_barbell_exercise(
        self,
        exercise_name: str,
        equipment_type: Optional[str] = None,
    ) -> bool:
        """
        Classify an exercise.

        Args:
            exercise_name: Exercise name as logged (e.g., "Back Squat")
            equipment_type: Optional freeform equipment (e.g., "barbell")

        Returns:
            True if the exercise is performed with a loaded barbell
        """
        ...
