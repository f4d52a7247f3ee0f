"""
Interfaces (Ports) for the Workout Analytics engine.

This package defines abstract interfaces that decouple the analytics logic
from the host application (storage, sync, naming conventions).
Implementations are provided in the infrastructure layer or by the host.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import SessionHistoryProvider

    class WorkoutHighlightsService:
        def __init__(self, history_provider: SessionHistoryProvider):
            self._history = history_provider

        async def calculate_workout_highlights(self, session):
            best = await self._history.get_exercise_best_weights()
"""

# Historical sessions for the highlight engine
from application.ports.session_history import SessionHistoryProvider

# Barbell classification strategy for the plate calculator
from application.ports.barbell_classifier import BarbellClassifier

__all__ = [
    "SessionHistoryProvider",
    "BarbellClassifier",
]
