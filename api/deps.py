"""
FastAPI Dependency Providers for the Workout Analytics API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings are cached per-process (lru_cache in backend.settings)
- Services are created per-request around the caller's history snapshot

Usage in routers:
    from api.deps import get_barbell_classifier
    from application.ports import BarbellClassifier

    @router.get("/barbell")
    def check(classifier: BarbellClassifier = Depends(get_barbell_classifier)):
        return classifier.is_barbell_exercise("Back Squat")

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_barbell_classifier] = lambda: MyClassifier()
"""

from typing import Callable

from fastapi import Depends

# Protocol types (interfaces)
from application.ports import BarbellClassifier, SessionHistoryProvider

from backend.core.highlights_service import WorkoutHighlightsService
from backend.core.plate_calculator import KeywordBarbellClassifier
from backend.settings import Settings, get_settings as _get_settings


HighlightsServiceFactory = Callable[[SessionHistoryProvider], WorkoutHighlightsService]


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Analytics Providers
# =============================================================================


def get_barbell_classifier(
    settings: Settings = Depends(get_settings),
) -> BarbellClassifier:
    """
    Get the barbell exercise classifier.

    Extends the default keyword list with EXTRA_BARBELL_KEYWORDS.

    Returns:
        BarbellClassifier implementation
    """
    return KeywordBarbellClassifier(extra_keywords=settings.extra_barbell_keywords_list)


def get_highlights_service_factory(
    settings: Settings = Depends(get_settings),
) -> HighlightsServiceFactory:
    """
    Get a factory building WorkoutHighlightsService around a history provider.

    The history snapshot arrives with each request, so the service is built
    per request with thresholds taken from settings.

    Returns:
        Callable taking a SessionHistoryProvider and returning the service
    """
    def factory(history_provider: SessionHistoryProvider) -> WorkoutHighlightsService:
        return WorkoutHighlightsService(
            history_provider,
            recent_limit=settings.highlights_recent_limit,
            streak_limit=settings.streak_lookback_limit,
            streak_window_days=settings.streak_window_days,
            volume_threshold_percent=settings.volume_increase_threshold_percent,
        )

    return factory
