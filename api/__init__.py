"""
API package for the Workout Analytics API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_barbell_classifier,
    get_highlights_service_factory,
)

__all__ = [
    # Settings
    "get_settings",
    # Analytics
    "get_barbell_classifier",
    "get_highlights_service_factory",
]
