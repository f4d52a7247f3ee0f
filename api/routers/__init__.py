"""
Router package for the Workout Analytics API.

This package contains all API routers organized by domain:
- health: Liveness check
- analytics: Plate calculator, superset order and workout highlights
"""

from api.routers.health import router as health_router
from api.routers.analytics import router as analytics_router

__all__ = [
    "health_router",
    "analytics_router",
]
