"""
FastAPI application factory for the Workout Analytics API.

create_app() builds a fresh application from a Settings instance, so tests
can run the API with their own configuration:

    from backend.main import create_app
    from backend.settings import Settings

    app = create_app(Settings(environment="test", _env_file=None))

The module-level `app` is what uvicorn serves (`uvicorn backend.main:app`).
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOCAL_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8081",
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the analytics API.

    Args:
        settings: Configuration to use; falls back to get_settings()

    Returns:
        FastAPI application with health and analytics routes mounted
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Workout Analytics API",
        description="Plate loading, superset sequencing and workout highlights",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)
    _log_configuration(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Start Sentry error reporting when a DSN is configured."""
    if not settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1,
    )
    logger.info(f"Sentry enabled for environment {settings.environment}")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the local dev clients plus any origins from CORS_ALLOWED_ORIGINS."""
    origins = LOCAL_ORIGINS + settings.cors_allowed_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    from api.routers import analytics_router, health_router

    # /health lives at the root
    app.include_router(health_router)
    app.include_router(analytics_router)


def _log_configuration(settings: Settings) -> None:
    """Log the analytics thresholds in effect."""
    logger.info(
        f"Analytics configured: unit={settings.default_weight_unit} "
        f"bar={settings.bar_weight_lbs}/{settings.bar_weight_kg} "
        f"streak_window={settings.streak_window_days}d "
        f"volume_threshold={settings.volume_increase_threshold_percent}%"
    )

    if settings.extra_barbell_keywords_list:
        logger.info(f"Extra barbell keywords: {settings.extra_barbell_keywords_list}")


app = create_app()
