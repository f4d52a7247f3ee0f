"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.streak_window_days)
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Barbell Equipment
    # -------------------------------------------------------------------------
    default_weight_unit: Literal["lbs", "kg"] = Field(
        default="lbs",
        description="Unit used when a request does not specify one",
    )
    bar_weight_lbs: float = Field(
        default=45,
        ge=0,
        description="Empty bar weight in pounds",
    )
    bar_weight_kg: float = Field(
        default=20,
        ge=0,
        description="Empty bar weight in kilograms",
    )
    extra_barbell_keywords: str = Field(
        default="",
        description="Comma-separated extra exercise names treated as barbell lifts",
    )

    def default_bar_weight(self, unit: str) -> float:
        """Get the configured bar weight for a unit."""
        return self.bar_weight_kg if unit == "kg" else self.bar_weight_lbs

    @property
    def extra_barbell_keywords_list(self) -> list[str]:
        """Parse extra barbell keywords into a list."""
        return [k.strip() for k in self.extra_barbell_keywords.split(",") if k.strip()]

    # -------------------------------------------------------------------------
    # Workout Highlights
    # -------------------------------------------------------------------------
    highlights_recent_limit: int = Field(
        default=10,
        ge=1,
        description="Recent sessions compared for volume and weight increases",
    )
    streak_lookback_limit: int = Field(
        default=30,
        ge=1,
        description="Recent sessions considered for the training streak",
    )
    streak_window_days: int = Field(
        default=7,
        ge=0,
        description="Max days from the current session for a session to extend the streak",
    )
    volume_increase_threshold_percent: float = Field(
        default=5.0,
        ge=0,
        description="Volume increase (percent) that must be exceeded to highlight",
    )

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated origins allowed in addition to the local dev clients",
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        """Parse extra CORS origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
