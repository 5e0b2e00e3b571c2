"""
Application Configuration Module

This module defines all configuration settings for the ProjectHub API.
Settings are loaded from environment variables (via .env file) using Pydantic.
"""
from datetime import date
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application-wide configuration settings.

    All settings can be overridden via environment variables.
    The .env file is automatically loaded if present.
    """
    # === Application Metadata ===
    PROJECT_NAME: str = "ProjectHub API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"  # API version prefix for all routes

    # === Database Configuration ===
    # The fixture lives in an in-memory SQLite database; nothing survives a restart
    DATABASE_URL: str = "sqlite://"

    # === Security Configuration ===
    # IMPORTANT: Change SECRET_KEY in production to a strong random value
    SECRET_KEY: str = "projecthub-secret-key-change-me"  # Used for JWT token signing
    ALGORITHM: str = "HS256"  # JWT encoding algorithm
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # Token validity: 1 day

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "readable"  # "readable" or "json"

    # === Dashboard / Schedule ===
    # Fixed "today" for demos against the fixture; None means the real date
    REFERENCE_DATE: Optional[date] = None
    UPCOMING_MILESTONE_DAYS: int = 30
    GANTT_MIN_BAR_WIDTH: float = 0.5  # percent of the timeline width
    TOP_RISKS_LIMIT: int = 5

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",        # Load environment variables from .env file
        case_sensitive=True,    # Environment variable names must match case
        extra="ignore"          # Ignore extra environment variables not defined here
    )

    def today(self) -> date:
        """Return REFERENCE_DATE when set, otherwise the local calendar date."""
        return self.REFERENCE_DATE or date.today()

# Create a single global settings instance
# This is imported throughout the application for configuration access
settings = Settings()
