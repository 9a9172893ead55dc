"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed configuration for the time-clock backend using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a development default, so a bare checkout runs against
  a local SQLite file (`timeclock.db`).
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from timeclock.database.config.config import settings

db_driver = settings.DB_DRIVER_NAME
actor = settings.AUDIT_ACTOR
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_DRIVER_NAME: str = Field("sqlite", description="SQLAlchemy driver name (e.g., `postgresql+psycopg`, `sqlite`).")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server.")
    DB_DATABASE_NAME: str = Field("timeclock.db", description="Database name, or file path for SQLite (`:memory:` allowed).")
    DB_ECHO: bool = Field(False, description="Echo every emitted SQL statement.")
    AUDIT_ACTOR: str = Field("system", description="Actor recorded in audit columns when no actor is bound to the context.")
    LOG_LEVEL: str = Field("INFO", description="Root log level.")
    FRONTEND_URL: str = Field("http://localhost:3000", description="Origin allowed by CORS for the admin frontend.")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures the log level is a valid Python logging level name."""
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL '{v}'. Must be one of: {sorted(VALID_LOG_LEVELS)}")
        return upper


settings = Settings()
"""Singleton Settings object, ready to be imported across the app."""
