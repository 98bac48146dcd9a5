"""
Product API: Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment variables (case-insensitive):
    PORT            Listening port (default 3000)
    HOST            Bind address (default 0.0.0.0)
    LOG_LEVEL       DEBUG, INFO, WARNING, ERROR, CRITICAL (default INFO)
    AUTH_HEADER     Header inspected by the authentication check
    SEED_PRODUCTS   Start new apps with the three sample products
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development, so the
    service starts with no environment at all.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Authentication Check ──────────────────────────────────────────────
    # What: Request header inspected for a credential token.
    # The check only observes; requests without the header still go through.
    auth_header: str = Field(default="authorization")

    # ── Store ─────────────────────────────────────────────────────────────
    seed_products: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
