"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with proper typing, validation,
and sensible defaults. Settings are loaded once at startup and cached.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    Production values should be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === PocketBase Configuration ===
    pocketbase_url: str = Field(
        default="http://127.0.0.1:8090",
        description="PocketBase server URL holding the camp catalog",
    )
    pocketbase_admin_email: str = Field(
        default="",
        description="PocketBase superuser email; empty means read the catalog anonymously",
    )
    pocketbase_admin_password: str = Field(
        default="",
        description="PocketBase superuser password",
    )
    skip_pb_auth: bool = Field(
        default=False,
        description="Skip PocketBase authentication on startup (for testing)",
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    # === Filtering ===
    default_max_age: int = Field(
        default=18,
        description="Upper age bound assumed for sessions without max_age",
    )

    # === System Settings ===
    tz: str = Field(
        default="America/Los_Angeles",
        description="Timezone for the application",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @property
    def has_admin_credentials(self) -> bool:
        return bool(self.pocketbase_admin_email and self.pocketbase_admin_password)

    @field_validator("pocketbase_url", mode="after")
    @classmethod
    def validate_pocketbase_url(cls, v: str) -> str:
        """Strip trailing slashes and require an http(s) URL."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid POCKETBASE_URL: {v}. Must start with http:// or https://")
        return v

    @field_validator("default_max_age", mode="after")
    @classmethod
    def validate_default_max_age(cls, v: int) -> int:
        if v < 0:
            raise ValueError("DEFAULT_MAX_AGE must not be negative")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    Use this function to access settings throughout the codebase.
    """
    return Settings()
