"""Resource API configuration.

Requires: DATABASE_URL
Optional: DATABASE_ECHO, CREATE_SCHEMA, HOST, PORT, LOG_FORMAT, LOG_LEVEL
"""

from functools import lru_cache

from pydantic import Field

from shared.config import BaseSettings, database_url_field


class Settings(BaseSettings):
    """Resource API settings."""

    service_name: str = "resource-api"

    # Required
    database_url: str = database_url_field(required=True)

    database_echo: bool = Field(default=False, description="Echo SQL statements")
    create_schema: bool = Field(
        default=False,
        description="Create missing tables from ORM metadata on startup (local development)",
    )

    host: str = Field(default="0.0.0.0", description="Bind address")  # noqa: S104
    port: int = Field(default=8080, ge=1, le=65535, description="Bind port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Validates required env vars on first call.
    Raises ValidationError if DATABASE_URL is missing.
    """
    return Settings()
