"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Settings are read from environment variables and fall back to a local .env
file. MONGOURI is the only required value: without it the settings object
cannot be built and the process stops before serving any request.

Usage:
    from books_graphql.config import get_settings

    settings = get_settings()
    print(settings.mongo_database)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Books GraphQL API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8070,
        description="Port to bind the server to"
    )

    # -------------------------------------------------------------------------
    # MongoDB Settings
    # -------------------------------------------------------------------------
    mongouri: str = Field(
        ...,
        description="MongoDB connection string (MONGOURI)"
    )
    mongo_database: str = Field(
        default="graphql",
        description="Database holding the books collection"
    )
    mongo_collection: str = Field(
        default="books",
        description="Collection storing book documents"
    )
    mongo_connect_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds allowed for the startup connection check"
    )
    mongo_operation_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Deadline in seconds for each database call made by a request"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("mongouri")
    @classmethod
    def validate_mongouri(cls, v: str) -> str:
        """
        Reject an empty connection string.

        An unset variable is already caught by the required field; this
        covers MONGOURI= lines left blank in .env files.

        Raises:
            ValueError: If the value is empty or whitespace
        """
        if not v.strip():
            raise ValueError("MONGOURI is not set")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call reads the environment and .env file and validates the
    result; later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
