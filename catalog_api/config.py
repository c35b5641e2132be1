"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

Every value can be supplied through an environment variable of the same
name (case-insensitive) or a local .env file. Values are validated once at
startup, so a missing signing secret or a bad log level stops the process
before it accepts requests.

PATTERN: Settings Singleton
===========================
A single Settings instance is cached with @lru_cache, so configuration is
loaded once and every module sees the same values.

Usage:
    from catalog_api.config import get_settings

    settings = get_settings()
    print(settings.jwt_issuer)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    SECURITY NOTE:
    ==============
    - secret_key has a validator: placeholder values and short keys
      raise errors at startup
    - The same secret signs and verifies bearer tokens, so rotating it
      invalidates every token already issued
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Book Catalog API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8001,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./books.db",
        description="SQLAlchemy connection URL for the relational store"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load"
    )
    create_tables_on_startup: bool = Field(
        default=True,
        description="Create missing tables when the application starts"
    )
    seed_on_startup: bool = Field(
        default=True,
        description="Insert the starter catalog and default user if tables are empty"
    )

    # -------------------------------------------------------------------------
    # Token Settings
    # -------------------------------------------------------------------------
    secret_key: str = Field(
        default="REPLACE_WITH_YOUR_GENERATED_SECRET_KEY",
        description="Symmetric secret used to sign bearer tokens"
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="HMAC algorithm used to sign bearer tokens"
    )
    jwt_issuer: str = Field(
        default="book-catalog-api",
        description="Value of the 'iss' claim; tokens from other issuers are rejected"
    )
    jwt_audience: str = Field(
        default="book-catalog-clients",
        description="Value of the 'aud' claim; tokens for other audiences are rejected"
    )
    access_token_expire_minutes: int = Field(
        default=60,
        gt=0,
        description="Bearer token lifetime in minutes"
    )

    # -------------------------------------------------------------------------
    # Password Reset
    # -------------------------------------------------------------------------
    reveal_temporary_password: bool = Field(
        default=True,
        description=(
            "Return the temporary password in the forgot-password response. "
            "Disable once an out-of-band delivery channel exists."
        )
    )

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------
    default_page_size: int = Field(
        default=10,
        gt=0,
        description="Page size used when a paged request omits pageSize"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="*",
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

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        """SQLite needs its own connect args and pool handling."""
        return self.database_url.startswith("sqlite")

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
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

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """
        Validate that secret_key is not a placeholder value.

        The application will fail to start if SECRET_KEY is not properly set.

        Raises:
            ValueError: If secret key is a placeholder or too short
        """
        placeholder_indicators = [
            "REPLACE_WITH",
            "change-me",
            "your-secret",
            "generate-with",
        ]

        for indicator in placeholder_indicators:
            if indicator.lower() in v.lower():
                raise ValueError(
                    "SECRET_KEY contains a placeholder value. "
                    "Generate a secure key with: openssl rand -hex 32"
                )

        # HS256 wants at least 256 bits of key material
        if len(v) < 32:
            raise ValueError(
                "SECRET_KEY must be at least 32 characters long. "
                "Generate a secure key with: openssl rand -hex 32"
            )

        return v

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Only symmetric HMAC algorithms make sense with a shared secret."""
        valid_algorithms = {"HS256", "HS384", "HS512"}
        if v.upper() not in valid_algorithms:
            raise ValueError(f"jwt_algorithm must be one of {valid_algorithms}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    First call creates the Settings instance (reading .env and validating);
    subsequent calls return the cached instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
