"""
Configuration management for the Book Catalog API.

Supports multiple environments (local, development, production) with
settings loaded from environment variables and an optional .env file.

Responsibility: Centralized configuration and environment management
"""

from enum import Enum
from typing import Optional, List
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment"""
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class CatalogConfig(BaseSettings):
    """In-memory catalog configuration"""

    # Start with the two sample books; disable for an empty catalog
    seed_books: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        case_sensitive=False,
        extra="ignore"
    )


class AppConfig(BaseSettings):
    """Application configuration"""

    # Environment
    environment: Environment = Field(default=Environment.LOCAL)
    debug: bool = Field(default=True)

    # Application metadata
    app_name: str = Field(default="Book Catalog API")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")

    # API settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # GraphiQL IDE on GET /graphql; follows debug when unset
    graphiql: Optional[bool] = Field(default=None)

    # CORS settings
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins (JSON list or comma-separated in env)"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from JSON string or comma-separated list"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            v = v.strip()
            # Remove outer quotes if present
            if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
                v = v[1:-1]
            # Try parsing as JSON first
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            # Fall back to comma-separated
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def graphiql_enabled(self) -> bool:
        """Whether to serve the GraphiQL IDE"""
        if self.graphiql is None:
            return self.debug
        return self.graphiql


class Settings(BaseSettings):
    """
    Global settings container.

    Loads configuration from:
    1. Environment variables
    2. .env file
    3. Default values

    Example:
        # Local development
        settings = Settings()

        # Production
        settings = Settings.for_production()
    """

    app: AppConfig = Field(default_factory=AppConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @classmethod
    def for_production(cls) -> "Settings":
        """Create settings for production (debug and GraphiQL off)."""
        return cls(
            app=AppConfig(
                environment=Environment.PRODUCTION,
                debug=False,
                log_level="INFO"
            ),
        )


# Global settings instance
settings = Settings()
