"""
Centralized configuration management powered by pydantic-settings.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Environment(str, Enum):
    """Supported runtime environments."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class AppSettings(BaseModel):
    """Application metadata and runtime toggles."""

    name: str = Field(default="blog-api", description="Human-readable service name.")
    version: str = Field(default="0.1.0", description="Deployed application version.")
    environment: Environment = Field(
        default=Environment.LOCAL, description="Deployment environment identifier."
    )
    debug: bool = Field(default=False, description="Expose exception text in 500 responses.")
    docs_enabled: bool = Field(default=True, description="Serve the interactive API docs.")


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.

    Read from the flat ``DB_*`` variables (``DB_HOST``, ``DB_USER``,
    ``DB_PASSWORD``, ``DB_DATABASE``, ``DB_PORT``). ``DB_URL`` overrides the
    assembled URL entirely.
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    driver: str = Field(default="mysql+aiomysql", description="SQLAlchemy async driver name.")
    host: str = Field(default="localhost", description="Database host.")
    port: PositiveInt = Field(default=3306, description="Database port.")
    user: str = Field(default="root", description="Database user.")
    password: str = Field(default="", description="Database password.")
    database: str = Field(default="blog", description="Database (schema) name.")
    url: str | None = Field(default=None, description="Full SQLAlchemy URL override.")
    pool_size: PositiveInt = Field(default=10, description="Database connection pool size.")
    echo: bool = Field(default=False, description="Enable SQL echo for debugging.")

    @property
    def dsn(self) -> URL:
        """Return the SQLAlchemy URL for the configured database."""
        if self.url:
            return make_url(self.url)
        return URL.create(
            drivername=self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.database,
        )


class ServerSettings(BaseSettings):
    """HTTP listener settings."""

    model_config = SettingsConfigDict(
        env_prefix="SERVER__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(default="0.0.0.0", description="Interface to bind.")
    port: PositiveInt = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "SERVER__PORT"),
        description="Listen port.",
    )
    workers: PositiveInt = Field(default=1, description="Worker processes for Granian.")


class LoggingSettings(BaseModel):
    """Logging configuration shared across the project."""

    level: str = Field(default="INFO", description="Root logging level.")
    format: str = Field(
        default="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        description="Standard logging format string.",
    )
    directory: Path | None = Field(
        default=None, description="Directory for rotating log files; console only when unset."
    )
    file_name: str = Field(default="app.log", description="Primary log file name.")
    max_bytes: PositiveInt = Field(
        default=5 * 1024 * 1024, description="Maximum file size before rotating."
    )
    backup_count: PositiveInt = Field(default=5, description="Number of rotated log files to keep.")


class Settings(BaseSettings):
    """Top-level application settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app: AppSettings = AppSettings()
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = LoggingSettings()


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance loaded from the current environment."""

    return Settings()


__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "Environment",
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
]
