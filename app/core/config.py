"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, never scattered through modules.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Exposes the OpenAPI docs when True.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which all routers are mounted.
        storage_backend: "sql" for the SQLAlchemy store, "memory" for the
            process-local store.
        database_url: SQLAlchemy URL used by the SQL store.
        database_echo: Echo every SQL statement to the log.
        default_page_size: Page length used when the client sends none.
        rate_limit_enabled: Enforce per-client rate limits.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Employee Management"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    storage_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite:///./employees.db"
    database_echo: bool = False

    default_page_size: int = 10

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is a SQLite file or memory DB."""
        return self.database_url.startswith("sqlite")


settings = Settings()
