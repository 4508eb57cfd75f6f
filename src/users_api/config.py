"""Configuration management for the Users API."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in src/users_api/config.py, the project root is 3 levels up
    project_dir = Path(__file__).parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "users-api"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "localhost"
    api_port: int = 8000

    # UI
    ui_url: str = "http://localhost:5173"

    # Azure Cosmos DB; without an endpoint users are kept in memory
    azure_cosmosdb_endpoint: str | None = None
    azure_cosmosdb_key: str | None = None
    database_name: str = "users"
    cosmos_users_container: str = "users"

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    @property
    def storage_backend(self) -> str:
        """Name of the user store selected by this configuration."""
        return "cosmos" if self.azure_cosmosdb_endpoint else "memory"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
