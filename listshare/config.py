"""
Application configuration using pydantic-settings.
Loads from environment variables with .env file support.
"""

import uuid
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./listshare.db"

    # Viewer whose dashboard is served (there is no login yet)
    viewer_id: uuid.UUID = uuid.UUID("5e2deeb7-b337-5331-3603-534000000000")

    # Server
    host: str = "::"
    port: int = 3030

    # Rendering
    templates_dir: Path = PACKAGE_DIR / "web" / "templates"

    # Application
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    project_name: str = "ListShare"
    version: str = "0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
