"""
Centralised config for the entire application.

This module consolidates all configuration settings, loading values from
environment variables (or a `.env` file) and providing typed, validated access
to them through a singleton `settings` object.
"""

import os
from urllib.parse import quote_plus
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings.

    Pydantic's BaseSettings will automatically load values from a `.env` file
    or from system environment variables, so the data file location and the
    database credentials can differ between machines without code changes.
    """
    # Model config: Load from a .env file, and treat env vars as case-insensitive
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=False)

    # --- CORE SETTINGS ---
    # The root directory of the project.
    PROJECT_ROOT: Path = Path(__file__).parent.parent.resolve()
    ENVIRONMENT: str = "development"

    # --- STORAGE ---
    # "json" keeps everything in DATA_FILE; "postgres" needs the POSTGRES_* values.
    STORAGE_BACKEND: str = "json"
    DATA_FILE: str = "data/liftbook.json"
    LOG_FILE: str = "logs/liftbook.log"

    # --- DATABASE (from environment) ---
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: Optional[int] = 5432
    POSTGRES_DB: Optional[str] = None
    DATABASE_URL: Optional[str] = Field(None, validate_default=True)

    # --- CLI ---
    PROMPT_PREFIX: str = "[LIFTBOOK]> "

    def __init__(self, **values):
        super().__init__(**values)
        # An explicit DATABASE_URL wins; otherwise build one from the parts.
        if self.DATABASE_URL:
            return
        db_host = os.getenv("DB_HOST_OVERRIDE", self.POSTGRES_HOST)
        if self.POSTGRES_USER and self.POSTGRES_PASSWORD and db_host and self.POSTGRES_DB:
            # URL-encode user/pass to support special characters like @ and #
            user_enc = quote_plus(self.POSTGRES_USER)
            pass_enc = quote_plus(self.POSTGRES_PASSWORD)
            self.DATABASE_URL = (
                f"postgresql://{user_enc}:{pass_enc}@{db_host}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )

    # --- FILE PATHS (derived from PROJECT_ROOT) ---
    @property
    def data_path(self) -> Path:
        path = Path(self.DATA_FILE)
        return path if path.is_absolute() else self.PROJECT_ROOT / path

    @property
    def log_path(self) -> Path:
        path = Path(self.LOG_FILE)
        return path if path.is_absolute() else self.PROJECT_ROOT / path


# Create a single, importable instance of the settings
settings = Settings()
