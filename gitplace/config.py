"""Runtime settings read from the environment (and a .env file, if present)."""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """gitplace settings.

    Environment variables:
        GITPLACE_BASE_PATH: Default root for clones (empty means the current directory)
        GITPLACE_LOG_LEVEL: Log level for gitplace loggers (default: WARNING)
    """
    base_path: Optional[Path] = Field(None, description="Default base directory for clones")
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator('base_path', mode='before')
    @classmethod
    def empty_base_path_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return "WARNING"
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings() -> Settings:
    """Load settings from .env (searched from the current directory) and the environment."""
    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        base_path=os.getenv("GITPLACE_BASE_PATH"),
        log_level=os.getenv("GITPLACE_LOG_LEVEL"),
    )
