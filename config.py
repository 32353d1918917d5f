# config.py

"""
Application settings read from environment variables.

Values are computed once when this module is imported, so environment
variables must be set before the app (or the tests) import it.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Content Lookup API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./posts.db")
    database_echo: bool = _env_flag("DATABASE_ECHO")  # SQLAlchemy SQL logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")


settings = Settings()
