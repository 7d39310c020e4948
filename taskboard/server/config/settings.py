"""Settings for TaskBoard Server."""

import os
from functools import lru_cache
from typing import List, Optional

from ... import __version__

DEFAULT_CORS_ORIGINS = ["http://localhost:3050", "http://localhost:3000"]


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Server settings resolved from the environment."""

    def __init__(self):
        self.APP_NAME: str = os.getenv("APP_NAME", "TaskBoard Server")
        self.APP_VERSION: str = os.getenv("APP_VERSION", __version__)
        self.APP_ENVIRONMENT: str = os.getenv("APP_ENVIRONMENT", "development")

        self.API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
        self.API_PORT: int = int(os.getenv("API_PORT", "8080"))
        self.API_DEBUG: bool = _env_flag("API_DEBUG")

        self.CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
