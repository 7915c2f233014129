"""
Schema Store configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Schema Store API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    LOG_LEVEL: str = "INFO"

    # Storage: "file" | "memory" (memory does not survive restarts)
    SCHEMA_STORAGE: Literal["file", "memory"] = "file"
    SCHEMA_DATA_DIR: Path

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        self.SCHEMA_STORAGE = (os.environ.get("SCHEMA_STORAGE") or "file").strip().lower()
        if self.SCHEMA_STORAGE not in ("file", "memory"):
            self.SCHEMA_STORAGE = "file"
        data_dir = os.environ.get("SCHEMA_DATA_DIR", "data")
        self.SCHEMA_DATA_DIR = Path(data_dir)
