from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allow selecting which .env to read (host vs docker)
ENV_FILE = os.environ.get(
    "ENV_FILE",
    str(Path(__file__).resolve().parent.parent / ".env"),
)


class Settings(BaseSettings):
    # ---- App ----
    app_name: str = "userbase"
    debug: bool = True
    api_v1_str: str = "/api/v1"

    # ---- DB ----
    database_url: str = "sqlite:///./dev.db"

    # ---- Other ----
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # "info", " Debug " -> "INFO", "DEBUG"
    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v!r}")
        return level


settings = Settings()
