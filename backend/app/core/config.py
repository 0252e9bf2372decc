# File: backend/app/core/config.py
# Version: v0.3.0
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "DigitChain API"
    APP_VERSION: str = "0.3.0"
    API_PREFIX: str = "/api"

    # Startup configuration for the solver
    FRAGMENTS_PATH: Path = Path("data/lines_with_numbers.txt")
    OVERLAP_SIZE: int = 2
    BORDER_SIZE: int = 40
    TIME_LIMIT_S: Optional[float] = None  # None = run the search to completion

    # HTTP surface guards. The search is exponential, so every API solve is
    # time-boxed: requests may only tighten API_TIME_LIMIT_S, never lift it.
    MAX_API_FRAGMENTS: int = 200
    API_TIME_LIMIT_S: float = 10.0

    LOG_LEVEL: str = "info"

    # - extra="ignore": unrelated env vars won't crash
    # - env_file=None: do NOT auto-load any .env
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
