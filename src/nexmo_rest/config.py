from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


class Settings(BaseModel):
    # --- Nexmo credentials ---
    # Read at instantiation time; get_settings.cache_clear() picks up
    # environment changes.
    nexmo_api_key: str = Field(default_factory=lambda: _env("NEXMO_API_KEY"))
    nexmo_api_secret: str = Field(default_factory=lambda: _env("NEXMO_API_SECRET"))

    # Per-request timeout in seconds (connect + read)
    nexmo_timeout_s: float = Field(
        default_factory=lambda: float(_env("NEXMO_TIMEOUT_S", "10"))
    )

    # Only used by the CLI; the library never configures logging itself.
    log_level: str = Field(default_factory=lambda: _env("NEXMO_LOG_LEVEL", "INFO"))


@lru_cache
def get_settings() -> Settings:
    return Settings()
