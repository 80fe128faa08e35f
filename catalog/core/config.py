"""
core/config.py
----------------

Application configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings``. These settings control where the item data
lives, how long statistics stay cached and how large a page of items
may be. The values provided here are sensible defaults but can be
overridden via environment variables at deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``CATALOG_``.  For example, to shorten the statistics
    cache lifetime you can set ``CATALOG_STATS_CACHE_TTL_SECONDS=30``.
    List values such as ``CATALOG_CORS_ORIGINS`` are given as JSON.
    """

    # Storage
    data_path: Path = Field(Path("data/items.json"), description="JSON file holding the item records.")

    # Statistics cache
    stats_cache_ttl_seconds: float = Field(300.0, gt=0, description="Lifetime of a cached statistics snapshot in seconds.")

    # Pagination guards
    default_page_limit: int = Field(10, ge=1, description="Items per page when the client does not ask for a limit.")
    max_page_limit: int = Field(100, ge=1, description="Largest page size a client may request.")

    # HTTP
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"], description="Origins allowed by CORS.")
    log_level: str = Field("INFO", description="Level of the 'catalog' logger.")

    model_config = SettingsConfigDict(env_prefix="CATALOG_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the application settings.

    Using a cache prevents expensive environment parsing on every call.
    """
    return Settings()
