"""
routes/dependencies.py
----------------------

FastAPI dependency providers. The shared objects are created once in
the application lifespan and stored on ``app.state``; these helpers
hand them to the route handlers.
"""

from __future__ import annotations

from fastapi import Request

from catalog.clients.item_store import JsonItemStore
from catalog.core.config import Settings
from catalog.services.stats_cache import StatsCache


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_item_store(request: Request) -> JsonItemStore:
    return request.app.state.item_store


def get_stats_cache(request: Request) -> StatsCache:
    return request.app.state.stats_cache
