"""
routes/stats.py
----------------

Statistics endpoints. ``GET /api/stats`` is served from the
process-wide :class:`~catalog.services.stats_cache.StatsCache`;
``DELETE /api/stats/cache`` clears it by hand, which is mostly useful
during development and in tests.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from catalog.logging_config import log_event
from catalog.routes.dependencies import get_stats_cache
from catalog.services.stats_cache import StatsCache

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("")
async def get_stats(cache: StatsCache = Depends(get_stats_cache)) -> Dict[str, Any]:
    """Return the cached catalog statistics, recomputing them when stale.

    A :class:`~catalog.core.errors.SourceUnavailable` raised here is
    turned into a 503 by the application's exception handler.
    """
    snapshot = await cache.get_statistics()
    return snapshot.to_response()


@router.delete("/cache")
async def clear_stats_cache(cache: StatsCache = Depends(get_stats_cache)) -> Dict[str, str]:
    cache.invalidate()
    log_event("stats_cache_cleared_manually")
    return {"message": "Cache cleared successfully"}
