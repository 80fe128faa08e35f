"""
services/stats_cache.py
-----------------------

Process-local cache for the catalog statistics.

Computing statistics needs a full read of the item store, which is
exactly what this cache amortises. It holds a single
:class:`CacheEntry` (snapshot, source version, expiry). On every
:meth:`StatsCache.get_statistics` call the entry is reused only if all
of the following hold:

* an entry exists;
* the clock has not passed its expiry (TTL, 300 s by default);
* the store's current version token equals the one recorded with it.

If the version probe itself fails while an entry exists, the entry is
served anyway: a slightly stale answer beats failing the request.
Otherwise the cache refreshes: it reads the version token, then the
items, computes a new snapshot and installs a new entry with a single
assignment, so an interleaved request never sees a half-built entry.

Because the version is read before the data, a write landing between
the two reads leaves a snapshot tagged with an outdated token. The next
request sees the newer token and refreshes again, so at most one stale
answer is served.

Refreshes are serialised with an ``asyncio.Lock``; callers that waited
re-check the entry first, so a burst of concurrent misses costs one
read of the store. :meth:`StatsCache.invalidate` drops the entry and
bumps a generation counter; a refresh that started earlier still answers
its own caller but does not install its result.

The instance is not thread-safe. It is meant to be created once per
process by the application lifespan and used from the event loop.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Hashable, Optional

from catalog.clients.item_store import ItemSource
from catalog.core.errors import SourceUnavailable
from catalog.logging_config import log_event
from catalog.schemas.stats import StatisticsSnapshot
from catalog.services.statistics import compute_statistics

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class CacheEntry:
    snapshot: StatisticsSnapshot
    source_version: Hashable
    expires_at: float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatsCache:
    """Single-entry statistics cache in front of an :class:`ItemSource`.

    :param source: item store providing version tokens and items
    :param ttl: lifetime of an entry in seconds
    :param clock: monotonic clock used for expiry
    :param wall_clock: source of the ``last_updated`` timestamps
    """

    def __init__(
        self,
        source: ItemSource,
        ttl: float = DEFAULT_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self._source = source
        self.ttl = ttl
        self._clock = clock
        self._wall_clock = wall_clock
        self._entry: Optional[CacheEntry] = None
        self._generation = 0
        self._refresh_lock = asyncio.Lock()

    @property
    def state(self) -> str:
        """``"empty"``, ``"expired"`` or ``"cached"``.

        Does not probe the source, so a ``"cached"`` entry may still be
        stale by version.
        """
        entry = self._entry
        if entry is None:
            return "empty"
        if self._clock() > entry.expires_at:
            return "expired"
        return "cached"

    async def get_statistics(self) -> StatisticsSnapshot:
        """Return the current statistics, refreshing them if needed.

        :raises SourceUnavailable: if a refresh is needed and the item
            store cannot be read
        """
        entry = self._entry
        if await self._is_valid(entry):
            log_event("stats_cache_hit", level=logging.DEBUG)
            return entry.snapshot

        async with self._refresh_lock:
            # Another caller may have refreshed while we waited.
            current = self._entry
            if current is not entry and await self._is_valid(current):
                return current.snapshot
            return await self._refresh()

    def invalidate(self) -> None:
        """Drop the cached entry. Idempotent."""
        self._entry = None
        self._generation += 1
        log_event("stats_cache_invalidated")

    async def _is_valid(self, entry: Optional[CacheEntry]) -> bool:
        if entry is None:
            return False
        if self._clock() > entry.expires_at:
            return False
        try:
            version = await self._source.read_current_version()
        except SourceUnavailable as exc:
            log_event("stats_cache_version_probe_failed", level=logging.WARNING, detail=str(exc))
            return True
        return version == entry.source_version

    async def _refresh(self) -> StatisticsSnapshot:
        generation = self._generation
        log_event("stats_cache_refresh_start")
        version = await self._source.read_current_version()
        items = await self._source.read_all_items()
        snapshot = compute_statistics(items, now=self._wall_clock())
        expires_at = self._clock() + self.ttl
        if generation == self._generation:
            self._entry = CacheEntry(snapshot=snapshot, source_version=version, expires_at=expires_at)
            log_event("stats_cache_refresh", total=snapshot.total, expires_in_s=self.ttl)
        else:
            log_event("stats_cache_refresh_discarded", level=logging.DEBUG, total=snapshot.total)
        return snapshot
