"""
clients/item_store.py
---------------------

Storage client for the item records. The catalog keeps its items in a
single JSON array on disk; this module is the only place that touches
that file. It should be instantiated once per process (in the FastAPI
lifespan event) and shared with services via dependency injection.

Besides full reads, the store exposes a cheap *version token* derived
from the file's ``stat`` result. The statistics cache compares tokens
to notice that the data changed without reading the whole file.

Blocking file system calls are delegated to worker threads with
``asyncio.to_thread`` so the event loop stays free while the disk is
busy. Writes are serialised with a lock and are atomic: the new array
is written to a temporary file which then replaces the original.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional, Protocol

import orjson

from catalog.core.errors import SourceUnavailable
from catalog.logging_config import log_event

ItemRecord = Dict[str, Any]


class ItemSource(Protocol):
    """What the statistics cache needs from a storage backend."""

    async def read_current_version(self) -> Hashable:
        ...

    async def read_all_items(self) -> List[ItemRecord]:
        ...


class JsonItemStore:
    """Item storage backed by a JSON file.

    :param path: location of the JSON array of item records
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._write_lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def read_current_version(self) -> Hashable:
        """Return ``(mtime_ns, size)`` of the data file.

        Both values are needed: two writes inside the file system's
        timestamp granularity still differ in size most of the time.

        :raises SourceUnavailable: if the file cannot be stat'ed
        """
        try:
            st = await asyncio.to_thread(os.stat, self.path)
        except OSError as exc:
            raise SourceUnavailable(f"Cannot stat data file: {exc}") from exc
        return (st.st_mtime_ns, st.st_size)

    async def read_all_items(self) -> List[ItemRecord]:
        """Read and parse every item record.

        :raises SourceUnavailable: if the file is missing, unreadable or
            does not contain a JSON array
        """
        return await asyncio.to_thread(self._load)

    async def get_item(self, item_id: int) -> Optional[ItemRecord]:
        """Return the record whose ``id`` equals ``item_id`` or ``None``."""
        items = await self.read_all_items()
        return next((item for item in items if item.get("id") == item_id), None)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def add_item(self, name: str, category: str, price: float) -> ItemRecord:
        """Append a new record and persist the whole collection.

        The id is one greater than the largest integer id already
        stored, so ids stay unique and stable across restarts.
        """
        async with self._write_lock:
            items = await self.read_all_items()
            ids = [item["id"] for item in items if isinstance(item.get("id"), int)]
            new_item: ItemRecord = {
                "id": max(ids, default=0) + 1,
                "name": name.strip(),
                "category": category.strip(),
                "price": float(price),
            }
            items.append(new_item)
            await asyncio.to_thread(self._dump, items)
        log_event("item_created", id=new_item["id"], category=new_item["category"])
        return new_item

    # ------------------------------------------------------------------
    # Blocking helpers (run in worker threads)
    # ------------------------------------------------------------------

    def _load(self) -> List[ItemRecord]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as exc:
            raise SourceUnavailable("Data file not found") from exc
        except OSError as exc:
            raise SourceUnavailable(f"Failed to read data: {exc}") from exc
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise SourceUnavailable(f"Data file is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise SourceUnavailable("Data file must contain a JSON array")
        return data

    def _dump(self, items: List[ItemRecord]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_bytes(orjson.dumps(items, option=orjson.OPT_INDENT_2))
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise SourceUnavailable(f"Failed to write data: {exc}") from exc
