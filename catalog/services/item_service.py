"""
services/item_service.py
------------------------

Business logic for browsing and creating catalog items. The route
handlers stay thin and delegate here; this module combines the item
store with search and pagination.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from catalog.clients.item_store import ItemRecord, JsonItemStore
from catalog.logging_config import log_call
from catalog.schemas.items import ItemCreate, ItemPage
from catalog.utils.pagination import paginate


def matches(item: Dict[str, Any], term: str) -> bool:
    """Case-insensitive substring match on name or category."""
    name = str(item.get("name") or "").lower()
    category = str(item.get("category") or "").lower()
    return term in name or term in category


def search_items(items: List[ItemRecord], q: Optional[str]) -> List[ItemRecord]:
    """Filter ``items`` by the query ``q``; a blank query keeps everything."""
    term = (q or "").strip().lower()
    if not term:
        return items
    return [item for item in items if matches(item, term)]


@log_call
async def list_items(
    store: JsonItemStore,
    *,
    q: Optional[str] = None,
    page: int = 1,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> ItemPage:
    items = await store.read_all_items()
    results = search_items(items, q)
    page_items, meta = paginate(results, page=page, limit=limit, offset=offset, max_limit=max_limit)
    return ItemPage(items=page_items, pagination=meta)


@log_call
async def get_item(store: JsonItemStore, item_id: int) -> ItemRecord:
    item = await store.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@log_call
async def create_item(store: JsonItemStore, data: ItemCreate) -> ItemRecord:
    return await store.add_item(data.name, data.category, data.price)
