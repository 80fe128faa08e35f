"""
routes/items.py
----------------

API routes for browsing and creating catalog items. These routes
delegate to the item service and only translate HTTP parameters.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from catalog.clients.item_store import JsonItemStore
from catalog.core.config import Settings
from catalog.logging_config import log_event
from catalog.routes.dependencies import get_item_store, get_settings_dep
from catalog.schemas.items import Item, ItemCreate, ItemPage
from catalog.services import item_service

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=ItemPage)
async def list_items(
    q: Optional[str] = Query(None, description="Case-insensitive search on name or category."),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    store: JsonItemStore = Depends(get_item_store),
    settings: Settings = Depends(get_settings_dep),
) -> ItemPage:
    """List items, optionally filtered by ``q``, one page at a time."""
    result = await item_service.list_items(
        store,
        q=q,
        page=page,
        limit=limit or settings.default_page_limit,
        offset=offset,
        max_limit=settings.max_page_limit,
    )
    log_event(
        "list_items_response",
        q=q,
        page=page,
        returned=len(result.items),
        total=result.pagination.total,
    )
    return result


@router.get("/{item_id}")
async def get_item(item_id: int, store: JsonItemStore = Depends(get_item_store)) -> Dict[str, Any]:
    return await item_service.get_item(store, item_id)


@router.post("", status_code=201, response_model=Item)
async def create_item(data: ItemCreate, store: JsonItemStore = Depends(get_item_store)) -> Dict[str, Any]:
    """Create an item. The new id is assigned by the store."""
    return await item_service.create_item(store, data)
