"""
utils/pagination.py
--------------------

Offset/page pagination over an in-memory list of items.

Clients may address a page either by number (``page``) or by an
explicit ``offset``; a non-zero offset wins. The page size is bounded
by the configured ``max_page_limit`` so a single request cannot ask
for the whole catalog. The returned metadata mirrors what the
frontend needs to render pager controls:

* ``total``: items matching the query before slicing;
* ``totalPages``: ``ceil(total / limit)``;
* ``hasNext`` / ``hasPrev``: derived from the requested page number.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Tuple

from catalog.core.config import get_settings
from catalog.schemas.items import Pagination


def paginate(
    items: Sequence[Any],
    page: int = 1,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> Tuple[List[Any], Pagination]:
    """Slice ``items`` into one page.

    :param items: the full (already filtered) sequence
    :param page: 1-based page number
    :param limit: page size; defaults to ``default_page_limit``
    :param offset: explicit start index; overrides ``page`` when non-zero
    :param max_limit: upper bound for ``limit``; defaults to ``max_page_limit``
    :return: a tuple of (page items, pagination metadata)
    :raises ValueError: if ``page`` or ``limit`` is below 1 or ``offset`` is negative
    """
    settings = get_settings()
    if limit is None:
        limit = settings.default_page_limit
    if max_limit is None:
        max_limit = settings.max_page_limit
    if page < 1:
        raise ValueError("page must be at least 1")
    if limit < 1:
        raise ValueError("limit must be at least 1")
    if offset is not None and offset < 0:
        raise ValueError("offset must not be negative")
    limit = min(limit, max_limit)

    start = offset or (page - 1) * limit
    total = len(items)
    total_pages = math.ceil(total / limit)
    meta = Pagination(
        total=total,
        total_pages=total_pages,
        current_page=page,
        limit=limit,
        offset=start,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
    return list(items[start:start + limit]), meta
