"""
schemas/stats.py
-----------------

The aggregate statistics returned by ``GET /api/stats``. A snapshot is
immutable: the cache replaces it wholesale and never edits a field.
Fields use camelCase on the wire (``averagePrice``, ``lastUpdated``...)
and the fields that do not apply to an empty catalog are left out of
the response rather than sent as ``null``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StatisticsSnapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total: int
    average_price: float
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    category_breakdown: Optional[Dict[str, int]] = None
    last_updated: Optional[datetime] = None

    def to_response(self) -> dict:
        """Serialise the snapshot the way the API returns it."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
