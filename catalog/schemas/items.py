"""
schemas/items.py
-----------------

Models representing catalog items and paginated listings. The
validators on :class:`ItemCreate` replace the hand-written checks of
the create endpoint: names and categories must not be blank and
prices must be finite, non-negative numbers with at most two
decimal places.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ItemCreate(BaseModel):
    name: str
    category: str
    price: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("name", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def price_is_number(cls, v: Any) -> Any:
        # bool is an int subclass and "12" would otherwise be coerced
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("must be a number")
        return v

    @field_validator("price")
    @classmethod
    def at_most_two_decimals(cls, v: float) -> float:
        if Decimal(repr(v)).as_tuple().exponent < -2:
            raise ValueError("must have at most two decimal places")
        return v


class Item(BaseModel):
    id: int
    name: str
    category: str
    price: float


class Pagination(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int
    total_pages: int
    current_page: int
    limit: int
    offset: int
    has_next: bool
    has_prev: bool


class ItemPage(BaseModel):
    # Stored records are passed through untouched, even malformed ones.
    items: List[Dict[str, Any]]
    pagination: Pagination
