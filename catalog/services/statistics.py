"""
services/statistics.py
----------------------

Aggregate statistics over the item catalog. :func:`compute_statistics`
is a pure function of its input (plus the timestamp it stamps on the
result); caching lives in :mod:`catalog.services.stats_cache`.

Records are taken as stored, so malformed ones are tolerated with
fixed substitutions rather than rejected:

* a missing, ``null`` or non-numeric price counts as ``0``;
* a missing or empty category is counted under ``"Unknown"``;
  any other category value is counted under its ``str()``.

The average is rounded to two decimals half-up (away from zero for the
non-negative prices the catalog accepts). Rounding goes through
``Decimal`` on the float's shortest repr, so ``0.125`` becomes ``0.13``
instead of the ``0.12`` that ``round()`` would give.
"""

from __future__ import annotations

import math
from collections import Counter
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Sequence

from catalog.schemas.stats import StatisticsSnapshot

UNKNOWN_CATEGORY = "Unknown"
_CENTS = Decimal("0.01")


def _price(item: Mapping[str, Any]) -> float:
    value = item.get("price")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return 0
    return value


def _category(item: Mapping[str, Any]) -> str:
    value = item.get("category")
    if value is None or value == "":
        return UNKNOWN_CATEGORY
    return str(value)


def round_price(value: float) -> float:
    """Round ``value`` to two decimals, halves away from zero."""
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_statistics(
    items: Sequence[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> StatisticsSnapshot:
    """Compute the catalog statistics for ``items``.

    :param items: item records, possibly empty or malformed
    :param now: timestamp for ``last_updated``; defaults to the current UTC time
    :return: a new snapshot
    """
    if not items:
        # No division for the empty catalog.
        return StatisticsSnapshot(total=0, average_price=0)

    total = len(items)
    prices = [_price(item) for item in items]
    return StatisticsSnapshot(
        total=total,
        average_price=round_price(sum(prices) / total),
        min_price=min(prices),
        max_price=max(prices),
        category_breakdown=dict(Counter(_category(item) for item in items)),
        last_updated=now or datetime.now(timezone.utc),
    )
