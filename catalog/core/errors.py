"""
core/errors.py
--------------

Exception types raised by the catalog services.

Only failures that callers are expected to handle live here. Request
validation problems are left to FastAPI/pydantic and missing items are
reported with ``HTTPException`` directly by the service layer.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class SourceUnavailable(CatalogError):
    """The item store could not produce a version token or its items.

    Raised when the backing storage is missing, unreadable or holds
    data that cannot be parsed. It is never retried internally; the
    application maps it to ``503 Service Unavailable``.
    """
