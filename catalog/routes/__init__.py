"""
Route aggregation package for the catalog API.

Each module defines an ``APIRouter`` instance that groups related
endpoints together (item browsing and statistics). The main
application imports these routers and includes them in the global
FastAPI instance.
"""

__all__ = [
    "dependencies",
    "items",
    "stats",
]

# Import submodules so their routers can be registered by main.py
from . import dependencies, items, stats  # noqa: E402,F401
