"""
Root application entry point for the catalog API
================================================

This module exposes the FastAPI application instance defined in
``catalog/main.py`` so that deployment tools like Uvicorn can import
``main:app`` without knowing the package layout.

Usage
-----

.. code-block:: bash

    uvicorn main:app --host 0.0.0.0 --port 4001
"""

from catalog.main import app  # noqa: F401 re-export for Uvicorn

__all__ = ["app"]
