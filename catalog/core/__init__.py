"""
Core helpers package for the catalog API.

This package contains low-level infrastructure such as the settings
object and the error taxonomy shared by services and routes. Keeping
these helpers in a dedicated package makes it easy to override them
for testing.
"""

__all__ = []
