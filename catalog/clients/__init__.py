"""
Storage clients for the catalog API.

Each client wraps one persistence backend and is created once per
process by the application lifespan.
"""
