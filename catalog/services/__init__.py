"""Business logic behind the catalog routes."""
