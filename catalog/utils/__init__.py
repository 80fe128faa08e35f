"""Small helpers shared by the catalog services."""
