"""Request and response models for the catalog API."""
