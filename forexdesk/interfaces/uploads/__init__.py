"""Upload handling for FastAPI routes."""
