"""Adapters for the UI bounded context."""
