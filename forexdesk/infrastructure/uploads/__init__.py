"""Adapters for the uploads bounded context."""
