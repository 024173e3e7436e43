"""Adapters for the notifications bounded context."""
