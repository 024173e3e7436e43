"""Use cases for the uploads bounded context."""
