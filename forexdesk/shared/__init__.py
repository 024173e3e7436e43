"""
Shared cross-cutting concerns.

Contains error handling, security middleware, and logging configuration.
These modules are used across all bounded contexts but contain
no business logic.
"""
