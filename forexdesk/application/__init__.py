"""
Application layer.

Use cases orchestrate domain logic through ports.
No framework or SDK imports allowed.
"""
