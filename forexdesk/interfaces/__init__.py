"""
Interfaces layer.

FastAPI routers, upload dependencies and CLI probes.
Translates between the outside world and the application layer.
"""
