"""
Infrastructure layer.

Adapters that implement domain ports: Cloudinary storage, the
mock email service, the HTTP client for the trading backend and
asyncio timers.
"""
