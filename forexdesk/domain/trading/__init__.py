"""
Trading bounded context.

Only client-side checks live here; order execution is owned by the
trading backend.
"""
