"""
UI bounded context.

View lifecycle utilities that drive a host window through ports,
so they can run under any event loop or in tests.
"""
