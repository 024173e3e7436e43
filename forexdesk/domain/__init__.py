"""
Domain layer.

Pure business logic: entities, ports (ABCs), and domain errors.
No framework imports allowed.
"""
