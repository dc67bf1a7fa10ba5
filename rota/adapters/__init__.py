"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations of domain ports. Today that is the JSON
    preferences store used for display settings.

Call context:
    Imported by ``rota.app.main`` for runtime wiring and by tests with a
    temporary directory as storage root.
"""
