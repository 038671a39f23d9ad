"""
API layer for the event calendar backend.

Versioned HTTP routers live in api.v1.
"""
