"""
API layer for the event calendar backend.

Exposes HTTP endpoints under /api/v1 (auth, events) plus /health.
"""
from .auth_controller import router as auth_router
from .events_controller import router as events_router
from .health_controller import router as health_router


__all__ = ["auth_router", "events_router", "health_router"]
