"""
Event calendar backend, root package.

This package contains the FastAPI app entry point (main.py), API routes,
the event domain (scoped reads, per-day counts, owner-checked writes),
MongoDB infrastructure, and a small async client (client/).
"""
