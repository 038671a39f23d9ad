"""Utility modules for the calendar backend application."""

from .datetime_utils import (
    get_app_timezone,
    ensure_utc,
    to_app_timezone,
    parse_datetime,
    to_iso,
)

__all__ = [
    "get_app_timezone",
    "ensure_utc",
    "to_app_timezone",
    "parse_datetime",
    "to_iso",
]
