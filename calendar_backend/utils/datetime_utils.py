"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application. Calendar
boundaries (start of day, start of month) use the timezone configured in
core.config; everything persisted to MongoDB is UTC.

Functions:
- get_app_timezone(): Configured zone used for every calendar computation
- ensure_utc(): Normalize a datetime to aware UTC
- to_app_timezone(): Convert an instant into the configured zone
- parse_datetime(): Parse a free-form client date string (ISO 8601 or looser forms)
- to_iso(): Serialize an instant as ISO 8601 UTC with a 'Z' suffix
"""
import logging
import re
from datetime import datetime, tzinfo, timezone as dt_timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as date_parser
from dateutil.parser import isoparse

from ..core.config import get_settings

logger = logging.getLogger(__name__)

_JS_ZONE_NAME = re.compile(r"\s*\([^)]*\)\s*$")
_JS_GMT_OFFSET = re.compile(r"\b(?:GMT|UTC)(?=[+-]\d{2}:?\d{2}\b)")


def get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns UTC if the configured name is unknown.
    """
    tz_str = get_settings().local_timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return ZoneInfo(tz_str)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_app_timezone(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Convert an instant to the application timezone (or to tz when given).

    Naive values coming back from MongoDB represent UTC.
    """
    return ensure_utc(dt).astimezone(tz or get_app_timezone())


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a client supplied date string into an aware datetime.

    ISO 8601 strings go through dateutil's strict isoparse. Looser forms
    ("2024/03/15", "March 15, 2024", "Fri, 15 Mar 2024 00:00:00 GMT" or
    JavaScript's "Fri Mar 15 2024 01:00:00 GMT+0200 (...)") fall back to
    dateutil's general parser. Naive values are interpreted in the
    application timezone.

    Returns:
        timezone-aware datetime, or None if the string is empty or not a valid date
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        parsed = isoparse(text)
    except (ValueError, OverflowError):
        try:
            parsed = date_parser.parse(_normalize_js_offset(text))
        except (ValueError, OverflowError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=get_app_timezone())
    return parsed


def _normalize_js_offset(text: str) -> str:
    # dateutil reads "GMT+0200" with POSIX sign rules (UTC-2); JS means UTC+2
    text = _JS_ZONE_NAME.sub("", text)
    return _JS_GMT_OFFSET.sub("", text)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert an instant to an ISO 8601 UTC string ("2024-03-15T09:00:00.000Z").
    Naive values are treated as UTC.
    """
    if dt is None:
        return None
    utc_dt = ensure_utc(dt)
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
