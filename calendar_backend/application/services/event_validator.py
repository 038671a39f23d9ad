"""
Validation gate for event writes.

Runs to completion before any store access and reports every failing field
through a single ValidationFailedError.
"""

# Standard library imports
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Tuple

# Local application imports
from ...domain.exceptions import ValidationFailedError
from ...utils.datetime_utils import ensure_utc, parse_datetime
from ..dto.event_dto import EventCreateRequest, EventUpdateRequest

logger = logging.getLogger(__name__)

# MongoDB stores integer ids as signed 64-bit values
MIN_EVENT_ID = -(2 ** 63)
MAX_EVENT_ID = 2 ** 63 - 1


@dataclass(frozen=True)
class ValidatedEventInput:
    title: str
    description: str
    importance: int
    date_time: datetime


def _clean_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def parse_int(value: Any) -> Optional[int]:
    """Strict integer parse: ints and integer strings only."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_event_id(value: Any) -> Optional[int]:
    """Integer parse limited to ids the store can encode."""
    event_id = parse_int(value)
    if event_id is None or not MIN_EVENT_ID <= event_id <= MAX_EVENT_ID:
        return None
    return event_id


class EventValidator:
    """Checks create/update payloads and event identifiers."""

    def validate_create(self, request: EventCreateRequest) -> ValidatedEventInput:
        errors: List[str] = []
        validated = self._collect(request, errors)
        if errors:
            self._fail(errors)
        return validated

    def validate_update(self, request: EventUpdateRequest) -> Tuple[int, ValidatedEventInput]:
        errors: List[str] = []
        event_id = parse_event_id(request.id)
        if event_id is None:
            errors.append("id")
        validated = self._collect(request, errors)
        if errors:
            self._fail(errors)
        return event_id, validated

    def validate_event_id(self, raw_id: Any) -> int:
        event_id = parse_event_id(raw_id)
        if event_id is None:
            self._fail(["id"])
        return event_id

    def _collect(self, request: EventCreateRequest, errors: List[str]) -> Optional[ValidatedEventInput]:
        title = _clean_text(request.title)
        if title is None:
            errors.append("title")

        description = _clean_text(request.description)
        if description is None:
            errors.append("description")

        importance = parse_int(request.importance)
        if importance is None:
            errors.append("importance")

        date_time = parse_datetime(request.date_time)
        if date_time is not None:
            try:
                date_time = ensure_utc(date_time)
            except OverflowError:
                date_time = None
        if date_time is None:
            errors.append("dateTime")

        if errors:
            return None
        return ValidatedEventInput(
            title=title,
            description=description,
            importance=importance,
            date_time=date_time,
        )

    @staticmethod
    def _fail(fields: List[str]) -> None:
        logger.warning("Event payload rejected, invalid fields: %s", ", ".join(fields))
        raise ValidationFailedError(fields)
