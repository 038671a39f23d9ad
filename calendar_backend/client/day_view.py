"""
Local view of one day's events, kept in sync with mutations without
re-fetching.
"""

# Standard library imports
from typing import Any, Dict, Iterable, List, Tuple, Union

# Local application imports
from ..domain.models.importance import Importance
from ..utils.datetime_utils import parse_datetime

EventDict = Dict[str, Any]
ImportanceFilter = Union[str, int, Importance]

ALL = "all"


def _order_key(event: EventDict) -> Tuple:
    date_time = parse_datetime(event.get("dateTime"))
    if date_time is None:
        raise ValueError(f"Event {event.get('id')} has no valid dateTime")
    return (date_time, event.get("id", 0))


class DayEventsView:
    """
    Sorted list of event dicts (as returned by the API) plus an importance
    filter ("all" or one importance level).
    """

    def __init__(self) -> None:
        self._events: List[EventDict] = []
        self._filter: ImportanceFilter = ALL

    def load(self, events: Iterable[EventDict]) -> None:
        """
        Raises:
            ValueError: If an event has no parseable dateTime; the view is left unchanged
        """
        self._events = sorted(events, key=_order_key)

    def apply_created(self, event: EventDict) -> None:
        self._events = sorted(self._events + [event], key=_order_key)

    def apply_updated(self, event: EventDict) -> None:
        """Replace the event with the same id and re-sort."""
        remaining = [e for e in self._events if e.get("id") != event.get("id")]
        self._events = sorted(remaining + [event], key=_order_key)

    def apply_deleted(self, event_id: int) -> None:
        self._events = [e for e in self._events if e.get("id") != event_id]

    def set_filter(self, value: ImportanceFilter) -> None:
        """
        Raises:
            ValueError: If value is neither "all" nor a known importance level
        """
        if isinstance(value, str) and value.strip().lower() == ALL:
            self._filter = ALL
            return
        self._filter = Importance(int(value))

    @property
    def filter(self) -> ImportanceFilter:
        return self._filter

    def visible(self) -> List[EventDict]:
        if self._filter == ALL:
            return list(self._events)
        return [e for e in self._events if e.get("importance") == int(self._filter)]

    def clear(self) -> None:
        self._events = []
        self._filter = ALL
