from .events_client import EventsApiClient, EventsApiError
from .day_view import DayEventsView

__all__ = [
    "EventsApiClient",
    "EventsApiError",
    "DayEventsView",
]
