from .list_events import ListEventsUseCase
from .count_events_per_day import CountEventsPerDayUseCase
from .create_event import CreateEventUseCase
from .update_event import UpdateEventUseCase
from .delete_event import DeleteEventUseCase

__all__ = [
    "ListEventsUseCase",
    "CountEventsPerDayUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
]
