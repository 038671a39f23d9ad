"""Constants for domain model field names"""

from .user_fields import UserFields
from .event_fields import EventFields, CounterFields

__all__ = [
    "UserFields",
    "EventFields",
    "CounterFields",
]
