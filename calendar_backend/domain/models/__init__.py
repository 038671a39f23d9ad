from .user import User
from .event import Event, EventTimestamp
from .importance import Importance

__all__ = ["User", "Event", "EventTimestamp", "Importance"]
