from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .importance import Importance


@dataclass
class Event:
    """
    Pure domain model for a calendar Event.

    ``owner_user_id`` is fixed at creation and never reassigned. ``date_time``
    is a single absolute instant (timezone-aware).
    """

    id: Optional[int]
    owner_user_id: str
    title: str
    description: str
    date_time: datetime
    importance: Importance

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_user_id:
            raise ValueError("Owner user ID is required")
        if not self.title or not self.title.strip():
            raise ValueError("Event title is required")
        if not self.description or not self.description.strip():
            raise ValueError("Event description is required")
        if self.date_time.tzinfo is None:
            raise ValueError("Event date_time must be timezone-aware")
        # Rejects integers outside the closed set of levels
        self.importance = Importance(self.importance)
        self.title = self.title.strip()
        self.description = self.description.strip()


@dataclass(frozen=True)
class EventTimestamp:
    """Narrow projection of an Event: identifier and instant only."""

    id: int
    date_time: datetime
