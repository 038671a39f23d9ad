from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List

from ..models.event import Event, EventTimestamp


class EventRepository(ABC):
    """
    Repository interface - defines contract for event data access.

    Range bounds are inclusive on both ends. Listings are ordered by
    ``date_time`` ascending, then by ``id`` ascending.
    """

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Persist a new event and return it with its store-assigned id"""
        pass

    @abstractmethod
    async def find_by_id(self, event_id: int) -> Optional[Event]:
        """Load an event (with its owner) regardless of who owns it"""
        pass

    @abstractmethod
    async def list(
        self,
        owner_user_id: str,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
    ) -> List[Event]:
        """List a user's events, optionally restricted to [start_utc, end_utc]"""
        pass

    @abstractmethod
    async def list_date_times(
        self,
        owner_user_id: str,
        start_utc: datetime,
        end_utc: datetime,
    ) -> List[EventTimestamp]:
        """Same filter and order as list(), projected to id and date_time"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> bool:
        """Replace title, description, date_time and importance; False if missing"""
        pass

    @abstractmethod
    async def delete(self, event_id: int) -> bool:
        """Delete an event; False if it did not exist"""
        pass
