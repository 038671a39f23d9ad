# Standard library imports
import logging
from typing import Optional, Union

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ...dto.event_dto import EventListResponse, EventResponse
from ...services.date_scope import DateScopeResolver

logger = logging.getLogger(__name__)


class ListEventsUseCase:
    """Use case for listing the current user's events within a resolved date scope"""

    def __init__(
        self,
        event_repository: EventRepository,
        scope_resolver: Optional[DateScopeResolver] = None,
    ) -> None:
        self.event_repository = event_repository
        self.scope_resolver = scope_resolver or DateScopeResolver()

    async def execute(
        self,
        owner_user_id: str,
        date_str: Optional[str] = None,
        month: Union[str, int, None] = None,
        year: Union[str, int, None] = None,
    ) -> EventListResponse:
        """
        List events for a user.

        Args:
            owner_user_id: ID of the requesting user; always applied as a filter
            date_str: Free-form date; absent or invalid means "all events"
            month: Zero-indexed month (0-11); with year selects the whole month
            year: Four digit year

        Returns:
            EventListResponse ordered by date_time, then id

        Raises:
            BadScopeError: If month or year is not an integer
            StoreUnavailableError: If the store call fails
        """
        scope = self.scope_resolver.resolve(date_str=date_str, month=month, year=year)

        events = await self.event_repository.list(
            owner_user_id=owner_user_id,
            start_utc=scope.start_utc,
            end_utc=scope.end_utc,
        )
        logger.debug(
            "Listed %d event(s) for user %s in %s mode", len(events), owner_user_id, scope.mode.value
        )
        return EventListResponse(events=[EventResponse.from_event(e) for e in events])
