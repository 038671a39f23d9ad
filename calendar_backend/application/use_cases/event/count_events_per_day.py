# Standard library imports
import logging
from typing import Union

# Local application imports
from ....domain.repositories.event_repository import EventRepository
from ....utils.datetime_utils import get_app_timezone, to_app_timezone
from ...dto.event_dto import EventsPerDayResponse
from ...services.date_scope import days_in_month, month_bounds, parse_month_year

logger = logging.getLogger(__name__)


class CountEventsPerDayUseCase:
    """Use case for counting a user's events per calendar day of one month"""

    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def execute(
        self,
        owner_user_id: str,
        month: Union[str, int, None],
        year: Union[str, int, None],
    ) -> EventsPerDayResponse:
        """
        Build the per-day histogram for a month.

        Args:
            owner_user_id: ID of the requesting user
            month: Zero-indexed month (0-11), required
            year: Year, required

        Returns:
            EventsPerDayResponse whose list has one entry per day of the month;
            index i counts events on day i + 1

        Raises:
            BadScopeError: If month or year is missing or not an integer
            StoreUnavailableError: If the store call fails
        """
        calendar_month, calendar_year = parse_month_year(month, year)
        tz = get_app_timezone()
        start_utc, end_utc = month_bounds(calendar_month, calendar_year, tz)

        stamps = await self.event_repository.list_date_times(
            owner_user_id=owner_user_id,
            start_utc=start_utc,
            end_utc=end_utc,
        )

        counts = [0] * days_in_month(calendar_month, calendar_year)
        for stamp in stamps:
            local = to_app_timezone(stamp.date_time, tz)
            # Range filter already pins events to this month in this zone
            counts[local.day - 1] += 1

        return EventsPerDayResponse(events_per_day=counts)
