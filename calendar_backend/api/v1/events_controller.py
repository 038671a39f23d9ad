"""
Events API: scoped listing, per-day counts, create, update and delete.

Every route acts on behalf of the authenticated user only.
"""

# Standard library imports
import logging
from typing import NoReturn, Optional

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ...application.dto.event_dto import (
    EventCreateRequest,
    EventUpdateRequest,
    EventListResponse,
    EventsPerDayResponse,
    EventCreatedResponse,
    EventUpdatedResponse,
    MessageResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.event.list_events import ListEventsUseCase
from ...application.use_cases.event.count_events_per_day import CountEventsPerDayUseCase
from ...application.use_cases.event.create_event import CreateEventUseCase
from ...application.use_cases.event.update_event import UpdateEventUseCase
from ...application.use_cases.event.delete_event import DeleteEventUseCase
from ...di.container import get_container
from ...domain.exceptions import (
    BadScopeError,
    EventNotFoundError,
    EventServiceError,
    ForbiddenError,
    StoreUnavailableError,
    ValidationFailedError,
)
from .dependencies import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(tags=["events"])


def _raise_http(exception: EventServiceError) -> NoReturn:
    """Translate a domain error into the matching HTTPException."""
    if isinstance(exception, (BadScopeError, ValidationFailedError)):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exception, EventNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exception, ForbiddenError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exception, StoreUnavailableError):
        logger.error("Event store unavailable: %s", exception.message)
    raise HTTPException(status_code=code, detail=exception.user_message)


@router.get("/get", response_model=EventListResponse)
async def get_events(
    date: Optional[str] = Query(None, description="Any parseable date; absent or invalid lists all events"),
    month: Optional[str] = Query(None, description="Zero-indexed month (0-11)"),
    year: Optional[str] = Query(None),
    current_user: UserResponse = Depends(get_current_user),
) -> EventListResponse:
    """
    List the current user's events.

    - no/invalid date: every event
    - date + month + year: the whole month
    - date only: the calendar day of that date
    """
    container = get_container()
    use_case = container.get(ListEventsUseCase)

    try:
        return await use_case.execute(
            owner_user_id=current_user.id,
            date_str=date,
            month=month,
            year=year,
        )
    except EventServiceError as exception:
        _raise_http(exception)


@router.get("/per-day", response_model=EventsPerDayResponse)
async def get_events_per_day(
    month: Optional[str] = Query(None, description="Zero-indexed month (0-11)"),
    year: Optional[str] = Query(None),
    current_user: UserResponse = Depends(get_current_user),
) -> EventsPerDayResponse:
    """Count the current user's events on each day of a month."""
    container = get_container()
    use_case = container.get(CountEventsPerDayUseCase)

    try:
        return await use_case.execute(owner_user_id=current_user.id, month=month, year=year)
    except EventServiceError as exception:
        _raise_http(exception)


@router.post(
    "/create",
    response_model=EventCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    request: EventCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> EventCreatedResponse:
    container = get_container()
    use_case = container.get(CreateEventUseCase)

    try:
        event = await use_case.execute(owner_user_id=current_user.id, request=request)
    except EventServiceError as exception:
        _raise_http(exception)

    logger.info("User %s created event %s", current_user.id, event.id)
    return EventCreatedResponse(new_event=event)


@router.put("/update", response_model=EventUpdatedResponse)
async def update_event(
    request: EventUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> EventUpdatedResponse:
    container = get_container()
    use_case = container.get(UpdateEventUseCase)

    try:
        event = await use_case.execute(owner_user_id=current_user.id, request=request)
    except EventServiceError as exception:
        _raise_http(exception)

    return EventUpdatedResponse(event=event)


@router.delete("/delete", response_model=MessageResponse)
async def delete_event(
    id: Optional[str] = Query(None, description="Event id"),
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    container = get_container()
    use_case = container.get(DeleteEventUseCase)

    try:
        await use_case.execute(owner_user_id=current_user.id, event_id=id)
    except EventServiceError as exception:
        _raise_http(exception)

    return MessageResponse(message="Event successfully deleted")
