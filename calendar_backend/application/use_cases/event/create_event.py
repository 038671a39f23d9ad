# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import ValidationFailedError
from ....domain.models.event import Event
from ....domain.repositories.event_repository import EventRepository
from ...dto.event_dto import EventCreateRequest, EventResponse
from ...services.event_validator import EventValidator

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """Use case for creating an event owned by the requesting user"""

    def __init__(
        self,
        event_repository: EventRepository,
        validator: Optional[EventValidator] = None,
    ) -> None:
        self.event_repository = event_repository
        self.validator = validator or EventValidator()

    async def execute(self, owner_user_id: str, request: EventCreateRequest) -> EventResponse:
        """
        Create a new event

        Args:
            owner_user_id: ID of the user creating the event (becomes its owner)
            request: Raw event payload

        Returns:
            EventResponse with the store-assigned id

        Raises:
            ValidationFailedError: If any field is missing, blank or malformed,
                or importance is not a known level
            StoreUnavailableError: If the store call fails
        """
        validated = self.validator.validate_create(request)

        try:
            new_event = Event(
                id=None,
                owner_user_id=owner_user_id,
                title=validated.title,
                description=validated.description,
                date_time=validated.date_time,
                importance=validated.importance,
            )
        except ValueError as exception:
            logger.warning("Event rejected by domain rules: %s", exception)
            raise ValidationFailedError(["importance"])

        saved_event = await self.event_repository.create(new_event)
        logger.info("Created event %s for user %s", saved_event.id, owner_user_id)
        return EventResponse.from_event(saved_event)
