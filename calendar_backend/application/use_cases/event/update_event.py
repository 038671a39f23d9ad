# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import EventNotFoundError, ValidationFailedError
from ....domain.models.event import Event
from ....domain.repositories.event_repository import EventRepository
from ...dto.event_dto import EventResponse, EventUpdateRequest
from ...services.event_authorizer import EventOwnershipAuthorizer
from ...services.event_validator import EventValidator

logger = logging.getLogger(__name__)


class UpdateEventUseCase:
    """Use case for replacing the mutable fields of an event the user owns"""

    def __init__(
        self,
        event_repository: EventRepository,
        authorizer: Optional[EventOwnershipAuthorizer] = None,
        validator: Optional[EventValidator] = None,
    ) -> None:
        self.event_repository = event_repository
        self.authorizer = authorizer or EventOwnershipAuthorizer(event_repository)
        self.validator = validator or EventValidator()

    async def execute(self, owner_user_id: str, request: EventUpdateRequest) -> EventResponse:
        """
        Update an event

        Args:
            owner_user_id: ID of the requesting user
            request: Event id plus the full set of replaceable fields

        Returns:
            EventResponse with the new values

        Raises:
            ValidationFailedError: If the payload is invalid (checked before any store access)
            EventNotFoundError: If the event does not exist
            ForbiddenError: If the requester does not own the event
            StoreUnavailableError: If a store call fails
        """
        event_id, validated = self.validator.validate_update(request)

        existing = await self.authorizer.authorize(event_id, owner_user_id)

        try:
            updated = Event(
                id=existing.id,
                owner_user_id=existing.owner_user_id,
                title=validated.title,
                description=validated.description,
                date_time=validated.date_time,
                importance=validated.importance,
            )
        except ValueError as exception:
            logger.warning("Event update rejected by domain rules: %s", exception)
            raise ValidationFailedError(["importance"])

        # Not transactional: a concurrent delete between the check and this write
        # is reported as not found
        if not await self.event_repository.update(updated):
            raise EventNotFoundError(event_id)

        logger.info("Updated event %s for user %s", event_id, owner_user_id)
        return EventResponse.from_event(updated)
