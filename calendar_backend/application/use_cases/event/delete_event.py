# Standard library imports
import logging
from typing import Any, Optional

# Local application imports
from ....domain.exceptions import EventNotFoundError
from ....domain.repositories.event_repository import EventRepository
from ...services.event_authorizer import EventOwnershipAuthorizer
from ...services.event_validator import EventValidator

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    """Use case for deleting an event the user owns"""

    def __init__(
        self,
        event_repository: EventRepository,
        authorizer: Optional[EventOwnershipAuthorizer] = None,
        validator: Optional[EventValidator] = None,
    ) -> None:
        self.event_repository = event_repository
        self.authorizer = authorizer or EventOwnershipAuthorizer(event_repository)
        self.validator = validator or EventValidator()

    async def execute(self, owner_user_id: str, event_id: Any) -> None:
        """
        Delete an event

        Raises:
            ValidationFailedError: If event_id is not an integer
            EventNotFoundError: If the event does not exist
            ForbiddenError: If the requester does not own the event
            StoreUnavailableError: If a store call fails
        """
        parsed_id = self.validator.validate_event_id(event_id)

        await self.authorizer.authorize(parsed_id, owner_user_id)

        if not await self.event_repository.delete(parsed_id):
            raise EventNotFoundError(parsed_id)

        logger.info("Deleted event %s for user %s", parsed_id, owner_user_id)
