# Standard library imports
import logging

# Local application imports
from ...domain.exceptions import EventNotFoundError, ForbiddenError
from ...domain.models.event import Event
from ...domain.repositories.event_repository import EventRepository

logger = logging.getLogger(__name__)


class EventOwnershipAuthorizer:
    """
    Ownership check performed before every update and delete.

    The owner is read from the store on each call; nothing is cached.
    """

    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def authorize(self, event_id: int, user_id: str) -> Event:
        """
        Load the event and verify that ``user_id`` owns it.

        Returns:
            The stored event

        Raises:
            EventNotFoundError: If no event has this id
            ForbiddenError: If the event belongs to someone else
        """
        event = await self.event_repository.find_by_id(event_id)
        if event is None:
            logger.info("Mutation target %s does not exist (user %s)", event_id, user_id)
            raise EventNotFoundError(event_id)

        if event.owner_user_id != user_id:
            logger.warning("User %s is forbidden to modify event %s", user_id, event_id)
            raise ForbiddenError(event_id, user_id)

        return event
