# Standard library imports
import logging
from datetime import datetime
from typing import Any, Dict, Optional, List

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.event_repository import EventRepository
from ...domain.models.event import Event, EventTimestamp
from ...domain.models.importance import Importance
from ...domain.constants import EventFields, CounterFields
from ...domain.exceptions import StoreUnavailableError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_event_collection, get_counter_collection

logger = logging.getLogger(__name__)

_EVENT_ORDER = [(EventFields.DATE_TIME, ASCENDING), (EventFields.MONGO_ID, ASCENDING)]


class MongoEventRepository(EventRepository):
    """MongoDB implementation of EventRepository"""

    def __init__(
        self,
        event_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.event_collection = event_collection if event_collection is not None else get_event_collection()
        self.counter_collection = (
            counter_collection if counter_collection is not None else get_counter_collection()
        )

    async def ensure_indexes(self) -> None:
        """Create the compound index backing owner + range + order queries"""
        try:
            await self.event_collection.create_index(
                [
                    (EventFields.OWNER_USER_ID, ASCENDING),
                    (EventFields.DATE_TIME, ASCENDING),
                    (EventFields.MONGO_ID, ASCENDING),
                ],
                name="owner_date_time_id",
            )
        except PyMongoError as e:
            logger.error("Failed to create event indexes: %s", e, exc_info=True)
            raise StoreUnavailableError("ensure_indexes", e)

    async def _next_event_id(self) -> int:
        counter = await self.counter_collection.find_one_and_update(
            {CounterFields.MONGO_ID: CounterFields.EVENTS_COUNTER},
            {"$inc": {CounterFields.SEQUENCE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter[CounterFields.SEQUENCE])

    async def create(self, event: Event) -> Event:
        if not event:
            raise ValueError("Event cannot be None")

        try:
            event_id = await self._next_event_id()
            doc = self._event_to_document(event)
            doc[EventFields.MONGO_ID] = event_id
            await self.event_collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Error creating event: %s", e, exc_info=True)
            raise StoreUnavailableError("create", e)

        return Event(
            id=event_id,
            owner_user_id=event.owner_user_id,
            title=event.title,
            description=event.description,
            date_time=ensure_utc(event.date_time),
            importance=event.importance,
        )

    async def find_by_id(self, event_id: int) -> Optional[Event]:
        try:
            doc = await self.event_collection.find_one({EventFields.MONGO_ID: event_id})
        except PyMongoError as e:
            logger.error("Error finding event %s: %s", event_id, e, exc_info=True)
            raise StoreUnavailableError("find_by_id", e)

        if not doc:
            return None
        return self._document_to_event(doc)

    async def list(
        self,
        owner_user_id: str,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
    ) -> List[Event]:
        query = self._owner_range_query(owner_user_id, start_utc, end_utc)
        try:
            cursor = self.event_collection.find(query).sort(_EVENT_ORDER)
            return [self._document_to_event(doc) async for doc in cursor]
        except PyMongoError as e:
            logger.error("Error listing events: %s", e, exc_info=True)
            raise StoreUnavailableError("list", e)

    async def list_date_times(
        self,
        owner_user_id: str,
        start_utc: datetime,
        end_utc: datetime,
    ) -> List[EventTimestamp]:
        query = self._owner_range_query(owner_user_id, start_utc, end_utc)
        try:
            cursor = self.event_collection.find(query, {EventFields.DATE_TIME: 1}).sort(_EVENT_ORDER)
            return [
                EventTimestamp(
                    id=int(doc[EventFields.MONGO_ID]),
                    date_time=ensure_utc(doc[EventFields.DATE_TIME]),
                )
                async for doc in cursor
            ]
        except PyMongoError as e:
            logger.error("Error listing event timestamps: %s", e, exc_info=True)
            raise StoreUnavailableError("list_date_times", e)

    async def update(self, event: Event) -> bool:
        if event.id is None:
            raise ValueError("Cannot update an event without an id")

        changes = self._event_to_document(event)
        # Ownership is fixed at creation
        changes.pop(EventFields.OWNER_USER_ID, None)
        try:
            result = await self.event_collection.update_one(
                {EventFields.MONGO_ID: event.id},
                {"$set": changes},
            )
        except PyMongoError as e:
            logger.error("Error updating event %s: %s", event.id, e, exc_info=True)
            raise StoreUnavailableError("update", e)
        return result.matched_count > 0

    async def delete(self, event_id: int) -> bool:
        try:
            result = await self.event_collection.delete_one({EventFields.MONGO_ID: event_id})
        except PyMongoError as e:
            logger.error("Error deleting event %s: %s", event_id, e, exc_info=True)
            raise StoreUnavailableError("delete", e)
        return result.deleted_count > 0

    @staticmethod
    def _owner_range_query(
        owner_user_id: str,
        start_utc: Optional[datetime],
        end_utc: Optional[datetime],
    ) -> Dict[str, Any]:
        query: Dict[str, Any] = {EventFields.OWNER_USER_ID: owner_user_id}
        if start_utc or end_utc:
            ts_query = {}
            if start_utc:
                ts_query["$gte"] = ensure_utc(start_utc)
            if end_utc:
                ts_query["$lte"] = ensure_utc(end_utc)
            query[EventFields.DATE_TIME] = ts_query
        return query

    @staticmethod
    def _event_to_document(event: Event) -> dict:
        return {
            EventFields.OWNER_USER_ID: event.owner_user_id,
            EventFields.TITLE: event.title,
            EventFields.DESCRIPTION: event.description,
            EventFields.DATE_TIME: ensure_utc(event.date_time),
            EventFields.IMPORTANCE: int(event.importance),
        }

    @staticmethod
    def _document_to_event(doc: dict) -> Event:
        return Event(
            id=int(doc[EventFields.MONGO_ID]),
            owner_user_id=doc[EventFields.OWNER_USER_ID],
            title=doc[EventFields.TITLE],
            description=doc[EventFields.DESCRIPTION],
            date_time=ensure_utc(doc[EventFields.DATE_TIME]),
            importance=Importance(doc[EventFields.IMPORTANCE]),
        )
