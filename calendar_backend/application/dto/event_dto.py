from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

from ...domain.models.event import Event
from ...utils.datetime_utils import to_iso


class EventCreateRequest(BaseModel):
    """
    DTO for event creation.

    Fields are deliberately loose: presence, blankness and formats are checked
    by the EventValidator so that every failure is reported the same way.
    """
    title: Optional[Any] = None
    description: Optional[Any] = None
    importance: Optional[Any] = None
    date_time: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("dateTime", "datetime", "date_time"),
    )


class EventUpdateRequest(EventCreateRequest):
    """DTO for event update (full replacement of the mutable fields)"""
    id: Optional[Any] = None


class EventResponse(BaseModel):
    """DTO for a single event as seen by its owner"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    date_time: datetime = Field(alias="dateTime")
    importance: int

    @field_serializer("date_time")
    def _serialize_date_time(self, value: datetime) -> Optional[str]:
        return to_iso(value)

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id or 0,
            title=event.title,
            description=event.description,
            date_time=event.date_time,
            importance=int(event.importance),
        )


class EventListResponse(BaseModel):
    events: List[EventResponse] = Field(default_factory=list)


class EventsPerDayResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    events_per_day: List[int] = Field(default_factory=list, alias="eventsPerDay")


class EventCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Event successfully created"
    new_event: EventResponse = Field(alias="newEvent")


class EventUpdatedResponse(BaseModel):
    message: str = "Event successfully updated"
    event: EventResponse


class MessageResponse(BaseModel):
    message: str
