from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .event_dto import (
    EventCreateRequest,
    EventUpdateRequest,
    EventResponse,
    EventListResponse,
    EventsPerDayResponse,
    EventCreatedResponse,
    EventUpdatedResponse,
    MessageResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "EventCreateRequest",
    "EventUpdateRequest",
    "EventResponse",
    "EventListResponse",
    "EventsPerDayResponse",
    "EventCreatedResponse",
    "EventUpdatedResponse",
    "MessageResponse",
]
