from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .event import (
    ListEventsUseCase,
    CountEventsPerDayUseCase,
    CreateEventUseCase,
    UpdateEventUseCase,
    DeleteEventUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ListEventsUseCase",
    "CountEventsPerDayUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
]
