from .date_scope import DateScope, DateScopeResolver, ScopeMode
from .event_validator import EventValidator, ValidatedEventInput
from .event_authorizer import EventOwnershipAuthorizer

__all__ = [
    "DateScope",
    "DateScopeResolver",
    "ScopeMode",
    "EventValidator",
    "ValidatedEventInput",
    "EventOwnershipAuthorizer",
]
