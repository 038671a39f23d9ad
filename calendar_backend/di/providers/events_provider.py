
from typing import TYPE_CHECKING

from ...domain.repositories.event_repository import EventRepository
from ...application.services.date_scope import DateScopeResolver
from ...application.services.event_authorizer import EventOwnershipAuthorizer
from ...application.services.event_validator import EventValidator
from ...application.use_cases.event.list_events import ListEventsUseCase
from ...application.use_cases.event.count_events_per_day import CountEventsPerDayUseCase
from ...application.use_cases.event.create_event import CreateEventUseCase
from ...application.use_cases.event.update_event import UpdateEventUseCase
from ...application.use_cases.event.delete_event import DeleteEventUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventsProvider:
    """Events use case provider - registers the event services and use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Stateless services are shared
        container.register_singleton(DateScopeResolver, DateScopeResolver())
        container.register_singleton(EventValidator, EventValidator())

        # The authorizer holds no state; it reads owners from the store per call
        container.register_factory(
            EventOwnershipAuthorizer,
            lambda: EventOwnershipAuthorizer(event_repository=container.get(EventRepository)),
        )

        container.register_factory(
            ListEventsUseCase,
            lambda: ListEventsUseCase(
                event_repository=container.get(EventRepository),
                scope_resolver=container.get(DateScopeResolver),
            ),
        )

        container.register_factory(
            CountEventsPerDayUseCase,
            lambda: CountEventsPerDayUseCase(event_repository=container.get(EventRepository)),
        )

        container.register_factory(
            CreateEventUseCase,
            lambda: CreateEventUseCase(
                event_repository=container.get(EventRepository),
                validator=container.get(EventValidator),
            ),
        )

        container.register_factory(
            UpdateEventUseCase,
            lambda: UpdateEventUseCase(
                event_repository=container.get(EventRepository),
                authorizer=container.get(EventOwnershipAuthorizer),
                validator=container.get(EventValidator),
            ),
        )

        container.register_factory(
            DeleteEventUseCase,
            lambda: DeleteEventUseCase(
                event_repository=container.get(EventRepository),
                authorizer=container.get(EventOwnershipAuthorizer),
                validator=container.get(EventValidator),
            ),
        )
