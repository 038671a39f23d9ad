"""
Shared pytest fixtures for calendar backend tests.
"""
import os
from datetime import datetime
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from calendar_backend.domain.models.event import Event, EventTimestamp
from calendar_backend.domain.repositories.event_repository import EventRepository
from calendar_backend.utils.datetime_utils import ensure_utc


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_event_calendar",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """
    Fixture to mock get_settings for tests. Patches all modules that use it.
    Set ``mock_settings.local_timezone`` inside a test to move calendar boundaries.
    """
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.local_timezone = "UTC"
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("calendar_backend.core.config.get_settings", return_value=mock), patch(
        "calendar_backend.core.security.get_settings", return_value=mock
    ), patch("calendar_backend.utils.datetime_utils.get_settings", return_value=mock):
        yield mock


class InMemoryEventRepository(EventRepository):
    """Dict-backed EventRepository honoring the ordering and range contract."""

    def __init__(self) -> None:
        self.events: Dict[int, Event] = {}
        self._sequence = 0

    async def create(self, event: Event) -> Event:
        self._sequence += 1
        saved = Event(
            id=self._sequence,
            owner_user_id=event.owner_user_id,
            title=event.title,
            description=event.description,
            date_time=ensure_utc(event.date_time),
            importance=event.importance,
        )
        self.events[saved.id] = saved
        return saved

    async def find_by_id(self, event_id: int) -> Optional[Event]:
        return self.events.get(event_id)

    async def list(
        self,
        owner_user_id: str,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
    ) -> List[Event]:
        matches = [
            e for e in self.events.values()
            if e.owner_user_id == owner_user_id
            and (start_utc is None or e.date_time >= start_utc)
            and (end_utc is None or e.date_time <= end_utc)
        ]
        return sorted(matches, key=lambda e: (e.date_time, e.id))

    async def list_date_times(
        self,
        owner_user_id: str,
        start_utc: datetime,
        end_utc: datetime,
    ) -> List[EventTimestamp]:
        events = await self.list(owner_user_id, start_utc, end_utc)
        return [EventTimestamp(id=e.id, date_time=e.date_time) for e in events]

    async def update(self, event: Event) -> bool:
        current = self.events.get(event.id)
        if current is None:
            return False
        self.events[event.id] = Event(
            id=current.id,
            owner_user_id=current.owner_user_id,
            title=event.title,
            description=event.description,
            date_time=ensure_utc(event.date_time),
            importance=event.importance,
        )
        return True

    async def delete(self, event_id: int) -> bool:
        return self.events.pop(event_id, None) is not None


@pytest.fixture
def event_repo():
    """Empty in-memory event store."""
    return InMemoryEventRepository()
