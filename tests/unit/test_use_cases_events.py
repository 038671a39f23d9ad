"""
Unit tests for event use cases (List, CountPerDay, Create, Update, Delete).

Runs against the in-memory EventRepository from tests/conftest.py.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from calendar_backend.application.dto.event_dto import EventCreateRequest, EventUpdateRequest
from calendar_backend.application.services.date_scope import DateScopeResolver
from calendar_backend.application.use_cases.event.count_events_per_day import CountEventsPerDayUseCase
from calendar_backend.application.use_cases.event.create_event import CreateEventUseCase
from calendar_backend.application.use_cases.event.delete_event import DeleteEventUseCase
from calendar_backend.application.use_cases.event.list_events import ListEventsUseCase
from calendar_backend.application.use_cases.event.update_event import UpdateEventUseCase
from calendar_backend.domain.exceptions import (
    BadScopeError,
    EventNotFoundError,
    ForbiddenError,
    StoreUnavailableError,
    ValidationFailedError,
)
from calendar_backend.domain.models.event import Event
from calendar_backend.domain.models.importance import Importance

UTC = timezone.utc
OWNER = "usr-1"
OTHER = "usr-2"


async def _seed(repo, owner, when, title="Event", importance=Importance.ORDINARY):
    return await repo.create(
        Event(
            id=None,
            owner_user_id=owner,
            title=title,
            description="desc",
            date_time=when,
            importance=importance,
        )
    )


def _create_request(**overrides):
    data = {
        "title": "Dentist",
        "description": "Check-up",
        "importance": 2,
        "dateTime": "2024-03-15T09:00:00Z",
    }
    data.update(overrides)
    return EventCreateRequest.model_validate(data)


def _update_request(event_id, **overrides):
    data = {
        "id": event_id,
        "title": "Moved",
        "description": "Rescheduled",
        "importance": 3,
        "dateTime": "2024-03-20T14:00:00Z",
    }
    data.update(overrides)
    return EventUpdateRequest.model_validate(data)


class TestListEventsUseCase:
    """Tests for ListEventsUseCase"""

    @pytest.fixture
    def use_case(self, event_repo):
        return ListEventsUseCase(event_repo, scope_resolver=DateScopeResolver(tz=UTC))

    @pytest.mark.asyncio
    async def test_empty_store_without_scope_returns_empty_list(self, use_case):
        result = await use_case.execute(OWNER)
        assert result.events == []

    @pytest.mark.asyncio
    async def test_all_mode_returns_every_owned_event(self, use_case, event_repo):
        await _seed(event_repo, OWNER, datetime(2023, 1, 1, tzinfo=UTC))
        await _seed(event_repo, OWNER, datetime(2025, 6, 1, tzinfo=UTC))
        result = await use_case.execute(OWNER, date_str="Invalid Date")
        assert len(result.events) == 2

    @pytest.mark.asyncio
    async def test_day_mode_includes_both_ends_of_the_day(self, use_case, event_repo):
        await _seed(event_repo, OWNER, datetime(2024, 3, 15, 0, 0, tzinfo=UTC), title="midnight")
        await _seed(event_repo, OWNER, datetime(2024, 3, 15, 23, 59, 59, 999999, tzinfo=UTC), title="last")
        await _seed(event_repo, OWNER, datetime(2024, 3, 16, 0, 0, tzinfo=UTC), title="next day")

        result = await use_case.execute(OWNER, date_str="2024-03-15T12:00:00Z")
        assert [e.title for e in result.events] == ["midnight", "last"]

    @pytest.mark.asyncio
    async def test_month_mode(self, use_case, event_repo):
        await _seed(event_repo, OWNER, datetime(2024, 2, 29, 23, 0, tzinfo=UTC))
        await _seed(event_repo, OWNER, datetime(2024, 3, 1, 0, 0, tzinfo=UTC))
        await _seed(event_repo, OWNER, datetime(2024, 3, 31, 23, 0, tzinfo=UTC))
        await _seed(event_repo, OWNER, datetime(2024, 4, 1, 0, 0, tzinfo=UTC))

        result = await use_case.execute(OWNER, date_str="2024-03-10", month="2", year="2024")
        assert len(result.events) == 2

    @pytest.mark.asyncio
    async def test_results_ordered_by_time_then_id(self, use_case, event_repo):
        same_time = datetime(2024, 3, 15, 10, 0, tzinfo=UTC)
        late = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 18, 0, tzinfo=UTC))
        first_tie = await _seed(event_repo, OWNER, same_time)
        second_tie = await _seed(event_repo, OWNER, same_time)
        early = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 8, 0, tzinfo=UTC))

        result = await use_case.execute(OWNER)
        assert [e.id for e in result.events] == [early.id, first_tie.id, second_tie.id, late.id]

    @pytest.mark.asyncio
    async def test_other_users_events_are_never_returned(self, use_case, event_repo):
        when = datetime(2024, 3, 15, 9, 0, tzinfo=UTC)
        await _seed(event_repo, OWNER, when, title="mine")
        await _seed(event_repo, OTHER, when, title="theirs")

        for kwargs in ({}, {"date_str": "2024-03-15"}, {"date_str": "2024-03-15", "month": 2, "year": 2024}):
            result = await use_case.execute(OWNER, **kwargs)
            assert [e.title for e in result.events] == ["mine"]

    @pytest.mark.asyncio
    async def test_bad_month_raises(self, use_case):
        with pytest.raises(BadScopeError):
            await use_case.execute(OWNER, date_str="2024-03-15", month="March", year="2024")

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        repo = AsyncMock()
        repo.list.side_effect = StoreUnavailableError("list")
        with pytest.raises(StoreUnavailableError):
            await ListEventsUseCase(repo, DateScopeResolver(tz=UTC)).execute(OWNER)


class TestCountEventsPerDayUseCase:
    """Tests for CountEventsPerDayUseCase"""

    @pytest.mark.asyncio
    async def test_single_event_in_march(self, event_repo, mock_settings):
        await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC))

        result = await CountEventsPerDayUseCase(event_repo).execute(OWNER, month=2, year=2024)
        assert len(result.events_per_day) == 31
        assert result.events_per_day[14] == 1
        assert sum(result.events_per_day) == 1

    @pytest.mark.asyncio
    async def test_length_matches_days_in_month(self, event_repo, mock_settings):
        use_case = CountEventsPerDayUseCase(event_repo)
        assert len((await use_case.execute(OWNER, "1", "2024")).events_per_day) == 29
        assert len((await use_case.execute(OWNER, "1", "2023")).events_per_day) == 28
        assert len((await use_case.execute(OWNER, "3", "2024")).events_per_day) == 30

    @pytest.mark.asyncio
    async def test_sum_matches_month_listing(self, event_repo, mock_settings):
        for day, hour in [(1, 0), (1, 12), (10, 8), (31, 23), (30, 5)]:
            await _seed(event_repo, OWNER, datetime(2024, 3, day, hour, 0, tzinfo=UTC))
        await _seed(event_repo, OWNER, datetime(2024, 4, 1, 0, 0, tzinfo=UTC))
        await _seed(event_repo, OTHER, datetime(2024, 3, 10, 8, 0, tzinfo=UTC))

        counts = (await CountEventsPerDayUseCase(event_repo).execute(OWNER, 2, 2024)).events_per_day
        listed = await ListEventsUseCase(event_repo).execute(
            OWNER, date_str="2024-03-01", month=2, year=2024
        )
        assert sum(counts) == len(listed.events) == 5
        assert counts[0] == 2
        assert counts[9] == 1
        assert counts[30] == 1

    @pytest.mark.asyncio
    async def test_days_follow_configured_timezone(self, event_repo, mock_settings):
        mock_settings.local_timezone = "Asia/Tokyo"
        # 20:00 UTC on March 14th is March 15th in Tokyo
        await _seed(event_repo, OWNER, datetime(2024, 3, 14, 20, 0, tzinfo=UTC))

        counts = (await CountEventsPerDayUseCase(event_repo).execute(OWNER, 2, 2024)).events_per_day
        assert counts[14] == 1
        assert counts[13] == 0

    @pytest.mark.asyncio
    async def test_missing_or_non_numeric_scope_raises(self, event_repo, mock_settings):
        use_case = CountEventsPerDayUseCase(event_repo)
        with pytest.raises(BadScopeError):
            await use_case.execute(OWNER, month=None, year="2024")
        with pytest.raises(BadScopeError):
            await use_case.execute(OWNER, month="x", year="2024")


class TestCreateEventUseCase:
    """Tests for CreateEventUseCase"""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_owner(self, event_repo):
        result = await CreateEventUseCase(event_repo).execute(OWNER, _create_request())
        assert result.id == 1
        assert result.title == "Dentist"
        assert result.importance == 2
        assert result.date_time == datetime(2024, 3, 15, 9, 0, tzinfo=UTC)
        assert event_repo.events[1].owner_user_id == OWNER

    @pytest.mark.asyncio
    async def test_created_event_is_listed(self, event_repo):
        await CreateEventUseCase(event_repo).execute(OWNER, _create_request())
        listed = await ListEventsUseCase(event_repo).execute(OWNER)
        assert [e.title for e in listed.events] == ["Dentist"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": ""},
            {"importance": "x"},
            {"dateTime": "not-a-date"},
        ],
    )
    async def test_invalid_payload_writes_nothing(self, event_repo, overrides):
        with pytest.raises(ValidationFailedError):
            await CreateEventUseCase(event_repo).execute(OWNER, _create_request(**overrides))
        assert event_repo.events == {}

    @pytest.mark.asyncio
    async def test_unknown_importance_level_fails_validation(self, event_repo):
        with pytest.raises(ValidationFailedError) as exc_info:
            await CreateEventUseCase(event_repo).execute(OWNER, _create_request(importance=7))
        assert exc_info.value.fields == ["importance"]
        assert event_repo.events == {}


class TestUpdateEventUseCase:
    """Tests for UpdateEventUseCase"""

    @pytest.mark.asyncio
    async def test_owner_can_update(self, event_repo):
        event = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC))

        result = await UpdateEventUseCase(event_repo).execute(OWNER, _update_request(event.id))
        assert result.id == event.id
        assert result.title == "Moved"
        assert result.importance == 3
        stored = event_repo.events[event.id]
        assert stored.date_time == datetime(2024, 3, 20, 14, 0, tzinfo=UTC)
        assert stored.owner_user_id == OWNER

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_event_unchanged(self, event_repo):
        event = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC), title="Original")

        with pytest.raises(ForbiddenError):
            await UpdateEventUseCase(event_repo).execute(OTHER, _update_request(event.id))
        assert event_repo.events[event.id].title == "Original"

    @pytest.mark.asyncio
    async def test_missing_event_raises_not_found(self, event_repo):
        with pytest.raises(EventNotFoundError):
            await UpdateEventUseCase(event_repo).execute(OWNER, _update_request(99))

    @pytest.mark.asyncio
    async def test_validation_runs_before_store_access(self):
        repo = AsyncMock()
        with pytest.raises(ValidationFailedError):
            await UpdateEventUseCase(repo).execute(OWNER, _update_request(1, title=" "))
        repo.find_by_id.assert_not_called()
        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_event_deleted_between_check_and_write(self, event_repo):
        event = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC))
        repo = AsyncMock()
        repo.find_by_id.return_value = event
        repo.update.return_value = False

        with pytest.raises(EventNotFoundError):
            await UpdateEventUseCase(repo).execute(OWNER, _update_request(event.id))

    @pytest.mark.asyncio
    async def test_id_beyond_64_bits_fails_validation_without_store_access(self):
        repo = AsyncMock()
        with pytest.raises(ValidationFailedError) as exc_info:
            await UpdateEventUseCase(repo).execute(OWNER, _update_request(99999999999999999999))
        assert exc_info.value.fields == ["id"]
        repo.find_by_id.assert_not_called()
        repo.update.assert_not_called()


class TestDeleteEventUseCase:
    """Tests for DeleteEventUseCase"""

    @pytest.mark.asyncio
    async def test_owner_can_delete(self, event_repo):
        event = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC))
        await DeleteEventUseCase(event_repo).execute(OWNER, str(event.id))
        assert event.id not in event_repo.events

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_event_kept(self, event_repo):
        event = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC))
        with pytest.raises(ForbiddenError):
            await DeleteEventUseCase(event_repo).execute(OTHER, event.id)
        assert event.id in event_repo.events

    @pytest.mark.asyncio
    async def test_deleting_missing_id_twice_is_not_found_both_times(self, event_repo):
        use_case = DeleteEventUseCase(event_repo)
        with pytest.raises(EventNotFoundError):
            await use_case.execute(OWNER, 404)
        with pytest.raises(EventNotFoundError):
            await use_case.execute(OWNER, 404)

    @pytest.mark.asyncio
    async def test_second_delete_of_same_event_is_not_found(self, event_repo):
        event = await _seed(event_repo, OWNER, datetime(2024, 3, 15, 9, 0, tzinfo=UTC))
        use_case = DeleteEventUseCase(event_repo)
        await use_case.execute(OWNER, event.id)
        with pytest.raises(EventNotFoundError):
            await use_case.execute(OWNER, event.id)

    @pytest.mark.asyncio
    async def test_non_numeric_id_fails_validation(self, event_repo):
        with pytest.raises(ValidationFailedError):
            await DeleteEventUseCase(event_repo).execute(OWNER, "abc")

    @pytest.mark.asyncio
    async def test_id_beyond_64_bits_fails_validation_without_store_access(self):
        repo = AsyncMock()
        with pytest.raises(ValidationFailedError) as exc_info:
            await DeleteEventUseCase(repo).execute(OWNER, "99999999999999999999")
        assert exc_info.value.fields == ["id"]
        repo.find_by_id.assert_not_called()
        repo.delete.assert_not_called()
