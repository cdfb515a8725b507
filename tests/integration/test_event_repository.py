"""Integration tests for EventRepository against SQLite.

Tests cover:
- Save (insert and update) and find_by_id
- Listing: search, category/status filters, ordering, limits
- Delete (with cancelled registration history)
- Per-status counts
"""

from datetime import UTC, date, datetime, timedelta

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from campus_events.core.result import Success
from campus_events.domain.entities import Registration
from campus_events.domain.enums import (
    EventCategory,
    EventSort,
    EventStatus,
    RegistrationStatus,
)
from campus_events.domain.value_objects import EventFilter
from campus_events.infrastructure.persistence.repositories import (
    EventRepository,
    RegistrationRepository,
)


async def _save(database, *events):
    async with database.get_session() as session:
        repo = EventRepository(session)
        for event in events:
            assert await repo.save(event) == Success(value=True)


async def _list(database, **params):
    async with database.get_session() as session:
        result = await EventRepository(session).find_all(
            EventFilter.from_params(**params), 100
        )
    assert isinstance(result, Success)
    return [event.title for event in result.value]


@pytest.mark.integration
class TestEventPersistence:
    @pytest.mark.asyncio
    async def test_save_and_find(self, database, make_event):
        """All catalog fields survive a round trip."""
        # Arrange
        event = make_event(
            description="Build a line follower",
            max_capacity=25,
            registration_deadline=date.today() + timedelta(days=10),
            organizer="Robotics Club",
        )

        # Act
        await _save(database, event)
        async with database.get_session() as session:
            result = await EventRepository(session).find_by_id(event.id)

        # Assert
        assert isinstance(result, Success)
        found = result.value
        assert found.id == event.id
        assert found.title == "Robotics Workshop"
        assert found.category is EventCategory.WORKSHOP
        assert found.status is EventStatus.UPCOMING
        assert found.max_capacity == 25
        assert found.registration_deadline == event.registration_deadline
        assert found.organizer == "Robotics Club"

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, database):
        async with database.get_session() as session:
            result = await EventRepository(session).find_by_id(uuid7())

        assert result == Success(value=None)

    @pytest.mark.asyncio
    async def test_save_existing_updates(self, database, make_event):
        event = make_event(venue="Hall A")
        await _save(database, event)

        event.apply_changes({"venue": "Hall B", "max_capacity": 12})
        await _save(database, event)

        async with database.get_session() as session:
            result = await EventRepository(session).find_by_id(event.id)
        assert result.value.venue == "Hall B"
        assert result.value.max_capacity == 12

    @pytest.mark.asyncio
    async def test_capacity_update_refused_below_confirmed(self, database, make_event):
        """The write itself re-checks the confirmed count against the new capacity."""
        # Arrange
        event = make_event(max_capacity=5)
        await _save(database, event)
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            for email in ("a@campus.edu", "b@campus.edu"):
                registration = Registration(
                    id=uuid7(),
                    event_id=event.id,
                    event_title=event.title,
                    user_email=email,
                    user_name=email,
                )
                assert isinstance(await repo.admit(registration), Success)

        # Act
        event.max_capacity = 1
        async with database.get_session() as session:
            refused = await EventRepository(session).save(event)
        event.max_capacity = 2
        async with database.get_session() as session:
            accepted = await EventRepository(session).save(event)

        # Assert
        assert refused == Success(value=False)
        assert accepted == Success(value=True)
        async with database.get_session() as session:
            stored = await EventRepository(session).find_by_id(event.id)
        assert stored.value.max_capacity == 2


@pytest.mark.integration
class TestEventListing:
    @pytest_asyncio.fixture
    async def catalog(self, database, make_event):
        today = date.today()
        base = datetime(2026, 1, 1, tzinfo=UTC)
        events = [
            make_event(
                title="Robotics Workshop",
                date=today + timedelta(days=5),
                category=EventCategory.WORKSHOP,
                created_at=base,
            ),
            make_event(
                title="Poetry Night",
                description="Open mic with ROBOT themed poems",
                date=today + timedelta(days=9),
                category=EventCategory.CULTURAL,
                created_at=base + timedelta(hours=1),
            ),
            make_event(
                title="Spring Fest",
                date=today - timedelta(days=20),
                category=EventCategory.FEST,
                status=EventStatus.COMPLETED,
                created_at=base + timedelta(hours=2),
            ),
            make_event(
                title="100% Attendance Seminar",
                date=today + timedelta(days=1),
                category=EventCategory.SEMINAR,
                created_at=base + timedelta(hours=3),
            ),
        ]
        await _save(database, *events)
        return events

    @pytest.mark.asyncio
    async def test_default_order_is_most_recent_date_first(self, database, catalog):
        assert await _list(database) == [
            "Poetry Night",
            "Robotics Workshop",
            "100% Attendance Seminar",
            "Spring Fest",
        ]

    @pytest.mark.asyncio
    async def test_sort_by_date_ascending(self, database, catalog):
        titles = await _list(database, sort=EventSort.DATE_ASC)

        assert titles[0] == "Spring Fest"
        assert titles[-1] == "Poetry Night"

    @pytest.mark.asyncio
    async def test_sort_by_creation(self, database, catalog):
        newest_first = await _list(database, sort=EventSort.CREATED_DESC)
        oldest_first = await _list(database, sort=EventSort.CREATED_ASC)

        assert newest_first == list(reversed(oldest_first))
        assert oldest_first[0] == "Robotics Workshop"

    @pytest.mark.asyncio
    async def test_search_matches_title_or_description_case_insensitively(
        self, database, catalog
    ):
        titles = await _list(database, search="robot")

        assert sorted(titles) == ["Poetry Night", "Robotics Workshop"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, database, catalog):
        assert await _list(database, search="100%") == ["100% Attendance Seminar"]
        assert await _list(database, search="%") == ["100% Attendance Seminar"]

    @pytest.mark.asyncio
    async def test_category_and_status_filters_combine(self, database, catalog):
        assert await _list(database, category="fest", status="completed") == ["Spring Fest"]
        assert await _list(database, category="fest", status="upcoming") == []

    @pytest.mark.asyncio
    async def test_all_disables_filters(self, database, catalog):
        assert len(await _list(database, category="all", status="all")) == 4

    @pytest.mark.asyncio
    async def test_limit(self, database, catalog):
        assert await _list(database, limit=2) == ["Poetry Night", "Robotics Workshop"]

    @pytest.mark.asyncio
    async def test_count_by_status(self, database, catalog):
        async with database.get_session() as session:
            result = await EventRepository(session).count_by_status()

        assert result == Success(
            value={EventStatus.UPCOMING: 3, EventStatus.COMPLETED: 1}
        )


@pytest.mark.integration
class TestEventDelete:
    @pytest.mark.asyncio
    async def test_delete_removes_event_and_cancelled_history(self, database, make_event):
        # Arrange
        event = make_event()
        await _save(database, event)
        registration = Registration(
            id=uuid7(),
            event_id=event.id,
            event_title=event.title,
            user_email="alice@campus.edu",
            user_name="Alice Student",
        )
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            await repo.admit(registration)
            registration.status = RegistrationStatus.CANCELLED
            await repo.update_status(registration, from_status=RegistrationStatus.CONFIRMED)

        # Act
        async with database.get_session() as session:
            deleted = await EventRepository(session).delete(event.id)

        # Assert
        assert deleted == Success(value=True)
        async with database.get_session() as session:
            assert await EventRepository(session).find_by_id(event.id) == Success(value=None)
            assert await RegistrationRepository(session).find_by_id(
                registration.id
            ) == Success(value=None)

    @pytest.mark.asyncio
    async def test_delete_missing_event(self, database):
        async with database.get_session() as session:
            result = await EventRepository(session).delete(uuid7())

        assert result == Success(value=False)
