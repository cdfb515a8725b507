"""Integration tests for concurrent admission through RegisterForEventHandler.

Every attempt runs on its own session against one SQLite file. A ``Campus``
holds one lock registry and aggregate cache, the way concurrent requests share
them in one application process; two ``Campus`` objects over the same file
stand in for two service instances, where only the store guards admission.

Tests cover:
- Capacity is never exceeded under simultaneous attempts
- One user racing themselves ends with exactly one registration
- Cancelling frees the seat; re-registering succeeds with a new record
- Aggregates reflect each write immediately
- Across instances: capacity holds without a shared lock, including when
  capacity is lowered concurrently or after an instance read the event
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

import pytest
import pytest_asyncio

from campus_events.application.commands import (
    ChangeRegistrationStatus,
    RegisterForEvent,
    UpdateEvent,
)
from campus_events.application.commands.handlers import (
    ChangeRegistrationStatusHandler,
    RegisterForEventHandler,
    UpdateEventHandler,
)
from campus_events.application.services import AggregateView
from campus_events.core.result import Failure, Success
from campus_events.domain.enums import RegistrationStatus, UserRole
from campus_events.domain.errors import AlreadyRegisteredError, EventFullError
from campus_events.domain.value_objects import UserIdentity
from campus_events.infrastructure.cache import CacheKeys, InMemoryCacheAdapter
from campus_events.infrastructure.concurrency import InProcessAdmissionLocks
from campus_events.infrastructure.persistence.repositories import (
    EventRepository,
    RegistrationRepository,
)


class Campus:
    """Process-wide collaborators plus per-call sessions."""

    def __init__(self, database):
        self.database = database
        self.locks = InProcessAdmissionLocks()
        self.cache = InMemoryCacheAdapter()
        self.keys = CacheKeys(prefix="test")

    def _view(self, session):
        return AggregateView(
            registration_repo=RegistrationRepository(session),
            cache=self.cache,
            cache_keys=self.keys,
            logger=MagicMock(),
            ttl_seconds=60,
        )

    async def register(self, event_id, actor, *, event_repo=None):
        async with self.database.get_session() as session:
            handler = RegisterForEventHandler(
                event_repo=event_repo or EventRepository(session),
                registration_repo=RegistrationRepository(session),
                admission_locks=self.locks,
                aggregate_view=self._view(session),
                logger=MagicMock(),
                timezone=ZoneInfo("UTC"),
            )
            return await handler.handle(RegisterForEvent(event_id=event_id, actor=actor))

    async def update_event(self, event_id, changes, actor):
        async with self.database.get_session() as session:
            handler = UpdateEventHandler(
                event_repo=EventRepository(session),
                registration_repo=RegistrationRepository(session),
                admission_locks=self.locks,
                logger=MagicMock(),
            )
            return await handler.handle(
                UpdateEvent(actor=actor, event_id=event_id, changes=changes)
            )

    async def change_status(self, registration_id, status, actor):
        async with self.database.get_session() as session:
            handler = ChangeRegistrationStatusHandler(
                registration_repo=RegistrationRepository(session),
                aggregate_view=self._view(session),
                logger=MagicMock(),
            )
            return await handler.handle(
                ChangeRegistrationStatus(
                    registration_id=registration_id, status=status, actor=actor
                )
            )

    async def count(self, event_id):
        async with self.database.get_session() as session:
            return await self._view(session).registration_count(event_id)

    async def is_registered(self, event_id, email):
        async with self.database.get_session() as session:
            return await self._view(session).is_registered(event_id, email)


def _student(n):
    return UserIdentity(email=f"student{n}@campus.edu", full_name=f"Student {n}", role=UserRole.USER)


@pytest_asyncio.fixture
async def campus(database):
    return Campus(database)


async def _seed(database, event):
    async with database.get_session() as session:
        await EventRepository(session).save(event)
    return event


@pytest.mark.integration
class TestConcurrentAdmission:
    @pytest.mark.asyncio
    async def test_capacity_never_exceeded(self, campus, database, make_event):
        """Ten simultaneous attempts for three seats: three in, seven full."""
        # Arrange
        event = await _seed(database, make_event(max_capacity=3))

        # Act
        results = await asyncio.gather(
            *(campus.register(event.id, _student(n)) for n in range(10))
        )

        # Assert
        admitted = [r for r in results if isinstance(r, Success)]
        rejected = [r for r in results if isinstance(r, Failure)]
        assert len(admitted) == 3
        assert len(rejected) == 7
        assert all(isinstance(r.error, EventFullError) for r in rejected)
        assert await campus.count(event.id) == Success(value=3)

    @pytest.mark.asyncio
    async def test_same_user_racing_gets_one_registration(self, campus, database, make_event):
        """Five simultaneous attempts by one user: one in, four already registered."""
        event = await _seed(database, make_event(max_capacity=10))
        alice = _student(1)

        results = await asyncio.gather(*(campus.register(event.id, alice) for _ in range(5)))

        admitted = [r.value for r in results if isinstance(r, Success)]
        rejected = [r.error for r in results if isinstance(r, Failure)]
        assert len(admitted) == 1
        assert len(rejected) == 4
        assert all(isinstance(e, AlreadyRegisteredError) for e in rejected)
        assert {e.registration_id for e in rejected} == {str(admitted[0].id)}
        assert await campus.count(event.id) == Success(value=1)

    @pytest.mark.asyncio
    async def test_unbounded_event_admits_everyone(self, campus, database, make_event):
        event = await _seed(database, make_event(max_capacity=None))

        results = await asyncio.gather(
            *(campus.register(event.id, _student(n)) for n in range(8))
        )

        assert all(isinstance(r, Success) for r in results)
        assert await campus.count(event.id) == Success(value=8)


@pytest.mark.integration
class TestCancellationFreesSeat:
    @pytest.mark.asyncio
    async def test_cancel_then_reregister(self, campus, database, make_event):
        """Count drops on cancel, membership clears, and a new record is created."""
        # Arrange
        event = await _seed(database, make_event(max_capacity=1))
        alice = _student(1)
        first = await campus.register(event.id, alice)
        assert isinstance(first, Success)
        assert await campus.count(event.id) == Success(value=1)
        assert await campus.is_registered(event.id, alice.email) == Success(value=True)

        # Act
        cancelled = await campus.change_status(
            first.value.id, RegistrationStatus.CANCELLED, alice
        )

        # Assert
        assert isinstance(cancelled, Success)
        assert await campus.count(event.id) == Success(value=0)
        assert await campus.is_registered(event.id, alice.email) == Success(value=False)

        again = await campus.register(event.id, alice)
        assert isinstance(again, Success)
        assert again.value.id != first.value.id
        assert await campus.count(event.id) == Success(value=1)

    @pytest.mark.asyncio
    async def test_freed_seat_goes_to_someone_else(self, campus, database, make_event):
        event = await _seed(database, make_event(max_capacity=1))
        alice, bob = _student(1), _student(2)
        held = await campus.register(event.id, alice)

        blocked = await campus.register(event.id, bob)
        await campus.change_status(held.value.id, RegistrationStatus.CANCELLED, alice)
        admitted = await campus.register(event.id, bob)

        assert isinstance(blocked, Failure)
        assert isinstance(blocked.error, EventFullError)
        assert isinstance(admitted, Success)

    @pytest.mark.asyncio
    async def test_attended_keeps_user_registered(self, campus, database, make_event, admin):
        """Attendance releases the seat count but still blocks re-registration."""
        event = await _seed(database, make_event(max_capacity=5))
        alice = _student(1)
        held = await campus.register(event.id, alice)

        await campus.change_status(held.value.id, RegistrationStatus.ATTENDED, admin)
        again = await campus.register(event.id, alice)

        assert await campus.count(event.id) == Success(value=0)
        assert await campus.is_registered(event.id, alice.email) == Success(value=True)
        assert isinstance(again, Failure)
        assert isinstance(again.error, AlreadyRegisteredError)


async def _stored_capacity_and_confirmed(database, event_id):
    async with database.get_session() as session:
        event = await EventRepository(session).find_by_id(event_id)
        confirmed = await RegistrationRepository(session).count_confirmed(event_id)
    return event.value.max_capacity, confirmed.value


@pytest.mark.integration
class TestAcrossInstances:
    @pytest.mark.asyncio
    async def test_separate_lock_registries_never_exceed_capacity(self, database, make_event):
        """Two instances, no shared lock: the conditional insert alone holds capacity."""
        # Arrange
        east, west = Campus(database), Campus(database)
        event = await _seed(database, make_event(max_capacity=3))

        # Act
        results = await asyncio.gather(
            *(
                (east if n % 2 else west).register(event.id, _student(n))
                for n in range(10)
            )
        )

        # Assert
        admitted = [r for r in results if isinstance(r, Success)]
        rejected = [r for r in results if isinstance(r, Failure)]
        assert len(admitted) == 3
        assert len(rejected) == 7
        assert all(isinstance(r.error, EventFullError) for r in rejected)
        assert await _stored_capacity_and_confirmed(database, event.id) == (3, 3)

    @pytest.mark.asyncio
    async def test_lowered_capacity_binds_instance_with_stale_read(
        self, database, make_event, admin
    ):
        """An instance that read capacity 10 is still held to the stored capacity 1."""
        # Arrange
        east, west = Campus(database), Campus(database)
        event = await _seed(database, make_event(max_capacity=10))
        assert isinstance(await east.register(event.id, _student(1)), Success)
        lowered = await west.update_event(event.id, {"max_capacity": 1}, admin)
        assert isinstance(lowered, Success)
        stale_read = AsyncMock()
        stale_read.find_by_id.return_value = Success(value=event)

        # Act
        result = await east.register(event.id, _student(2), event_repo=stale_read)

        # Assert
        assert event.max_capacity == 10
        assert isinstance(result, Failure)
        assert isinstance(result.error, EventFullError)
        assert result.error.max_capacity == 1
        assert await _stored_capacity_and_confirmed(database, event.id) == (1, 1)

    @pytest.mark.asyncio
    async def test_capacity_edit_racing_admissions(self, database, make_event, admin):
        """Whichever side wins, confirmed never exceeds the stored capacity."""
        # Arrange
        east, west = Campus(database), Campus(database)
        event = await _seed(database, make_event(max_capacity=10))

        # Act
        outcomes = await asyncio.gather(
            west.update_event(event.id, {"max_capacity": 3}, admin),
            *(east.register(event.id, _student(n)) for n in range(6)),
        )

        # Assert
        edit, registrations = outcomes[0], outcomes[1:]
        capacity, confirmed = await _stored_capacity_and_confirmed(database, event.id)
        assert confirmed <= capacity
        assert confirmed == sum(isinstance(r, Success) for r in registrations)
        if isinstance(edit, Success):
            assert capacity == 3
        else:
            assert capacity == 10
