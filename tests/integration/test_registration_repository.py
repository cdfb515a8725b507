"""Integration tests for RegistrationRepository against SQLite.

Tests cover:
- Conditional admit (write-time duplicate and capacity guard)
- Guard reads status and capacity from the stored event, not the caller
- Re-registration after cancellation
- Conditional status update
- Aggregate queries and listings
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from campus_events.core.enums import ErrorCode
from campus_events.core.errors import ConflictError, ValidationError
from campus_events.core.result import Failure, Success
from campus_events.domain.entities import Registration
from campus_events.domain.enums import EventStatus, RegistrationStatus
from campus_events.domain.errors import (
    AlreadyRegisteredError,
    EventFullError,
    EventNotOpenError,
)
from campus_events.infrastructure.persistence.models import RegistrationModel
from campus_events.infrastructure.persistence.repositories import (
    EventRepository,
    RegistrationRepository,
)


def _registration(event, email, **overrides):
    fields = {
        "id": uuid7(),
        "event_id": event.id,
        "event_title": event.title,
        "user_email": email,
        "user_name": email.split("@")[0].title(),
    }
    fields.update(overrides)
    return Registration(**fields)


async def _seed_event(database, event):
    async with database.get_session() as session:
        await EventRepository(session).save(event)
    return event


async def _admit(database, registration):
    async with database.get_session() as session:
        return await RegistrationRepository(session).admit(registration)


async def _cancel(database, registration):
    registration.status = RegistrationStatus.CANCELLED
    async with database.get_session() as session:
        return await RegistrationRepository(session).update_status(
            registration, from_status=RegistrationStatus.CONFIRMED
        )


# =============================================================================
# Admit
# =============================================================================


@pytest.mark.integration
class TestAdmit:
    @pytest.mark.asyncio
    async def test_admit_persists_confirmed_registration(self, database, make_event):
        event = await _seed_event(database, make_event(max_capacity=2))
        registration = _registration(event, "alice@campus.edu")

        result = await _admit(database, registration)

        assert result == Success(value=registration)
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            found = await repo.find_active(event.id, "alice@campus.edu")
            count = await repo.count_confirmed(event.id)
        assert found.value.id == registration.id
        assert found.value.status == RegistrationStatus.CONFIRMED
        assert found.value.event_title == event.title
        assert count == Success(value=1)

    @pytest.mark.asyncio
    async def test_guard_refuses_duplicate(self, database, make_event):
        """Write-time duplicate check reports the existing registration."""
        # Arrange
        event = await _seed_event(database, make_event())
        first = _registration(event, "alice@campus.edu")
        await _admit(database, first)

        # Act
        result = await _admit(database, _registration(event, "alice@campus.edu"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AlreadyRegisteredError)
        assert result.error.registration_id == str(first.id)

    @pytest.mark.asyncio
    async def test_guard_refuses_when_full(self, database, make_event):
        event = await _seed_event(database, make_event(max_capacity=2))
        for email in ("a@campus.edu", "b@campus.edu"):
            assert isinstance(await _admit(database, _registration(event, email)), Success)

        result = await _admit(database, _registration(event, "c@campus.edu"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, EventFullError)
        assert result.error.max_capacity == 2
        assert result.error.confirmed_count == 2
        async with database.get_session() as session:
            assert await RegistrationRepository(session).count_confirmed(event.id) == Success(
                value=2
            )

    @pytest.mark.asyncio
    async def test_attended_does_not_hold_a_seat(self, database, make_event):
        """Capacity counts confirmed registrations only."""
        event = await _seed_event(database, make_event(max_capacity=1))
        attended = _registration(event, "a@campus.edu")
        await _admit(database, attended)
        attended.status = RegistrationStatus.ATTENDED
        async with database.get_session() as session:
            await RegistrationRepository(session).update_status(
                attended, from_status=RegistrationStatus.CONFIRMED
            )

        result = await _admit(database, _registration(event, "b@campus.edu"))

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_missing_event(self, database, make_event):
        phantom = make_event()

        result = await _admit(database, _registration(phantom, "alice@campus.edu"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_guard_uses_stored_capacity(self, database, make_event):
        """Capacity lowered after the caller read the event still binds."""
        # Arrange
        event = await _seed_event(database, make_event(max_capacity=10))
        assert isinstance(await _admit(database, _registration(event, "a@campus.edu")), Success)
        event.max_capacity = 1
        await _seed_event(database, event)

        # Act
        result = await _admit(database, _registration(event, "b@campus.edu"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, EventFullError)
        assert result.error.max_capacity == 1
        assert result.error.confirmed_count == 1
        async with database.get_session() as session:
            assert await RegistrationRepository(session).count_confirmed(event.id) == Success(
                value=1
            )

    @pytest.mark.asyncio
    async def test_guard_rechecks_stored_status(self, database, make_event):
        event = await _seed_event(database, make_event())
        event.status = EventStatus.CANCELLED
        await _seed_event(database, event)

        result = await _admit(database, _registration(event, "alice@campus.edu"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, EventNotOpenError)
        assert result.error.event_status == EventStatus.CANCELLED.value
        async with database.get_session() as session:
            assert await RegistrationRepository(session).count_active(event.id) == Success(
                value=0
            )

    @pytest.mark.asyncio
    async def test_unexplained_refusal_is_conflict_not_full(self, database, make_event):
        """An unbounded event is never reported full; the insert is retried once."""
        # Arrange
        event = await _seed_event(database, make_event(max_capacity=None))
        refused = AsyncMock(return_value=Success(value=False))

        # Act
        with patch.object(RegistrationRepository, "_insert_guarded", refused):
            result = await _admit(database, _registration(event, "alice@campus.edu"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.REGISTRATION_ADMISSION_CONFLICT
        assert refused.await_count == 2

    @pytest.mark.asyncio
    async def test_store_rejects_registration_for_unknown_event(self, database, make_event):
        phantom = make_event()
        registration = _registration(phantom, "alice@campus.edu")

        with pytest.raises(IntegrityError):
            async with database.get_session() as session:
                session.add(
                    RegistrationModel(
                        id=registration.id,
                        event_id=phantom.id,
                        event_title=phantom.title,
                        user_email=registration.user_email,
                        user_name=registration.user_name,
                    )
                )
                await session.flush()

    @pytest.mark.asyncio
    async def test_reregister_after_cancel_creates_new_record(self, database, make_event):
        # Arrange
        event = await _seed_event(database, make_event(max_capacity=1))
        first = _registration(event, "alice@campus.edu")
        await _admit(database, first)
        assert await _cancel(database, first) == Success(value=True)

        # Act
        second = _registration(event, "alice@campus.edu")
        result = await _admit(database, second)

        # Assert
        assert isinstance(result, Success)
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            history = await repo.list_for_user("alice@campus.edu", 10)
            old = await repo.find_by_id(first.id)
        assert {r.id for r in history.value} == {first.id, second.id}
        assert old.value.status == RegistrationStatus.CANCELLED


# =============================================================================
# Status updates
# =============================================================================


@pytest.mark.integration
class TestUpdateStatus:
    @pytest.mark.asyncio
    async def test_stale_from_status_writes_nothing(self, database, make_event):
        """Second writer that read CONFIRMED loses once the row moved on."""
        event = await _seed_event(database, make_event())
        registration = _registration(event, "alice@campus.edu")
        await _admit(database, registration)

        assert await _cancel(database, registration) == Success(value=True)

        registration.status = RegistrationStatus.ATTENDED
        async with database.get_session() as session:
            result = await RegistrationRepository(session).update_status(
                registration, from_status=RegistrationStatus.CONFIRMED
            )
            stored = await RegistrationRepository(session).find_by_id(registration.id)

        assert result == Success(value=False)
        assert stored.value.status == RegistrationStatus.CANCELLED


# =============================================================================
# Aggregates and listings
# =============================================================================


@pytest.mark.integration
class TestAggregates:
    @pytest.mark.asyncio
    async def test_counts_and_membership(self, database, make_event):
        # Arrange
        busy = await _seed_event(database, make_event(title="Busy"))
        quiet = await _seed_event(database, make_event(title="Quiet"))
        alice = _registration(busy, "alice@campus.edu")
        bob = _registration(busy, "bob@campus.edu")
        for registration in (alice, bob):
            await _admit(database, registration)
        await _cancel(database, bob)

        # Act
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            counts = await repo.count_confirmed_many([busy.id, quiet.id])
            alice_events = await repo.active_event_ids("alice@campus.edu", [busy.id, quiet.id])
            bob_events = await repo.active_event_ids("bob@campus.edu", [busy.id, quiet.id])
            active = await repo.count_active(busy.id)
            mine = await repo.count_active_for_user("alice@campus.edu")
            summary = await repo.summary()

        # Assert
        assert counts == Success(value={busy.id: 1, quiet.id: 0})
        assert alice_events == Success(value={busy.id})
        assert bob_events == Success(value=set())
        assert active == Success(value=1)
        assert mine == Success(value=1)
        assert summary == Success(value=(1, 2))

    @pytest.mark.asyncio
    async def test_empty_inputs(self, database):
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            assert await repo.count_confirmed_many([]) == Success(value={})
            assert await repo.active_event_ids("alice@campus.edu", []) == Success(value=set())
            assert await repo.summary() == Success(value=(0, 0))

    @pytest.mark.asyncio
    async def test_listings_most_recent_first(self, database, make_event):
        # Arrange
        event = await _seed_event(database, make_event())
        other = await _seed_event(database, make_event(title="Other"))
        start = datetime(2026, 10, 1, 9, 0, tzinfo=UTC)
        older = _registration(event, "alice@campus.edu", registration_date=start)
        newer = _registration(
            event, "bob@campus.edu", registration_date=start + timedelta(hours=1)
        )
        elsewhere = _registration(
            other, "alice@campus.edu", registration_date=start + timedelta(hours=2)
        )
        for registration in (older, newer, elsewhere):
            await _admit(database, registration)

        # Act
        async with database.get_session() as session:
            repo = RegistrationRepository(session)
            for_event = await repo.list_for_event(event.id, 10)
            for_alice = await repo.list_for_user("alice@campus.edu", 10)
            everything = await repo.list_all(10)
            limited = await repo.list_all(2)

        # Assert
        assert [r.id for r in for_event.value] == [newer.id, older.id]
        assert [r.id for r in for_alice.value] == [elsewhere.id, older.id]
        assert [r.id for r in everything.value] == [elsewhere.id, newer.id, older.id]
        assert [r.id for r in limited.value] == [elsewhere.id, newer.id]
