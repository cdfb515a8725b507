"""Unit tests for ChangeRegistrationStatusHandler.

Tests cover:
- Owner cancels, administrator marks attended
- Role checks come before transition legality
- Terminal states reject every change
- Conditional write losing to a concurrent change
- Missing registration, store failures
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from campus_events.application.commands import ChangeRegistrationStatus
from campus_events.application.commands.handlers.change_registration_status_handler import (
    ChangeRegistrationStatusHandler,
)
from campus_events.application.services.aggregate_view import AggregateView
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import AuthorizationError, NotFoundError, StoreUnavailableError
from campus_events.core.result import Failure, Success
from campus_events.domain.entities import Registration
from campus_events.domain.enums import RegistrationStatus
from campus_events.domain.errors import IllegalTransitionError


def _registration(status=RegistrationStatus.CONFIRMED):
    return Registration(
        id=uuid7(),
        event_id=uuid7(),
        event_title="Robotics Workshop",
        user_email="alice@campus.edu",
        user_name="Alice Student",
        status=status,
    )


def _handler(registration):
    repo = AsyncMock()
    repo.find_by_id.return_value = Success(value=registration)
    repo.update_status.return_value = Success(value=True)
    handler = ChangeRegistrationStatusHandler(
        registration_repo=repo,
        aggregate_view=AsyncMock(spec=AggregateView),
        logger=MagicMock(),
    )
    return handler, repo


@pytest.mark.unit
class TestChangeRegistrationStatusSuccess:
    @pytest.mark.asyncio
    async def test_owner_cancels(self, alice):
        """Cancel writes conditionally on the previous status."""
        # Arrange
        registration = _registration()
        handler, repo = _handler(registration)

        # Act
        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.CANCELLED,
                actor=alice,
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.status == RegistrationStatus.CANCELLED
        repo.update_status.assert_awaited_once_with(
            registration, from_status=RegistrationStatus.CONFIRMED
        )
        handler._aggregate_view.invalidate.assert_awaited_once_with(
            registration.event_id, "alice@campus.edu"
        )

    @pytest.mark.asyncio
    async def test_admin_marks_attended(self, admin):
        registration = _registration()
        handler, _ = _handler(registration)

        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.ATTENDED,
                actor=admin,
            )
        )

        assert isinstance(result, Success)
        assert result.value.status == RegistrationStatus.ATTENDED


@pytest.mark.unit
class TestChangeRegistrationStatusRejections:
    @pytest.mark.asyncio
    async def test_registration_not_found(self, alice):
        handler, repo = _handler(None)

        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=uuid7(), status=RegistrationStatus.CANCELLED, actor=alice
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.REGISTRATION_NOT_FOUND
        repo.update_status.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_owner_cancel_denied(self, bob):
        registration = _registration()
        handler, repo = _handler(registration)

        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.CANCELLED,
                actor=bob,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        repo.update_status.assert_not_awaited()
        handler._aggregate_view.invalidate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_cannot_mark_attended(self, alice):
        registration = _registration()
        handler, _ = _handler(registration)

        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.ATTENDED,
                actor=alice,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED

    @pytest.mark.asyncio
    async def test_owner_cannot_cancel_attended_registration(self, alice):
        """Attendance is terminal."""
        registration = _registration(status=RegistrationStatus.ATTENDED)
        handler, repo = _handler(registration)

        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.CANCELLED,
                actor=alice,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, IllegalTransitionError)
        assert result.error.from_status == "attended"
        repo.update_status.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_change_wins(self, admin):
        """Stored status moved on between the read and the conditional write."""
        # Arrange
        registration = _registration()
        handler, repo = _handler(registration)
        repo.update_status.return_value = Success(value=False)

        # Act
        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.ATTENDED,
                actor=admin,
            )
        )

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, IllegalTransitionError)
        assert result.error.from_status == "confirmed"
        assert result.error.to_status == "attended"
        handler._aggregate_view.invalidate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_unavailable_on_write(self, alice):
        registration = _registration()
        handler, repo = _handler(registration)
        repo.update_status.return_value = Failure(
            error=StoreUnavailableError(operation="registration_update_status")
        )

        result = await handler.handle(
            ChangeRegistrationStatus(
                registration_id=registration.id,
                status=RegistrationStatus.CANCELLED,
                actor=alice,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
        handler._logger.bind.return_value.error.assert_called_once()
