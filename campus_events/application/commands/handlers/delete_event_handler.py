"""Delete event handler.

An event can be deleted only while it has no active (confirmed or attended)
registrations. Its cancelled registrations are removed with it.
"""

from uuid import UUID

from campus_events.application.commands.event_commands import DeleteEvent
from campus_events.application.services.access_policy import require_admin
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import ConflictError, DomainError, NotFoundError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.errors import EventError
from campus_events.domain.protocols import (
    AdmissionLockProtocol,
    EventRepository,
    LoggerProtocol,
    RegistrationRepository,
)


class DeleteEventHandler:
    """Handler for the DeleteEvent command (administrators only)."""

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        admission_locks: AdmissionLockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._locks = admission_locks
        self._logger = logger

    async def handle(self, cmd: DeleteEvent) -> Result[UUID, DomainError]:
        """Delete an event.

        Returns:
            Success(event_id): Event deleted.
            Failure(AuthorizationError): Actor is not an administrator.
            Failure(NotFoundError): Event does not exist.
            Failure(ConflictError): Event still has active registrations.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        allowed = require_admin(cmd.actor, "delete events")
        if isinstance(allowed, Failure):
            return allowed

        async with self._locks.hold(cmd.event_id):
            active = await self._registration_repo.count_active(cmd.event_id)
            if isinstance(active, Failure):
                return active
            if active.value > 0:
                self._logger.info(
                    "event_delete_rejected",
                    event_id=str(cmd.event_id),
                    active_registrations=active.value,
                )
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.EVENT_HAS_ACTIVE_REGISTRATIONS,
                        message=EventError.HAS_ACTIVE_REGISTRATIONS,
                        resource_type="Event",
                        details={"active_registrations": str(active.value)},
                    )
                )

            deleted = await self._event_repo.delete(cmd.event_id)

        match deleted:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=False):
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.EVENT_NOT_FOUND,
                        message=EventError.NOT_FOUND,
                        resource_type="Event",
                        resource_id=str(cmd.event_id),
                    )
                )

        self._logger.info(
            "event_deleted", event_id=str(cmd.event_id), actor_email=cmd.actor.email
        )
        return Success(value=cmd.event_id)
