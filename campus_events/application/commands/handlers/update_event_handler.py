"""Update event handler.

Capacity edits run in the same per-event exclusive section as admissions and
hold the stored event row lock from the read through the save. The save is
itself conditional on the confirmed count fitting under the new capacity, so
``max_capacity`` never drops below the confirmed count that admissions on any
instance are building up.
"""

from typing import Any
from uuid import UUID

from campus_events.application.commands.event_commands import UpdateEvent
from campus_events.application.services.access_policy import require_admin
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import ConflictError, DomainError, NotFoundError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Event
from campus_events.domain.errors import EventError
from campus_events.domain.protocols import (
    AdmissionLockProtocol,
    EventRepository,
    LoggerProtocol,
    RegistrationRepository,
)


class UpdateEventHandler:
    """Handler for the UpdateEvent command (administrators only)."""

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

    async def handle(self, cmd: UpdateEvent) -> Result[Event, DomainError]:
        """Apply a partial edit.

        Registrations keep the event title they were created with.

        Returns:
            Success(Event): Updated event.
            Failure(AuthorizationError): Actor is not an administrator.
            Failure(NotFoundError): Event does not exist.
            Failure(ValidationError): Unknown field or invariant violated.
            Failure(ConflictError): New capacity is below the confirmed count.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        allowed = require_admin(cmd.actor, "edit events")
        if isinstance(allowed, Failure):
            return allowed

        async with self._locks.hold(cmd.event_id):
            result = await self._update(cmd)

        match result:
            case Success(value=event):
                self._logger.info(
                    "event_updated",
                    event_id=str(event.id),
                    actor_email=cmd.actor.email,
                    fields=sorted(cmd.changes),
                )
            case Failure(error=error):
                self._logger.info(
                    "event_update_rejected",
                    event_id=str(cmd.event_id),
                    error_code=error.code.value,
                )
        return result

    async def _update(self, cmd: UpdateEvent) -> Result[Event, DomainError]:
        # Repositories share the request session: the lock, the count and the
        # save run in one transaction.
        found = await self._event_repo.find_by_id(cmd.event_id, for_update=True)
        if isinstance(found, Failure):
            return found
        event = found.value
        if event is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message=EventError.NOT_FOUND,
                    resource_type="Event",
                    resource_id=str(cmd.event_id),
                )
            )

        changes: dict[str, Any] = dict(cmd.changes)
        if isinstance(changes.get("title"), str):
            changes["title"] = changes["title"].strip()

        new_capacity = changes.get("max_capacity")
        if isinstance(new_capacity, int) and new_capacity > 0:
            blocked = await self._capacity_conflict(event.id, new_capacity)
            if blocked is not None:
                return blocked

        applied = event.apply_changes(changes)
        if isinstance(applied, Failure):
            return applied

        saved = await self._event_repo.save(event)
        if isinstance(saved, Failure):
            return saved
        if not saved.value:
            # Admissions on another instance filled past the new capacity
            # between the count and the write.
            counted = await self._registration_repo.count_confirmed(event.id)
            if isinstance(counted, Failure):
                return counted
            return self._below_confirmed(event.max_capacity, counted.value)
        return Success(value=event)

    async def _capacity_conflict(
        self, event_id: UUID, new_capacity: int
    ) -> Failure[DomainError] | None:
        counted = await self._registration_repo.count_confirmed(event_id)
        if isinstance(counted, Failure):
            return counted
        if new_capacity >= counted.value:
            return None
        return self._below_confirmed(new_capacity, counted.value)

    @staticmethod
    def _below_confirmed(new_capacity: int | None, confirmed: int) -> Failure[ConflictError]:
        return Failure(
            error=ConflictError(
                code=ErrorCode.EVENT_CAPACITY_BELOW_CONFIRMED,
                message=EventError.CAPACITY_BELOW_CONFIRMED,
                resource_type="Event",
                conflicting_field="max_capacity",
                details={
                    "max_capacity": str(new_capacity),
                    "confirmed_count": str(confirmed),
                },
            )
        )
