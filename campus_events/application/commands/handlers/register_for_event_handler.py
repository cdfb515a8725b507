"""Register for event handler (admission controller).

Flow (inside the per-event exclusive section):
1. Load the event (missing event is a validation failure)
2. Read the caller's active registration and the confirmed count
3. Apply the admission rule (status, deadline, duplicate, capacity)
4. Conditionally insert the registration (the store re-checks status,
   duplicate and capacity against the locked event row at write time)

Then, outside the section:
5. Invalidate the cached aggregates for (event, user)
6. Return the new registration

A rejected admission is returned unchanged; nothing here retries.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, policies)
- NO infrastructure imports (repositories and locks are injected via protocols)
"""

from datetime import date, datetime, tzinfo

from uuid_extensions import uuid7

from campus_events.application.commands.registration_commands import RegisterForEvent
from campus_events.application.services.aggregate_view import AggregateView
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import DomainError, ValidationError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Registration
from campus_events.domain.policies import decide_admission
from campus_events.domain.protocols import (
    AdmissionLockProtocol,
    EventRepository,
    LoggerProtocol,
    RegistrationRepository,
)


class RegisterForEventHandler:
    """Handler for the RegisterForEvent command."""

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        admission_locks: AdmissionLockProtocol,
        aggregate_view: AggregateView,
        logger: LoggerProtocol,
        timezone: tzinfo,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            event_repo: Catalog repository.
            registration_repo: Ledger repository.
            admission_locks: Per-event exclusive sections.
            aggregate_view: Aggregates to invalidate after a write.
            logger: Structured logger.
            timezone: Campus timezone that defines "today" for deadlines.
        """
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._locks = admission_locks
        self._aggregate_view = aggregate_view
        self._logger = logger
        self._timezone = timezone

    async def handle(self, cmd: RegisterForEvent) -> Result[Registration, DomainError]:
        """Handle a registration attempt.

        Returns:
            Success(Registration): New confirmed registration.
            Failure(ValidationError): Event does not exist.
            Failure(EventNotOpenError | DeadlinePassedError |
                AlreadyRegisteredError | EventFullError): Admission rejected.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        log = self._logger.bind(event_id=str(cmd.event_id), user_email=cmd.actor.email)

        async with self._locks.hold(cmd.event_id):
            result = await self._admit(cmd)

        match result:
            case Success(value=registration):
                await self._aggregate_view.invalidate(
                    registration.event_id, registration.user_email
                )
                log.info("registration_admitted", registration_id=str(registration.id))
            case Failure(error=error) if error.code is ErrorCode.STORE_UNAVAILABLE:
                log.error(
                    "registration_store_unavailable",
                    error_code=error.code.value,
                    details=error.details,
                )
            case Failure(error=error):
                log.info("registration_rejected", error_code=error.code.value)

        return result

    async def _admit(self, cmd: RegisterForEvent) -> Result[Registration, DomainError]:
        found = await self._event_repo.find_by_id(cmd.event_id)
        if isinstance(found, Failure):
            return found
        event = found.value
        if event is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message="Event does not exist",
                    field="event_id",
                    details={"event_id": str(cmd.event_id)},
                )
            )

        existing = await self._registration_repo.find_active(event.id, cmd.actor.email)
        if isinstance(existing, Failure):
            return existing

        confirmed_count = 0
        if event.max_capacity is not None and existing.value is None:
            counted = await self._registration_repo.count_confirmed(event.id)
            if isinstance(counted, Failure):
                return counted
            confirmed_count = counted.value

        decision = decide_admission(
            event,
            today=self._today(),
            confirmed_count=confirmed_count,
            existing_registration_id=existing.value.id if existing.value else None,
        )
        if isinstance(decision, Failure):
            return decision

        registration = Registration(
            id=uuid7(),
            event_id=event.id,
            event_title=event.title,
            user_email=cmd.actor.email,
            user_name=cmd.actor.full_name,
        )
        return await self._registration_repo.admit(registration)

    def _today(self) -> date:
        return datetime.now(self._timezone).date()
