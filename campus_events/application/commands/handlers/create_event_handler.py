"""Create event handler."""

from uuid_extensions import uuid7

from campus_events.application.commands.event_commands import CreateEvent
from campus_events.application.services.access_policy import require_admin
from campus_events.core.errors import DomainError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Event
from campus_events.domain.protocols import EventRepository, LoggerProtocol


class CreateEventHandler:
    """Handler for the CreateEvent command (administrators only)."""

    def __init__(self, event_repo: EventRepository, logger: LoggerProtocol) -> None:
        self._event_repo = event_repo
        self._logger = logger

    async def handle(self, cmd: CreateEvent) -> Result[Event, DomainError]:
        """Validate and persist a new event.

        Returns:
            Success(Event): Created event.
            Failure(AuthorizationError): Actor is not an administrator.
            Failure(ValidationError): Field invariant violated.
            Failure(StoreUnavailableError): Store did not respond or commit.
        """
        allowed = require_admin(cmd.actor, "create events")
        if isinstance(allowed, Failure):
            return allowed

        event = Event(
            id=uuid7(),
            title=cmd.title.strip(),
            date=cmd.date,
            category=cmd.category,
            status=cmd.status,
            description=cmd.description,
            venue=cmd.venue,
            organizer=cmd.organizer,
            contact_email=cmd.contact_email,
            image_url=cmd.image_url,
            start_time=cmd.start_time,
            end_time=cmd.end_time,
            max_capacity=cmd.max_capacity,
            registration_deadline=cmd.registration_deadline,
        )
        validated = event.validate()
        if isinstance(validated, Failure):
            return validated

        saved = await self._event_repo.save(event)
        if isinstance(saved, Failure):
            self._logger.error("event_store_unavailable", details=saved.error.details)
            return saved

        self._logger.info(
            "event_created",
            event_id=str(event.id),
            actor_email=cmd.actor.email,
            max_capacity=event.max_capacity,
        )
        return Success(value=event)
