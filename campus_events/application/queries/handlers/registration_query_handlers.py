"""Registration ledger query handlers."""

from campus_events.application.dtos import CatalogStats, UserRegistrations
from campus_events.application.queries.registration_queries import (
    GetCatalogStats,
    ListAllRegistrations,
    ListEventRegistrations,
    ListMyRegistrations,
)
from campus_events.application.services.access_policy import require_admin
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import DomainError, NotFoundError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Registration
from campus_events.domain.enums import EventStatus
from campus_events.domain.errors import EventError
from campus_events.domain.protocols import EventRepository, RegistrationRepository


class ListEventRegistrationsHandler:
    """Handler for ListEventRegistrations (administrators only)."""

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        limit: int,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._limit = limit

    async def handle(
        self, query: ListEventRegistrations
    ) -> Result[list[Registration], DomainError]:
        """List an event's registrations.

        Returns:
            Success(list[Registration]): Most recent first.
            Failure(AuthorizationError): Actor is not an administrator.
            Failure(NotFoundError): Event does not exist.
        """
        allowed = require_admin(query.actor, "view event registrations")
        if isinstance(allowed, Failure):
            return allowed

        found = await self._event_repo.find_by_id(query.event_id)
        if isinstance(found, Failure):
            return found
        if found.value is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message=EventError.NOT_FOUND,
                    resource_type="Event",
                    resource_id=str(query.event_id),
                )
            )

        return await self._registration_repo.list_for_event(query.event_id, self._limit)


class ListMyRegistrationsHandler:
    """Handler for ListMyRegistrations."""

    def __init__(self, registration_repo: RegistrationRepository, limit: int) -> None:
        self._registration_repo = registration_repo
        self._limit = limit

    async def handle(
        self, query: ListMyRegistrations
    ) -> Result[UserRegistrations, DomainError]:
        """List the caller's registrations with per-status totals."""
        listed = await self._registration_repo.list_for_user(
            query.actor.email, self._limit
        )
        if isinstance(listed, Failure):
            return listed
        return Success(value=UserRegistrations(registrations=listed.value))


class ListAllRegistrationsHandler:
    """Handler for ListAllRegistrations (administrators only)."""

    def __init__(self, registration_repo: RegistrationRepository, limit: int) -> None:
        self._registration_repo = registration_repo
        self._limit = limit

    async def handle(
        self, query: ListAllRegistrations
    ) -> Result[list[Registration], DomainError]:
        """List every registration, most recent first."""
        allowed = require_admin(query.actor, "view all registrations")
        if isinstance(allowed, Failure):
            return allowed
        return await self._registration_repo.list_all(self._limit)


class GetCatalogStatsHandler:
    """Handler for GetCatalogStats."""

    def __init__(
        self, event_repo: EventRepository, registration_repo: RegistrationRepository
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo

    async def handle(self, query: GetCatalogStats) -> Result[CatalogStats, DomainError]:
        """Compute dashboard counters for the caller."""
        by_status = await self._event_repo.count_by_status()
        if isinstance(by_status, Failure):
            return by_status

        mine = await self._registration_repo.count_active_for_user(query.actor.email)
        if isinstance(mine, Failure):
            return mine

        confirmed: int | None = None
        registrants: int | None = None
        if query.actor.is_admin:
            summary = await self._registration_repo.summary()
            if isinstance(summary, Failure):
                return summary
            confirmed, registrants = summary.value

        counts = by_status.value
        return Success(
            value=CatalogStats(
                total_events=sum(counts.values()),
                upcoming_events=counts.get(EventStatus.UPCOMING, 0),
                completed_events=counts.get(EventStatus.COMPLETED, 0),
                my_active_registrations=mine.value,
                confirmed_registrations=confirmed,
                distinct_registrants=registrants,
            )
        )
