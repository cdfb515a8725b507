"""Event catalog query handlers.

Combine catalog records with aggregates from the AggregateView.
"""

from uuid import UUID

from campus_events.application.dtos import EventView
from campus_events.application.queries.event_queries import GetEvent, ListEvents
from campus_events.application.services.aggregate_view import AggregateView
from campus_events.core.enums import ErrorCode
from campus_events.core.errors import DomainError, NotFoundError
from campus_events.core.result import Failure, Result, Success
from campus_events.domain.entities import Event
from campus_events.domain.errors import EventError
from campus_events.domain.protocols import EventRepository
from campus_events.domain.value_objects import UserIdentity


class ListEventsHandler:
    """Handler for ListEvents.

    Never fails because nothing matched; an empty list is returned instead.
    """

    def __init__(
        self,
        event_repo: EventRepository,
        aggregate_view: AggregateView,
        default_limit: int,
    ) -> None:
        """Initialize handler.

        Args:
            event_repo: Catalog repository.
            aggregate_view: Registration aggregates.
            default_limit: Listing size when the filter sets none.
        """
        self._event_repo = event_repo
        self._aggregate_view = aggregate_view
        self._default_limit = default_limit

    async def handle(self, query: ListEvents) -> Result[list[EventView], DomainError]:
        """List events matching the filter, with counts and viewer membership."""
        found = await self._event_repo.find_all(query.event_filter, self._default_limit)
        if isinstance(found, Failure):
            return found
        return await _with_aggregates(self._aggregate_view, found.value, query.viewer)


class GetEventHandler:
    """Handler for GetEvent."""

    def __init__(self, event_repo: EventRepository, aggregate_view: AggregateView) -> None:
        self._event_repo = event_repo
        self._aggregate_view = aggregate_view

    async def handle(self, query: GetEvent) -> Result[EventView, DomainError]:
        """Get one event.

        Returns:
            Success(EventView): Event with aggregates.
            Failure(NotFoundError): Event does not exist.
            Failure(StoreUnavailableError): Store did not respond.
        """
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

        views = await _with_aggregates(self._aggregate_view, [found.value], query.viewer)
        match views:
            case Success(value=[view]):
                return Success(value=view)
            case Failure(error=error):
                return Failure(error=error)
            case _:
                raise AssertionError("one event in, one view out")


async def _with_aggregates(
    aggregate_view: AggregateView,
    events: list[Event],
    viewer: UserIdentity | None,
) -> Result[list[EventView], DomainError]:
    event_ids = [event.id for event in events]

    counts = await aggregate_view.registration_counts(event_ids)
    if isinstance(counts, Failure):
        return counts

    registered: set[UUID] = set()
    if viewer is not None:
        membership = await aggregate_view.registered_event_ids(viewer.email, event_ids)
        if isinstance(membership, Failure):
            return membership
        registered = membership.value

    return Success(
        value=[
            EventView(
                event=event,
                registration_count=counts.value.get(event.id, 0),
                is_registered=event.id in registered,
            )
            for event in events
        ]
    )
