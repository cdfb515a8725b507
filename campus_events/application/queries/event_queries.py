"""Event catalog queries (CQRS read operations).

Queries are side-effect free. ``viewer`` is optional: anonymous callers get
``is_registered=False`` everywhere.
"""

from dataclasses import dataclass
from uuid import UUID

from campus_events.domain.value_objects import EventFilter, UserIdentity


@dataclass(frozen=True, kw_only=True)
class ListEvents:
    """List catalog events with their registration aggregates.

    Example:
        >>> query = ListEvents(
        ...     event_filter=EventFilter.from_params(search="robot", status="upcoming"),
        ...     viewer=current_user,
        ... )
        >>> result = await handler.handle(query)
    """

    event_filter: EventFilter = EventFilter()
    viewer: UserIdentity | None = None


@dataclass(frozen=True, kw_only=True)
class GetEvent:
    """Get one event with its registration aggregates."""

    event_id: UUID
    viewer: UserIdentity | None = None
