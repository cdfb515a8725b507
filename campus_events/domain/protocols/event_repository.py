"""Event repository protocol.

Defines the interface for event catalog persistence.
"""

from typing import Protocol
from uuid import UUID

from campus_events.core.errors import StoreUnavailableError
from campus_events.core.result import Result
from campus_events.domain.entities import Event
from campus_events.domain.enums import EventStatus
from campus_events.domain.value_objects import EventFilter


class EventRepository(Protocol):
    """Protocol for event persistence operations.

    **Design Principles**:
    - Read methods return domain entities (Event), not database models
    - Listing never fails because nothing matched (empty list instead)
    - Connectivity and timeout failures surface as StoreUnavailableError

    **Implementation Notes**:
    - created_at never changes, updated_at reflects the last edit
    - delete refuses nothing itself; callers check for active registrations
    """

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Result[Event | None, StoreUnavailableError]:
        """Find event by ID.

        Args:
            event_id: Event identifier.
            for_update: Hold the row lock until the current transaction ends.

        Returns:
            Success(Event) if found, Success(None) otherwise.
        """
        ...

    async def find_all(
        self, event_filter: EventFilter, limit: int
    ) -> Result[list[Event], StoreUnavailableError]:
        """List events matching a filter.

        ``event_filter.limit`` takes precedence over ``limit`` when set.

        Args:
            event_filter: Search, category and status predicates plus ordering.
            limit: Default maximum number of events.

        Returns:
            Success(list[Event]): Matching events in filter order (may be empty).

        Example:
            >>> result = await repo.find_all(EventFilter(search="robot"), limit=100)
        """
        ...

    async def save(self, event: Event) -> Result[bool, StoreUnavailableError]:
        """Insert or update an event.

        Args:
            event: Event to persist.

        Returns:
            Success(True) if written. Success(False) if an update setting
            ``max_capacity`` found more confirmed registrations than the new
            capacity (nothing written).
        """
        ...

    async def delete(self, event_id: UUID) -> Result[bool, StoreUnavailableError]:
        """Delete an event together with its cancelled registrations.

        Args:
            event_id: Event identifier.

        Returns:
            Success(True) if deleted, Success(False) if it did not exist.
        """
        ...

    async def count_by_status(
        self,
    ) -> Result[dict[EventStatus, int], StoreUnavailableError]:
        """Count events per status (statuses with no events are omitted)."""
        ...
