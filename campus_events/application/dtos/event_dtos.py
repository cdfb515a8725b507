"""Event read models."""

from dataclasses import dataclass

from campus_events.domain.entities import Event


@dataclass(frozen=True, kw_only=True)
class EventView:
    """Event plus the aggregates a display surface needs.

    Attributes:
        event: Catalog record.
        registration_count: Confirmed registrations.
        is_registered: Viewer holds a non-cancelled registration.
    """

    event: Event
    registration_count: int
    is_registered: bool

    @property
    def seats_left(self) -> int | None:
        """Remaining seats (None for unbounded events)."""
        if self.event.max_capacity is None:
            return None
        return max(self.event.max_capacity - self.registration_count, 0)

    @property
    def is_full(self) -> bool:
        """Display hint; admission decides independently."""
        return self.seats_left == 0
