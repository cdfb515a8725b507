"""Registration read models."""

from dataclasses import dataclass

from campus_events.domain.entities import Registration
from campus_events.domain.enums import RegistrationStatus


@dataclass(frozen=True, kw_only=True)
class UserRegistrations:
    """A user's registrations with per-status totals."""

    registrations: list[Registration]

    def count(self, status: RegistrationStatus) -> int:
        """Number of listed registrations in ``status``."""
        return sum(1 for r in self.registrations if r.status == status)

    @property
    def active_count(self) -> int:
        """Registrations that still count as "registered"."""
        return sum(1 for r in self.registrations if r.is_active())


@dataclass(frozen=True, kw_only=True)
class CatalogStats:
    """Dashboard counters.

    Attributes:
        total_events: Events in the catalog.
        upcoming_events: Events with status upcoming.
        completed_events: Events with status completed.
        my_active_registrations: Caller's non-cancelled registrations.
        confirmed_registrations: Confirmed registrations across all events
            (administrators only, else None).
        distinct_registrants: Distinct emails that ever registered
            (administrators only, else None).
    """

    total_events: int
    upcoming_events: int
    completed_events: int
    my_active_registrations: int
    confirmed_registrations: int | None = None
    distinct_registrants: int | None = None
