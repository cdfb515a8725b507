"""Dashboard statistics schema."""

from pydantic import BaseModel, Field

from campus_events.application.dtos import CatalogStats


class StatsResponse(BaseModel):
    """Dashboard counters.

    Ledger-wide counters are null for non-administrators.
    """

    total_events: int
    upcoming_events: int
    completed_events: int
    my_active_registrations: int = Field(..., description="Caller's non-cancelled registrations")
    confirmed_registrations: int | None = Field(None, description="Across all events")
    distinct_registrants: int | None = Field(None, description="Distinct registrant emails")

    @classmethod
    def from_dto(cls, dto: CatalogStats) -> "StatsResponse":
        """Convert CatalogStats to the response schema."""
        return cls(
            total_events=dto.total_events,
            upcoming_events=dto.upcoming_events,
            completed_events=dto.completed_events,
            my_active_registrations=dto.my_active_registrations,
            confirmed_registrations=dto.confirmed_registrations,
            distinct_registrants=dto.distinct_registrants,
        )
