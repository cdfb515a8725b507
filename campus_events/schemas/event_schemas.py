"""Event request and response schemas.

Pydantic schemas for catalog endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- Domain/DTO-to-schema conversion methods

Field invariants (title, capacity, deadline, time range) are checked by the
domain entity so they surface as 400 problem responses; the schemas only
enforce types.
"""

import datetime as dt
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from campus_events.application.dtos import EventView
from campus_events.domain.entities import Event
from campus_events.domain.enums import EventCategory, EventStatus

# Fields that can be changed but never cleared.
_NON_NULLABLE = frozenset({"title", "date", "category", "status"})


# =============================================================================
# Request Schemas
# =============================================================================


class EventCreateRequest(BaseModel):
    """Create event request."""

    title: str = Field(..., description="Event title", examples=["Robotics Workshop"])
    date: dt.date = Field(..., description="Event date", examples=["2026-11-03"])
    category: EventCategory = Field(EventCategory.ACADEMIC, description="Catalog category")
    status: EventStatus = Field(EventStatus.UPCOMING, description="Lifecycle status")
    description: str | None = Field(None, description="Free text description")
    venue: str | None = Field(None, description="Venue", examples=["Engineering Hall 101"])
    organizer: str | None = Field(None, description="Organizer")
    contact_email: str | None = Field(None, description="Contact email")
    image_url: str | None = Field(None, description="Image URL")
    start_time: dt.time | None = Field(None, description="Start time", examples=["14:00"])
    end_time: dt.time | None = Field(None, description="End time", examples=["16:00"])
    max_capacity: int | None = Field(None, description="Seat limit (omit for unbounded)")
    registration_deadline: dt.date | None = Field(
        None, description="Last day registrations are accepted"
    )


class EventUpdateRequest(BaseModel):
    """Partial event update.

    Only fields present in the body change. An explicit ``null`` clears an
    optional field.
    """

    title: str | None = None
    date: dt.date | None = None
    category: EventCategory | None = None
    status: EventStatus | None = None
    description: str | None = None
    venue: str | None = None
    organizer: str | None = None
    contact_email: str | None = None
    image_url: str | None = None
    start_time: dt.time | None = None
    end_time: dt.time | None = None
    max_capacity: int | None = None
    registration_deadline: dt.date | None = None

    @model_validator(mode="after")
    def reject_cleared_required_fields(self) -> "EventUpdateRequest":
        """Reject ``null`` for fields every event must have."""
        for name in sorted(_NON_NULLABLE & self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Field name to new value, for the fields present in the body."""
        return {name: getattr(self, name) for name in self.model_fields_set}


# =============================================================================
# Response Schemas
# =============================================================================


class EventResponse(BaseModel):
    """Single event with registration aggregates.

    Attributes:
        registration_count: Confirmed registrations.
        is_registered: Caller holds a non-cancelled registration.
        seats_left: Remaining seats (null for unbounded events).
        is_full: Display hint only.
    """

    id: UUID
    title: str
    date: dt.date
    category: EventCategory
    status: EventStatus
    description: str | None
    venue: str | None
    organizer: str | None
    contact_email: str | None
    image_url: str | None
    start_time: dt.time | None
    end_time: dt.time | None
    max_capacity: int | None
    registration_deadline: dt.date | None
    created_at: dt.datetime
    updated_at: dt.datetime
    registration_count: int = Field(..., description="Confirmed registrations")
    is_registered: bool = Field(..., description="Caller is registered")
    seats_left: int | None = Field(None, description="Remaining seats")
    is_full: bool = Field(False, description="No seats left")

    @classmethod
    def from_view(cls, view: EventView) -> "EventResponse":
        """Convert an EventView to the response schema."""
        return cls._build(
            view.event,
            registration_count=view.registration_count,
            is_registered=view.is_registered,
            seats_left=view.seats_left,
            is_full=view.is_full,
        )

    @classmethod
    def from_new_event(cls, event: Event) -> "EventResponse":
        """Response for a just-created event (no registrations yet)."""
        return cls.from_view(EventView(event=event, registration_count=0, is_registered=False))

    @classmethod
    def _build(cls, event: Event, **aggregates: Any) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            date=event.date,
            category=event.category,
            status=event.status,
            description=event.description,
            venue=event.venue,
            organizer=event.organizer,
            contact_email=event.contact_email,
            image_url=event.image_url,
            start_time=event.start_time,
            end_time=event.end_time,
            max_capacity=event.max_capacity,
            registration_deadline=event.registration_deadline,
            created_at=event.created_at,
            updated_at=event.updated_at,
            **aggregates,
        )


class EventListResponse(BaseModel):
    """Catalog listing."""

    events: list[EventResponse] = Field(..., description="Matching events")
    total_count: int = Field(..., description="Number of events returned")

    @classmethod
    def from_views(cls, views: list[EventView]) -> "EventListResponse":
        """Convert EventViews to the response schema."""
        return cls(
            events=[EventResponse.from_view(view) for view in views],
            total_count=len(views),
        )
