"""Registration request and response schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from campus_events.application.dtos import UserRegistrations
from campus_events.domain.entities import Registration
from campus_events.domain.enums import RegistrationStatus


class RegistrationStatusChangeRequest(BaseModel):
    """Status change request.

    Only the two user-reachable target states are accepted.
    """

    status: Literal["cancelled", "attended"] = Field(
        ..., description="Target status", examples=["cancelled"]
    )

    def target(self) -> RegistrationStatus:
        """Requested status as the domain enum."""
        return RegistrationStatus(self.status)


class RegistrationResponse(BaseModel):
    """Single registration."""

    id: UUID = Field(..., description="Registration identifier")
    event_id: UUID = Field(..., description="Event identifier")
    event_title: str = Field(..., description="Event title at registration time")
    user_email: str = Field(..., description="Registrant email")
    user_name: str = Field(..., description="Registrant name at registration time")
    status: RegistrationStatus = Field(..., description="Registration status")
    registration_date: datetime = Field(..., description="When the seat was taken")
    updated_at: datetime = Field(..., description="Last status change")

    @classmethod
    def from_entity(cls, registration: Registration) -> "RegistrationResponse":
        """Convert a Registration entity to the response schema."""
        return cls(
            id=registration.id,
            event_id=registration.event_id,
            event_title=registration.event_title,
            user_email=registration.user_email,
            user_name=registration.user_name,
            status=registration.status,
            registration_date=registration.registration_date,
            updated_at=registration.updated_at,
        )


class RegistrationListResponse(BaseModel):
    """Registration listing, most recent first."""

    registrations: list[RegistrationResponse]
    total_count: int

    @classmethod
    def from_entities(cls, registrations: list[Registration]) -> "RegistrationListResponse":
        """Convert Registration entities to the response schema."""
        return cls(
            registrations=[RegistrationResponse.from_entity(r) for r in registrations],
            total_count=len(registrations),
        )


class MyRegistrationsResponse(BaseModel):
    """Caller's registrations with per-status totals."""

    registrations: list[RegistrationResponse]
    total_count: int
    active_count: int = Field(..., description="Confirmed plus attended")
    confirmed_count: int
    attended_count: int
    cancelled_count: int

    @classmethod
    def from_dto(cls, dto: UserRegistrations) -> "MyRegistrationsResponse":
        """Convert UserRegistrations to the response schema."""
        return cls(
            registrations=[RegistrationResponse.from_entity(r) for r in dto.registrations],
            total_count=len(dto.registrations),
            active_count=dto.active_count,
            confirmed_count=dto.count(RegistrationStatus.CONFIRMED),
            attended_count=dto.count(RegistrationStatus.ATTENDED),
            cancelled_count=dto.count(RegistrationStatus.CANCELLED),
        )
