"""SQLAlchemy repository adapters."""

from campus_events.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from campus_events.infrastructure.persistence.repositories.registration_repository import (
    RegistrationRepository,
)

__all__ = ["EventRepository", "RegistrationRepository"]
