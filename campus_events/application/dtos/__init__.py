"""Application DTOs (read models)."""

from campus_events.application.dtos.event_dtos import EventView
from campus_events.application.dtos.registration_dtos import (
    CatalogStats,
    UserRegistrations,
)

__all__ = ["CatalogStats", "EventView", "UserRegistrations"]
