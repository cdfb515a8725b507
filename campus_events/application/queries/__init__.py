"""Application queries."""

from campus_events.application.queries.event_queries import GetEvent, ListEvents
from campus_events.application.queries.registration_queries import (
    GetCatalogStats,
    ListAllRegistrations,
    ListEventRegistrations,
    ListMyRegistrations,
)

__all__ = [
    "GetCatalogStats",
    "GetEvent",
    "ListAllRegistrations",
    "ListEventRegistrations",
    "ListEvents",
    "ListMyRegistrations",
]
